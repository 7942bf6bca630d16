"""
Exception classes for fixedwidth.

This module defines all custom exceptions raised by the record reader and
writer, organized in a hierarchy for easy handling.
"""

from __future__ import annotations

from typing import List, Optional


class FixedWidthError(Exception):
    """Base exception for all fixedwidth errors."""

    pass


class ConfigError(FixedWidthError):
    """Configuration error.

    Raised when a layout cannot be built or loaded, such as a malformed
    layout file or an invalid comment marker.
    """

    pass


class ParseError(FixedWidthError):
    """Error positioned on a line and column of the stream.

    Attributes:
        line: 1-based line number (0 before any line was consumed)
        column: 1-based field index (0 when not tied to a field)
        message: Description of the error
        records: Records parsed successfully before the failure
    """

    default_message = "record error"

    def __init__(
        self,
        message: Optional[str] = None,
        line: int = 0,
        column: int = 0,
    ):
        self.message = message or self.default_message
        self.line = line
        self.column = column
        self.records: List[List[str]] = []
        super().__init__(self.message)

    def at(self, line: int, column: int = 0) -> "ParseError":
        """Stamp a position onto the error and return it."""
        self.line = line
        self.column = column
        return self

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}: {self.message}"


class NoFieldsConfiguredError(ParseError):
    """The layout defines no columns."""

    default_message = "no fields defined"


class InvalidFieldWidthError(ParseError):
    """A column width is not positive, or a value overflows its column."""

    default_message = "fields width incorrect"


class IncorrectLineWidthError(ParseError):
    """A raw line does not match the layout width.

    Also raised when a line holds stray CR or LF bytes.
    """

    default_message = "incorrect line width"


class MalformedLineEndingError(ParseError):
    """A CR was not followed by LF in CRLF mode."""

    default_message = "CRLF not found at end of line"


class FieldCountMismatchError(ParseError):
    """Wrong number of fields in a record or alignments in a layout."""

    default_message = "wrong number of fields in line"


class EndOfStreamError(ParseError, EOFError):
    """The underlying stream has no more bytes."""

    default_message = "end of stream"


class EncodingError(ParseError):
    """A field cannot be converted between text and the layout encoding."""

    default_message = "field cannot be encoded"
