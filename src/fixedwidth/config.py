"""
Configuration - Column layout shared by the record reader and writer.

This module handles:
- Alignment and line ending enumerations
- The LayoutConfig dataclass and its derived line width
- JSON layout file support
- Layout validation
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from fixedwidth.exceptions import (
    ConfigError,
    FieldCountMismatchError,
    InvalidFieldWidthError,
    NoFieldsConfiguredError,
)


class Alignment(Enum):
    """Side of the value within its column; padding goes on the other side."""

    LEFT = "left"
    RIGHT = "right"


class LineEnding(Enum):
    """How the end of a line is found (reading) or emitted (writing)."""

    NONE = "none"  # Lines are exactly line_width bytes, no delimiter
    CR = "cr"
    LF = "lf"
    CRLF = "crlf"

    @property
    def terminator(self) -> bytes:
        """Bytes emitted after each line."""
        if self is LineEnding.CR:
            return b"\r"
        if self is LineEnding.LF:
            return b"\n"
        if self is LineEnding.CRLF:
            return b"\r\n"
        return b""


@dataclass
class LayoutConfig:
    """
    Fixed-width column layout.

    Attributes:
        field_lengths: Byte width of each column, in column order
        field_align: Alignment of each column (all left when None)
        skip_start: Bytes before the first column of every line
        skip_end: Bytes after the last column of every line
        skip_lines: Lines discarded before the first record (reading only)
        line_ending: Line delimiter mode
        comment: Single character that marks a comment line
        trim_fields: Strip spaces and tabs on read, truncate overflow on write
        encoding: Encoding between field strings and column bytes
    """

    field_lengths: list[int] = field(default_factory=list)
    field_align: Optional[list[Alignment]] = None
    skip_start: int = 0
    skip_end: int = 0
    skip_lines: int = 0
    line_ending: LineEnding = LineEnding.CRLF
    comment: Optional[str] = None
    trim_fields: bool = False
    encoding: str = "latin-1"

    def alignments(self) -> list[Alignment]:
        """
        Return one alignment per column.

        Raises:
            FieldCountMismatchError: If field_align and field_lengths differ in length
        """
        if self.field_align is None:
            return [Alignment.LEFT] * len(self.field_lengths)
        if len(self.field_align) != len(self.field_lengths):
            raise FieldCountMismatchError(
                f"expected {len(self.field_lengths)} alignments, "
                f"got {len(self.field_align)}"
            )
        return list(self.field_align)

    def line_width(self) -> int:
        """
        Compute the byte width of a data line.

        Negative skip counts count as zero.

        Raises:
            NoFieldsConfiguredError: If no columns are defined
            InvalidFieldWidthError: If a column width is not positive
        """
        if not self.field_lengths:
            raise NoFieldsConfiguredError()
        width = max(self.skip_start, 0) + max(self.skip_end, 0)
        for index, length in enumerate(self.field_lengths, 1):
            if length <= 0:
                raise InvalidFieldWidthError(
                    f"field {index} has width {length}", column=index
                )
            width += length
        return width

    def comment_bytes(self) -> Optional[bytes]:
        """Return the encoded comment marker, or None when comments are off."""
        if not self.comment:
            return None
        if len(self.comment) != 1:
            raise ConfigError(
                f"Comment marker must be a single character: {self.comment!r}"
            )
        try:
            return self.comment.encode(self.encoding)
        except UnicodeError as e:
            raise ConfigError(f"Comment marker cannot be encoded: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert layout to dictionary."""
        data = {}
        for key, value in asdict(self).items():
            if isinstance(value, Enum):
                data[key] = value.value
            elif isinstance(value, list) and value and isinstance(value[0], Enum):
                data[key] = [v.value for v in value]
            else:
                data[key] = value
        return data

    def save_to_file(self, path: Path) -> None:
        """Save layout to JSON file."""
        path.write_text(json.dumps(self.to_dict(), indent=2))

    @classmethod
    def load_from_file(cls, path: Path) -> LayoutConfig:
        """Load layout from JSON file."""
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid layout file {path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Layout file {path} must hold a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LayoutConfig:
        """Create layout from dictionary."""
        data = dict(data)
        try:
            if "line_ending" in data and isinstance(data["line_ending"], str):
                data["line_ending"] = LineEnding(data["line_ending"].lower())
            if data.get("field_align") is not None:
                data["field_align"] = [
                    Alignment(a.lower()) if isinstance(a, str) else a
                    for a in data["field_align"]
                ]
        except ValueError as e:
            raise ConfigError(str(e)) from e

        if "field_lengths" in data:
            try:
                data["field_lengths"] = [int(n) for n in data["field_lengths"]]
            except (TypeError, ValueError) as e:
                raise ConfigError(f"Invalid field_lengths: {e}") from e

        # Filter only known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)

    def validate(self) -> list[str]:
        """
        Validate layout.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        try:
            self.line_width()
        except (NoFieldsConfiguredError, InvalidFieldWidthError) as e:
            errors.append(e.message)

        try:
            self.alignments()
        except FieldCountMismatchError as e:
            errors.append(e.message)

        try:
            self.comment_bytes()
        except ConfigError as e:
            errors.append(str(e))
        except LookupError:
            errors.append(f"Unknown encoding: {self.encoding}")

        if self.skip_lines < 0:
            errors.append(f"skip_lines must not be negative: {self.skip_lines}")

        return errors

    def is_valid(self) -> bool:
        """Check if layout is valid."""
        return len(self.validate()) == 0


def create_default_config() -> LayoutConfig:
    """Create a layout with default values (no columns)."""
    return LayoutConfig()
