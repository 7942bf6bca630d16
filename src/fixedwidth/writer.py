"""
Record Writer - Encodes records as fixed-width lines.

This module handles:
- Padding each field to its column width on the aligned side
- Truncating or rejecting values wider than their column
- Skip regions and line endings around every line
- Comment lines
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import BinaryIO

from fixedwidth.config import Alignment, LayoutConfig
from fixedwidth.exceptions import (
    EncodingError,
    FieldCountMismatchError,
    InvalidFieldWidthError,
    ParseError,
)
from fixedwidth.logging_config import get_logger

PAD = b" "

logger = get_logger("writer")


class RecordWriter:
    """
    Writes records to a binary stream according to a column layout.

    Each line is assembled in full before it is written, so a record that
    fails to encode leaves the stream untouched.

    Usage:
        with RecordWriter(stream, layout) as writer:
            writer.write(["us", "United States", "English"])
    """

    def __init__(self, stream: BinaryIO, layout: LayoutConfig | None = None) -> None:
        """
        Initialize the writer.

        Args:
            stream: Writable binary stream
            layout: Column layout (empty default layout if not provided)
        """
        self._stream = stream
        self.layout = layout or LayoutConfig()
        self._line = 0

    @property
    def line_number(self) -> int:
        """Number of lines written so far."""
        return self._line

    def write(self, record: Sequence[str]) -> None:
        """
        Write one record as a line.

        Raises:
            NoFieldsConfiguredError: If the layout has no columns
            FieldCountMismatchError: If the record has the wrong number of fields
            InvalidFieldWidthError: If a value overflows its column and
                trim_fields is off
            EncodingError: If a value cannot be encoded
        """
        line = self._line + 1
        layout = self.layout
        try:
            layout.line_width()
            alignments = layout.alignments()
        except ParseError as e:
            raise e.at(line, e.column)

        if len(record) != len(layout.field_lengths):
            raise FieldCountMismatchError(
                f"expected {len(layout.field_lengths)} fields, got {len(record)}",
                line,
            )

        out = bytearray(PAD * max(layout.skip_start, 0))
        for column, (value, length, align) in enumerate(
            zip(record, layout.field_lengths, alignments), 1
        ):
            buf = self._encode(value, line, column)
            if len(buf) > length:
                if not layout.trim_fields:
                    raise InvalidFieldWidthError(
                        f"value of {len(buf)} bytes exceeds width {length}",
                        line,
                        column,
                    )
                buf = self._truncate(buf, length)
            if align is Alignment.RIGHT:
                out += PAD * (length - len(buf)) + buf
            else:
                out += buf + PAD * (length - len(buf))
        out += PAD * max(layout.skip_end, 0)
        out += layout.line_ending.terminator

        self._stream.write(bytes(out))
        self._line = line

    def write_all(self, records: Iterable[Sequence[str]]) -> None:
        """Write every record, stopping at the first failure, then flush."""
        count = 0
        for record in records:
            self.write(record)
            count += 1
        self.flush()
        logger.debug("Wrote %d records", count)

    def write_comment(self, text: str) -> None:
        """
        Write a comment line padded or cut to the layout width.

        Does nothing when the layout has no comment marker.
        """
        layout = self.layout
        marker = layout.comment_bytes()
        if marker is None:
            return
        line = self._line + 1
        try:
            width = layout.line_width()
        except ParseError as e:
            raise e.at(line, e.column)

        body = self._encode(text, line)
        room = width - 1
        if len(body) > room:
            body = self._truncate(body, room)
        body += PAD * (room - len(body))

        self._stream.write(marker + body + layout.line_ending.terminator)
        self._line = line

    def _encode(self, text: str, line: int, column: int = 0) -> bytes:
        try:
            return text.encode(self.layout.encoding)
        except UnicodeError as e:
            raise EncodingError(str(e), line, column) from e

    def _truncate(self, buf: bytes, length: int) -> bytes:
        """Cut buf to at most length bytes without splitting a character."""
        encoding = self.layout.encoding
        return buf[:length].decode(encoding, errors="ignore").encode(encoding)

    def flush(self) -> None:
        """Flush the underlying stream. Safe to call repeatedly."""
        flush = getattr(self._stream, "flush", None)
        if flush is not None:
            flush()

    def __enter__(self) -> RecordWriter:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.flush()
        return False
