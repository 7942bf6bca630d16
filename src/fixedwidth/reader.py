"""
Record Reader - Decodes fixed-width lines from a byte stream.

Each line is located using the layout's line ending mode, checked against
the layout width, then sliced into fields column by column. Comment lines
and a number of leading header lines are skipped.

Usage:
    reader = RecordReader(stream, LayoutConfig(field_lengths=[7, 4]))
    for record in reader:
        ...
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO

from fixedwidth.config import LayoutConfig, LineEnding
from fixedwidth.exceptions import (
    EncodingError,
    EndOfStreamError,
    IncorrectLineWidthError,
    MalformedLineEndingError,
    ParseError,
)
from fixedwidth.logging_config import get_logger

CR = b"\r"
LF = b"\n"

# Bytes requested from the stream per fill of the line buffer
CHUNK_SIZE = 8192

# Characters removed from both ends of a field when trimming
TRIM_CHARS = " \t"

logger = get_logger("reader")


class RecordReader:
    """
    Reads records from a binary stream according to a column layout.

    The layout may be changed between calls; the line width is derived
    again for every record.

    Attributes:
        layout: The column layout in effect for the next record
    """

    def __init__(self, stream: BinaryIO, layout: LayoutConfig | None = None) -> None:
        """
        Initialize the reader.

        Args:
            stream: Readable binary stream
            layout: Column layout (empty default layout if not provided)
        """
        self._stream = stream
        self.layout = layout or LayoutConfig()
        self._line = 0
        self._initial_skip_done = False
        self._buffer = bytearray()

    @property
    def line_number(self) -> int:
        """Number of physical lines consumed so far."""
        return self._line

    def read(self) -> list[str]:
        """
        Read the next record.

        Returns:
            Field values in column order

        Raises:
            EndOfStreamError: If the stream is exhausted
            ParseError: If the line does not match the layout
        """
        self._skip_initial_lines()
        return self._parse_record()

    def read_rows(self, count: int) -> list[list[str]]:
        """
        Read a given number of records.

        On failure the raised error's ``records`` attribute holds the
        records read before it.
        """
        self._skip_initial_lines()
        result: list[list[str]] = []
        for _ in range(count):
            try:
                result.append(self._parse_record())
            except ParseError as e:
                e.records = result
                raise
        return result

    def read_all(self) -> list[list[str]]:
        """
        Read records until the end of the stream.

        Reaching the end of the stream is not an error; any other failure
        is raised with the records read so far attached.
        """
        self._skip_initial_lines()
        result: list[list[str]] = []
        while True:
            try:
                result.append(self._parse_record())
            except EndOfStreamError:
                logger.debug("Read %d records", len(result))
                return result
            except ParseError as e:
                e.records = result
                raise

    def __iter__(self) -> Iterator[list[str]]:
        """Iterate over records until the end of the stream."""
        self._skip_initial_lines()
        while True:
            try:
                record = self._parse_record()
            except EndOfStreamError:
                return
            yield record

    def _skip_initial_lines(self) -> None:
        """Discard skip_lines lines, only before the first record."""
        if self._initial_skip_done:
            return
        width = self._line_width()
        for _ in range(self.layout.skip_lines):
            self._read_line(width)
            logger.debug("Skipped header line %d", self._line)
        self._initial_skip_done = True

    def _line_width(self) -> int:
        try:
            return self.layout.line_width()
        except ParseError as e:
            raise e.at(self._line, e.column)

    def _parse_record(self) -> list[str]:
        layout = self.layout
        width = self._line_width()
        comment = layout.comment_bytes()

        raw = self._read_line(width)
        while comment is not None and raw.startswith(comment):
            logger.debug("Skipped comment line %d", self._line)
            raw = self._read_line(width)

        if len(raw) != width:
            raise IncorrectLineWidthError(
                f"expected {width} bytes, got {len(raw)}", self._line
            )
        if CR in raw or LF in raw:
            raise IncorrectLineWidthError(
                "line contains a CR or LF byte", self._line
            )

        fields = []
        pos = max(layout.skip_start, 0)
        for column, length in enumerate(layout.field_lengths, 1):
            try:
                value = raw[pos:pos + length].decode(layout.encoding)
            except UnicodeDecodeError as e:
                raise EncodingError(str(e), self._line, column) from e
            if layout.trim_fields:
                value = value.strip(TRIM_CHARS)
            fields.append(value)
            pos += length
        return fields

    def _read_line(self, width: int) -> bytes:
        """
        Read one raw line without its terminator.

        Args:
            width: Expected line width, used when there is no delimiter

        Returns:
            The line bytes

        Raises:
            EndOfStreamError: If no bytes remain
            MalformedLineEndingError: If CR is not followed by LF in CRLF mode
        """
        mode = self.layout.line_ending
        if mode is LineEnding.NONE:
            data = self._read_exact(width)
        elif mode is LineEnding.CR:
            data = self._read_until(CR)
        elif mode is LineEnding.LF:
            data = self._read_until(LF)
        elif mode is LineEnding.CRLF:
            data = self._read_until(CR)
            if data.endswith(CR):
                if self._read_exact(1) != LF:
                    self._line += 1
                    raise MalformedLineEndingError(line=self._line)
        else:
            raise ValueError(f"Unknown line ending: {mode!r}")

        if not data:
            raise EndOfStreamError(line=self._line)
        self._line += 1

        if mode is not LineEnding.NONE:
            terminator = CR if mode is LineEnding.CRLF else mode.terminator
            if data.endswith(terminator):
                data = data[:-1]
        return data

    def _fill(self) -> bool:
        """Append the next chunk of the stream to the buffer."""
        chunk = self._stream.read(CHUNK_SIZE)
        if not chunk:
            return False
        self._buffer += chunk
        return True

    def _take(self, size: int) -> bytes:
        data = bytes(self._buffer[:size])
        del self._buffer[:size]
        return data

    def _read_exact(self, size: int) -> bytes:
        """Read size bytes, or fewer only at the end of the stream."""
        while len(self._buffer) < size and self._fill():
            pass
        return self._take(size)

    def _read_until(self, delimiter: bytes) -> bytes:
        """Read up to and including delimiter, or to the end of the stream."""
        start = 0
        while True:
            index = self._buffer.find(delimiter, start)
            if index >= 0:
                return self._take(index + 1)
            start = len(self._buffer)
            if not self._fill():
                return self._take(start)
