"""
File conversion between fixed-width and delimited (CSV) text.

This module provides the programmatic API behind the command line tool.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path

from fixedwidth.config import LayoutConfig
from fixedwidth.logging_config import get_logger
from fixedwidth.reader import RecordReader
from fixedwidth.writer import RecordWriter

logger = get_logger("convert")


@dataclass
class ConversionResult:
    """Result of converting one file."""

    source_path: Path
    output_path: Path
    records: int
    lines: int  # Physical lines consumed (to CSV) or written (from CSV)


def fixed_to_csv(
    source: Path,
    target: Path,
    layout: LayoutConfig,
    delimiter: str = ",",
) -> ConversionResult:
    """
    Convert a fixed-width file to CSV.

    Args:
        source: Fixed-width input file
        target: CSV output file, written in the layout's encoding
        layout: Column layout of the input
        delimiter: CSV field delimiter

    Returns:
        ConversionResult with record and line counts

    Raises:
        ParseError: If a line of the input does not match the layout
    """
    with open(source, "rb") as rf:
        reader = RecordReader(rf, layout)
        records = reader.read_all()

    with open(target, "w", encoding=layout.encoding, newline="") as wf:
        writer = csv.writer(wf, delimiter=delimiter)
        writer.writerows(records)

    logger.info("Converted %d records from %s", len(records), source)
    return ConversionResult(
        source_path=source,
        output_path=target,
        records=len(records),
        lines=reader.line_number,
    )


def csv_to_fixed(
    source: Path,
    target: Path,
    layout: LayoutConfig,
    delimiter: str = ",",
) -> ConversionResult:
    """
    Convert a CSV file to fixed-width lines.

    Args:
        source: CSV input file, read in the layout's encoding
        target: Fixed-width output file
        layout: Column layout of the output
        delimiter: CSV field delimiter

    Returns:
        ConversionResult with record and line counts

    Raises:
        ParseError: If a row does not fit the layout
    """
    with open(source, "r", encoding=layout.encoding, newline="") as rf:
        rows = [row for row in csv.reader(rf, delimiter=delimiter) if row]

    with open(target, "wb") as wf, RecordWriter(wf, layout) as writer:
        writer.write_all(rows)

    logger.info("Converted %d records from %s", len(rows), source)
    return ConversionResult(
        source_path=source,
        output_path=target,
        records=len(rows),
        lines=writer.line_number,
    )
