"""
Command-Line Interface for fixedwidth.

Converts between fixed-width files and CSV using a JSON layout file.

Usage:
    fixedwidth to-csv --layout layout.json --input data.txt --output data.csv
    fixedwidth from-csv --layout layout.json --input data.csv --output data.txt
    fixedwidth to-csv -l layout.json -i data.txt -o data.csv --delimiter ";" -v
    fixedwidth from-csv -l layout.json -i data.csv -o data.txt --log-file run.log
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from fixedwidth import __version__
from fixedwidth.config import LayoutConfig
from fixedwidth.convert import csv_to_fixed, fixed_to_csv
from fixedwidth.exceptions import FixedWidthError
from fixedwidth.logging_config import get_logger, setup_logging

logger = get_logger("cli")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fixedwidth",
        description="Convert between fixed-width text files and CSV.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    # Options shared by every command
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-l", "--layout",
        type=Path,
        required=True,
        help="Column layout file (JSON)",
        metavar="FILE",
    )
    common.add_argument(
        "-i", "--input",
        type=Path,
        required=True,
        help="Input file",
        metavar="FILE",
    )
    common.add_argument(
        "-o", "--output",
        type=Path,
        required=True,
        help="Output file",
        metavar="FILE",
    )
    common.add_argument(
        "--delimiter",
        default=",",
        help="CSV field delimiter (default: ,)",
    )
    common.add_argument(
        "--encoding",
        help="Override the layout encoding",
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    common.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress normal output",
    )
    common.add_argument(
        "--log-file",
        type=Path,
        help="Also write log records to this file",
        metavar="FILE",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser(
        "to-csv",
        parents=[common],
        help="Convert a fixed-width file to CSV",
    )
    commands.add_parser(
        "from-csv",
        parents=[common],
        help="Convert a CSV file to fixed-width lines",
    )

    return parser


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = create_parser()
    return parser.parse_args(args)


def load_layout(args: argparse.Namespace) -> LayoutConfig:
    """Load the layout file and apply command-line overrides."""
    layout = LayoutConfig.load_from_file(args.layout)
    if args.encoding:
        layout.encoding = args.encoding
    return layout


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code
    """
    parsed = parse_args(args)

    if parsed.verbose:
        level = "DEBUG"
    elif parsed.quiet:
        level = "ERROR"
    else:
        level = "INFO"
    setup_logging(level=level, log_file=parsed.log_file, verbose=parsed.verbose)

    try:
        layout = load_layout(parsed)
    except (OSError, FixedWidthError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.debug("Layout: %s", layout.to_dict())
    errors = layout.validate()
    if len(parsed.delimiter) != 1:
        errors.append(f"Delimiter must be a single character: {parsed.delimiter!r}")
    if errors:
        for error in errors:
            print(f"Layout error: {error}", file=sys.stderr)
        return 1

    convert = fixed_to_csv if parsed.command == "to-csv" else csv_to_fixed
    try:
        result = convert(parsed.input, parsed.output, layout, parsed.delimiter)
    except (OSError, ValueError, FixedWidthError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not parsed.quiet:
        print(f"Converted {result.records} records: {result.source_path} -> {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
