"""fixedwidth - Fixed-width record reader and writer.

The fixed-width analogue of the csv module: lines are sliced into fields
at predetermined byte offsets instead of being split on a delimiter.

Basic Usage:
    >>> import io
    >>> from fixedwidth import LayoutConfig, LineEnding, RecordReader
    >>>
    >>> layout = LayoutConfig(
    ...     field_lengths=[7, 4],
    ...     skip_start=2,
    ...     skip_lines=1,
    ...     comment="#",
    ...     line_ending=LineEnding.LF,
    ...     trim_fields=True,
    ... )
    >>> data = b"header\\n# comment\\n  John   1245\\n"
    >>> RecordReader(io.BytesIO(data), layout).read_all()
    [['John', '1245']]
"""

__version__ = "0.1.0"

from .config import Alignment, LayoutConfig, LineEnding, create_default_config
from .convert import ConversionResult, csv_to_fixed, fixed_to_csv
from .exceptions import (
    ConfigError,
    EncodingError,
    EndOfStreamError,
    FieldCountMismatchError,
    FixedWidthError,
    IncorrectLineWidthError,
    InvalidFieldWidthError,
    MalformedLineEndingError,
    NoFieldsConfiguredError,
    ParseError,
)
from .reader import RecordReader
from .writer import RecordWriter

__all__ = [
    # Version
    "__version__",
    # Main API
    "RecordReader",
    "RecordWriter",
    "fixed_to_csv",
    "csv_to_fixed",
    "ConversionResult",
    # Configuration
    "LayoutConfig",
    "Alignment",
    "LineEnding",
    "create_default_config",
    # Exceptions
    "FixedWidthError",
    "ConfigError",
    "ParseError",
    "NoFieldsConfiguredError",
    "InvalidFieldWidthError",
    "IncorrectLineWidthError",
    "MalformedLineEndingError",
    "FieldCountMismatchError",
    "EndOfStreamError",
    "EncodingError",
]
