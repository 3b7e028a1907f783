"""csvrows: validated, queryable CSV records with lossless round-tripping.

Typical use::

    from csvrows import get_header_dictionary, read_rows

    header = get_header_dictionary(data)
    for row in read_rows(data):
        email = row.find_value_by_name("email", header)
"""

from .config import ConfigError, CsvOptions, load_options
from .frame import frame_to_rows, rows_to_frame
from .io import (
    CsvFormatError,
    OperationCancelled,
    TrimPolicy,
    get_header_dictionary,
    read_rows,
    write_rows,
    write_rows_to_stream,
)
from .logging import setup_logging
from .models import (
    ColumnName,
    ColumnNumber,
    CsvRow,
    DuplicateColumnNameError,
    DuplicateHeaderPolicy,
    EmptyNameError,
    HeaderIndex,
    InvalidNumberError,
    OutOfRangeError,
    RowNumber,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    # Models
    "RowNumber",
    "ColumnNumber",
    "ColumnName",
    "CsvRow",
    "HeaderIndex",
    "DuplicateHeaderPolicy",
    # Reading / writing
    "TrimPolicy",
    "read_rows",
    "get_header_dictionary",
    "write_rows",
    "write_rows_to_stream",
    # pandas
    "rows_to_frame",
    "frame_to_rows",
    # Configuration / logging
    "CsvOptions",
    "load_options",
    "setup_logging",
    # Errors
    "ValidationError",
    "OutOfRangeError",
    "InvalidNumberError",
    "EmptyNameError",
    "DuplicateColumnNameError",
    "CsvFormatError",
    "OperationCancelled",
    "ConfigError",
]
