"""Domain models for CSV records.

Identifiers (row number, column number, column name), the CsvRow record and
the HeaderIndex derived from a header record.
"""

from .header import DuplicateHeaderPolicy, HeaderIndex
from .identifiers import (
    ColumnName,
    ColumnNumber,
    DuplicateColumnNameError,
    EmptyNameError,
    InvalidNumberError,
    OutOfRangeError,
    RowNumber,
    ValidationError,
)
from .row import CsvRow

__all__ = [
    # Identifiers
    "RowNumber",
    "ColumnNumber",
    "ColumnName",
    # Errors
    "ValidationError",
    "OutOfRangeError",
    "InvalidNumberError",
    "EmptyNameError",
    "DuplicateColumnNameError",
    # Records
    "CsvRow",
    "HeaderIndex",
    "DuplicateHeaderPolicy",
]
