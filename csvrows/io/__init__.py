"""Reading and writing CsvRow sequences as CSV bytes."""

from .cancellation import OperationCancelled
from .reader import CsvFormatError, TrimPolicy, get_header_dictionary, read_rows
from .writer import write_rows, write_rows_to_stream

__all__ = [
    "CsvFormatError",
    "OperationCancelled",
    "TrimPolicy",
    "get_header_dictionary",
    "read_rows",
    "write_rows",
    "write_rows_to_stream",
]
