from __future__ import annotations

import csv
import io
import logging
import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any, BinaryIO, Union

from ..models.header import DuplicateHeaderPolicy, HeaderIndex
from ..models.identifiers import RowNumber
from ..models.row import CsvRow
from .cancellation import check_cancelled

"""CSV reader: bytes -> lazy CsvRow sequence, and header extraction.

Records are tokenized by the standard ``csv`` module in strict mode, so an
unterminated quote or stray text after a closing quote is reported as
CsvFormatError instead of being guessed at.

Row numbers come from the tokenizer's physical line counter at the end of each
record. Skipped blank lines therefore still count, and a record spanning
several lines (quoted line breaks) takes the number of its last line.

Importing this module raises the process-wide ``csv.field_size_limit`` to
FIELD_SIZE_LIMIT. The stdlib default (128 KiB) would reject fields that
``write_rows`` produces without complaint.
"""

__all__ = [
    "CsvFormatError",
    "FIELD_SIZE_LIMIT",
    "TrimPolicy",
    "read_rows",
    "get_header_dictionary",
]

logger = logging.getLogger(__name__)

# Largest value accepted on every platform (C long is 32-bit on Windows)
FIELD_SIZE_LIMIT = 2**31 - 1

if csv.field_size_limit() < FIELD_SIZE_LIMIT:
    csv.field_size_limit(FIELD_SIZE_LIMIT)

CsvSource = Union[bytes, bytearray, memoryview, BinaryIO]


class CsvFormatError(Exception):
    """Raised when the input is not well-formed CSV or cannot be decoded."""


class TrimPolicy(Enum):
    """Whitespace trimming applied to every field before it is stored."""
    NONE = "none"
    BOTH = "both"
    LEADING = "leading"
    TRAILING = "trailing"

    def apply(self, value: str) -> str:
        if self is TrimPolicy.BOTH:
            return value.strip()
        if self is TrimPolicy.LEADING:
            return value.lstrip()
        if self is TrimPolicy.TRAILING:
            return value.rstrip()
        return value


@contextmanager
def _open_text(data: CsvSource, encoding: str) -> Iterator[io.TextIOWrapper]:
    """Yield a text view of ``data``; a caller-owned stream is left open."""
    owned = isinstance(data, (bytes, bytearray, memoryview))
    stream: BinaryIO = io.BytesIO(data) if owned else data  # type: ignore[arg-type]
    text = io.TextIOWrapper(stream, encoding=encoding, newline="")
    try:
        yield text
    finally:
        if owned:
            text.close()
        else:
            text.detach()


def _records(reader: Any) -> Iterator[list[str]]:
    try:
        yield from reader
    except csv.Error as e:
        raise CsvFormatError(f"malformed CSV near line {reader.line_num}: {e}") from e
    except UnicodeDecodeError as e:
        raise CsvFormatError(f"undecodable input near line {reader.line_num + 1}: {e}") from e


def read_rows(
    data: CsvSource,
    *,
    ignore_blank_lines: bool = True,
    trim: TrimPolicy = TrimPolicy.NONE,
    encoding: str = "utf-8",
    cancel: threading.Event | None = None,
) -> Iterator[CsvRow]:
    """Lazily read CSV ``data`` into CsvRow values, one per record.

    No header is assumed; the first record is row data like any other (use
    ``get_header_dictionary`` for header extraction). Short records yield rows
    with fewer columns. The iterator is single-pass: reading again requires a
    new call with the data positioned at its start.

    Args:
        data: CSV bytes or a readable binary stream
        ignore_blank_lines: skip records whose fields are all empty/whitespace
        trim: trimming applied to each field
        encoding: text encoding of ``data``
        cancel: event checked before each record

    Raises:
        CsvFormatError: malformed or undecodable input
        OperationCancelled: ``cancel`` was set
    """
    with _open_text(data, encoding) as text:
        reader = csv.reader(text, strict=True)
        produced = 0
        records = _records(reader)
        while True:
            check_cancelled(cancel, "read", produced)
            values = next(records, None)
            if values is None:
                break
            values = [trim.apply(value) for value in values]
            if ignore_blank_lines and all(not value.strip() for value in values):
                logger.debug("line %d is blank; skipped", reader.line_num)
                continue
            yield CsvRow.from_values(RowNumber(reader.line_num), values)
            produced += 1


def get_header_dictionary(
    source: CsvSource | Iterable[str],
    *,
    on_duplicate: DuplicateHeaderPolicy = DuplicateHeaderPolicy.KEEP_FIRST,
    encoding: str = "utf-8",
) -> HeaderIndex:
    """Build a HeaderIndex from the first record of ``source``.

    ``source`` is either CSV bytes / a binary stream, or the already-parsed
    values of a header record (any iterable of str). Empty input gives an
    empty index.

    Raises:
        CsvFormatError: the first record is malformed
        DuplicateColumnNameError: duplicate names with ``DuplicateHeaderPolicy.RAISE``
        TypeError: ``source`` is a str (encode CSV text first)
    """
    if isinstance(source, str):
        raise TypeError("pass CSV bytes or a sequence of header values, not str")
    if isinstance(source, (bytes, bytearray, memoryview)) or hasattr(source, "read"):
        values = _first_record(source, encoding)  # type: ignore[arg-type]
        if values is None:
            logger.debug("no header record found")
            return HeaderIndex()
    else:
        values = list(source)
    return HeaderIndex.from_values(values, on_duplicate=on_duplicate)


def _first_record(data: CsvSource, encoding: str) -> list[str] | None:
    with _open_text(data, encoding) as text:
        for values in _records(csv.reader(text, strict=True)):
            # an empty line is not a record
            if values:
                return values
    return None
