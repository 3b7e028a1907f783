from __future__ import annotations

import contextlib
import csv
import io
import logging
import threading
from collections.abc import Iterable
from typing import BinaryIO

from ..models.row import CsvRow
from .cancellation import check_cancelled

"""CSV writer: CsvRow sequence -> bytes.

Rows are written in ascending row number regardless of input order, and each
row's columns in ascending column number. Quoting and escaping are left to the
standard ``csv`` module (comma delimiter, minimal quoting, CRLF line endings).
"""

__all__ = [
    "write_rows",
    "write_rows_to_stream",
]

logger = logging.getLogger(__name__)


def write_rows(
    rows: Iterable[CsvRow],
    *,
    encoding: str = "utf-8",
    cancel: threading.Event | None = None,
) -> bytes:
    """Serialize ``rows`` and return the encoded CSV bytes."""
    with io.BytesIO() as buffer:
        write_rows_to_stream(rows, buffer, leave_open=True, encoding=encoding, cancel=cancel)
        return buffer.getvalue()


def write_rows_to_stream(
    rows: Iterable[CsvRow],
    stream: BinaryIO,
    *,
    leave_open: bool = True,
    encoding: str = "utf-8",
    cancel: threading.Event | None = None,
) -> None:
    """Serialize ``rows`` into a writable binary stream.

    The input is drained and sorted before anything is written. The text layer
    is flushed on every exit path; with ``leave_open`` the caller's stream
    stays open afterwards, otherwise it is closed.

    Raises:
        OperationCancelled: ``cancel`` was set between two records. Rows
            written before that point are already flushed.
        OSError: the underlying stream failed; the write is incomplete.
    """
    ordered = sorted(rows, key=lambda row: row.number)
    text = io.TextIOWrapper(stream, encoding=encoding, newline="")
    written = 0
    try:
        writer = csv.writer(text)
        for row in ordered:
            check_cancelled(cancel, "write", written)
            writer.writerow(row.ordered_values())
            written += 1
    finally:
        _release(text, leave_open)
    logger.debug("wrote %d row(s)", written)


def _release(text: io.TextIOWrapper, leave_open: bool) -> None:
    """Flush ``text``, then detach it (``leave_open``) or close it.

    A failed flush drops the pending bytes, so the wrapper is still released
    before the first error is re-raised.
    """
    try:
        text.flush()
    except OSError:
        with contextlib.suppress(OSError, ValueError):
            _detach_or_close(text, leave_open)
        raise
    _detach_or_close(text, leave_open)


def _detach_or_close(text: io.TextIOWrapper, leave_open: bool) -> None:
    if leave_open:
        text.detach()
    else:
        text.close()
