from __future__ import annotations

import threading

"""Cooperative cancellation for reads and writes.

Callers pass a ``threading.Event``; reader and writer check it before each
record and raise OperationCancelled once it is set.
"""

__all__ = [
    "OperationCancelled",
    "check_cancelled",
]


class OperationCancelled(Exception):
    """Raised when a read or write stops because its cancel event was set."""


def check_cancelled(cancel: threading.Event | None, operation: str, records_done: int) -> None:
    if cancel is not None and cancel.is_set():
        raise OperationCancelled(f"{operation} cancelled after {records_done} record(s)")
