from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType

from .identifiers import ColumnName, ColumnNumber, DuplicateColumnNameError

"""Header index: column name -> column number, derived from one record.

Blank header cells are skipped but still occupy their position, so in
``["id", "", "name"]`` the name "name" maps to column 3, not 2.
"""

__all__ = [
    "DuplicateHeaderPolicy",
    "HeaderIndex",
]

logger = logging.getLogger(__name__)


class DuplicateHeaderPolicy(Enum):
    """What to do when two header cells name the same column (case-insensitive).

    - KEEP_FIRST: the leftmost column wins (default)
    - KEEP_LAST: the rightmost column wins
    - RAISE: fail with DuplicateColumnNameError
    """
    KEEP_FIRST = "keep_first"
    KEEP_LAST = "keep_last"
    RAISE = "raise"


class HeaderIndex(Mapping[ColumnName, ColumnNumber]):
    """Read-only mapping from ColumnName to ColumnNumber."""

    __slots__ = ("_columns",)

    def __init__(self, columns: Mapping[ColumnName, ColumnNumber] | None = None) -> None:
        self._columns: Mapping[ColumnName, ColumnNumber] = MappingProxyType(dict(columns or {}))

    @classmethod
    def from_values(
        cls,
        values: Iterable[str],
        on_duplicate: DuplicateHeaderPolicy = DuplicateHeaderPolicy.KEEP_FIRST,
    ) -> HeaderIndex:
        """Derive the index from a header record's values in column order."""
        columns: dict[ColumnName, ColumnNumber] = {}
        for index, value in enumerate(values):
            number = ColumnNumber.from_index(index)
            name = ColumnName.try_parse(value)
            if name is None:
                logger.debug("header cell %s is blank; skipped", number)
                continue
            existing = columns.get(name)
            if existing is not None:
                if on_duplicate is DuplicateHeaderPolicy.RAISE:
                    raise DuplicateColumnNameError(
                        f"column name {value!r} appears in columns {existing} and {number}"
                    )
                logger.warning(
                    "duplicate column name %r in columns %s and %s (%s)",
                    value, existing, number, on_duplicate.value,
                )
                if on_duplicate is DuplicateHeaderPolicy.KEEP_FIRST:
                    continue
                # keep the latest spelling of the name as well as its position
                del columns[name]
            columns[name] = number
        return cls(columns)

    def find(self, name: ColumnName | str) -> ColumnNumber | None:
        if not isinstance(name, ColumnName):
            name = ColumnName.try_parse(name)
            if name is None:
                return None
        return self._columns.get(name)

    def names(self) -> list[ColumnName]:
        """Column names ordered by their column number."""
        return sorted(self._columns, key=self._columns.__getitem__)

    def __getitem__(self, name: ColumnName) -> ColumnNumber:
        return self._columns[name]

    def __iter__(self) -> Iterator[ColumnName]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{name.value!r}: {number}" for name, number in self._columns.items())
        return f"HeaderIndex({{{pairs}}})"
