from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from .identifiers import ColumnName, ColumnNumber, RowNumber

"""CsvRow model.

A CsvRow is one record of a CSV stream: its row number plus the raw text of
each column keyed by 1-based ColumnNumber. Values are never coerced.

Rows are immutable. The column mapping is wrapped in a read-only proxy at
construction, so ``renumber`` can hand the same mapping to the new row.
"""

__all__ = [
    "CsvRow",
]


@dataclass(frozen=True)
class CsvRow:
    """One CSV record (row number + column number -> raw text)."""
    number: RowNumber
    columns: Mapping[ColumnNumber, str]

    def __post_init__(self) -> None:
        if not isinstance(self.number, RowNumber):
            raise TypeError(f"number must be a RowNumber, got {type(self.number).__name__}")
        if isinstance(self.columns, MappingProxyType):
            columns = self.columns
        else:
            columns = MappingProxyType(dict(self.columns))
        for key in columns:
            if not isinstance(key, ColumnNumber):
                raise TypeError(f"column keys must be ColumnNumber, got {type(key).__name__}")
        object.__setattr__(self, "columns", columns)

    @classmethod
    def from_values(cls, number: RowNumber | int, values: Iterable[str]) -> CsvRow:
        """Build a row from ordered field values; the first value is column 1."""
        if not isinstance(number, RowNumber):
            number = RowNumber.parse(number)
        columns = {ColumnNumber.from_index(i): value for i, value in enumerate(values)}
        return cls(number=number, columns=columns)

    def find_value(self, column: ColumnNumber | int) -> str | None:
        """Return the value stored for ``column`` or None.

        A plain int that is not a valid column number (0, negative) cannot
        match anything and yields None rather than an error.
        """
        if not isinstance(column, ColumnNumber):
            column = ColumnNumber.try_parse(column)
            if column is None:
                return None
        return self.columns.get(column)

    def find_value_by_name(
        self,
        name: ColumnName | str,
        header: Mapping[ColumnName, ColumnNumber],
    ) -> str | None:
        """Look ``name`` up in ``header`` and return that column's value.

        The header mapping is usually a HeaderIndex taken from the first row of
        the same data; pairing compatible header and row is up to the caller.
        """
        if not isinstance(name, ColumnName):
            name = ColumnName.try_parse(name)
            if name is None:
                return None
        column = header.get(name)
        if column is None:
            return None
        return self.find_value(column)

    def renumber(self, number: RowNumber) -> CsvRow:
        return replace(self, number=number)

    def ordered_values(self) -> list[str]:
        """Values in ascending column order (gaps are not padded)."""
        return [self.columns[key] for key in sorted(self.columns)]

    def is_blank(self) -> bool:
        """True when every value is empty or whitespace (or there are none)."""
        return all(not value.strip() for value in self.columns.values())
