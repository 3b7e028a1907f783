from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import ClassVar, TypeVar

"""Validated identifiers for CSV records.

RowNumber and ColumnNumber are 1-based positions (the first row / column is 1).
ColumnName wraps a non-blank header cell and compares case-insensitively, so a
header lookup for "Email" also finds "EMAIL" or "email".

Every identifier validates in its constructor. ``parse`` accepts raw external
input (int or text) and raises a ValidationError subclass, ``try_parse`` returns
None instead of raising.
"""

__all__ = [
    "ValidationError",
    "OutOfRangeError",
    "InvalidNumberError",
    "EmptyNameError",
    "DuplicateColumnNameError",
    "RowNumber",
    "ColumnNumber",
    "ColumnName",
]


class ValidationError(ValueError):
    """Base class for identifier validation failures."""


class OutOfRangeError(ValidationError):
    """Raised when a row or column number is not >= 1."""


class InvalidNumberError(ValidationError):
    """Raised when text cannot be read as a row or column number."""


class EmptyNameError(ValidationError):
    """Raised when a column name is empty or whitespace-only."""


class DuplicateColumnNameError(ValidationError):
    """Raised when a header record names the same column twice."""


_N = TypeVar("_N", bound="_PositiveNumber")


@dataclass(frozen=True, order=True)
class _PositiveNumber:
    value: int

    _label: ClassVar[str] = "Number"

    def __post_init__(self) -> None:
        # bool is an int subclass; True would silently become column 1
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{self._label} must be an int, got {type(self.value).__name__}")
        if self.value <= 0:
            raise OutOfRangeError(f"{self._label} must be greater than 0 (got {self.value})")

    @classmethod
    def parse(cls: type[_N], raw: int | str) -> _N:
        if isinstance(raw, str):
            try:
                raw = int(raw.strip())
            except ValueError as e:
                raise InvalidNumberError(f"{cls._label} is not an integer: {raw!r}") from e
        return cls(raw)

    @classmethod
    def try_parse(cls: type[_N], raw: int | str) -> _N | None:
        try:
            return cls.parse(raw)
        except (ValidationError, TypeError):
            return None

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class RowNumber(_PositiveNumber):
    """Row number in a CSV stream. The first row is 1."""

    _label = "Row number"


class ColumnNumber(_PositiveNumber):
    """Column number in a CSV record. The first column is 1."""

    _label = "Column number"

    @classmethod
    def from_index(cls, index: int) -> ColumnNumber:
        """Column number for a 0-based position, e.g. from ``enumerate``.

        Only for indexes produced locally; external input goes through ``parse``.
        """
        return cls(index + 1)


@total_ordering
@dataclass(frozen=True, eq=False)
class ColumnName:
    """Header cell text, compared and hashed case-insensitively.

    The original text is kept as-is (no trimming) so it can be written back
    unchanged; only blank text is rejected.
    """
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Column name must be a str, got {type(self.value).__name__}")
        if not self.value.strip():
            raise EmptyNameError("Column name must not be empty")

    @classmethod
    def parse(cls, raw: str) -> ColumnName:
        return cls(raw)

    @classmethod
    def try_parse(cls, raw: str) -> ColumnName | None:
        try:
            return cls(raw)
        except (ValidationError, TypeError):
            return None

    @property
    def key(self) -> str:
        """Canonical form used for equality, ordering and hashing."""
        return self.value.casefold()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColumnName):
            return NotImplemented
        return self.key == other.key

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ColumnName):
            return NotImplemented
        return self.key < other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def __str__(self) -> str:
        return self.value
