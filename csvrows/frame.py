from __future__ import annotations

from collections.abc import Iterable, Mapping

import pandas as pd

from .models.identifiers import ColumnName, ColumnNumber, RowNumber
from .models.row import CsvRow

"""pandas interop for CsvRow sequences.

Values stay raw text in an object-dtype frame; nothing is parsed into numbers
or dates. Cells a short row does not have are left as None so that
``frame_to_rows`` can tell an empty string from an absent column.

When columns are labelled by header name, the label -> column number map is
kept in ``df.attrs[COLUMN_NUMBERS_ATTR]`` so the positions survive the trip
back through ``frame_to_rows``.
"""

__all__ = [
    "COLUMN_NUMBERS_ATTR",
    "rows_to_frame",
    "frame_to_rows",
]

COLUMN_NUMBERS_ATTR = "csvrows.column_numbers"


def rows_to_frame(
    rows: Iterable[CsvRow],
    header: Mapping[ColumnName, ColumnNumber] | None = None,
) -> pd.DataFrame:
    """Build a DataFrame indexed by row number.

    Columns are labelled with their column number, or with the header name
    where ``header`` has one for that position.
    """
    ordered = sorted(rows, key=lambda row: row.number)
    numbers = sorted({column for row in ordered for column in row.columns})
    names = {number: name.value for name, number in (header or {}).items()}
    labels = [names.get(number, int(number)) for number in numbers]
    df = pd.DataFrame(
        [[row.columns.get(number) for number in numbers] for row in ordered],
        index=pd.Index([int(row.number) for row in ordered], name="row"),
        columns=labels,
        dtype=object,
    )
    df.attrs[COLUMN_NUMBERS_ATTR] = {label: int(number) for label, number in zip(labels, numbers)}
    return df


def frame_to_rows(df: pd.DataFrame, *, use_index: bool = True) -> list[CsvRow]:
    """Convert each DataFrame row into a CsvRow.

    Column numbers come from ``df.attrs[COLUMN_NUMBERS_ATTR]`` when it covers
    every label (frames built by rows_to_frame). Otherwise integer labels are
    taken as column numbers, and if any label is not an integer, columns are
    numbered by position. Missing cells (None/NaN) are left out of the row and
    other non-text values are rendered with str().

    Raises:
        ValidationError: ``use_index`` and an index value is not a valid row number
        TypeError: ``use_index`` and an index value is neither int nor str
    """
    labels = list(df.columns)
    known = df.attrs.get(COLUMN_NUMBERS_ATTR) or {}
    if labels and all(label in known for label in labels):
        numbers = [ColumnNumber.parse(known[label]) for label in labels]
    elif labels and all(pd.api.types.is_integer(label) for label in labels):
        numbers = [ColumnNumber.parse(int(label)) for label in labels]
    else:
        numbers = [ColumnNumber.from_index(i) for i in range(len(labels))]

    rows: list[CsvRow] = []
    for position, (label, raw) in enumerate(df.iterrows(), start=1):
        if use_index:
            number = RowNumber.parse(int(label) if pd.api.types.is_integer(label) else label)
        else:
            number = RowNumber(position)
        columns: dict[ColumnNumber, str] = {}
        for column, value in zip(numbers, raw.tolist(), strict=True):
            if isinstance(value, str):
                columns[column] = value
            elif value is None or (pd.api.types.is_scalar(value) and pd.isna(value)):
                continue
            else:
                columns[column] = str(value)
        rows.append(CsvRow(number=number, columns=columns))
    return rows
