# Shared pytest fixtures
from __future__ import annotations
import random
import tempfile
from collections.abc import Callable
from pathlib import Path

import pytest

from csvrows.models.identifiers import ColumnNumber, RowNumber
from csvrows.models.row import CsvRow
from csvrows.logging.init import reset_logging

# Characters that exercise quoting: delimiter, quote, line breaks, padding, non-ASCII
VALUE_ALPHABET = "abcXYZ019 ,\"\n\r\té漢"


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        yield p


@pytest.fixture()
def sample_options_yaml() -> str:
    return """encoding: utf-8
ignore_blank_lines: false
trim: both
duplicate_headers: keep_last
"""


@pytest.fixture()
def write_options(temp_workdir: Path, sample_options_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "csv.yml"
    cfg.write_text(sample_options_yaml, encoding="utf-8")
    return cfg


@pytest.fixture(autouse=True)
def _clean_logging():
    reset_logging()
    yield
    reset_logging()


def make_row(number: int, values: dict[int, str]) -> CsvRow:
    return CsvRow(
        number=RowNumber(number),
        columns={ColumnNumber(k): v for k, v in values.items()},
    )


@pytest.fixture()
def row() -> Callable[[int, dict[int, str]], CsvRow]:
    """Factory: row(1, {1: "a", 2: "b"})."""
    return make_row


@pytest.fixture()
def random_rows() -> Callable[[int], list[CsvRow]]:
    """Factory for seeded random row lists (numbered 1..n, shuffled order)."""

    def _value(rng: random.Random) -> str:
        kind = rng.random()
        if kind < 0.15:
            return ""
        if kind < 0.25:
            return " " * rng.randint(1, 3)
        return "".join(rng.choice(VALUE_ALPHABET) for _ in range(rng.randint(1, 8)))

    def _rows(seed: int) -> list[CsvRow]:
        rng = random.Random(seed)
        rows = []
        for number in range(1, rng.randint(0, 12) + 1):
            values = [_value(rng) for _ in range(rng.randint(0, 6))]
            rows.append(CsvRow.from_values(number, values))
        rng.shuffle(rows)
        return rows

    return _rows
