from __future__ import annotations

import codecs
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from ..io.reader import TrimPolicy
from ..models.header import DuplicateHeaderPolicy

"""Option file loader.

Responsibilities:
- Load a YAML option file (e.g. config/csv.yml)
- Validate it against options_schema.json (unknown keys are rejected)
- Apply defaults for keys that are not set
"""

__all__ = [
    "ConfigError",
    "CsvOptions",
    "load_options",
]

SCHEMA_PATH = Path(__file__).parent / "options_schema.json"


class ConfigError(Exception):
    pass


@dataclass(frozen=True)
class CsvOptions:
    """Reader/writer settings loaded from an option file."""
    encoding: str = "utf-8"
    ignore_blank_lines: bool = True
    trim: TrimPolicy = TrimPolicy.NONE
    duplicate_headers: DuplicateHeaderPolicy = DuplicateHeaderPolicy.KEEP_FIRST

    def reader_kwargs(self) -> dict[str, Any]:
        return {
            "ignore_blank_lines": self.ignore_blank_lines,
            "trim": self.trim,
            "encoding": self.encoding,
        }

    def writer_kwargs(self) -> dict[str, Any]:
        return {"encoding": self.encoding}

    def header_kwargs(self) -> dict[str, Any]:
        return {"on_duplicate": self.duplicate_headers, "encoding": self.encoding}


def _validate_options_schema(data: dict[str, Any]) -> None:
    """Validate option data against the bundled JSON schema.

    Raises:
        ConfigError: the schema file is missing or unreadable, or the data
            does not satisfy it (unknown keys, wrong types, unknown enum values)
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"options schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_options(path: Path) -> CsvOptions:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config validation failed: expected a mapping, got {type(data).__name__}")

    _validate_options_schema(data)

    encoding = data.get("encoding", "utf-8")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise ConfigError(f"unknown encoding: {encoding}") from e

    return CsvOptions(
        encoding=encoding,
        ignore_blank_lines=data.get("ignore_blank_lines", True),
        trim=TrimPolicy(data.get("trim", "none")),
        duplicate_headers=DuplicateHeaderPolicy(data.get("duplicate_headers", "keep_first")),
    )
