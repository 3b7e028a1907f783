from __future__ import annotations
import pytest
from pathlib import Path
from csvrows.config.loader import ConfigError, CsvOptions, load_options
from csvrows.io.reader import TrimPolicy
from csvrows.models.header import DuplicateHeaderPolicy


def test_load_options_success(write_options: Path):
    opts = load_options(write_options)
    assert opts.encoding == "utf-8"
    assert opts.ignore_blank_lines is False
    assert opts.trim is TrimPolicy.BOTH
    assert opts.duplicate_headers is DuplicateHeaderPolicy.KEEP_LAST


def test_load_options_defaults(temp_workdir: Path):
    cfg = temp_workdir / "config" / "empty.yml"
    cfg.write_text("", encoding="utf-8")
    assert load_options(cfg) == CsvOptions()


def test_load_options_missing_file(temp_workdir: Path):
    missing = temp_workdir / "config" / "not_exists.yml"
    with pytest.raises(ConfigError) as e:
        load_options(missing)
    assert "config file not found" in str(e.value)


def test_load_options_invalid_yaml(write_options: Path):
    write_options.write_text("trim: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_options(write_options)
    assert "invalid yaml" in str(e.value)


def test_load_options_not_a_mapping(write_options: Path):
    write_options.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_options(write_options)
    assert "config validation failed" in str(e.value)


def test_load_options_extra_field(write_options: Path):
    text = write_options.read_text(encoding="utf-8") + "delimiter: ';'\n"
    write_options.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_options(write_options)
    assert "config validation failed" in str(e.value)


def test_load_options_unknown_trim(write_options: Path):
    text = write_options.read_text(encoding="utf-8").replace("trim: both", "trim: middle")
    write_options.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_options(write_options)
    assert "config validation failed" in str(e.value)


def test_load_options_wrong_type(write_options: Path):
    text = write_options.read_text(encoding="utf-8").replace(
        "ignore_blank_lines: false", "ignore_blank_lines: sometimes"
    )
    write_options.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError):
        load_options(write_options)


def test_load_options_unknown_encoding(write_options: Path):
    text = write_options.read_text(encoding="utf-8").replace("encoding: utf-8", "encoding: no-such-codec")
    write_options.write_text(text, encoding="utf-8")
    with pytest.raises(ConfigError) as e:
        load_options(write_options)
    assert "unknown encoding" in str(e.value)


def test_options_kwargs_feed_library_calls(write_options: Path):
    from csvrows.io.reader import get_header_dictionary, read_rows
    from csvrows.io.writer import write_rows
    from csvrows.models.row import CsvRow

    opts = load_options(write_options)
    data = write_rows([CsvRow.from_values(1, [" x ", "a", "A"]), CsvRow.from_values(2, ["", ""])], **opts.writer_kwargs())

    rows = list(read_rows(data, **opts.reader_kwargs()))
    assert len(rows) == 2  # blank row kept
    assert rows[0].ordered_values() == ["x", "a", "A"]

    header = get_header_dictionary(data, **opts.header_kwargs())
    assert header.find("a").value == 3  # keep_last
