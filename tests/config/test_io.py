# topmark:header:start
#
#   project      : JsonScribe
#   file         : test_io.py
#   file_relpath : tests/config/test_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML I/O helpers in `jsonscribe.config.io`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import tomlkit

from jsonscribe.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    is_toml_table,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from jsonscribe.config.keys import Toml
from jsonscribe.constants import DEFAULT_INDENT_WIDTH

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def test_load_toml_dict_reads_tables(tmp_path: Path) -> None:
    """A valid file is parsed into plain dicts."""
    path: Path = tmp_path / "jsonscribe.toml"
    path.write_text("[writer]\npretty_print = true\nindent_width = 2\n", encoding="utf-8")

    data: dict[str, Any] = load_toml_dict(path)

    assert data == {"writer": {"pretty_print": True, "indent_width": 2}}
    assert type(data["writer"]) is dict


def test_load_toml_dict_invalid_toml_logs_and_returns_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Malformed TOML yields an empty table and an error record."""
    path: Path = tmp_path / "broken.toml"
    path.write_text("[writer\npretty_print = ", encoding="utf-8")
    caplog.set_level(logging.ERROR, logger="jsonscribe")

    assert load_toml_dict(path) == {}
    assert any("Error decoding TOML" in r.getMessage() for r in caplog.records)


def test_load_toml_dict_missing_file_logs_and_returns_empty(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """An unreadable path yields an empty table and an error record."""
    caplog.set_level(logging.ERROR, logger="jsonscribe")

    assert load_toml_dict(tmp_path / "absent.toml") == {}
    assert any("Error loading TOML" in r.getMessage() for r in caplog.records)


def test_load_defaults_dict_returns_fresh_copy() -> None:
    """Mutating the defaults table does not leak into the next call."""
    first: dict[str, Any] = load_defaults_dict()
    first[Toml.SECTION_WRITER][Toml.KEY_INDENT_WIDTH] = 99

    assert load_defaults_dict()[Toml.SECTION_WRITER][Toml.KEY_INDENT_WIDTH] == DEFAULT_INDENT_WIDTH


def test_to_toml_strips_none_and_parses_back() -> None:
    """Rendering drops `None` entries and produces valid TOML."""
    text: str = to_toml({"writer": {"pretty_print": True, "indent_string": None, "indent_width": 2}})

    assert "indent_string" not in text
    assert tomlkit.parse(text).unwrap() == {"writer": {"pretty_print": True, "indent_width": 2}}


def test_get_table_value_ignores_non_tables() -> None:
    """Missing keys and scalar values both produce an empty table."""
    table: dict[str, Any] = {"writer": {"a": 1}, "scalar": 3}

    assert get_table_value(table, "writer") == {"a": 1}
    assert get_table_value(table, "scalar") == {}
    assert get_table_value(table, "absent") == {}
    assert is_toml_table({})
    assert not is_toml_table([])


def test_typed_getters() -> None:
    """Getters return the typed value, or None when absent or mistyped."""
    table: dict[str, Any] = {"flag": True, "num": 1, "width": 3, "text": "x", "bad": [1]}

    assert get_bool_value_or_none(table, "flag") is True
    assert get_bool_value_or_none(table, "num") is True
    assert get_bool_value_or_none(table, "text") is None
    assert get_bool_value_or_none(table, "missing") is None

    assert get_int_value_or_none(table, "width") == 3
    assert get_int_value_or_none(table, "flag") is None
    assert get_int_value_or_none(table, "bad") is None

    assert get_string_value_or_none(table, "text") == "x"
    assert get_string_value_or_none(table, "num") is None
