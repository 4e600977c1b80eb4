# topmark:header:start
#
#   project      : JsonScribe
#   file         : __init__.py
#   file_relpath : src/jsonscribe/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for JsonScribe settings.

Typical flow:
    1. Start from the runtime defaults (``load_defaults_dict``).
    2. Load project/user TOML files (``load_toml_dict``).
    3. Read values with the typed getters.
    4. Serialize back to TOML when needed (``to_toml``).

JsonScribe uses `tomlkit` for both parsing and rendering.
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
)
from .guards import get_table_value, is_toml_table
from .loaders import load_defaults_dict, load_toml_dict
from .render import to_toml
from .types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_string_value_or_none",
    "get_table_value",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
