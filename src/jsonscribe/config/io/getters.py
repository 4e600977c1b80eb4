# topmark:header:start
#
#   project      : JsonScribe
#   file         : getters.py
#   file_relpath : src/jsonscribe/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Typed value getters for TOML tables.

Each getter returns ``None`` when the key is absent, so callers can tell an
unset option from an explicit value and layer settings on top of each other.
Values of the wrong type are logged at DEBUG level and treated as absent.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from jsonscribe.config.logging import get_logger

if TYPE_CHECKING:
    from jsonscribe.config.logging import JsonScribeLogger

    from .types import TomlTable

logger: JsonScribeLogger = get_logger(__name__)


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    If the value is a ``bool``, it is returned as is. If the value is an integer,
    it is coerced via ``bool(value)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The extracted or coerced boolean value, or ``None``
            when absent or not coercible.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    logger.debug("Cannot coerce %r to bool, returning None", value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The integer value, or ``None`` when absent or not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.debug("Cannot coerce %r to int, returning None", value)
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.debug("Cannot coerce %r to string, returning None", value)
    return None
