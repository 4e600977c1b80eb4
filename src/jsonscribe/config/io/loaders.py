# topmark:header:start
#
#   project      : JsonScribe
#   file         : loaders.py
#   file_relpath : src/jsonscribe/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsonscribe.config.keys import Toml
from jsonscribe.config.logging import get_logger
from jsonscribe.constants import (
    DEFAULT_INDENT_STRING,
    DEFAULT_INDENT_WIDTH,
    DEFAULT_PRETTY_PRINT,
    DEFAULT_VALIDATE,
)

if TYPE_CHECKING:
    from pathlib import Path

    from jsonscribe.config.logging import JsonScribeLogger

    from .types import TomlTable

logger: JsonScribeLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return the runtime defaults as a TOML-table-compatible dict.

    Returns:
        TomlTable: A new dict holding the ``[writer]`` defaults.
    """
    return {
        Toml.SECTION_WRITER: {
            Toml.KEY_PRETTY_PRINT: DEFAULT_PRETTY_PRINT,
            Toml.KEY_INDENT_WIDTH: DEFAULT_INDENT_WIDTH,
            Toml.KEY_INDENT_STRING: DEFAULT_INDENT_STRING,
            Toml.KEY_VALIDATE: DEFAULT_VALIDATE,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``jsonscribe.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
