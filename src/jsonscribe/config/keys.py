# topmark:header:start
#
#   project      : JsonScribe
#   file         : keys.py
#   file_relpath : src/jsonscribe/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML section and key names for writer settings.

Keep this module behavior-free so it can be imported from anywhere without
causing cycles.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """Section and key names used in ``jsonscribe.toml`` / ``[tool.jsonscribe]``."""

    SECTION_TOOL: Final[str] = "tool"
    SECTION_JSONSCRIBE: Final[str] = "jsonscribe"

    SECTION_WRITER: Final[str] = "writer"
    KEY_PRETTY_PRINT: Final[str] = "pretty_print"
    KEY_INDENT_WIDTH: Final[str] = "indent_width"
    KEY_INDENT_STRING: Final[str] = "indent_string"
    KEY_VALIDATE: Final[str] = "validate"
