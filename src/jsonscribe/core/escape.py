# topmark:header:start
#
#   project      : JsonScribe
#   file         : escape.py
#   file_relpath : src/jsonscribe/core/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""ASCII-safe JSON string escaping.

Rules:
    - ``\n``, ``\r``, ``\t``, ``\f``, ``\b``, backslash and double quote use their
      two-character escapes.
    - Printable ASCII (code points 32..126) is copied verbatim.
    - Everything else becomes ``\uXXXX`` with four uppercase hex digits, one
      escape per UTF-16 code unit. Characters above U+FFFF are therefore written
      as a surrogate pair.

The output of `quote_string` only ever contains printable ASCII.
"""

from __future__ import annotations

import re
from typing import Final

from jsonscribe.core.errors import InvalidValueError

_SHORT_ESCAPES: Final[dict[str, str]] = {
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
    "\b": "\\b",
    '"': '\\"',
    "\\": "\\\\",
}

# Anything that is not printable ASCII, plus the quote and the backslash.
_NEEDS_ESCAPE: Final[re.Pattern[str]] = re.compile(r"[^\x20\x21\x23-\x5b\x5d-\x7e]")

NULL_LITERAL: Final[str] = "null"


def _unicode_escape(code: int) -> str:
    if code > 0xFFFF:
        code -= 0x10000
        high: int = 0xD800 + (code >> 10)
        low: int = 0xDC00 + (code & 0x3FF)
        return f"\\u{high:04X}\\u{low:04X}"
    return f"\\u{code:04X}"


def _replace(match: re.Match[str]) -> str:
    ch: str = match.group()
    short: str | None = _SHORT_ESCAPES.get(ch)
    if short is not None:
        return short
    return _unicode_escape(ord(ch))


def escape_string(value: str) -> str:
    """Escape ``value`` for use between JSON double quotes.

    Args:
        value (str): The text to escape.

    Returns:
        str: The escaped text, without surrounding quotes.
    """
    return _NEEDS_ESCAPE.sub(_replace, value)


def quote_string(value: str | None) -> str:
    """Render ``value`` as a JSON string token.

    Args:
        value (str | None): The text to render. ``None`` renders as the bare ``null`` literal.

    Returns:
        str: The double-quoted, escaped token (or ``null``).

    Raises:
        InvalidValueError: If ``value`` is neither a string nor None.
    """
    if value is None:
        return NULL_LITERAL
    if not isinstance(value, str):
        raise InvalidValueError(f"JSON string must be a str, got {type(value).__name__}")
    return f'"{escape_string(value)}"'


def utf16_length(value: str) -> int:
    """Return the length of ``value`` in UTF-16 code units.

    Characters above U+FFFF count twice, matching the width of their escaped
    surrogate pair.
    """
    return len(value.encode("utf-16-le", "surrogatepass")) // 2
