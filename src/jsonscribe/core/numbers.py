# topmark:header:start
#
#   project      : JsonScribe
#   file         : numbers.py
#   file_relpath : src/jsonscribe/core/numbers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locale-independent text forms for JSON scalars.

Python's ``str``/``repr`` for numbers never depend on the process locale, so no
number-format state is needed: every function here is pure.

Floats:
    The shortest round-trip ``repr`` is used. A ``.0`` suffix is appended when
    the text would otherwise read as an integer literal, so ``2.0`` stays
    ``2.0``. Non-finite values have no JSON form and are rejected.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Final

from jsonscribe.core.errors import InvalidValueError

TRUE_LITERAL: Final[str] = "true"
FALSE_LITERAL: Final[str] = "false"


def format_bool(value: bool) -> str:
    """Return ``true`` or ``false``."""
    return TRUE_LITERAL if value else FALSE_LITERAL


def format_int(value: int) -> str:
    """Return the decimal text of an integer of any size."""
    return int.__repr__(int(value))


def format_float(value: float) -> str:
    """Return the JSON text of a finite float, always with fractional form.

    Args:
        value (float): The number to render.

    Returns:
        str: Round-trippable decimal text containing a ``.`` or an exponent.

    Raises:
        InvalidValueError: If ``value`` is NaN or infinite.
    """
    value = float(value)
    if not math.isfinite(value):
        raise InvalidValueError(f"Non-finite float has no JSON representation: {value!r}")
    text: str = float.__repr__(value)
    if "." not in text and "e" not in text and "E" not in text:
        text += ".0"
    return text


def format_decimal(value: Decimal) -> str:
    """Return the JSON text of a finite decimal.

    Args:
        value (Decimal): The number to render.

    Returns:
        str: The decimal's canonical string form (exponent notation kept as is).

    Raises:
        InvalidValueError: If ``value`` is NaN or infinite.
    """
    if not value.is_finite():
        raise InvalidValueError(f"Non-finite decimal has no JSON representation: {value!r}")
    return str(value)
