# topmark:header:start
#
#   project      : JsonScribe
#   file         : test_numbers.py
#   file_relpath : tests/core/test_numbers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for scalar text forms."""

from __future__ import annotations

import json
import math
from decimal import Decimal

import pytest

from jsonscribe.core.errors import InvalidValueError
from jsonscribe.core.numbers import format_bool, format_decimal, format_float, format_int
from tests.conftest import parametrize


def test_format_bool() -> None:
    """Booleans render as lowercase literals."""
    assert format_bool(True) == "true"
    assert format_bool(False) == "false"


@parametrize(
    "value, expected",
    [
        (0, "0"),
        (-1, "-1"),
        (2**63 - 1, "9223372036854775807"),
        (-(2**63), "-9223372036854775808"),
        (2**64 - 1, "18446744073709551615"),
        (10**30, "1" + "0" * 30),
    ],
)
def test_format_int_covers_64_bit_and_beyond(value: int, expected: str) -> None:
    """Integers of any size render as plain decimal digits."""
    assert format_int(value) == expected


@parametrize(
    "value, expected",
    [
        (2.0, "2.0"),
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (0.1, "0.1"),
        (-3.25, "-3.25"),
        (1e20, "1e+20"),
        (1.5e-07, "1.5e-07"),
        (123456789012345.0, "123456789012345.0"),
    ],
)
def test_format_float_is_never_integer_looking(value: float, expected: str) -> None:
    """Floats keep a decimal point or an exponent marker."""
    text: str = format_float(value)
    assert text == expected
    assert "." in text or "e" in text
    assert json.loads(text) == value


def test_format_float_round_trips() -> None:
    """The shortest repr parses back to the identical float."""
    value: float = 1 / 3
    assert float(format_float(value)) == value


@parametrize("value", [math.nan, math.inf, -math.inf])
def test_format_float_rejects_non_finite(value: float) -> None:
    """NaN and infinities have no JSON representation."""
    with pytest.raises(InvalidValueError):
        format_float(value)


@parametrize(
    "value, expected",
    [
        (Decimal("1.10"), "1.10"),
        (Decimal("-42"), "-42"),
        (Decimal("1E+3"), "1E+3"),
        (Decimal("0.000001"), "0.000001"),
    ],
)
def test_format_decimal_keeps_precision(value: Decimal, expected: str) -> None:
    """Decimals render with their exact canonical text."""
    assert format_decimal(value) == expected


@parametrize("value", [Decimal("NaN"), Decimal("Infinity"), Decimal("-Infinity")])
def test_format_decimal_rejects_non_finite(value: Decimal) -> None:
    """Non-finite decimals are rejected."""
    with pytest.raises(InvalidValueError):
        format_decimal(value)
