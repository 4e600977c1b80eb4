# topmark:header:start
#
#   project      : JsonScribe
#   file         : errors.py
#   file_relpath : src/jsonscribe/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by JsonScribe.

Usage:
    Catch `JsonScribeError` to handle every failure raised by the library, or one
    of the subclasses to react to a specific kind:

    - `StructuralViolationError`: the call breaks JSON grammar at the current
      position (e.g. closing an object inside an array).
    - `InvalidValueError`: the value has no JSON text form (NaN, infinity,
      unsupported Python type).
    - `SettingsError`: writer settings are out of range.

All errors are raised before anything is written to the sink, so the writer is
left exactly as it was before the failed call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonscribe.core.conditions import Condition


class JsonScribeError(Exception):
    """Base class for all JsonScribe errors."""


class StructuralViolationError(JsonScribeError):
    """A call is impossible under JSON grammar at the current position.

    Attributes:
        reason (str): Human-readable description of the violation.
        condition (Condition | None): The grammar condition that failed, or ``None``
            when the document root has already been completed.
    """

    def __init__(self, reason: str, condition: Condition | None = None) -> None:
        super().__init__(reason)
        self.reason: str = reason
        self.condition: Condition | None = condition


class InvalidValueError(JsonScribeError, ValueError):
    """A value cannot be represented as JSON text."""


class SettingsError(JsonScribeError, ValueError):
    """Writer settings are invalid."""
