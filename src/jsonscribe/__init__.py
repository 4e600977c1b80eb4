# topmark:header:start
#
#   project      : JsonScribe
#   file         : __init__.py
#   file_relpath : src/jsonscribe/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonScribe package.

JsonScribe is a streaming JSON text encoder. Callers push primitive values and
container boundaries in order; the writer checks JSON grammar on every call and
writes ASCII-safe JSON text straight to a sink, optionally pretty-printed.
"""

from __future__ import annotations

from jsonscribe.config.model import MutableWriterSettings, WriterSettings
from jsonscribe.core.conditions import Condition
from jsonscribe.core.errors import (
    InvalidValueError,
    JsonScribeError,
    SettingsError,
    StructuralViolationError,
)
from jsonscribe.core.escape import escape_string, quote_string
from jsonscribe.writer import JsonScalar, JsonWriter, TextSink, scalar_token

__all__: list[str] = [
    "Condition",
    "InvalidValueError",
    "JsonScalar",
    "JsonScribeError",
    "JsonWriter",
    "MutableWriterSettings",
    "SettingsError",
    "StructuralViolationError",
    "TextSink",
    "WriterSettings",
    "escape_string",
    "quote_string",
    "scalar_token",
]
