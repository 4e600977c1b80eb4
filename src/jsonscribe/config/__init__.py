# topmark:header:start
#
#   project      : JsonScribe
#   file         : __init__.py
#   file_relpath : src/jsonscribe/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for JsonScribe writers.

Exposes the immutable `WriterSettings` snapshot, its mutable builder
`MutableWriterSettings` (TOML loading and layered merging), and the logging
helpers.
"""

from __future__ import annotations

from jsonscribe.config.logging import JsonScribeLogger, get_logger, setup_logging
from jsonscribe.config.model import MutableWriterSettings, WriterSettings

__all__: list[str] = [
    "JsonScribeLogger",
    "MutableWriterSettings",
    "WriterSettings",
    "get_logger",
    "setup_logging",
]
