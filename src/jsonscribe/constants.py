# topmark:header:start
#
#   project      : JsonScribe
#   file         : constants.py
#   file_relpath : src/jsonscribe/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonScribe Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

JSONSCRIBE_VERSION: str = get_version("jsonscribe")

# Config file names looked up by `MutableWriterSettings.from_toml_file`
DEFAULT_TOML_CONFIG_NAME: str = "jsonscribe.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Writer defaults
DEFAULT_PRETTY_PRINT: bool = False
DEFAULT_INDENT_WIDTH: int = 4
DEFAULT_INDENT_STRING: str = " "
DEFAULT_VALIDATE: bool = True
