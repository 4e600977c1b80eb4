# topmark:header:start
#
#   project      : JsonScribe
#   file         : __main__.py
#   file_relpath : src/jsonscribe/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running JsonScribe via ``python -m jsonscribe``."""

from __future__ import annotations

from jsonscribe.cli.main import cli

if __name__ == "__main__":
    cli()
