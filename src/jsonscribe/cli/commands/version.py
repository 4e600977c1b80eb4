# topmark:header:start
#
#   project      : JsonScribe
#   file         : version.py
#   file_relpath : src/jsonscribe/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonScribe `version` command."""

from __future__ import annotations

import click

from jsonscribe.constants import JSONSCRIBE_VERSION


@click.command(
    name="version",
    help="Show the current version of JsonScribe.",
)
def version_command() -> None:
    """Print the JsonScribe version as installed in the current Python environment."""
    click.echo(JSONSCRIBE_VERSION)
