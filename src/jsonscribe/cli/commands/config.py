# topmark:header:start
#
#   project      : JsonScribe
#   file         : config.py
#   file_relpath : src/jsonscribe/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonScribe `config` command group.

``jsonscribe config dump`` prints the effective writer settings (defaults,
discovered config files, ``--config`` files and flags merged) as TOML.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonscribe.cli.options import resolve_writer_settings, writer_options
from jsonscribe.config.io import to_toml

if TYPE_CHECKING:
    from pathlib import Path

    from jsonscribe.config.model import WriterSettings


@click.group(name="config", help="Inspect JsonScribe writer settings.")
def config_group() -> None:
    """Group for settings-related subcommands."""


@config_group.command(name="dump", help="Print the effective writer settings as TOML.")
@writer_options
def dump_config_command(
    *,
    config_files: tuple[Path, ...],
    pretty_print: bool | None,
    indent_width: int | None,
    indent_string: str | None,
    validate: bool | None,
) -> None:
    """Print the merged writer settings.

    Args:
        config_files (tuple[Path, ...]): Extra TOML config files.
        pretty_print (bool | None): Pretty-print override.
        indent_width (int | None): Indent width override.
        indent_string (str | None): Indent string override.
        validate (bool | None): Validation override.
    """
    settings: WriterSettings = resolve_writer_settings(
        config_files=config_files,
        pretty_print=pretty_print,
        indent_width=indent_width,
        indent_string=indent_string,
        validate=validate,
    )
    click.echo(to_toml(settings.to_toml_dict()), nl=False)
