# topmark:header:start
#
#   project      : JsonScribe
#   file         : main.py
#   file_relpath : src/jsonscribe/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the ``jsonscribe`` command.

Group-level options configure logging once; subcommands stay thin and share
the writer-settings options from `jsonscribe.cli.options`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonscribe.cli.commands.config import config_group
from jsonscribe.cli.commands.quote import quote_command
from jsonscribe.cli.commands.version import version_command
from jsonscribe.cli.options import resolve_verbosity
from jsonscribe.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from jsonscribe.config.logging import JsonScribeLogger

logger: JsonScribeLogger = get_logger(__name__)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="JsonScribe CLI",
)
@click.option(
    "-v",
    "--verbose",
    "verbose",
    count=True,
    help="Increase log verbosity (-v INFO, -vv DEBUG, -vvv TRACE).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """Entry point for the JsonScribe CLI."""
    ctx.ensure_object(dict)
    level: int | None = resolve_verbosity(verbose)
    if level is None:
        level = resolve_env_log_level()
    ctx.obj["log_level"] = level
    setup_logging(level=level)
    logger.debug("Log level set to %s", level)


cli.add_command(version_command)

cli.add_command(quote_command)

cli.add_command(config_group)

if __name__ == "__main__":
    cli()
