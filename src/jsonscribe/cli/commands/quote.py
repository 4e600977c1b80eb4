# topmark:header:start
#
#   project      : JsonScribe
#   file         : quote.py
#   file_relpath : src/jsonscribe/cli/commands/quote.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonScribe `quote` command.

Writes its arguments (or the lines read from STDIN) as a JSON array of strings,
streamed straight to STDOUT through a `JsonWriter`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonscribe.cli.errors import JsonScribeCliError, JsonScribeUsageError
from jsonscribe.cli.options import resolve_writer_settings, writer_options
from jsonscribe.core.errors import JsonScribeError
from jsonscribe.writer import JsonWriter

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from jsonscribe.config.model import WriterSettings


@click.command(
    name="quote",
    help="Write TEXTS (or STDIN lines with --stdin) as a JSON array of strings.",
)
@click.argument("texts", nargs=-1)
@click.option(
    "--stdin",
    "from_stdin",
    is_flag=True,
    default=False,
    help="Read one string per line from STDIN.",
)
@writer_options
def quote_command(
    *,
    texts: tuple[str, ...],
    from_stdin: bool,
    config_files: tuple[Path, ...],
    pretty_print: bool | None,
    indent_width: int | None,
    indent_string: str | None,
    validate: bool | None,
) -> None:
    """Write strings as an ASCII-safe JSON array.

    Args:
        texts (tuple[str, ...]): Strings given on the command line.
        from_stdin (bool): Read strings from STDIN instead (one per line).
        config_files (tuple[Path, ...]): Extra TOML config files.
        pretty_print (bool | None): Pretty-print override.
        indent_width (int | None): Indent width override.
        indent_string (str | None): Indent string override.
        validate (bool | None): Validation override.
    """
    if texts and from_stdin:
        raise JsonScribeUsageError("Pass strings as arguments or use --stdin, not both.")

    settings: WriterSettings = resolve_writer_settings(
        config_files=config_files,
        pretty_print=pretty_print,
        indent_width=indent_width,
        indent_string=indent_string,
        validate=validate,
    )

    items: Iterable[str] = texts
    if from_stdin:
        items = (line.rstrip("\r\n") for line in click.get_text_stream("stdin"))

    out = click.get_text_stream("stdout")
    writer = JsonWriter(out, settings=settings)
    try:
        with writer.array():
            for item in items:
                writer.write_string(item)
    except JsonScribeError as exc:
        raise JsonScribeCliError(str(exc)) from exc
    out.write("\n")
