# topmark:header:start
#
#   project      : JsonScribe
#   file         : options.py
#   file_relpath : src/jsonscribe/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI options and their resolution into writer settings.

Precedence (lowest to highest): runtime defaults, ``pyproject.toml`` and
``jsonscribe.toml`` in the working directory, ``--config`` files (in order),
then explicit flags.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ParamSpec, TypeVar

import click

from jsonscribe.cli.errors import JsonScribeConfigError, JsonScribeUsageError
from jsonscribe.config.logging import TRACE_LEVEL, get_logger
from jsonscribe.config.model import MutableWriterSettings
from jsonscribe.core.errors import SettingsError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from jsonscribe.config.logging import JsonScribeLogger
    from jsonscribe.config.model import WriterSettings

P = ParamSpec("P")
R = TypeVar("R")

logger: JsonScribeLogger = get_logger(__name__)


def resolve_verbosity(verbose_count: int) -> int | None:
    """Map the number of ``-v`` flags to a logging level.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.

    Returns:
        int | None: INFO, DEBUG or TRACE for 1, 2 or 3+ flags; None when no flag was
            given (the environment decides).
    """
    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    return None


def writer_options(func: Callable[P, R]) -> Callable[P, R]:
    """Add the writer settings options to a command."""
    func = click.option(
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        multiple=True,
        help="Extra TOML config file (repeatable; later files win).",
    )(func)
    func = click.option(
        "--validate/--no-validate",
        "validate",
        default=None,
        help="Check JSON grammar on every call.",
    )(func)
    func = click.option(
        "--indent-string",
        "indent_string",
        type=str,
        default=None,
        help="Text repeated to build indentation.",
    )(func)
    func = click.option(
        "--indent-width",
        "indent_width",
        type=int,
        default=None,
        help="Indent string repetitions per nesting level.",
    )(func)
    func = click.option(
        "--pretty/--compact",
        "pretty_print",
        default=None,
        help="Pretty-print the output.",
    )(func)
    return func


def resolve_writer_settings(
    *,
    config_files: Sequence[Path],
    pretty_print: bool | None,
    indent_width: int | None,
    indent_string: str | None,
    validate: bool | None,
) -> WriterSettings:
    """Merge config layers and CLI flags into frozen writer settings.

    Args:
        config_files (Sequence[Path]): Extra TOML files passed with ``--config``.
        pretty_print (bool | None): ``--pretty/--compact`` or None.
        indent_width (int | None): ``--indent-width`` or None.
        indent_string (str | None): ``--indent-string`` or None.
        validate (bool | None): ``--validate/--no-validate`` or None.

    Returns:
        WriterSettings: The effective settings.

    Raises:
        JsonScribeUsageError: If a ``--config`` file cannot be used.
        JsonScribeConfigError: If the merged settings are invalid.
    """
    merged: MutableWriterSettings = MutableWriterSettings.load_merged()
    for path in config_files:
        layer: MutableWriterSettings | None = MutableWriterSettings.from_toml_file(path)
        if layer is None:
            raise JsonScribeUsageError(f"No JsonScribe settings found in {path}")
        merged = merged.merge_with(layer)

    flags: dict[str, Any] = {
        "pretty_print": pretty_print,
        "indent_width": indent_width,
        "indent_string": indent_string,
        "validate": validate,
    }
    merged = merged.merge_with(MutableWriterSettings(**flags))
    logger.debug("Effective writer settings draft: %s", merged)

    try:
        return merged.freeze()
    except SettingsError as exc:
        raise JsonScribeConfigError(str(exc)) from exc
