# topmark:header:start
#
#   project      : JsonScribe
#   file         : errors.py
#   file_relpath : src/jsonscribe/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the JsonScribe CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`JsonScribeError`) are translated
    into these by the commands.
"""

from __future__ import annotations

import click

from jsonscribe.cli.exit_codes import ExitCode


class JsonScribeCliError(click.ClickException):
    """Base class for all JsonScribe CLI errors."""

    exit_code = ExitCode.FAILURE


class JsonScribeUsageError(JsonScribeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class JsonScribeConfigError(JsonScribeCliError):
    """Error for invalid writer settings (from flags or config files)."""

    exit_code = ExitCode.CONFIG_ERROR
