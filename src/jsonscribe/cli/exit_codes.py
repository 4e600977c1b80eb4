# topmark:header:start
#
#   project      : JsonScribe
#   file         : exit_codes.py
#   file_relpath : src/jsonscribe/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the JsonScribe CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes returned by the ``jsonscribe`` command.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): The writer rejected the input (e.g. a structural violation).
        USAGE_ERROR (int): Invalid flags or arguments.
        CONFIG_ERROR (int): Invalid writer settings.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
