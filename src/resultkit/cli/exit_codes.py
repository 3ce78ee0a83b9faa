# topmark:header:start
#
#   project      : ResultKit
#   file         : exit_codes.py
#   file_relpath : src/resultkit/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Standardized exit codes used by the ResultKit CLI."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ResultKit CLI.

    Attributes:
        SUCCESS (int): The command completed.
        FAILURE (int): Generic failure (e.g. a reader or writer reported an error).
        USAGE_ERROR (int): Invalid command-line usage.
        CONFIG_ERROR (int): A configuration file is unreadable or malformed.
        NOT_FOUND (int): No result format matches the given name, URI or MIME type.
        UNSUPPORTED (int): The format cannot read (or write) results.
        INVALID_LITERAL (int): A lexical form is invalid for its datatype.
        NO_GUESS (int): No result format could be guessed from the evidence.

    Usage:
        ```python
        import subprocess
        from resultkit.cli.exit_codes import ExitCode

        result = subprocess.run(["resultkit", "guess", "results.srj"])
        if result.returncode == ExitCode.NO_GUESS:
            print("unknown result syntax")
        ```
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    NOT_FOUND = 4
    UNSUPPORTED = 5
    INVALID_LITERAL = 6
    NO_GUESS = 7
