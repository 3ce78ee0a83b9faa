# topmark:header:start
#
#   project      : ResultKit
#   file         : errors.py
#   file_relpath : src/resultkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ResultKit CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from resultkit.cli.exit_codes import ExitCode


class ResultKitCliError(click.ClickException):
    """Base class for all ResultKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ResultKitUsageError(ResultKitCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ResultKitConfigError(ResultKitCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ResultKitNotFoundError(ResultKitCliError):
    """No result format matches the requested identifier."""

    exit_code = ExitCode.NOT_FOUND


class ResultKitUnsupportedError(ResultKitCliError):
    """The selected format lacks the requested capability."""

    exit_code = ExitCode.UNSUPPORTED


class ResultKitInvalidLiteralError(ResultKitCliError):
    """A literal failed lexical validation."""

    exit_code = ExitCode.INVALID_LITERAL


class ResultKitNoGuessError(ResultKitCliError):
    """Content sniffing produced no candidate."""

    exit_code = ExitCode.NO_GUESS
