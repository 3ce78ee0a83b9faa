# topmark:header:start
#
#   project      : ResultKit
#   file         : options.py
#   file_relpath : src/resultkit/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options and their resolution helpers."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

import click

from resultkit.cli.cli_types import EnumChoiceParam, OutputFormat
from resultkit.cli.errors import ResultKitUsageError
from resultkit.config.logging import TRACE_LEVEL

F = TypeVar("F", bound=Callable[..., object])


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int | None:
    """Resolve the logging level selected by ``-v`` / ``-q``.

    Args:
        verbose_count (int): Number of ``-v`` flags.
        quiet_count (int): Number of ``-q`` flags.

    Returns:
        int | None: The logging level, or ``None`` when neither flag was given.

    Raises:
        ResultKitUsageError: If both flags are used simultaneously.

    Behavior:
        Three or more ``-v`` flags set TRACE, two set DEBUG, one sets INFO.
        One or more ``-q`` flags set ERROR.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ResultKitUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return None


def common_verbose_options(f: F) -> F:
    """Adds ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Only errors are logged.",
    )(f)
    return f


def output_format_option(f: F) -> F:
    """Adds the ``--format`` option selecting an `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
