# topmark:header:start
#
#   project      : ResultKit
#   file         : logging.py
#   file_relpath : src/resultkit/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit logging with a TRACE level below DEBUG and severity-colored records.

Every module obtains its logger with ``get_logger(__name__)``; the CLI (or an
embedding application) calls `setup_logging` once to install a handler on the
root logger. Sniff scores and per-row diagnostics are logged at TRACE.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, TextIO, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "RESULTKIT_LOG_LEVEL"


class ResultKitLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(ResultKitLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] %(name)s:%(lineno)d %(message)s"

_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

# Highest threshold first; the first one at or below the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter coloring each record by severity with yachalk.

    Args:
        fmt (str): The record format string.
        color (bool): If False, records are left uncolored.
    """

    def __init__(self, fmt: str, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color: bool = color

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        if not self.color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Translate a level name ("TRACE", "info") or a numeric string into a logging level.

    Args:
        value (str | None): Level name or number; ``None`` or blank yields ``None``.

    Returns:
        int | None: The numeric logging level, or ``None`` if unrecognized.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``RESULTKIT_LOG_LEVEL``, or None if unset or invalid."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(
    level: int | None = None,
    *,
    stream: TextIO | None = None,
    color: bool = True,
) -> None:
    """Install a single colored handler on the root logger.

    Handlers installed by an earlier call are replaced, so calling this again
    only changes the level and the destination.

    Args:
        level (int | None): Log level. ``None`` consults ``RESULTKIT_LOG_LEVEL``
            and falls back to CRITICAL.
        stream (TextIO | None): Destination, ``sys.stderr`` by default.
        color (bool): Color records by severity.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color)
    )
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> ResultKitLogger:
    """Return the `ResultKitLogger` called ``name``."""
    return cast("ResultKitLogger", logging.getLogger(name))
