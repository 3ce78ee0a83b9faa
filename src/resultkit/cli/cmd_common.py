# topmark:header:start
#
#   project      : ResultKit
#   file         : cmd_common.py
#   file_relpath : src/resultkit/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the ResultKit subcommands.

Commands read the shared state stored on ``ctx.obj`` by the group callback
(see `resultkit.cli.main`): the console, the program-output verbosity and the
frozen `Config`. The `World` is opened lazily on first use and closed when the
Click context is torn down.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

import click

from resultkit.cli.errors import (
    ResultKitCliError,
    ResultKitInvalidLiteralError,
    ResultKitNoGuessError,
    ResultKitNotFoundError,
    ResultKitUnsupportedError,
)
from resultkit.config.model import Config
from resultkit.errors import (
    FormatNotFoundError,
    FormatterInitError,
    InvalidLexicalFormError,
    NoSniffResultError,
    UnsupportedOperationError,
)
from resultkit.world import World

if TYPE_CHECKING:
    from resultkit.cli.console import ClickConsole


def get_console(ctx: click.Context) -> ClickConsole:
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-v`` count minus ``-q`` count)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def get_world(ctx: click.Context) -> World:
    """Return the opened `World` of this invocation, creating it on first use."""
    root: click.Context = ctx.find_root()
    root.ensure_object(dict)
    world: World | None = root.obj.get("world")
    if world is None:
        config: Config = root.obj.get("config") or Config()
        world = World(config).open()
        root.obj["world"] = world
        root.call_on_close(world.close)
        if world.registration_failures:
            get_console(root).warn(
                f"{world.registration_failures} result format plugin(s) failed to register"
            )
    return world


@contextmanager
def translate_core_errors() -> Iterator[None]:
    """Re-raise core exceptions as CLI errors carrying the matching exit code."""
    try:
        yield
    except NoSniffResultError as exc:
        raise ResultKitNoGuessError(str(exc)) from exc
    except FormatNotFoundError as exc:
        raise ResultKitNotFoundError(str(exc)) from exc
    except UnsupportedOperationError as exc:
        raise ResultKitUnsupportedError(str(exc)) from exc
    except InvalidLexicalFormError as exc:
        raise ResultKitInvalidLiteralError(str(exc)) from exc
    except FormatterInitError as exc:
        raise ResultKitCliError(str(exc)) from exc
