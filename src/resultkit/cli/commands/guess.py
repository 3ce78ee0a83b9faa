# topmark:header:start
#
#   project      : ResultKit
#   file         : guess.py
#   file_relpath : src/resultkit/cli/commands/guess.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit `guess` command.

Guesses the result format of a file from its name, its leading bytes and the
optional MIME type and syntax URI given on the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from resultkit.cli.cmd_common import get_console, get_effective_verbosity, get_world
from resultkit.cli.errors import ResultKitCliError, ResultKitNoGuessError
from resultkit.config.logging import get_logger
from resultkit.constants import SNIFF_WINDOW

if TYPE_CHECKING:
    from resultkit.cli.console import ClickConsole
    from resultkit.config.logging import ResultKitLogger

logger: ResultKitLogger = get_logger(__name__)


def read_sample(path: Path, size: int = SNIFF_WINDOW) -> bytes:
    """Return the first ``size`` bytes of ``path``.

    Raises:
        ResultKitCliError: If the file cannot be read.
    """
    try:
        with path.open("rb") as fh:
            return fh.read(size)
    except OSError as exc:
        raise ResultKitCliError(f"Cannot read {path}: {exc}") from exc


@click.command(
    name="guess",
    help="Guess the result format of a file.",
)
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--mime-type", default=None, help="MIME type the content was served with.")
@click.option("--uri", default=None, help="Syntax URI identifying the format.")
def guess_command(*, path: Path, mime_type: str | None = None, uri: str | None = None) -> None:
    """Print the name of the guessed result format.

    Args:
        path (Path): File to inspect; its name provides the suffix evidence.
        mime_type (str | None): Optional MIME type evidence.
        uri (str | None): Optional syntax URI evidence.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    world = get_world(ctx)

    sample: bytes = read_sample(path)
    name: str | None = world.require_formats().guess_format_name(
        uri=uri, mime_type=mime_type, buffer=sample, identifier=path.name
    )
    if name is None:
        raise ResultKitNoGuessError(f"Cannot guess the result format of {path}")

    logger.info("Guessed result format %s for %s", name, path)
    if get_effective_verbosity(ctx) > 0:
        console.print(f"{path}: {console.styled(name, bold=True)}")
    else:
        console.print(name)
