# topmark:header:start
#
#   project      : ResultKit
#   file         : convert.py
#   file_relpath : src/resultkit/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit `convert` command.

Reads query results in one format and writes them in another:

```console
$ resultkit convert results.srj -t table
$ resultkit convert results.csv -f csv -t xml -o results.srx
```

Without ``--from`` the input format is guessed from the file name and content;
without ``--to`` the registry default (``xml``) is written.
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

import click

from resultkit.cli.cmd_common import get_world, translate_core_errors
from resultkit.cli.errors import ResultKitCliError
from resultkit.config.logging import get_logger
from resultkit.constants import SNIFF_WINDOW
from resultkit.formats.formatter import Formatter
from resultkit.results.model import ResultSet

if TYPE_CHECKING:
    from resultkit.config.logging import ResultKitLogger
    from resultkit.formats.registry import FormatRegistry

logger: ResultKitLogger = get_logger(__name__)


@click.command(
    name="convert",
    help="Convert query results between formats.",
)
@click.argument(
    "input_path",
    metavar="INPUT",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--from", "from_name", default=None, help="Input format name (guessed if omitted)."
)
@click.option(
    "-t", "--to", "to_name", default=None, help="Output format name (default: xml)."
)
@click.option("--base-uri", default=None, help="Base URI for reading and writing.")
@click.option(
    "-o",
    "--output",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Output file (default: stdout).",
)
def convert_command(
    *,
    input_path: Path,
    from_name: str | None = None,
    to_name: str | None = None,
    base_uri: str | None = None,
    output: TextIO,
) -> None:
    """Read ``input_path`` with one formatter and write it with another.

    Args:
        input_path (Path): Results document to read.
        from_name (str | None): Input format name; sniffed when ``None``.
        to_name (str | None): Output format name; the default format when ``None``.
        base_uri (str | None): Base URI passed to the reader and the writer.
        output (TextIO): Destination stream.
    """
    ctx = click.get_current_context()
    world = get_world(ctx)
    registry: FormatRegistry = world.require_formats()

    try:
        data: bytes = input_path.read_bytes()
        text: str = data.decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ResultKitCliError(f"Cannot read {input_path}: {exc}") from exc

    results = ResultSet()
    with translate_core_errors():
        if from_name is None:
            reader = Formatter.create_for_content(
                registry, buffer=data[:SNIFF_WINDOW], identifier=input_path.name
            )
        else:
            reader = Formatter.create(registry, name=from_name)
        with reader:
            logger.info("Reading %s as %s", input_path, reader.name)
            if not reader.read(world, io.StringIO(text), results, base_uri):
                raise ResultKitCliError(f"Cannot parse {input_path} as {reader.name} results")

        with Formatter.create(registry, name=to_name) as writer:
            logger.info("Writing %d row(s) as %s", len(results), writer.name)
            if not writer.write(output, results, base_uri):
                raise ResultKitCliError(f"Writing {writer.name} results failed")
