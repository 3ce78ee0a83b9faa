# topmark:header:start
#
#   project      : ResultKit
#   file         : version.py
#   file_relpath : src/resultkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit `version` command.

Prints the current ResultKit version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from resultkit.cli.cli_types import OutputFormat
from resultkit.cli.cmd_common import get_console, get_effective_verbosity
from resultkit.cli.options import output_format_option
from resultkit.constants import RESULTKIT_VERSION

if TYPE_CHECKING:
    from resultkit.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of ResultKit.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ResultKit.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(json.dumps({"version": RESULTKIT_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# ResultKit Version\n")
        console.print(f"**ResultKit version: {RESULTKIT_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("ResultKit version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(RESULTKIT_VERSION, bold=True)}")
    else:
        console.print(console.styled(RESULTKIT_VERSION, bold=True))
