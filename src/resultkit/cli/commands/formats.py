# topmark:header:start
#
#   project      : ResultKit
#   file         : formats.py
#   file_relpath : src/resultkit/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit `formats` command.

Lists the registered result formats in registration order (the first one is
the default), with their capabilities and, on request, their MIME types and
syntax URIs.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from resultkit.cli.cli_types import OutputFormat
from resultkit.cli.cmd_common import get_console, get_effective_verbosity, get_world
from resultkit.cli.options import output_format_option
from resultkit.cli.utils import render_markdown_table
from resultkit.constants import RESULTKIT_VERSION

if TYPE_CHECKING:
    from resultkit.cli.console import ClickConsole
    from resultkit.formats.base import FormatDescriptor
    from resultkit.formats.registry import FormatRegistry


def _capabilities(desc: FormatDescriptor) -> str:
    caps: list[str] = []
    if desc.is_reader:
        caps.append("read")
    if desc.is_writer:
        caps.append("write")
    return "/".join(caps) or "-"


def _serialize(desc: FormatDescriptor, *, details: bool) -> dict[str, Any]:
    obj: dict[str, Any] = {
        "name": desc.name,
        "label": desc.label,
        "reader": desc.is_reader,
        "writer": desc.is_writer,
    }
    if details:
        obj["names"] = list(desc.names)
        obj["mime_types"] = [{"type": m.mime_type, "q": m.q} for m in desc.mime_types]
        obj["uris"] = list(desc.uri_strings)
    return obj


def _descriptors(registry: FormatRegistry) -> list[FormatDescriptor]:
    found: list[FormatDescriptor] = []
    index = 0
    while (desc := registry.describe(index)) is not None:
        found.append(desc)
        index += 1
    return found


@click.command(
    name="formats",
    help="List the registered query result formats.",
)
@output_format_option
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (aliases, MIME types, syntax URIs).",
)
def formats_command(
    *,
    show_details: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List registered result formats.

    Args:
        show_details (bool): If True, also show aliases, MIME types with their
            quality weights and syntax URIs.
        output_format (OutputFormat | None): Output format to use.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    descriptors: list[FormatDescriptor] = _descriptors(get_world(ctx).require_formats())
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        payload = [_serialize(d, details=show_details) for d in descriptors]
        console.print(json.dumps(payload, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for d in descriptors:
            console.print(json.dumps(_serialize(d, details=show_details)))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# Query Result Formats\n")
        console.print(f"ResultKit version **{RESULTKIT_VERSION}** supports these formats:\n")
        headers = ["Name", "Label", "Capabilities"]
        if show_details:
            headers += ["MIME types", "URIs"]
        rows: list[list[str]] = []
        for d in descriptors:
            row = [f"`{d.name}`", d.label, _capabilities(d)]
            if show_details:
                row.append(", ".join(f"{m.mime_type};q={m.q / 10:.1f}" for m in d.mime_types))
                row.append(", ".join(f"<{u}>" for u in d.uri_strings))
            rows.append(row)
        console.print(render_markdown_table(headers, rows))
        return

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Query result formats:\n", bold=True, underline=True))
    if not descriptors:
        console.print("(no result formats registered)")
        return
    num_width = len(str(len(descriptors)))
    name_width = max(len(d.name) for d in descriptors)
    for idx, d in enumerate(descriptors, start=1):
        label = console.styled(f"{d.label} [{_capabilities(d)}]", dim=True)
        console.print(f"{idx:>{num_width}}. {d.name:<{name_width}} {label}")
        if show_details:
            if len(d.names) > 1:
                console.print(f"      aliases   : {', '.join(d.names[1:])}")
            for m in d.mime_types:
                console.print(f"      mime type : {m.mime_type} (q={m.q})")
            for u in d.uri_strings:
                console.print(f"      uri       : {u}")
