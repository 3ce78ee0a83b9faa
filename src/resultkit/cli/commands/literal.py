# topmark:header:start
#
#   project      : ResultKit
#   file         : literal.py
#   file_relpath : src/resultkit/cli/commands/literal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ResultKit `literal` command.

Validates a lexical form against an XSD datatype and prints its canonical form:

```console
$ resultkit literal double 1500
1.5E3
$ resultkit literal xsd:boolean TRUE
true
```
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from resultkit.cli.cli_types import OutputFormat
from resultkit.cli.cmd_common import get_console, get_world, translate_core_errors
from resultkit.cli.errors import ResultKitUsageError
from resultkit.cli.options import output_format_option
from resultkit.constants import XSD_NAMESPACE_URI
from resultkit.xsd.datatypes import canonicalize
from resultkit.xsd.types import LiteralType

if TYPE_CHECKING:
    from resultkit.cli.console import ClickConsole
    from resultkit.xsd.datatypes import XsdDatatypes


def resolve_datatype_uri(name: str) -> str:
    """Expand ``double``, ``xsd:double`` or a full URI to a datatype URI."""
    if name.startswith("xsd:"):
        return XSD_NAMESPACE_URI + name[len("xsd:") :]
    if ":" in name:
        return name
    return XSD_NAMESPACE_URI + name


@click.command(
    name="literal",
    help="Validate a literal and print its canonical form.",
)
@click.argument("datatype", metavar="TYPE")
@click.argument("lexical")
@output_format_option
def literal_command(
    *,
    datatype: str,
    lexical: str,
    output_format: OutputFormat | None = None,
) -> None:
    """Validate ``lexical`` as ``datatype`` and print the canonical form.

    Args:
        datatype (str): Datatype as local name, ``xsd:`` QName or URI.
        lexical (str): Lexical form to check.
        output_format (OutputFormat | None): Output format.
    """
    ctx = click.get_current_context()
    console: ClickConsole = get_console(ctx)
    xsd: XsdDatatypes = get_world(ctx).require_xsd()

    uri: str = resolve_datatype_uri(datatype)
    literal_type: LiteralType = xsd.uri_to_type(uri)
    if literal_type is LiteralType.UNKNOWN:
        raise ResultKitUsageError(f"Unknown XSD datatype: {datatype}")

    with translate_core_errors():
        canonical: str = canonicalize(literal_type, lexical)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        console.print(
            json.dumps(
                {
                    "datatype": uri,
                    "type": literal_type.name,
                    "lexical": lexical,
                    "canonical": canonical,
                }
            )
        )
    else:
        console.print(canonical)
