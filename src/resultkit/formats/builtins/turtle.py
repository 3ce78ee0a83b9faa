# topmark:header:start
#
#   project      : ResultKit
#   file         : turtle.py
#   file_relpath : src/resultkit/formats/builtins/turtle.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turtle writer (``turtle``) using the DAWG result-set vocabulary.

The output is an RDF graph describing the results with the
``http://www.w3.org/2001/sw/DataAccess/tests/result-set#`` terms, as used by
the SPARQL test suites.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from resultkit.formats.base import FormatFactory, MimeTypeQ
from resultkit.formats.builtins._terms import escape_string, format_term_compact

if TYPE_CHECKING:
    from typing import TextIO

    from resultkit.formats.base import RegisterFactory
    from resultkit.formats.formatter import Formatter
    from resultkit.results.model import ResultSet

RS_NS: Final[str] = "http://www.w3.org/2001/sw/DataAccess/tests/result-set#"
RDF_NS: Final[str] = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"


def write_turtle(
    formatter: Formatter,
    sink: TextIO,
    results: ResultSet,
    base_uri: str | None,
) -> bool:
    """Write ``results`` as a ``rs:ResultSet`` Turtle graph."""
    if base_uri:
        sink.write(f"@base <{base_uri}> .\n")
    sink.write(f"@prefix rdf: <{RDF_NS}> .\n")
    sink.write(f"@prefix rs: <{RS_NS}> .\n\n")
    sink.write("[]    rdf:type rs:ResultSet")

    if results.is_boolean:
        sink.write(f" ;\n      rs:boolean {'true' if results.boolean else 'false'} .\n")
        return True

    for name in results.variables:
        sink.write(f' ;\n      rs:resultVariable "{escape_string(name)}"')

    for row in results:
        bindings = results.bindings(row)
        sink.write(" ;\n      rs:solution [")
        for position, (name, value) in enumerate(bindings.items()):
            sep = "" if position == 0 else " ;"
            sink.write(
                f'{sep}\n          rs:binding [ rs:variable "{escape_string(name)}" ;'
                f" rs:value {format_term_compact(value)} ]"
            )
        sep = " ;\n         " if bindings else ""
        sink.write(f"{sep} rs:index {row.offset + 1} ]")
    sink.write(" .\n")
    return True


def register_turtle(factory: FormatFactory) -> None:
    factory.names = ["turtle"]
    factory.label = "Turtle Query Results"
    factory.mime_types = [
        MimeTypeQ("text/turtle", 10),
        MimeTypeQ("application/x-turtle", 10),
    ]
    factory.uri_strings = [
        "http://www.w3.org/ns/formats/Turtle",
        "http://www.dajobe.org/2004/01/turtle/",
    ]
    factory.write = write_turtle


REGISTRARS: list[RegisterFactory] = [register_turtle]
