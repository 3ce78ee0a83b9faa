# topmark:header:start
#
#   project      : ResultKit
#   file         : sparql_json.py
#   file_relpath : src/resultkit/formats/builtins/sparql_json.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SPARQL 1.1 Query Results JSON Format (``json``), reader and writer.

See https://www.w3.org/TR/sparql11-results-json/. The reader keeps URIs as
written: ``base_uri`` and the world are not used to resolve relative references.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Final

from resultkit.config.logging import get_logger
from resultkit.formats.base import FormatFactory, MimeTypeQ
from resultkit.results.model import BlankNode, IteratorRowSource, Literal, Row, Uri

if TYPE_CHECKING:
    from typing import TextIO

    from resultkit.config.logging import ResultKitLogger
    from resultkit.formats.base import RegisterFactory
    from resultkit.formats.formatter import Formatter
    from resultkit.results.model import ResultSet, Term, VariablesTable
    from resultkit.world import World

logger: ResultKitLogger = get_logger(__name__)

MIME_TYPE: Final[str] = "application/sparql-results+json"


def _term_to_json(term: Term) -> dict[str, str]:
    if isinstance(term, Uri):
        return {"type": "uri", "value": term.value}
    if isinstance(term, BlankNode):
        return {"type": "bnode", "value": term.id}
    obj: dict[str, str] = {"type": "literal", "value": term.lexical}
    if term.language:
        obj["xml:lang"] = term.language
    elif term.datatype:
        obj["datatype"] = term.datatype
    return obj


def write_sparql_json(
    formatter: Formatter,
    sink: TextIO,
    results: ResultSet,
    base_uri: str | None,
) -> bool:
    """Write ``results`` as a SPARQL JSON results document."""
    head: dict[str, Any] = {}
    doc: dict[str, Any] = {"head": head}
    if base_uri:
        head["link"] = [base_uri]

    if results.is_boolean:
        doc["boolean"] = bool(results.boolean)
    else:
        head["vars"] = list(results.variables)
        doc["results"] = {
            "bindings": [
                {name: _term_to_json(value) for name, value in results.bindings(row).items()}
                for row in results
            ]
        }

    json.dump(doc, sink, indent=2, ensure_ascii=False)
    sink.write("\n")
    return True


def _term_from_json(obj: Any) -> Term | None:
    if not isinstance(obj, dict):
        return None
    kind: Any = obj.get("type")
    value = str(obj.get("value", ""))
    if kind == "uri":
        return Uri(value)
    if kind == "bnode":
        return BlankNode(value)
    if kind in ("literal", "typed-literal"):
        return Literal(lexical=value, datatype=obj.get("datatype"), language=obj.get("xml:lang"))
    return None


def _shape_error(what: str) -> None:
    logger.warning("Not a SPARQL JSON results document (%s)", what)


def read_sparql_json(
    formatter: Formatter,
    world: World,
    variables: VariablesTable,
    source: TextIO,
    base_uri: str | None,
) -> IteratorRowSource | None:
    """Parse a SPARQL JSON results document into a row source.

    A document that is valid JSON but not shaped like a results document
    yields ``None``.
    """
    try:
        doc: Any = json.load(source)
    except json.JSONDecodeError as exc:
        logger.warning("Invalid SPARQL JSON results document: %s", exc)
        return None
    if not isinstance(doc, dict) or "head" not in doc:
        _shape_error("missing 'head'")
        return None
    head: Any = doc["head"]
    if not isinstance(head, dict):
        _shape_error("'head' is not an object")
        return None
    names: Any = head.get("vars") or []
    if not isinstance(names, list):
        _shape_error("'head.vars' is not an array")
        return None

    for name in names:
        variables.add(str(name))

    if "boolean" in doc:
        return IteratorRowSource(boolean=bool(doc["boolean"]))

    results: Any = doc.get("results") or {}
    if not isinstance(results, dict):
        _shape_error("'results' is not an object")
        return None
    bindings: Any = results.get("bindings", [])
    if not isinstance(bindings, list):
        _shape_error("'results.bindings' is not an array")
        return None

    rows: list[Row] = []
    for solution in bindings:
        if not isinstance(solution, dict):
            _shape_error("a solution is not an object")
            return None
        row = Row.unbound(len(variables))
        for name, value in solution.items():
            row.bind(variables.add(str(name)), _term_from_json(value))
        rows.append(row)
    return IteratorRowSource(rows)


def sniff_sparql_json(
    sample: bytes,
    identifier: str | None,
    suffix: str | None,
    mime_type: str | None,
) -> int:
    """Score SPARQL JSON: ``.srj`` suffix and the ``head``/``vars`` keys."""
    score = 0
    if suffix == "srj":
        score = 9
    elif suffix == "json":
        score = 5
    if sample.lstrip().startswith(b"{") and b'"head"' in sample:
        score += 4
        if b'"vars"' in sample or b'"boolean"' in sample:
            score += 2
    return score


def register_sparql_json(factory: FormatFactory) -> None:
    factory.names = ["json"]
    factory.label = "SPARQL Query Results JSON"
    factory.mime_types = [
        MimeTypeQ(MIME_TYPE, 10),
        MimeTypeQ("application/json", 6),
        MimeTypeQ("text/json", 6),
    ]
    factory.uri_strings = [
        "http://www.w3.org/ns/formats/SPARQL_Results_JSON",
        "http://www.w3.org/TR/sparql11-results-json/",
        "http://www.w3.org/2001/sw/DataAccess/json-sparql/",
    ]
    factory.sniff = sniff_sparql_json
    factory.write = write_sparql_json
    factory.get_rowsource = read_sparql_json


REGISTRARS: list[RegisterFactory] = [register_sparql_json]
