# topmark:header:start
#
#   project      : ResultKit
#   file         : sparql_xml.py
#   file_relpath : src/resultkit/formats/builtins/sparql_xml.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SPARQL Query Results XML Format (``xml``), reader and writer.

See https://www.w3.org/TR/rdf-sparql-XMLres/. This is the first built-in
format and therefore the registry default. The reader keeps URIs as written:
``base_uri`` and the world are not used to resolve relative references.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING, Final

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

SRX_NS: Final[str] = "http://www.w3.org/2005/sparql-results#"
XML_LANG: Final[str] = "{http://www.w3.org/XML/1998/namespace}lang"
MIME_TYPE: Final[str] = "application/sparql-results+xml"


def _q(tag: str) -> str:
    return f"{{{SRX_NS}}}{tag}"


def _term_element(parent: ET.Element, term: Term) -> None:
    if isinstance(term, Uri):
        ET.SubElement(parent, _q("uri")).text = term.value
    elif isinstance(term, BlankNode):
        ET.SubElement(parent, _q("bnode")).text = term.id
    else:
        el = ET.SubElement(parent, _q("literal"))
        if term.language:
            el.set(XML_LANG, term.language)
        elif term.datatype:
            el.set("datatype", term.datatype)
        el.text = term.lexical


def write_sparql_xml(
    formatter: Formatter,
    sink: TextIO,
    results: ResultSet,
    base_uri: str | None,
) -> bool:
    """Write ``results`` as a SPARQL XML results document."""
    root = ET.Element(_q("sparql"))
    head = ET.SubElement(root, _q("head"))

    if results.is_boolean:
        if base_uri:
            ET.SubElement(head, _q("link"), href=base_uri)
        ET.SubElement(root, _q("boolean")).text = "true" if results.boolean else "false"
    else:
        for name in results.variables:
            ET.SubElement(head, _q("variable"), name=name)
        if base_uri:
            ET.SubElement(head, _q("link"), href=base_uri)
        results_el = ET.SubElement(root, _q("results"))
        for row in results:
            result_el = ET.SubElement(results_el, _q("result"))
            for name, value in results.bindings(row).items():
                binding = ET.SubElement(result_el, _q("binding"), name=name)
                _term_element(binding, value)

    ET.indent(root, space="  ")
    sink.write('<?xml version="1.0"?>\n')
    sink.write(ET.tostring(root, encoding="unicode", default_namespace=SRX_NS))
    sink.write("\n")
    return True


def _parse_term(el: ET.Element) -> Term | None:
    text: str = el.text or ""
    if el.tag == _q("uri"):
        return Uri(text.strip())
    if el.tag == _q("bnode"):
        return BlankNode(text.strip())
    if el.tag == _q("literal"):
        return Literal(lexical=text, datatype=el.get("datatype"), language=el.get(XML_LANG))
    return None


def read_sparql_xml(
    formatter: Formatter,
    world: World,
    variables: VariablesTable,
    source: TextIO,
    base_uri: str | None,
) -> IteratorRowSource | None:
    """Parse a SPARQL XML results document into a row source."""
    try:
        root: ET.Element = ET.parse(source).getroot()
    except ET.ParseError as exc:
        logger.warning("Invalid SPARQL XML results document: %s", exc)
        return None
    if root.tag != _q("sparql"):
        logger.warning("Not a SPARQL XML results document (root element %s)", root.tag)
        return None

    for var_el in root.iterfind(f"{_q('head')}/{_q('variable')}"):
        name: str | None = var_el.get("name")
        if name:
            variables.add(name)

    boolean_el: ET.Element | None = root.find(_q("boolean"))
    if boolean_el is not None:
        return IteratorRowSource(boolean=(boolean_el.text or "").strip() == "true")

    rows: list[Row] = []
    for result_el in root.iterfind(f"{_q('results')}/{_q('result')}"):
        row = Row.unbound(len(variables))
        for binding in result_el.iterfind(_q("binding")):
            name = binding.get("name")
            if not name or len(binding) == 0:
                continue
            row.bind(variables.add(name), _parse_term(binding[0]))
        rows.append(row)
    return IteratorRowSource(rows)


def sniff_sparql_xml(
    sample: bytes,
    identifier: str | None,
    suffix: str | None,
    mime_type: str | None,
) -> int:
    """Score SPARQL XML: ``.srx`` suffix and the results namespace are strong hints."""
    score = 0
    if suffix == "srx":
        score = 9
    elif suffix == "xml":
        score = 4
    if SRX_NS.encode() in sample:
        score += 6
    elif b"<sparql" in sample:
        score += 3
    return score


def register_sparql_xml(factory: FormatFactory) -> None:
    factory.names = ["xml"]
    factory.label = "SPARQL Query Results XML"
    factory.mime_types = [MimeTypeQ(MIME_TYPE, 10)]
    factory.uri_strings = [
        "http://www.w3.org/ns/formats/SPARQL_Results_XML",
        "http://www.w3.org/TR/rdf-sparql-XMLres/",
        "http://www.w3.org/TR/2008/REC-rdf-sparql-XMLres-20080115/",
        SRX_NS,
    ]
    factory.sniff = sniff_sparql_xml
    factory.write = write_sparql_xml
    factory.get_rowsource = read_sparql_xml


REGISTRARS: list[RegisterFactory] = [register_sparql_xml]
