# topmark:header:start
#
#   project      : ResultKit
#   file         : test_builtin_formats.py
#   file_relpath : tests/formats/test_builtin_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Behavior of the built-in result formats against the shared sample results."""

from __future__ import annotations

import io
import json
from typing import TYPE_CHECKING

import pytest

from resultkit.constants import XSD_NAMESPACE_URI
from resultkit.formats.base import FormatFlags
from resultkit.formats.formatter import Formatter
from resultkit.results.model import BlankNode, Literal, ResultSet, Row, Uri
from tests.conftest import parametrize

if TYPE_CHECKING:
    from resultkit.world import World

XSD_INTEGER = XSD_NAMESPACE_URI + "integer"

SRX_DOC = """<?xml version="1.0"?>
<sparql xmlns="http://www.w3.org/2005/sparql-results#">
  <head>
    <variable name="s"/>
    <variable name="label"/>
  </head>
  <results>
    <result>
      <binding name="s"><uri>http://example.org/a</uri></binding>
      <binding name="label"><literal xml:lang="en">alpha</literal></binding>
    </result>
    <result>
      <binding name="s"><bnode>r1</bnode></binding>
    </result>
  </results>
</sparql>
"""

SRJ_DOC = """{
  "head": {"vars": ["s", "n"]},
  "results": {"bindings": [
    {"s": {"type": "uri", "value": "http://example.org/a"},
     "n": {"type": "typed-literal", "value": "7",
           "datatype": "http://www.w3.org/2001/XMLSchema#integer"}},
    {"n": {"type": "literal", "value": "plain"}}
  ]}
}
"""


def _write(world: World, name: str, results: ResultSet, base_uri: str | None = None) -> str:
    sink = io.StringIO()
    with Formatter.create(world.require_formats(), name=name) as fmt:
        assert fmt.write(sink, results, base_uri)
    return sink.getvalue()


def _read(world: World, name: str, text: str) -> ResultSet:
    results = ResultSet()
    with Formatter.create(world.require_formats(), name=name) as fmt:
        assert fmt.read(world, io.StringIO(text), results)
    return results


@parametrize(
    ("name", "flags"),
    [
        ("xml", FormatFlags.READER | FormatFlags.WRITER),
        ("json", FormatFlags.READER | FormatFlags.WRITER),
        ("csv", FormatFlags.READER | FormatFlags.WRITER),
        ("tsv", FormatFlags.READER | FormatFlags.WRITER),
        ("table", FormatFlags.WRITER),
        ("html", FormatFlags.WRITER),
        ("turtle", FormatFlags.WRITER),
    ],
)
def test_builtin_capabilities(world: World, name: str, flags: FormatFlags) -> None:
    factory = world.require_formats().lookup(name=name)
    assert factory is not None
    assert factory.flags == flags


def test_read_sparql_xml(world: World) -> None:
    results = _read(world, "xml", SRX_DOC)
    assert results.variables.names == ("s", "label")
    first, second = results.rows
    assert first[0] == Uri("http://example.org/a")
    assert first[1] == Literal("alpha", language="en")
    assert second[0] == BlankNode("r1")
    assert second[1] is None


def test_write_sparql_xml(world: World, sample_results: ResultSet) -> None:
    out = _write(world, "xml", sample_results)
    assert out.startswith('<?xml version="1.0"?>\n<sparql xmlns="http://www.w3.org/2005/')
    assert '<variable name="s" />' in out
    assert "<uri>http://example.org/a</uri>" in out
    assert f'<literal datatype="{XSD_INTEGER}">42</literal>' in out
    assert "<bnode>b0</bnode>" in out
    assert sample_results.finished


def test_xml_reads_back_its_own_output(world: World, sample_results: ResultSet) -> None:
    results = _read(world, "xml", _write(world, "xml", sample_results))
    sample_results.rewind()
    assert [r.values for r in results.rows] == [r.values for r in sample_results.rows]


def test_invalid_xml_is_rejected(world: World) -> None:
    with Formatter.create(world.require_formats(), name="xml") as fmt:
        assert not fmt.read(world, io.StringIO("<sparql"), ResultSet())


def test_read_sparql_json(world: World) -> None:
    results = _read(world, "json", SRJ_DOC)
    assert results.variables.names == ("s", "n")
    first, second = results.rows
    assert first[1] == Literal("7", XSD_INTEGER)
    assert second[0] is None
    assert second[1] == Literal("plain")


@parametrize(
    "text",
    [
        '{"head": []}',
        '{"head": {"vars": "x"}}',
        '{"head": {"vars": ["x"]}, "results": []}',
        '{"head": {"vars": []}, "results": {"bindings": null}}',
        '{"head": {"vars": ["x"]}, "results": {"bindings": [["a"]]}}',
    ],
)
def test_misshapen_json_yields_no_row_source(world: World, text: str) -> None:
    with Formatter.create(world.require_formats(), name="json") as fmt:
        assert not fmt.read(world, io.StringIO(text), ResultSet())


def test_write_sparql_json(world: World, sample_results: ResultSet) -> None:
    doc = json.loads(_write(world, "json", sample_results, "http://example.org/base"))
    assert doc["head"] == {"link": ["http://example.org/base"], "vars": ["s", "o"]}
    bindings = doc["results"]["bindings"]
    assert bindings[0]["o"] == {"type": "literal", "value": "42", "datatype": XSD_INTEGER}
    assert bindings[1] == {"s": {"type": "bnode", "value": "b0"}}


@parametrize("name", ["xml", "json", "csv", "tsv"])
@parametrize("answer", [True, False])
def test_boolean_results_survive(world: World, name: str, answer: bool) -> None:
    text = _write(world, name, ResultSet.from_boolean(answer))
    results = _read(world, name, text)
    assert results.is_boolean
    assert results.boolean is answer


def test_write_csv(world: World, sample_results: ResultSet) -> None:
    assert _write(world, "csv", sample_results) == "s,o\r\nhttp://example.org/a,42\r\n_:b0,\r\n"


def test_read_csv_is_lossy(world: World) -> None:
    results = _read(world, "csv", 's,o\r\nhttp://example.org/a,"hello, world"\r\n_:x,\r\n')
    first, second = results.rows
    assert first[0] == Uri("http://example.org/a")
    assert first[1] == Literal("hello, world")
    assert second[0] == BlankNode("x")
    assert second[1] is None


def test_write_tsv(world: World, sample_results: ResultSet) -> None:
    assert _write(world, "tsv", sample_results) == "?s\t?o\n<http://example.org/a>\t42\n_:b0\t\n"


def test_read_tsv(world: World) -> None:
    text = '?s\t?o\n<http://example.org/a>\t"chat"@fr\n_:b\t3.5\n'
    results = _read(world, "tsv", text)
    first, second = results.rows
    assert first[1] == Literal("chat", language="fr")
    assert second[0] == BlankNode("b")
    assert second[1] == Literal("3.5", XSD_NAMESPACE_URI + "decimal")


def test_tsv_blank_header_column_is_skipped(world: World) -> None:
    results = _read(world, "tsv", '?a\t\t?b\n"1"\t"2"\t"3"\n')
    assert results.variables.names == ("a", "b")
    (row,) = results.rows
    assert row[0] == Literal("1")
    assert row[1] == Literal("3")


def test_csv_blank_header_column_is_skipped(world: World) -> None:
    results = _read(world, "csv", "a,,b\r\n1,2,3\r\n")
    assert results.variables.names == ("a", "b")
    (row,) = results.rows
    assert row[0] == Literal("1")
    assert row[1] == Literal("3")


def test_tsv_rejects_garbage_terms(world: World) -> None:
    with Formatter.create(world.require_formats(), name="tsv") as fmt:
        assert not fmt.read(world, io.StringIO("?s\nnot a term\n"), ResultSet())


def test_write_table(world: World) -> None:
    results = ResultSet(["s", "label"])
    results.add_row(Row([Uri("urn:a"), Literal("alpha", language="en")]))
    assert _write(world, "table", results).splitlines() == [
        "------------------------",
        "| s       | label      |",
        "========================",
        '| <urn:a> | "alpha"@en |',
        "------------------------",
    ]


def test_write_table_boolean(world: World) -> None:
    assert _write(world, "table", ResultSet.from_boolean(True)) == "true\n"


def test_write_html(world: World, sample_results: ResultSet) -> None:
    out = _write(world, "html", sample_results)
    assert '<html xmlns="http://www.w3.org/1999/xhtml">' in out
    assert "<th>?s</th>" in out
    assert '<a href="http://example.org/a">' in out
    assert '<span class="unbound">unbound</span>' in out
    assert '<span class="count">2</span>' in out


def test_write_html_escapes(world: World) -> None:
    results = ResultSet(["v"])
    results.add_row(Row([Literal("<b>&</b>")]))
    assert "&lt;b&gt;&amp;&lt;/b&gt;" in _write(world, "html", results)


def test_write_turtle(world: World, sample_results: ResultSet) -> None:
    out = _write(world, "turtle", sample_results)
    assert "@prefix rs: <http://www.w3.org/2001/sw/DataAccess/tests/result-set#> ." in out
    assert 'rs:resultVariable "s"' in out
    assert 'rs:binding [ rs:variable "o" ; rs:value 42 ]' in out
    assert "rs:index 2 ]" in out
    assert out.rstrip().endswith(".")


def test_write_turtle_boolean(world: World) -> None:
    out = _write(world, "turtle", ResultSet.from_boolean(False))
    assert "rs:boolean false ." in out


@pytest.mark.parametrize("name", ["table", "html", "turtle"])
def test_writer_only_formats_cannot_read(world: World, name: str) -> None:
    factory = world.require_formats().lookup(name=name)
    assert factory is not None
    assert factory.get_rowsource is None
