# topmark:header:start
#
#   project      : ResultKit
#   file         : html.py
#   file_relpath : src/resultkit/formats/builtins/html.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""HTML table writer (``html``)."""

from __future__ import annotations

from html import escape
from typing import TYPE_CHECKING

from resultkit.formats.base import FormatFactory, MimeTypeQ
from resultkit.results.model import BlankNode, Uri

if TYPE_CHECKING:
    from typing import TextIO

    from resultkit.formats.base import RegisterFactory
    from resultkit.formats.formatter import Formatter
    from resultkit.results.model import ResultSet, Term


def _cell(term: Term | None) -> str:
    if term is None:
        return '<td><span class="unbound">unbound</span></td>'
    if isinstance(term, Uri):
        href = escape(term.value)
        return f'<td><span class="uri"><a href="{href}">{href}</a></span></td>'
    if isinstance(term, BlankNode):
        return f'<td><span class="blank">{escape(term.id)}</span></td>'
    text = f'<span class="literal"><span class="value">{escape(term.lexical)}</span>'
    if term.language:
        text += f'@<span class="lang">{escape(term.language)}</span>'
    elif term.datatype:
        text += f'^^&lt;<span class="datatype">{escape(term.datatype)}</span>&gt;'
    return f"<td>{text}</span></td>"


def write_html(
    formatter: Formatter,
    sink: TextIO,
    results: ResultSet,
    base_uri: str | None,
) -> bool:
    """Write ``results`` as an XHTML document holding one table."""
    sink.write('<?xml version="1.0" encoding="utf-8"?>\n')
    sink.write('<html xmlns="http://www.w3.org/1999/xhtml">\n')
    sink.write("<head>\n  <title>Query Results</title>\n")
    if base_uri:
        sink.write(f'  <base href="{escape(base_uri)}"/>\n')
    sink.write("</head>\n<body>\n")

    if results.is_boolean:
        answer = "true" if results.boolean else "false"
        sink.write(f'  <p>The result of your query is: <span id="result">{answer}</span></p>\n')
    else:
        sink.write('  <table id="results" border="1">\n    <tr>\n')
        for name in results.variables:
            sink.write(f'      <th>?{escape(name)}</th>\n')
        sink.write("    </tr>\n")
        width: int = len(results.variables)
        count = 0
        for row in results:
            sink.write('    <tr class="result">\n')
            for i in range(width):
                sink.write(f"      {_cell(row[i])}\n")
            sink.write("    </tr>\n")
            count += 1
        sink.write("  </table>\n")
        sink.write(f'  <p>Total number of rows: <span class="count">{count}</span>.</p>\n')

    sink.write("</body>\n</html>\n")
    return True


def register_html(factory: FormatFactory) -> None:
    factory.names = ["html"]
    factory.label = "HTML Table"
    factory.mime_types = [
        MimeTypeQ("application/xhtml+xml", 10),
        MimeTypeQ("text/html", 10),
    ]
    factory.uri_strings = ["http://www.w3.org/1999/xhtml"]
    factory.write = write_html


REGISTRARS: list[RegisterFactory] = [register_html]
