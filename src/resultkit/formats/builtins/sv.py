# topmark:header:start
#
#   project      : ResultKit
#   file         : sv.py
#   file_relpath : src/resultkit/formats/builtins/sv.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Separated-values result formats: ``csv`` and ``tsv``.

Both formats share one implementation; the separator lives in the per-formatter
context built by each factory's ``context_factory``.

* CSV (https://www.w3.org/TR/sparql11-results-csv-tsv/#csv) is lossy: URIs and
  literals are written as bare strings. When reading, ``_:`` values become
  blank nodes, values that look like absolute URIs become `Uri`, and anything
  else a plain `Literal`.
* TSV keeps full term syntax (Turtle style) and ``?``-prefixed headers.

Boolean results are written as a single ``_askResult`` column.
"""

from __future__ import annotations

import csv
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from resultkit.config.logging import get_logger
from resultkit.formats.base import FormatFactory, MimeTypeQ
from resultkit.formats.builtins._terms import format_term_compact, parse_term
from resultkit.results.model import BlankNode, IteratorRowSource, Literal, Row, Uri

if TYPE_CHECKING:
    from typing import TextIO

    from resultkit.config.logging import ResultKitLogger
    from resultkit.formats.base import RegisterFactory
    from resultkit.formats.formatter import Formatter
    from resultkit.results.model import ResultSet, Term, VariablesTable
    from resultkit.world import World

logger: ResultKitLogger = get_logger(__name__)

ASK_HEADER: Final[str] = "_askResult"
CSV_MIME_TYPE: Final[str] = "text/csv"
TSV_MIME_TYPE: Final[str] = "text/tab-separated-values"

_ABSOLUTE_URI_RE: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:[^\s\"<>]+")


@dataclass
class SvContext:
    """Per-formatter state of the separated-values formats."""

    separator: str

    @property
    def is_tsv(self) -> bool:
        return self.separator == "\t"


def _context(formatter: Formatter) -> SvContext:
    ctx = formatter.context
    if not isinstance(ctx, SvContext):
        raise TypeError(f"Formatter '{formatter.name}' has no separated-values context")
    return ctx


def _csv_cell(term: Term | None) -> str:
    if term is None:
        return ""
    if isinstance(term, Uri):
        return term.value
    if isinstance(term, BlankNode):
        return f"_:{term.id}"
    return term.lexical


def _csv_term(cell: str) -> Term | None:
    if cell == "":
        return None
    if cell.startswith("_:"):
        return BlankNode(cell[2:])
    if _ABSOLUTE_URI_RE.fullmatch(cell):
        return Uri(cell)
    return Literal(cell)


def write_sv(
    formatter: Formatter,
    sink: TextIO,
    results: ResultSet,
    base_uri: str | None,
) -> bool:
    """Write ``results`` as CSV or TSV depending on the formatter context."""
    ctx: SvContext = _context(formatter)

    if ctx.is_tsv:
        if results.is_boolean:
            sink.write(f"?{ASK_HEADER}\n{'true' if results.boolean else 'false'}\n")
            return True
        sink.write("\t".join(f"?{name}" for name in results.variables) + "\n")
        width: int = len(results.variables)
        for row in results:
            sink.write("\t".join(format_term_compact(row[i]) for i in range(width)) + "\n")
        return True

    writer = csv.writer(sink, delimiter=ctx.separator, lineterminator="\r\n")
    if results.is_boolean:
        writer.writerow([ASK_HEADER])
        writer.writerow(["true" if results.boolean else "false"])
        return True
    writer.writerow(list(results.variables))
    width = len(results.variables)
    for row in results:
        writer.writerow([_csv_cell(row[i]) for i in range(width)])
    return True


def _boolean_source(value: str) -> IteratorRowSource:
    return IteratorRowSource(boolean=value.strip().lower() in ("true", "1"))


def _bind_header(variables: VariablesTable, names: list[str]) -> list[int | None]:
    """Map header positions to variable indexes; blank header cells map to ``None``."""
    return [variables.add(name) if name else None for name in names]


def _read_tsv(variables: VariablesTable, source: TextIO) -> IteratorRowSource | None:
    lines: list[str] = [line.rstrip("\r\n") for line in source]
    if not lines:
        logger.warning("Empty TSV results document")
        return None

    names: list[str] = [name.strip().lstrip("?$") for name in lines[0].split("\t")]
    if names == [ASK_HEADER]:
        return _boolean_source(lines[1] if len(lines) > 1 else "")
    columns: list[int | None] = _bind_header(variables, names)

    rows: list[Row] = []
    for lineno, line in enumerate(lines[1:], start=2):
        if not line:
            continue
        row = Row.unbound(len(variables))
        for index, field in zip(columns, line.split("\t")):
            if index is None:
                continue
            try:
                row.bind(index, parse_term(field))
            except ValueError:
                logger.warning("TSV line %d: cannot parse term %r", lineno, field)
                return None
        rows.append(row)
    return IteratorRowSource(rows)


def _read_csv(
    variables: VariablesTable, source: TextIO, separator: str
) -> IteratorRowSource | None:
    try:
        records: list[list[str]] = list(csv.reader(source, delimiter=separator))
    except csv.Error as exc:
        logger.warning("Invalid CSV results document: %s", exc)
        return None
    if not records:
        logger.warning("Empty CSV results document")
        return None

    header: list[str] = records[0]
    if header == [ASK_HEADER]:
        return _boolean_source(records[1][0] if len(records) > 1 and records[1] else "")
    columns: list[int | None] = _bind_header(variables, [name.strip() for name in header])

    rows: list[Row] = []
    for record in records[1:]:
        if not record:
            continue
        row = Row.unbound(len(variables))
        for index, cell in zip(columns, record):
            if index is not None:
                row.bind(index, _csv_term(cell))
        rows.append(row)
    return IteratorRowSource(rows)


def read_sv(
    formatter: Formatter,
    world: World,
    variables: VariablesTable,
    source: TextIO,
    base_uri: str | None,
) -> IteratorRowSource | None:
    """Parse a CSV or TSV results document into a row source."""
    ctx: SvContext = _context(formatter)
    if ctx.is_tsv:
        return _read_tsv(variables, source)
    return _read_csv(variables, source, ctx.separator)


def _first_line(sample: bytes) -> bytes:
    return sample.split(b"\n", 1)[0]


def sniff_csv(
    sample: bytes,
    identifier: str | None,
    suffix: str | None,
    mime_type: str | None,
) -> int:
    score = 0
    if suffix == "csv":
        score = 9
    first: bytes = _first_line(sample)
    if b"," in first and b"\t" not in first and not first.lstrip().startswith((b"<", b"{", b"?")):
        score += 2
    return score


def sniff_tsv(
    sample: bytes,
    identifier: str | None,
    suffix: str | None,
    mime_type: str | None,
) -> int:
    score = 0
    if suffix == "tsv":
        score = 9
    first: bytes = _first_line(sample)
    if first.startswith(b"?"):
        score += 4 if b"\t" in first else 2
    return score


def register_csv(factory: FormatFactory) -> None:
    factory.names = ["csv"]
    factory.label = "Comma Separated Values (CSV)"
    factory.mime_types = [MimeTypeQ(CSV_MIME_TYPE, 10)]
    factory.uri_strings = [
        "http://www.w3.org/ns/formats/SPARQL_Results_CSV",
        "http://www.w3.org/TR/sparql11-results-csv-tsv/#csv",
    ]
    factory.sniff = sniff_csv
    factory.write = write_sv
    factory.get_rowsource = read_sv
    factory.context_factory = lambda: SvContext(separator=",")


def register_tsv(factory: FormatFactory) -> None:
    factory.names = ["tsv"]
    factory.label = "Tab Separated Values (TSV)"
    factory.mime_types = [MimeTypeQ(TSV_MIME_TYPE, 10)]
    factory.uri_strings = [
        "http://www.w3.org/ns/formats/SPARQL_Results_TSV",
        "http://www.w3.org/TR/sparql11-results-csv-tsv/#tsv",
    ]
    factory.sniff = sniff_tsv
    factory.write = write_sv
    factory.get_rowsource = read_sv
    factory.context_factory = lambda: SvContext(separator="\t")


REGISTRARS: list[RegisterFactory] = [register_csv, register_tsv]
