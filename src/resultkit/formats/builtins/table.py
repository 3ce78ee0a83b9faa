# topmark:header:start
#
#   project      : ResultKit
#   file         : table.py
#   file_relpath : src/resultkit/formats/builtins/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Plain-text table writer (``table``).

Renders results as a boxed text table for terminals:

```
------------------------
| s       | label      |
========================
| <urn:a> | "alpha"@en |
------------------------
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resultkit.formats.base import FormatFactory, MimeTypeQ
from resultkit.formats.builtins._terms import format_term

if TYPE_CHECKING:
    from typing import TextIO

    from resultkit.formats.base import RegisterFactory
    from resultkit.formats.formatter import Formatter
    from resultkit.results.model import ResultSet


def _rule(widths: list[int], char: str) -> str:
    # "| " + cell + " " per column, plus the closing "|"
    return char * (sum(widths) + 3 * len(widths) + 1)


def _line(cells: list[str], widths: list[int]) -> str:
    return "".join(f"| {cell.ljust(width)} " for cell, width in zip(cells, widths)) + "|"


def write_table(
    formatter: Formatter,
    sink: TextIO,
    results: ResultSet,
    base_uri: str | None,
) -> bool:
    """Write ``results`` as a text table; boolean results print ``true``/``false``."""
    if results.is_boolean:
        sink.write(("true" if results.boolean else "false") + "\n")
        return True

    header: list[str] = list(results.variables)
    body: list[list[str]] = [
        [format_term(row[i]) for i in range(len(header))] for row in results
    ]
    widths: list[int] = [
        max([len(name)] + [len(cells[i]) for cells in body]) for i, name in enumerate(header)
    ]

    sink.write(_rule(widths, "-") + "\n")
    sink.write(_line(header, widths) + "\n")
    sink.write(_rule(widths, "=") + "\n")
    for cells in body:
        sink.write(_line(cells, widths) + "\n")
    sink.write(_rule(widths, "-") + "\n")
    return True


def register_table(factory: FormatFactory) -> None:
    factory.names = ["table"]
    factory.label = "Table"
    factory.mime_types = [MimeTypeQ("text/plain", 10)]
    factory.write = write_table


REGISTRARS: list[RegisterFactory] = [register_table]
