# topmark:header:start
#
#   project      : ResultKit
#   file         : model.py
#   file_relpath : src/resultkit/results/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Query result data model: RDF terms, rows, variable tables and result sets.

This is the row-producing / row-consuming abstraction the format plugins read
into and write from. It is intentionally small:

* `Uri`, `BlankNode` and `Literal` are the RDF terms a row can bind.
* `VariablesTable` holds the ordered variable names of a result.
* `Row` holds one value (or ``None`` for unbound) per variable.
* `ResultSet` stores rows and hands them out **once**: iterating consumes the
  rows, and `ResultSet.finished` reports when none are left.
* `RowSource` is the pull interface readers implement.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, Union, runtime_checkable


@dataclass(frozen=True)
class Uri:
    """A URI reference term."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BlankNode:
    """A blank node term, identified by its label within one result."""

    id: str

    def __str__(self) -> str:
        return f"_:{self.id}"


@dataclass(frozen=True)
class Literal:
    """A literal term.

    Attributes:
        lexical (str): The lexical form.
        datatype (str | None): Datatype URI, ``None`` for plain literals.
        language (str | None): Language tag, only for plain literals.
    """

    lexical: str
    datatype: str | None = None
    language: str | None = None

    def __str__(self) -> str:
        return self.lexical


Term = Union[Uri, BlankNode, Literal]


class ResultKind(Enum):
    """Shape of a query result.

    Attributes:
        BINDINGS: Variable bindings (SELECT).
        BOOLEAN: A single true/false answer (ASK).
    """

    BINDINGS = "bindings"
    BOOLEAN = "boolean"


class VariablesTable:
    """Ordered, duplicate-free table of variable names."""

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: list[str] = []
        for name in names:
            self.add(name)

    def add(self, name: str) -> int:
        """Add ``name`` (if new) and return its column index."""
        if name in self._names:
            return self._names.index(name)
        self._names.append(name)
        return len(self._names) - 1

    def index(self, name: str) -> int | None:
        """Return the column index of ``name``, or ``None`` if unknown."""
        try:
            return self._names.index(name)
        except ValueError:
            return None

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __repr__(self) -> str:
        return f"VariablesTable({self._names!r})"


@dataclass
class Row:
    """One result row: a value per variable, ``None`` where unbound.

    Attributes:
        values (list[Term | None]): Values in variable-table order.
        offset (int): Position of the row within its result set.
    """

    values: list[Term | None] = field(default_factory=lambda: [])
    offset: int = 0

    @classmethod
    def unbound(cls, width: int) -> Row:
        """Return a row of ``width`` unbound values."""
        return cls(values=[None] * width)

    def bind(self, index: int, value: Term | None) -> None:
        """Bind column ``index``, growing the row if needed."""
        if index >= len(self.values):
            self.values.extend([None] * (index + 1 - len(self.values)))
        self.values[index] = value

    def __getitem__(self, index: int) -> Term | None:
        return self.values[index] if index < len(self.values) else None

    def __len__(self) -> int:
        return len(self.values)


@runtime_checkable
class RowSource(Protocol):
    """Pull interface of a result reader."""

    def read_row(self) -> Row | None:
        """Return the next row, or ``None`` when exhausted."""
        ...

    def close(self) -> None:
        """Release resources held by the source."""
        ...


class IteratorRowSource:
    """`RowSource` over any iterable of rows.

    Args:
        rows (Iterable[Row]): Rows to hand out.
        boolean (bool | None): Answer of a boolean document; readers set it
            instead of producing rows.
    """

    def __init__(self, rows: Iterable[Row] = (), *, boolean: bool | None = None) -> None:
        self._rows: Iterator[Row] | None = iter(rows)
        self.boolean: bool | None = boolean

    def read_row(self) -> Row | None:
        if self._rows is None:
            return None
        return next(self._rows, None)

    def close(self) -> None:
        self._rows = None


class ResultSet:
    """Rows of a query result, consumed once in order.

    Args:
        variables (VariablesTable | Iterable[str] | None): Variable schema.
        kind (ResultKind): Bindings or boolean result.
        boolean (bool | None): The answer of a boolean result.
    """

    def __init__(
        self,
        variables: VariablesTable | Iterable[str] | None = None,
        *,
        kind: ResultKind = ResultKind.BINDINGS,
        boolean: bool | None = None,
    ) -> None:
        if isinstance(variables, VariablesTable):
            self.variables: VariablesTable = variables
        else:
            self.variables = VariablesTable(variables or ())
        self.kind: ResultKind = kind
        self.boolean: bool | None = boolean
        self._rows: list[Row] = []
        self._cursor: int = 0

    @classmethod
    def from_boolean(cls, value: bool) -> ResultSet:
        """Return a boolean (ASK) result."""
        return cls(kind=ResultKind.BOOLEAN, boolean=value)

    @property
    def is_boolean(self) -> bool:
        return self.kind is ResultKind.BOOLEAN

    def add_row(self, row: Row) -> None:
        """Append ``row``; its offset is set to its position."""
        row.offset = len(self._rows)
        self._rows.append(row)

    def next_row(self) -> Row | None:
        """Consume and return the next row, or ``None`` if finished."""
        if self._cursor >= len(self._rows):
            return None
        row: Row = self._rows[self._cursor]
        self._cursor += 1
        return row

    def __iter__(self) -> Iterator[Row]:
        """Consume the remaining rows in order."""
        while (row := self.next_row()) is not None:
            yield row

    @property
    def finished(self) -> bool:
        """True once every row has been consumed."""
        return self._cursor >= len(self._rows)

    def drain(self) -> None:
        """Consume all remaining rows."""
        self._cursor = len(self._rows)

    def rewind(self) -> None:
        """Make all rows available again."""
        self._cursor = 0

    @property
    def rows(self) -> tuple[Row, ...]:
        """All rows, consumed or not (does not move the cursor)."""
        return tuple(self._rows)

    def bindings(self, row: Row) -> dict[str, Term]:
        """Return the bound values of ``row`` keyed by variable name."""
        out: dict[str, Term] = {}
        for i, name in enumerate(self.variables):
            value: Term | None = row[i]
            if value is not None:
                out[name] = value
        return out

    def __len__(self) -> int:
        return len(self._rows)
