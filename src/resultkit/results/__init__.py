# topmark:header:start
#
#   project      : ResultKit
#   file         : __init__.py
#   file_relpath : src/resultkit/results/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Query result data model consumed and produced by format plugins."""

from __future__ import annotations

from .model import (
    BlankNode,
    IteratorRowSource,
    Literal,
    ResultKind,
    ResultSet,
    Row,
    RowSource,
    Term,
    Uri,
    VariablesTable,
)

__all__ = [
    "BlankNode",
    "IteratorRowSource",
    "Literal",
    "ResultKind",
    "ResultSet",
    "Row",
    "RowSource",
    "Term",
    "Uri",
    "VariablesTable",
]
