# topmark:header:start
#
#   project      : ResultKit
#   file         : _terms.py
#   file_relpath : src/resultkit/formats/builtins/_terms.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turtle-style term syntax shared by the TSV and Turtle formats."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from resultkit.constants import XSD_NAMESPACE_URI
from resultkit.results.model import BlankNode, Literal, Uri

if TYPE_CHECKING:
    from resultkit.results.model import Term

_ESCAPES: Final[dict[str, str]] = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_UNESCAPES: Final[dict[str, str]] = {v[1]: k for k, v in _ESCAPES.items()}

# Datatypes whose values may be written as bare Turtle numbers/booleans.
_BARE_DATATYPES: Final[frozenset[str]] = frozenset(
    XSD_NAMESPACE_URI + name for name in ("integer", "decimal", "double", "boolean")
)

_LITERAL_RE: Final[re.Pattern[str]] = re.compile(
    r'"(?P<lexical>(?:[^"\\]|\\.)*)"(?:@(?P<lang>[A-Za-z0-9-]+)|\^\^<(?P<datatype>[^>]*)>)?'
)
_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]*\.[0-9]+")
_DOUBLE_RE: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)[eE][+-]?[0-9]+"
)


def escape_string(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def unescape_string(text: str) -> str:
    return re.sub(r"\\(.)", lambda m: _UNESCAPES.get(m.group(1), m.group(1)), text)


def format_term(term: Term | None) -> str:
    """Write a term in Turtle syntax; unbound values become the empty string."""
    if term is None:
        return ""
    if isinstance(term, Uri):
        return f"<{term.value}>"
    if isinstance(term, BlankNode):
        return f"_:{term.id}"
    text = f'"{escape_string(term.lexical)}"'
    if term.language:
        return f"{text}@{term.language}"
    if term.datatype:
        return f"{text}^^<{term.datatype}>"
    return text


def format_term_compact(term: Term | None) -> str:
    """Like `format_term`, but numbers and booleans are written bare."""
    if isinstance(term, Literal) and term.datatype in _BARE_DATATYPES:
        return term.lexical
    return format_term(term)


def parse_term(text: str) -> Term | None:
    """Parse a Turtle term written by `format_term` or `format_term_compact`.

    Returns:
        Term | None: The term, or ``None`` for an empty (unbound) field.

    Raises:
        ValueError: If ``text`` is not a recognizable term.
    """
    text = text.strip()
    if not text:
        return None
    if text.startswith("<") and text.endswith(">"):
        return Uri(text[1:-1])
    if text.startswith("_:"):
        return BlankNode(text[2:])
    m = _LITERAL_RE.fullmatch(text)
    if m is not None:
        return Literal(
            lexical=unescape_string(m.group("lexical")),
            datatype=m.group("datatype"),
            language=m.group("lang"),
        )
    if text in ("true", "false"):
        return Literal(text, XSD_NAMESPACE_URI + "boolean")
    if _INTEGER_RE.fullmatch(text):
        return Literal(text, XSD_NAMESPACE_URI + "integer")
    if _DECIMAL_RE.fullmatch(text):
        return Literal(text, XSD_NAMESPACE_URI + "decimal")
    if _DOUBLE_RE.fullmatch(text):
        return Literal(text, XSD_NAMESPACE_URI + "double")
    raise ValueError(f"Not a Turtle term: {text!r}")
