# topmark:header:start
#
#   project      : ResultKit
#   file         : types.py
#   file_relpath : src/resultkit/xsd/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Literal type tags.

`LiteralType` enumerates the kinds of RDF term a literal value can carry: the
non-datatyped markers first, then one member per XSD primitive, then a single
collapsed member for every type derived from ``xsd:integer``.

Ordinals are stable; the datatype table in `resultkit.xsd.datatypes` relies on
the XSD primitives forming a contiguous range (`FIRST_XSD`..`LAST_XSD`).
"""

from __future__ import annotations

from enum import IntEnum
from typing import Final


class LiteralType(IntEnum):
    """Type tag of a literal.

    Attributes:
        UNKNOWN: Unresolved / not a known datatype.
        BLANK: Blank node marker.
        URI: URI reference marker.
        STRING: Plain literal (no datatype).
        XSD_STRING: ``xsd:string``.
        BOOLEAN: ``xsd:boolean``.
        INTEGER: ``xsd:integer``.
        FLOAT: ``xsd:float``.
        DOUBLE: ``xsd:double``.
        DECIMAL: ``xsd:decimal``.
        DATETIME: ``xsd:dateTime``.
        INTEGER_SUBTYPE: Any of the twelve types derived from ``xsd:integer``
            (``xsd:int``, ``xsd:byte`` ...). Which one is not recorded.
    """

    UNKNOWN = 0
    BLANK = 1
    URI = 2
    STRING = 3
    XSD_STRING = 4
    BOOLEAN = 5
    INTEGER = 6
    FLOAT = 7
    DOUBLE = 8
    DECIMAL = 9
    DATETIME = 10
    INTEGER_SUBTYPE = 11


FIRST_XSD: Final[LiteralType] = LiteralType.XSD_STRING
LAST_XSD: Final[LiteralType] = LiteralType.DATETIME

XSD_PRIMITIVES: Final[tuple[LiteralType, ...]] = tuple(
    t for t in LiteralType if FIRST_XSD <= t <= LAST_XSD
)
