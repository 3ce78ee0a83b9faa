# topmark:header:start
#
#   project      : ResultKit
#   file         : datatypes.py
#   file_relpath : src/resultkit/xsd/datatypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""XSD datatype table: names, URIs, validators and type promotion.

The table maps every `LiteralType` XSD primitive to its XML Schema name, its
datatype URI (built once per `World` from the shared namespace URI), its
lexical validator and its promotion parent. The twelve types derived from
``xsd:integer`` are listed too, but all of them resolve to the single
`LiteralType.INTEGER_SUBTYPE` tag; that collapse is one-way, so
`XsdDatatypes.type_to_uri` has no answer for the collapsed tag.

Promotion lattice used for numeric coercion::

    INTEGER_SUBTYPE ─┐
    BOOLEAN ─────────┴→ INTEGER → FLOAT → DOUBLE → DECIMAL
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from resultkit.config.logging import get_logger
from resultkit.constants import XSD_NAMESPACE_URI
from resultkit.errors import InvalidLexicalFormError
from resultkit.xsd.canonical import (
    format_boolean,
    format_decimal,
    format_double,
    format_float,
    format_integer,
)
from resultkit.xsd.checks import (
    check_boolean,
    check_datetime,
    check_decimal,
    check_double,
    check_float,
    check_integer,
)
from resultkit.xsd.types import XSD_PRIMITIVES, LiteralType

if TYPE_CHECKING:
    from resultkit.config.logging import ResultKitLogger
    from resultkit.world import World

logger: ResultKitLogger = get_logger(__name__)

LexicalCheck = Callable[[str], bool]

XSD_NAMES: Final[dict[LiteralType, str]] = {
    LiteralType.XSD_STRING: "string",
    LiteralType.BOOLEAN: "boolean",
    LiteralType.INTEGER: "integer",
    LiteralType.FLOAT: "float",
    LiteralType.DOUBLE: "double",
    LiteralType.DECIMAL: "decimal",
    LiteralType.DATETIME: "dateTime",
}

# All of these always type-promote to xsd:integer.
INTEGER_DERIVED_NAMES: Final[tuple[str, ...]] = (
    "nonPositiveInteger",
    "negativeInteger",
    "long",
    "int",
    "short",
    "byte",
    "nonNegativeInteger",
    "unsignedLong",
    "positiveInteger",
    "unsignedInt",
    "unsignedShort",
    "unsignedByte",
)

_CHECKS: Final[dict[LiteralType, LexicalCheck]] = {
    LiteralType.BOOLEAN: check_boolean,
    LiteralType.INTEGER: check_integer,
    LiteralType.FLOAT: check_float,
    LiteralType.DOUBLE: check_double,
    LiteralType.DECIMAL: check_decimal,
    LiteralType.DATETIME: check_datetime,
}

_PARENTS: Final[dict[LiteralType, LiteralType]] = {
    LiteralType.BOOLEAN: LiteralType.INTEGER,
    LiteralType.INTEGER: LiteralType.FLOAT,
    LiteralType.FLOAT: LiteralType.DOUBLE,
    LiteralType.DOUBLE: LiteralType.DECIMAL,
    LiteralType.INTEGER_SUBTYPE: LiteralType.INTEGER,
}

_NUMERIC: Final[frozenset[LiteralType]] = frozenset(
    {
        LiteralType.BOOLEAN,
        LiteralType.INTEGER,
        LiteralType.FLOAT,
        LiteralType.DOUBLE,
        LiteralType.DECIMAL,
        LiteralType.INTEGER_SUBTYPE,
    }
)


@dataclass(frozen=True)
class TypeDescriptor:
    """One row of the datatype table.

    Attributes:
        literal_type (LiteralType): The tag this row describes.
        name (str): XML Schema local name (``"integer"``, ``"unsignedByte"`` ...).
        uri (str): Datatype URI, namespace + name.
        check (LexicalCheck | None): Lexical validator; ``None`` accepts anything.
        parent (LiteralType | None): Promotion parent, ``None`` at the top.
    """

    literal_type: LiteralType
    name: str
    uri: str
    check: LexicalCheck | None
    parent: LiteralType | None


def datatype_check(literal_type: LiteralType, lexical: str) -> bool:
    """Check ``lexical`` against the validator of ``literal_type``.

    Types without a validator (plain and ``xsd:string`` literals, non-XSD
    tags and the collapsed integer subtype) accept every string.
    """
    check: LexicalCheck | None = _CHECKS.get(literal_type)
    if check is None:
        return True
    return check(lexical)


def require_valid(literal_type: LiteralType, lexical: str) -> str:
    """Return ``lexical`` if it is valid for ``literal_type``.

    Raises:
        InvalidLexicalFormError: If the validator rejects ``lexical``.
    """
    if not datatype_check(literal_type, lexical):
        raise InvalidLexicalFormError(lexical, datatype_label(literal_type) or literal_type.name)
    return lexical


def datatype_label(literal_type: LiteralType) -> str | None:
    """Return the XML Schema name of a primitive tag, or ``None``."""
    return XSD_NAMES.get(literal_type)


def is_numeric(literal_type: LiteralType) -> bool:
    """Return True for ``BOOLEAN`` through ``DECIMAL`` and for ``INTEGER_SUBTYPE``."""
    return literal_type in _NUMERIC


def parent_type(literal_type: LiteralType) -> LiteralType | None:
    """Return the type ``literal_type`` promotes to, or ``None`` at the top of the lattice."""
    return _PARENTS.get(literal_type)


class XsdDatatypes:
    """Per-world table of XSD datatype descriptors.

    Built once by `xsd_init` and torn down by `xsd_finish`. The table is
    append-only while open; after `close` every lookup behaves as if no
    datatype were known.

    Args:
        namespace_uri (str): XML Schema namespace the datatype URIs are built from.
    """

    def __init__(self, namespace_uri: str = XSD_NAMESPACE_URI) -> None:
        self.namespace_uri: str | None = namespace_uri
        self._primitives: dict[LiteralType, TypeDescriptor] = {}
        self._derived: list[TypeDescriptor] = []

        for literal_type in XSD_PRIMITIVES:
            name: str = XSD_NAMES[literal_type]
            self._primitives[literal_type] = TypeDescriptor(
                literal_type=literal_type,
                name=name,
                uri=namespace_uri + name,
                check=_CHECKS.get(literal_type),
                parent=_PARENTS.get(literal_type),
            )
        for name in INTEGER_DERIVED_NAMES:
            self._derived.append(
                TypeDescriptor(
                    literal_type=LiteralType.INTEGER_SUBTYPE,
                    name=name,
                    uri=namespace_uri + name,
                    check=_CHECKS[LiteralType.INTEGER],
                    parent=LiteralType.INTEGER,
                )
            )
        logger.debug(
            "Built XSD datatype table: %d primitives, %d integer-derived types",
            len(self._primitives),
            len(self._derived),
        )

    @property
    def closed(self) -> bool:
        """True once `close` has released the table."""
        return self.namespace_uri is None

    def __iter__(self) -> Iterator[TypeDescriptor]:
        """Iterate primitives (in tag order) followed by the integer-derived rows."""
        yield from self._primitives.values()
        yield from self._derived

    def descriptor(self, literal_type: LiteralType) -> TypeDescriptor | None:
        """Return the descriptor of a primitive tag, or ``None``."""
        return self._primitives.get(literal_type)

    def uri_to_type(self, uri: str | None) -> LiteralType:
        """Map a datatype URI to its tag.

        Integer-derived URIs (``xsd:int``, ``xsd:byte`` ...) all map to
        `LiteralType.INTEGER_SUBTYPE`; unknown URIs map to `LiteralType.UNKNOWN`.
        """
        if not uri:
            return LiteralType.UNKNOWN
        for desc in self:
            if desc.uri == uri:
                return desc.literal_type
        return LiteralType.UNKNOWN

    def type_to_uri(self, literal_type: LiteralType) -> str | None:
        """Return the datatype URI of a primitive tag.

        ``INTEGER_SUBTYPE`` has no reverse mapping: it does not record which
        derived type it came from.
        """
        desc: TypeDescriptor | None = self._primitives.get(literal_type)
        return desc.uri if desc is not None else None

    def is_datatype_uri(self, uri: str | None) -> bool:
        """Return True if ``uri`` names a known XSD datatype."""
        return self.uri_to_type(uri) is not LiteralType.UNKNOWN

    def close(self) -> None:
        """Release every descriptor, then the namespace URI."""
        self._derived.clear()
        self._primitives.clear()
        self.namespace_uri = None


def xsd_init(world: World) -> XsdDatatypes:
    """Build the datatype table of ``world`` (no-op if already built)."""
    if world.xsd is None:
        world.xsd = XsdDatatypes()
    return world.xsd


def xsd_finish(world: World) -> None:
    """Tear down the datatype table of ``world`` (no-op if absent)."""
    if world.xsd is not None:
        world.xsd.close()
        world.xsd = None


def canonicalize(literal_type: LiteralType, lexical: str) -> str:
    """Validate ``lexical`` and return the canonical form of its value.

    Types without a canonical formatter (strings, ``dateTime``) are returned
    unchanged once validated. Integer-derived types are canonicalized as
    ``xsd:integer``.

    Raises:
        InvalidLexicalFormError: If ``lexical`` is not valid for ``literal_type``.
    """
    require_valid(literal_type, lexical)
    if literal_type is LiteralType.BOOLEAN:
        return format_boolean(lexical in ("true", "TRUE", "1"))
    if literal_type is LiteralType.INTEGER_SUBTYPE:
        if not check_integer(lexical):
            raise InvalidLexicalFormError(lexical, "integer")
        return format_integer(int(lexical))
    if literal_type is LiteralType.INTEGER:
        return format_integer(int(lexical))
    if literal_type is LiteralType.FLOAT:
        return format_float(float(lexical))
    if literal_type is LiteralType.DOUBLE:
        return format_double(float(lexical))
    if literal_type is LiteralType.DECIMAL:
        return format_decimal(lexical)
    return lexical
