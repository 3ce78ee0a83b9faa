# topmark:header:start
#
#   project      : ResultKit
#   file         : canonical.py
#   file_relpath : src/resultkit/xsd/canonical.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical lexical forms for XSD numeric and boolean values.

Validation (see `resultkit.xsd.checks`) accepts many spellings of the same
value; the functions here produce the single form a value is serialized as.

Notes:
    * `format_double` implements the ``xsd:double`` canonical representation:
      one digit before the point, no superfluous mantissa zeros, an upper-case
      ``E`` and an exponent without sign padding or leading zeros
      (``1.5E-3``, ``-2.0E10``). Zero is the fixed literal ``0.0e0``.
    * `format_float` uses a C ``%1g`` conversion and is **not** guaranteed to
      be the canonical ``xsd:float`` form for every input.
    * Infinities and NaN are written ``INF``, ``-INF`` and ``NaN``.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Final

DOUBLE_ZERO: Final[str] = "0.0e0"

# Precision of the intermediate scientific expansion used by format_double.
_DOUBLE_EXPANSION: Final[str] = "%1.14e"


def _non_finite(value: float) -> str | None:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    return None


def format_boolean(value: bool) -> str:
    """Return ``"true"`` or ``"false"``."""
    return "true" if value else "false"


def format_integer(value: int) -> str:
    """Format an integer as a base-10 ``xsd:integer`` canonical form.

    Suitable for ``xsd:integer`` and all of its derived types; there are no
    leading zeros and a ``-`` only for negative values.
    """
    return "%d" % value


def format_float(value: float) -> str:
    """Format an ``xsd:float`` value using ``%1g``.

    Args:
        value (float): The value to format.

    Returns:
        str: A lexical form accepted by `check_float`, e.g. ``"1.5"`` or ``"1e+06"``.
    """
    special: str | None = _non_finite(value)
    if special is not None:
        return special
    return "%1g" % value


def format_double(value: float) -> str:
    """Format an ``xsd:double`` value in canonical scientific notation.

    The value is first expanded with 14 fractional digits (``1.50000000000000e-03``),
    then canonicalized:

    1. the run of ``0`` digits ending the mantissa is removed, keeping one
       digit after the point (``1.50000000000000`` → ``1.5``, ``1.0000`` → ``1.0``);
    2. the exponent marker becomes ``E``;
    3. the exponent keeps its ``-`` sign, loses any ``+`` and its leading zeros
       (``e+00`` → ``E0``, ``e-03`` → ``E-3``, ``e+308`` → ``E308``).

    Args:
        value (float): The value to format.

    Returns:
        str: The canonical form, ``"0.0e0"`` for (positive or negative) zero.
    """
    if value == 0.0:
        return DOUBLE_ZERO

    special: str | None = _non_finite(value)
    if special is not None:
        return special

    expanded: str = _DOUBLE_EXPANSION % value
    mantissa, _, exponent = expanded.partition("e")

    mantissa = mantissa.rstrip("0")
    if mantissa.endswith("."):
        mantissa += "0"

    # int() drops the '+' sign and leading zeros; "00" becomes "0".
    return f"{mantissa}E{int(exponent)}"


def format_decimal(value: Decimal | int | str) -> str:
    """Format an ``xsd:decimal`` value in canonical form.

    The canonical form has a mandatory decimal point with at least one digit on
    each side, no leading or trailing zeros beyond those, and a ``-`` sign only
    for negative non-zero values (``2`` → ``2.0``, ``-0.50`` → ``-0.5``).

    Args:
        value (Decimal | int | str): The value to format. Strings must be valid
            ``Decimal`` constructor input.

    Returns:
        str: The canonical lexical form.

    Raises:
        ValueError: If ``value`` is infinite or NaN.
    """
    d = Decimal(value)
    if not d.is_finite():
        raise ValueError(f"xsd:decimal has no lexical form for {value!r}")

    text: str = format(d, "f")
    negative: bool = text.startswith("-")
    if negative:
        text = text[1:]

    integral, _, fraction = text.partition(".")
    integral = integral.lstrip("0") or "0"
    fraction = fraction.rstrip("0") or "0"

    if integral == "0" and fraction == "0":
        negative = False
    return f"{'-' if negative else ''}{integral}.{fraction}"
