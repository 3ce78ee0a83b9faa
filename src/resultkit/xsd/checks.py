# topmark:header:start
#
#   project      : ResultKit
#   file         : checks.py
#   file_relpath : src/resultkit/xsd/checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lexical-form validators for the XSD primitive datatypes.

Each validator takes a candidate lexical form and returns ``True`` when the
string is acceptable for its datatype. Validators never raise: anything that
cannot be interpreted is simply rejected.

Only the *shape* of the lexical form is checked here; facets such as
``xsd:byte`` ranges belong to a layer above.

References:
    * XML Schema Part 2: Datatypes, https://www.w3.org/TR/xmlschema-2/
    * XPath Functions and Operators, https://www.w3.org/TR/xpath-functions/
"""

from __future__ import annotations

import re
from typing import Final

# xsd:integer values are held as signed 64-bit integers by the engine.
INTEGER_MIN: Final[int] = -(2**63)
INTEGER_MAX: Final[int] = 2**63 - 1

_BOOLEAN_FORMS: Final[frozenset[str]] = frozenset({"true", "TRUE", "1", "false", "FALSE", "0"})

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)")
_DATETIME_RE: Final[re.Pattern[str]] = re.compile(
    r"(?P<neg>-)?(?P<year>[0-9]{4,})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"T(?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})(?P<fraction>\.[0-9]+)?"
    r"(?P<tz>Z|[+-](?P<tzhour>[0-9]{2}):(?P<tzminute>[0-9]{2}))?"
)

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def check_boolean(lexical: str) -> bool:
    """Check an ``xsd:boolean`` lexical form.

    Only ``true``, ``TRUE``, ``1``, ``false``, ``FALSE`` and ``0`` are accepted.
    Strictly, XML Schema allows just ``{true, false, 1, 0}``; the upper-case
    spellings are a long-standing leniency kept for compatibility.
    """
    return lexical in _BOOLEAN_FORMS


def check_integer(lexical: str) -> bool:
    """Check an ``xsd:integer`` lexical form.

    An optional sign followed by one or more digits, consuming the whole
    string. Values outside the signed 64-bit range are rejected as overflow.
    """
    if _INTEGER_RE.fullmatch(lexical) is None:
        return False
    return INTEGER_MIN <= int(lexical) <= INTEGER_MAX


def check_decimal(lexical: str) -> bool:
    """Check an ``xsd:decimal`` lexical form (``-1.23``, ``+100``, ``.5``, ``5.``)."""
    return _DECIMAL_RE.fullmatch(lexical) is not None


def _parses_as_float(lexical: str) -> bool:
    # float() tolerates surrounding whitespace, digit group underscores and
    # non-ASCII digits; none of those are lexical forms.
    if not lexical or not lexical.isascii() or "_" in lexical or lexical.strip() != lexical:
        return False
    try:
        float(lexical)
    except ValueError:
        return False
    return True


def check_double(lexical: str) -> bool:
    """Check an ``xsd:double`` lexical form: the whole string must parse as a float."""
    return _parses_as_float(lexical)


def check_float(lexical: str) -> bool:
    """Check an ``xsd:float`` lexical form: the whole string must parse as a float."""
    return _parses_as_float(lexical)


def _is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def check_datetime(lexical: str) -> bool:
    """Check an ``xsd:dateTime`` lexical form.

    Accepts ``-?YYYY-MM-DDThh:mm:ss(.s+)?(Z|(+|-)hh:mm)?`` with calendar checks:
    year ``0000`` and years with superfluous leading zeros are rejected, the day
    must exist in the month (leap years included), ``24:00:00`` is the only
    hour-24 time and time zone offsets lie within ``-14:00``..``+14:00``.

    Args:
        lexical (str): Candidate lexical form.

    Returns:
        bool: True if ``lexical`` is a valid ``xsd:dateTime``.
    """
    m: re.Match[str] | None = _DATETIME_RE.fullmatch(lexical)
    if m is None:
        return False

    year_digits: str = m.group("year")
    if len(year_digits) > 4 and year_digits.startswith("0"):
        return False
    year = int(year_digits)
    if year == 0:
        return False
    if m.group("neg"):
        year = -year

    month = int(m.group("month"))
    if not 1 <= month <= 12:
        return False
    day = int(m.group("day"))
    max_day: int = _DAYS_IN_MONTH[month - 1]
    if month == 2 and _is_leap_year(year if year > 0 else year + 1):
        max_day = 29
    if not 1 <= day <= max_day:
        return False

    hour = int(m.group("hour"))
    minute = int(m.group("minute"))
    second = int(m.group("second"))
    fraction: str = m.group("fraction") or ""
    if hour == 24:
        if minute or second or fraction.strip(".0"):
            return False
    elif hour > 23:
        return False
    if minute > 59 or second > 59:
        return False

    if m.group("tzhour") is not None:
        tzhour = int(m.group("tzhour"))
        tzminute = int(m.group("tzminute"))
        if tzminute > 59 or tzhour > 14 or (tzhour == 14 and tzminute):
            return False

    return True
