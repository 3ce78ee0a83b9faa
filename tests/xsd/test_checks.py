# topmark:header:start
#
#   project      : ResultKit
#   file         : test_checks.py
#   file_relpath : tests/xsd/test_checks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lexical validators for the XSD primitive datatypes."""

from __future__ import annotations

from resultkit.xsd.checks import (
    INTEGER_MAX,
    INTEGER_MIN,
    check_boolean,
    check_datetime,
    check_decimal,
    check_double,
    check_float,
    check_integer,
)
from tests.conftest import parametrize


@parametrize("lexical", ["true", "TRUE", "1", "false", "FALSE", "0"])
def test_boolean_accepts_documented_forms(lexical: str) -> None:
    assert check_boolean(lexical)


@parametrize("lexical", ["True", "yes", "", " true", "2", "t"])
def test_boolean_rejects_other_forms(lexical: str) -> None:
    assert not check_boolean(lexical)


@parametrize(
    ("lexical", "expected"),
    [
        ("0", True),
        ("-0", True),
        ("+5", True),
        ("0042", True),
        (str(INTEGER_MAX), True),
        (str(INTEGER_MIN), True),
        (str(INTEGER_MAX + 1), False),
        (str(INTEGER_MIN - 1), False),
        ("", False),
        ("+", False),
        ("12a", False),
        (" 1", False),
        ("1.0", False),
    ],
)
def test_integer(lexical: str, expected: bool) -> None:
    assert check_integer(lexical) is expected


@parametrize(
    ("lexical", "expected"),
    [
        ("1", True),
        ("-1.23", True),
        ("+100", True),
        (".5", True),
        ("5.", True),
        ("", False),
        (".", False),
        ("-", False),
        ("1e3", False),
        ("1.2.3", False),
        ("1,5", False),
    ],
)
def test_decimal(lexical: str, expected: bool) -> None:
    assert check_decimal(lexical) is expected


@parametrize("lexical", ["1e3", "1E-3", ".5", "-0", "3.14", "INF", "-INF", "NaN"])
def test_float_and_double_accept_float_syntax(lexical: str) -> None:
    assert check_float(lexical)
    assert check_double(lexical)


@parametrize("lexical", ["", "abc", " 1.0", "1.0 ", "1_000", "1e", "１"])
def test_float_and_double_reject_non_lexical_input(lexical: str) -> None:
    assert not check_float(lexical)
    assert not check_double(lexical)


@parametrize(
    ("lexical", "expected"),
    [
        ("2024-02-29T12:00:00Z", True),
        ("2023-12-31T23:59:59.999-05:30", True),
        ("2024-01-01T24:00:00", True),
        ("2024-01-01T00:00:00+14:00", True),
        ("-0044-03-15T12:00:00", True),
        ("2023-02-29T12:00:00", False),
        ("2024-04-31T00:00:00", False),
        ("2024-13-01T00:00:00", False),
        ("2024-01-01T24:00:01", False),
        ("2024-01-01T23:60:00", False),
        ("2024-01-01T00:00:00+14:30", False),
        ("0000-01-01T00:00:00", False),
        ("02024-01-01T00:00:00", False),
        ("2024-01-01", False),
        ("2024-01-01 00:00:00", False),
    ],
)
def test_datetime(lexical: str, expected: bool) -> None:
    assert check_datetime(lexical) is expected
