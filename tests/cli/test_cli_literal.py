# topmark:header:start
#
#   project      : ResultKit
#   file         : test_cli_literal.py
#   file_relpath : tests/cli/test_cli_literal.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `literal` validation and canonical forms."""

from __future__ import annotations

import json

from resultkit.cli.commands.literal import resolve_datatype_uri
from resultkit.cli.exit_codes import ExitCode
from resultkit.constants import XSD_NAMESPACE_URI
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize


@parametrize(
    ("name", "expected"),
    [
        ("double", XSD_NAMESPACE_URI + "double"),
        ("xsd:int", XSD_NAMESPACE_URI + "int"),
        ("http://example.org/dt", "http://example.org/dt"),
    ],
)
def test_resolve_datatype_uri(name: str, expected: str) -> None:
    assert resolve_datatype_uri(name) == expected


@mark_cli
@parametrize(
    ("datatype", "lexical", "canonical"),
    [
        ("double", "1500", "1.5E3"),
        ("xsd:boolean", "1", "true"),
        ("boolean", "FALSE", "false"),
        ("integer", "+007", "7"),
        ("xsd:byte", "-05", "-5"),
        ("decimal", "2", "2.0"),
        ("string", " as is ", " as is "),
    ],
)
def test_literal_canonical_form(datatype: str, lexical: str, canonical: str) -> None:
    result = run_cli(["literal", datatype, "--", lexical])
    assert_SUCCESS(result)
    assert result.output == canonical + "\n"


@mark_cli
def test_literal_json() -> None:
    result = run_cli(["literal", "xsd:int", "042", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.output) == {
        "datatype": XSD_NAMESPACE_URI + "int",
        "type": "INTEGER_SUBTYPE",
        "lexical": "042",
        "canonical": "42",
    }


@mark_cli
@parametrize(
    ("datatype", "lexical"),
    [
        ("integer", "4.2"),
        ("boolean", "yes"),
        ("double", " 1.0"),
        ("decimal", "1e3"),
        ("integer", "99999999999999999999"),
    ],
)
def test_literal_invalid(datatype: str, lexical: str) -> None:
    result = run_cli(["literal", datatype, lexical])
    assert_exit(result, ExitCode.INVALID_LITERAL)


@mark_cli
def test_literal_unknown_datatype() -> None:
    result = run_cli(["literal", "xsd:colour", "red"])
    assert_exit(result, ExitCode.USAGE_ERROR)
    assert "Unknown XSD datatype" in result.output
