# topmark:header:start
#
#   project      : ResultKit
#   file         : test_cli_convert.py
#   file_relpath : tests/cli/test_cli_convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `convert` between result formats, and its error exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from resultkit.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

SRJ = """{
  "head": {"vars": ["s", "n"]},
  "results": {"bindings": [
    {"s": {"type": "uri", "value": "http://example.org/a"},
     "n": {"type": "literal", "value": "1",
           "datatype": "http://www.w3.org/2001/XMLSchema#integer"}}
  ]}
}
"""


def _input(tmp_path: Path, name: str = "in.srj", text: str = SRJ) -> str:
    (tmp_path / name).write_text(text, encoding="utf-8")
    return name


@mark_cli
def test_convert_sniffed_json_to_csv(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["convert", _input(tmp_path), "-t", "csv"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["s,n", "http://example.org/a,1"]


@mark_cli
def test_convert_defaults_to_xml(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["convert", _input(tmp_path)])
    assert_SUCCESS(result)
    assert "<sparql" in result.output
    assert '<variable name="n" />' in result.output


@mark_cli
def test_convert_to_output_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["convert", _input(tmp_path), "-t", "json", "-o", "out.srj"])
    assert_SUCCESS(result)
    doc = json.loads((tmp_path / "out.srj").read_text(encoding="utf-8"))
    assert doc["head"]["vars"] == ["s", "n"]
    assert doc["results"]["bindings"][0]["s"]["value"] == "http://example.org/a"


@mark_cli
def test_convert_explicit_input_format(tmp_path: Path) -> None:
    name = _input(tmp_path, "data.txt", "?x\n<urn:a>\n")
    result = run_cli_in(tmp_path, ["convert", name, "-f", "tsv", "-t", "table"])
    assert_SUCCESS(result)
    assert "| <urn:a> |" in result.output


@mark_cli
def test_convert_boolean_result(tmp_path: Path) -> None:
    name = _input(tmp_path, "ask.srj", '{"head": {}, "boolean": true}')
    result = run_cli_in(tmp_path, ["convert", name, "-t", "tsv"])
    assert_SUCCESS(result)
    assert result.output == "?_askResult\ntrue\n"


@mark_cli
def test_convert_unknown_output_format(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["convert", _input(tmp_path), "-t", "yaml"])
    assert_exit(result, ExitCode.NOT_FOUND)


@mark_cli
def test_convert_from_writer_only_format(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["convert", _input(tmp_path), "-f", "html"])
    assert_exit(result, ExitCode.UNSUPPORTED)


@mark_cli
def test_convert_unguessable_input(tmp_path: Path) -> None:
    name = _input(tmp_path, "mystery.bin", "???")
    result = run_cli_in(tmp_path, ["convert", name])
    assert_exit(result, ExitCode.NO_GUESS)


@mark_cli
def test_convert_unparsable_input(tmp_path: Path) -> None:
    name = _input(tmp_path, "broken.srj", '{"head": ')
    result = run_cli_in(tmp_path, ["convert", name])
    assert_exit(result, ExitCode.FAILURE)
    assert "Cannot parse" in result.output
