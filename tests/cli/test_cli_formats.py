# topmark:header:start
#
#   project      : ResultKit
#   file         : test_cli_formats.py
#   file_relpath : tests/cli/test_cli_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `formats` listing in every output format."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from resultkit.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

BUILTIN_NAMES: list[str] = ["xml", "json", "table", "csv", "tsv", "html", "turtle"]


@mark_cli
def test_formats_default_listing() -> None:
    result = run_cli(["--no-color", "formats"])
    assert_SUCCESS(result)
    lines: list[str] = result.output.splitlines()
    assert lines[0].startswith("1. xml ")
    assert "SPARQL Query Results XML [read/write]" in lines[0]
    assert any("Table [write]" in line for line in lines)
    assert len(lines) == len(BUILTIN_NAMES)


@mark_cli
def test_formats_long_lists_mime_types() -> None:
    result = run_cli(["--no-color", "formats", "--long"])
    assert_SUCCESS(result)
    assert "mime type : application/sparql-results+json (q=10)" in result.output
    assert "uri       : http://www.w3.org/ns/formats/SPARQL_Results_CSV" in result.output


@mark_cli
def test_formats_json() -> None:
    result = run_cli(["formats", "--format", "json"])
    assert_SUCCESS(result)
    payload: list[dict[str, Any]] = json.loads(result.output)
    assert [entry["name"] for entry in payload] == BUILTIN_NAMES
    assert payload[0] == {
        "name": "xml",
        "label": "SPARQL Query Results XML",
        "reader": True,
        "writer": True,
    }


@mark_cli
def test_formats_option_is_case_insensitive() -> None:
    result = run_cli(["formats", "--format", "JSON"])
    assert_SUCCESS(result)
    assert [entry["name"] for entry in json.loads(result.output)] == BUILTIN_NAMES


@mark_cli
def test_formats_rejects_unknown_output_format() -> None:
    result = run_cli(["formats", "--format", "yaml"])
    assert_exit(result, ExitCode.USAGE_ERROR)


@mark_cli
def test_formats_ndjson_with_details() -> None:
    result = run_cli(["formats", "--format", "ndjson", "--long"])
    assert_SUCCESS(result)
    entries = [json.loads(line) for line in result.output.splitlines()]
    tsv = next(e for e in entries if e["name"] == "tsv")
    assert tsv["mime_types"] == [{"type": "text/tab-separated-values", "q": 10}]


@mark_cli
def test_formats_markdown() -> None:
    result = run_cli(["formats", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.output.startswith("# Query Result Formats")
    assert "| `turtle`" in result.output


@mark_cli
def test_formats_honors_disabled_config(tmp_path: Path) -> None:
    (tmp_path / "resultkit.toml").write_text(
        '[formats]\ndisabled = ["html", "turtle"]\nload_plugins = false\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["formats", "--format", "json"])
    assert_SUCCESS(result)
    names = [entry["name"] for entry in json.loads(result.output)]
    assert names == ["xml", "json", "table", "csv", "tsv"]


@mark_cli
def test_formats_empty_registry(tmp_path: Path) -> None:
    disabled = ", ".join(f'"{name}"' for name in BUILTIN_NAMES)
    (tmp_path / "resultkit.toml").write_text(
        f"[formats]\ndisabled = [{disabled}]\nload_plugins = false\n", encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["formats"])
    assert_SUCCESS(result)
    assert "(no result formats registered)" in result.output
