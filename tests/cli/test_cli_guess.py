# topmark:header:start
#
#   project      : ResultKit
#   file         : test_cli_guess.py
#   file_relpath : tests/cli/test_cli_guess.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `guess` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from resultkit.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
@parametrize(
    ("filename", "content", "expected"),
    [
        ("r.srj", "", "json"),
        ("r.srx", "", "xml"),
        ("r.tsv", "?a\t?b\n", "tsv"),
        ("r.csv", "a,b\r\n", "csv"),
        ("noext", '{"head": {"vars": ["x"]}}', "json"),
    ],
)
def test_guess_by_name_and_content(
    tmp_path: Path, filename: str, content: str, expected: str
) -> None:
    (tmp_path / filename).write_text(content, encoding="utf-8")
    result = run_cli_in(tmp_path, ["guess", filename])
    assert_SUCCESS(result)
    assert result.output.strip() == expected


@mark_cli
def test_guess_mime_type_overrides_suffix(tmp_path: Path) -> None:
    (tmp_path / "r.srj").write_text("", encoding="utf-8")
    result = run_cli_in(
        tmp_path, ["guess", "r.srj", "--mime-type", "application/sparql-results+xml"]
    )
    assert_SUCCESS(result)
    assert result.output.strip() == "xml"


@mark_cli
def test_guess_by_syntax_uri(tmp_path: Path) -> None:
    (tmp_path / "data").write_text("", encoding="utf-8")
    result = run_cli_in(
        tmp_path, ["guess", "data", "--uri", "http://www.w3.org/ns/formats/SPARQL_Results_TSV"]
    )
    assert_SUCCESS(result)
    assert result.output.strip() == "tsv"


@mark_cli
def test_guess_verbose_shows_path(tmp_path: Path) -> None:
    (tmp_path / "r.srj").write_text("", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-color", "-v", "guess", "r.srj"])
    assert_SUCCESS(result)
    assert "r.srj: json" in result.output


@mark_cli
def test_guess_without_evidence(tmp_path: Path) -> None:
    (tmp_path / "blob.bin").write_bytes(b"\x00\x01\x02")
    result = run_cli_in(tmp_path, ["guess", "blob.bin"])
    assert_exit(result, ExitCode.NO_GUESS)
    assert "Cannot guess" in result.output


@mark_cli
def test_guess_missing_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["guess", "absent.srj"])
    assert_exit(result, ExitCode.USAGE_ERROR)
