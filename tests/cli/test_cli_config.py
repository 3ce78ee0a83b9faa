# topmark:header:start
#
#   project      : ResultKit
#   file         : test_cli_config.py
#   file_relpath : tests/cli/test_cli_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: configuration discovery, `--config` / `--no-config` and config errors."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

import pytest

from resultkit.cli.exit_codes import ExitCode
from resultkit.config.logging import LOG_LEVEL_ENV_VAR
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


def _names(output: str) -> list[str]:
    return [entry["name"] for entry in json.loads(output)]


@mark_cli
def test_pyproject_table_is_discovered(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.resultkit.formats]\ndisabled = ["xml"]\nload_plugins = false\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["formats", "--format", "json"])
    assert_SUCCESS(result)
    assert _names(result.output)[0] == "json"


@mark_cli
def test_no_config_ignores_local_files(tmp_path: Path) -> None:
    (tmp_path / "resultkit.toml").write_text('[formats]\ndisabled = ["xml"]\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-config", "formats", "--format", "json"])
    assert_SUCCESS(result)
    assert _names(result.output)[0] == "xml"


@mark_cli
def test_explicit_config_overrides_local(tmp_path: Path) -> None:
    (tmp_path / "resultkit.toml").write_text('[formats]\ndisabled = ["xml"]\n', encoding="utf-8")
    (tmp_path / "override.toml").write_text("[formats]\ndisabled = []\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--config", "override.toml", "formats", "--format", "json"])
    assert_SUCCESS(result)
    assert _names(result.output)[0] == "xml"


@mark_cli
@pytest.mark.parametrize(
    "text",
    ["[formats\n", "[formats]\nbogus = true\n", '[logging]\nlevel = "shouty"\n'],
)
def test_malformed_config_exit_code(tmp_path: Path, text: str) -> None:
    (tmp_path / "resultkit.toml").write_text(text, encoding="utf-8")
    result = run_cli_in(tmp_path, ["formats"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "resultkit.toml" in result.output


@mark_cli
def test_missing_config_option_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--config", "nope.toml", "formats"])
    assert_exit(result, ExitCode.USAGE_ERROR)


@mark_cli
def test_config_log_level_applies_without_flags(tmp_path: Path) -> None:
    (tmp_path / "resultkit.toml").write_text('[logging]\nlevel = "error"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["version"])
    assert_SUCCESS(result)
    assert logging.getLogger().level == logging.ERROR


@mark_cli
def test_cli_flags_beat_config_log_level(tmp_path: Path) -> None:
    (tmp_path / "resultkit.toml").write_text('[logging]\nlevel = "error"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["-vv", "version"])
    assert_SUCCESS(result)
    assert logging.getLogger().level == logging.DEBUG


@mark_cli
def test_env_beats_config_log_level(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
    (tmp_path / "resultkit.toml").write_text('[logging]\nlevel = "error"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["version"])
    assert_SUCCESS(result)
    assert logging.getLogger().level == logging.INFO
