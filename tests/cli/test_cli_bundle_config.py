# topmark:header:start
#
#   project      : PlayFrame
#   file         : test_cli_bundle_config.py
#   file_relpath : tests/cli/test_cli_bundle_config.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""CLI tests for `playframe bundle` and `playframe config`."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from playframe.cli.exit_codes import ExitCode
from playframe.config.loaders import (
    load_default_config_template_toml_text,
    load_defaults_dict,
    parse_toml_text,
)
from playframe.enhance.bundle import default_bundle
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in

pytestmark = pytest.mark.cli


def test_bundle_text() -> None:
    result = run_cli(["bundle"])
    assert_SUCCESS(result)
    assert result.stdout == default_bundle().text


def test_bundle_json() -> None:
    result = run_cli(["bundle", "--format", "json"])
    assert_SUCCESS(result)
    data = json.loads(result.stdout)
    assert data["script"] == default_bundle().script
    assert data["style"] == default_bundle().style


def test_config_prints_defaults_when_no_project_config(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["config"])
    assert_SUCCESS(result)
    assert parse_toml_text(result.stdout, source="<stdout>") == load_defaults_dict()


def test_config_defaults_template() -> None:
    result = run_cli(["config", "--defaults"])
    assert_SUCCESS(result)
    assert result.stdout == load_default_config_template_toml_text()


def test_config_merges_project_and_extra_files(tmp_path: Path) -> None:
    (tmp_path / "playframe.toml").write_text("[layout]\nmin_size = 240\n", encoding="utf-8")
    (tmp_path / "extra.toml").write_text("[layout]\nresize_delay_ms = 5\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["-v", "--config", "extra.toml", "config"])
    assert_SUCCESS(result)
    assert "# source: <defaults>" in result.stdout
    assert "# source: extra.toml" in result.stdout
    data = parse_toml_text(result.stdout, source="<stdout>")
    assert data["layout"]["min_size"] == 240
    assert data["layout"]["resize_delay_ms"] == 5


def test_unknown_keys_warn_on_stderr(tmp_path: Path) -> None:
    (tmp_path / "playframe.toml").write_text("[layout]\nzoom = 2\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["config"])
    assert_SUCCESS(result)
    assert "unknown key 'zoom' in [layout] ignored" in result.stderr


def test_invalid_config_value(tmp_path: Path) -> None:
    (tmp_path / "playframe.toml").write_text("[layout]\nwidth_ratio = 3\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["config"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "width_ratio" in result.output


def test_malformed_toml(tmp_path: Path) -> None:
    (tmp_path / "playframe.toml").write_text("[layout\n", encoding="utf-8")
    assert_exit(run_cli_in(tmp_path, ["config"]), ExitCode.CONFIG_ERROR)


def test_missing_explicit_config(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--config", "missing.toml", "config"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)
