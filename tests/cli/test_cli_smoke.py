# topmark:header:start
#
#   project      : PlayFrame
#   file         : test_cli_smoke.py
#   file_relpath : tests/cli/test_cli_smoke.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Smoke tests for the PlayFrame CLI group and the `version` command."""

from __future__ import annotations

import json

import pytest

from playframe.cli.exit_codes import ExitCode
from playframe.constants import ENHANCEMENT_BUNDLE_VERSION, PLAYFRAME_VERSION
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import parametrize

pytestmark = pytest.mark.cli


def test_help_lists_commands() -> None:
    result = run_cli(["--help"])
    assert_SUCCESS(result)
    for name in ("analyze", "inject", "replay", "export", "bundle", "config", "version"):
        assert name in result.stdout


def test_no_subcommand_prints_hint_and_help() -> None:
    result = run_cli([])
    assert_SUCCESS(result)
    assert "Hint: use 'playframe analyze PATH'" in result.stdout
    assert "Usage:" in result.stdout


@parametrize("command", ["analyze", "inject", "replay", "export", "bundle", "config", "version"])
def test_subcommand_help(command: str) -> None:
    result = run_cli([command, "-h"])
    assert_SUCCESS(result)
    assert "Usage:" in result.stdout


def test_version_text() -> None:
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == PLAYFRAME_VERSION


def test_version_verbose() -> None:
    result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert f"enhancement bundle v{ENHANCEMENT_BUNDLE_VERSION}" in result.stdout


def test_version_json() -> None:
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {
        "version": PLAYFRAME_VERSION,
        "bundle": ENHANCEMENT_BUNDLE_VERSION,
    }


def test_version_markdown() -> None:
    result = run_cli(["version", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.stdout.startswith("# PlayFrame Version")


def test_verbose_and_quiet_are_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_unknown_format_is_rejected() -> None:
    result = run_cli(["version", "--format", "yaml"])
    assert result.exit_code != ExitCode.SUCCESS
