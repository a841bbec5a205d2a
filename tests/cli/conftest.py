# topmark:header:start
#
#   project      : PlayFrame
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Helpers for driving the ``playframe`` CLI through `click.testing.CliRunner`.

Project config discovery reads the working directory, so tests either pass
``--no-config`` (`run_cli`) or run inside a scratch directory (`run_cli_in`).
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from playframe.cli.exit_codes import ExitCode
from playframe.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

StdinLike = str | bytes | IO[Any] | None


def _invoke(argv: Sequence[str], input_text: StdinLike) -> Result:
    return CliRunner().invoke(cli, list(argv), input=input_text)


def run_cli_in(tmp_path: Path, argv: Sequence[str], *, input_text: StdinLike = None) -> Result:
    """Invoke the CLI with `tmp_path` as working directory.

    Relative paths and ``playframe.toml`` / ``pyproject.toml`` discovery
    resolve against `tmp_path`::

        res = run_cli_in(tmp_path, ["analyze", "game.html"])
    """
    cwd: str = os.getcwd()
    os.chdir(tmp_path)
    try:
        return _invoke(argv, input_text)
    finally:
        os.chdir(cwd)


def run_cli(argv: Sequence[str], *, input_text: StdinLike = None) -> Result:
    """Invoke the CLI with ``--no-config`` in the current directory.

    For ``--help``, ``version``, STDIN input and absolute paths.
    """
    return _invoke(["--no-config", *argv], input_text)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert the exit code, showing the combined output on failure."""
    assert result.exit_code == code, (result.exit_code, result.output)


def assert_SUCCESS(result: Result) -> None:
    assert_exit(result, ExitCode.SUCCESS)


def assert_FAILURE(result: Result) -> None:
    assert_exit(result, ExitCode.FAILURE)


def assert_USAGE_ERROR(result: Result) -> None:
    assert_exit(result, ExitCode.USAGE_ERROR)
