# topmark:header:start
#
#   project      : PlayFrame
#   file         : test_cli_analyze.py
#   file_relpath : tests/cli/test_cli_analyze.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""CLI tests for `playframe analyze`."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from playframe.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_FAILURE, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import CLEAN_GAME_HTML

pytestmark = pytest.mark.cli

NO_CHARSET_HTML: str = CLEAN_GAME_HTML.replace('<meta charset="UTF-8">\n', "")


def write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_clean_document(tmp_path: Path) -> None:
    write(tmp_path, "clean.html", CLEAN_GAME_HTML)
    result = run_cli_in(tmp_path, ["analyze", "clean.html"])
    assert_SUCCESS(result)
    assert "clean.html: 0 suggestion(s)" in result.stdout


def test_missing_charset_text(tmp_path: Path) -> None:
    write(tmp_path, "game.html", NO_CHARSET_HTML)
    result = run_cli_in(tmp_path, ["analyze", "game.html"])
    assert_SUCCESS(result)
    assert "game.html: 1 suggestion(s)" in result.stdout
    assert "[warning] No UTF-8 charset declaration found." in result.stdout
    assert "(0 error, 1 warning, 0 info)" in result.stdout


def test_json_output(tmp_path: Path) -> None:
    write(tmp_path, "game.html", NO_CHARSET_HTML)
    result = run_cli_in(tmp_path, ["analyze", "--format", "json", "game.html"])
    assert_SUCCESS(result)
    payload = json.loads(result.stdout)
    assert payload["source"] == "game.html"
    assert payload["counts"] == {"info": 0, "warning": 1, "error": 0}
    assert [d["rule"] for d in payload["diagnostics"]] == ["no-utf8-charset"]
    assert payload["diagnostics"][0]["level"] == "warning"


def test_ndjson_output(tmp_path: Path) -> None:
    write(tmp_path, "frag.html", "<p>fragment</p>")
    result = run_cli_in(tmp_path, ["analyze", "--format", "ndjson", "frag.html"])
    assert_SUCCESS(result)
    records = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["kind"] for r in records] == ["diagnostic"] * 3 + ["counts"]
    assert records[-1]["warning"] == 1
    assert records[-1]["info"] == 2


def test_markdown_output(tmp_path: Path) -> None:
    write(tmp_path, "frag.html", "<p>fragment</p>")
    result = run_cli_in(tmp_path, ["analyze", "--format", "markdown", "frag.html"])
    assert_SUCCESS(result)
    assert "| Level | Rule | Message |" in result.stdout
    assert "| warning | no-utf8-charset |" in result.stdout


def test_strict_fails_on_warning(tmp_path: Path) -> None:
    write(tmp_path, "game.html", NO_CHARSET_HTML)
    assert_FAILURE(run_cli_in(tmp_path, ["analyze", "--strict", "game.html"]))


def test_strict_passes_on_info_only(tmp_path: Path) -> None:
    html = CLEAN_GAME_HTML.replace('class="game-area"', 'class="board"')
    write(tmp_path, "game.html", html)
    assert_SUCCESS(run_cli_in(tmp_path, ["analyze", "--strict", "game.html"]))


def test_json_envelope_input(tmp_path: Path) -> None:
    envelope = {"html": CLEAN_GAME_HTML, "gameData": {"title": "Catch", "generated": True}}
    write(tmp_path, "game.json", json.dumps(envelope))
    result = run_cli_in(tmp_path, ["analyze", "game.json"])
    assert_SUCCESS(result)
    assert "0 suggestion(s)" in result.stdout


def test_stdin_html_and_envelope() -> None:
    result = run_cli(["analyze", "-"], input_text=NO_CHARSET_HTML)
    assert_SUCCESS(result)
    assert "-: 1 suggestion(s)" in result.stdout

    envelope = json.dumps({"html": CLEAN_GAME_HTML})
    result = run_cli(["analyze", "-"], input_text=envelope)
    assert_SUCCESS(result)
    assert "-: 0 suggestion(s)" in result.stdout


def test_missing_file(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["analyze", "nope.html"])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert "No such file: nope.html" in result.output


def test_bad_envelope(tmp_path: Path) -> None:
    write(tmp_path, "bad.json", '{"gameData": {}}')
    result = run_cli_in(tmp_path, ["analyze", "bad.json"])
    assert_exit(result, ExitCode.DATA_ERROR)


def test_undecodable_file(tmp_path: Path) -> None:
    (tmp_path / "bin.html").write_bytes(b"\xff\xfe\xfa")
    result = run_cli_in(tmp_path, ["analyze", "bin.html"])
    assert_exit(result, ExitCode.DATA_ERROR)
