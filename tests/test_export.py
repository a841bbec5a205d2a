# topmark:header:start
#
#   project      : PlayFrame
#   file         : test_export.py
#   file_relpath : tests/test_export.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Tests for exporting raw game HTML."""

from __future__ import annotations

from pathlib import Path

from playframe.export import export_filename, write_export
from playframe.session import GameData, GameMetadata
from tests.conftest import parametrize


@parametrize(
    "title, expected",
    [
        ("Space Race", "Space Race.html"),
        ("a/b:c?", "a_b_c_.html"),
        ("  Snake  ", "Snake.html"),
        (None, "game.html"),
        ("", "game.html"),
        ("...", "game.html"),
        ("贪吃蛇", "贪吃蛇.html"),
    ],
)
def test_export_filename(title: str | None, expected: str) -> None:
    assert export_filename(GameMetadata(title=title)) == expected


def test_export_filename_custom_default() -> None:
    assert export_filename(GameMetadata(), default_title="untitled") == "untitled.html"


def test_write_export_writes_raw_html(tmp_path: Path) -> None:
    html = "<html>\r\n<head></head>\r\n<body>正确:0</body>\r\n</html>"
    game = GameData(html, GameMetadata(title="Quiz"))
    target = write_export(game, tmp_path / "out" / "nested")
    assert target == tmp_path / "out" / "nested" / "Quiz.html"
    assert target.read_bytes() == html.encode("utf-8")
    assert "<script>" not in target.read_text(encoding="utf-8")
