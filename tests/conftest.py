# topmark:header:start
#
#   project      : PlayFrame
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Pytest configuration for the PlayFrame test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides typed wrappers around pytest marks.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `playframe.config.model.MutableConfig`, then `freeze()` into a
    `playframe.config.model.Config`. Do **not** mutate a frozen `Config`; call
    `Config.thaw()` instead.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, cast

import pytest

from playframe.config import logging
from playframe.config.model import Config, MutableConfig
from playframe.session import GameData, GameMetadata

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_protocol: DecoratorType[Any] = as_typed_mark(pytest.mark.protocol)
mark_enhance: DecoratorType[Any] = as_typed_mark(pytest.mark.enhance)
mark_analysis: DecoratorType[Any] = as_typed_mark(pytest.mark.analysis)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_playframe_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure PlayFrame's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set the logging level to TRACE so failing tests show detailed output.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty project directory (no config files to discover).

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class RecordingNotifier:
    """Notifier test double recording every notification in order."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def info(self, text: str) -> None:
        self.events.append(("info", text))

    def warning(self, text: str) -> None:
        self.events.append(("warning", text))


def make_config(data: dict[str, Any] | None = None) -> Config:
    """Return a frozen `Config` built from defaults plus an optional TOML-like dict.

    Args:
        data (dict[str, Any] | None): Sections to merge, e.g. ``{"layout": {"min_size": 200}}``.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    if data:
        draft.merge_dict(data, source="<test>")
    return draft.freeze()


def make_game(html: str, title: str | None = "Test Game") -> GameData:
    """Return a `GameData` with the given markup and title."""
    return GameData(html=html, metadata=GameMetadata(title=title, type="test"))


# A well-formed game that triggers none of the analyzer rules.
CLEAN_GAME_HTML: str = """<!DOCTYPE html>
<html>
<head>
<meta charset="UTF-8">
<title>Catch</title>
</head>
<body>
<div class="game-area">
  <canvas width="400" height="300"></canvas>
  <div class="score">正确:0 错误:0 进度:0</div>
</div>
<script>
document.addEventListener('keydown', function (e) {
  if (e.key === 'ArrowLeft') { move(-1); }
  if (e.key === 'ArrowRight') { move(1); }
});
</script>
</body>
</html>
"""
