# topmark:header:start
#
#   project      : PlayFrame
#   file         : test_bridge.py
#   file_relpath : tests/protocol/test_bridge.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Tests for `MessageBridge` routing."""

from __future__ import annotations

import logging

import pytest

from playframe.protocol.bridge import MessageBridge
from playframe.protocol.score import ScoreState
from tests.conftest import RecordingNotifier

pytestmark = pytest.mark.protocol


def score_msg(text: str) -> dict[str, object]:
    return {"type": "game-status", "status": "score-update", "data": {"score": text}}


def test_alert_and_confirm_become_notifications() -> None:
    notifier = RecordingNotifier()
    bridge = MessageBridge(notifier)
    bridge.on_message({"type": "game-alert", "message": "You win"})
    bridge.on_message({"type": "game-confirm", "message": "Again?"})
    assert notifier.events == [("info", "You win"), ("warning", "Again?")]


def test_score_update_changes_score_and_notifies_listener() -> None:
    seen: list[ScoreState] = []
    bridge = MessageBridge(RecordingNotifier(), on_score=seen.append)
    bridge.on_message(score_msg("正确:3 错误:1 进度:5"))
    assert bridge.score == ScoreState(3, 1, 5)
    assert seen == [ScoreState(3, 1, 5)]

    bridge.on_message(score_msg("正确:3 错误:1 进度:5"))
    assert seen == [ScoreState(3, 1, 5)]

    bridge.on_message(score_msg("错误:2"))
    assert seen[-1] == ScoreState(3, 2, 5)


def test_unknown_and_malformed_messages_are_ignored() -> None:
    notifier = RecordingNotifier()
    bridge = MessageBridge(notifier, score=ScoreState(1, 0, 0))
    for raw in (
        None,
        "hello",
        {"type": "game-over"},
        {"type": "game-alert"},
        {"type": "game-status", "status": "level-up", "data": {"score": "正确:9"}},
        {"type": "game-status", "status": "score-update", "data": "正确:9"},
    ):
        bridge.on_message(raw)
    assert notifier.events == []
    assert bridge.score == ScoreState(1, 0, 0)


def test_failing_notifier_does_not_propagate(caplog: pytest.LogCaptureFixture) -> None:
    class Exploding(RecordingNotifier):
        def info(self, text: str) -> None:
            raise RuntimeError("boom")

    notifier = Exploding()
    bridge = MessageBridge(notifier)
    with caplog.at_level(logging.ERROR):
        bridge.on_message({"type": "game-alert", "message": "x"})
    assert "bridge: failed to handle" in caplog.text

    bridge.on_message({"type": "game-confirm", "message": "still alive"})
    assert notifier.events == [("warning", "still alive")]


def test_reset_score() -> None:
    bridge = MessageBridge(RecordingNotifier())
    bridge.on_message(score_msg("正确:2"))
    bridge.reset_score()
    assert bridge.score == ScoreState()
    bridge.reset_score(ScoreState(5, 5, 5))
    assert bridge.score == ScoreState(5, 5, 5)


def test_oversized_field_does_not_drop_the_rest_of_the_update() -> None:
    bridge = MessageBridge(RecordingNotifier())
    bridge.on_message(score_msg("正确:" + "9" * 5000 + " 错误:2"))
    assert bridge.score == ScoreState(correct=0, wrong=2, progress=0)
