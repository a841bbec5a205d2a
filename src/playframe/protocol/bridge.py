# topmark:header:start
#
#   project      : PlayFrame
#   file         : bridge.py
#   file_relpath : src/playframe/protocol/bridge.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Host-side message bridge.

`MessageBridge.on_message` receives the data of every message event coming
from the sandboxed frame and routes it:

* ``game-alert``   → informational notification;
* ``game-confirm`` → cautionary notification (the frame already returned its
  default answer; there is no round-trip);
* ``game-status`` with ``score-update`` → score reducer.

Everything else is dropped. `on_message` never raises.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from typing_extensions import assert_never

from playframe.config.logging import get_logger
from playframe.protocol.messages import (
    AlertMessage,
    ConfirmMessage,
    StatusKind,
    StatusMessage,
    parse_message,
)
from playframe.protocol.score import ScoreState, parse_score

if TYPE_CHECKING:
    from collections.abc import Callable

    from playframe.config.logging import PlayframeLogger
    from playframe.protocol.messages import ProtocolMessage
    from playframe.protocol.score import ScoreLabels

logger: PlayframeLogger = get_logger(__name__)


class Notifier(Protocol):
    """Notification surface that replaces the frame's blocked dialogs."""

    def info(self, text: str) -> None:
        """Show an informational notification."""
        ...

    def warning(self, text: str) -> None:
        """Show a cautionary notification."""
        ...


class MessageBridge:
    """Route protocol messages to a notifier and the score reducer.

    Args:
        notifier: Notification surface.
        labels: Score label patterns; defaults to the built-in labels.
        score: Initial score.
        on_score: Optional callback invoked after each score change.
    """

    def __init__(
        self,
        notifier: Notifier,
        *,
        labels: ScoreLabels | None = None,
        score: ScoreState | None = None,
        on_score: Callable[[ScoreState], None] | None = None,
    ) -> None:
        self.notifier = notifier
        self.labels = labels
        self._score: ScoreState = score or ScoreState()
        self._on_score = on_score

    @property
    def score(self) -> ScoreState:
        """Return the last known score."""
        return self._score

    def reset_score(self, score: ScoreState | None = None) -> None:
        """Replace the score, e.g. when a different game is loaded."""
        self._score = score or ScoreState()

    def on_message(self, raw: object) -> None:
        """Handle the data of one message event; unknown shapes are ignored."""
        message: ProtocolMessage | None = parse_message(raw)
        if message is None:
            return
        try:
            self.dispatch(message)
        except Exception:
            # The host must survive a misbehaving notifier or score listener.
            logger.exception("bridge: failed to handle %r", message)

    def dispatch(self, message: ProtocolMessage) -> None:
        """Route a decoded message."""
        match message:
            case AlertMessage(text=text):
                self.notifier.info(text)
            case ConfirmMessage(text=text):
                self.notifier.warning(text)
            case StatusMessage():
                self._handle_status(message)
            case _:
                assert_never(message)

    def _handle_status(self, message: StatusMessage) -> None:
        if message.kind is not StatusKind.SCORE_UPDATE:
            logger.trace("bridge: ignored status %r", message.status)
            return
        updated: ScoreState = parse_score(self._score, message.data, self.labels)
        if updated == self._score:
            return
        self._score = updated
        if self._on_score is not None:
            self._on_score(updated)
