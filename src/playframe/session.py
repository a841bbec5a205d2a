# topmark:header:start
#
#   project      : PlayFrame
#   file         : session.py
#   file_relpath : src/playframe/session.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Host session: the game currently loaded into the sandboxed frame.

`GameSession` wires the pipeline the host runs for every game::

    raw HTML ──analyze──▶ diagnostics
             ──inject───▶ srcdoc (handed to the isolated frame)
    frame ──messages──▶ MessageBridge ──▶ notifier / ScoreState

Loading a game replaces diagnostics and srcdoc wholesale; the frame is torn
down and recreated, so no per-load cancellation is needed. The score belongs
to the session: it survives `reload()` of the same game and is reset when a
different game is loaded.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

from playframe.analysis.analyzer import analyze
from playframe.config.logging import get_logger
from playframe.config.model import Config
from playframe.core.errors import GameDataError
from playframe.diagnostic.model import FrozenDiagnosticLog
from playframe.enhance.bundle import EnhancementBundle
from playframe.enhance.injector import inject
from playframe.protocol.bridge import MessageBridge
from playframe.protocol.score import ScoreLabels, ScoreState

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from playframe.config.logging import PlayframeLogger
    from playframe.protocol.bridge import Notifier

logger: PlayframeLogger = get_logger(__name__)


class GameStatus(str, Enum):
    """Lifecycle of the sandboxed frame as seen by the host."""

    EMPTY = "empty"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class GameMetadata:
    """Display-only metadata; never transformed by the core."""

    title: str | None = None
    type: str | None = None
    generated: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameMetadata:
        """Build metadata from the ``gameData`` object of a game envelope."""
        title: Any = data.get("title")
        kind: Any = data.get("type")
        return cls(
            title=str(title) if title else None,
            type=str(kind) if kind else None,
            generated=data.get("generated") is True,
        )


@dataclass(frozen=True)
class GameData:
    """A game as supplied by the generator.

    Attributes:
        html: Raw (pre-enhancement) markup.
        metadata: Display metadata.
    """

    html: str
    metadata: GameMetadata = field(default_factory=GameMetadata)

    @classmethod
    def from_envelope(cls, data: object) -> GameData:
        """Build a game from the generator's JSON envelope.

        The envelope is ``{"html": str, "gameData": {"title", "type", "generated"}}``.

        Raises:
            GameDataError: If the envelope is not an object or ``html`` is not a string.
        """
        if not isinstance(data, dict):
            raise GameDataError("game envelope must be a JSON object")
        obj: dict[str, Any] = cast("dict[str, Any]", data)
        html: Any = obj.get("html")
        if not isinstance(html, str):
            raise GameDataError("game envelope has no 'html' string")
        meta: Any = obj.get("gameData")
        metadata = (
            GameMetadata.from_dict(cast("dict[str, Any]", meta))
            if isinstance(meta, dict)
            else GameMetadata()
        )
        return cls(html=html, metadata=metadata)

    @classmethod
    def from_text(cls, text: str, *, name: str = "") -> GameData:
        """Build a game from file content; ``.json`` names are read as envelopes.

        Raises:
            GameDataError: If a JSON envelope cannot be decoded.
        """
        if name.lower().endswith(".json"):
            try:
                return cls.from_envelope(json.loads(text))
            except json.JSONDecodeError as e:
                raise GameDataError(f"{name}: invalid JSON: {e}") from e
        return cls(html=text, metadata=GameMetadata(title=Path(name).stem or None))

    @classmethod
    def from_path(cls, path: Path) -> GameData:
        """Read a game from a ``.html`` document or a ``.json`` envelope.

        Raises:
            GameDataError: If the file cannot be read or decoded.
        """
        try:
            text: str = path.read_bytes().decode("utf-8")
        except UnicodeDecodeError as e:
            raise GameDataError(f"{path}: not UTF-8 text: {e}") from e
        except OSError as e:
            raise GameDataError(f"{path}: {e.strerror or e}") from e
        return cls.from_text(text, name=path.name)


class GameSession:
    """The host's view of one sandboxed game frame.

    Args:
        notifier: Notification surface for replaced dialogs.
        config: Frozen configuration; defaults to built-in settings.
        on_score: Optional callback invoked after each score change.
    """

    def __init__(
        self,
        notifier: Notifier,
        config: Config | None = None,
        *,
        on_score: Callable[[ScoreState], None] | None = None,
    ) -> None:
        self.config: Config = config or Config()
        self.bundle: EnhancementBundle = EnhancementBundle.from_config(self.config)
        self.bridge = MessageBridge(
            notifier,
            labels=ScoreLabels.from_config(self.config.score),
            on_score=on_score,
        )
        self.game: GameData | None = None
        self.status: GameStatus = GameStatus.EMPTY
        self.diagnostics: FrozenDiagnosticLog = FrozenDiagnosticLog()
        self.srcdoc: str | None = None

    @property
    def score(self) -> ScoreState:
        """Return the session's last known score."""
        return self.bridge.score

    def load(self, game: GameData) -> str | None:
        """Load a game: analyze it, inject the bundle and publish the srcdoc.

        Args:
            game: The game to load.

        Returns:
            The enhanced document for the frame, or None for an empty game.
        """
        if game != self.game:
            self.bridge.reset_score()
        self.game = game
        if not game.html:
            self.status = GameStatus.EMPTY
            self.diagnostics = FrozenDiagnosticLog()
            self.srcdoc = None
            return None

        self.status = GameStatus.LOADING
        self.diagnostics = analyze(game.html)
        self.srcdoc = inject(game.html, self.bundle)
        logger.info(
            "Loaded game %r: %d diagnostic(s)",
            game.metadata.title,
            len(self.diagnostics),
        )
        return self.srcdoc

    def reload(self) -> str | None:
        """Re-inject the current game, keeping the score."""
        if self.game is None:
            return None
        return self.load(self.game)

    def mark_ready(self) -> None:
        """Record that the frame finished loading the srcdoc."""
        if self.status is GameStatus.LOADING:
            self.status = GameStatus.READY

    def mark_error(self) -> None:
        """Record that the frame failed to load."""
        self.status = GameStatus.ERROR

    def on_message(self, raw: object) -> None:
        """Forward one message event's data to the bridge."""
        self.bridge.on_message(raw)
