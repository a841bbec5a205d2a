# topmark:header:start
#
#   project      : PlayFrame
#   file         : score.py
#   file_relpath : src/playframe/protocol/score.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Score state and the reducer that updates it from status text.

The game reports the text content of its score element (e.g.
``"正确:3 错误:1 进度:5"``). `parse_score` extracts up to three labeled
numbers from it. Every field updates independently; a field whose label is
absent keeps its last known value.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import TYPE_CHECKING, Any, cast

from playframe.config.logging import get_logger
from playframe.config.model import ScoreConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

    from playframe.config.logging import PlayframeLogger

logger: PlayframeLogger = get_logger(__name__)

# Separator between a label and its number: ASCII/full-width colon or whitespace.
_SEPARATOR: str = r"[:：\s]*"


@dataclass(frozen=True)
class ScoreState:
    """Structured score owned by the host session.

    Attributes:
        correct: Count of correct answers.
        wrong: Count of wrong answers.
        progress: Progress steps, clamped to ``[0, progress_max]``.
    """

    correct: int = 0
    wrong: int = 0
    progress: int = 0

    @property
    def is_visible(self) -> bool:
        """Return True once the game has reported any answer."""
        return self.correct > 0 or self.wrong > 0

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly dict of the fields."""
        return {"correct": self.correct, "wrong": self.wrong, "progress": self.progress}


@dataclass(frozen=True)
class ScoreLabels:
    """Compiled label patterns of the three score fields."""

    correct: re.Pattern[str]
    wrong: re.Pattern[str]
    progress: re.Pattern[str]
    progress_max: int = 10

    @classmethod
    def from_config(cls, score: ScoreConfig) -> ScoreLabels:
        """Compile the label patterns of a ``[score]`` config section."""
        return _compile_labels(
            score.correct_labels, score.wrong_labels, score.progress_labels, score.progress_max
        )


def _label_pattern(labels: Iterable[str]) -> re.Pattern[str]:
    alternatives: str = "|".join(re.escape(label) for label in labels)
    # the lookbehind keeps "correct" from matching inside "incorrect"
    return re.compile(rf"(?<![A-Za-z])(?:{alternatives}){_SEPARATOR}(\d+)", re.IGNORECASE)


@lru_cache(maxsize=8)
def _compile_labels(
    correct: tuple[str, ...],
    wrong: tuple[str, ...],
    progress: tuple[str, ...],
    progress_max: int,
) -> ScoreLabels:
    return ScoreLabels(
        correct=_label_pattern(correct),
        wrong=_label_pattern(wrong),
        progress=_label_pattern(progress),
        progress_max=progress_max,
    )


def default_labels() -> ScoreLabels:
    """Return the label patterns of the built-in ``[score]`` settings."""
    return ScoreLabels.from_config(ScoreConfig())


def extract_score_text(payload: object) -> str | None:
    """Return the freeform score text carried by a ``score-update`` payload.

    The payload is ``{"score": <text>}``; anything else yields None.
    """
    if not isinstance(payload, dict):
        return None
    score: Any = cast("dict[str, Any]", payload).get("score")
    if score is None or score == "":
        return None
    try:
        return str(score)
    except ValueError:
        return None


def _match_int(pattern: re.Pattern[str], text: str) -> int | None:
    m: re.Match[str] | None = pattern.search(text)
    if m is None:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # digit run beyond the interpreter's int conversion limit
        logger.debug("score: ignored oversized number for %s", pattern.pattern[:40])
        return None


def parse_score(
    previous: ScoreState,
    payload: object,
    labels: ScoreLabels | None = None,
) -> ScoreState:
    """Return the score after applying a ``score-update`` payload.

    Pure and total: missing or malformed payloads return ``previous``.

    Args:
        previous: Last known score.
        payload: Opaque status payload, normally ``{"score": text}``.
        labels: Label patterns; defaults to `default_labels()`.

    Returns:
        The updated score.
    """
    text: str | None = extract_score_text(payload)
    if text is None:
        return previous
    lab: ScoreLabels = labels or default_labels()

    correct: int | None = _match_int(lab.correct, text)
    wrong: int | None = _match_int(lab.wrong, text)
    progress: int | None = _match_int(lab.progress, text)

    updated: ScoreState = replace(
        previous,
        correct=previous.correct if correct is None else correct,
        wrong=previous.wrong if wrong is None else wrong,
        progress=previous.progress if progress is None else min(progress, lab.progress_max),
    )
    if updated != previous:
        logger.debug("score: %s -> %s", previous.to_dict(), updated.to_dict())
    return updated
