# topmark:header:start
#
#   project      : PlayFrame
#   file         : rules.py
#   file_relpath : src/playframe/analysis/rules.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Heuristic rule table for game documents.

Each rule is a named predicate over the full document text. A rule either
fires (one diagnostic) or stays silent; rules never depend on each other.
`RULES` is ordered and append-only: new rules go at the end so the position
of earlier diagnostics never changes.

The patterns are shallow. They look at markup and inline script
as text and accept false positives and locale-dependent false negatives.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from playframe.config.logging import get_logger
from playframe.diagnostic.model import Diagnostic, DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Callable

    from playframe.config.logging import PlayframeLogger

logger: PlayframeLogger = get_logger(__name__)


class RuleId(str, Enum):
    """Stable identifiers of the analyzer rules, in evaluation order."""

    BUTTON_HINT_MISMATCH = "button-hint-mismatch"
    NO_ARROW_KEYS = "no-arrow-keys"
    DISTANCE_COLLISION = "distance-collision"
    GLOBAL_BODY_LAYOUT = "global-body-layout"
    NO_GAME_CONTAINER = "no-game-container"
    NO_UTF8_CHARSET = "no-utf8-charset"


# Instructions telling the player to use left/right buttons (zh + en).
BUTTON_HINT_RE: re.Pattern[str] = re.compile(
    r"左右按钮|点击左右|按下左右|left\s*button|right\s*button", re.IGNORECASE
)
# A <button> whose label starts with a left/right glyph.
LEFT_RIGHT_BUTTON_RE: re.Pattern[str] = re.compile(
    r"<button[^>]*>[^<]*左|<button[^>]*>[^<]*右", re.IGNORECASE
)
ARROW_KEY_RE: re.Pattern[str] = re.compile(r"ArrowLeft|ArrowRight")
BOUNDING_RECT_RE: re.Pattern[str] = re.compile(r"getBoundingClientRect\(\)")
RECT_SIDE_RE: re.Pattern[str] = re.compile(r"(left|right|top|bottom)", re.IGNORECASE)
DISTANCE_THRESHOLD_RE: re.Pattern[str] = re.compile(r"Math\.abs\([^)]*\)\s*<\s*\d+")
BODY_LAYOUT_RE: re.Pattern[str] = re.compile(
    r"body\s*\{[^}]*?(display\s*:\s*flex|overflow\s*:\s*hidden)", re.IGNORECASE
)
GAME_CONTAINER_RE: re.Pattern[str] = re.compile(
    r"(class=\"game-area\")|(id=\"game-container\")", re.IGNORECASE
)
UTF8_CHARSET_RE: re.Pattern[str] = re.compile(r"charset=.*utf-8", re.IGNORECASE)


def mentions_buttons_without_buttons(html: str) -> bool:
    """Return True when instructions mention left/right buttons that do not exist."""
    return bool(BUTTON_HINT_RE.search(html)) and not LEFT_RIGHT_BUTTON_RE.search(html)


def lacks_arrow_keys(html: str) -> bool:
    """Return True when no ArrowLeft/ArrowRight binding is present."""
    return not ARROW_KEY_RE.search(html)


def uses_distance_collision(html: str) -> bool:
    """Return True for a fixed-distance collision check without an AABB check.

    The AABB signal is a bounding-rect query plus any side keyword; the
    distance signal is ``Math.abs(...) < N``.
    """
    uses_aabb: bool = bool(BOUNDING_RECT_RE.search(html)) and bool(RECT_SIDE_RE.search(html))
    uses_distance: bool = bool(DISTANCE_THRESHOLD_RE.search(html))
    return uses_distance and not uses_aabb


def styles_body_globally(html: str) -> bool:
    """Return True when a ``body { ... }`` rule sets flex display or hidden overflow."""
    return bool(BODY_LAYOUT_RE.search(html))


def lacks_game_container(html: str) -> bool:
    """Return True when neither ``class="game-area"`` nor ``id="game-container"`` exists."""
    return not GAME_CONTAINER_RE.search(html)


def lacks_utf8_charset(html: str) -> bool:
    """Return True when no ``charset=...utf-8`` declaration is present."""
    return not UTF8_CHARSET_RE.search(html)


@dataclass(frozen=True)
class Rule:
    """A single analyzer rule.

    Attributes:
        rule_id: Stable identifier.
        level: Severity of the diagnostic emitted when the rule fires.
        message: Diagnostic text.
        fires: Predicate over the full document text.
    """

    rule_id: RuleId
    level: DiagnosticLevel
    message: str
    fires: Callable[[str], bool]

    def diagnose(self, html: str) -> Diagnostic | None:
        """Return this rule's diagnostic for ``html``, or None if it stays silent."""
        if not self.fires(html):
            return None
        logger.debug("rule %s fired", self.rule_id.value)
        return Diagnostic(self.level, self.message, self.rule_id.value)


RULES: tuple[Rule, ...] = (
    Rule(
        RuleId.BUTTON_HINT_MISMATCH,
        DiagnosticLevel.WARNING,
        "Instructions mention left/right buttons, but no matching clickable button was "
        "found. Add visible left/right buttons and keep arrow-key support.",
        mentions_buttons_without_buttons,
    ),
    Rule(
        RuleId.NO_ARROW_KEYS,
        DiagnosticLevel.INFO,
        "No ArrowLeft/ArrowRight key handling detected. Supporting the keyboard as well "
        "improves playability.",
        lacks_arrow_keys,
    ),
    Rule(
        RuleId.DISTANCE_COLLISION,
        DiagnosticLevel.WARNING,
        "Collision detection appears to use a fixed distance threshold. Prefer an "
        "axis-aligned bounding box (AABB) intersection for stable hits.",
        uses_distance_collision,
    ),
    Rule(
        RuleId.GLOBAL_BODY_LAYOUT,
        DiagnosticLevel.INFO,
        "Global layout (flex/overflow) is applied to <body>. Scope layout to the game "
        "container (e.g. .game-area or #game-container) to avoid affecting the host page.",
        styles_body_globally,
    ),
    Rule(
        RuleId.NO_GAME_CONTAINER,
        DiagnosticLevel.INFO,
        "No standard game container (.game-area or #game-container) found. Add one to "
        "enable adaptive sizing and style isolation.",
        lacks_game_container,
    ),
    Rule(
        RuleId.NO_UTF8_CHARSET,
        DiagnosticLevel.WARNING,
        'No UTF-8 charset declaration found. Add <meta charset="UTF-8"> to <head>.',
        lacks_utf8_charset,
    ),
)


def get_rule(rule_id: RuleId | str) -> Rule:
    """Return the rule registered under ``rule_id``.

    Raises:
        KeyError: If no such rule exists.
    """
    key: str = rule_id.value if isinstance(rule_id, RuleId) else rule_id
    for rule in RULES:
        if rule.rule_id.value == key:
            return rule
    raise KeyError(key)
