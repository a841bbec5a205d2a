# topmark:header:start
#
#   project      : PlayFrame
#   file         : keys.py
#   file_relpath : src/playframe/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Canonical TOML section and key names for PlayFrame configuration.

These constants are the external configuration schema as it appears in
``playframe.toml`` and in ``[tool.playframe]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change. The ordering mirrors
``playframe-default.toml``.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PlayFrame configuration."""

    # pyproject.toml nesting
    SECTION_TOOL: Final[str] = "tool"
    SECTION_TOOL_PLAYFRAME: Final[str] = "playframe"

    # [layout]
    SECTION_LAYOUT: Final[str] = "layout"

    KEY_WIDTH_RATIO: Final[str] = "width_ratio"
    KEY_HEIGHT_RATIO: Final[str] = "height_ratio"
    KEY_MIN_SIZE: Final[str] = "min_size"
    KEY_CANVAS_FALLBACK_WIDTH: Final[str] = "canvas_fallback_width"
    KEY_CANVAS_FALLBACK_HEIGHT: Final[str] = "canvas_fallback_height"
    KEY_RESIZE_DELAY_MS: Final[str] = "resize_delay_ms"
    KEY_ROOT_SELECTORS: Final[str] = "root_selectors"
    KEY_CONTAINER_SELECTORS: Final[str] = "container_selectors"

    # [bridge]
    SECTION_BRIDGE: Final[str] = "bridge"

    KEY_TARGET_ORIGIN: Final[str] = "target_origin"
    KEY_CONFIRM_DEFAULT: Final[str] = "confirm_default"

    # [score]
    SECTION_SCORE: Final[str] = "score"

    KEY_CORRECT_LABELS: Final[str] = "correct_labels"
    KEY_WRONG_LABELS: Final[str] = "wrong_labels"
    KEY_PROGRESS_LABELS: Final[str] = "progress_labels"
    KEY_PROGRESS_MAX: Final[str] = "progress_max"

    # [export]
    SECTION_EXPORT: Final[str] = "export"

    KEY_DEFAULT_TITLE: Final[str] = "default_title"
