# topmark:header:start
#
#   project      : PlayFrame
#   file         : export.py
#   file_relpath : src/playframe/export.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Export the raw game document as a standalone HTML file.

The export always contains the original, pre-enhancement markup; the
injected bundle only makes sense inside the host.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from playframe.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from playframe.config.logging import PlayframeLogger
    from playframe.session import GameData, GameMetadata

logger: PlayframeLogger = get_logger(__name__)

# Characters that are unsafe in file names on common platforms.
_UNSAFE_FILENAME_RE: re.Pattern[str] = re.compile(r'[\\/:*?"<>|\x00-\x1f]')


def export_filename(metadata: GameMetadata, default_title: str = "game") -> str:
    """Return ``<title>.html`` for a game, falling back to ``default_title``."""
    title: str = (metadata.title or "").strip() or default_title
    safe: str = _UNSAFE_FILENAME_RE.sub("_", title).strip(". ") or default_title
    return f"{safe}.html"


def write_export(game: GameData, directory: Path, default_title: str = "game") -> Path:
    """Write the game's raw HTML into ``directory``.

    Args:
        game: The game to export.
        directory: Destination directory (created if missing).
        default_title: File stem used when the game has no title.

    Returns:
        The path of the written file.

    Raises:
        OSError: If the directory or file cannot be written.
    """
    directory.mkdir(parents=True, exist_ok=True)
    target: Path = directory / export_filename(game.metadata, default_title)
    target.write_text(game.html, encoding="utf-8", newline="")
    logger.info("Exported %s (%d chars)", target, len(game.html))
    return target
