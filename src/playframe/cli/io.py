# topmark:header:start
#
#   project      : PlayFrame
#   file         : io.py
#   file_relpath : src/playframe/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Input helpers shared by CLI commands.

Commands accept a PATH or ``-`` for STDIN. Paths ending in ``.json`` are read
as generator envelopes (``{"html": ..., "gameData": {...}}``); STDIN content
is treated as an envelope when it starts with ``{``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from playframe.cli.errors import PlayframeDataError, PlayframeFileNotFoundError, PlayframeIOError
from playframe.config.logging import get_logger
from playframe.core.errors import GameDataError
from playframe.session import GameData

if TYPE_CHECKING:
    from playframe.config.logging import PlayframeLogger

logger: PlayframeLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def read_text_input(source: str) -> str:
    """Return the text of a PATH or of STDIN when ``source`` is ``-``.

    Raises:
        PlayframeFileNotFoundError: If the path does not exist.
        PlayframeDataError: If the file is not UTF-8 text.
        PlayframeIOError: If the file cannot be read.
    """
    # bytes are decoded as-is so CRLF line endings survive to the writers
    if source == STDIN_MARKER:
        try:
            return click.get_binary_stream("stdin").read().decode("utf-8")
        except UnicodeDecodeError as e:
            raise PlayframeDataError(f"stdin: not UTF-8 text ({e.reason})") from e
    path = Path(source)
    if not path.exists():
        raise PlayframeFileNotFoundError(f"No such file: {source}")
    try:
        return path.read_bytes().decode("utf-8")
    except UnicodeDecodeError as e:
        raise PlayframeDataError(f"{source}: not UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise PlayframeIOError.from_os_error(source, e) from e


def read_game_input(source: str) -> GameData:
    """Read a game from a PATH or STDIN.

    Raises:
        PlayframeDataError: If a JSON envelope is malformed.
    """
    text: str = read_text_input(source)
    if source == STDIN_MARKER:
        name: str = "stdin.json" if text.lstrip().startswith("{") else ""
    else:
        name = Path(source).name
    try:
        game: GameData = GameData.from_text(text, name=name)
    except GameDataError as e:
        raise PlayframeDataError(str(e)) from e
    logger.debug("Read game %r from %s (%d chars)", game.metadata.title, source, len(game.html))
    return game
