# topmark:header:start
#
#   project      : PlayFrame
#   file         : export.py
#   file_relpath : src/playframe/cli/commands/export.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame `export` command: save a game's raw HTML as ``<title>.html``."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from playframe.cli.cmd_common import get_config, get_console
from playframe.cli.errors import PlayframeIOError
from playframe.cli.io import read_game_input
from playframe.cli.options import CONTEXT_SETTINGS
from playframe.export import write_export

if TYPE_CHECKING:
    from playframe.cli.console import ConsoleLike
    from playframe.session import GameData


@click.command(
    name="export",
    help="Write the raw HTML of a game (PATH or '-') into a directory.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", metavar="PATH", type=str)
@click.option(
    "--to",
    "directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Destination directory (created if missing).",
)
def export_command(*, source: str, directory: Path) -> None:
    """Export one game; the enhancement bundle is never included."""
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    game: GameData = read_game_input(source)
    try:
        target: Path = write_export(game, directory, get_config(ctx).export.default_title)
    except OSError as e:
        raise PlayframeIOError.from_os_error(directory, e) from e
    console.print(str(target))
