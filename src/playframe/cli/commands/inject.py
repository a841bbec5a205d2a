# topmark:header:start
#
#   project      : PlayFrame
#   file         : inject.py
#   file_relpath : src/playframe/cli/commands/inject.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame `inject` command.

Writes the enhanced document (raw markup plus the enhancement bundle) to
STDOUT or to ``--output``. ``--diff`` shows where the bundle landed instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from playframe.cli.cmd_common import color_enabled, get_config, get_console
from playframe.cli.errors import PlayframeIOError
from playframe.cli.io import read_game_input
from playframe.cli.options import CONTEXT_SETTINGS
from playframe.config.logging import get_logger
from playframe.enhance.bundle import EnhancementBundle
from playframe.enhance.injector import locate_insertion
from playframe.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from playframe.cli.console import ConsoleLike
    from playframe.enhance.injector import Insertion
    from playframe.session import GameData

logger = get_logger(__name__)


@click.command(
    name="inject",
    help="Print the enhanced game document (PATH or '-').",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", metavar="PATH", type=str)
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the enhanced document to this file instead of STDOUT.",
)
@click.option("--diff", is_flag=True, help="Show a unified diff of raw vs enhanced markup.")
@click.option("--tier", "show_tier", is_flag=True, help="Report the insertion tier on STDERR.")
def inject_command(*, source: str, output: Path | None, diff: bool, show_tier: bool) -> None:
    """Inject the enhancement bundle into one game document.

    Args:
        source (str): Path to a ``.html`` document or ``.json`` envelope, or ``-``.
        output (Path | None): Destination file; STDOUT when omitted.
        diff (bool): Show a diff instead of the document.
        show_tier (bool): Report which fallback tier placed the bundle.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    game: GameData = read_game_input(source)
    bundle: EnhancementBundle = EnhancementBundle.from_config(get_config(ctx))
    insertion: Insertion = locate_insertion(game.html, bundle)
    enhanced: str = insertion.apply(game.html)

    if show_tier:
        console.warn(f"insertion tier: {insertion.tier.value} (offset {insertion.offset})")

    if diff:
        patch: list[str] = unified_diff(
            game.html, enhanced, fromfile=f"{source} (raw)", tofile=f"{source} (enhanced)"
        )
        console.print(render_patch(patch) if color_enabled(ctx) else "\n".join(patch), nl=True)
        return

    if output is None:
        console.print(enhanced, nl=False)
        return
    try:
        output.write_text(enhanced, encoding="utf-8", newline="")
    except OSError as e:
        raise PlayframeIOError.from_os_error(output, e) from e
    logger.info("Wrote enhanced document to %s", output)
