# topmark:header:start
#
#   project      : PlayFrame
#   file         : analyze.py
#   file_relpath : src/playframe/cli/commands/analyze.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame `analyze` command.

Runs the heuristic rule table over a raw game document and prints the
resulting suggestions.

Examples:
  Human summary:

    $ playframe analyze game.html

  Machine output, failing the run on warnings:

    $ playframe analyze --format json --strict game.json
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from playframe.analysis.analyzer import analyze
from playframe.cli.cmd_common import color_enabled, get_console
from playframe.cli.emitters import emit_diagnostics
from playframe.cli.exit_codes import ExitCode
from playframe.cli.io import read_game_input
from playframe.cli.options import CONTEXT_SETTINGS, output_format_option
from playframe.config.logging import get_logger
from playframe.core.formats import OutputFormat, is_machine_format

if TYPE_CHECKING:
    from playframe.cli.console import ConsoleLike
    from playframe.diagnostic.model import FrozenDiagnosticLog
    from playframe.session import GameData

logger = get_logger(__name__)


@click.command(
    name="analyze",
    help="Print heuristic suggestions for a game document (PATH or '-').",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", metavar="PATH", type=str)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 when any warning or error is reported.",
)
@output_format_option
def analyze_command(*, source: str, strict: bool, output_format: OutputFormat | None) -> None:
    """Analyze one game document.

    Args:
        source (str): Path to a ``.html`` document or ``.json`` envelope, or ``-``.
        strict (bool): Fail on warnings/errors.
        output_format (OutputFormat | None): Output format (default: text).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    game: GameData = read_game_input(source)
    diagnostics: FrozenDiagnosticLog = analyze(game.html)

    emit_diagnostics(
        console,
        diagnostics,
        source=source,
        fmt=fmt,
        color=color_enabled(ctx) and not is_machine_format(fmt),
    )

    if strict and (diagnostics.has_warning() or diagnostics.has_error()):
        ctx.exit(ExitCode.FAILURE)
