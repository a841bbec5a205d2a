# topmark:header:start
#
#   project      : PlayFrame
#   file         : replay.py
#   file_relpath : src/playframe/cli/commands/replay.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame `replay` command.

Feeds a recorded stream of wire messages (one JSON object per line) through
the message bridge, exactly as a host page would receive them from the game
frame. Dialog notifications are printed as they occur; the final score is
printed at the end.

Input lines that are blank or not valid JSON are skipped.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from playframe.cli.cmd_common import get_config, get_console, get_effective_verbosity
from playframe.cli.emitters import format_score
from playframe.cli.io import read_text_input
from playframe.cli.notifier import ConsoleNotifier
from playframe.cli.options import CONTEXT_SETTINGS, output_format_option
from playframe.config.logging import get_logger
from playframe.core.formats import OutputFormat, is_machine_format
from playframe.protocol.bridge import MessageBridge
from playframe.protocol.score import ScoreLabels

if TYPE_CHECKING:
    from collections.abc import Iterator

    from playframe.cli.console import ConsoleLike
    from playframe.config.model import Config
    from playframe.protocol.bridge import Notifier
    from playframe.protocol.score import ScoreState

logger = get_logger(__name__)


class _SilentNotifier:
    """Notifier that discards notifications (machine output)."""

    def info(self, text: str) -> None:
        logger.debug("alert: %s", text)

    def warning(self, text: str) -> None:
        logger.debug("confirm: %s", text)


def iter_wire_messages(text: str) -> Iterator[Any]:
    """Yield the decoded JSON value of each non-blank line of ``text``."""
    for lineno, line in enumerate(text.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            value: Any = json.loads(line)
        except ValueError as e:
            # JSONDecodeError, or an integer literal past the conversion limit
            logger.debug("line %d: skipped malformed JSON (%s)", lineno, e)
            continue
        yield value


@click.command(
    name="replay",
    help="Replay an NDJSON stream of game messages (PATH or '-') through the bridge.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("source", metavar="MESSAGES", type=str)
@output_format_option
def replay_command(*, source: str, output_format: OutputFormat | None) -> None:
    """Replay recorded wire messages and print the resulting score.

    Args:
        source (str): NDJSON file of wire messages, or ``-`` for STDIN.
        output_format (OutputFormat | None): Output format (default: text).
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)
    config: Config = get_config(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT
    vlevel: int = get_effective_verbosity(ctx)

    notifier: Notifier = _SilentNotifier() if is_machine_format(fmt) else ConsoleNotifier(console)

    def on_score(score: ScoreState) -> None:
        if vlevel > 0 and not is_machine_format(fmt):
            console.print(
                console.tagged("score", format_score(score, config.score.progress_max), fg="green")
            )

    bridge = MessageBridge(
        notifier,
        labels=ScoreLabels.from_config(config.score),
        on_score=on_score,
    )
    count: int = 0
    for raw in iter_wire_messages(read_text_input(source)):
        bridge.on_message(raw)
        count += 1
    logger.info("Replayed %d message(s) from %s", count, source)

    score: ScoreState = bridge.score
    if fmt.is_machine:
        console.print(
            json.dumps({"messages": count, "score": score.to_dict()}, ensure_ascii=False)
        )
    elif fmt is OutputFormat.MARKDOWN:
        console.print("| Correct | Wrong | Progress |")
        console.print("|---------|-------|----------|")
        console.print(
            f"| {score.correct} | {score.wrong} | {score.progress}/{config.score.progress_max} |"
        )
    else:
        console.print(console.styled(format_score(score, config.score.progress_max), bold=True))
