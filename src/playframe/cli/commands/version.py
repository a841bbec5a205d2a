# topmark:header:start
#
#   project      : PlayFrame
#   file         : version.py
#   file_relpath : src/playframe/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame `version` command.

Prints the PlayFrame version as installed in the active Python environment,
together with the version of the enhancement bundle it injects.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from playframe.cli.cmd_common import get_console, get_effective_verbosity
from playframe.cli.options import output_format_option
from playframe.constants import ENHANCEMENT_BUNDLE_VERSION, PLAYFRAME_VERSION
from playframe.core.formats import OutputFormat

if TYPE_CHECKING:
    from playframe.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of PlayFrame.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of PlayFrame.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt.is_machine:
        console.print(
            json.dumps({"version": PLAYFRAME_VERSION, "bundle": ENHANCEMENT_BUNDLE_VERSION})
        )
    elif fmt is OutputFormat.MARKDOWN:
        console.print("# PlayFrame Version\n")
        console.print(f"**PlayFrame version: {PLAYFRAME_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("PlayFrame version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(PLAYFRAME_VERSION, bold=True)}")
        console.print(f"    enhancement bundle v{ENHANCEMENT_BUNDLE_VERSION}")
    else:
        console.print(console.styled(PLAYFRAME_VERSION, bold=True))
