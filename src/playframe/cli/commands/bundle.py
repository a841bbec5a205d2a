# topmark:header:start
#
#   project      : PlayFrame
#   file         : bundle.py
#   file_relpath : src/playframe/cli/commands/bundle.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame `bundle` command: print the rendered enhancement bundle."""

from __future__ import annotations

import json

import click

from playframe.cli.cmd_common import get_config, get_console
from playframe.cli.options import CONTEXT_SETTINGS, output_format_option
from playframe.core.formats import OutputFormat, is_machine_format
from playframe.enhance.bundle import EnhancementBundle


@click.command(
    name="bundle",
    help="Print the enhancement bundle (script and style) for the effective config.",
    context_settings=CONTEXT_SETTINGS,
)
@output_format_option
def bundle_command(*, output_format: OutputFormat | None) -> None:
    """Print the bundle text, or its parts as JSON."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    bundle: EnhancementBundle = EnhancementBundle.from_config(get_config(ctx))

    if is_machine_format(output_format):
        console.print(
            json.dumps(
                {"version": bundle.version, "script": bundle.script, "style": bundle.style},
                ensure_ascii=False,
            )
        )
        return
    console.print(bundle.text, nl=False)
