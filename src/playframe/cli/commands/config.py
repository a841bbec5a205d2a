# topmark:header:start
#
#   project      : PlayFrame
#   file         : config.py
#   file_relpath : src/playframe/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame `config` command.

Prints the effective configuration (defaults merged with project files and
``--config`` files) as TOML, or the annotated default template with
``--defaults``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from playframe.cli.cmd_common import get_config, get_console, get_effective_verbosity
from playframe.cli.options import CONTEXT_SETTINGS
from playframe.config.loaders import load_default_config_template_toml_text, to_toml

if TYPE_CHECKING:
    from playframe.cli.console import ConsoleLike
    from playframe.config.model import Config


@click.command(
    name="config",
    help="Print the effective configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--defaults",
    is_flag=True,
    help="Print the annotated built-in defaults instead of the effective config.",
)
def config_command(*, defaults: bool) -> None:
    """Print the effective configuration.

    Args:
        defaults (bool): Print the default template instead.
    """
    ctx = click.get_current_context()
    console: ConsoleLike = get_console(ctx)

    if defaults:
        console.print(load_default_config_template_toml_text(), nl=False)
        return

    config: Config = get_config(ctx)
    if get_effective_verbosity(ctx) > 0:
        for source in config.config_files:
            console.print(f"# source: {source}")
    console.print(to_toml(config.to_toml_dict()), nl=False)
