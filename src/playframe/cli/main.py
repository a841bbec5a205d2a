# topmark:header:start
#
#   project      : PlayFrame
#   file         : main.py
#   file_relpath : src/playframe/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""PlayFrame CLI entry point.

Group-level options (verbosity, color, config files) are resolved once in
`init_common_state` and placed into ``ctx.obj``; subcommands read them back
through `playframe.cli.cmd_common`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from playframe.cli.commands.analyze import analyze_command
from playframe.cli.commands.bundle import bundle_command
from playframe.cli.commands.config import config_command
from playframe.cli.commands.export import export_command
from playframe.cli.commands.inject import inject_command
from playframe.cli.commands.replay import replay_command
from playframe.cli.commands.version import version_command
from playframe.cli.console import ClickConsole
from playframe.cli.errors import PlayframeConfigError, PlayframeFileNotFoundError
from playframe.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from playframe.config.loaders import discover_config_files
from playframe.config.logging import get_logger, resolve_env_log_level, setup_logging
from playframe.config.model import Config, MutableConfig
from playframe.core.errors import ConfigError

if TYPE_CHECKING:
    from playframe.cli.console import ConsoleLike

logger = get_logger(__name__)


def load_cli_config(*, config_paths: tuple[str, ...], no_config: bool) -> Config:
    """Build the effective config for one CLI invocation.

    Args:
        config_paths (tuple[str, ...]): Explicit ``--config`` files, merged last.
        no_config (bool): Skip discovery of project config in the working directory.

    Returns:
        Config: The frozen configuration.

    Raises:
        PlayframeFileNotFoundError: If an explicit config file does not exist.
        PlayframeConfigError: If a config file is malformed or ill-typed.
    """
    extra: list[Path] = [Path(p) for p in config_paths]
    for path in extra:
        if not path.is_file():
            raise PlayframeFileNotFoundError(f"Config file not found: {path}")
    discovered: list[Path] = [] if no_config else discover_config_files()
    try:
        draft: MutableConfig = MutableConfig.load_merged(discovered=discovered, extra=extra)
    except ConfigError as e:
        raise PlayframeConfigError(str(e)) from e
    config: Config = draft.freeze()
    logger.debug("Effective config sources: %s", ", ".join(config.config_files))
    return config


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, color, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): Explicit ``--config`` files.
        no_config (bool): Whether project config discovery is disabled.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console

    config: Config = load_cli_config(config_paths=config_paths, no_config=no_config)
    ctx.obj["config"] = config
    for diag in config.diagnostics:
        console.warn(f"[{diag.level.value}] {diag.message}")


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="PlayFrame: analyze, enhance and host self-contained HTML games.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Entry point for the PlayFrame CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_paths=config_paths,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'playframe analyze PATH' to review a game document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_command)

cli.add_command(bundle_command)

cli.add_command(analyze_command)

cli.add_command(inject_command)

cli.add_command(replay_command)

cli.add_command(export_command)

if __name__ == "__main__":
    cli()
