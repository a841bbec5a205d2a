# topmark:header:start
#
#   project      : PlayFrame
#   file         : cmd_common.py
#   file_relpath : src/playframe/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Helpers shared by PlayFrame subcommands to read group-level state."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, cast

from playframe.config.model import Config

if TYPE_CHECKING:
    import click

    from playframe.cli.console import ConsoleLike


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the group callback."""
    return cast("ConsoleLike", ctx.obj["console"])


def get_config(ctx: click.Context) -> Config:
    """Return the frozen config stored on the context (built-in defaults if absent)."""
    config: object = ctx.obj.get("config")
    return config if isinstance(config, Config) else Config()


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return program-output verbosity: 0 = normal, 1+ = verbose, -1 = quiet."""
    level: int = int(ctx.obj.get("verbosity_level", logging.WARNING))
    if level <= logging.DEBUG:
        return 2
    if level <= logging.INFO:
        return 1
    if level >= logging.ERROR:
        return -1
    return 0


def color_enabled(ctx: click.Context) -> bool:
    """Return whether human output may use color."""
    return bool(ctx.obj.get("color_enabled", False))
