# topmark:header:start
#
#   project      : PlayFrame
#   file         : options.py
#   file_relpath : src/playframe/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Reusable Click options for the PlayFrame group and its commands.

The group owns the global options (``-v``/``-q``, color, config); commands
only add ``--format`` through `output_format_option`.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from playframe.cli.cli_types import EnumChoiceParam
from playframe.cli.errors import PlayframeUsageError
from playframe.config.logging import TRACE_LEVEL
from playframe.core.formats import OutputFormat, is_machine_format

P = ParamSpec("P")
R = TypeVar("R")

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

# Index = number of -v flags; -vvv and beyond stay at TRACE.
_VERBOSE_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG, TRACE_LEVEL)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map ``-v``/``-q`` counts to a logging-style program-output level.

    Raises:
        PlayframeUsageError: If both flags are given.
    """
    if verbose_count and quiet_count:
        raise PlayframeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return logging.ERROR
    return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS) - 1)]


class ColorMode(str, Enum):
    """Value of ``--color``."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Decide whether ANSI color is emitted.

    Machine formats are always plain. Otherwise an explicit ``--color`` wins,
    then ``FORCE_COLOR`` and ``NO_COLOR``, then whether stdout is a terminal.

    Args:
        cli_mode: Mode from ``--color`` / ``--no-color``.
        output_format: Selected output format, if known.
        stdout_isatty: Override for terminal detection.

    Returns:
        True when color should be enabled.
    """
    if is_machine_format(output_format):
        return False
    if cli_mode in (ColorMode.ALWAYS, ColorMode.NEVER):
        return cli_mode is ColorMode.ALWAYS
    force: str | None = os.getenv("FORCE_COLOR")
    if force and force != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return stdout_isatty


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet``."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="More program output (notifications, score changes). Repeatable.",
    )(f)
    return click.option("-q", "--quiet", count=True, help="Only print errors.")(f)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color mode (default: auto).",
    )(f)
    return click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Same as --color=never.",
    )(f)


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add repeatable ``--config`` and ``--no-config``."""
    f = click.option(
        "--config",
        "-c",
        "config_paths",
        multiple=True,
        type=click.Path(dir_okay=False, path_type=str),
        help="Extra TOML config file, merged after project config. Repeatable.",
    )(f)
    return click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore playframe.toml and [tool.playframe] in the working directory.",
    )(f)


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--format`` parsed as `OutputFormat`."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help="Output format.",
    )(f)
