# topmark:header:start
#
#   project      : PlayFrame
#   file         : errors.py
#   file_relpath : src/playframe/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""CLI errors.

Library code raises `playframe.core.errors` types; commands translate them
into these `click.ClickException` subclasses, whose exit codes follow
`ExitCode`. Messages go through the project console when one is on the
Click context, so they honor ``--color``/``--no-color``.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from playframe.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from os import PathLike

    from playframe.cli.console import ConsoleLike


class PlayframeCliError(click.ClickException):
    """Base class; exits with `ExitCode.FAILURE`."""

    exit_code = ExitCode.FAILURE

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message through the project console when there is one."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: object = ctx.obj if ctx is not None else None
        console: ConsoleLike | None = obj.get("console") if isinstance(obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class PlayframeUsageError(PlayframeCliError):
    """Invalid combination of flags or arguments."""

    exit_code = ExitCode.USAGE_ERROR


class PlayframeConfigError(PlayframeCliError):
    """Malformed or ill-typed TOML configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class PlayframeDataError(PlayframeCliError):
    """Game input that cannot be decoded (bad envelope, non-UTF-8 text)."""

    exit_code = ExitCode.DATA_ERROR


class PlayframeFileNotFoundError(PlayframeCliError):
    """Input or config path that does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class PlayframeIOError(PlayframeCliError):
    """Failure reading input or writing an enhanced document or export."""

    exit_code = ExitCode.IO_ERROR

    @classmethod
    def from_os_error(cls, target: str | PathLike[str], err: OSError) -> PlayframeIOError:
        """Build ``"<target>: <reason>"`` from an `OSError`."""
        return cls(f"{target}: {err.strerror or err}")
