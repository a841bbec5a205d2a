# topmark:header:start
#
#   project      : PlayFrame
#   file         : console.py
#   file_relpath : src/playframe/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""User-facing output for the PlayFrame CLI.

Commands write results, notifications and warnings through a `ConsoleLike`
object stored on the Click context. Internal diagnostics about PlayFrame
itself go through `playframe.config.logging` instead; the two never mix.
"""

from __future__ import annotations

import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """Output surface used by commands and the host notifier."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write program output to stdout."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return `text` styled, or unchanged when color is off."""
        ...

    def tagged(self, tag: str, text: str, *, fg: str) -> str:
        """Return ``[tag] text`` with a colored tag."""
        ...


class ClickConsole:
    """`ConsoleLike` backed by `click.echo`.

    Args:
        enable_color: Emit ANSI styling.
        out: Standard output stream; `sys.stdout` when omitted.
        err: Error stream; `sys.stderr` when omitted.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Echo to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Echo in yellow to the error stream."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Echo in bright red to the error stream."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Apply `click.style` unless color is off."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)

    def tagged(self, tag: str, text: str, *, fg: str) -> str:
        """Return ``[tag] text`` with the tag bold and colored."""
        return f"{self.styled(f'[{tag}]', fg=fg, bold=True)} {text}"
