# topmark:header:start
#
#   project      : PlayFrame
#   file         : notifier.py
#   file_relpath : src/playframe/cli/notifier.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Console-backed notifier used by ``playframe replay``."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from playframe.cli.console import ConsoleLike


class ConsoleNotifier:
    """Print bridge notifications on the program console."""

    def __init__(self, console: ConsoleLike) -> None:
        self.console = console

    def info(self, text: str) -> None:
        """Print an informational notification."""
        self.console.print(self.console.tagged("info", text, fg="blue"))

    def warning(self, text: str) -> None:
        """Print a cautionary notification."""
        self.console.print(self.console.tagged("confirm", text, fg="yellow"))
