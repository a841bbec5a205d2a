# topmark:header:start
#
#   project      : PlayFrame
#   file         : diff.py
#   file_relpath : src/playframe/utils/diff.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Unified diff generation and colorized rendering.

Used by ``playframe inject --diff`` to show where the bundle landed.
"""

from __future__ import annotations

import difflib
from typing import Sequence

from yachalk import chalk

from playframe.config.logging import get_logger

logger = get_logger(__name__)


def unified_diff(before: str, after: str, *, fromfile: str, tofile: str) -> list[str]:
    """Return a unified diff between two texts as a list of lines (no line ends)."""
    return list(
        difflib.unified_diff(
            before.splitlines(),
            after.splitlines(),
            fromfile=fromfile,
            tofile=tofile,
            lineterm="",
        )
    )


def render_patch(patch: Sequence[str] | str, show_line_numbers: bool = False) -> str:
    """Render a colorized preview of a unified diff.

    Args:
        patch: A unified diff as **either** a sequence of lines **or** a single
            multiline string.
        show_line_numbers: Whether to prefix output with line numbers.

    Returns:
        The formatted, colorized diff preview.
    """
    lines: list[str] = patch.splitlines() if isinstance(patch, str) else list(patch)

    def process_line(line: str) -> str:
        content = line.replace("\r", "\\r")
        match line[:1]:
            case "-":
                return chalk.bold.red(content)
            case "+":
                return chalk.bold.green(content)
            case "@":
                return chalk.cyan(content)
            case _:
                return chalk.white(content)

    if show_line_numbers:
        return "".join(f"{i:04d}|{process_line(line)}\n" for i, line in enumerate(lines, 1))
    return "".join(f"{process_line(line)}\n" for line in lines)
