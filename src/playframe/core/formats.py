# topmark:header:start
#
#   project      : PlayFrame
#   file         : formats.py
#   file_relpath : src/playframe/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Output formats shared by the CLI commands.

Machine formats are colorless and suppress host notifications, so a replay
or analysis can be piped into other tools.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Rendering selected with ``--format``."""

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
    NDJSON = "ndjson"

    @property
    def is_machine(self) -> bool:
        """True for JSON and NDJSON."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)


def is_machine_format(fmt: OutputFormat | None) -> bool:
    """Return True when `fmt` is set and is a machine format."""
    return fmt is not None and fmt.is_machine
