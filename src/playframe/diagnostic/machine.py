# topmark:header:start
#
#   project      : PlayFrame
#   file         : machine.py
#   file_relpath : src/playframe/diagnostic/machine.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Machine-readable payloads for diagnostics.

JSON-friendly dataclasses used by the CLI's JSON and NDJSON emitters:

- `MachineDiagnosticEntry` represents a single diagnostic.
- `MachineDiagnosticCounts` represents aggregated per-level counts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from playframe.diagnostic.model import DiagnosticStats

if TYPE_CHECKING:
    from collections.abc import Iterable

    from playframe.diagnostic.model import Diagnostic


@dataclass(slots=True)
class MachineDiagnosticEntry:
    """Machine-readable diagnostic entry.

    Attributes:
        level: Severity level string (e.g. "info", "warning", "error").
        message: Human-readable diagnostic message.
        rule: Producing rule identifier, or None.
    """

    level: str
    message: str
    rule: str | None = None

    @classmethod
    def from_diagnostic(cls, d: Diagnostic) -> MachineDiagnosticEntry:
        """Create a machine-readable entry from a diagnostic."""
        return cls(level=d.level.value, message=d.message, rule=d.rule)

    def to_dict(self) -> dict[str, str | None]:
        """Return a JSON-friendly dict of this diagnostic entry."""
        return {
            "level": self.level,
            "message": self.message,
            "rule": self.rule,
        }


@dataclass(slots=True)
class MachineDiagnosticCounts:
    """Aggregated per-level counts for machine output."""

    info: int
    warning: int
    error: int

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> MachineDiagnosticCounts:
        """Compute per-level counts from an iterable of diagnostics."""
        stats: DiagnosticStats = DiagnosticStats.of(diagnostics)
        return cls(info=stats.n_info, warning=stats.n_warning, error=stats.n_error)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly dict of the per-level counts."""
        return {
            "info": self.info,
            "warning": self.warning,
            "error": self.error,
        }
