# topmark:header:start
#
#   project      : PlayFrame
#   file         : model.py
#   file_relpath : src/playframe/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Diagnostics: heuristic findings about a game document.

The analyzer and the config loader both report through this model. A run
collects `Diagnostic` values in a mutable `DiagnosticLog` and publishes a
`FrozenDiagnosticLog`; the published snapshot is replaced wholesale by the
next run, never edited.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from yachalk import chalk

from playframe.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from playframe.config.logging import PlayframeLogger


logger: PlayframeLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Severity of a finding: ERROR > WARNING > INFO."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the yachalk painter for human output."""
        return _LEVEL_PAINTERS[self]


_LEVEL_PAINTERS: dict[DiagnosticLevel, Callable[[str], str]] = {
    DiagnosticLevel.INFO: chalk.blue,
    DiagnosticLevel.WARNING: chalk.yellow,
    DiagnosticLevel.ERROR: chalk.red_bright,
}


@dataclass(frozen=True)
class Diagnostic:
    """One finding.

    Attributes:
        level: Severity.
        message: Explanation and suggested fix.
        rule: Id of the analyzer rule that produced it; None for config findings.
    """

    level: DiagnosticLevel
    message: str
    rule: str | None = None


@dataclass(frozen=True)
class DiagnosticStats:
    """Per-level counts."""

    n_info: int = 0
    n_warning: int = 0
    n_error: int = 0

    @classmethod
    def of(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
        """Count `diagnostics` by level."""
        counts: dict[DiagnosticLevel, int] = dict.fromkeys(DiagnosticLevel, 0)
        for d in diagnostics:
            counts[d.level] += 1
        return cls(
            n_info=counts[DiagnosticLevel.INFO],
            n_warning=counts[DiagnosticLevel.WARNING],
            n_error=counts[DiagnosticLevel.ERROR],
        )

    @property
    def total(self) -> int:
        """Return the number of findings."""
        return self.n_info + self.n_warning + self.n_error

    def to_dict(self) -> dict[str, int]:
        """Return ``{"info": .., "warning": .., "error": ..}``."""
        return {"info": self.n_info, "warning": self.n_warning, "error": self.n_error}


S = TypeVar("S", bound=Sequence[Diagnostic])


class _DiagnosticView(Generic[S]):
    """Read-only queries shared by the mutable and frozen logs."""

    __slots__ = ()

    items: S

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def has_warning(self) -> bool:
        """Return True if any finding is a warning."""
        return any(d.level is DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if any finding is an error."""
        return any(d.level is DiagnosticLevel.ERROR for d in self.items)

    def rules(self) -> list[str]:
        """Return the ids of the rules that fired, in report order."""
        return [d.rule for d in self.items if d.rule is not None]

    def stats(self) -> DiagnosticStats:
        """Return per-level counts."""
        return DiagnosticStats.of(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return JSON-friendly counts by level."""
        return self.stats().to_dict()


@dataclass
class DiagnosticLog(_DiagnosticView[list[Diagnostic]]):
    """Diagnostics collected during one analysis or config load."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Start a log from existing diagnostics (e.g. a frozen snapshot)."""
        return cls(items=list(diagnostics))

    def add(self, diagnostic: Diagnostic) -> None:
        """Append a finding."""
        self.items.append(diagnostic)
        logger.trace(
            "diagnostic [%s] %s: %s", diagnostic.level.value, diagnostic.rule, diagnostic.message
        )

    def add_info(self, message: str, *, rule: str | None = None) -> None:
        """Append an info finding."""
        self.add(Diagnostic(DiagnosticLevel.INFO, message, rule))

    def add_warning(self, message: str, *, rule: str | None = None) -> None:
        """Append a warning finding."""
        self.add(Diagnostic(DiagnosticLevel.WARNING, message, rule))

    def add_error(self, message: str, *, rule: str | None = None) -> None:
        """Append an error finding."""
        self.add(Diagnostic(DiagnosticLevel.ERROR, message, rule))

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot."""
        return FrozenDiagnosticLog(items=tuple(self.items))


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog(_DiagnosticView[tuple[Diagnostic, ...]]):
    """Published diagnostics of a run.

    Returned by `playframe.analysis.analyze` and carried by a frozen
    `Config`. Equality is by content and order, so analyzing the same
    document twice gives equal logs.
    """

    items: tuple[Diagnostic, ...] = ()

    def __getitem__(self, index: int) -> Diagnostic:
        return self.items[index]
