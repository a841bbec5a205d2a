# topmark:header:start
#
#   project      : PlayFrame
#   file         : emitters.py
#   file_relpath : src/playframe/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Render diagnostics and scores in the supported output formats."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from playframe.core.formats import OutputFormat
from playframe.diagnostic.machine import MachineDiagnosticCounts, MachineDiagnosticEntry

if TYPE_CHECKING:
    from playframe.cli.console import ConsoleLike
    from playframe.diagnostic.model import FrozenDiagnosticLog
    from playframe.protocol.score import ScoreState


def emit_diagnostics(
    console: ConsoleLike,
    diagnostics: FrozenDiagnosticLog,
    *,
    source: str,
    fmt: OutputFormat,
    color: bool,
) -> None:
    """Print the diagnostics of one document.

    Args:
        console: Program-output console.
        diagnostics: Analyzer result.
        source: Input name shown in the output.
        fmt: Output format.
        color: Whether severity colors may be used (human formats only).
    """
    entries: list[dict[str, Any]] = [
        MachineDiagnosticEntry.from_diagnostic(d).to_dict() for d in diagnostics
    ]
    counts: dict[str, int] = MachineDiagnosticCounts.from_iterable(diagnostics).to_dict()

    if fmt is OutputFormat.JSON:
        payload = {"source": source, "diagnostics": entries, "counts": counts}
        console.print(json.dumps(payload, ensure_ascii=False, indent=2))
        return
    if fmt is OutputFormat.NDJSON:
        for entry in entries:
            record: dict[str, Any] = {"kind": "diagnostic", "source": source, **entry}
            console.print(json.dumps(record, ensure_ascii=False))
        console.print(json.dumps({"kind": "counts", "source": source, **counts}))
        return
    if fmt is OutputFormat.MARKDOWN:
        console.print(f"# Suggestions for `{source}`\n")
        if not entries:
            console.print("No suggestions.")
            return
        console.print("| Level | Rule | Message |")
        console.print("|-------|------|---------|")
        for d in diagnostics:
            console.print(f"| {d.level.value} | {d.rule or ''} | {d.message} |")
        return

    console.print(console.styled(f"{source}: {len(diagnostics)} suggestion(s)", bold=True))
    for d in diagnostics:
        label: str = f"[{d.level.value}]"
        if color:
            label = d.level.color(label)
        console.print(f"  {label} {d.message}")
    if diagnostics:
        console.print(
            f"  ({counts['error']} error, {counts['warning']} warning, {counts['info']} info)"
        )


def format_score(score: ScoreState, progress_max: int = 10) -> str:
    """Return the human score line, e.g. ``correct: 3  wrong: 1  progress: 5/10``."""
    return (
        f"correct: {score.correct}  wrong: {score.wrong}  "
        f"progress: {score.progress}/{progress_max}"
    )
