# topmark:header:start
#
#   project      : PlayFrame
#   file         : analyzer.py
#   file_relpath : src/playframe/analysis/analyzer.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Heuristic analysis of raw game documents.

`analyze` runs every rule of the rule table over the document text and
collects the resulting diagnostics in rule order. It is pure, deterministic
and total: absence of evidence yields no diagnostic, never an exception.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from playframe.analysis.rules import RULES
from playframe.config.logging import get_logger
from playframe.diagnostic.model import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from playframe.analysis.rules import Rule
    from playframe.config.logging import PlayframeLogger
    from playframe.diagnostic.model import Diagnostic, FrozenDiagnosticLog

logger: PlayframeLogger = get_logger(__name__)


def run_rule(rule: Rule, html: str) -> Diagnostic | None:
    """Evaluate a single rule in isolation.

    Args:
        rule: The rule to evaluate.
        html: Raw document text.

    Returns:
        The rule's diagnostic, or None when it does not fire.
    """
    return rule.diagnose(html)


def analyze(html: str, rules: Iterable[Rule] = RULES) -> FrozenDiagnosticLog:
    """Return the heuristic diagnostics for a raw HTML document.

    Args:
        html: Raw (pre-enhancement) document text.
        rules: Rule table to apply; defaults to the built-in `RULES`.

    Returns:
        An immutable, ordered diagnostic log (one entry per fired rule).
    """
    log = DiagnosticLog()
    for rule in rules:
        diagnostic: Diagnostic | None = run_rule(rule, html)
        if diagnostic is not None:
            log.add(diagnostic)
    logger.debug("analyze: len=%d; fired=%s", len(html), ", ".join(log.rules()) or "-")
    return log.freeze()
