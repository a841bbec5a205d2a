# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/analysis/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Static heuristic analysis of game markup."""

from __future__ import annotations

from playframe.analysis.analyzer import analyze, run_rule
from playframe.analysis.rules import RULES, Rule, RuleId, get_rule

__all__ = [
    "RULES",
    "Rule",
    "RuleId",
    "analyze",
    "get_rule",
    "run_rule",
]
