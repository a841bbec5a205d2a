# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Diagnostic primitives and helpers.

Design:
    - Diagnostics are represented by immutable `Diagnostic` instances.
    - During a run, diagnostics are accumulated in a mutable `DiagnosticLog`.
    - Results are published as an immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from playframe.diagnostic.machine import MachineDiagnosticCounts, MachineDiagnosticEntry
from playframe.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticStats",
    "FrozenDiagnosticLog",
    "MachineDiagnosticCounts",
    "MachineDiagnosticEntry",
]
