# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/protocol/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Host/frame message protocol, score reducer and bridge."""

from __future__ import annotations

from playframe.protocol.bridge import MessageBridge, Notifier
from playframe.protocol.messages import (
    AlertMessage,
    ConfirmMessage,
    MessageType,
    ProtocolMessage,
    StatusKind,
    StatusMessage,
    parse_message,
    to_wire,
)
from playframe.protocol.score import ScoreLabels, ScoreState, default_labels, parse_score

__all__ = [
    "AlertMessage",
    "ConfirmMessage",
    "MessageBridge",
    "MessageType",
    "Notifier",
    "ProtocolMessage",
    "ScoreLabels",
    "ScoreState",
    "StatusKind",
    "StatusMessage",
    "default_labels",
    "parse_message",
    "parse_score",
    "to_wire",
]
