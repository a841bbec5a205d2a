# topmark:header:start
#
#   project      : PlayFrame
#   file         : messages.py
#   file_relpath : src/playframe/protocol/messages.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Wire messages exchanged between the sandboxed game and the host.

The wire format is a plain JSON-like object::

    {"type": "game-alert" | "game-confirm" | "game-status",
     "message"?: str, "status"?: str, "data"?: object}

This shape is the only contract with already-injected content and must stay
stable. On the host side it is decoded into a closed tagged union
(`AlertMessage | ConfirmMessage | StatusMessage`). Decoding is total:
anything that does not fit the union decodes to ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Union, cast

from playframe.config.logging import get_logger

if TYPE_CHECKING:
    from playframe.config.logging import PlayframeLogger

logger: PlayframeLogger = get_logger(__name__)


class MessageType(str, Enum):
    """Discriminant values of the ``type`` field."""

    ALERT = "game-alert"
    CONFIRM = "game-confirm"
    STATUS = "game-status"


class StatusKind(str, Enum):
    """Known ``status`` sub-kinds of a status message."""

    SCORE_UPDATE = "score-update"


@dataclass(frozen=True)
class AlertMessage:
    """A replaced ``alert()`` call."""

    text: str


@dataclass(frozen=True)
class ConfirmMessage:
    """A replaced ``confirm()`` call; the frame already answered with its default."""

    text: str


@dataclass(frozen=True)
class StatusMessage:
    """A ``sendGameStatus(status, data)`` call.

    Attributes:
        status: Sub-kind tag, e.g. ``"score-update"``. Unknown tags are kept.
        data: Opaque payload.
    """

    status: str
    data: Any = None

    @property
    def kind(self) -> StatusKind | None:
        """Return the known sub-kind, or None for unrecognized tags."""
        try:
            return StatusKind(self.status)
        except ValueError:
            return None


ProtocolMessage = Union[AlertMessage, ConfirmMessage, StatusMessage]


def parse_message(raw: object) -> ProtocolMessage | None:
    """Decode a wire object into a protocol message.

    Args:
        raw: The ``data`` of a received message event.

    Returns:
        The decoded message, or None for unknown discriminants and missing fields.
    """
    if not isinstance(raw, dict):
        logger.trace("parse_message: dropped non-object %r", type(raw).__name__)
        return None
    obj: dict[str, Any] = cast("dict[str, Any]", raw)
    try:
        msg_type = MessageType(obj.get("type"))
    except ValueError:
        logger.trace("parse_message: dropped unknown type %r", obj.get("type"))
        return None

    if msg_type in (MessageType.ALERT, MessageType.CONFIRM):
        text: Any = obj.get("message")
        if text is None:
            logger.trace("parse_message: dropped %s without message", msg_type.value)
            return None
        if msg_type is MessageType.ALERT:
            return AlertMessage(str(text))
        return ConfirmMessage(str(text))

    status: Any = obj.get("status")
    if not isinstance(status, str):
        logger.trace("parse_message: dropped status without sub-kind")
        return None
    return StatusMessage(status=status, data=obj.get("data"))


def to_wire(message: ProtocolMessage) -> dict[str, Any]:
    """Encode a protocol message into its wire object."""
    match message:
        case AlertMessage(text=text):
            return {"type": MessageType.ALERT.value, "message": text}
        case ConfirmMessage(text=text):
            return {"type": MessageType.CONFIRM.value, "message": text}
        case StatusMessage(status=status, data=data):
            return {"type": MessageType.STATUS.value, "status": status, "data": data}
