# topmark:header:start
#
#   project      : PlayFrame
#   file         : injector.py
#   file_relpath : src/playframe/enhance/injector.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Splice the enhancement bundle into a raw game document.

Generated games are frequently fragments rather than full documents, so the
insertion point is chosen with a three-tier fallback:

1. ``HEAD_CLOSE``: immediately before the first ``</head>``;
2. ``BODY_OPEN``: a synthesized ``<head>`` wrapping the bundle immediately
   before the first ``<body>``;
3. ``PREPEND``: the bundle followed by the untouched document.

Exactly one insertion point is used and every byte outside it is preserved.
Markers are matched literally.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from playframe.config.logging import get_logger
from playframe.constants import BODY_OPEN_MARKER, HEAD_CLOSE_MARKER, HEAD_OPEN_MARKER
from playframe.enhance.bundle import default_bundle

if TYPE_CHECKING:
    from playframe.config.logging import PlayframeLogger
    from playframe.enhance.bundle import EnhancementBundle

logger: PlayframeLogger = get_logger(__name__)


class InsertionTier(str, Enum):
    """Which fallback tier placed the bundle."""

    HEAD_CLOSE = "head-close"
    BODY_OPEN = "body-open"
    PREPEND = "prepend"


@dataclass(frozen=True)
class Insertion:
    """Where and what to splice into a document.

    Attributes:
        tier: The fallback tier that applied.
        offset: Character offset of the splice in the original document.
        fragment: Text inserted at ``offset``.
    """

    tier: InsertionTier
    offset: int
    fragment: str

    def apply(self, html: str) -> str:
        """Return ``html`` with ``fragment`` spliced in at ``offset``."""
        return html[: self.offset] + self.fragment + html[self.offset :]


def locate_insertion(html: str, bundle: EnhancementBundle | None = None) -> Insertion:
    """Return the single insertion for ``html`` according to the fallback tiers.

    Args:
        html: Raw document text.
        bundle: Bundle to insert; defaults to `default_bundle()`.

    Returns:
        The insertion to apply.
    """
    text: str = (bundle or default_bundle()).text

    head_close: int = html.find(HEAD_CLOSE_MARKER)
    if head_close != -1:
        return Insertion(InsertionTier.HEAD_CLOSE, head_close, text)

    body_open: int = html.find(BODY_OPEN_MARKER)
    if body_open != -1:
        wrapped: str = f"{HEAD_OPEN_MARKER}{text}{HEAD_CLOSE_MARKER}"
        return Insertion(InsertionTier.BODY_OPEN, body_open, wrapped)

    return Insertion(InsertionTier.PREPEND, 0, text)


def inject(html: str, bundle: EnhancementBundle | None = None) -> str:
    """Return ``html`` enhanced with the bundle.

    Pure and deterministic: the same input and bundle always produce the same
    output.

    Args:
        html: Raw document text.
        bundle: Bundle to insert; defaults to `default_bundle()`.

    Returns:
        The enhanced document.
    """
    insertion: Insertion = locate_insertion(html, bundle)
    logger.debug(
        "inject: tier=%s offset=%d len=%d", insertion.tier.value, insertion.offset, len(html)
    )
    return insertion.apply(html)
