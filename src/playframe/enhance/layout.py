# topmark:header:start
#
#   project      : PlayFrame
#   file         : layout.py
#   file_relpath : src/playframe/enhance/layout.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Python model of the adaptive layout routine.

The routine itself runs as JavaScript inside the sandboxed frame (see
`playframe.enhance.bundle`). This module implements the same selection and
sizing policy over a small element-box tree so the policy can be reasoned
about and tested without a browser, and so hosts can precompute the layout
for a known viewport.

Game-root selection (first match wins):

1. the first element, in document order, matching any canonical selector;
2. the visible, non-fixed, non-script/style descendant of ``<body>`` with the
   largest rendered area;
3. the first child element of ``<body>``;
4. nothing (no-op).

Sizing never uses transforms, only box constraints, so elements keep their
true rendered size for hit-testing.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from playframe.config.logging import get_logger
from playframe.config.model import LayoutConfig

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from playframe.config.logging import PlayframeLogger

logger: PlayframeLogger = get_logger(__name__)

# tag, #id and .class parts of a compound selector such as "div#game.stage"
_SELECTOR_RE: re.Pattern[str] = re.compile(r"([#.]?)([A-Za-z0-9_-]+)")

_SKIPPED_TAGS: frozenset[str] = frozenset({"script", "style"})

StyleMap = dict[str, "str | None"]


def js_round(value: float) -> int:
    """Round half up, like JavaScript's ``Math.round``."""
    return math.floor(value + 0.5)


@dataclass
class ElementBox:
    """A rendered element as seen by the layout routine.

    Attributes:
        tag: Lower-case tag name.
        id: Element id, if any.
        classes: Class names.
        width: Rendered width (``offsetWidth``).
        height: Rendered height (``offsetHeight``).
        position: Computed CSS ``position``.
        attrs: Raw attributes (e.g. a canvas' ``width``/``height``).
        scroll_width: ``scrollWidth``.
        scroll_height: ``scrollHeight``.
        client_width: ``clientWidth``.
        client_height: ``clientHeight``.
        children: Child elements in document order.
    """

    tag: str
    id: str | None = None
    classes: tuple[str, ...] = ()
    width: float = 0
    height: float = 0
    position: str = "static"
    attrs: Mapping[str, str] = field(default_factory=lambda: {})
    scroll_width: float = 0
    scroll_height: float = 0
    client_width: float = 0
    client_height: float = 0
    children: list[ElementBox] = field(default_factory=lambda: [])

    @property
    def area(self) -> float:
        """Rendered area in square pixels."""
        return self.width * self.height

    def iter_descendants(self) -> Iterator[ElementBox]:
        """Yield all descendants in document (pre-)order, excluding ``self``."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()

    def matches(self, selector: str) -> bool:
        """Return True if this element matches a simple compound selector.

        Supports tag, ``#id`` and ``.class`` parts (e.g. ``canvas``,
        ``#game-container``, ``div.game-area``).
        """
        parts: list[tuple[str, str]] = _SELECTOR_RE.findall(selector.strip())
        if not parts:
            return False
        for prefix, name in parts:
            if prefix == "#" and self.id != name:
                return False
            if prefix == "." and name not in self.classes:
                return False
            if prefix == "" and self.tag != name.lower():
                return False
        return True

    def query(self, selector: str) -> ElementBox | None:
        """Return the first descendant matching ``selector``, like ``querySelector``."""
        for el in self.iter_descendants():
            if el.matches(selector):
                return el
        return None

    def query_any(self, selectors: Iterable[str]) -> ElementBox | None:
        """Return the first descendant matching any of ``selectors``.

        Like ``querySelector("a, b")``: document order decides, not list order.
        """
        group: tuple[str, ...] = tuple(selectors)
        for el in self.iter_descendants():
            if any(el.matches(s) for s in group):
                return el
        return None


@dataclass(frozen=True)
class ViewportBudget:
    """Maximum box, in CSS pixels, the game root may occupy."""

    width: int
    height: int


@dataclass(frozen=True)
class LayoutPlan:
    """Style assignments computed by one layout pass.

    A ``None`` style value means "remove the property".

    Attributes:
        root: The selected game root.
        budget: The viewport budget the plan was computed against.
        root_style: Inline style changes for the root.
        canvas: The canvas being sized, if any.
        canvas_style: Inline style changes for the canvas, or None if sizing failed.
    """

    root: ElementBox
    budget: ViewportBudget
    root_style: StyleMap
    canvas: ElementBox | None = None
    canvas_style: StyleMap | None = None


def compute_viewport_budget(
    window_width: float,
    window_height: float,
    layout: LayoutConfig | None = None,
) -> ViewportBudget:
    """Return the floor of the configured window share, never below ``min_size``."""
    lay: LayoutConfig = layout or LayoutConfig()
    return ViewportBudget(
        width=max(lay.min_size, math.floor(window_width * lay.width_ratio)),
        height=max(lay.min_size, math.floor(window_height * lay.height_ratio)),
    )


def pick_game_root(body: ElementBox, selectors: Iterable[str] | None = None) -> ElementBox | None:
    """Select the game root below ``body``.

    Args:
        body: The ``<body>`` element box.
        selectors: Canonical selectors; the first element in document order
            matching any of them wins. Defaults to the configured
            ``root_selectors``.

    Returns:
        The selected element, or None when ``body`` has no element children.
    """
    group: Iterable[str] = selectors if selectors is not None else LayoutConfig().root_selectors
    preferred: ElementBox | None = body.query_any(group)
    if preferred is not None:
        logger.trace("pick_game_root: canonical root <%s>", preferred.tag)
        return preferred

    best: ElementBox | None = None
    best_area: float = 0
    for el in body.iter_descendants():
        if not el.width or not el.height:
            continue
        if el.tag in _SKIPPED_TAGS or el.position == "fixed":
            continue
        if el.area > best_area:
            best_area = el.area
            best = el
    if best is not None:
        return best
    return body.children[0] if body.children else None


def _dimension(value: str | None, fallback: int) -> float:
    """Parse a numeric attribute; non-numeric, non-finite or non-positive values fall back."""
    if value is None:
        return fallback
    try:
        number = float(value)
    except ValueError:
        return fallback
    return number if math.isfinite(number) and number > 0 else fallback


def canvas_aspect_ratio(canvas: ElementBox, layout: LayoutConfig | None = None) -> float:
    """Return a canvas' intrinsic width/height ratio from its attributes."""
    lay: LayoutConfig = layout or LayoutConfig()
    width: float = _dimension(canvas.attrs.get("width"), lay.canvas_fallback_width)
    height: float = _dimension(canvas.attrs.get("height"), lay.canvas_fallback_height)
    return width / height


def fit_canvas(ratio: float, budget: ViewportBudget) -> tuple[int, int]:
    """Return the largest ``(width, height)`` with ``ratio`` that fits ``budget``.

    Args:
        ratio: Intrinsic width/height ratio.
        budget: Viewport budget.

    Returns:
        Target width and height in pixels.
    """
    target_width: int = min(budget.width, js_round(budget.height * ratio))
    target_height: int = js_round(target_width / ratio)
    return target_width, target_height


def plan_layout(
    body: ElementBox,
    window_width: float,
    window_height: float,
    layout: LayoutConfig | None = None,
) -> LayoutPlan | None:
    """Compute one layout pass for the given document and window size.

    Pure: calling it again with the same tree and window yields the same plan,
    which is what makes the in-frame routine idempotent.

    Args:
        body: The ``<body>`` element box.
        window_width: ``window.innerWidth``.
        window_height: ``window.innerHeight``.
        layout: Layout settings; defaults to the built-in values.

    Returns:
        The plan, or None when no game root exists.
    """
    lay: LayoutConfig = layout or LayoutConfig()
    root: ElementBox | None = pick_game_root(body, lay.root_selectors)
    if root is None:
        return None

    budget: ViewportBudget = compute_viewport_budget(window_width, window_height, lay)
    root_style: StyleMap = {
        "max-width": f"{budget.width}px",
        "max-height": f"{budget.height}px",
        "margin": "0 auto",
        "display": "block",
        "transform": None,
    }

    canvas: ElementBox | None = root if root.tag == "canvas" else root.query("canvas")
    if canvas is None:
        rw: float = root.scroll_width or root.client_width or lay.canvas_fallback_width
        rh: float = root.scroll_height or root.client_height or lay.canvas_fallback_height
        r: float = rw / (rh or 1)
        root_style["width"] = f"{min(budget.width, js_round(budget.height * r))}px"
        return LayoutPlan(root=root, budget=budget, root_style=root_style)

    canvas_style: StyleMap | None
    try:
        width, height = fit_canvas(canvas_aspect_ratio(canvas, lay), budget)
        canvas_style = {
            "width": f"{width}px",
            "height": f"{height}px",
            "display": "block",
            "margin": "0 auto",
        }
    except (ArithmeticError, ValueError) as exc:
        logger.debug("plan_layout: canvas sizing skipped: %s", exc)
        canvas_style = None
    return LayoutPlan(
        root=root,
        budget=budget,
        root_style=root_style,
        canvas=canvas,
        canvas_style=canvas_style,
    )
