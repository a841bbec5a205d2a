# topmark:header:start
#
#   project      : PlayFrame
#   file         : __init__.py
#   file_relpath : src/playframe/enhance/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Document enhancement: bundle rendering, injection and the layout model."""

from __future__ import annotations

from playframe.enhance.bundle import BridgeCapabilities, EnhancementBundle, default_bundle
from playframe.enhance.injector import Insertion, InsertionTier, inject, locate_insertion
from playframe.enhance.layout import (
    ElementBox,
    LayoutPlan,
    ViewportBudget,
    canvas_aspect_ratio,
    compute_viewport_budget,
    fit_canvas,
    pick_game_root,
    plan_layout,
)

__all__ = [
    "BridgeCapabilities",
    "ElementBox",
    "EnhancementBundle",
    "Insertion",
    "InsertionTier",
    "LayoutPlan",
    "ViewportBudget",
    "canvas_aspect_ratio",
    "compute_viewport_budget",
    "default_bundle",
    "fit_canvas",
    "inject",
    "locate_insertion",
    "pick_game_root",
    "plan_layout",
]
