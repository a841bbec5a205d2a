# topmark:header:start
#
#   project      : PlayFrame
#   file         : test_layout.py
#   file_relpath : tests/enhance/test_layout.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Tests for the Python model of the adaptive layout routine."""

from __future__ import annotations

import pytest

from playframe.config.model import LayoutConfig
from playframe.enhance.layout import (
    ElementBox,
    ViewportBudget,
    canvas_aspect_ratio,
    compute_viewport_budget,
    fit_canvas,
    js_round,
    pick_game_root,
    plan_layout,
)
from tests.conftest import parametrize

pytestmark = pytest.mark.enhance


def body_of(*children: ElementBox) -> ElementBox:
    return ElementBox(tag="body", width=1200, height=900, children=list(children))


@parametrize(
    "value, expected",
    [(2.5, 3), (2.49, 2), (-2.5, -2), (0.5, 1), (699.75, 700)],
)
def test_js_round(value: float, expected: int) -> None:
    assert js_round(value) == expected


@parametrize(
    "window, budget",
    [
        ((1000, 800), (920, 704)),
        ((1366, 768), (1256, 675)),
        ((200, 200), (320, 320)),
        ((0, 0), (320, 320)),
    ],
)
def test_viewport_budget(window: tuple[int, int], budget: tuple[int, int]) -> None:
    assert compute_viewport_budget(*window) == ViewportBudget(*budget)


def test_viewport_budget_respects_layout_settings() -> None:
    layout = LayoutConfig(width_ratio=0.5, height_ratio=0.5, min_size=100)
    assert compute_viewport_budget(400, 150, layout) == ViewportBudget(200, 100)


def test_matches_compound_selectors() -> None:
    el = ElementBox(tag="div", id="game-container", classes=("game-area", "big"))
    assert el.matches("#game-container")
    assert el.matches(".game-area")
    assert el.matches("div.big")
    assert el.matches("div#game-container.game-area")
    assert not el.matches("canvas")
    assert not el.matches(".stage")
    assert not el.matches("")


def test_canonical_container_beats_larger_sibling() -> None:
    big = ElementBox(tag="div", width=1000, height=800)
    area = ElementBox(tag="div", classes=("game-area",), width=10, height=10)
    assert pick_game_root(body_of(big, area)) is area


def test_document_order_decides_between_canonical_selectors() -> None:
    area = ElementBox(tag="div", classes=("game-area",), width=500, height=500)
    container = ElementBox(tag="section", id="game-container", width=10, height=10)
    assert pick_game_root(body_of(area, container)) is area
    assert pick_game_root(body_of(container, area)) is container


def test_outer_canonical_match_wins_over_nested_one() -> None:
    container = ElementBox(tag="div", id="game-container")
    stage = ElementBox(tag="div", classes=("stage",), children=[container])
    assert pick_game_root(body_of(stage)) is stage


def test_canonical_match_may_be_nested() -> None:
    stage = ElementBox(tag="div", classes=("stage",))
    wrapper = ElementBox(tag="main", width=900, height=700, children=[stage])
    assert pick_game_root(body_of(wrapper)) is stage


def test_largest_visible_descendant_fallback() -> None:
    small = ElementBox(tag="div", width=100, height=100)
    fixed = ElementBox(tag="div", width=2000, height=2000, position="fixed")
    script = ElementBox(tag="script", width=3000, height=3000)
    hidden = ElementBox(tag="div", width=5000, height=0)
    inner = ElementBox(tag="canvas", width=400, height=300)
    wrapper = ElementBox(tag="div", width=300, height=300, children=[inner])
    body = body_of(small, fixed, script, hidden, wrapper)
    assert pick_game_root(body) is inner


def test_first_child_fallback_when_nothing_is_visible() -> None:
    first = ElementBox(tag="div")
    second = ElementBox(tag="p")
    assert pick_game_root(body_of(first, second)) is first


def test_empty_body_has_no_root() -> None:
    assert pick_game_root(body_of()) is None
    assert plan_layout(body_of(), 1000, 800) is None


def test_custom_selectors() -> None:
    board = ElementBox(tag="div", classes=("board",))
    area = ElementBox(tag="div", classes=("game-area",))
    assert pick_game_root(body_of(area, board), selectors=[".board"]) is board


@parametrize(
    "attrs, ratio",
    [
        ({"width": "400", "height": "300"}, 4 / 3),
        ({}, 800 / 600),
        ({"width": "abc", "height": "300"}, 800 / 300),
        ({"width": "0", "height": "-5"}, 800 / 600),
        ({"width": "1000", "height": ""}, 1000 / 600),
    ],
)
def test_canvas_aspect_ratio(attrs: dict[str, str], ratio: float) -> None:
    assert canvas_aspect_ratio(ElementBox(tag="canvas", attrs=attrs)) == pytest.approx(ratio)


def test_fit_canvas_800x600_in_1000x700() -> None:
    assert fit_canvas(800 / 600, ViewportBudget(1000, 700)) == (933, 700)


def test_fit_canvas_width_bound() -> None:
    assert fit_canvas(16 / 9, ViewportBudget(400, 700)) == (400, 225)


def test_plan_sizes_canvas_inside_root() -> None:
    canvas = ElementBox(tag="canvas", attrs={"width": "800", "height": "600"})
    root = ElementBox(tag="div", classes=("game-area",), children=[canvas])
    plan = plan_layout(body_of(root), 500, 1000)
    assert plan is not None
    assert plan.root is root
    assert plan.canvas is canvas
    assert plan.budget == ViewportBudget(460, 880)
    assert plan.root_style == {
        "max-width": "460px",
        "max-height": "880px",
        "margin": "0 auto",
        "display": "block",
        "transform": None,
    }
    assert plan.canvas_style == {
        "width": "460px",
        "height": "345px",
        "display": "block",
        "margin": "0 auto",
    }


def test_plan_canvas_root_is_sized_itself() -> None:
    canvas = ElementBox(
        tag="canvas", width=640, height=480, attrs={"width": "640", "height": "480"}
    )
    plan = plan_layout(body_of(canvas), 1000, 800)
    assert plan is not None
    assert plan.root is canvas
    assert plan.canvas is canvas
    assert plan.canvas_style is not None
    assert plan.canvas_style["width"] == "920px"
    assert plan.canvas_style["height"] == "690px"


def test_plan_without_canvas_sets_width_from_content_ratio() -> None:
    root = ElementBox(tag="div", id="game-container", client_width=300, client_height=600)
    plan = plan_layout(body_of(root), 1000, 500)
    assert plan is not None
    assert plan.canvas is None
    assert plan.root_style["width"] == "220px"


def test_plan_without_canvas_prefers_scroll_size() -> None:
    root = ElementBox(
        tag="div",
        id="game-container",
        scroll_width=400,
        scroll_height=200,
        client_width=10,
        client_height=10,
    )
    plan = plan_layout(body_of(root), 1000, 500)
    assert plan is not None
    assert plan.root_style["width"] == "880px"


def test_canvas_sizing_failure_keeps_root_style() -> None:
    canvas = ElementBox(tag="canvas", attrs={"width": "1e308", "height": "1e-308"})
    root = ElementBox(tag="div", classes=("game-area",), children=[canvas])
    plan = plan_layout(body_of(root), 1000, 800)
    assert plan is not None
    assert plan.canvas is canvas
    assert plan.canvas_style is None
    assert plan.root_style["max-width"] == "920px"


def test_plan_is_idempotent() -> None:
    canvas = ElementBox(tag="canvas", attrs={"width": "320", "height": "480"})
    body = body_of(ElementBox(tag="div", classes=("stage",), children=[canvas]))
    assert plan_layout(body, 1280, 720) == plan_layout(body, 1280, 720)
