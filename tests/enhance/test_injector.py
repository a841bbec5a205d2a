# topmark:header:start
#
#   project      : PlayFrame
#   file         : test_injector.py
#   file_relpath : tests/enhance/test_injector.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Tests for the three-tier bundle injector."""

from __future__ import annotations

import pytest
from hypothesis import given, settings

from playframe.enhance.bundle import EnhancementBundle, default_bundle
from playframe.enhance.injector import InsertionTier, inject, locate_insertion
from tests.conftest import CLEAN_GAME_HTML, make_config, parametrize
from tests.strategies_playframe import s_document

pytestmark = pytest.mark.enhance

BUNDLE_TEXT: str = default_bundle().text


def test_full_document_inserts_before_head_close() -> None:
    html: str = "<html><head><title>x</title></head><body><p>hi</p></body></html>"
    out: str = inject(html)
    idx: int = html.index("</head>")
    assert out == html[:idx] + BUNDLE_TEXT + html[idx:]
    assert locate_insertion(html).tier is InsertionTier.HEAD_CLOSE


def test_body_only_fragment_gets_synthesized_head() -> None:
    html: str = "<body><p>hi</p></body>"
    out: str = inject(html)
    assert out == f"<head>{BUNDLE_TEXT}</head>" + html
    assert locate_insertion(html).tier is InsertionTier.BODY_OPEN


def test_body_open_keeps_preceding_text() -> None:
    html: str = "<!DOCTYPE html><html><body></body></html>"
    out: str = inject(html)
    idx: int = html.index("<body>")
    assert out[:idx] == html[:idx]
    assert out[idx:].startswith("<head>\n<script>")
    assert out.endswith(html[idx:])


def test_bare_snippet_is_prepended() -> None:
    html: str = "<canvas id='c'></canvas><script>start()</script>"
    assert inject(html) == BUNDLE_TEXT + html
    assert locate_insertion(html).tier is InsertionTier.PREPEND


def test_empty_document_is_prepended() -> None:
    assert inject("") == BUNDLE_TEXT


def test_head_close_wins_over_earlier_body_open() -> None:
    html: str = "<body></body></head>"
    insertion = locate_insertion(html)
    assert insertion.tier is InsertionTier.HEAD_CLOSE
    assert insertion.offset == html.index("</head>")


def test_first_head_close_is_used() -> None:
    html: str = "<head></head><template><head></head></template>"
    insertion = locate_insertion(html)
    assert insertion.offset == html.index("</head>")
    assert inject(html).count("<script>") == 1


@parametrize(
    "html",
    [
        "<HTML><HEAD></HEAD><BODY></BODY></HTML>",
        "<head ></head >",
        "<body class='x'><p>fragment</p></body>",
    ],
)
def test_markers_are_matched_literally(html: str) -> None:
    assert locate_insertion(html).tier is InsertionTier.PREPEND


def test_custom_bundle_is_used() -> None:
    bundle = EnhancementBundle.from_config(make_config({"bridge": {"confirm_default": False}}))
    out: str = inject(CLEAN_GAME_HTML, bundle)
    assert "confirmDefault: false" in out
    assert "confirmDefault: true" not in out


def test_inject_is_deterministic() -> None:
    assert inject(CLEAN_GAME_HTML) == inject(CLEAN_GAME_HTML)


@settings(max_examples=150)
@given(html=s_document())
def test_content_outside_insertion_is_preserved(html: str) -> None:
    """Every character of the input survives, in order, around a single splice."""
    insertion = locate_insertion(html)
    out: str = inject(html)

    assert len(out) == len(html) + len(insertion.fragment)
    assert out[: insertion.offset] == html[: insertion.offset]
    assert out[insertion.offset + len(insertion.fragment) :] == html[insertion.offset :]
    assert out[insertion.offset : insertion.offset + len(insertion.fragment)] == (
        insertion.fragment
    )


@settings(max_examples=150)
@given(html=s_document())
def test_tier_follows_marker_presence(html: str) -> None:
    tier = locate_insertion(html).tier
    if "</head>" in html:
        assert tier is InsertionTier.HEAD_CLOSE
    elif "<body>" in html:
        assert tier is InsertionTier.BODY_OPEN
    else:
        assert tier is InsertionTier.PREPEND


@pytest.mark.hypothesis_slow
@settings(max_examples=3000, deadline=None)
@given(html=s_document())
def test_content_preservation_exhaustive(html: str) -> None:
    """Long-running variant of the preservation property over many more documents."""
    insertion = locate_insertion(html)
    out: str = inject(html)
    before: str = out[: insertion.offset]
    after: str = out[insertion.offset + len(insertion.fragment) :]
    assert before + after == html
