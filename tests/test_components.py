"""Tests for component dispatch, visibility, and responsive handling."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from site_compiler.components import (
    HANDLERS,
    RenderContext,
    RenderState,
    render_component,
    render_tree,
)
from site_compiler.config import Component, ResponsiveStyles, Theme, Visibility
from site_compiler.config.helpers import COLLECTION_PROPS


def _ctx(state: RenderState | None = None) -> RenderContext:
    return RenderContext(theme=Theme(), state=state or RenderState())


def test_columns_keep_mobile_hidden_child_with_marker_class() -> None:
    columns = Component(
        "columns",
        children=(
            Component("paragraph", {"text": "one"}),
            Component("paragraph", {"text": "two"}, hidden=Visibility(mobile=True)),
            Component("paragraph", {"text": "three"}),
        ),
    )
    soup = BeautifulSoup(render_component(columns, _ctx()), "html.parser")

    paragraphs = soup.select(".wb-paragraph")
    assert [p.get_text() for p in paragraphs] == ["one", "two", "three"]
    hidden = soup.select(".wb-hide-mobile")
    assert len(hidden) == 1, "expected exactly one mobile-hidden paragraph"
    assert hidden[0].get_text() == "two"


def test_component_hidden_everywhere_renders_nothing() -> None:
    ghost = Component(
        "heading",
        {"text": "Gone"},
        hidden=Visibility(desktop=True, tablet=True, mobile=True),
    )
    assert render_component(ghost, _ctx()) == ""


def test_partially_hidden_component_gets_every_marker() -> None:
    heading = Component(
        "heading", {"text": "Hi"}, hidden=Visibility(desktop=True, tablet=True)
    )
    soup = BeautifulSoup(render_component(heading, _ctx()), "html.parser")
    root = soup.find()
    assert root is not None
    assert {"wb-hide-desktop", "wb-hide-tablet"} <= set(root.get("class", []))


def test_unknown_kind_renders_inert_comment() -> None:
    markup = render_component(Component("<holo-deck>"), _ctx())
    assert markup == "<!-- Unknown component type: &lt;holo-deck&gt; -->"


def test_unknown_kind_does_not_interrupt_siblings() -> None:
    markup = render_tree(
        [
            Component("heading", {"text": "Before"}),
            Component("not-a-kind"),
            Component("heading", {"text": "After"}),
        ],
        _ctx(),
    )
    assert "Before" in markup
    assert "After" in markup
    assert "Unknown component type: not-a-kind" in markup


def test_heading_text_is_escaped() -> None:
    markup = render_component(
        Component("heading", {"text": "<script>alert(1)</script>"}), _ctx()
    )
    assert "<script>" not in markup
    assert "&lt;script&gt;alert(1)&lt;/script&gt;" in markup


def test_responsive_overrides_mint_unique_classes() -> None:
    state = RenderState()
    styled = Component(
        "heading",
        {"text": "Shrink"},
        styles=ResponsiveStyles(mobile={"fontSize": "14px"}),
    )
    first = render_component(styled, _ctx(state))
    second = render_component(styled, _ctx(state))

    assert "wb-r1" in first
    assert "wb-r2" in second
    assert "font-size: 14px" in first
    assert "@media(max-width:767px)" in first


def test_fresh_state_restarts_numbering() -> None:
    styled = Component(
        "heading", {"text": "x"}, styles=ResponsiveStyles(tablet={"padding": "8px"})
    )
    assert "wb-r1" in render_component(styled, _ctx())
    assert "wb-r1" in render_component(styled, _ctx())


def test_aliases_share_handlers() -> None:
    assert HANDLERS["reviews"] is HANDLERS["testimonials"]
    assert HANDLERS["carousel"] is HANDLERS["hero"]


def test_gallery_renders_every_image() -> None:
    gallery = Component(
        "image-gallery", {"images": ["/a.png", {"url": "/b.png"}, {"src": "/c.png"}]}
    )
    soup = BeautifulSoup(render_component(gallery, _ctx()), "html.parser")
    sources = [img["src"] for img in soup.find_all("img")]
    assert sources == ["/a.png", "/b.png", "/c.png"]


def test_every_registered_kind_renders_with_empty_props() -> None:
    ctx = _ctx()
    for kind in sorted(HANDLERS):
        markup = render_component(Component(kind), ctx)
        assert isinstance(markup, str), kind
        assert "Unknown component type" not in markup, kind


@pytest.mark.parametrize("malformed", [{"a": 1}, "oops", 7], ids=["dict", "str", "int"])
@pytest.mark.parametrize("kind", sorted(HANDLERS))
def test_malformed_collections_render_like_empty_ones(
    kind: str, malformed: object
) -> None:
    keys = COLLECTION_PROPS.get(kind, ("items",))
    broken = Component(kind, {key: malformed for key in keys})
    assert render_component(broken, _ctx()) == render_component(Component(kind), _ctx())


def test_countdown_without_target_leaves_attribute_empty() -> None:
    markup = render_component(Component("countdown"), _ctx())
    soup = BeautifulSoup(markup, "html.parser")
    timer = soup.find(id="cd-1")
    assert timer is not None
    assert timer["data-target"] == ""


def test_countdown_keeps_given_target_verbatim() -> None:
    countdown = Component("countdown", {"targetDate": "2031-06-01T09:00:00Z"})
    first = render_component(countdown, _ctx())
    second = render_component(countdown, _ctx())

    assert first == second
    timer = BeautifulSoup(first, "html.parser").find(id="cd-1")
    assert timer is not None
    assert timer["data-target"] == "2031-06-01T09:00:00Z"
