"""Tests for the synthesized stylesheet and behavior script."""

from __future__ import annotations

import pytest

from site_compiler.behavior import generate_behavior_module, generate_behavior_script
from site_compiler.config import Theme
from site_compiler.stylesheet import (
    DARK_BACKGROUND,
    generate_css_reset,
    generate_dark_mode_css,
    generate_stylesheet,
    shift_color,
)


def test_stylesheet_hides_each_breakpoint_in_its_own_range() -> None:
    css = generate_stylesheet(Theme())
    assert "@media (min-width: 1024px) {\n  .wb-hide-desktop" in css
    assert (
        "@media (min-width: 768px) and (max-width: 1023px) {\n  .wb-hide-tablet" in css
    )
    assert "@media (max-width: 767px) {\n  .wb-hide-mobile" in css


def test_stylesheet_uses_theme_colors() -> None:
    css = generate_stylesheet(Theme(primary_color="#ff0066"))
    assert "#ff0066" in css


def test_stylesheet_is_deterministic() -> None:
    theme = Theme(heading_font="Lora, serif", shadow_style="strong")
    assert generate_stylesheet(theme) == generate_stylesheet(theme)


@pytest.mark.parametrize(
    ("color", "amount", "expected"),
    [
        ("#101010", 16, "#202020"),
        ("#fff", 10, "#ffffff"),
        ("#050505", -20, "#000000"),
        ("tomato", 10, "tomato"),
    ],
)
def test_shift_color(color: str, amount: int, expected: str) -> None:
    assert shift_color(color, amount) == expected


def test_dark_mode_swaps_light_background_for_slate() -> None:
    css = generate_dark_mode_css(Theme(background_color="#ffffff"))
    assert "html.dark" in css
    assert f"--background-color: {DARK_BACKGROUND};" in css


def test_dark_mode_lifts_already_dark_background() -> None:
    css = generate_dark_mode_css(Theme(background_color="#101010"))
    assert "--background-color: #242424;" in css


def test_css_reset_is_not_empty() -> None:
    assert "box-sizing" in generate_css_reset()


def test_behavior_script_is_a_strict_iife() -> None:
    script = generate_behavior_script()
    assert script.lstrip().startswith("/*")
    assert "(function() {" in script
    assert "'use strict';" in script
    assert "export " not in script


def test_behavior_module_exports_reentrant_initializer() -> None:
    module = generate_behavior_module()
    assert "export function initInteractivity(): void {" in module
    assert "teardown();" in module
    assert not module.lstrip().startswith("(function")
    assert "})();" not in module


def test_both_behavior_adapters_share_one_body() -> None:
    script = generate_behavior_script()
    module = generate_behavior_module()
    for marker in ("IntersectionObserver", "aria-expanded", "aria-selected"):
        assert marker in script
        assert marker in module
