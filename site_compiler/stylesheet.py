"""Theme stylesheet synthesis.

The stylesheet is rendered once per export from ``stylesheet.css.jinja``.
Component markup relies on its class hooks (``wb-hero``, ``faq-item``,
``wb-hide-mobile`` and friends) and on the responsive tiers it declares at
the tablet, mobile, and small-mobile breakpoints.

Examples
--------
>>> from site_compiler.config import Theme
>>> css = generate_stylesheet(Theme(primary_color="#ff0000"))
>>> "--primary-color: #ff0000;" in css
True
"""

from __future__ import annotations

import typing as typ

from ._constants import MOBILE_MAX_WIDTH, SMALL_MOBILE_MAX_WIDTH, TABLET_MAX_WIDTH
from .templating import render_template

if typ.TYPE_CHECKING:
    from .config import Theme

SHADOWS: dict[str, str] = {
    "none": "none",
    "subtle": "0 1px 3px rgba(0,0,0,0.08), 0 1px 2px rgba(0,0,0,0.06)",
    "medium": "0 4px 6px -1px rgba(0,0,0,0.1), 0 2px 4px -1px rgba(0,0,0,0.06)",
    "dramatic": "0 20px 25px -5px rgba(0,0,0,0.1), 0 10px 10px -5px rgba(0,0,0,0.04)",
}

DARK_BACKGROUND = "#0f172a"
DARK_TEXT = "#e2e8f0"
DARK_SURFACE = "#1e293b"


def _heading_extra(theme: Theme) -> str:
    parts = []
    if theme.letter_spacing:
        parts.append(f" letter-spacing: {theme.letter_spacing}em;")
    if theme.heading_transform and theme.heading_transform != "none":
        parts.append(f" text-transform: {theme.heading_transform};")
    return "".join(parts)


def generate_stylesheet(theme: Theme) -> str:
    """Return the site stylesheet for ``theme``.

    Parameters
    ----------
    theme : Theme
        Colours, fonts, and spacing shared by every page.

    Returns
    -------
    str
        CSS text declaring the theme custom properties, base rules,
        component hooks, entrance animations, responsive tiers, and the
        per-device visibility classes.
    """
    font_scale = theme.font_scale or 1
    return render_template(
        "stylesheet.css.jinja",
        theme=theme,
        shadow=SHADOWS.get(theme.shadow_style or "subtle", SHADOWS["subtle"]),
        section_padding=round(64 * (theme.section_padding or 1)),
        body_font_size=round(16 * font_scale),
        nav_font_size=round(14 * font_scale),
        mobile_font_size=round(14 * font_scale),
        heading_extra=_heading_extra(theme),
        tablet_max=TABLET_MAX_WIDTH,
        mobile_max=MOBILE_MAX_WIDTH,
        small_mobile_max=SMALL_MOBILE_MAX_WIDTH,
    )


def _parse_hex(color: str) -> tuple[int, int, int] | None:
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        return None
    try:
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
    except ValueError:
        return None


def shift_color(color: str, amount: int) -> str:
    """Lighten (positive ``amount``) or darken a hex colour, clamping channels.

    Colours that are not ``#rgb``/``#rrggbb`` hex strings are returned as-is.

    >>> shift_color("#101010", 16)
    '#202020'
    >>> shift_color("#f0f0f0", 32)
    '#ffffff'
    """
    channels = _parse_hex(color)
    if channels is None:
        return color
    return "#" + "".join(
        f"{max(0, min(255, channel + amount)):02x}" for channel in channels
    )


def generate_dark_mode_css(theme: Theme) -> str:
    """Return ``html.dark`` overrides derived from the light ``theme``.

    A light background (red channel above 128) is swapped for a fixed slate
    palette; an already dark background is lifted slightly instead.
    """
    channels = _parse_hex(theme.background_color or "#ffffff")
    is_light = channels is None or channels[0] > 128
    if is_light:
        dark_bg, dark_text, dark_secondary = DARK_BACKGROUND, DARK_TEXT, DARK_SURFACE
    else:
        dark_bg = shift_color(theme.background_color, 20)
        dark_text = theme.text_color
        dark_secondary = shift_color(theme.background_color, 30)
    return render_template(
        "dark_mode.css.jinja",
        dark_bg=dark_bg,
        dark_text=dark_text,
        dark_secondary_bg=dark_secondary,
        dark_surface=shift_color(dark_bg, 15),
    )


def generate_css_reset() -> str:
    """Return the cross-browser reset shipped with the project target."""
    return render_template("reset.css.jinja")


__all__ = [
    "SHADOWS",
    "generate_css_reset",
    "generate_dark_mode_css",
    "generate_stylesheet",
    "shift_color",
]
