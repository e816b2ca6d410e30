"""Shared markup helpers for component handlers.

Handlers build markup with f-strings; every user-supplied plain-text value
goes through :func:`esc` and every collection prop through :func:`to_list`.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    from site_compiler.config.models import Component, Theme

_UPPER = re.compile(r"[A-Z]")
_UNITLESS_MARKERS = ("opacity", "z-index", "flex", "order")
_FIRST_TAG = re.compile(r"^<([a-zA-Z][a-zA-Z0-9-]*)([^>]*)>")
_CLASS_ATTR = re.compile(r'\sclass="([^"]*)"')


def esc(value: object) -> str:
    """Escape ``&``, ``<``, ``>`` and ``"`` in ``value``.

    Examples
    --------
    >>> esc('<b>"Tom" & Jerry</b>')
    '&lt;b&gt;&quot;Tom&quot; &amp; Jerry&lt;/b&gt;'
    >>> esc(None)
    ''
    """
    if value is None:
        return ""
    return (
        str(value)
        .replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def to_list(value: object) -> list[typ.Any]:
    """Coerce a loosely typed collection prop into a list.

    Examples
    --------
    >>> to_list(("a", "b"))
    ['a', 'b']
    >>> to_list({"title": "not a list"})
    []
    >>> to_list(None)
    []
    """
    if isinstance(value, list):
        return value
    if isinstance(value, tuple):
        return list(value)
    return []


def first(*values: object, default: typ.Any = "") -> typ.Any:
    """Return the first truthy value, mirroring ``a || b || default``."""
    for value in values:
        if value:
            return value
    return default


def kebab_case(key: str) -> str:
    """Convert a camelCase CSS property name into kebab-case."""
    return _UPPER.sub(lambda match: "-" + match.group(0).lower(), key)


def css_value(prop: str, value: object) -> str:
    """Render a CSS value, adding ``px`` to numbers of dimensional properties."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int | float) and not any(
        marker in prop for marker in _UNITLESS_MARKERS
    ):
        return f"{_number(value)}px"
    if isinstance(value, int | float):
        return _number(value)
    return str(value)


def _number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def css_declarations(
    styles: typ.Mapping[str, typ.Any], *, important: bool = False
) -> list[str]:
    """Return ``prop: value`` strings for the non-empty entries of ``styles``."""
    suffix = " !important" if important else ""
    declarations: list[str] = []
    for key, value in styles.items():
        if value is None or value == "":
            continue
        prop = kebab_case(str(key))
        declarations.append(f"{prop}: {css_value(prop, value)}{suffix}")
    return declarations


def inline_style(styles: typ.Mapping[str, typ.Any] | None) -> str:
    """Return desktop styles as a leading-space suffix for a ``style`` attribute."""
    if not styles:
        return ""
    declarations = css_declarations(styles)
    if not declarations:
        return ""
    return " " + "; ".join(declarations) + ";"


def responsive_rules(
    class_name: str,
    tablet: typ.Mapping[str, typ.Any],
    mobile: typ.Mapping[str, typ.Any],
    *,
    tablet_max: int,
    mobile_max: int,
) -> str:
    """Return ``<style>`` blocks applying tablet/mobile overrides to a class."""
    blocks: list[str] = []
    for styles, max_width in ((tablet, tablet_max), (mobile, mobile_max)):
        declarations = css_declarations(styles, important=True)
        if declarations:
            body = "; ".join(declarations)
            blocks.append(
                f"<style>@media(max-width:{max_width}px)"
                f"{{.{class_name}{{{body}}}}}</style>"
            )
    return "".join(blocks)


def inject_classes(markup: str, classes: typ.Sequence[str]) -> str:
    """Add ``classes`` to the first tag of ``markup``.

    Examples
    --------
    >>> inject_classes('<div class="a" id="x">hi</div>', ["b"])
    '<div class="a b" id="x">hi</div>'
    >>> inject_classes("<p>hi</p>", ["wb-hide-mobile"])
    '<p class="wb-hide-mobile">hi</p>'
    """
    if not classes:
        return markup
    match = _FIRST_TAG.match(markup)
    if match is None:
        return markup
    tag, attrs = match.group(1), match.group(2)
    joined = " ".join(classes)
    class_match = _CLASS_ATTR.search(attrs)
    if class_match:
        existing = class_match.group(1)
        merged = f"{existing} {joined}" if existing else joined
        attrs = (
            attrs[: class_match.start(1)] + merged + attrs[class_match.end(1) :]
        )
    else:
        attrs = f' class="{joined}"{attrs}'
    return f"<{tag}{attrs}>" + markup[match.end() :]


def anim_attr(component: Component) -> str:
    """Return the ``data-entrance`` attributes for a component's animation."""
    animation = component.animation
    if animation is None or not animation.entrance:
        return ""
    delay = f' data-delay="{animation.delay}"' if animation.delay else ""
    speed = animation.speed or "normal"
    return f' data-entrance="{esc(animation.entrance)}" data-speed="{esc(speed)}"{delay}'


def btn_style(
    theme: Theme,
    variant: str = "primary",
    color: str | None = None,
    text_color: str | None = None,
) -> str:
    """Return the inline style of a themed button or button-like link."""
    bg = color or theme.primary_color
    fg = text_color or "#ffffff"
    radius = f"{theme.border_radius}px"
    match variant:
        case "secondary":
            return (
                f"background-color: {theme.secondary_color}; color: #ffffff; "
                f"border-radius: {radius}; padding: 12px 24px; text-decoration: none; "
                "display: inline-block; font-weight: 600; border: none; cursor: pointer;"
            )
        case "outline":
            return (
                f"background-color: transparent; color: {bg}; border: 2px solid {bg}; "
                f"border-radius: {radius}; padding: 10px 22px; text-decoration: none; "
                "display: inline-block; font-weight: 600; cursor: pointer;"
            )
        case "ghost":
            return (
                f"background-color: transparent; color: {bg}; border: none; "
                f"border-radius: {radius}; padding: 12px 24px; text-decoration: none; "
                "display: inline-block; font-weight: 600; cursor: pointer;"
            )
        case _:
            return (
                f"background-color: {bg}; color: {fg}; border-radius: {radius}; "
                "padding: 12px 24px; text-decoration: none; display: inline-block; "
                "font-weight: 600; border: none; cursor: pointer; "
                "transition: transform 0.2s, box-shadow 0.2s;"
            )


def render_stars(count: object, color: str) -> str:
    """Return five star icons with ``count`` of them filled."""
    try:
        full = int(float(count))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        full = 5
    stars = []
    for index in range(5):
        fill = color if index < full else "#e2e8f0"
        stars.append(
            f'<svg width="16" height="16" viewBox="0 0 24 24" fill="{fill}" '
            f'stroke="{fill}" stroke-width="1"><polygon points="12 2 15.09 8.26 '
            "22 9.27 17 14.14 18.18 21.02 12 17.77 5.82 21.02 7 14.14 2 9.27 "
            '8.91 8.26 12 2"/></svg>'
        )
    return "".join(stars)


def overlay_alpha(value: object, default: float) -> float:
    """Normalise an overlay opacity given either as 0-1 or as a percentage."""
    if value is None or value == "":
        return default
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return number / 100 if number > 1 else number


def heading_block(theme: Theme, title: str, *, margin: str = "48px") -> str:
    """Return the centred section title shared by most marketing blocks."""
    if not title:
        return ""
    return (
        f'<h2 style="font-family: {theme.heading_font}; font-size: 30px; '
        f"font-weight: 700; color: {theme.text_color}; text-align: center; "
        f'margin-bottom: {margin};">{esc(title)}</h2>'
    )


def bg_color(props: typ.Mapping[str, typ.Any]) -> str:
    """Return the optional ``background-color`` declaration for a section."""
    color = props.get("bgColor")
    return f"background-color: {color};" if color else ""


@dc.dataclass(frozen=True, slots=True)
class Block:
    """Read-only view of a component prepared for its handler.

    Attributes
    ----------
    component : Component
        The component being rendered.
    anim : str
        Pre-rendered animation attributes (leading space included).
    style : str
        Desktop style overrides as a ``style`` attribute suffix.
    """

    component: Component
    anim: str
    style: str

    @property
    def kind(self) -> str:
        return self.component.kind

    @property
    def props(self) -> typ.Mapping[str, typ.Any]:
        return self.component.props

    def get(self, *keys: str, default: typ.Any = "") -> typ.Any:
        """Return the first truthy prop among ``keys``."""
        return first(*(self.props.get(key) for key in keys), default=default)

    def text(self, *keys: str, default: str = "") -> str:
        """Return the first truthy prop among ``keys`` as a string."""
        return str(self.get(*keys, default=default))

    def list(self, *keys: str) -> list[typ.Any]:
        """Return the first non-empty collection prop among ``keys``."""
        for key in keys:
            items = to_list(self.props.get(key))
            if items:
                return items
        return []


__all__ = [
    "Block",
    "anim_attr",
    "bg_color",
    "btn_style",
    "css_declarations",
    "css_value",
    "esc",
    "first",
    "heading_block",
    "inject_classes",
    "inline_style",
    "kebab_case",
    "overlay_alpha",
    "render_stars",
    "responsive_rules",
    "to_list",
]
