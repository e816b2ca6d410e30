"""Utility helpers shared by the site description loader."""

from __future__ import annotations

import typing as typ
from types import MappingProxyType

from site_compiler.errors import SiteConfigError

from .models import (
    Animation,
    Component,
    ResponsiveStyles,
    Seo,
    Theme,
    Translation,
    Visibility,
)

# Props that handlers iterate over, keyed by component kind. Values arriving
# as anything other than a list are replaced with an empty list on ingestion.
COLLECTION_PROPS: dict[str, tuple[str, ...]] = {
    "navbar": ("links",),
    "mega-menu": ("links",),
    "footer": ("columns", "sections", "linkGroups", "links", "socialLinks"),
    "hero": ("buttons", "slides"),
    "carousel": ("buttons", "slides"),
    "list": ("items",),
    "icon-text": ("items",),
    "image-gallery": ("images",),
    "lightbox-gallery": ("images",),
    "gallery-masonry": ("images",),
    "about": ("stats",),
    "features": ("features",),
    "service-card": ("services",),
    "pricing": ("plans",),
    "testimonials": ("testimonials", "reviews"),
    "reviews": ("testimonials", "reviews"),
    "stats": ("stats",),
    "animated-stats": ("stats",),
    "logo-cloud": ("logos",),
    "team-grid": ("members",),
    "trust-badges": ("badges", "items"),
    "floating-header": ("items",),
    "comparison-table": ("headers", "rows"),
    "timeline": ("items",),
    "contact-form": ("fields",),
    "button-group": ("buttons",),
    "social-links": ("links",),
    "tabs": ("tabs",),
    "faq": ("items", "faqs"),
    "progress": ("items", "bars"),
    "form": ("fields",),
    "blog-grid": ("posts",),
    "tags-cloud": ("tags",),
    "language-switcher": ("languages",),
    "breadcrumb": ("items",),
}

THEME_KEYS: dict[str, str] = {
    "primaryColor": "primary_color",
    "secondaryColor": "secondary_color",
    "accentColor": "accent_color",
    "backgroundColor": "background_color",
    "textColor": "text_color",
    "headingFont": "heading_font",
    "bodyFont": "body_font",
    "borderRadius": "border_radius",
    "spacing": "spacing",
    "direction": "direction",
    "shadowStyle": "shadow_style",
    "buttonStyle": "button_style",
    "linkStyle": "link_style",
    "sectionPadding": "section_padding",
    "fontScale": "font_scale",
    "letterSpacing": "letter_spacing",
    "headingTransform": "heading_transform",
}

SEO_KEYS: dict[str, str] = {
    "title": "title",
    "description": "description",
    "ogTitle": "og_title",
    "ogDescription": "og_description",
    "ogImage": "og_image",
}


def _pick(raw: typ.Mapping[str, typ.Any], camel: str, snake: str) -> typ.Any:
    """Return ``raw[camel]`` or ``raw[snake]``, whichever is set."""
    value = raw.get(camel)
    if value is None:
        value = raw.get(snake)
    return value


def _mapping(value: object, *, context: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` as a mapping, treating ``None`` as empty."""
    if value is None:
        return {}
    if not isinstance(value, typ.Mapping):
        msg = f"{context} must be a mapping, got {type(value).__name__}."
        raise SiteConfigError(msg)
    return value


def _build_theme(raw: object) -> Theme:
    """Build a Theme from builder-style (camelCase) or snake_case keys."""
    data = _mapping(raw, context="theme")
    values: dict[str, typ.Any] = {}
    for camel, snake in THEME_KEYS.items():
        value = _pick(data, camel, snake)
        if value is not None and value != "":
            values[snake] = value
    return Theme(**values)


def _build_seo(raw: object) -> Seo:
    data = _mapping(raw, context="seo")
    values = {
        snake: str(value)
        for camel, snake in SEO_KEYS.items()
        if (value := _pick(data, camel, snake))
    }
    return Seo(**values)


def _normalize_props(kind: str, raw: object) -> typ.Mapping[str, typ.Any]:
    """Return a read-only props mapping with collection props coerced to lists."""
    if not isinstance(raw, typ.Mapping):
        return MappingProxyType({})
    props = dict(raw)
    for key in COLLECTION_PROPS.get(kind, ()):
        if key in props and not isinstance(props[key], list):
            props[key] = []
    return MappingProxyType(props)


FALSE_STRINGS = frozenset({"", "0", "false", "no", "off"})


def _flag(value: object) -> bool:
    """Interpret a loosely typed boolean, treating ``"false"`` as false.

    >>> _flag("false"), _flag("True"), _flag(1), _flag(None)
    (False, True, True, False)
    """
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    return bool(value)


def _build_animation(raw: object, *, path: str) -> Animation | None:
    if not isinstance(raw, typ.Mapping) or not raw.get("entrance"):
        return None
    delay = raw.get("delay") or 0
    try:
        delay_ms = int(delay)
    except (TypeError, ValueError) as exc:
        msg = (
            f"Component {path} animation delay must be whole milliseconds, "
            f"got {delay!r}."
        )
        raise SiteConfigError(msg) from exc
    return Animation(
        entrance=str(raw["entrance"]),
        delay=delay_ms,
        speed=str(raw.get("speed") or "normal"),
    )


def _build_component(raw: object, *, path: str) -> Component:
    """Build a Component (and its children) from a raw mapping."""
    data = _mapping(raw, context=f"component {path}")
    kind = data.get("type") or data.get("kind")
    if not kind:
        msg = f"Component {path} is missing 'type'."
        raise SiteConfigError(msg)
    children_raw = data.get("children")
    children = tuple(
        _build_component(child, path=f"{path}.{index}")
        for index, child in enumerate(
            children_raw if isinstance(children_raw, list) else []
        )
    )
    styles = _mapping(data.get("styles"), context=f"component {path} styles")
    hidden = _mapping(data.get("hidden"), context=f"component {path} hidden")
    return Component(
        kind=str(kind),
        props=_normalize_props(str(kind), data.get("props")),
        children=children,
        styles=ResponsiveStyles(
            desktop=MappingProxyType(dict(styles.get("desktop") or {})),
            tablet=MappingProxyType(dict(styles.get("tablet") or {})),
            mobile=MappingProxyType(dict(styles.get("mobile") or {})),
        ),
        hidden=Visibility(
            desktop=_flag(hidden.get("desktop")),
            tablet=_flag(hidden.get("tablet")),
            mobile=_flag(hidden.get("mobile")),
        ),
        animation=_build_animation(data.get("animation"), path=path),
        id=str(data["id"]) if data.get("id") is not None else None,
    )


def _build_components(raw: object, *, path: str) -> tuple[Component, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(
        _build_component(item, path=f"{path}[{index}]")
        for index, item in enumerate(raw)
    )


def _build_translation(raw: object, *, path: str) -> Translation:
    data = _mapping(raw, context=f"translation {path}")
    return Translation(
        components=_build_components(data.get("components"), path=path),
        seo=_build_seo(data.get("seo")),
    )


__all__ = ["COLLECTION_PROPS"]
