"""Typed dataclasses describing a website: theme, pages, and component trees."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from types import MappingProxyType

BREAKPOINTS: tuple[str, ...] = ("desktop", "tablet", "mobile")


def _empty_mapping() -> typ.Mapping[str, typ.Any]:
    return MappingProxyType({})


@dc.dataclass(frozen=True, slots=True)
class Theme:
    """Site-wide visual defaults consumed by every component handler."""

    primary_color: str = "#3b82f6"
    secondary_color: str = "#64748b"
    accent_color: str = "#f59e0b"
    background_color: str = "#ffffff"
    text_color: str = "#1e293b"
    heading_font: str = "Inter, sans-serif"
    body_font: str = "Inter, sans-serif"
    border_radius: int = 8
    spacing: int = 16
    direction: str = "ltr"
    shadow_style: str = "subtle"
    button_style: str | None = None
    link_style: str | None = None
    section_padding: float = 1.0
    font_scale: float = 1.0
    letter_spacing: float | None = None
    heading_transform: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Seo:
    """Search and social metadata for a page or translation."""

    title: str = ""
    description: str = ""
    og_title: str = ""
    og_description: str = ""
    og_image: str = ""

    def merged(self, override: Seo) -> Seo:
        """Return a copy where non-empty fields of ``override`` win."""
        changes = {
            field.name: getattr(override, field.name)
            for field in dc.fields(override)
            if getattr(override, field.name)
        }
        return dc.replace(self, **changes)


@dc.dataclass(frozen=True, slots=True)
class Visibility:
    """Per-breakpoint hidden flags."""

    desktop: bool = False
    tablet: bool = False
    mobile: bool = False

    @property
    def hidden_everywhere(self) -> bool:
        """Return ``True`` when the component is suppressed on every breakpoint."""
        return self.desktop and self.tablet and self.mobile

    def marker_classes(self) -> list[str]:
        """Return the ``wb-hide-*`` classes for each hidden breakpoint."""
        return [
            f"wb-hide-{name}" for name in BREAKPOINTS if getattr(self, name)
        ]


@dc.dataclass(frozen=True, slots=True)
class ResponsiveStyles:
    """CSS property maps (camelCase keys) for each breakpoint."""

    desktop: typ.Mapping[str, typ.Any] = dc.field(default_factory=_empty_mapping)
    tablet: typ.Mapping[str, typ.Any] = dc.field(default_factory=_empty_mapping)
    mobile: typ.Mapping[str, typ.Any] = dc.field(default_factory=_empty_mapping)


@dc.dataclass(frozen=True, slots=True)
class Animation:
    """Entrance animation played client-side when the component scrolls in."""

    entrance: str
    delay: int = 0
    speed: str = "normal"


@dc.dataclass(frozen=True, slots=True)
class Component:
    """A tagged building block of a page tree.

    Attributes
    ----------
    kind : str
        Component kind such as ``"hero"`` or ``"faq"``.
    props : Mapping[str, Any]
        Loosely typed property bag; keys follow the builder's camelCase names.
    children : tuple[Component, ...]
        Nested components for container kinds.
    styles : ResponsiveStyles
        Desktop style plus tablet/mobile overrides.
    hidden : Visibility
        Breakpoints on which the component is suppressed.
    animation : Animation or None
        Optional entrance animation descriptor.
    id : str or None
        Identifier assigned by the editor, if any.
    """

    kind: str
    props: typ.Mapping[str, typ.Any] = dc.field(default_factory=_empty_mapping)
    children: tuple[Component, ...] = ()
    styles: ResponsiveStyles = dc.field(default_factory=ResponsiveStyles)
    hidden: Visibility = dc.field(default_factory=Visibility)
    animation: Animation | None = None
    id: str | None = None


@dc.dataclass(frozen=True, slots=True)
class Translation:
    """Language-specific component tree and SEO overrides for a page."""

    components: tuple[Component, ...] = ()
    seo: Seo = dc.field(default_factory=Seo)


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A routable page of the site."""

    slug: str
    title: str
    is_home_page: bool = False
    components: tuple[Component, ...] = ()
    seo: Seo = dc.field(default_factory=Seo)
    translations: typ.Mapping[str, Translation] = dc.field(
        default_factory=_empty_mapping
    )


@dc.dataclass(frozen=True, slots=True)
class Site:
    """Top-level website description handed to the export pipeline."""

    name: str
    slug: str = ""
    description: str = ""
    default_language: str = "en"
    theme: Theme = dc.field(default_factory=Theme)
    favicon: str = ""
    published_url: str = ""
    pages: tuple[Page, ...] = ()

    @property
    def home_page(self) -> Page | None:
        """Return the page flagged as home, falling back to the first page."""
        for page in self.pages:
            if page.is_home_page:
                return page
        return self.pages[0] if self.pages else None

    @property
    def translation_count(self) -> int:
        """Return the number of page translations across the site."""
        return sum(len(page.translations) for page in self.pages)


@dc.dataclass(frozen=True, slots=True)
class OptimizationProfile:
    """Settings controlling how extracted images are transcoded.

    Attributes
    ----------
    enabled : bool
        When ``False`` every asset keeps its original bytes.
    max_width, max_height : int
        Bounding box images are downscaled to fit, preserving aspect ratio.
    quality : float
        Encoder quality between 0 and 1.
    convert_to_webp : bool
        Re-encode raster images as WebP.
    min_size_bytes : int
        Payloads smaller than this are stored untouched.
    """

    enabled: bool = True
    max_width: int = 1920
    max_height: int = 1080
    quality: float = 0.85
    convert_to_webp: bool = False
    min_size_bytes: int = 10_240


__all__ = [
    "BREAKPOINTS",
    "Animation",
    "Component",
    "OptimizationProfile",
    "Page",
    "ResponsiveStyles",
    "Seo",
    "Site",
    "Theme",
    "Translation",
    "Visibility",
]
