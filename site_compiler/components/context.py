"""Render context threaded through every component handler."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from site_compiler.config.models import Page, Theme


@dc.dataclass(slots=True)
class RenderState:
    """Mutable counters owned by a single export invocation.

    The responsive counter mints ``wb-r{n}`` class names and countdown ids.
    One instance is shared by every page rendered in the same export so the
    names stay unique site-wide, and a fresh instance per export keeps
    repeated exports byte-identical.
    """

    responsive_counter: int = 0

    def next_id(self) -> int:
        """Advance and return the counter."""
        self.responsive_counter += 1
        return self.responsive_counter


@dc.dataclass(frozen=True, slots=True)
class RenderContext:
    """Everything a handler needs besides the component itself.

    Attributes
    ----------
    theme : Theme
        Site theme supplying colors, fonts, and radii.
    pages : tuple[Page, ...]
        All pages of the site, for navigation-aware handlers.
    current_slug : str
        Slug of the page being rendered.
    home_page : Page or None
        The page exported at the site root. When unset, navigation falls
        back to each page's own home flag.
    state : RenderState
        Per-invocation counters.
    language : str or None
        Translation language, or ``None`` for the default language.
    is_home_page : bool
        Whether the page being rendered is the home page.
    form_action_url : str or None
        Fallback form endpoint for contact and generic forms.
    """

    theme: Theme
    pages: tuple[Page, ...] = ()
    current_slug: str = ""
    home_page: Page | None = None
    state: RenderState = dc.field(default_factory=RenderState)
    language: str | None = None
    is_home_page: bool = False
    form_action_url: str | None = None


__all__ = ["RenderContext", "RenderState"]
