"""Enumerate and render every page and translation of a site.

Both export targets walk the same ordered list of :class:`PageVariant`
values: every page in site order, then every translation of every page.
That order fixes the responsive class counter and asset numbering, so the
two targets number things identically.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from site_compiler._constants import FALLBACK_SLUG, INDEX_DOCUMENT
from site_compiler.components import RenderContext, RenderState, render_tree
from site_compiler.errors import ExportError, RenderError

if typ.TYPE_CHECKING:
    from site_compiler.config import Component, Page, Seo, Site

logger = logging.getLogger(__name__)

RENDER_FAILURE_MARKUP = (
    '<section class="wb-render-error" style="padding: 64px 24px; '
    'text-align: center;"><p>This page could not be rendered.</p></section>'
)


@dc.dataclass(frozen=True, slots=True)
class PageVariant:
    """A page in one language: the default language or a translation."""

    page: Page
    is_home: bool
    language: str | None = None

    @property
    def components(self) -> tuple[Component, ...]:
        """Return the component tree for this language."""
        if self.language is None:
            return self.page.components
        return self.page.translations[self.language].components

    @property
    def seo(self) -> Seo:
        """Return page SEO with any translation overrides applied."""
        if self.language is None:
            return self.page.seo
        return self.page.seo.merged(self.page.translations[self.language].seo)

    @property
    def slug(self) -> str:
        """Return the page slug without surrounding slashes.

        A blank slug falls back to ``page`` so the page keeps its own route.

        >>> from site_compiler.config import Page
        >>> PageVariant(Page(slug="", title="Untitled"), False).slug
        'page'
        """
        return self.page.slug.strip("/") or FALLBACK_SLUG

    @property
    def label(self) -> str:
        """Return a progress label such as ``About (FR)``."""
        if self.language is None:
            return self.page.title
        return f"{self.page.title} ({self.language.upper()})"

    @property
    def route(self) -> str:
        """Return the client route: ``/``, ``/slug``, ``/lang``, ``/lang/slug``.

        >>> from site_compiler.config import Page
        >>> PageVariant(Page(slug="about", title="About"), False, "fr").route
        '/fr/about'
        """
        parts = [self.language] if self.language else []
        if not self.is_home:
            parts.append(self.slug)
        return "/" + "/".join(parts)

    @property
    def document_path(self) -> str:
        """Return the static output path, for example ``fr/about/index.html``."""
        route = self.route.strip("/")
        return f"{route}/{INDEX_DOCUMENT}" if route else INDEX_DOCUMENT


def page_variants(site: Site) -> list[PageVariant]:
    """Return every page, then every translation, in site order.

    Raises
    ------
    ExportError
        If the site has no pages, or two variants share an output path.
    """
    if not site.pages:
        msg = f"Site '{site.name}' has no pages to export."
        raise ExportError(msg, phase="generating", item=site.slug or site.name)
    home = site.home_page
    variants = [PageVariant(page, page is home) for page in site.pages]
    variants.extend(
        PageVariant(page, page is home, language)
        for page in site.pages
        for language in page.translations
    )
    seen: set[str] = set()
    for variant in variants:
        path = variant.document_path
        if path in seen:
            msg = f"Page '{variant.label}' would overwrite '{path}'."
            raise ExportError(msg, phase="generating", item=path)
        seen.add(path)
    return variants


def render_variant(
    variant: PageVariant,
    site: Site,
    state: RenderState,
    *,
    form_action_url: str | None = None,
) -> str:
    """Render the component tree of ``variant``.

    A page whose rendering raises is logged and replaced by placeholder
    markup so the rest of the export can continue.
    """
    ctx = RenderContext(
        theme=site.theme,
        pages=site.pages,
        current_slug=variant.slug,
        home_page=site.home_page,
        state=state,
        language=variant.language,
        is_home_page=variant.is_home,
        form_action_url=form_action_url,
    )
    try:
        return render_tree(variant.components, ctx)
    except RenderError:
        logger.exception("Failed to render page %s", variant.label)
        return RENDER_FAILURE_MARKUP


__all__ = ["RENDER_FAILURE_MARKUP", "PageVariant", "page_variants", "render_variant"]
