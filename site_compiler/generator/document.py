"""Wrap rendered page markup in a complete HTML document."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from urllib.parse import quote

from site_compiler._constants import GENERIC_FONT_FAMILIES, GOOGLE_FONTS_WEIGHTS
from site_compiler.templating import render_template

if typ.TYPE_CHECKING:
    from site_compiler.config import Seo, Site, Theme


def _family_name(font_stack: str | None) -> str | None:
    if not font_stack:
        return None
    name = font_stack.split(",")[0].strip().replace("'", "").replace('"', "")
    if not name or name.lower() in GENERIC_FONT_FAMILIES:
        return None
    return name


def google_fonts_url(theme: Theme) -> str:
    """Return the Google Fonts stylesheet URL for the theme's font families.

    Only the first family of each stack is requested; generic families such
    as ``sans-serif`` are skipped. Returns an empty string when nothing needs
    loading.

    Examples
    --------
    >>> from site_compiler.config import Theme
    >>> google_fonts_url(Theme(heading_font="Playfair Display, serif"))
    'https://fonts.googleapis.com/css2?family=Playfair%20Display:wght@300;400;500;600;700;800&family=Inter:wght@300;400;500;600;700;800&display=swap'
    >>> google_fonts_url(Theme(heading_font="serif", body_font="system-ui"))
    ''
    """
    families: list[str] = []
    for stack in (theme.heading_font, theme.body_font):
        name = _family_name(stack)
        if name and name not in families:
            families.append(name)
    if not families:
        return ""
    params = "&".join(
        f"family={quote(name, safe='')}:wght@{GOOGLE_FONTS_WEIGHTS}" for name in families
    )
    return f"https://fonts.googleapis.com/css2?{params}&display=swap"


@dc.dataclass(frozen=True, slots=True)
class DocumentShell:
    """Head metadata and asset links for one emitted document."""

    title: str
    description: str = ""
    og_title: str = ""
    og_description: str = ""
    og_image: str = ""
    lang: str = "en"
    direction: str = "ltr"
    favicon: str = ""
    fonts_url: str = ""

    @classmethod
    def for_page(
        cls, site: Site, seo: Seo, page_title: str, *, lang: str | None = None
    ) -> DocumentShell:
        """Resolve the shell for a page from its SEO block and site defaults."""
        title = seo.title or page_title or site.name
        description = seo.description or site.description
        return cls(
            title=title,
            description=description,
            og_title=seo.og_title or title,
            og_description=seo.og_description or description,
            og_image=seo.og_image,
            lang=lang or site.default_language or "en",
            direction=site.theme.direction or "ltr",
            favicon=site.favicon,
            fonts_url=google_fonts_url(site.theme),
        )

    def render(
        self,
        body: str,
        *,
        stylesheet_href: str = "",
        script_href: str = "",
        inline_css: str | None = None,
        inline_js: str | None = None,
    ) -> str:
        """Return the full HTML document around ``body``.

        ``inline_css`` and ``inline_js`` embed the stylesheet and script
        directly instead of linking ``stylesheet_href`` and ``script_href``.
        """
        return render_template(
            "document.html.jinja",
            **dc.asdict(self),
            body=body,
            stylesheet_href=stylesheet_href,
            script_href=script_href,
            inline_css=inline_css,
            inline_js=inline_js,
        )


__all__ = ["DocumentShell", "google_fonts_url"]
