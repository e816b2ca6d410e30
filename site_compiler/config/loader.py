"""Load website descriptions from YAML or JSON into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path
from types import MappingProxyType

from ruamel.yaml import YAML

from site_compiler.errors import SiteConfigError

from .helpers import (
    _build_components,
    _build_seo,
    _build_theme,
    _build_translation,
    _flag,
    _mapping,
    _pick,
)
from .models import Page, Site


def load_site(path: Path) -> Site:
    """Load the site description stored at ``path``.

    Parameters
    ----------
    path : Path
        Filesystem path to a YAML or JSON site description. JSON files are
        read by the same YAML 1.2 loader, which accepts JSON documents.

    Returns
    -------
    Site
        Parsed site with its theme, pages, translations, and component trees.

    Raises
    ------
    FileNotFoundError
        If the description file does not exist at ``path``.
    SiteConfigError
        If the document is not a mapping, has no ``pages`` list, or contains
        malformed pages or components.
    YAMLError
        If the content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from site_compiler.config import load_site
    >>> site = load_site(Path("site.yaml"))  # doctest: +SKIP
    >>> [page.slug for page in site.pages]  # doctest: +SKIP
    ['home', 'about']
    """
    if not path.exists():
        msg = f"Site description '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    return site_from_mapping(loaded)


def site_from_mapping(raw: object) -> Site:
    """Build a :class:`Site` from an already parsed mapping.

    The mapping may either be the site itself or wrap it under a ``site``
    key, as the builder's export payload does.
    """
    if not isinstance(raw, typ.Mapping):
        msg = "Top-level site description must be a mapping."
        raise SiteConfigError(msg)
    data: typ.Mapping[str, typ.Any] = raw.get("site", raw)
    data = _mapping(data, context="site")

    name = data.get("name")
    if not name:
        msg = "Site description is missing 'name'."
        raise SiteConfigError(msg)

    pages_raw = data.get("pages")
    pages: list[Page] = []
    match pages_raw:
        case list():
            for index, payload in enumerate(pages_raw):
                pages.append(_build_page(payload, fallback_slug=f"page-{index + 1}"))
        case dict():
            for slug, payload in pages_raw.items():
                pages.append(_build_page(payload, fallback_slug=str(slug)))
        case _:
            msg = "Site description must define a 'pages' list."
            raise SiteConfigError(msg)

    return Site(
        name=str(name),
        slug=str(data.get("slug") or ""),
        description=str(data.get("description") or ""),
        default_language=str(
            _pick(data, "defaultLanguage", "default_language") or "en"
        ),
        theme=_build_theme(data.get("theme")),
        favicon=str(data.get("favicon") or ""),
        published_url=str(_pick(data, "publishedUrl", "published_url") or ""),
        pages=tuple(pages),
    )


def _build_page(raw: object, *, fallback_slug: str) -> Page:
    """Build a Page, including its translations, from a raw mapping."""
    data = _mapping(raw, context=f"page '{fallback_slug}'")
    slug = str(data.get("slug") if data.get("slug") is not None else fallback_slug)
    title = str(data.get("title") or slug)
    translations_raw = _mapping(
        data.get("translations"), context=f"page '{slug}' translations"
    )
    translations = {
        str(lang): _build_translation(payload, path=f"{slug}/{lang}")
        for lang, payload in translations_raw.items()
    }
    return Page(
        slug=slug,
        title=title,
        is_home_page=_flag(_pick(data, "isHomePage", "is_home_page")),
        components=_build_components(data.get("components"), path=slug),
        seo=_build_seo(data.get("seo")),
        translations=MappingProxyType(translations),
    )


__all__ = ["load_site", "site_from_mapping"]
