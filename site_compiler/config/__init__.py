"""Load and model website descriptions for export.

This subpackage parses a site description (YAML or the builder's JSON
payload), normalises loosely typed component props once per component kind,
and produces frozen dataclasses (:class:`Site`, :class:`Page`,
:class:`Component`, etc.) that the renderers and emitters consume. The primary
entry point is :func:`load_site`.

Examples
--------
>>> from pathlib import Path
>>> from site_compiler.config import load_site
>>> site = load_site(Path("site.yaml"))  # doctest: +SKIP
>>> site.home_page.slug  # doctest: +SKIP
'home'
"""

from site_compiler.errors import SiteConfigError

from .loader import load_site, site_from_mapping
from .models import (
    Animation,
    Component,
    OptimizationProfile,
    Page,
    ResponsiveStyles,
    Seo,
    Site,
    Theme,
    Translation,
    Visibility,
)

__all__ = [
    "Animation",
    "Component",
    "OptimizationProfile",
    "Page",
    "ResponsiveStyles",
    "Seo",
    "Site",
    "SiteConfigError",
    "Theme",
    "Translation",
    "Visibility",
    "load_site",
    "site_from_mapping",
]
