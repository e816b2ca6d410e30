"""Compile website builder descriptions into deployable output.

A site description (pages, component trees, a theme) is exported either as a
ready-to-serve static bundle or as a buildable Vite + React + TypeScript
project, with embedded images extracted and optimized along the way.

Exports
-------
- ``generate``: Run an export for the ``static`` or ``project`` target.
- ``render_preview``: Render the home page as one in-memory document.
- ``load_site``: Parse a YAML or JSON site description.
- ``app`` / ``main``: The Cyclopts command-line application.

Examples
--------
>>> from site_compiler import generate, load_site
>>> result = generate(load_site("site.yaml"))  # doctest: +SKIP
>>> result.paths[:2]  # doctest: +SKIP
['styles.css', 'scripts.js']
"""

from __future__ import annotations

from .cli import app, main
from .config import load_site
from .errors import ExportCancelled, ExportError, SiteCompilerError, SiteConfigError
from .generator import ExportOptions, ExportResult, generate, render_preview
from .progress import CancelToken, ProgressEvent

__all__ = [
    "CancelToken",
    "ExportCancelled",
    "ExportError",
    "ExportOptions",
    "ExportResult",
    "ProgressEvent",
    "SiteCompilerError",
    "SiteConfigError",
    "app",
    "generate",
    "load_site",
    "main",
    "render_preview",
]
