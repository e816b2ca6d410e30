"""Emit a ready-to-serve static document bundle.

The bundle holds one ``styles.css`` and one ``scripts.js`` at the root, an
``index.html`` per page and translation, extracted images under ``assets/``,
and the hosting platform's config files when a platform was chosen.

Examples
--------
>>> from site_compiler.config import Component, Page, Site
>>> site = Site(
...     name="Demo",
...     pages=(
...         Page(
...             slug="home",
...             title="Home",
...             is_home_page=True,
...             components=(Component("heading", {"text": "Hello"}),),
...         ),
...     ),
... )
>>> StaticSiteEmitter(site).run().paths
['styles.css', 'scripts.js', 'index.html']
"""

from __future__ import annotations

import logging

from site_compiler._constants import SCRIPT_NAME, STYLESHEET_NAME
from site_compiler.assets import extract_assets
from site_compiler.behavior import generate_behavior_script
from site_compiler.output import ExportedFile
from site_compiler.stylesheet import generate_stylesheet

from .document import DocumentShell
from .emitter import BaseEmitter
from .models import ExportResult
from .pages import PageVariant, page_variants, render_variant

logger = logging.getLogger(__name__)


class StaticSiteEmitter(BaseEmitter):
    """Render every page of a site into standalone HTML documents."""

    def run(self) -> ExportResult:
        """Generate the bundle.

        Returns
        -------
        ExportResult
            The rewritten documents, then extracted assets, then platform
            config files, with totals.

        Raises
        ------
        ExportError
            If the site has no pages.
        ExportCancelled
            If the cancellation token fires between pages or assets.
        """
        variants = page_variants(self.site)
        files = [
            ExportedFile(STYLESHEET_NAME, generate_stylesheet(self.site.theme)),
            ExportedFile(SCRIPT_NAME, generate_behavior_script()),
        ]
        total = len(variants)
        for index, variant in enumerate(variants, start=1):
            self.cancel.raise_if_cancelled("generating", variant.document_path)
            self.reporter.emit(
                "generating", index, total, f"Generating page: {variant.label}..."
            )
            files.append(self._document(variant))

        self.enter("extracting-images")
        self.reporter.emit(
            "extracting-images", 0, 1, "Scanning for embedded images..."
        )
        extraction = extract_assets(
            files,
            self.profile,
            layout="static",
            on_progress=self.on_progress,
            cancel=self.cancel,
            max_workers=self.options.max_workers,
        )
        logger.info(
            "Extracted %d images from %d documents", extraction.stats.count, total
        )

        output = [*extraction.files, *extraction.assets]
        if self.options.hosting_platform:
            output.extend(self.preset.config_files("static"))
        return self.finish(output, extraction.stats)

    def _document(self, variant: PageVariant) -> ExportedFile:
        path = variant.document_path
        up = "../" * path.count("/")
        body = render_variant(
            variant,
            self.site,
            self.state,
            form_action_url=self.options.form_action_url,
        )
        shell = DocumentShell.for_page(
            self.site, variant.seo, variant.page.title, lang=variant.language
        )
        html = shell.render(
            body,
            stylesheet_href=f"{up}{STYLESHEET_NAME}",
            script_href=f"{up}{SCRIPT_NAME}",
        )
        return ExportedFile(path, html)


__all__ = ["StaticSiteEmitter"]
