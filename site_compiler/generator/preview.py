"""Render the home page as one self-contained in-memory document.

The preview inlines the stylesheet and behavior script and swaps every
embedded image for a ``blob:preview/image-N.ext`` handle, so a host can
resolve the handles from :attr:`PreviewDocument.assets` without writing a
full export to disk.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from site_compiler._constants import INDEX_DOCUMENT, PREVIEW_HANDLE_PREFIX
from site_compiler.assets import AssetExtractor
from site_compiler.behavior import generate_behavior_script
from site_compiler.output import ExportedFile
from site_compiler.stylesheet import generate_stylesheet

from .document import DocumentShell
from .emitter import BaseEmitter
from .pages import page_variants, render_variant

if typ.TYPE_CHECKING:
    from site_compiler.config import Site

    from .models import ExportOptions

logger = logging.getLogger(__name__)


@dc.dataclass(frozen=True, slots=True)
class PreviewDocument:
    """An assembled preview document and the assets its handles point at.

    Attributes
    ----------
    html : str
        The full document with inline CSS and JS.
    assets : Mapping[str, bytes | str]
        Asset content keyed by ``blob:preview/`` handle.
    """

    html: str
    assets: typ.Mapping[str, bytes | str]

    def materialize(self, directory: Path | str) -> Path:
        """Write a browsable copy of the preview into ``directory``.

        Handles are rewritten to the plain asset filenames, which are stored
        beside ``index.html``.

        Returns
        -------
        Path
            The written ``index.html``.
        """
        root = Path(directory)
        root.mkdir(parents=True, exist_ok=True)
        html = self.html
        for handle, content in self.assets.items():
            name = handle.removeprefix(PREVIEW_HANDLE_PREFIX)
            html = html.replace(handle, name)
            target = root / name
            if isinstance(content, bytes):
                target.write_bytes(content)
            else:
                target.write_text(content, encoding="utf-8")
        index = root / INDEX_DOCUMENT
        index.write_text(html, encoding="utf-8")
        return index


class PreviewEmitter(BaseEmitter):
    """Assemble the home page preview."""

    def run(self) -> PreviewDocument:  # type: ignore[override]
        """Render the preview document."""
        home = next(
            variant for variant in page_variants(self.site) if variant.is_home
        )
        body = render_variant(
            home,
            self.site,
            self.state,
            form_action_url=self.options.form_action_url,
        )
        shell = DocumentShell.for_page(self.site, home.seo, home.page.title)
        html = shell.render(
            body,
            inline_css=generate_stylesheet(self.site.theme),
            inline_js=generate_behavior_script(),
        )
        self.enter("extracting-images")
        extractor = AssetExtractor(
            self.profile,
            layout="preview",
            reporter=self.reporter,
            cancel=self.cancel,
            max_workers=self.options.max_workers,
        )
        (document,) = extractor.process([ExportedFile(INDEX_DOCUMENT, html)])
        assets = {
            f"{PREVIEW_HANDLE_PREFIX}{asset.path}": asset.content
            for asset in extractor.assets
        }
        logger.debug("Preview holds %d assets", len(assets))
        return PreviewDocument(html=typ.cast("str", document.content), assets=assets)


def render_preview(
    site: Site, options: ExportOptions | None = None
) -> PreviewDocument:
    """Render the home page of ``site`` as a single preview document.

    Examples
    --------
    >>> from site_compiler.config import Component, Page, Site
    >>> page = Page(slug="home", title="Home", components=(
    ...     Component("heading", {"text": "Hi"}),
    ... ))
    >>> "<style>" in render_preview(Site(name="Demo", pages=(page,))).html
    True
    """
    return PreviewEmitter(site, options).run()


__all__ = ["PreviewDocument", "PreviewEmitter", "render_preview"]
