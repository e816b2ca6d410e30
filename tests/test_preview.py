"""Tests for the single-document home page preview."""

from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup

from site_compiler.config import Component, Page, Site
from site_compiler.generator import render_preview


def _gallery_site(png_uri: str) -> Site:
    return Site(
        name="Preview",
        pages=(
            Page(
                "about",
                "About",
                components=(Component("heading", {"text": "About"}),),
            ),
            Page(
                "home",
                "Home",
                is_home_page=True,
                components=(
                    Component("heading", {"text": "Front"}),
                    Component("image-gallery", {"images": [png_uri, png_uri]}),
                ),
            ),
        ),
    )


def test_preview_renders_flagged_home_page(png_uri: str) -> None:
    document = render_preview(_gallery_site(png_uri))
    soup = BeautifulSoup(document.html, "html.parser")

    assert soup.find("h2").get_text() == "Front"
    assert soup.find("style") is not None
    assert soup.find("link", rel="stylesheet", href="styles.css") is None
    assert "'use strict';" in soup.find_all("script")[-1].get_text()


def test_preview_uses_blob_handles(png_bytes: bytes, png_uri: str) -> None:
    document = render_preview(_gallery_site(png_uri))

    assert dict(document.assets) == {"blob:preview/image-1.png": png_bytes}
    assert document.html.count('src="blob:preview/image-1.png"') == 2
    assert "data:image" not in document.html


def test_materialize_writes_browsable_copy(
    tmp_path: Path, png_bytes: bytes, png_uri: str
) -> None:
    index = render_preview(_gallery_site(png_uri)).materialize(tmp_path / "out")

    assert index == tmp_path / "out" / "index.html"
    assert (tmp_path / "out" / "image-1.png").read_bytes() == png_bytes
    html = index.read_text(encoding="utf-8")
    assert 'src="image-1.png"' in html
    assert "blob:preview/" not in html
