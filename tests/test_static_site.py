"""Tests for the static document bundle emitter."""

from __future__ import annotations

import typing as typ

import pytest

from site_compiler.components import HANDLERS
from site_compiler.config import Component, Page, Site, Visibility
from site_compiler.errors import ExportCancelled, ExportError
from site_compiler.generator import ExportOptions, StaticSiteEmitter, generate
from site_compiler.generator.pages import RENDER_FAILURE_MARKUP
from site_compiler.progress import CancelToken, ProgressEvent

if typ.TYPE_CHECKING:
    from bs4 import BeautifulSoup

    from site_compiler.generator import ExportResult
    from site_compiler.output import ExportedFile

Soup = typ.Callable[["ExportedFile"], "BeautifulSoup"]


def _html(result: ExportResult, path: str) -> str:
    file = result.get(path)
    assert file is not None, f"expected {path} in the export"
    return typ.cast("str", file.content)


def test_home_page_links_shared_assets(hello_site: Site, soup_of: Soup) -> None:
    result = generate(hello_site)

    assert result.paths == ["styles.css", "scripts.js", "index.html"]
    index = result.get("index.html")
    assert index is not None
    soup = soup_of(index)
    assert soup.find("h2").get_text() == "Hello"
    assert soup.find("link", rel="stylesheet", href="styles.css") is not None
    assert soup.find("script", src="scripts.js") is not None


def test_heading_markup_is_escaped(soup_of: Soup) -> None:
    site = Site(
        name="X",
        pages=(
            Page("home", "Home", components=(Component("heading", {"text": "a<b"}),)),
        ),
    )
    index = generate(site).get("index.html")
    assert index is not None
    assert "a&lt;b" in typ.cast("str", index.content)
    assert soup_of(index).find("h2").get_text() == "a<b"


def test_shared_image_is_extracted_once(png_uri: str) -> None:
    site = Site(
        name="Gallery",
        pages=(
            Page(
                "home",
                "Home",
                is_home_page=True,
                components=(
                    Component("hero", {"heading": "Hi", "backgroundImage": png_uri}),
                    Component("image-gallery", {"images": [png_uri]}),
                ),
            ),
        ),
    )
    result = generate(site)

    assets = [path for path in result.paths if path.startswith("assets/")]
    assert assets == ["assets/image-1.png"]
    html = _html(result, "index.html")
    assert "data:image" not in html
    assert "url('assets/image-1.png')" in html
    assert 'src="assets/image-1.png"' in html
    assert result.stats.image_count == 1


def test_image_on_two_pages_uses_depth_relative_paths(png_uri: str) -> None:
    image = Component("image-gallery", {"images": [png_uri]})
    site = Site(
        name="Depth",
        pages=(
            Page("home", "Home", is_home_page=True, components=(image,)),
            Page("blog/post", "Post", components=(image,)),
        ),
    )
    result = generate(site)

    assert 'src="assets/image-1.png"' in _html(result, "index.html")
    assert 'src="../../assets/image-1.png"' in _html(result, "blog/post/index.html")
    assets = [path for path in result.paths if path.startswith("assets/")]
    assert assets == ["assets/image-1.png"]


def test_translations_get_language_directories(
    translated_site: Site, soup_of: Soup
) -> None:
    result = generate(translated_site)

    assert result.paths[:5] == [
        "styles.css",
        "scripts.js",
        "index.html",
        "about/index.html",
        "fr/about/index.html",
    ]
    french = result.get("fr/about/index.html")
    assert french is not None
    soup = soup_of(french)
    assert soup.html["lang"] == "fr"
    assert soup.select_one('link[href$="styles.css"]')["href"] == "../../styles.css"
    assert soup.find("script")["src"] == "../../scripts.js"
    assert result.stats.page_count == 2
    assert result.stats.translation_count == 1


def test_component_hidden_everywhere_is_absent() -> None:
    site = Site(
        name="Hidden",
        pages=(
            Page(
                "home",
                "Home",
                components=(
                    Component(
                        "heading",
                        {"text": "Secret"},
                        hidden=Visibility(desktop=True, tablet=True, mobile=True),
                    ),
                ),
            ),
        ),
    )
    assert "Secret" not in _html(generate(site), "index.html")


def test_export_is_idempotent(translated_site: Site) -> None:
    options = ExportOptions(hosting_platform="netlify")
    first = generate(translated_site, options)
    second = generate(translated_site, options)
    assert first.files == second.files
    assert first.stats == second.stats


def test_platform_files_follow_documents_and_assets(hello_site: Site) -> None:
    result = generate(hello_site, ExportOptions(hosting_platform="github-pages"))
    assert result.paths[-1] == ".nojekyll"


def test_no_platform_means_no_platform_files(hello_site: Site) -> None:
    paths = generate(hello_site).paths
    assert "netlify.toml" not in paths
    assert ".nojekyll" not in paths


def test_progress_phases_in_order(translated_site: Site) -> None:
    events: list[ProgressEvent] = []
    generate(translated_site, on_progress=events.append)

    phases = [event.phase for event in events]
    assert phases[:3] == ["generating"] * 3
    assert phases[-2:] == ["packaging", "complete"]
    assert events[0].message == "Generating page: Home..."
    assert events[2].message == "Generating page: About (FR)..."
    assert events[-1].file_count == 5


def test_failing_listener_does_not_change_output(hello_site: Site) -> None:
    def explode(event: ProgressEvent) -> None:
        raise RuntimeError(event.phase)

    assert generate(hello_site, on_progress=explode).files == generate(hello_site).files


def test_render_failure_uses_placeholder(
    hello_site: Site, monkeypatch: pytest.MonkeyPatch
) -> None:
    def boom(block: object, ctx: object) -> str:
        raise RuntimeError("broken handler")

    monkeypatch.setitem(HANDLERS, "heading", boom)
    index = generate(hello_site).get("index.html")
    assert index is not None
    assert RENDER_FAILURE_MARKUP in typ.cast("str", index.content)


def test_site_without_pages_is_fatal() -> None:
    with pytest.raises(ExportError) as excinfo:
        generate(Site(name="Empty"))
    assert excinfo.value.phase == "generating"


def test_cancellation_returns_no_files(hello_site: Site) -> None:
    token = CancelToken()
    token.cancel()
    with pytest.raises(ExportCancelled):
        StaticSiteEmitter(hello_site, ExportOptions(cancel=token)).run()


def test_unknown_target_is_rejected(hello_site: Site) -> None:
    with pytest.raises(ExportError, match="Unknown export target"):
        generate(hello_site, target="desktop")  # type: ignore[arg-type]


def test_blank_slug_page_gets_its_own_document() -> None:
    site = Site(
        name="Blank",
        pages=(Page("home", "Home", is_home_page=True), Page("", "Untitled")),
    )
    result = generate(site)
    documents = [path for path in result.paths if path.endswith("index.html")]
    assert documents == ["index.html", "page/index.html"]


def test_colliding_output_paths_are_fatal() -> None:
    site = Site(
        name="Twins",
        pages=(
            Page("home", "Home", is_home_page=True),
            Page("/about/", "About"),
            Page("about", "About again"),
        ),
    )
    with pytest.raises(ExportError) as excinfo:
        generate(site)
    assert excinfo.value.phase == "generating"
    assert excinfo.value.item == "about/index.html"


def test_navbar_links_unflagged_first_page_to_root(soup_of: Soup) -> None:
    navbar = Component("navbar", {"logo": "Studio"})
    site = Site(
        name="Unflagged",
        pages=(
            Page("home", "Home", components=(navbar,)),
            Page("about", "About", components=(navbar,)),
        ),
    )
    result = generate(site)
    assert "home/index.html" not in result.paths

    index = result.get("index.html")
    assert index is not None
    links = soup_of(index).select(".nav-links a")
    assert [link["href"] for link in links] == ["/", "/about"]
    assert links[0].get("aria-current") == "page"
