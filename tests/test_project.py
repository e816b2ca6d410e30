"""Tests for the Vite + React application project emitter."""

from __future__ import annotations

import re
import typing as typ

import msgspec
import pytest

from site_compiler.config import Component, Page, Site, Translation, Visibility
from site_compiler.errors import ExportError
from site_compiler.generator import ExportOptions, ProjectEmitter, generate
from site_compiler.generator.pages import PageVariant
from site_compiler.generator.project import build_routes, sanitize_slug
from site_compiler.templating import render_template

if typ.TYPE_CHECKING:
    from site_compiler.generator import ExportResult

IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def _text(result: ExportResult, path: str) -> str:
    file = result.get(path)
    assert file is not None, f"expected {path} in the project"
    return typ.cast("str", file.content)


def test_scaffold_lives_under_sanitised_slug(hello_site: Site) -> None:
    result = generate(hello_site, target="project")
    expected = {
        "package.json",
        "vite.config.ts",
        "tsconfig.json",
        "tsconfig.node.json",
        ".npmrc",
        ".gitignore",
        "index.html",
        "src/main.tsx",
        "src/reset.css",
        "src/styles.css",
        "src/scripts.ts",
        "src/components/PageLoader.tsx",
        "src/components/ThemeToggle.tsx",
        "src/hooks/useTheme.tsx",
        "src/pages/NotFound.tsx",
        "src/App.tsx",
        "src/pages/HomePage.tsx",
        "public/_redirects",
        "README.md",
        "public/sitemap.xml",
        "public/robots.txt",
    }
    assert all(path.startswith("hello/") for path in result.paths)
    assert {path.removeprefix("hello/") for path in result.paths} == expected


def test_package_json_declares_build_scripts(hello_site: Site) -> None:
    result = generate(hello_site, target="project")
    package = msgspec.json.decode(_text(result, "hello/package.json"))
    assert package["name"] == "hello"
    assert package["scripts"]["build"] == "tsc && vite build"
    assert "react-router-dom" in package["dependencies"]


def test_translated_routes_get_distinct_identifiers(translated_site: Site) -> None:
    result = generate(translated_site, target="project")
    app = _text(result, "bonjour/src/App.tsx")

    assert '<Route path="/" element={<HomePage />} />' in app
    assert '<Route path="/about" element={<AboutPage />} />' in app
    assert '<Route path="/fr/about" element={<AboutPageFr />} />' in app
    assert '<Route path="*" element={<NotFound />} />' in app
    assert "bonjour/src/pages/AboutPageFr.tsx" in result.paths


def test_view_embeds_markup_and_initialises_behaviour(hello_site: Site) -> None:
    result = generate(hello_site, target="project")
    view = _text(result, "hello/src/pages/HomePage.tsx")
    assert "export default function HomePage()" in view
    assert "initInteractivity();" in view
    assert "window.scrollTo(0, 0);" in view
    assert "Hello</h2>" in view


def test_markup_is_escaped_for_template_literals() -> None:
    site = Site(
        name="Tick",
        pages=(
            Page(
                "home",
                "Home",
                components=(Component("custom-html", {"html": "<p>`${x}`\\</p>"}),),
            ),
        ),
    )
    result = generate(site, target="project")
    view = _text(result, "my-website/src/pages/HomePage.tsx")
    assert "<p>\\`\\${x}\\`\\\\</p>" in view


def test_identifiers_are_unique_and_valid() -> None:
    pages = (
        Page("home", "Home", is_home_page=True),
        Page("about-us", "About"),
        Page("about_us", "About again"),
        Page("404", "Missing"),
        Page("", "Untitled"),
    )
    variants = [PageVariant(page, page.is_home_page) for page in pages]
    routes = build_routes(variants)
    identifiers = [route.identifier for route in routes]

    assert len(set(identifiers)) == len(identifiers)
    assert all(IDENTIFIER.match(identifier) for identifier in identifiers)
    assert identifiers[:4] == ["HomePage", "AboutUsPage", "AboutUsPage2", "Page404Page"]


def test_route_paths_are_url_safe() -> None:
    (route,) = build_routes([PageVariant(Page("café menu", "Menu"), False)])
    assert route.path == "/caf%C3%A9%20menu"


@pytest.mark.parametrize(
    ("slug", "expected"),
    [("My Site!", "my-site"), ("", "my-website"), ("a__b", "a__b"), ("--x--", "x")],
)
def test_sanitize_slug(slug: str, expected: str) -> None:
    assert sanitize_slug(slug) == expected


def test_images_extracted_once_across_views(png_uri: str) -> None:
    gallery = Component("image-gallery", {"images": [png_uri]})
    site = Site(
        name="Pics",
        slug="pics",
        pages=(
            Page("home", "Home", is_home_page=True, components=(gallery,)),
            Page(
                "work",
                "Work",
                components=(gallery,),
                translations={"de": Translation(components=(gallery,))},
            ),
        ),
    )
    result = generate(site, target="project")

    assets = [path for path in result.paths if "/public/assets/" in path]
    assert assets == ["pics/public/assets/image-1.png"]
    for view in ("HomePage", "WorkPage", "WorkPageDe"):
        source = _text(result, f"pics/src/pages/{view}.tsx")
        assert 'src="/assets/image-1.png"' in source
        assert "data:image" not in source


def test_hidden_component_is_absent_from_views() -> None:
    secret = Component(
        "heading",
        {"text": "Secret"},
        hidden=Visibility(desktop=True, tablet=True, mobile=True),
    )
    site = Site(name="Hidden", pages=(Page("home", "Home", components=(secret,)),))
    result = generate(site, target="project")
    view = _text(result, "my-website/src/pages/HomePage.tsx")
    assert "Secret" not in view


def test_platform_files_replace_redirect_hint(hello_site: Site) -> None:
    result = generate(
        hello_site, ExportOptions(hosting_platform="netlify"), target="project"
    )
    assert "hello/netlify.toml" in result.paths
    assert "hello/public/_redirects" not in result.paths
    readme = _text(result, "hello/README.md")
    assert "## Deploy to Netlify" in readme
    assert "1. Push the project to a Git repository." in readme


def test_sitemap_lists_every_route(translated_site: Site) -> None:
    site = Site(
        name=translated_site.name,
        slug=translated_site.slug,
        published_url="https://example.org/",
        pages=translated_site.pages,
    )
    result = generate(site, ExportOptions(build_date="2024-05-01"), target="project")
    sitemap = _text(result, "bonjour/public/sitemap.xml")
    assert "<loc>https://example.org</loc>" in sitemap
    assert "<loc>https://example.org/fr/about</loc>" in sitemap
    assert sitemap.count("<lastmod>2024-05-01</lastmod>") == 3
    robots = _text(result, "bonjour/public/robots.txt")
    assert "Sitemap: https://example.org/sitemap.xml" in robots


def test_sitemap_omits_lastmod_without_build_date(hello_site: Site) -> None:
    result = generate(hello_site, target="project")
    sitemap = _text(result, "hello/public/sitemap.xml")
    assert "<lastmod>" not in sitemap
    assert "<loc>https://hello.example.com</loc>" in sitemap


def test_project_export_is_idempotent(translated_site: Site) -> None:
    first = ProjectEmitter(translated_site).run()
    second = ProjectEmitter(translated_site).run()
    assert first.files == second.files


def test_stylesheet_carries_dark_mode(hello_site: Site) -> None:
    result = generate(hello_site, target="project")
    styles = _text(result, "hello/src/styles.css")
    assert ".wb-hide-mobile" in styles
    assert "html.dark" in styles


def test_minimal_project_export_names_the_readme() -> None:
    site = Site(name="S", pages=(Page("home", "Home", is_home_page=True),))
    result = generate(site, target="project")
    readme = _text(result, "my-website/README.md")
    assert readme.splitlines()[0] == "# S"
    assert "my-website/src/pages/HomePage.tsx" in result.paths


def test_blank_slug_page_gets_its_own_route() -> None:
    site = Site(
        name="Blank",
        pages=(Page("home", "Home", is_home_page=True), Page("", "Untitled")),
    )
    app = _text(generate(site, target="project"), "my-website/src/App.tsx")
    assert app.count('<Route path="/" ') == 1
    assert '<Route path="/page" element={<PagePage />} />' in app


def test_readme_failure_is_reported_as_packaging(
    hello_site: Site, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing(template_name: str, /, **context: object) -> str:
        if template_name == "project/README.md.jinja":
            msg = "template store unavailable"
            raise OSError(msg)
        return render_template(template_name, **context)

    monkeypatch.setattr(
        "site_compiler.generator.project.render_template", failing
    )
    with pytest.raises(ExportError) as excinfo:
        generate(hello_site, target="project")
    assert excinfo.value.phase == "packaging"
