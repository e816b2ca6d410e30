"""Behaviour tests for exporting builder sites end to end.

The scenarios in ``features/site_export.feature`` build small sites in
memory, run the static or project export through ``generate``, and inspect
the resulting file set with BeautifulSoup. They cover the headline
guarantees of the pipeline: escaped headings linked to the shared
stylesheet and script, image deduplication, per-language documents and
routes, byte-for-byte assets when optimization is disabled, and
breakpoint-specific visibility markers.

Usage:
    Run these behaviour tests with pytest, for example:

        pytest tests/bdd/test_site_export.py -v
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from site_compiler.config import Component, Page, Site, Translation, Visibility
from site_compiler.generator import ExportOptions, generate

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "site_export.feature"
)
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


def _soup(state: ScenarioState, path: str) -> BeautifulSoup:
    file = state["static"].get(path)
    assert file is not None, f"expected {path} in the export"
    return BeautifulSoup(file.content, "html.parser")


@given(parsers.parse('a site whose home page has the heading "{text}"'))
def given_heading_site(scenario_state: ScenarioState, text: str) -> None:
    """Store a one-page site with a single heading."""
    heading = Component("heading", {"text": text})
    page = Page("home", "Home", is_home_page=True, components=(heading,))
    scenario_state["site"] = Site(name="Scenario", slug="scenario", pages=(page,))


@given("a site whose hero background and gallery share one PNG")
def given_shared_image_site(
    scenario_state: ScenarioState, png_bytes: bytes, png_uri: str
) -> None:
    """Store a site that embeds the same PNG twice on the home page."""
    page = Page(
        "home",
        "Home",
        is_home_page=True,
        components=(
            Component("hero", {"heading": "Hi", "backgroundImage": png_uri}),
            Component("image-gallery", {"images": [png_uri]}),
        ),
    )
    scenario_state["site"] = Site(name="Shared", slug="shared", pages=(page,))
    scenario_state["png"] = png_bytes


@given(parsers.parse('a site with an "{slug}" page translated to "{language}"'))
def given_translated_site(
    scenario_state: ScenarioState, slug: str, language: str
) -> None:
    """Store a site with a home page and one translated page."""
    home = Page("home", "Home", is_home_page=True)
    page = Page(
        slug,
        slug.title(),
        components=(Component("heading", {"text": slug}),),
        translations={
            language: Translation((Component("heading", {"text": language}),))
        },
    )
    site = Site(name="Polyglot", slug="polyglot", pages=(home, page))
    scenario_state["site"] = site


@given("a site with three paragraphs in columns, the second hidden on mobile")
def given_columns_site(scenario_state: ScenarioState) -> None:
    """Store a site whose only component is a three-column layout."""
    columns = Component(
        "columns",
        children=(
            Component("paragraph", {"text": "First"}),
            Component(
                "paragraph", {"text": "Second"}, hidden=Visibility(mobile=True)
            ),
            Component("paragraph", {"text": "Third"}),
        ),
    )
    page = Page("home", "Home", is_home_page=True, components=(columns,))
    scenario_state["site"] = Site(name="Columns", pages=(page,))


@when("I export the site as a static bundle")
def when_export_static(scenario_state: ScenarioState) -> None:
    """Run the static export."""
    scenario_state["static"] = generate(scenario_state["site"])


@when("I export the site as a static bundle without optimization")
def when_export_static_unoptimized(scenario_state: ScenarioState) -> None:
    """Run the static export with image optimization switched off."""
    options = ExportOptions(image_optimization={"enabled": False})
    scenario_state["static"] = generate(scenario_state["site"], options)


@when("I export the site as a project")
def when_export_project(scenario_state: ScenarioState) -> None:
    """Run the project export."""
    scenario_state["project"] = generate(scenario_state["site"], target="project")


@then(parsers.parse('the file "{path}" contains the heading "{text}"'))
def then_contains_heading(
    scenario_state: ScenarioState, path: str, text: str
) -> None:
    """Verify the heading text survives rendering and escaping."""
    heading = _soup(scenario_state, path).find("h2")
    assert heading is not None, f"expected an h2 in {path}"
    assert heading.get_text() == text


@then(parsers.parse('the file "{path}" links "{stylesheet}" and "{script}"'))
def then_links_assets(
    scenario_state: ScenarioState, path: str, stylesheet: str, script: str
) -> None:
    """Verify the document links the shared stylesheet and script."""
    soup = _soup(scenario_state, path)
    assert soup.find("link", rel="stylesheet", href=stylesheet) is not None
    assert soup.find("script", src=script) is not None


@then(parsers.parse('exactly one asset "{asset}" is written'))
def then_one_asset(scenario_state: ScenarioState, asset: str) -> None:
    """Verify the two embeds collapsed into a single asset file."""
    paths = scenario_state["static"].paths
    assets = [p for p in paths if p.startswith("assets/")]
    assert assets == [asset]


@then(parsers.parse('every reference in "{path}" points to "{asset}"'))
def then_references_point_to(
    scenario_state: ScenarioState, path: str, asset: str
) -> None:
    """Verify both the background and the gallery image use the asset."""
    html = str(_soup(scenario_state, path))
    assert "data:image" not in html
    assert len(re.findall(re.escape(asset), html)) == 2


@then(parsers.parse('the export contains "{first}" and "{second}"'))
def then_export_contains(
    scenario_state: ScenarioState, first: str, second: str
) -> None:
    """Verify both language documents were emitted."""
    paths = scenario_state["static"].paths
    assert first in paths
    assert second in paths


ROUTES_STEP = 'the project routes "{first}" and "{second}" use different views'


@then(parsers.parse(ROUTES_STEP))
def then_routes_differ(
    scenario_state: ScenarioState, first: str, second: str
) -> None:
    """Verify each route maps to its own lazily loaded view component."""
    app = scenario_state["project"].get("polyglot/src/App.tsx").content
    views: dict[str, str] = {}
    for route in (first, second):
        pattern = rf'<Route path="{re.escape(route)}" element={{<(\w+) />}} />'
        match = re.search(pattern, app)
        assert match is not None, f"expected a route for {route}"
        views[route] = match.group(1)
    assert views[first] != views[second]


@then(parsers.parse('the asset "{asset}" holds the original PNG bytes'))
def then_asset_unchanged(scenario_state: ScenarioState, asset: str) -> None:
    """Verify the extracted bytes equal the embedded payload."""
    file = scenario_state["static"].get(asset)
    assert file is not None, f"expected {asset} in the export"
    assert file.content == scenario_state["png"]


@then(parsers.parse('"{path}" renders all three paragraphs'))
def then_three_paragraphs(scenario_state: ScenarioState, path: str) -> None:
    """Verify no paragraph was dropped from the markup."""
    paragraphs = _soup(scenario_state, path).select(".wb-paragraph")
    assert [p.get_text() for p in paragraphs] == ["First", "Second", "Third"]


@then(parsers.parse('exactly one paragraph carries the "{marker}" class'))
def then_one_marker(scenario_state: ScenarioState, marker: str) -> None:
    """Verify only the mobile-hidden paragraph is marked."""
    soup = _soup(scenario_state, "index.html")
    marked = soup.select(f".wb-paragraph.{marker}")
    assert len(marked) == 1
    assert marked[0].get_text() == "Second"
