"""Tests for loading site descriptions from YAML and JSON."""

from __future__ import annotations

from pathlib import Path

import pytest

from site_compiler.config import Component, Visibility, load_site, site_from_mapping
from site_compiler.errors import SiteConfigError

SITE_YAML = """
site:
  name: Bakery
  slug: bakery
  defaultLanguage: en
  publishedUrl: https://bakery.example
  theme:
    primaryColor: "#aa3300"
    headingFont: Lora, serif
  pages:
    - slug: home
      title: Home
      isHomePage: true
      seo:
        title: Fresh bread
        ogImage: https://bakery.example/og.png
      components:
        - type: hero
          props:
            heading: Welcome
            buttons: not-a-list
        - type: columns
          children:
            - type: paragraph
              props: {text: Left}
            - type: paragraph
              props: {text: Right}
              hidden: {mobile: true}
              styles:
                mobile: {fontSize: 12}
      translations:
        fr:
          seo: {title: Pain frais}
          components:
            - type: heading
              props: {text: Bienvenue}
"""


def test_load_yaml_site(tmp_path: Path) -> None:
    path = tmp_path / "site.yaml"
    path.write_text(SITE_YAML, encoding="utf-8")
    site = load_site(path)

    assert site.name == "Bakery"
    assert site.published_url == "https://bakery.example"
    assert site.theme.primary_color == "#aa3300"
    assert site.theme.heading_font == "Lora, serif"
    home = site.pages[0]
    assert home.is_home_page
    assert home.seo.title == "Fresh bread"
    assert home.seo.og_image == "https://bakery.example/og.png"
    hero, columns = home.components
    assert hero.props["buttons"] == []
    right = columns.children[1]
    assert right.hidden.mobile
    assert right.styles.mobile["fontSize"] == 12
    assert home.translations["fr"].components[0].props["text"] == "Bienvenue"
    assert site.translation_count == 1


def test_load_json_site(tmp_path: Path) -> None:
    path = tmp_path / "site.json"
    path.write_text(
        '{"name": "Json", "pages": [{"slug": "home", "title": "Home", '
        '"components": [{"kind": "heading", "props": {"text": "Hi"}}]}]}',
        encoding="utf-8",
    )
    site = load_site(path)
    assert site.pages[0].components[0].kind == "heading"
    assert site.home_page is site.pages[0]


def test_pages_may_be_keyed_by_slug() -> None:
    site = site_from_mapping(
        {"name": "Keyed", "pages": {"home": {"title": "Home"}, "faq": {}}}
    )
    assert [page.slug for page in site.pages] == ["home", "faq"]
    assert site.pages[1].title == "faq"


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_site(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ([], "must be a mapping"),
        ({"pages": []}, "missing 'name'"),
        ({"name": "x"}, "'pages' list"),
        ({"name": "x", "pages": [{"components": [{"props": {}}]}]}, "missing 'type'"),
        ({"name": "x", "pages": [{"seo": "nope"}]}, "seo must be a mapping"),
    ],
)
def test_invalid_descriptions_raise(raw: object, message: str) -> None:
    with pytest.raises(SiteConfigError, match=message):
        site_from_mapping(raw)


def _only_component(raw: dict[str, object]) -> Component:
    site = site_from_mapping({"name": "x", "pages": [{"components": [raw]}]})
    (component,) = site.pages[0].components
    return component


def test_non_list_collection_props_become_empty() -> None:
    faq = _only_component({"type": "faq", "props": {"items": {"a": 1}}})
    assert faq.props["items"] == []


def test_string_visibility_flags_are_parsed() -> None:
    heading = _only_component(
        {"type": "heading", "hidden": {"mobile": "false", "tablet": "true"}}
    )
    assert heading.hidden == Visibility(desktop=False, tablet=True, mobile=False)


def test_string_false_home_flag_is_not_home() -> None:
    site = site_from_mapping(
        {
            "name": "x",
            "pages": [
                {"slug": "landing", "isHomePage": "false"},
                {"slug": "start", "isHomePage": True},
            ],
        }
    )
    assert site.home_page is site.pages[1]


@pytest.mark.parametrize("delay", ["0.3", "300ms", [300]])
def test_malformed_animation_delay_raises(delay: object) -> None:
    raw = {"type": "heading", "animation": {"entrance": "fade-up", "delay": delay}}
    with pytest.raises(SiteConfigError, match="animation delay"):
        _only_component(raw)


def test_numeric_string_delay_is_accepted() -> None:
    raw = {"type": "heading", "animation": {"entrance": "fade-up", "delay": "300"}}
    animation = _only_component(raw).animation
    assert animation is not None
    assert animation.delay == 300
