"""Tests for the site-compiler command-line interface."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from site_compiler import cli

SITE_YAML = """
name: Studio
slug: studio
pages:
  - slug: home
    title: Home
    isHomePage: true
    components:
      - type: heading
        props: {text: Hello studio}
  - slug: contact
    title: Contact
    components:
      - type: contact-form
"""


@pytest.fixture
def site_file(tmp_path: Path) -> Path:
    path = tmp_path / "site.yaml"
    path.write_text(SITE_YAML, encoding="utf-8")
    return path


def test_export_writes_static_directory(
    site_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    output = tmp_path / "dist"
    cli.export(site_file, output=output)

    assert "Hello studio" in (output / "index.html").read_text(encoding="utf-8")
    assert (output / "contact" / "index.html").exists()
    out = capsys.readouterr().out
    assert "wrote " in out
    assert "2 pages, 0 translations, 0 images" in out


def test_export_project_zip_with_platform(site_file: Path, tmp_path: Path) -> None:
    archive_path = tmp_path / "studio.zip"
    cli.export(site_file, target="project", platform="vercel", output=archive_path)

    with zipfile.ZipFile(archive_path) as archive:
        names = archive.namelist()
    assert "studio/vercel.json" in names
    assert "studio/src/pages/ContactPage.tsx" in names


def test_form_action_reaches_contact_form(site_file: Path, tmp_path: Path) -> None:
    output = tmp_path / "dist"
    cli.export(site_file, form_action="https://forms.example/submit", output=output)
    contact = (output / "contact" / "index.html").read_text(encoding="utf-8")
    assert "https://forms.example/submit" in contact


def test_missing_site_exits_with_message(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.export(tmp_path / "missing.yaml", output=tmp_path / "dist")
    assert "not found" in str(excinfo.value.code)


def test_preview_materializes_home_page(
    site_file: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.preview(site_file, output=tmp_path / "preview")
    html = (tmp_path / "preview" / "index.html").read_text(encoding="utf-8")
    assert "Hello studio" in html
    assert "index.html" in capsys.readouterr().out


def test_presets_lists_every_platform(capsys: pytest.CaptureFixture[str]) -> None:
    cli.presets()
    out = capsys.readouterr().out
    platforms = ("generic", "github-pages", "netlify", "vercel", "cloudflare-pages")
    for platform in platforms:
        assert f"{platform}: " in out


def test_image_override_maps_flags() -> None:
    override = cli._image_override(
        optimize=False, quality=0.5, max_width=None, webp=True
    )
    assert override == {
        "quality": 0.5,
        "max_width": None,
        "convert_to_webp": True,
        "enabled": False,
    }
