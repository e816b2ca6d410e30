"""Tests for writing export results to disk."""

from __future__ import annotations

import zipfile
from pathlib import Path

import pytest

from site_compiler.config import Site
from site_compiler.errors import ExportError
from site_compiler.generator import generate, write_directory, write_zip
from site_compiler.output import ExportedFile


def test_write_directory_creates_nested_files(tmp_path: Path) -> None:
    files = [
        ExportedFile("index.html", "<p>home</p>"),
        ExportedFile("fr/about/index.html", "<p>à propos</p>"),
        ExportedFile("assets/image-1.png", b"\x89PNG"),
    ]
    root = write_directory(files, tmp_path / "site")

    assert (root / "index.html").read_text(encoding="utf-8") == "<p>home</p>"
    assert (root / "fr" / "about" / "index.html").read_text(encoding="utf-8") == (
        "<p>à propos</p>"
    )
    assert (root / "assets" / "image-1.png").read_bytes() == b"\x89PNG"


@pytest.mark.parametrize("path", ["../escape.html", "/etc/passwd", ""])
def test_unsafe_paths_are_refused(tmp_path: Path, path: str) -> None:
    with pytest.raises(ExportError) as excinfo:
        write_directory([ExportedFile(path, "x")], tmp_path)
    assert excinfo.value.phase == "packaging"


def test_write_zip_is_reproducible(tmp_path: Path, translated_site: Site) -> None:
    result = generate(translated_site)
    first = write_zip(result.files, tmp_path / "a.zip")
    second = write_zip(result.files, tmp_path / "b.zip")

    assert first.read_bytes() == second.read_bytes()
    with zipfile.ZipFile(first) as archive:
        assert archive.namelist() == result.paths
        assert archive.read("fr/about/index.html").decode("utf-8") == (
            result.get("fr/about/index.html").content  # type: ignore[union-attr]
        )


def test_failed_zip_leaves_no_partial_archive(tmp_path: Path) -> None:
    dest = tmp_path / "site.zip"
    with pytest.raises(ExportError):
        write_zip([ExportedFile("ok.html", "x"), ExportedFile("../bad", "y")], dest)
    assert not dest.exists()
    assert list(tmp_path.iterdir()) == []


def test_write_errors_become_export_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    with pytest.raises(ExportError) as excinfo:
        write_directory([ExportedFile("index.html", "x")], blocker)
    assert excinfo.value.item == "index.html"
