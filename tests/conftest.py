"""Shared fixtures for the site_compiler test suite."""

from __future__ import annotations

import base64
import io
import typing as typ

import pytest
from bs4 import BeautifulSoup
from PIL import Image

from site_compiler.config import Component, Page, Site, Translation

if typ.TYPE_CHECKING:
    from site_compiler.output import ExportedFile


def _png_bytes(size: tuple[int, int], color: tuple[int, int, int]) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


def _data_uri(payload: bytes, subtype: str = "png") -> str:
    encoded = base64.b64encode(payload).decode("ascii")
    return f"data:image/{subtype};base64,{encoded}"


def _soup_of(file: ExportedFile) -> BeautifulSoup:
    assert isinstance(file.content, str), f"{file.path} is not a text file"
    return BeautifulSoup(file.content, "html.parser")


@pytest.fixture
def png_bytes() -> bytes:
    """Return a small solid-colour PNG."""
    return _png_bytes((8, 8), (200, 30, 30))


@pytest.fixture
def png_uri(png_bytes: bytes) -> str:
    """Return the small PNG as a data URI."""
    return _data_uri(png_bytes)


@pytest.fixture
def other_png_uri() -> str:
    """Return a second PNG that differs from :func:`png_uri`."""
    return _data_uri(_png_bytes((8, 8), (30, 30, 200)))


@pytest.fixture
def noisy_png_bytes() -> bytes:
    """Return a large, poorly compressible PNG that Pillow can shrink."""
    image = Image.effect_noise((1200, 900), 90).convert("RGB")
    buffer = io.BytesIO()
    image.save(buffer, format="PNG", compress_level=0)
    return buffer.getvalue()


@pytest.fixture
def hello_site() -> Site:
    """Return a one-page site whose home page holds a single heading."""
    return Site(
        name="Hello",
        slug="hello",
        pages=(
            Page(
                slug="home",
                title="Home",
                is_home_page=True,
                components=(Component("heading", {"text": "Hello"}),),
            ),
        ),
    )


@pytest.fixture
def translated_site() -> Site:
    """Return a site with a home page and an ``about`` page translated to French."""
    about = Page(
        slug="about",
        title="About",
        components=(Component("heading", {"text": "About us"}),),
        translations={
            "fr": Translation(
                components=(Component("heading", {"text": "A propos"}),),
            )
        },
    )
    home = Page(
        slug="home",
        title="Home",
        is_home_page=True,
        components=(Component("heading", {"text": "Welcome"}),),
    )
    return Site(name="Bonjour", slug="bonjour", pages=(home, about))


@pytest.fixture
def data_uri() -> typ.Callable[..., str]:
    """Return a helper that encodes bytes as a ``data:image`` URI."""
    return _data_uri


@pytest.fixture
def soup_of() -> typ.Callable[[ExportedFile], BeautifulSoup]:
    """Return a helper that parses an exported text file as HTML."""
    return _soup_of
