"""Tests for data-URI extraction and image optimization."""

from __future__ import annotations

import logging
import typing as typ

import pytest

from site_compiler.assets import AssetExtractor, extract_assets, optimize_image
from site_compiler.assets.extractor import decode_payload
from site_compiler.config import OptimizationProfile
from site_compiler.errors import AssetError, ExportCancelled
from site_compiler.output import ExportedFile
from site_compiler.progress import CancelToken, ProgressEvent


def test_identical_payloads_share_one_asset(png_uri: str) -> None:
    files = [
        ExportedFile("index.html", f'<img src="{png_uri}"><img src="{png_uri}">'),
        ExportedFile("about/index.html", f'<img src="{png_uri}">'),
    ]
    result = extract_assets(files, OptimizationProfile())

    assert [asset.path for asset in result.assets] == ["assets/image-1.png"]
    assert result.files[0].content == (
        '<img src="assets/image-1.png"><img src="assets/image-1.png">'
    )
    assert result.files[1].content == '<img src="../assets/image-1.png">'
    assert result.stats.count == 1


def test_numbering_follows_first_occurrence(
    png_uri: str, other_png_uri: str
) -> None:
    files = [
        ExportedFile("a/index.html", f"{other_png_uri} {png_uri}"),
        ExportedFile("index.html", f"{png_uri}"),
    ]
    result = extract_assets(files, OptimizationProfile())
    assert result.files[0].content == "../assets/image-1.png ../assets/image-2.png"
    assert result.files[1].content == "assets/image-2.png"


def test_input_files_are_not_mutated(png_uri: str) -> None:
    original = ExportedFile("index.html", f'<img src="{png_uri}">')
    extract_assets([original], OptimizationProfile())
    assert original.content == f'<img src="{png_uri}">'


def test_disabled_profile_keeps_original_bytes(png_bytes: bytes, png_uri: str) -> None:
    result = extract_assets(
        [ExportedFile("index.html", png_uri)], OptimizationProfile(enabled=False)
    )
    (asset,) = result.assets
    assert asset.content == png_bytes
    assert result.stats.original_bytes == result.stats.optimized_bytes == len(png_bytes)


def test_invalid_base64_stays_inline(
    png_uri: str, caplog: pytest.LogCaptureFixture
) -> None:
    broken = "data:image/png;base64,abc"
    files = [ExportedFile("index.html", f'<img src="{broken}"><img src="{png_uri}">')]
    with caplog.at_level(logging.WARNING):
        result = extract_assets(files, OptimizationProfile())

    assert broken in typ.cast("str", result.files[0].content)
    assert [asset.path for asset in result.assets] == ["assets/image-1.png"]
    assert "undecodable" in caplog.text


@pytest.mark.parametrize("payload", ["abc", "aGk", "aG!k"])
def test_decode_payload_is_strict(payload: str) -> None:
    with pytest.raises(AssetError, match="invalid base64"):
        decode_payload(payload)


def test_project_layout_uses_public_assets(png_uri: str) -> None:
    extractor = AssetExtractor(
        OptimizationProfile(), layout="project", prefix="my-site"
    )
    (view,) = extractor.process(
        [ExportedFile("my-site/src/pages/HomePage.tsx", f"url('{png_uri}')")]
    )
    assert view.content == "url('/assets/image-1.png')"
    assert [asset.path for asset in extractor.assets] == [
        "my-site/public/assets/image-1.png"
    ]


def test_shared_extractor_keeps_numbering_across_calls(
    png_uri: str, other_png_uri: str
) -> None:
    extractor = AssetExtractor(OptimizationProfile(), layout="project", prefix="p")
    extractor.process([ExportedFile("p/src/pages/A.tsx", png_uri)])
    (second,) = extractor.process(
        [ExportedFile("p/src/pages/B.tsx", f"{other_png_uri}{png_uri}")]
    )
    assert second.content == "/assets/image-2.png/assets/image-1.png"
    assert extractor.stats.count == 2


def test_svg_is_stored_untouched() -> None:
    svg = b'<svg xmlns="http://www.w3.org/2000/svg"/>'
    image = optimize_image(svg, "svg+xml", OptimizationProfile(min_size_bytes=0))
    assert image.content == svg
    assert image.extension == "svg"


def test_optimization_never_grows_the_payload(noisy_png_bytes: bytes) -> None:
    profile = OptimizationProfile(max_width=400, max_height=400, min_size_bytes=0)
    image = optimize_image(noisy_png_bytes, "png", profile)
    assert image.optimized_size <= image.original_size
    assert image.original_size == len(noisy_png_bytes)


def test_webp_conversion_changes_extension(noisy_png_bytes: bytes) -> None:
    profile = OptimizationProfile(
        max_width=300, max_height=300, convert_to_webp=True, min_size_bytes=0
    )
    image = optimize_image(noisy_png_bytes, "png", profile)
    assert image.extension == "webp"
    assert image.optimized_size < image.original_size


def test_undecodable_image_keeps_original(caplog: pytest.LogCaptureFixture) -> None:
    junk = b"not really a png" * 100
    with caplog.at_level(logging.WARNING):
        image = optimize_image(junk, "png", OptimizationProfile(min_size_bytes=0))
    assert image.content == junk
    assert "Image optimization failed" in caplog.text


def test_progress_events_report_each_asset(png_uri: str, other_png_uri: str) -> None:
    events: list[ProgressEvent] = []
    extract_assets(
        [ExportedFile("index.html", png_uri + other_png_uri)],
        OptimizationProfile(),
        on_progress=events.append,
    )
    assert [(e.phase, e.current, e.total) for e in events] == [
        ("extracting-images", 1, 2),
        ("extracting-images", 2, 2),
    ]
    assert events[-1].image_count == 2


def test_cancelled_token_stops_extraction(png_uri: str) -> None:
    token = CancelToken()
    token.cancel()
    with pytest.raises(ExportCancelled):
        extract_assets(
            [ExportedFile("index.html", png_uri)], OptimizationProfile(), cancel=token
        )


def test_jpg_and_jpeg_spellings_share_one_asset(
    png_bytes: bytes, data_uri: typ.Callable[..., str]
) -> None:
    jpg = data_uri(png_bytes, "jpg")
    jpeg = data_uri(png_bytes, "jpeg")
    result = extract_assets(
        [ExportedFile("index.html", f"{jpg} {jpeg}")],
        OptimizationProfile(enabled=False),
    )
    assert [asset.path for asset in result.assets] == ["assets/image-1.jpg"]
    assert result.files[0].content == "assets/image-1.jpg assets/image-1.jpg"
