"""Downscale and re-encode extracted raster images with Pillow."""

from __future__ import annotations

import dataclasses as dc
import io
import logging
import typing as typ

from PIL import Image, UnidentifiedImageError

from site_compiler.errors import AssetError

if typ.TYPE_CHECKING:
    from site_compiler.config import OptimizationProfile

logger = logging.getLogger(__name__)

EXTENSIONS: dict[str, str] = {"jpeg": "jpg", "svg+xml": "svg"}
PIL_FORMATS: dict[str, str] = {
    "png": "PNG",
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "gif": "GIF",
    "webp": "WEBP",
}
VECTOR_FORMATS = frozenset({"svg+xml"})


def extension_for(image_format: str) -> str:
    """Return the file extension used for a data-URI image subtype.

    >>> extension_for("jpeg"), extension_for("svg+xml"), extension_for("png")
    ('jpg', 'svg', 'png')
    """
    return EXTENSIONS.get(image_format, image_format)


@dc.dataclass(frozen=True, slots=True)
class OptimizedImage:
    """Bytes stored for one extracted asset."""

    content: bytes
    extension: str
    original_size: int

    @property
    def optimized_size(self) -> int:
        """Return the stored size in bytes."""
        return len(self.content)


def _keep(payload: bytes, image_format: str) -> OptimizedImage:
    return OptimizedImage(payload, extension_for(image_format), len(payload))


def _encode(
    image: Image.Image, pil_format: str, profile: OptimizationProfile
) -> bytes:
    quality = max(1, min(100, round(profile.quality * 100)))
    buffer = io.BytesIO()
    match pil_format:
        case "JPEG":
            if image.mode not in ("RGB", "L"):
                image = image.convert("RGB")
            image.save(buffer, format="JPEG", quality=quality, optimize=True)
        case "WEBP":
            image.save(buffer, format="WEBP", quality=quality, method=4)
        case "PNG":
            image.save(buffer, format="PNG", optimize=True)
        case _:
            image.save(buffer, format=pil_format)
    return buffer.getvalue()


def _transcode(
    payload: bytes, target: str, profile: OptimizationProfile
) -> bytes | None:
    """Return ``payload`` resized and re-encoded, or ``None`` for animations."""
    try:
        with Image.open(io.BytesIO(payload)) as image:
            # Re-encoding would keep only the first frame.
            if getattr(image, "is_animated", False):
                return None
            image.load()
            image.thumbnail(
                (profile.max_width, profile.max_height), Image.Resampling.LANCZOS
            )
            return _encode(image, target, profile)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        ValueError,
    ) as exc:
        msg = f"cannot transcode to {target}: {exc}"
        raise AssetError(msg) from exc


def optimize_image(
    payload: bytes, image_format: str, profile: OptimizationProfile
) -> OptimizedImage:
    """Return the bytes to store for ``payload``.

    Parameters
    ----------
    payload : bytes
        Decoded image bytes taken from a data URI.
    image_format : str
        The data-URI subtype, for example ``png``, ``jpeg``, or ``svg+xml``.
    profile : OptimizationProfile
        Size bounds, encoder quality, and WebP conversion switch.

    Returns
    -------
    OptimizedImage
        The re-encoded image when it is strictly smaller than ``payload``;
        otherwise ``payload`` itself with its original extension.

    Notes
    -----
    Vector images, payloads below ``profile.min_size_bytes``, and a disabled
    profile are returned untouched. Decode or encode failures are logged and
    also fall back to the original bytes.
    """
    if (
        not profile.enabled
        or image_format in VECTOR_FORMATS
        or len(payload) < profile.min_size_bytes
    ):
        return _keep(payload, image_format)

    target = "WEBP" if profile.convert_to_webp else PIL_FORMATS.get(image_format)
    if target is None:
        logger.debug("No encoder for image/%s; keeping original", image_format)
        return _keep(payload, image_format)

    try:
        encoded = _transcode(payload, target, profile)
    except AssetError as exc:
        logger.warning(
            "Image optimization failed for image/%s: %s", image_format, exc
        )
        return _keep(payload, image_format)

    if encoded is None or len(encoded) >= len(payload):
        return _keep(payload, image_format)
    extension = "webp" if target == "WEBP" else extension_for(image_format)
    return OptimizedImage(encoded, extension, len(payload))


__all__ = ["OptimizedImage", "extension_for", "optimize_image"]
