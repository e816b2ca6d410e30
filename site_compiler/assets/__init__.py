"""Data-URI image extraction and optimization."""

from .extractor import (
    AssetExtractor,
    AssetLayout,
    ExtractionResult,
    ExtractionStats,
    extract_assets,
)
from .optimizer import OptimizedImage, extension_for, optimize_image

__all__ = [
    "AssetExtractor",
    "AssetLayout",
    "ExtractionResult",
    "ExtractionStats",
    "OptimizedImage",
    "extension_for",
    "extract_assets",
    "optimize_image",
]
