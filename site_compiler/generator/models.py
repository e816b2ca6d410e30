"""Shared dataclasses used by the export emitters."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from site_compiler.output import ExportedFile

if typ.TYPE_CHECKING:
    from site_compiler.config import OptimizationProfile
    from site_compiler.progress import CancelToken


@dc.dataclass(frozen=True, slots=True)
class ExportOptions:
    """Caller settings for one export run.

    Attributes
    ----------
    image_optimization : Mapping[str, Any] or OptimizationProfile, optional
        Partial override merged over the hosting preset's profile.
    hosting_platform : str, optional
        Preset identifier such as ``"netlify"``; ``None`` emits no platform
        files.
    form_action_url : str, optional
        Endpoint for contact forms without their own webhook.
    build_date : str, optional
        ISO date written as the sitemap ``lastmod``; omitted when unset so
        output stays reproducible.
    max_workers : int, optional
        Bound on concurrent image transcoding jobs.
    cancel : CancelToken, optional
        Cooperative cancellation flag checked between pages and assets.
    """

    image_optimization: typ.Mapping[str, typ.Any] | OptimizationProfile | None = None
    hosting_platform: str | None = None
    form_action_url: str | None = None
    build_date: str | None = None
    max_workers: int | None = None
    cancel: CancelToken | None = None


@dc.dataclass(frozen=True, slots=True)
class ExportStats:
    """Totals reported alongside the exported files."""

    page_count: int
    translation_count: int
    image_count: int
    total_files: int
    original_image_size: int
    optimized_image_size: int


@dc.dataclass(frozen=True, slots=True)
class ExportResult:
    """The complete file set of an export and its statistics."""

    files: tuple[ExportedFile, ...]
    stats: ExportStats

    def get(self, path: str) -> ExportedFile | None:
        """Return the file stored at ``path``, if any."""
        return next((file for file in self.files if file.path == path), None)

    @property
    def paths(self) -> list[str]:
        """Return every output path in emission order."""
        return [file.path for file in self.files]


__all__ = ["ExportOptions", "ExportResult", "ExportStats", "ExportedFile"]
