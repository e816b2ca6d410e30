"""State and helpers shared by the static-site and project emitters."""

from __future__ import annotations

import typing as typ

from site_compiler.components import RenderState
from site_compiler.presets import get_hosting_preset, resolve_profile
from site_compiler.progress import CancelToken, Phase, ProgressReporter

from .models import ExportOptions, ExportResult, ExportStats

if typ.TYPE_CHECKING:
    from site_compiler.assets import ExtractionStats
    from site_compiler.config import Site
    from site_compiler.output import ExportedFile
    from site_compiler.progress import ProgressCallback


class BaseEmitter:
    """Hold the per-invocation state of one export run.

    Every emitter instance owns its own :class:`RenderState`, progress
    reporter and cancellation token, so two runs never share counters.
    """

    def __init__(
        self,
        site: Site,
        options: ExportOptions | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> None:
        self.site = site
        self.options = options or ExportOptions()
        self.on_progress = on_progress
        self.reporter = ProgressReporter(on_progress)
        self.cancel = self.options.cancel or CancelToken()
        self.preset = get_hosting_preset(self.options.hosting_platform)
        self.profile = resolve_profile(self.preset, self.options.image_optimization)
        self.state = RenderState()
        self.phase: Phase = "generating"

    def enter(self, phase: Phase) -> None:
        """Record ``phase`` as the active phase for error reporting."""
        self.phase = phase

    def finish(
        self, files: list[ExportedFile], extraction: ExtractionStats
    ) -> ExportResult:
        """Emit the closing events and bundle ``files`` with their stats."""
        self.enter("packaging")
        total = len(files)
        self.reporter.emit(
            "packaging",
            total,
            total,
            f"Packaging {total} files...",
            file_count=total,
            image_count=extraction.count,
        )
        stats = ExportStats(
            page_count=len(self.site.pages),
            translation_count=self.site.translation_count,
            image_count=extraction.count,
            total_files=total,
            original_image_size=extraction.original_bytes,
            optimized_image_size=extraction.optimized_bytes,
        )
        self.enter("complete")
        self.reporter.emit(
            "complete",
            total,
            total,
            f"Export complete: {total} files, {extraction.count} images.",
            file_count=total,
            image_count=extraction.count,
        )
        return ExportResult(files=tuple(files), stats=stats)


__all__ = ["BaseEmitter"]
