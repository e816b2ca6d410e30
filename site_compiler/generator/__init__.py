"""Export emitters, the ``generate`` entry point, and packaging helpers."""

from .models import ExportedFile, ExportOptions, ExportResult, ExportStats
from .orchestrator import generate
from .packaging import write_directory, write_zip
from .preview import PreviewDocument, render_preview
from .project import ProjectEmitter
from .static_site import StaticSiteEmitter

__all__ = [
    "ExportOptions",
    "ExportResult",
    "ExportStats",
    "ExportedFile",
    "PreviewDocument",
    "ProjectEmitter",
    "StaticSiteEmitter",
    "generate",
    "render_preview",
    "write_directory",
    "write_zip",
]
