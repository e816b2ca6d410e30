"""Error hierarchy for site_compiler.

All package errors inherit from :class:`SiteCompilerError` so callers can
catch them in one place. Only fatal conditions are raised out of an export;
per-item problems (a malformed embedded image, a page that fails to render)
are logged and replaced with a fallback by the pipeline instead.
"""

from __future__ import annotations


class SiteCompilerError(Exception):
    """Base error for all site_compiler operations."""


class SiteConfigError(SiteCompilerError, ValueError):
    """Raised when a site description is invalid or incomplete."""


class RenderError(SiteCompilerError):
    """Raised when a page's component tree cannot be rendered."""


class AssetError(SiteCompilerError):
    """Raised when an embedded asset cannot be decoded or transcoded."""


class ExportError(SiteCompilerError):
    """Fatal export failure carrying the phase and item it occurred in.

    Parameters
    ----------
    message : str
        Human-readable description of the failure.
    phase : str
        Export phase active when the failure happened (for example
        ``"generating"`` or ``"packaging"``).
    item : str or None, optional
        Identifier of the page, asset, or file being processed, if known.

    Examples
    --------
    >>> err = ExportError("disk full", phase="packaging", item="index.html")
    >>> str(err)
    '[packaging] index.html: disk full'
    """

    def __init__(self, message: str, *, phase: str, item: str | None = None) -> None:
        self.message = message
        self.phase = phase
        self.item = item
        location = f" {item}:" if item else ""
        super().__init__(f"[{phase}]{location} {message}")


class ExportCancelled(ExportError):
    """Raised when an export is aborted through its cancellation token."""


__all__ = [
    "AssetError",
    "ExportCancelled",
    "ExportError",
    "RenderError",
    "SiteCompilerError",
    "SiteConfigError",
]
