"""Progress events and cooperative cancellation for export runs.

Emitters report progress through a plain callback receiving
:class:`ProgressEvent` values. Reporting is fire-and-forget: a missing
listener changes nothing, and a listener that raises is logged and ignored so
it can never alter the generated output.

Examples
--------
>>> events = []
>>> reporter = ProgressReporter(events.append)
>>> reporter.emit("generating", 1, 2, "Generating page: Home...")
>>> events[0].phase
'generating'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import threading
import typing as typ

from .errors import ExportCancelled

logger = logging.getLogger(__name__)

Phase = typ.Literal["generating", "extracting-images", "packaging", "complete"]


@dc.dataclass(frozen=True, slots=True)
class ProgressEvent:
    """A single progress notification.

    Attributes
    ----------
    phase : str
        One of ``generating``, ``extracting-images``, ``packaging``, or
        ``complete``.
    current, total : int
        Position within the phase; ``total`` is ``0`` when unknown.
    message : str
        Human-readable status line.
    image_count, file_count : int or None
        Running counts attached to image and packaging events.
    """

    phase: Phase
    current: int
    total: int
    message: str
    image_count: int | None = None
    file_count: int | None = None


ProgressCallback = typ.Callable[[ProgressEvent], None]


class ProgressReporter:
    """Deliver events to an optional callback without letting it interfere."""

    def __init__(self, callback: ProgressCallback | None = None) -> None:
        self._callback = callback

    def emit(
        self,
        phase: Phase,
        current: int,
        total: int,
        message: str,
        *,
        image_count: int | None = None,
        file_count: int | None = None,
    ) -> None:
        """Build a :class:`ProgressEvent` and hand it to the callback."""
        logger.debug("%s %d/%d: %s", phase, current, total, message)
        if self._callback is None:
            return
        event = ProgressEvent(
            phase=phase,
            current=current,
            total=total,
            message=message,
            image_count=image_count,
            file_count=file_count,
        )
        try:
            self._callback(event)
        except Exception:
            logger.exception("Progress listener failed on %s event", phase)


class CancelToken:
    """Thread-safe flag checked between pages and assets.

    Examples
    --------
    >>> token = CancelToken()
    >>> token.raise_if_cancelled("generating")
    >>> token.cancel()
    >>> token.cancelled
    True
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request that the running export stops at the next checkpoint."""
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """Return ``True`` once :meth:`cancel` has been called."""
        return self._event.is_set()

    def raise_if_cancelled(self, phase: str, item: str | None = None) -> None:
        """Raise :class:`ExportCancelled` when cancellation was requested.

        Raises
        ------
        ExportCancelled
            If :meth:`cancel` has been called.
        """
        if self._event.is_set():
            msg = "Export cancelled."
            raise ExportCancelled(msg, phase=phase, item=item)


def format_bytes(size: int) -> str:
    """Return ``size`` as a short human-readable string.

    Examples
    --------
    >>> format_bytes(512)
    '512 B'
    >>> format_bytes(2048)
    '2.0 KB'
    """
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


__all__ = [
    "CancelToken",
    "Phase",
    "ProgressCallback",
    "ProgressEvent",
    "ProgressReporter",
    "format_bytes",
]
