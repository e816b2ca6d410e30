"""Extract inline data-URI images into standalone asset files.

Extraction runs in three steps over one shared :class:`AssetExtractor`:

1. **Discovery** walks the files in order and each file left to right. The
   first occurrence of a data URI is assigned the next asset number, so
   numbering depends only on first-occurrence order. URIs carrying the same
   encoded payload share one number, even when one spells the type
   ``image/jpg`` and the other ``image/jpeg``.
2. **Optimization** transcodes the newly numbered assets on a bounded thread
   pool. Numbering is complete before any job is submitted.
3. **Rewriting** replaces every numbered URI with a reference computed for
   the consuming file's layout and depth.

Payloads that fail strict base64 decoding are never numbered and stay
inline.

Examples
--------
>>> from site_compiler.config import OptimizationProfile
>>> from site_compiler.output import ExportedFile
>>> uri = "data:image/svg+xml;base64,PHN2Zy8+"
>>> result = extract_assets(
...     [ExportedFile("index.html", f'<img src="{uri}">')],
...     OptimizationProfile(),
... )
>>> result.files[0].content
'<img src="assets/image-1.svg">'
"""

from __future__ import annotations

import base64
import binascii
import dataclasses as dc
import logging
import typing as typ
from concurrent.futures import ThreadPoolExecutor

from site_compiler._constants import (
    ASSET_NAME_TEMPLATE,
    DATA_URI_PATTERN,
    PREVIEW_HANDLE_PREFIX,
    STATIC_ASSET_DIR,
)
from site_compiler.errors import AssetError
from site_compiler.output import ExportedFile
from site_compiler.progress import (
    CancelToken,
    ProgressCallback,
    ProgressReporter,
    format_bytes,
)

from .optimizer import OptimizedImage, extension_for, optimize_image

if typ.TYPE_CHECKING:
    import re

    from site_compiler.config import OptimizationProfile

logger = logging.getLogger(__name__)

AssetLayout = typ.Literal["static", "project", "preview"]
PHASE = "extracting-images"

_AssetKey = tuple[str, str]


@dc.dataclass(frozen=True, slots=True)
class ExtractionStats:
    """Totals for the assets extracted so far."""

    count: int = 0
    original_bytes: int = 0
    optimized_bytes: int = 0


@dc.dataclass(frozen=True, slots=True)
class ExtractionResult:
    """Rewritten files, the extracted asset files, and their totals."""

    files: tuple[ExportedFile, ...]
    assets: tuple[ExportedFile, ...]
    stats: ExtractionStats


@dc.dataclass(slots=True)
class _PendingAsset:
    number: int
    image_format: str
    payload: bytes


def _asset_key(match: re.Match[str]) -> _AssetKey:
    """Return the dedup key of a data-URI match: normalised type and payload."""
    return extension_for(match.group(1)), match.group(2)


def decode_payload(data: str) -> bytes:
    """Strictly decode a base64 data-URI payload.

    >>> decode_payload("aGk=")
    b'hi'

    Raises
    ------
    AssetError
        If ``data`` is not valid padded base64.
    """
    try:
        return base64.b64decode(data, validate=True)
    except binascii.Error as exc:
        msg = f"invalid base64 payload: {exc}"
        raise AssetError(msg) from exc


class AssetExtractor:
    """Stateful extractor shared across every file of one export.

    Parameters
    ----------
    profile : OptimizationProfile
        Transcoding settings applied to each unique asset.
    layout : {"static", "project", "preview"}
        Where asset files land and how references to them are written.
    prefix : str
        Project directory prefix; used by the ``project`` layout only.
    reporter : ProgressReporter, optional
        Receives ``extracting-images`` events.
    cancel : CancelToken, optional
        Checked between files and between assets.
    max_workers : int, optional
        Upper bound on concurrent transcoding jobs.
    """

    def __init__(
        self,
        profile: OptimizationProfile,
        *,
        layout: AssetLayout = "static",
        prefix: str = "",
        reporter: ProgressReporter | None = None,
        cancel: CancelToken | None = None,
        max_workers: int | None = None,
    ) -> None:
        self.profile = profile
        self.layout = layout
        self.prefix = prefix
        self.reporter = reporter or ProgressReporter()
        self.cancel = cancel or CancelToken()
        self.max_workers = max_workers
        self._numbers: dict[_AssetKey, int] = {}
        self._rejected: set[_AssetKey] = set()
        self._pending: list[_PendingAsset] = []
        self._names: dict[int, str] = {}
        self._assets: list[ExportedFile] = []
        self._original_bytes = 0
        self._optimized_bytes = 0

    @property
    def assets(self) -> tuple[ExportedFile, ...]:
        """Return the asset files extracted so far, in numbering order."""
        return tuple(self._assets)

    @property
    def stats(self) -> ExtractionStats:
        """Return totals across every asset extracted so far."""
        return ExtractionStats(
            count=len(self._assets),
            original_bytes=self._original_bytes,
            optimized_bytes=self._optimized_bytes,
        )

    def process(self, files: typ.Iterable[ExportedFile]) -> list[ExportedFile]:
        """Discover, optimize, and rewrite ``files``; return new file objects."""
        files = list(files)
        self.discover(files)
        self.optimize_pending()
        return [self.rewrite(file) for file in files]

    def discover(self, files: typ.Iterable[ExportedFile]) -> None:
        """Number every new data URI in ``files`` in first-occurrence order."""
        for file in files:
            self.cancel.raise_if_cancelled(PHASE, file.path)
            if isinstance(file.content, str):
                for match in DATA_URI_PATTERN.finditer(file.content):
                    self._register(match, file.path)

    def _register(self, match: re.Match[str], path: str) -> None:
        key = _asset_key(match)
        if key in self._numbers or key in self._rejected:
            return
        try:
            payload = decode_payload(match.group(2))
        except AssetError as exc:
            logger.warning(
                "Leaving undecodable image/%s payload inline in %s: %s",
                match.group(1),
                path,
                exc,
            )
            self._rejected.add(key)
            return
        number = len(self._numbers) + 1
        self._numbers[key] = number
        self._pending.append(_PendingAsset(number, match.group(1), payload))

    def optimize_pending(self) -> None:
        """Transcode every numbered asset that has not been stored yet."""
        pending, self._pending = self._pending, []
        if not pending:
            return
        total = len(pending)
        with ThreadPoolExecutor(
            max_workers=self.max_workers, thread_name_prefix="site-compiler-assets"
        ) as executor:
            futures = [
                executor.submit(
                    optimize_image, asset.payload, asset.image_format, self.profile
                )
                for asset in pending
            ]
            for index, (asset, future) in enumerate(
                zip(pending, futures, strict=True), start=1
            ):
                if self.cancel.cancelled:
                    for remaining in futures:
                        remaining.cancel()
                    self.cancel.raise_if_cancelled(PHASE, f"image-{asset.number}")
                self._store(asset, future.result(), index, total)

    def _store(
        self, asset: _PendingAsset, image: OptimizedImage, index: int, total: int
    ) -> None:
        name = ASSET_NAME_TEMPLATE.format(index=asset.number, ext=image.extension)
        self._names[asset.number] = name
        self._assets.append(ExportedFile(self._asset_path(name), image.content))
        self._original_bytes += image.original_size
        self._optimized_bytes += image.optimized_size
        self.reporter.emit(
            PHASE,
            index,
            total,
            f"Extracted {name} ({format_bytes(image.optimized_size)})",
            image_count=len(self._assets),
        )

    def _asset_path(self, name: str) -> str:
        match self.layout:
            case "project":
                return f"{self.prefix}/public/assets/{name}"
            case "preview":
                return name
            case _:
                return f"{STATIC_ASSET_DIR}/{name}"

    def reference(self, name: str, depth: int) -> str:
        """Return how a file ``depth`` directories deep refers to asset ``name``.

        >>> from site_compiler.config import OptimizationProfile
        >>> AssetExtractor(OptimizationProfile()).reference("image-1.png", 2)
        '../../assets/image-1.png'
        """
        match self.layout:
            case "project":
                return f"/assets/{name}"
            case "preview":
                return f"{PREVIEW_HANDLE_PREFIX}{name}"
            case _:
                return f"{'../' * depth}{STATIC_ASSET_DIR}/{name}"

    def rewrite(self, file: ExportedFile) -> ExportedFile:
        """Return ``file`` with every extracted URI replaced by a reference."""
        if not isinstance(file.content, str) or not self._names:
            return file
        depth = file.depth

        def replace(match: re.Match[str]) -> str:
            number = self._numbers.get(_asset_key(match))
            if number is None or number not in self._names:
                return match.group(0)
            return self.reference(self._names[number], depth)

        content = DATA_URI_PATTERN.sub(replace, file.content)
        if content == file.content:
            return file
        return dc.replace(file, content=content)


def extract_assets(
    files: typ.Iterable[ExportedFile],
    profile: OptimizationProfile,
    *,
    layout: AssetLayout = "static",
    prefix: str = "",
    on_progress: ProgressCallback | None = None,
    cancel: CancelToken | None = None,
    max_workers: int | None = None,
) -> ExtractionResult:
    """Run a one-shot extraction over ``files``.

    The input sequence is not modified; the result holds new file objects
    for every rewritten document alongside the extracted assets.
    """
    extractor = AssetExtractor(
        profile,
        layout=layout,
        prefix=prefix,
        reporter=ProgressReporter(on_progress),
        cancel=cancel,
        max_workers=max_workers,
    )
    rewritten = extractor.process(files)
    return ExtractionResult(tuple(rewritten), extractor.assets, extractor.stats)


__all__ = [
    "AssetExtractor",
    "AssetLayout",
    "decode_payload",
    "ExtractionResult",
    "ExtractionStats",
    "extract_assets",
]
