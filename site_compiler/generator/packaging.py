"""Write an exported file set to a directory or a zip archive.

Both writers refuse paths that would escape the destination and wrap I/O
failures in :class:`~site_compiler.errors.ExportError` with the
``packaging`` phase. The archive is assembled in a temporary file beside
the destination and moved into place only once complete, so a failed write
never leaves a truncated archive behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
import typing as typ
import zipfile
from pathlib import Path, PurePosixPath

from site_compiler.errors import ExportError

if typ.TYPE_CHECKING:
    from site_compiler.output import ExportedFile

logger = logging.getLogger(__name__)

# Fixed member timestamp keeps archives byte-identical across runs.
ZIP_TIMESTAMP = (1980, 1, 1, 0, 0, 0)


def _safe_path(path: str) -> PurePosixPath:
    relative = PurePosixPath(path)
    if not path or relative.is_absolute() or ".." in relative.parts:
        msg = "Refusing to write a path outside the export root."
        raise ExportError(msg, phase="packaging", item=path)
    return relative


def _encode(file: ExportedFile) -> bytes:
    if isinstance(file.content, bytes):
        return file.content
    return file.content.encode("utf-8")


def write_directory(files: typ.Iterable[ExportedFile], dest: Path | str) -> Path:
    """Write ``files`` beneath ``dest``, creating directories as needed.

    Returns
    -------
    Path
        The destination directory.

    Raises
    ------
    ExportError
        If a path is unsafe or a file cannot be written.
    """
    root = Path(dest)
    count = 0
    for file in files:
        target = root.joinpath(*_safe_path(file.path).parts)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(_encode(file))
        except OSError as exc:
            msg = f"Could not write file: {exc}"
            raise ExportError(msg, phase="packaging", item=file.path) from exc
        count += 1
    logger.info("Wrote %d files to %s", count, root)
    return root


def write_zip(files: typ.Iterable[ExportedFile], dest: Path | str) -> Path:
    """Write ``files`` into a deflated zip archive at ``dest``.

    Examples
    --------
    >>> from site_compiler.output import ExportedFile
    >>> write_zip([ExportedFile("index.html", "<p>hi</p>")], "site.zip")  # doctest: +SKIP
    PosixPath('site.zip')
    """
    target = Path(dest)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=".site-compiler-", suffix=".zip", dir=target.parent
        )
    except OSError as exc:
        msg = f"Could not create archive: {exc}"
        raise ExportError(msg, phase="packaging", item=str(target)) from exc

    tmp = Path(tmp_name)
    item = str(target)
    try:
        with (
            os.fdopen(fd, "wb") as handle,
            zipfile.ZipFile(handle, "w", compression=zipfile.ZIP_DEFLATED) as archive,
        ):
            for file in files:
                item = file.path
                info = zipfile.ZipInfo(str(_safe_path(file.path)), ZIP_TIMESTAMP)
                info.compress_type = zipfile.ZIP_DEFLATED
                info.external_attr = 0o644 << 16
                archive.writestr(info, _encode(file))
        tmp.replace(target)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        msg = f"Could not write archive: {exc}"
        raise ExportError(msg, phase="packaging", item=item) from exc
    except ExportError:
        tmp.unlink(missing_ok=True)
        raise
    logger.info("Wrote archive %s", target)
    return target


__all__ = ["write_directory", "write_zip"]
