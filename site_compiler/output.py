"""The unit of export output shared by every pipeline stage."""

from __future__ import annotations

import dataclasses as dc
from pathlib import PurePosixPath


@dc.dataclass(frozen=True, slots=True)
class ExportedFile:
    """A file in the exported tree.

    Attributes
    ----------
    path : str
        Relative POSIX path, for example ``"about/index.html"``.
    content : str or bytes
        Text for generated sources, raw bytes for extracted assets.
    """

    path: str
    content: str | bytes

    @property
    def depth(self) -> int:
        """Return how many directories deep the file sits.

        >>> ExportedFile("fr/about/index.html", "").depth
        2
        """
        return len(PurePosixPath(self.path).parts) - 1

    @property
    def size(self) -> int:
        """Return the encoded size of the content in bytes."""
        if isinstance(self.content, bytes):
            return len(self.content)
        return len(self.content.encode("utf-8"))


__all__ = ["ExportedFile"]
