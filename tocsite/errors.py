"""Exception types raised while loading the TOC and generating a site.

Every error derives from :class:`TocSiteError` so the CLI can report build
failures uniformly. Errors tied to one page carry the offending
:class:`~tocsite.toc.models.LeafRef` so the message points at the TOC entry.
"""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tocsite.toc.models import LeafRef


class TocSiteError(Exception):
    """Base class for site generation failures."""


class MalformedToc(TocSiteError, ValueError):  # noqa: N818
    """Raised when the TOC configuration does not match the entry model."""


class DuplicateLeafIdentity(TocSiteError):  # noqa: N818
    """Raised when two leaves share the same section path and id."""

    def __init__(self, ref: LeafRef) -> None:
        self.ref = ref
        super().__init__(f"Duplicate TOC entry '{ref.label}'.")


class DocumentNotFound(TocSiteError):  # noqa: N818
    """Raised when the source document for a leaf does not exist."""

    def __init__(self, ref: LeafRef, location: Path) -> None:
        self.ref = ref
        self.location = location
        super().__init__(
            f"Source document for '{ref.label}' not found at '{location}'."
        )


class DocumentRenderError(TocSiteError):
    """Raised when a source document cannot be read, decoded, or rendered."""

    def __init__(self, ref: LeafRef, reason: str) -> None:
        self.ref = ref
        super().__init__(f"Failed to render '{ref.label}': {reason}")


class OutputWriteError(TocSiteError):
    """Raised when an output file or directory cannot be written."""

    def __init__(self, location: Path, reason: str) -> None:
        self.location = location
        super().__init__(f"Failed to write '{location}': {reason}")


__all__ = [
    "DocumentNotFound",
    "DocumentRenderError",
    "DuplicateLeafIdentity",
    "MalformedToc",
    "OutputWriteError",
    "TocSiteError",
]
