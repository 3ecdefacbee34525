"""Read Markdown source documents for TOC leaves."""

from __future__ import annotations

import asyncio
import typing as typ

from tocsite.errors import DocumentNotFound, DocumentRenderError

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tocsite.toc.models import LeafRef


class FileSystemDocumentSource:
    """Load documents from a directory tree mirroring the TOC sections.

    The leaf ``("Guide", "Setup"), "install"`` is read from
    ``<root>/Guide/Setup/install.md``.
    """

    def __init__(self, root: Path, suffix: str = ".md") -> None:
        self.root = root
        self.suffix = suffix

    def locate(self, ref: LeafRef) -> Path:
        """Return the source file path for ``ref``."""
        return self.root.joinpath(*ref.source_parts(self.suffix))

    async def fetch(self, ref: LeafRef) -> str:
        """Return the decoded text of the document for ``ref``.

        Raises
        ------
        DocumentNotFound
            If the source file does not exist.
        DocumentRenderError
            If the file cannot be read or is not valid UTF-8.
        """
        location = self.locate(ref)
        try:
            payload = await asyncio.to_thread(location.read_bytes)
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
            raise DocumentNotFound(ref, location) from exc
        except OSError as exc:
            reason = f"cannot read '{location}': {exc.strerror or exc}"
            raise DocumentRenderError(ref, reason) from exc
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DocumentRenderError(ref, f"'{location}' is not UTF-8") from exc


__all__ = ["FileSystemDocumentSource"]
