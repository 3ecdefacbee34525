"""Write generated files, reporting failures as :class:`OutputWriteError`."""

from __future__ import annotations

import asyncio
import shutil
import typing as typ

from tocsite.errors import OutputWriteError

if typ.TYPE_CHECKING:
    from pathlib import Path


class OutputWriter:
    """Filesystem writer used for pages and assets."""

    def ensure_dir(self, path: Path) -> Path:
        """Create ``path`` and its parents if needed."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise OutputWriteError(path, exc.strerror or str(exc)) from exc
        return path

    async def write(self, path: Path, text: str) -> Path:
        """Write ``text`` as UTF-8 to ``path`` without blocking the event loop."""
        try:
            await asyncio.to_thread(path.write_text, text, encoding="utf-8")
        except OSError as exc:
            raise OutputWriteError(path, exc.strerror or str(exc)) from exc
        return path

    async def copy(self, source: Path, destination: Path) -> Path:
        """Copy ``source`` byte-for-byte to ``destination``."""
        try:
            await asyncio.to_thread(shutil.copyfile, source, destination)
        except OSError as exc:
            raise OutputWriteError(destination, exc.strerror or str(exc)) from exc
        return destination


__all__ = ["OutputWriter"]
