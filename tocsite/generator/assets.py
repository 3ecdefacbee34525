"""Publish the fixed stylesheets shared by every generated page."""

from __future__ import annotations

import asyncio
import typing as typ
from pathlib import Path

from tocsite._constants import ASSETS_DIRNAME, PYGMENTS_CSS, STATIC_FILES

if typ.TYPE_CHECKING:
    from .writer import OutputWriter

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


class AssetPublisher:
    """Copy packaged static files and the Pygments stylesheet once per run."""

    def __init__(
        self,
        output_dir: Path,
        stylesheet: str,
        writer: OutputWriter,
        *,
        static_dir: Path | None = None,
    ) -> None:
        self.assets_dir = output_dir / ASSETS_DIRNAME
        self.stylesheet = stylesheet
        self.writer = writer
        self.static_dir = static_dir or STATIC_DIR

    async def publish(self) -> list[Path]:
        """Write every asset and return the written paths."""
        self.writer.ensure_dir(self.assets_dir)
        jobs = [
            self.writer.copy(self.static_dir / name, self.assets_dir / name)
            for name in STATIC_FILES
        ]
        jobs.append(self.writer.write(self.assets_dir / PYGMENTS_CSS, self.stylesheet))
        return list(await asyncio.gather(*jobs))


__all__ = ["STATIC_DIR", "AssetPublisher"]
