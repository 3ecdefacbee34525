"""Typed dataclasses describing tocsite site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from tocsite.errors import TocSiteError
from tocsite.toc.models import TocTree  # noqa: TC001 - used for runtime type metadata


class SiteConfigError(TocSiteError, ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class ThemeConfig:
    """Text shown in the page chrome around rendered documents."""

    site_name: str = "Documentation"
    page_title_suffix: str = "Docs"
    footer_note: str = ""


@dc.dataclass(slots=True)
class SiteConfig:
    """Resolved settings for one site build.

    Attributes
    ----------
    toc : TocTree
        Parsed table of contents driving navigation and output layout.
    source_dir : Path
        Directory holding the Markdown sources, mirrored by section.
    output_dir : Path
        Directory receiving generated HTML and assets.
    theme : ThemeConfig
        Site name, title suffix and footer text.
    pygments_style : str
        Pygments style used for highlighted code blocks.
    source_suffix : str
        File extension of source documents.
    """

    toc: TocTree
    source_dir: Path
    output_dir: Path
    theme: ThemeConfig = dc.field(default_factory=ThemeConfig)
    pygments_style: str = "monokai"
    source_suffix: str = ".md"

    def with_overrides(
        self, *, source_dir: Path | None = None, output_dir: Path | None = None
    ) -> SiteConfig:
        """Return a copy with the given directories replaced when provided."""
        return dc.replace(
            self,
            source_dir=source_dir or self.source_dir,
            output_dir=output_dir or self.output_dir,
        )


__all__ = ["SiteConfig", "SiteConfigError", "ThemeConfig"]
