"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from tocsite.toc.models import LeafRef  # noqa: TC001 - used for runtime type metadata


@dc.dataclass(frozen=True, slots=True)
class RenderedDocument:
    """Markdown source converted to HTML.

    Attributes
    ----------
    title : str
        Text of the first level-one heading, or the leaf id when absent.
    body_html : str
        Rendered HTML without the title heading.
    """

    title: str
    body_html: str


@dc.dataclass(frozen=True, slots=True)
class PageDescriptor:
    """Everything needed to assemble one output page.

    Attributes
    ----------
    ref : LeafRef
        Identity of the page in the TOC.
    root_prefix : str
        ``../`` segments leading from the page to the output root.
    document : RenderedDocument
        Rendered title and body.
    output_path : Path
        Location of the generated HTML file.
    previous : LeafRef or None
        Preceding page in navigation order.
    next : LeafRef or None
        Following page in navigation order.
    """

    ref: LeafRef
    root_prefix: str
    document: RenderedDocument
    output_path: Path
    previous: LeafRef | None = None
    next: LeafRef | None = None


__all__ = ["PageDescriptor", "RenderedDocument"]
