"""Helpers for rewriting relative markdown links to generated HTML pages."""

from __future__ import annotations

import posixpath
import typing as typ
from urllib.parse import urlsplit, urlunsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class RelativeDocLinkExtension(Extension):
    """Rewrite links between source documents to their HTML counterparts.

    Output pages mirror the source tree (one directory per section, one file
    per document), so a relative link such as ``../guide/install.md#usage``
    only needs its suffix swapped to keep working as
    ``../guide/install.html#usage``.
    """

    def __init__(self, source_suffix: str = ".md") -> None:
        self.source_suffix = source_suffix

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the relative-link treeprocessor on the Markdown instance."""
        processor = RelativeDocLinkTreeprocessor(md, self.source_suffix)
        md.treeprocessors.register(processor, "tocsite_relative_links", 15)


class RelativeDocLinkTreeprocessor(Treeprocessor):
    """Point relative document links at the generated HTML files."""

    def __init__(self, md: Markdown, source_suffix: str) -> None:
        super().__init__(md)
        self.source_suffix = source_suffix

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed markdown tree."""
        for element in root.iter():
            if element.tag == "a":
                rewritten = self._rewrite(element.get("href"))
                if rewritten:
                    element.set("href", rewritten)
        return root

    def _rewrite(self, target: str | None) -> str | None:
        """Return the HTML link for a relative source link, else ``None``."""
        if not target or target.startswith(("#", "//", "/")):
            return None

        parsed = urlsplit(target)
        if parsed.scheme or parsed.netloc:
            return None

        stem, ext = posixpath.splitext(parsed.path)
        if not stem or ext.lower() != self.source_suffix.lower():
            return None
        return urlunsplit(("", "", f"{stem}.html", parsed.query, parsed.fragment))


__all__ = ["RelativeDocLinkExtension", "RelativeDocLinkTreeprocessor"]
