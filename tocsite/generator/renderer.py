"""Utilities for rendering markdown documents with highlighted code blocks."""

from __future__ import annotations

import re
import typing as typ
from html import escape, unescape

from markdown import Markdown
from pygments.formatters.html import HtmlFormatter

from .models import RenderedDocument

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

CODE_BLOCK_PATTERN = re.compile(r"```([A-Za-z0-9_+#.-]+)?[^\n]*\n(.*?)```", re.DOTALL)
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)
FENCE_LINE_PATTERN = re.compile(r"^\s{0,3}([`~]{3,})")
TITLE_PATTERN = re.compile(r"^#\s+(.+?)\s*#*\s*$")
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class HtmlContentRenderer:
    """Render markdown documents with consistent styling."""

    def __init__(
        self, pygments_style: str = "monokai", link_extension: Extension | None = None
    ) -> None:
        """Initialize a renderer with optional pygments style and link extension.

        Parameters
        ----------
        pygments_style : str, optional
            Name of the Pygments style used for syntax highlighting. Defaults to
            ``"monokai"``.
        link_extension : Extension, optional
            Markdown extension used when rewriting links; pass ``None`` to skip
            link rewriting.
        """
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")
        self._link_extension = link_extension

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def render_document(self, text: str, fallback_title: str) -> RenderedDocument:
        """Render a full source document, lifting its level-one heading as title.

        Parameters
        ----------
        text : str
            Markdown source of the document.
        fallback_title : str
            Title used when the document has no ``# Heading`` line.

        Returns
        -------
        RenderedDocument
            Title plus the HTML body with the title heading removed.
        """
        heading, body = _split_title(text)
        title = _heading_text(heading) if heading else None
        return RenderedDocument(
            title=title or fallback_title, body_html=self.markdown(body)
        )

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
            "toc",
            "smarty",
        ]
        if self._link_extension:
            extensions.append(self._link_extension)
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": "codehilite",
                    "pygments_style": self.pygments_style,
                }
            },
        )
        html = md.convert(normalized)
        return self._annotate_codehilite(html, normalized)

    def _annotate_codehilite(self, html: str, source_markdown: str) -> str:
        """Attach language metadata to each highlighted block in converted markdown."""
        languages = [
            match.group(1) or "text"
            for match in CODE_BLOCK_PATTERN.finditer(source_markdown)
        ]
        if not languages:
            return html
        lang_iter = iter(languages)

        def _repl(match: re.Match[str]) -> str:
            lang = next(lang_iter, "text")
            return (
                f'<div class="codehilite" data-language="{escape(lang, quote=True)}">'
            )

        return CODEHILITE_OPEN_TAG.sub(_repl, html, len(languages))

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


def _split_title(text: str) -> tuple[str | None, str]:
    """Return the first ``# Heading`` outside code fences and the remaining text."""
    lines = text.splitlines(keepends=True)
    open_fence: str | None = None
    for idx, line in enumerate(lines):
        fence = FENCE_LINE_PATTERN.match(line)
        if fence:
            marker = fence.group(1)
            if open_fence is None:
                open_fence = marker
            elif marker.startswith(open_fence):
                open_fence = None
            continue
        if open_fence is not None:
            continue
        heading = TITLE_PATTERN.match(line.rstrip("\r\n"))
        if heading:
            return heading.group(1), "".join(lines[:idx] + lines[idx + 1 :])
    return None, text


def _heading_text(heading: str) -> str | None:
    """Return the plain text of a heading rendered with inline markup."""
    md = Markdown(extensions=["toc", "smarty"])
    md.convert(f"# {heading}")
    tokens = md.toc_tokens  # type: ignore[attr-defined]
    if not tokens:
        return None
    return unescape(tokens[0]["name"]).strip() or None


__all__ = ["CODE_BLOCK_PATTERN", "HtmlContentRenderer"]
