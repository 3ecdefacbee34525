"""High-level orchestration for static site generation.

This module coordinates reading every Markdown document named by the TOC,
rendering it with shared templates, and writing one themed HTML page per leaf
with a sidebar and previous/next links. It exposes :class:`SiteGenerator`,
which consumes a :class:`~tocsite.config.SiteConfig` and persists the pages
plus the shared stylesheets under the configured output directory.

Example
-------
>>> from pathlib import Path
>>> from tocsite.config import load_site_config
>>> from tocsite.generator import SiteGenerator
>>> config = load_site_config(Path("site.yaml"))  # doctest: +SKIP
>>> SiteGenerator(config).run()  # doctest: +SKIP
[PosixPath('public/index.html'), PosixPath('public/Guide/install.html'), ...]
"""

from __future__ import annotations

import asyncio
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

from tocsite._constants import ASSET_FILES, ASSETS_DIRNAME, PAGE_TEMPLATE
from tocsite.errors import DocumentRenderError, TocSiteError
from tocsite.toc import (
    LeafRef,
    NavigationIndex,
    TocPath,
    TraversalHooks,
    relative_href,
    render_sidebar,
    traverse,
    walk,
)

from .assets import AssetPublisher
from .link_rewriter import RelativeDocLinkExtension
from .models import PageDescriptor, RenderedDocument
from .renderer import HtmlContentRenderer
from .sources import FileSystemDocumentSource
from .writer import OutputWriter

if typ.TYPE_CHECKING:
    from tocsite.config import SiteConfig


class SiteGenerator:
    """Render every TOC leaf into a themed HTML page on disk."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        source: FileSystemDocumentSource | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        """Initialize the generator with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Site configuration holding the TOC, directories and theme.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        source : FileSystemDocumentSource, optional
            Document store; defaults to reading from ``site_config.source_dir``.
        writer : OutputWriter, optional
            Filesystem writer used for pages and assets.
        """
        self.site = site_config
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.source = source or FileSystemDocumentSource(
            site_config.source_dir, site_config.source_suffix
        )
        self.writer = writer or OutputWriter()
        self.renderer = HtmlContentRenderer(
            site_config.pygments_style,
            link_extension=RelativeDocLinkExtension(site_config.source_suffix),
        )
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template(PAGE_TEMPLATE)

    def run(self) -> list[Path]:
        """Generate the whole site and return the written page paths.

        Returns
        -------
        list[Path]
            Paths to the generated HTML pages, in navigation order.

        Raises
        ------
        TocSiteError
            Raised for duplicate TOC entries, missing or undecodable source
            documents, and write failures. The run stops at the first error.
        """
        return asyncio.run(self.generate())

    async def generate(self) -> list[Path]:
        """Asynchronous body of :meth:`run`."""
        toc = self.site.toc
        index = NavigationIndex.from_tree(toc)
        if not len(index):
            msg = "The table of contents does not list any documents."
            raise TocSiteError(msg)

        documents: list[RenderedDocument] = await traverse(
            toc, TraversalHooks(on_leaf=self._load_document), concurrent=True
        )
        labels = {
            ref: document.title
            for ref, document in zip(index, documents, strict=True)
        }
        pages = [
            self._describe_page(index, position, document)
            for position, document in enumerate(documents)
        ]

        self._create_directories()
        publisher = AssetPublisher(
            self.site.output_dir, self.renderer.stylesheet, self.writer
        )
        written, _assets = await asyncio.gather(
            asyncio.gather(*(self._write_page(page, labels) for page in pages)),
            publisher.publish(),
        )
        return list(written)

    async def _load_document(self, path: TocPath, leaf_id: str) -> RenderedDocument:
        """Fetch and render the source document of one leaf."""
        ref = LeafRef(path=path, id=leaf_id)
        text = await self.source.fetch(ref)
        try:
            return self.renderer.render_document(text, fallback_title=leaf_id)
        except Exception as exc:
            raise DocumentRenderError(ref, str(exc)) from exc

    def _create_directories(self) -> None:
        """Create the output root plus one directory per TOC section."""
        output_dir = self.site.output_dir

        def _enter(path: TocPath) -> None:
            self.writer.ensure_dir(output_dir.joinpath(*path))

        walk(self.site.toc, TraversalHooks(on_enter_section=_enter))

    def _describe_page(
        self, index: NavigationIndex, position: int, document: RenderedDocument
    ) -> PageDescriptor:
        """Combine a rendered document with its place in the navigation order."""
        ref = index[position]
        previous, following = index.neighbours(position)
        return PageDescriptor(
            ref=ref,
            root_prefix="../" * ref.depth,
            document=document,
            output_path=self.site.output_dir.joinpath(*ref.output_parts),
            previous=previous,
            next=following,
        )

    async def _write_page(
        self, page: PageDescriptor, labels: typ.Mapping[LeafRef, str]
    ) -> Path:
        """Render the page template for ``page`` and write it to disk."""
        sidebar = render_sidebar(self.site.toc, page.ref, labels=labels)
        html = self.template.render(**self._page_context(page, sidebar, labels))
        return await self.writer.write(page.output_path, html)

    def _page_context(
        self,
        page: PageDescriptor,
        sidebar: str,
        labels: typ.Mapping[LeafRef, str],
    ) -> dict[str, typ.Any]:
        """Return the template context for one page."""
        assets_prefix = f"{page.root_prefix}{ASSETS_DIRNAME}/"
        return {
            "page": page,
            "theme": self.site.theme,
            "html_title": self._format_page_title(page.document),
            "body_html": Markup(page.document.body_html),  # noqa: S704
            "sidebar_html": Markup(sidebar),  # noqa: S704
            "breadcrumbs": page.ref.path,
            "previous": self._nav_link(page.ref, page.previous, labels),
            "next": self._nav_link(page.ref, page.next, labels),
            "stylesheets": [
                f"{assets_prefix}{name}" for name in ASSET_FILES
            ],
        }

    @staticmethod
    def _nav_link(
        current: LeafRef,
        target: LeafRef | None,
        labels: typ.Mapping[LeafRef, str],
    ) -> dict[str, str] | None:
        """Return the label and relative href of a neighbour page, if any."""
        if target is None:
            return None
        return {
            "label": labels.get(target, target.id),
            "href": relative_href(current, target),
        }

    def _format_page_title(self, document: RenderedDocument) -> str:
        """Compose the HTML title using site name, document title and suffix."""
        theme = self.site.theme
        return f"{document.title} | {theme.site_name} {theme.page_title_suffix}"


__all__ = ["SiteGenerator"]
