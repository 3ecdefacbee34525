"""Utilities for rendering, assembling, and writing tocsite pages."""

from .assets import AssetPublisher
from .link_rewriter import RelativeDocLinkExtension
from .models import PageDescriptor, RenderedDocument
from .page_generator import SiteGenerator
from .renderer import HtmlContentRenderer
from .sources import FileSystemDocumentSource
from .writer import OutputWriter

__all__ = [
    "AssetPublisher",
    "FileSystemDocumentSource",
    "HtmlContentRenderer",
    "OutputWriter",
    "PageDescriptor",
    "RelativeDocLinkExtension",
    "RenderedDocument",
    "SiteGenerator",
]
