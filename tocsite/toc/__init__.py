"""Table-of-contents model, traversal, flattening and sidebar rendering."""

from .models import Leaf, LeafRef, Section, TocEntry, TocPath, TocTree
from .navigation import NavigationIndex, flatten
from .parser import load_toc, parse
from .sidebar import is_open, relative_href, render_sidebar
from .traversal import TraversalHooks, traverse, walk

__all__ = [
    "Leaf",
    "LeafRef",
    "NavigationIndex",
    "Section",
    "TocEntry",
    "TocPath",
    "TocTree",
    "TraversalHooks",
    "flatten",
    "is_open",
    "load_toc",
    "parse",
    "relative_href",
    "render_sidebar",
    "traverse",
    "walk",
]
