"""Render the collapsible sidebar TOC for one page.

Each hook returns its own markup fragment and the traversal engine hands them
back in tree order, so the sidebar is a plain join of the results. Sections
containing the current page are rendered open; the current leaf is marked
selected. Links are relative to the current page's output directory and are
derived from section paths alone.

Example
-------
>>> from tocsite.toc.models import LeafRef
>>> from tocsite.toc.parser import parse
>>> from tocsite.toc.sidebar import render_sidebar
>>> html = render_sidebar(parse([{"Guide": ["install"]}]), LeafRef(("Guide",), "install"))
>>> 'href="install.html"' in html
True
"""

from __future__ import annotations

import typing as typ
from html import escape
from urllib.parse import quote

from .models import LeafRef, TocPath
from .traversal import TraversalHooks, walk

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import TocTree


def relative_href(current: LeafRef, target: LeafRef) -> str:
    """Return the URL of ``target``'s page relative to ``current``'s page."""
    segments = "/".join(quote(part) for part in target.output_parts)
    return "../" * current.depth + segments


def is_open(section_path: TocPath, current_path: TocPath) -> bool:
    """Return whether ``section_path`` is an ancestor of, or equal to, ``current_path``."""
    if len(section_path) > len(current_path):
        return False
    return current_path[: len(section_path)] == section_path


def render_sidebar(
    tree: TocTree,
    current: LeafRef,
    *,
    labels: cabc.Mapping[LeafRef, str] | None = None,
) -> str:
    """Render nested sidebar markup with ``current`` selected.

    Parameters
    ----------
    tree : TocTree
        Table of contents to render.
    current : LeafRef
        Page the sidebar is rendered for.
    labels : Mapping[LeafRef, str], optional
        Display text per leaf, typically document titles. Leaves without a
        label show their id.

    Returns
    -------
    str
        HTML fragment; safe to insert without further escaping.
    """
    label_map = labels or {}

    def _enter(path: TocPath) -> str:
        if not path:
            return '<ul class="toc">'
        opened = is_open(path, current.path)
        css = "toc-section is-open" if opened else "toc-section"
        details = "<details open>" if opened else "<details>"
        return (
            f'<li class="{css}">{details}'
            f"<summary>{escape(path[-1])}</summary><ul>"
        )

    def _leave(path: TocPath) -> str:
        return "</ul>" if not path else "</ul></details></li>"

    def _leaf(path: TocPath, leaf_id: str) -> str:
        ref = LeafRef(path=path, id=leaf_id)
        text = escape(label_map.get(ref, leaf_id))
        href = escape(relative_href(current, ref), quote=True)
        if ref == current:
            return (
                f'<li class="toc-leaf is-selected">'
                f'<a href="{href}" aria-current="page">{text}</a></li>'
            )
        return f'<li class="toc-leaf"><a href="{href}">{text}</a></li>'

    hooks = TraversalHooks(
        on_enter_section=_enter, on_leave_section=_leave, on_leaf=_leaf
    )
    return "\n".join(walk(tree, hooks))


__all__ = ["is_open", "relative_href", "render_sidebar"]
