"""Flatten the TOC into the ordered sequence used for prev/next links."""

from __future__ import annotations

import typing as typ

from tocsite.errors import DuplicateLeafIdentity

from .models import LeafRef, TocPath
from .traversal import TraversalHooks, walk

if typ.TYPE_CHECKING:
    from .models import TocTree


def flatten(tree: TocTree) -> list[LeafRef]:
    """Return every leaf of ``tree`` in traversal order.

    The sidebar renderer walks the same tree with the same engine, so its leaf
    order always matches this list.
    """

    def _on_leaf(path: TocPath, leaf_id: str) -> LeafRef:
        return LeafRef(path=path, id=leaf_id)

    return walk(tree, TraversalHooks(on_leaf=_on_leaf))


class NavigationIndex:
    """Ordered leaves of a TOC with predecessor/successor lookups."""

    def __init__(self, refs: typ.Sequence[LeafRef]) -> None:
        """Build the index, rejecting duplicate leaf identities.

        Raises
        ------
        DuplicateLeafIdentity
            If two entries share the same path and id.
        """
        positions: dict[LeafRef, int] = {}
        for idx, ref in enumerate(refs):
            if ref in positions:
                raise DuplicateLeafIdentity(ref)
            positions[ref] = idx
        self._refs = tuple(refs)
        self._positions = positions

    @classmethod
    def from_tree(cls, tree: TocTree) -> NavigationIndex:
        """Flatten ``tree`` and index the resulting leaves."""
        return cls(flatten(tree))

    def __iter__(self) -> typ.Iterator[LeafRef]:
        """Iterate over leaves in navigation order."""
        return iter(self._refs)

    def __len__(self) -> int:
        """Return the number of pages."""
        return len(self._refs)

    def __getitem__(self, position: int) -> LeafRef:
        """Return the leaf at ``position``."""
        return self._refs[position]

    def index(self, ref: LeafRef) -> int:
        """Return the position of ``ref``; raises ``KeyError`` when absent."""
        return self._positions[ref]

    def neighbours(self, position: int) -> tuple[LeafRef | None, LeafRef | None]:
        """Return the previous and next leaves, or ``None`` at either boundary."""
        if not 0 <= position < len(self._refs):
            msg = f"Navigation position {position} out of range."
            raise IndexError(msg)
        previous = self._refs[position - 1] if position > 0 else None
        following = (
            self._refs[position + 1] if position + 1 < len(self._refs) else None
        )
        return previous, following


__all__ = ["NavigationIndex", "flatten"]
