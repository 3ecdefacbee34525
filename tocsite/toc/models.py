"""Immutable dataclasses describing the table of contents.

A TOC entry is either a :class:`Leaf` naming one source document or a
:class:`Section` grouping further entries. The tree is built once per run and
is never mutated, so every type here is frozen and children are tuples.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

TocPath = tuple[str, ...]
"""Section names leading from the root to an entry (empty at the root)."""


@dc.dataclass(frozen=True, slots=True)
class Leaf:
    """One source document, identified by its logical name.

    Attributes
    ----------
    id : str
        Document name, unique within its parent section.
    """

    id: str


@dc.dataclass(frozen=True, slots=True)
class Section:
    """Named group of child entries, in declared order.

    Attributes
    ----------
    name : str
        Section label; also used as the output directory name.
    children : tuple[TocEntry, ...]
        Child entries; may be empty.
    """

    name: str
    children: tuple[TocEntry, ...] = ()


TocEntry = Leaf | Section


@dc.dataclass(frozen=True, slots=True)
class TocTree:
    """Ordered root entries of the table of contents."""

    entries: tuple[TocEntry, ...] = ()

    def __iter__(self) -> typ.Iterator[TocEntry]:
        """Iterate over the root entries in declared order."""
        return iter(self.entries)

    def __len__(self) -> int:
        """Return the number of root entries."""
        return len(self.entries)


@dc.dataclass(frozen=True, slots=True)
class LeafRef:
    """Global identity of a leaf: its section path plus its id."""

    path: TocPath
    id: str

    @property
    def depth(self) -> int:
        """Number of directory levels between the output root and this page."""
        return len(self.path)

    @property
    def output_parts(self) -> tuple[str, ...]:
        """Path segments of the generated HTML file, relative to the output root."""
        return (*self.path, f"{self.id}.html")

    def source_parts(self, suffix: str = ".md") -> tuple[str, ...]:
        """Path segments of the source document, relative to the source root."""
        return (*self.path, f"{self.id}{suffix}")

    @property
    def label(self) -> str:
        """Human-readable location such as ``Guide > Install > setup``."""
        return " > ".join((*self.path, self.id))


__all__ = ["Leaf", "LeafRef", "Section", "TocEntry", "TocPath", "TocTree"]
