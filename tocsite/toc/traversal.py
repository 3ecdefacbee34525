"""Depth-first traversal of a :class:`~tocsite.toc.models.TocTree`.

Callers supply :class:`TraversalHooks`; the engine calls them in pre-order and
returns every non-``None`` hook result as a list in declared tree order. Each
recursive step returns its own fragment list and the parent concatenates them,
so no accumulator is shared between branches. That holds for the concurrent
async variant as well: siblings run as separate tasks and their results are
merged afterwards in declared order, never in completion order.

Example
-------
>>> from tocsite.toc.parser import parse
>>> from tocsite.toc.traversal import TraversalHooks, walk
>>> tree = parse(["a", {"B": ["c"]}])
>>> walk(tree, TraversalHooks(on_leaf=lambda path, leaf_id: (path, leaf_id)))
[((), 'a'), (('B',), 'c')]
"""

from __future__ import annotations

import asyncio
import dataclasses as dc
import inspect
import typing as typ

from .models import Leaf, Section, TocEntry, TocPath

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .models import TocTree

SectionHook = typ.Callable[[TocPath], typ.Any]
LeafHook = typ.Callable[[TocPath, str], typ.Any]


def _noop(*_args: object) -> None:
    return None


@dc.dataclass(frozen=True, slots=True)
class TraversalHooks:
    """Callbacks fired while walking the tree; omitted hooks do nothing.

    Attributes
    ----------
    on_enter_section : Callable[[TocPath], Any]
        Called with the section path before its children. Fires once with
        ``()`` for the root.
    on_leave_section : Callable[[TocPath], Any]
        Called with the section path after its children. Fires once with
        ``()`` for the root.
    on_leaf : Callable[[TocPath, str], Any]
        Called with the parent path and the leaf id.
    """

    on_enter_section: SectionHook = _noop
    on_leave_section: SectionHook = _noop
    on_leaf: LeafHook = _noop


def walk(tree: TocTree, hooks: TraversalHooks, path: TocPath = ()) -> list[typ.Any]:
    """Traverse ``tree`` synchronously and return hook results in order.

    Raises
    ------
    Exception
        Whatever a hook raises; traversal stops at the first failure.
    """
    results: list[typ.Any] = []
    _keep(results, hooks.on_enter_section(path))
    results.extend(_walk_entries(tree.entries, hooks, path))
    _keep(results, hooks.on_leave_section(path))
    return results


def _walk_entries(
    entries: cabc.Iterable[TocEntry], hooks: TraversalHooks, path: TocPath
) -> list[typ.Any]:
    results: list[typ.Any] = []
    for entry in entries:
        match entry:
            case Leaf(id=leaf_id):
                _keep(results, hooks.on_leaf(path, leaf_id))
            case Section(name=name, children=children):
                section_path = (*path, name)
                _keep(results, hooks.on_enter_section(section_path))
                results.extend(_walk_entries(children, hooks, section_path))
                _keep(results, hooks.on_leave_section(section_path))
    return results


async def traverse(
    tree: TocTree,
    hooks: TraversalHooks,
    path: TocPath = (),
    *,
    concurrent: bool = False,
) -> list[typ.Any]:
    """Traverse ``tree`` awaiting async hooks and return results in order.

    Parameters
    ----------
    tree : TocTree
        Tree to walk.
    hooks : TraversalHooks
        Callbacks; each may return a plain value or an awaitable.
    path : TocPath, optional
        Path prefix reported for the root entries.
    concurrent : bool, optional
        When ``True``, sibling entries are processed as concurrent tasks.
        Output order still follows the tree, not task completion.

    Returns
    -------
    list[Any]
        Non-``None`` hook results in declared pre-order.
    """
    results: list[typ.Any] = []
    _keep(results, await _resolve(hooks.on_enter_section(path)))
    results.extend(await _traverse_entries(tree.entries, hooks, path, concurrent))
    _keep(results, await _resolve(hooks.on_leave_section(path)))
    return results


async def _traverse_entries(
    entries: tuple[TocEntry, ...],
    hooks: TraversalHooks,
    path: TocPath,
    concurrent: bool,  # noqa: FBT001
) -> list[typ.Any]:
    if concurrent:
        fragments = await asyncio.gather(
            *(_traverse_entry(entry, hooks, path, concurrent) for entry in entries)
        )
    else:
        fragments = [
            await _traverse_entry(entry, hooks, path, concurrent) for entry in entries
        ]
    return [item for fragment in fragments for item in fragment]


async def _traverse_entry(
    entry: TocEntry,
    hooks: TraversalHooks,
    path: TocPath,
    concurrent: bool,  # noqa: FBT001
) -> list[typ.Any]:
    results: list[typ.Any] = []
    match entry:
        case Leaf(id=leaf_id):
            _keep(results, await _resolve(hooks.on_leaf(path, leaf_id)))
        case Section(name=name, children=children):
            section_path = (*path, name)
            _keep(results, await _resolve(hooks.on_enter_section(section_path)))
            results.extend(
                await _traverse_entries(children, hooks, section_path, concurrent)
            )
            _keep(results, await _resolve(hooks.on_leave_section(section_path)))
    return results


async def _resolve(value: object) -> object:
    if inspect.isawaitable(value):
        return await value
    return value


def _keep(results: list[typ.Any], value: object) -> None:
    if value is not None:
        results.append(value)


__all__ = ["LeafHook", "SectionHook", "TraversalHooks", "traverse", "walk"]
