r"""Parse YAML-shaped TOC configuration into :class:`TocTree` values.

Strings become leaves; mapping keys become sections whose values list their
children. Key order and sequence order are preserved exactly.

Example
-------
>>> from tocsite.toc.parser import parse
>>> tree = parse(["index", {"Guide": ["install", "configure"]}])
>>> [type(entry).__name__ for entry in tree]
['Leaf', 'Section']
"""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from tocsite.errors import MalformedToc

from .models import Leaf, Section, TocEntry, TocTree

if typ.TYPE_CHECKING:
    from pathlib import Path

_RESERVED_NAMES = frozenset({".", ".."})


def parse(raw_config: object) -> TocTree:
    """Convert loaded TOC configuration into an immutable tree.

    Parameters
    ----------
    raw_config : object
        Data produced by a YAML loader: a sequence of entries, a mapping of
        section names to child sequences, or ``None`` for an empty TOC.

    Returns
    -------
    TocTree
        Tree preserving the declared order of every entry.

    Raises
    ------
    MalformedToc
        If any entry is neither a string nor a mapping of names to child
        sequences, or if a name cannot be used as a path segment.
    """
    return TocTree(entries=_parse_entries(raw_config, ()))


def load_toc(path: Path) -> TocTree:
    """Read a TOC YAML file and parse it.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    MalformedToc
        If the YAML is invalid or does not describe a TOC.
    """
    if not path.exists():
        msg = f"TOC file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle)
    except YAMLError as exc:
        msg = f"TOC file '{path}' is not valid YAML: {exc}"
        raise MalformedToc(msg) from exc
    return parse(loaded)


def _parse_entries(raw: object, location: tuple[str, ...]) -> tuple[TocEntry, ...]:
    match raw:
        case None:
            return ()
        case dict():
            return tuple(_parse_sections(raw, location))
        case list() | tuple():
            entries: list[TocEntry] = []
            for idx, item in enumerate(raw):
                entries.extend(_parse_entry(item, (*location, f"[{idx}]")))
            return tuple(entries)
        case _:
            msg = (
                f"Expected a list of TOC entries at '{_describe(location)}', "
                f"got {type(raw).__name__}."
            )
            raise MalformedToc(msg)


def _parse_entry(item: object, location: tuple[str, ...]) -> list[TocEntry]:
    match item:
        case str():
            return [Leaf(id=_segment(item, location))]
        case dict():
            return _parse_sections(item, location)
        case _:
            msg = (
                f"TOC entry at '{_describe(location)}' must be a document name "
                f"or a section mapping, got {type(item).__name__}."
            )
            raise MalformedToc(msg)


def _parse_sections(
    payload: dict[typ.Any, typ.Any], location: tuple[str, ...]
) -> list[TocEntry]:
    sections: list[TocEntry] = []
    for key, children in payload.items():
        if not isinstance(key, str):
            msg = f"Section name at '{_describe(location)}' must be a string."
            raise MalformedToc(msg)
        name = _segment(key, location)
        if children is not None and not isinstance(children, (list, tuple)):
            msg = (
                f"Section '{_describe((*location, name))}' must contain a list "
                f"of entries, got {type(children).__name__}."
            )
            raise MalformedToc(msg)
        sections.append(
            Section(name=name, children=_parse_entries(children, (*location, name)))
        )
    return sections


def _segment(value: str, location: tuple[str, ...]) -> str:
    """Return ``value``, rejecting names unusable as path segments."""
    if value != value.strip():
        msg = (
            f"TOC name {value!r} at '{_describe(location)}' has leading or "
            "trailing whitespace."
        )
        raise MalformedToc(msg)
    if not value or value in _RESERVED_NAMES or "/" in value or "\\" in value:
        msg = f"Invalid TOC name {value!r} at '{_describe(location)}'."
        raise MalformedToc(msg)
    return value


def _describe(location: tuple[str, ...]) -> str:
    return " > ".join(location) or "<root>"


__all__ = ["load_toc", "parse"]
