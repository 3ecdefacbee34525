"""Shared fixtures building a small documentation tree on disk.

The ``site_dir`` fixture lays out a ``site.yaml``, a separate ``toc.yaml`` and
Markdown sources mirroring the TOC sections. Tests that need a different TOC
write their own config next to the same sources.
"""

from __future__ import annotations

from pathlib import Path
from textwrap import dedent

import pytest
from ruamel.yaml import YAML

from tocsite.toc import TocTree, parse

TOC_YAML = dedent(
    """
    - index
    - Guide:
        - install
        - Advanced:
            - tuning
        - configure
    - Reference:
    - Extras:
        - install
    - faq
    """
).lstrip()

DOCUMENTS: dict[str, str] = {
    "index.md": "# Welcome\n\nStart with the [install guide](Guide/install.md#steps).\n",
    "Guide/install.md": (
        "# Installing\n\n## Steps\n\n```python\nprint('hello')\n```\n"
    ),
    "Guide/Advanced/tuning.md": "# Tuning\n\nBack to [installing](../install.md).\n",
    "Guide/configure.md": "# Configuring\n\nSet options.\n",
    "Extras/install.md": "# Installing extras\n\nOptional packages.\n",
    "faq.md": "Questions and answers without a title heading.\n",
}

EXPECTED_ORDER: list[tuple[tuple[str, ...], str]] = [
    ((), "index"),
    (("Guide",), "install"),
    (("Guide", "Advanced"), "tuning"),
    (("Guide",), "configure"),
    (("Extras",), "install"),
    ((), "faq"),
]


def write_documents(source_dir: Path, documents: dict[str, str]) -> None:
    """Write ``documents`` (relative path to markdown) under ``source_dir``."""
    for relative, body in documents.items():
        target = source_dir / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(body, encoding="utf-8")


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Return a directory holding ``site.yaml``, ``toc.yaml`` and ``docs/``."""
    (tmp_path / "toc.yaml").write_text(TOC_YAML, encoding="utf-8")
    (tmp_path / "site.yaml").write_text(
        dedent(
            """
            site_name: Fixture Docs
            toc: toc.yaml
            source_dir: docs
            output_dir: public
            footer_note: Built for tests
            """
        ).lstrip(),
        encoding="utf-8",
    )
    write_documents(tmp_path / "docs", DOCUMENTS)
    return tmp_path


@pytest.fixture
def toc_tree() -> TocTree:
    """Return the fixture TOC parsed from ``TOC_YAML``."""
    return parse(YAML(typ="safe").load(TOC_YAML))


@pytest.fixture
def expected_order() -> list[tuple[tuple[str, ...], str]]:
    """Return the fixture leaves as ``(path, id)`` pairs in declared order."""
    return list(EXPECTED_ORDER)
