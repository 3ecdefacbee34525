"""Behaviour tests for sidebar open/selected state.

These pytest-bdd scenarios render the sidebar for pages at different depths
and check which sections are expanded and which page is selected. The feature
file ``sidebar_selection.feature`` drives the scenarios.

Usage
-----
Run ``pytest tests/bdd/test_sidebar_selection.py -v``. No files are written;
the TOC is built in memory.
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from tocsite.toc import LeafRef, parse, render_sidebar

if typ.TYPE_CHECKING:
    from tocsite.toc import TocTree

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "sidebar_selection.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(
    parsers.parse(
        'a TOC with section "{outer}" containing section "{inner}" '
        'with page "{nested}" and page "{sibling}"'
    )
)
def given_nested_toc(
    scenario_state: dict[str, object],
    outer: str,
    inner: str,
    nested: str,
    sibling: str,
) -> None:
    """Build ``outer > inner > nested`` with ``sibling`` directly under ``outer``."""
    scenario_state["tree"] = parse([{outer: [{inner: [nested]}, sibling]}])


@when(parsers.parse('I render the sidebar for page "{page_id}" in "{section_path}"'))
def when_render_sidebar(
    scenario_state: dict[str, object], page_id: str, section_path: str
) -> None:
    """Render the sidebar with the given page as current."""
    tree = typ.cast("TocTree", scenario_state["tree"])
    current = LeafRef(path=tuple(section_path.split("/")), id=page_id)
    html = render_sidebar(tree, current)
    scenario_state["soup"] = BeautifulSoup(html, "html.parser")


@then(parsers.parse('the open sections are "{names}"'))
def then_open_sections(scenario_state: dict[str, object], names: str) -> None:
    """Verify exactly the listed sections are expanded, in tree order."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    opened = [
        item.summary.get_text() for item in soup.select("li.toc-section.is-open")
    ]
    assert opened == names.split(","), f"expected open sections {names!r}, got {opened!r}"


@then(parsers.parse('the selected page is "{page_id}"'))
def then_selected_page(scenario_state: dict[str, object], page_id: str) -> None:
    """Verify exactly one page is selected and it is ``page_id``."""
    soup = typ.cast("BeautifulSoup", scenario_state["soup"])
    selected = [a.get_text() for a in soup.select("li.toc-leaf.is-selected > a")]
    assert selected == [page_id], f"expected only {page_id!r} selected, got {selected!r}"
