"""Tests for markdown rendering, title extraction, and document link rewriting."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from tocsite.generator import HtmlContentRenderer, RelativeDocLinkExtension


@pytest.fixture
def renderer() -> HtmlContentRenderer:
    return HtmlContentRenderer("monokai", link_extension=RelativeDocLinkExtension())


def test_title_is_lifted_from_first_heading(renderer: HtmlContentRenderer) -> None:
    document = renderer.render_document(
        "Intro line.\n\n# Install Guide\n\nBody text.\n\n# Second\n", "install"
    )
    soup = BeautifulSoup(document.body_html, "html.parser")

    assert document.title == "Install Guide"
    assert [h1.get_text() for h1 in soup.find_all("h1")] == ["Second"]
    assert "Body text." in soup.get_text()


@pytest.mark.parametrize(
    ("heading", "expected"),
    [
        ("# Using `foo` safely", "Using foo safely"),
        ("# Escaped \\*stars\\* and C:\\\\path", "Escaped *stars* and C:\\path"),
        ("# Tom & **Jerry**", "Tom & Jerry"),
    ],
)
def test_title_is_plain_text_of_heading(
    renderer: HtmlContentRenderer, heading: str, expected: str
) -> None:
    document = renderer.render_document(f"{heading}\n\nBody.\n", "fallback")
    assert document.title == expected


def test_missing_title_falls_back_to_id(renderer: HtmlContentRenderer) -> None:
    document = renderer.render_document("## Only a subheading\n", "faq")
    assert document.title == "faq"


def test_heading_inside_code_fence_is_not_a_title(
    renderer: HtmlContentRenderer,
) -> None:
    text = "```bash\n# not a title\necho hi\n```\n"
    document = renderer.render_document(text, "shell")
    assert document.title == "shell"
    assert "# not a title" in BeautifulSoup(document.body_html, "html.parser").get_text()


def test_code_blocks_carry_language(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown("- item\n\n  ```rust,no_run\n  fn main() {}\n  ```\n")
    soup = BeautifulSoup(html, "html.parser")
    block = soup.select_one("div.codehilite")
    assert block is not None
    assert block["data-language"] == "rust"
    assert "fn main" in block.get_text()


def test_empty_markdown_renders_nothing(renderer: HtmlContentRenderer) -> None:
    assert renderer.markdown("   \n") == ""


def test_stylesheet_targets_codehilite(renderer: HtmlContentRenderer) -> None:
    assert ".codehilite" in renderer.stylesheet


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("install.md", "install.html"),
        ("../Guide/install.md#steps", "../Guide/install.html#steps"),
        ("sub/page.MD?x=1", "sub/page.html?x=1"),
        ("https://example.com/readme.md", "https://example.com/readme.md"),
        ("/absolute/page.md", "/absolute/page.md"),
        ("#local", "#local"),
        ("image.png", "image.png"),
        ("mailto:team@example.com", "mailto:team@example.com"),
    ],
)
def test_relative_document_links_are_rewritten(
    renderer: HtmlContentRenderer, target: str, expected: str
) -> None:
    html = renderer.markdown(f"[link]({target})")
    anchor = BeautifulSoup(html, "html.parser").find("a")
    assert anchor is not None
    assert anchor["href"] == expected


def test_custom_source_suffix() -> None:
    renderer = HtmlContentRenderer(
        link_extension=RelativeDocLinkExtension(".markdown")
    )
    html = renderer.markdown("[a](a.markdown) [b](b.md)")
    hrefs = [a["href"] for a in BeautifulSoup(html, "html.parser").find_all("a")]
    assert hrefs == ["a.html", "b.md"]


def test_typographic_punctuation(renderer: HtmlContentRenderer) -> None:
    html = renderer.markdown('Say "quoted" -- text...\n\n```python\nx = "raw" -- 1\n```\n')
    assert "&ldquo;quoted&rdquo;" in html
    assert "&ndash;" in html
    assert "&hellip;" in html
    code = BeautifulSoup(html, "html.parser").select_one("div.codehilite")
    assert code is not None
    assert '"raw" -- 1' in code.get_text()
