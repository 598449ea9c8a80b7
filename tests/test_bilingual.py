"""Unit tests for the bilingual markdown extension.

These tests cover the ``$original$$translation`` split, the container the
extension emits in place of matching paragraphs and list items, the fallback
to untouched default rendering, and the anchored headings consumed by the
page navigation.
"""

from __future__ import annotations

import copy

import pytest
from bs4 import BeautifulSoup, Tag

from handbook_pages._constants import DEFAULT_TOGGLE_LABEL
from handbook_pages.generator import (
    BilingualExtension,
    BilingualText,
    HtmlContentRenderer,
    split_bilingual,
)


def _render(text: str, **kwargs: str) -> BeautifulSoup:
    renderer = HtmlContentRenderer(BilingualExtension(**kwargs))
    return BeautifulSoup(renderer.markdown(text), "html.parser")


def _regions(item: Tag) -> tuple[Tag, Tag]:
    """Return the translation and original regions of a bilingual item."""
    children = item.find_all(True, recursive=False)
    assert len(children) == 2, f"expected two child regions, got {len(children)}"
    return children[0], children[1]


def _translation_text(region: Tag) -> str:
    """Return the translation text without the toggle affordance."""
    detached = copy.copy(region)
    toggle = detached.find(attrs={"role": "check-ori"})
    assert toggle is not None, "expected a toggle inside the translation region"
    toggle.decompose()
    return detached.get_text()


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("$Hello$$你好", BilingualText("Hello", "你好")),
        ("$a$$b$$c", BilingualText("a", "b$$c")),
        ("$$$only translation", BilingualText("", "only translation")),
        ("$ spaced $$ 间隔 ", BilingualText(" spaced ", " 间隔 ")),
    ],
)
def test_split_bilingual_uses_first_marker(text: str, expected: BilingualText) -> None:
    """The first marker after the sentinel defines the split boundary."""
    result = split_bilingual(text)
    assert result == expected
    assert result is not None
    assert result.source == text, "segments should rejoin to the exact input"


@pytest.mark.parametrize(
    "text", ["$5 is the price", "plain$$text", "", "$$", " $a$$b"]
)
def test_split_bilingual_rejects_non_matches(text: str) -> None:
    assert split_bilingual(text) is None


def test_paragraph_becomes_toggleable_item() -> None:
    """A marked paragraph renders as translation plus hidden original."""
    soup = _render("$Hello world$$你好，世界\n")
    items = soup.select('[role="item"]')
    assert len(items) == 1
    translation, original = _regions(items[0])

    toggle = translation.find(attrs={"role": "check-ori"})
    assert toggle is not None
    assert toggle.get_text() == DEFAULT_TOGGLE_LABEL
    assert "check-ori" in toggle["class"]
    assert original.get("role") == "ori"
    assert original.has_attr("hidden"), "original text must be hidden by default"
    assert original.get_text() == "Hello world"
    assert _translation_text(translation) == "你好，世界"
    assert soup.find("p", string="$Hello world$$你好，世界") is None


def test_regions_rejoin_to_source_with_inline_markup() -> None:
    """Inline markup stays in its segment and the text round-trips."""
    source = "$Use **strict** mode$$使用 **严格** 模式"
    soup = _render(source + "\n")
    translation, original = _regions(soup.select_one('[role="item"]'))

    assert original.find("strong").get_text() == "strict"
    assert translation.find("strong").get_text() == "严格"
    rejoined = f"${original.get_text()}$${_translation_text(translation)}"
    assert rejoined == source.replace("**", "")


def test_toggle_label_is_configurable() -> None:
    soup = _render("$Hi$$嗨\n", toggle_label="[original]")
    assert soup.select_one('[role="check-ori"]').get_text() == "[original]"


def test_tight_list_item_keeps_list_structure() -> None:
    """Matching list items hold the container; other items are untouched."""
    soup = _render("- $Optional properties$$可选属性\n- function types\n")
    items = soup.select("ul > li")
    assert len(items) == 2
    container = items[0].find("div", attrs={"role": "item"})
    assert container is not None
    _translation, original = _regions(container)
    assert original.get_text() == "Optional properties"
    assert items[1].get_text() == "function types"
    assert items[1].find(attrs={"role": "item"}) is None


def test_nested_list_stays_outside_translation_paragraph() -> None:
    """A sub-list follows the container; the toggle still ends the translation."""
    soup = _render("- $a$$b\n    - nested\n")
    item = soup.select_one("ul > li")
    assert item is not None
    container = item.find("div", attrs={"role": "item"}, recursive=False)
    assert container is not None
    translation, original = _regions(container)
    assert translation.find(["ul", "ol"]) is None
    assert translation.find_all(True, recursive=False)[-1]["role"] == "check-ori"
    assert _translation_text(translation).strip() == "b"
    assert original.get_text() == "a"
    nested = item.find("ul", recursive=False)
    assert nested is not None
    assert nested.get_text(strip=True) == "nested"
    assert item.find_all(True, recursive=False) == [container, nested]


@pytest.mark.parametrize(
    "text",
    [
        "$5 is the price of admission.\n",
        "Plain paragraph.\n\nAnother one with $$ inside.\n",
        "- first\n- $second without marker\n",
    ],
)
def test_non_matching_blocks_render_like_default(text: str) -> None:
    """Fallback output must equal the renderer without the extension."""
    plain = HtmlContentRenderer().markdown(text)
    extended = HtmlContentRenderer(BilingualExtension()).markdown(text)
    assert extended == plain


@pytest.mark.parametrize(
    ("markdown_text", "tag", "title"),
    [
        ("# Basic Types\n", "h1", "Basic Types"),
        ("## Hello, World: Part 2!\n", "h2", "Hello, World: Part 2!"),
        ("### Type Inference (Best Common Type)\n", "h3", "Type Inference (Best Common Type)"),
        ("###### writing .d.ts files\n", "h6", "writing .d.ts files"),
    ],
)
def test_headings_carry_exact_text_anchor(markdown_text: str, tag: str, title: str) -> None:
    """Anchor name and self-link target equal the exact heading text."""
    soup = _render(markdown_text)
    heading = soup.find(tag)
    assert heading is not None
    assert "section-title" in heading["class"]
    anchor = heading.find("a", class_="anchor")
    assert anchor is not None
    assert anchor is heading.contents[0], "anchor should precede the heading text"
    assert anchor["name"] == title
    assert anchor["href"] == f"#{title}"
    assert anchor.find("span", class_="header-link") is not None
    assert heading.get_text() == title
