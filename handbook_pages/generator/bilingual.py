"""Markdown extension rendering bilingual paragraphs and anchored headings.

Handbook sources mark a translated line as ``$original$$translation``. The
extension rewrites such paragraphs (and tight list items) into a container
holding the visible translation, a "view original" toggle, and the hidden
original text. Every heading additionally receives a self-link whose anchor
name is the exact heading text, so the page navigation can target it.

Both rules run as tree processors after inline processing, so they see the
rendered inline markup and leave every other block exactly as Python-Markdown
produced it.
"""

from __future__ import annotations

import typing as typ
from xml.etree.ElementTree import Element, SubElement

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from handbook_pages._constants import (
    DEFAULT_TOGGLE_LABEL,
    MARKER,
    ROLE_ITEM,
    ROLE_ORIGINAL,
    ROLE_TOGGLE,
    SECTION_TITLE_CLASS,
    SENTINEL,
)

from .models import BilingualText

if typ.TYPE_CHECKING:
    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any

HEADING_TAGS = frozenset(f"h{level}" for level in range(1, 7))
BLOCK_TAGS = frozenset({"p", "li"})
NESTED_BLOCK_TAGS = frozenset(
    {"ul", "ol", "pre", "div", "p", "blockquote", "table", "hr"}
)


def split_bilingual(text: str) -> BilingualText | None:
    """Split a ``$original$$translation`` line at its first marker.

    Parameters
    ----------
    text : str
        Inline-rendered paragraph text.

    Returns
    -------
    BilingualText | None
        The two segments, or ``None`` when ``text`` does not start with the
        sentinel or has no marker after it.

    Examples
    --------
    >>> split_bilingual("$Hello$$你好")
    BilingualText(original='Hello', translation='你好')
    >>> split_bilingual("$5 only") is None
    True
    """
    if not text.startswith(SENTINEL):
        return None
    index = text.find(MARKER, len(SENTINEL))
    if index < 0:
        return None
    return BilingualText(
        original=text[len(SENTINEL) : index],
        translation=text[index + len(MARKER) :],
    )


class BilingualExtension(Extension):
    """Register the bilingual block and anchored heading rules."""

    def __init__(self, toggle_label: str = DEFAULT_TOGGLE_LABEL) -> None:
        super().__init__()
        self.toggle_label = toggle_label

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register both tree processors on the Markdown instance."""
        md.treeprocessors.register(
            BilingualTreeprocessor(md, self.toggle_label), "handbook_bilingual", 15
        )
        md.treeprocessors.register(
            AnchoredHeadingTreeprocessor(md), "handbook_heading_anchors", 14
        )


class BilingualTreeprocessor(Treeprocessor):
    """Replace marked paragraphs and list items with toggleable containers."""

    def __init__(self, md: Markdown, toggle_label: str) -> None:
        super().__init__(md)
        self.toggle_label = toggle_label

    def run(self, root: Element) -> Element:
        """Rewrite every matching ``p``/``li`` element in document order."""
        candidates = [
            (parent, child)
            for parent in root.iter()
            for child in parent
            if child.tag in BLOCK_TAGS
        ]
        for parent, element in candidates:
            segments = _split_element(element)
            if segments is None:
                continue
            original, translation, blocks = segments
            container = self._container(original, translation)
            if element.tag == "li":
                element.text = None
                for child in list(element):
                    element.remove(child)
                element.append(container)
                element.extend(blocks)
            else:
                container.tail = element.tail
                index = list(parent).index(element)
                parent.remove(element)
                parent.insert(index, container)
        return root

    def _container(self, original: Element, translation: Element) -> Element:
        """Assemble the item wrapper around both segments."""
        toggle = SubElement(
            translation, "span", {"class": "check-ori", "role": ROLE_TOGGLE}
        )
        toggle.text = self.toggle_label
        original.set("role", ROLE_ORIGINAL)
        original.set("class", "ori")
        original.set("hidden", "hidden")
        container = Element("div", {"role": ROLE_ITEM, "class": "bilingual"})
        container.append(translation)
        container.append(original)
        return container


def _split_element(
    element: Element,
) -> tuple[Element, Element, list[Element]] | None:
    """Split ``element`` into original and translation paragraphs.

    Nested block children (a sub-list in a tight list item) are returned
    separately so they never end up inside the translation paragraph.
    """
    text = element.text or ""
    if not text.startswith(SENTINEL):
        return None

    original = Element("p")
    translation = Element("p")
    blocks = [child for child in element if child.tag in NESTED_BLOCK_TAGS]
    children = [child for child in element if child.tag not in NESTED_BLOCK_TAGS]
    leading = split_bilingual(text)
    if leading is not None:
        original.text = leading.original
        translation.text = leading.translation
        translation.extend(children)
        return original, translation, blocks

    for position, child in enumerate(children):
        tail = child.tail or ""
        index = tail.find(MARKER)
        if index < 0:
            continue
        original.text = text[len(SENTINEL) :]
        translation.text = tail[index + len(MARKER) :]
        child.tail = tail[:index] or None
        original.extend(children[: position + 1])
        translation.extend(children[position + 1 :])
        return original, translation, blocks
    return None


class AnchoredHeadingTreeprocessor(Treeprocessor):
    """Prefix every heading with a self-link named after its exact text."""

    def run(self, root: Element) -> Element:
        """Tag headings as section titles and insert their anchors."""
        headings = [element for element in root.iter() if element.tag in HEADING_TAGS]
        for heading in headings:
            title = "".join(heading.itertext())
            classes = heading.get("class", "").split()
            if SECTION_TITLE_CLASS not in classes:
                classes.append(SECTION_TITLE_CLASS)
            heading.set("class", " ".join(classes))
            anchor = Element(
                "a", {"name": title, "class": "anchor", "href": f"#{title}"}
            )
            SubElement(anchor, "span", {"class": "header-link"})
            anchor.tail = heading.text
            heading.text = None
            heading.insert(0, anchor)
        return root


__all__ = [
    "AnchoredHeadingTreeprocessor",
    "BilingualExtension",
    "BilingualTreeprocessor",
    "split_bilingual",
]
