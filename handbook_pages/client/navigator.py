"""Derive and drive the two-level side navigation of the handbook page.

The navigator scans the anchored ``.section-title`` headings of the attached
content: each ``h1`` opens a section and each following ``h2`` becomes one of
its sub-titles. The outline is rendered with ``nav.jinja`` into the page's
``[role="nav-list"]`` region. The navigator then owns the page's navigation
state: the single active section (set by clicks) and the ``scrolled`` class on
the navigation bar (synced from the vertical scroll offset).
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

from handbook_pages._constants import ROLE_NAV_LIST, ROLE_NAVBAR, SECTION_TITLE_CLASS

from .dom import add_class, remove_class, require_role

if typ.TYPE_CHECKING:
    from bs4 import Tag

logger = logging.getLogger(__name__)

NAV_BLOCK_CLASS = "nav-block"
ACTIVE_CLASS = "active"
SCROLLED_CLASS = "scrolled"


@dc.dataclass(slots=True)
class NavSection:
    """Top-level heading and the second-level headings that follow it.

    Attributes
    ----------
    title : str
        Exact ``h1`` text, also used as its fragment anchor.
    subtitles : list[str]
        ``h2`` texts in document order up to the next ``h1``.
    """

    title: str
    subtitles: list[str] = dc.field(default_factory=list)


class Navigator:
    """Build the side index and track the active entry and scroll state."""

    def __init__(
        self,
        page: BeautifulSoup,
        *,
        scroll_threshold: int = 50,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the navigator for a parsed page shell.

        Parameters
        ----------
        page : BeautifulSoup
            Page shell containing ``[role="navbar"]`` and
            ``[role="nav-list"]`` regions.
        scroll_threshold : int, optional
            Vertical offset in pixels above which the navigation bar is
            marked ``scrolled``.
        templates_dir : Path, optional
            Directory containing ``nav.jinja``; defaults to the package
            templates.
        """
        self.page = page
        self.scroll_threshold = scroll_threshold
        self.sections: list[NavSection] = []
        self.active: str | None = None
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(templates_dir or default_templates)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("nav.jinja")

    def collect(self, root: Tag) -> list[NavSection]:
        """Return the section outline of the headings under ``root``."""
        sections: list[NavSection] = []
        for heading in root.select(f".{SECTION_TITLE_CLASS}"):
            title = _heading_title(heading)
            if heading.name == "h1":
                sections.append(NavSection(title=title))
            elif heading.name == "h2":
                if not sections:
                    logger.warning("dropping sub-heading %r before any section", title)
                    continue
                sections[-1].subtitles.append(title)
        return sections

    def build(self, root: Tag) -> list[NavSection]:
        """Render the outline of ``root`` into the page navigation list."""
        sections = self.collect(root)
        nav_list = require_role(self.page, ROLE_NAV_LIST)
        fragment = BeautifulSoup(self.template.render(sections=sections), "html.parser")
        nav_list.clear()
        for child in list(fragment.contents):
            nav_list.append(child)
        self.sections = sections
        self.active = None
        return sections

    def activate(self, title: str) -> bool:
        """Mark the block for ``title`` active and clear it from every sibling.

        Returns
        -------
        bool
            ``False`` when no navigation block carries ``title``; the current
            selection is kept in that case.
        """
        blocks = require_role(self.page, ROLE_NAV_LIST).select(f".{NAV_BLOCK_CLASS}")
        if not any(block.get("data-title") == title for block in blocks):
            logger.debug("no navigation block titled %r", title)
            return False
        for block in blocks:
            if block.get("data-title") == title:
                add_class(block, ACTIVE_CLASS)
            else:
                remove_class(block, ACTIVE_CLASS)
        self.active = title
        return True

    def sync_scroll(self, offset: float) -> bool:
        """Set the navigation bar's ``scrolled`` class from ``offset``.

        Safe to call on every scroll tick; returns whether the bar is now
        marked as scrolled.
        """
        navbar = require_role(self.page, ROLE_NAVBAR)
        scrolled = offset > self.scroll_threshold
        if scrolled:
            add_class(navbar, SCROLLED_CLASS)
        else:
            remove_class(navbar, SCROLLED_CLASS)
        return scrolled


def _heading_title(heading: Tag) -> str:
    """Return the anchor name of a heading, falling back to its text."""
    anchor = heading.find("a", class_="anchor")
    if anchor is not None and anchor.get("name"):
        return str(anchor["name"])
    return heading.get_text(strip=True)


__all__ = ["NavSection", "Navigator"]
