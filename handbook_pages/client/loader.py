"""Fetch the built artifact and attach it to the page shell.

:class:`PageLoader` issues one ``GET`` for ``dest/content.html`` (with the
cache-busting token the build config records), wraps the HTML in the content
region, highlights its code blocks, and builds the navigation. A failed fetch
is logged and leaves the page empty. The loader also dispatches clicks: the
"view original" toggle of a bilingual block and navigation block selection.
"""

from __future__ import annotations

import logging
import typing as typ
from urllib.parse import urlencode, urljoin

import requests
from bs4 import BeautifulSoup

from handbook_pages._constants import (
    ROLE_CONTAINER,
    ROLE_CONTENT,
    ROLE_ITEM,
    ROLE_ORIGINAL,
    ROLE_TOGGLE,
)

from .dom import closest, require_role, toggle_hidden
from .navigator import NAV_BLOCK_CLASS

if typ.TYPE_CHECKING:
    from bs4 import Tag

    from .highlighter import CodeHighlighter
    from .navigator import Navigator

logger = logging.getLogger(__name__)


def build_artifact_url(
    base_url: str, artifact_path: str, cache_token: str | None = None
) -> str:
    """Return the artifact URL, appending ``?v=<token>`` when configured.

    Examples
    --------
    >>> build_artifact_url("http://localhost:8000", "/interpretation/dest/content.html", "3")
    'http://localhost:8000/interpretation/dest/content.html?v=3'
    >>> build_artifact_url("https://example.org/docs/", "dest/content.html")
    'https://example.org/docs/dest/content.html'
    """
    url = urljoin(base_url.rstrip("/") + "/", artifact_path.lstrip("/"))
    if cache_token:
        url = f"{url}?{urlencode({'v': cache_token})}"
    return url


class PageLoader:
    """Attach the artifact to ``[role="container"]`` and handle page clicks."""

    def __init__(
        self,
        page: BeautifulSoup,
        *,
        artifact_url: str,
        highlighter: CodeHighlighter,
        navigator: Navigator,
        session: requests.Session | None = None,
    ) -> None:
        self.page = page
        self.artifact_url = artifact_url
        self.highlighter = highlighter
        self.navigator = navigator
        self._session = session

    def load(self) -> Tag | None:
        """Fetch, attach, highlight, and index the artifact.

        Returns
        -------
        Tag | None
            The content wrapper appended to the container, or ``None`` when
            the fetch failed. Failures are logged, never raised, and leave the
            container and navigation untouched.
        """
        html = self._fetch()
        if html is None:
            return None
        container = require_role(self.page, ROLE_CONTAINER)
        wrapper = self.page.new_tag(
            "div", attrs={"class": "content", "role": ROLE_CONTENT}
        )
        fragment = BeautifulSoup(html, "html.parser")
        for child in list(fragment.contents):
            wrapper.append(child)
        container.append(wrapper)
        highlighted = self.highlighter.highlight_all(wrapper)
        sections = self.navigator.build(wrapper)
        logger.info(
            "attached %s: %d code blocks, %d sections",
            self.artifact_url,
            highlighted,
            len(sections),
        )
        return wrapper

    def handle_click(self, target: Tag) -> bool:
        """Dispatch a click on ``target``, returning whether it was handled."""
        toggle = closest(target, role=ROLE_TOGGLE)
        if toggle is not None:
            item = closest(toggle, role=ROLE_ITEM)
            original = (
                item.find(attrs={"role": ROLE_ORIGINAL}, recursive=False)
                if item is not None
                else None
            )
            if original is None:
                return False
            toggle_hidden(original)
            return True
        block = closest(target, css_class=NAV_BLOCK_CLASS)
        if block is not None and block.get("data-title") is not None:
            return self.navigator.activate(str(block["data-title"]))
        return False

    def _fetch(self) -> str | None:
        """Return the artifact body, or ``None`` after logging a failure."""
        session = self._session or requests.Session()
        try:
            response = session.get(self.artifact_url)
            response.raise_for_status()
            # The build writes UTF-8 and the fragment carries no meta charset.
            response.encoding = "utf-8"
            return response.text
        except requests.RequestException:
            logger.exception("failed to load %s", self.artifact_url)
            return None
        finally:
            if self._session is None:
                session.close()


__all__ = ["PageLoader", "build_artifact_url"]
