"""Syntax highlighting for code blocks attached to the assembled page."""

from __future__ import annotations

import re
import typing as typ
from html import escape

from bs4 import BeautifulSoup
from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

if typ.TYPE_CHECKING:
    from bs4 import Tag
    from pygments.lexer import Lexer

LANGUAGE_CLASS_PREFIX = "language-"
CODEHILITE_OPEN_TAG = re.compile(r'<div class="codehilite">')


class CodeHighlighter:
    """Replace ``<pre><code>`` blocks with Pygments-highlighted markup."""

    def __init__(self, pygments_style: str = "monokai") -> None:
        self.pygments_style = pygments_style
        self._formatter = HtmlFormatter(style=pygments_style, cssclass="codehilite")

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self._formatter.get_style_defs(".codehilite")

    def highlight_all(self, root: Tag) -> int:
        """Highlight every code block under ``root`` once, returning the count."""
        blocks = [
            code for code in root.select("pre > code") if code.parent is not None
        ]
        for code in blocks:
            pre = code.parent
            html = self.code_block(code.get_text(), _declared_language(code))
            block = BeautifulSoup(html, "html.parser").find("div", class_="codehilite")
            pre.replace_with(block)
        return len(blocks)

    def code_block(self, code: str, language: str | None = None) -> str:
        """Render ``code`` into highlighted HTML tagged with its language.

        Parameters
        ----------
        code : str
            Source snippet to highlight.
        language : str, optional
            Declared Pygments lexer name. When missing or unknown the language
            is guessed from the snippet, falling back to ``"text"``.

        Returns
        -------
        str
            HTML containing the highlighted block with ``data-language``
            metadata applied.
        """
        lexer = _resolve_lexer(code, language)
        html = highlight(code, lexer, self._formatter)
        alias = lexer.aliases[0] if lexer.aliases else "text"
        return self._attach_language_attribute(html, alias)

    @staticmethod
    def _attach_language_attribute(html: str, language: str) -> str:
        """Add a single language attribute to an already highlighted block."""
        safe_lang = escape(language or "text", quote=True)

        def _repl(match: re.Match[str]) -> str:
            return f'<div class="codehilite" data-language="{safe_lang}">'

        return CODEHILITE_OPEN_TAG.sub(_repl, html, 1)


def _declared_language(code: Tag) -> str | None:
    """Return the language named by a ``language-*`` class, if any."""
    for css_class in code.get("class") or []:
        if css_class.startswith(LANGUAGE_CLASS_PREFIX):
            return css_class[len(LANGUAGE_CLASS_PREFIX) :] or None
    return None


def _resolve_lexer(code: str, language: str | None) -> Lexer:
    if language:
        try:
            return get_lexer_by_name(language)
        except ClassNotFound:
            pass
    try:
        return guess_lexer(code)
    except ClassNotFound:
        return get_lexer_by_name("text")


__all__ = ["CodeHighlighter"]
