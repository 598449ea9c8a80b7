"""Utilities for rendering the combined handbook markdown into HTML."""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

BASE_EXTENSIONS: tuple[str, ...] = ("fenced_code", "tables", "sane_lists")
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)


class HtmlContentRenderer:
    """Render markdown with the handbook's block rules plugged in."""

    def __init__(self, extension: Extension | None = None) -> None:
        """Initialize a renderer with an optional rendering extension.

        Parameters
        ----------
        extension : Extension, optional
            Markdown extension layered over the default rendering (normally
            :class:`~handbook_pages.generator.bilingual.BilingualExtension`);
            pass ``None`` for plain Python-Markdown output.
        """
        self._extension = extension

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions.

        Code blocks are emitted as plain ``<pre><code>`` so the page assembler
        can highlight each block exactly once.
        """
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = list(BASE_EXTENSIONS)
        if self._extension is not None:
            extensions.append(self._extension)
        md = Markdown(extensions=extensions)
        return md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["BASE_EXTENSIONS", "HtmlContentRenderer"]
