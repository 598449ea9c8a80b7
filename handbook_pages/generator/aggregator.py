"""Concatenate the handbook chapters into the single HTML artifact.

:class:`MarkdownAggregator` consumes a :class:`~handbook_pages.config.BuildConfig`,
reads every configured chapter in order, joins them with horizontal rules,
renders the result once through :class:`HtmlContentRenderer` with the
bilingual extension, and writes ``dest/content.html``. That file is the only
thing the page assembler fetches.

Example
-------
>>> from pathlib import Path
>>> from handbook_pages.config import load_site_config
>>> from handbook_pages.generator import MarkdownAggregator
>>> config = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> MarkdownAggregator(config.build).run()  # doctest: +SKIP
PosixPath('interpretation/dest/content.html')
"""

from __future__ import annotations

import logging
import os
import tempfile
import typing as typ
from pathlib import Path

from handbook_pages._constants import DOCUMENT_SEPARATOR
from handbook_pages.generator.bilingual import BilingualExtension
from handbook_pages.generator.models import Document, DocumentNotFoundError
from handbook_pages.generator.renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from handbook_pages.config import BuildConfig

logger = logging.getLogger(__name__)


class MarkdownAggregator:
    """Read the ordered chapter list and emit one rendered artifact."""

    def __init__(
        self, build_config: BuildConfig, *, renderer: HtmlContentRenderer | None = None
    ) -> None:
        """Initialize the aggregator with build settings.

        Parameters
        ----------
        build_config : BuildConfig
            Source directory, ordered document names, and output path.
        renderer : HtmlContentRenderer, optional
            Renderer used for the single conversion pass; defaults to one
            configured with :class:`BilingualExtension` and the configured
            toggle label.
        """
        self.build = build_config
        self.renderer = renderer or HtmlContentRenderer(
            BilingualExtension(toggle_label=build_config.toggle_label)
        )

    def run(self) -> Path:
        """Build the artifact and return its path.

        Returns
        -------
        Path
            Location of the written HTML artifact.

        Raises
        ------
        DocumentNotFoundError
            Raised when any configured document is missing or unreadable; no
            artifact is written in that case.

        Notes
        -----
        The HTML is written to a temporary sibling and moved over the
        destination, so an interrupted build leaves the previous artifact in
        place.
        """
        documents = self.read_documents()
        html = self.render(self.combine(documents))
        output_path = self.build.output
        _write_atomic(output_path, html)
        logger.info(
            "rendered %d documents into %s", len(documents), output_path
        )
        return output_path

    def read_documents(self) -> list[Document]:
        """Read every configured document as UTF-8, preserving list order."""
        documents: list[Document] = []
        for name in self.build.documents:
            path = self.build.document_path(name)
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as exc:
                raise DocumentNotFoundError(name, path) from exc
            documents.append(Document(name=name, markdown=text))
        return documents

    @staticmethod
    def combine(documents: typ.Iterable[Document]) -> str:
        """Join documents, following each one with a horizontal-rule line."""
        return "".join(
            f"{document.markdown}{DOCUMENT_SEPARATOR}" for document in documents
        )

    def render(self, combined: str) -> str:
        """Convert the combined markdown in a single pass."""
        return self.renderer.markdown(combined)


def _write_atomic(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` without exposing a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


__all__ = ["MarkdownAggregator"]
