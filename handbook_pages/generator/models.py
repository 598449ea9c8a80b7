"""Shared dataclasses and errors used by the build pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from handbook_pages._constants import MARKER, SENTINEL


class BuildError(RuntimeError):
    """Raised when the handbook artifact cannot be built."""


class DocumentNotFoundError(BuildError):
    """Raised when a configured source document is missing or unreadable."""

    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Source document '{name}' could not be read from '{path}'.")


@dc.dataclass(frozen=True, slots=True)
class Document:
    """One source markdown file, read once per build.

    Attributes
    ----------
    name : str
        Identifier from the configured document list.
    markdown : str
        Full UTF-8 text of the file.
    """

    name: str
    markdown: str


@dc.dataclass(frozen=True, slots=True)
class BilingualText:
    """Original and translated segments of a ``$original$$translation`` line.

    Attributes
    ----------
    original : str
        Text between the leading sentinel and the first marker.
    translation : str
        Everything after the first marker, including any later markers.
    """

    original: str
    translation: str

    @property
    def source(self) -> str:
        """Return the marked-up line these segments were split from."""
        return f"{SENTINEL}{self.original}{MARKER}{self.translation}"


__all__ = ["BilingualText", "BuildError", "Document", "DocumentNotFoundError"]
