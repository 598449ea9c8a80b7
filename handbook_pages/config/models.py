"""Typed dataclasses describing handbook site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from handbook_pages._constants import DEFAULT_TOGGLE_LABEL


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class BuildConfig:
    """Inputs and output of the markdown aggregation step."""

    source_dir: Path
    documents: list[str]
    output: Path
    artifact_path: str
    cache_token: str | None = None
    toggle_label: str = DEFAULT_TOGGLE_LABEL

    def document_path(self, name: str) -> Path:
        """Return the markdown file backing the document called ``name``."""
        return self.source_dir / f"{name}.md"


@dc.dataclass(slots=True)
class ClientConfig:
    """Settings for assembling the browsable page around the artifact."""

    base_url: str
    page_output: Path
    title: str = "TypeScript Handbook"
    pygments_style: str = "monokai"
    scroll_threshold: int = 50


@dc.dataclass(slots=True)
class SiteConfig:
    """Build and client settings loaded from ``pages.yaml``."""

    build: BuildConfig
    client: ClientConfig


__all__ = ["BuildConfig", "ClientConfig", "SiteConfig", "SiteConfigError"]
