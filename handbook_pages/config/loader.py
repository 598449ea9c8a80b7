"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from handbook_pages._constants import DEFAULT_TOGGLE_LABEL

from .helpers import (
    DEFAULT_CONTENT_ROOT,
    DEFAULT_OUTPUT,
    DEFAULT_SOURCE_DIR,
    _build_documents,
    _coerce_style,
    _coerce_threshold,
    _derive_artifact_path,
    _mapping,
    _optional_str,
)
from .models import BuildConfig, ClientConfig, SiteConfig


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the handbook build and page.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/pages.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration with the ordered document list, artifact
        location, and page assembly settings.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section or field is present but invalid (for example, an empty
        document list).
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from handbook_pages.config import load_site_config
    >>> config = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
    >>> config.build.documents[0]  # doctest: +SKIP
    'basic_types'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):  # pragma: no cover - config error guard
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    build = _build_build_config(_mapping(raw, "build"))
    client = _build_client_config(_mapping(raw, "client"), build)
    return SiteConfig(build=build, client=client)


def _build_build_config(payload: typ.Mapping[str, typ.Any]) -> BuildConfig:
    """Build the aggregation settings, applying the handbook defaults."""
    source_dir = Path(payload.get("source_dir", DEFAULT_SOURCE_DIR))
    output = Path(payload.get("output", DEFAULT_OUTPUT))
    content_root = Path(payload.get("content_root", DEFAULT_CONTENT_ROOT))
    artifact_path = _optional_str(payload.get("artifact_path"))
    if artifact_path is None:
        artifact_path = _derive_artifact_path(output, content_root)
    toggle_label = _optional_str(payload.get("toggle_label")) or DEFAULT_TOGGLE_LABEL

    return BuildConfig(
        source_dir=source_dir,
        documents=_build_documents(payload.get("documents")),
        output=output,
        artifact_path=artifact_path,
        cache_token=_optional_str(payload.get("cache_token")),
        toggle_label=toggle_label,
    )


def _build_client_config(
    payload: typ.Mapping[str, typ.Any], build: BuildConfig
) -> ClientConfig:
    """Build the page assembly settings; the page lands beside the artifact."""
    base = ClientConfig(base_url="", page_output=build.source_dir / "index.html")
    return ClientConfig(
        base_url=_optional_str(payload.get("base_url")) or "http://localhost:8000",
        page_output=Path(payload.get("page_output", base.page_output)),
        title=_optional_str(payload.get("title")) or base.title,
        pygments_style=_coerce_style(
            payload.get("pygments_style"), base.pygments_style
        ),
        scroll_threshold=_coerce_threshold(
            payload.get("scroll_threshold"), base.scroll_threshold
        ),
    )


__all__ = ["load_site_config"]
