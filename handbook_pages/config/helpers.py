"""Utility helpers shared by the handbook configuration loader."""

from __future__ import annotations

import posixpath
import typing as typ

from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .models import SiteConfigError

if typ.TYPE_CHECKING:
    from pathlib import Path

DEFAULT_SOURCE_DIR = "interpretation"
DEFAULT_OUTPUT = "interpretation/dest/content.html"
DEFAULT_CONTENT_ROOT = "."
DEFAULT_DOCUMENTS: tuple[str, ...] = (
    "basic_types",
    "interfaces",
    "classes",
    "modules",
    "functions",
    "generics",
    "common_errors",
    "mixins",
    "declaration_merging",
    "type_inference",
    "type_compatibility",
    "writing_.d.ts_files",
    "typescript_1.5",
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _build_documents(value: object | None) -> list[str]:
    """Validate the ordered document list, keeping its order untouched."""
    if value is None:
        return list(DEFAULT_DOCUMENTS)
    if not isinstance(value, list):
        msg = "'documents' must be a list of document names."
        raise SiteConfigError(msg)
    documents: list[str] = []
    for index, entry in enumerate(value):
        name = _optional_str(entry)
        if name is None:
            msg = f"Document entry {index} is empty."
            raise SiteConfigError(msg)
        documents.append(name)
    if not documents:
        msg = "No documents defined in site configuration."
        raise SiteConfigError(msg)
    return documents


def _derive_artifact_path(output: Path, content_root: Path) -> str:
    """Return the URL path of ``output`` relative to the served content root."""
    try:
        relative = output.resolve().relative_to(content_root.resolve())
    except ValueError as exc:
        msg = f"Output '{output}' is not under content root '{content_root}'."
        raise SiteConfigError(msg) from exc
    return "/" + posixpath.normpath(relative.as_posix()).lstrip("/")


def _coerce_threshold(value: object | None, default: int) -> int:
    """Return a non-negative integer scroll threshold."""
    if value is None:
        return default
    match value:
        case bool():
            threshold = None
        case int() | str():
            try:
                threshold = int(value)
            except ValueError:
                threshold = None
        case _:
            threshold = None
    if threshold is None or threshold < 0:
        msg = f"'scroll_threshold' must be a non-negative integer, got {value!r}."
        raise SiteConfigError(msg)
    return threshold


def _coerce_style(value: object | None, default: str) -> str:
    """Return a Pygments style name, rejecting names Pygments does not know."""
    name = _optional_str(value) or default
    try:
        get_style_by_name(name)
    except ClassNotFound as exc:
        msg = f"'pygments_style' names an unknown Pygments style: {name!r}."
        raise SiteConfigError(msg) from exc
    return name


def _mapping(payload: typ.Mapping[str, typ.Any], key: str) -> dict[str, typ.Any]:
    """Return the nested mapping stored at ``key`` or an empty dict."""
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        msg = f"'{key}' configuration must be a mapping."
        raise SiteConfigError(msg)
    return dict(value)


__all__ = [
    "DEFAULT_CONTENT_ROOT",
    "DEFAULT_DOCUMENTS",
    "DEFAULT_OUTPUT",
    "DEFAULT_SOURCE_DIR",
    "_build_documents",
    "_coerce_style",
    "_coerce_threshold",
    "_derive_artifact_path",
    "_mapping",
    "_optional_str",
]
