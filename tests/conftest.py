"""Shared fixtures for the handbook build and page assembly tests."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest

CHAPTERS: dict[str, str] = {
    "basic_types": (
        "# Basic Types\n\n"
        "$For programs to be useful, we need to be able to work with data."
        "$$为了让程序有价值，我们需要能够处理数据。\n\n"
        "## Boolean\n\n"
        "```typescript\n"
        "var isDone: boolean = false;\n"
        "```\n\n"
        "## Number\n\n"
        "Plain paragraph without a translation.\n"
    ),
    "interfaces": (
        "# Interfaces\n\n"
        "## Our First Interface\n\n"
        "- $Optional properties$$可选属性\n"
        "- function types\n"
    ),
}


def write_site(
    root: Path,
    *,
    chapters: typ.Mapping[str, str] | None = None,
    documents: list[str] | None = None,
) -> Path:
    """Write chapters plus a ``pages.yaml`` under ``root`` and return its path."""
    chapters = CHAPTERS if chapters is None else chapters
    source_dir = root / "interpretation"
    source_dir.mkdir(parents=True, exist_ok=True)
    for name, text in chapters.items():
        (source_dir / f"{name}.md").write_text(text, encoding="utf-8")
    names = list(chapters) if documents is None else documents
    listing = "\n".join(f"    - {name}" for name in names)
    config_path = root / "pages.yaml"
    config_path.write_text(
        f"""
build:
  source_dir: {source_dir}
  content_root: {root}
  output: {source_dir / "dest" / "content.html"}
  cache_token: "7"
  documents:
{listing}
client:
  base_url: http://handbook.invalid
  page_output: {source_dir / "index.html"}
  title: Fixture Handbook
  scroll_threshold: 50
        """.strip()
        + "\n",
        encoding="utf-8",
    )
    return config_path


@pytest.fixture
def site_config_path(tmp_path: Path) -> Path:
    """Return a config describing the two fixture chapters."""
    return write_site(tmp_path)


@pytest.fixture
def site_writer() -> typ.Callable[..., Path]:
    """Return the helper that writes custom chapters and a config."""
    return write_site
