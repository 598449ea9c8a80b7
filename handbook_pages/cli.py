"""Cyclopts CLI entrypoint for building and assembling the handbook pages.

The ``pages`` console script concatenates the configured chapters into the
single HTML artifact (``pages build``) and assembles the browsable page around
that artifact (``pages assemble``). Both commands read ``config/pages.yaml``
unless another path is given, directly or through ``INPUT_CONFIG``.

Examples
--------
Build the artifact for the default configuration:

>>> from handbook_pages.cli import app
>>> app.run(["build"])  # doctest: +SKIP

Assemble the page against a locally served checkout:

>>> app.run(
...     ["assemble", "--base-url", "http://localhost:8000"]
... )  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .client import PageAssembler
from .config import load_site_config
from .generator import MarkdownAggregator

DEFAULT_CONFIG = Path("config/pages.yaml")

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Concatenate the handbook chapters into one HTML artifact.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Render every configured chapter, in order, into the artifact.

    Parameters
    ----------
    config : Path, optional
        Path to the ``pages.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).

    Raises
    ------
    DocumentNotFoundError
        If a configured chapter is missing; the previous artifact is kept.
    """
    site_config = load_site_config(config)
    path = MarkdownAggregator(site_config.build).run()
    print(f"wrote {_format_path(path)}")


@app.command(help="Fetch the built artifact into the page shell and write it.")
def assemble(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    base_url: typ.Annotated[
        str | None,
        Parameter(help="Override the artifact base URL", env_var="INPUT_BASE_URL"),
    ] = None,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the page output path", env_var="INPUT_OUTPUT"),
    ] = None,
) -> None:
    """Assemble the handbook page around the served artifact.

    Parameters
    ----------
    config : Path, optional
        Path to the ``pages.yaml`` configuration file.
    base_url : str or None, optional
        URL the artifact is served from; defaults to ``client.base_url``.
    output : Path or None, optional
        Where to write the page; defaults to ``client.page_output``.

    Notes
    -----
    A failed fetch is logged and the empty shell is still written, matching
    what a browser shows when the artifact cannot be loaded.
    """
    site_config = load_site_config(config)
    result = PageAssembler(site_config, base_url=base_url, output=output).run()
    if result.content is None:
        print(f"wrote {_format_path(result.path)} (no content)")
    else:
        print(f"wrote {_format_path(result.path)}")


def main() -> None:
    """Configure logging and invoke the Cyclopts application.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
