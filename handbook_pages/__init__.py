"""Utilities for building the bilingual TypeScript handbook pages.

This package exposes the CLI entry points used by ``uv run pages`` to
concatenate the translated chapters into one HTML artifact and to assemble
the browsable page around it.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from handbook_pages import main
>>> main()  # doctest: +SKIP
>>> from handbook_pages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
