"""Load and validate the handbook site configuration.

This subpackage parses ``pages.yaml``, applies the handbook defaults (the
ordered chapter list, the ``interpretation/`` source tree, and the
``dest/content.html`` artifact), and produces slotted dataclasses that the
aggregator and page assembler consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from handbook_pages.config import load_site_config
>>> site = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> site.build.output  # doctest: +SKIP
PosixPath('interpretation/dest/content.html')
"""

from .loader import load_site_config
from .models import BuildConfig, ClientConfig, SiteConfig, SiteConfigError

__all__ = [
    "BuildConfig",
    "ClientConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
