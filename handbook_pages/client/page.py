"""Handbook page assembly pipeline.

This module turns the ``client`` block of ``config/pages.yaml`` into the
browsable ``index.html``. :class:`PageShellBuilder` renders the empty page
shell (navigation bar, navigation list, content container, Pygments CSS) from
``page.jinja``; :class:`PageAssembler` wires the shell to a
:class:`~handbook_pages.client.loader.PageLoader`, fetches the built artifact,
and writes the finished document.

>>> from pathlib import Path
>>> from handbook_pages.config import load_site_config
>>> site = load_site_config(Path("config/pages.yaml"))  # doctest: +SKIP
>>> PageAssembler(site).run()  # doctest: +SKIP
PosixPath('interpretation/index.html')

Side effects are one HTTP request for the artifact and one UTF-8 file write.
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import typing as typ
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader

from .highlighter import CodeHighlighter
from .loader import PageLoader, build_artifact_url
from .navigator import Navigator

if typ.TYPE_CHECKING:
    import requests
    from bs4 import Tag

    from handbook_pages.config import ClientConfig, SiteConfig


class PageShellBuilder:
    """Render the empty page shell the loader attaches content to."""

    def __init__(
        self, client: ClientConfig, *, templates_dir: Path | None = None
    ) -> None:
        self.client = client
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    def render(self, stylesheet: str) -> BeautifulSoup:
        """Return the parsed shell with ``stylesheet`` inlined."""
        context = {
            "title": self.client.title,
            "pygments_css": stylesheet,
            "generated_at": dt.datetime.now(dt.UTC),
        }
        return BeautifulSoup(self.template.render(**context), "html.parser")


@dc.dataclass(slots=True)
class AssembledPage:
    """Result of one assembly run.

    Attributes
    ----------
    path : Path
        Where the page was written.
    page : BeautifulSoup
        The assembled document, still live for click and scroll handling.
    loader : PageLoader
        Loader bound to ``page``; dispatches clicks.
    content : Tag | None
        Attached content wrapper, or ``None`` when the fetch failed.
    """

    path: Path
    page: BeautifulSoup
    loader: PageLoader
    content: Tag | None


class PageAssembler:
    """Fetch the artifact into the page shell and write the result."""

    def __init__(
        self,
        site: SiteConfig,
        *,
        base_url: str | None = None,
        output: Path | None = None,
        session: requests.Session | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the assembler.

        Parameters
        ----------
        site : SiteConfig
            Loaded configuration; the build block supplies the artifact path
            and cache token, the client block the page settings.
        base_url : str, optional
            Override for the URL the artifact is served from.
        output : Path, optional
            Override for the assembled page path.
        session : requests.Session, optional
            Session used for the artifact request; a short-lived one is
            created when omitted.
        templates_dir : Path, optional
            Directory containing ``page.jinja`` and ``nav.jinja``.
        """
        self.site = site
        self.output = output or site.client.page_output
        self.artifact_url = build_artifact_url(
            base_url or site.client.base_url,
            site.build.artifact_path,
            site.build.cache_token,
        )
        self.session = session
        self.templates_dir = templates_dir
        self.highlighter = CodeHighlighter(site.client.pygments_style)
        self.shell = PageShellBuilder(site.client, templates_dir=templates_dir)

    def assemble(self) -> AssembledPage:
        """Build the page in memory without writing it."""
        page = self.shell.render(self.highlighter.stylesheet)
        navigator = Navigator(
            page,
            scroll_threshold=self.site.client.scroll_threshold,
            templates_dir=self.templates_dir,
        )
        loader = PageLoader(
            page,
            artifact_url=self.artifact_url,
            highlighter=self.highlighter,
            navigator=navigator,
            session=self.session,
        )
        content = loader.load()
        return AssembledPage(path=self.output, page=page, loader=loader, content=content)

    def run(self) -> AssembledPage:
        """Assemble the page and write it as UTF-8, creating parent folders."""
        result = self.assemble()
        html = str(result.page)
        if not html.endswith("\n"):
            html += "\n"
        result.path.parent.mkdir(parents=True, exist_ok=True)
        result.path.write_text(html, encoding="utf-8")
        return result


__all__ = ["AssembledPage", "PageAssembler", "PageShellBuilder"]
