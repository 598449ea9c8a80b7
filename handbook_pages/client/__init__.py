"""Page assembly: fetch the artifact, highlight code, and build navigation."""

from .dom import PageStructureError
from .highlighter import CodeHighlighter
from .loader import PageLoader, build_artifact_url
from .navigator import NavSection, Navigator
from .page import AssembledPage, PageAssembler, PageShellBuilder

__all__ = [
    "AssembledPage",
    "CodeHighlighter",
    "NavSection",
    "Navigator",
    "PageAssembler",
    "PageLoader",
    "PageShellBuilder",
    "PageStructureError",
    "build_artifact_url",
]
