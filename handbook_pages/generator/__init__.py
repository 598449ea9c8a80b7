"""Utilities for aggregating and rendering the handbook chapters."""

from .aggregator import MarkdownAggregator
from .bilingual import BilingualExtension, split_bilingual
from .models import BilingualText, BuildError, Document, DocumentNotFoundError
from .renderer import HtmlContentRenderer

__all__ = [
    "BilingualExtension",
    "BilingualText",
    "BuildError",
    "Document",
    "DocumentNotFoundError",
    "HtmlContentRenderer",
    "MarkdownAggregator",
    "split_bilingual",
]
