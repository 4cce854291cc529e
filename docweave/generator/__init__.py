"""Utilities for rendering and writing docweave pages, glossary, and navigation."""

from .dictionary import DictionaryBuilder
from .models import Page
from .navigation import NavigationRenderer
from .output import PublishError
from .page_generator import PageEmitter
from .renderer import HtmlContentRenderer

__all__ = [
    "DictionaryBuilder",
    "HtmlContentRenderer",
    "NavigationRenderer",
    "Page",
    "PageEmitter",
    "PublishError",
]
