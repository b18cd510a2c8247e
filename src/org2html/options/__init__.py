#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for org2html parsers and renderers."""

from org2html.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from org2html.options.html import HtmlExportOptions
from org2html.options.org import OrgParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "HtmlExportOptions",
    "OrgParserOptions",
]
