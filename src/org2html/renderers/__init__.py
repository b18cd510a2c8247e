#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning document trees into output formats."""

from org2html.renderers.base import BaseRenderer
from org2html.renderers.html import HtmlExportVisitor, HtmlRenderer, RenderResult

__all__ = ["BaseRenderer", "HtmlExportVisitor", "HtmlRenderer", "RenderResult"]
