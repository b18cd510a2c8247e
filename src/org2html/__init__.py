#  Copyright (c) 2025 Tom Villani, Ph.D.
"""org2html - Export Org-Mode documents to HTML.

The package parses Org text into a document tree (:mod:`org2html.ast`)
and renders that tree to HTML, optionally keeping only the headline
subtrees that carry, or do not carry, given tags.

Examples
--------
One call from Org text to HTML:

    >>> from org2html import export_org_to_html
    >>> html = export_org_to_html(source_str="* Hello\\nWorld\\n", naked=True)

Working with the tree directly:

    >>> from org2html import HtmlExportOptions, HtmlRenderer, OrgParser
    >>> doc = OrgParser().parse("* Plan :work:\\n- [X] draft\\n")
    >>> html = HtmlRenderer(HtmlExportOptions(include_tags={"work"})).render_to_string(doc)

"""

from org2html._version import __version__
from org2html.api import export_org_to_html
from org2html.ast import Document, Headline, Node, normalize_include_tags
from org2html.exceptions import (
    DependencyError,
    FileError,
    Org2HtmlError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from org2html.options import HtmlExportOptions, OrgParserOptions
from org2html.parsers import OrgParser
from org2html.renderers import HtmlRenderer, RenderResult

__all__ = [
    "__version__",
    "DependencyError",
    "Document",
    "FileError",
    "Headline",
    "HtmlExportOptions",
    "HtmlRenderer",
    "Node",
    "Org2HtmlError",
    "OrgParser",
    "OrgParserOptions",
    "ParsingError",
    "RenderResult",
    "RenderingError",
    "ValidationError",
    "export_org_to_html",
    "normalize_include_tags",
]
