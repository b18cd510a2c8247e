#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/renderers/html.py
"""HTML rendering from Org document trees.

This module provides the HtmlRenderer class which converts a tree of
:mod:`org2html.ast.nodes` into HTML text. Output is either a complete
document (HTML/HEAD/BODY envelope with a title, an optional stylesheet
link and a generated-by comment) or, in naked mode, just the rendered body.

Headline subtrees are filtered by tag while rendering (see
:mod:`org2html.ast.selection`). Node kinds the renderer does not know are
skipped with a warning and their children are rendered in their place.

Each rendering call uses its own :class:`HtmlExportVisitor`, so one
renderer instance can be shared between threads.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import IO, Iterable, Union

from org2html._version import __version__
from org2html.ast.nodes import (
    Block,
    Comment,
    Document,
    Drawer,
    Footnote,
    Headline,
    Link,
    List,
    ListItem,
    Node,
    RadioTarget,
    Setting,
    ShortExample,
    Table,
    TableCell,
    TableRow,
    TableVLine,
    Target,
    Text,
    TimeRange,
    Timestamp,
)
from org2html.ast.selection import select_headline
from org2html.ast.utils import iter_children
from org2html.ast.visitors import NodeVisitor
from org2html.constants import DEFAULT_HTML_TITLE, LIST_TYPE_TAGS, LOG_PREVIEW_LENGTH, TEXT_STYLE_TAGS
from org2html.options.html import HtmlExportOptions
from org2html.renderers.base import BaseRenderer
from org2html.utils.decorators import debug_timer
from org2html.utils.html_utils import escape_comment, escape_html, escape_target, mark_paragraph_breaks

logger = logging.getLogger(__name__)

_EXTERNAL_TARGET = re.compile(r"^\w+:")
_PREVIEW_ATTRIBUTES = ("text", "raw_content", "example", "content", "target", "name")


def _preview(node: Node) -> str:
    for attribute in _PREVIEW_ATTRIBUTES:
        value = getattr(node, attribute, None)
        if isinstance(value, str):
            break
    else:
        return ""
    snippet = repr(value)[1:-1]
    if len(snippet) > LOG_PREVIEW_LENGTH:
        snippet = snippet[: LOG_PREVIEW_LENGTH - 3] + "..."
    return snippet


@dataclass(frozen=True)
class RenderResult:
    """HTML output of one rendering call plus the warnings it produced.

    Parameters
    ----------
    html : str
        Rendered HTML
    warnings : tuple of str, default = ()
        One message per skipped node of an unknown kind, in document order

    """

    html: str
    warnings: tuple[str, ...] = ()


class HtmlExportVisitor(NodeVisitor):
    """Visitor producing the HTML for a tree, one string per node.

    A visitor carries the state of a single rendering call (options and
    collected warnings) and is not meant to be reused. Override ``visit_*``
    methods in a subclass and set it as ``HtmlRenderer.visitor_class`` to
    customize the output of individual node kinds.

    Parameters
    ----------
    options : HtmlExportOptions
        Export configuration

    """

    def __init__(self, options: HtmlExportOptions):
        """Initialize the visitor for one rendering call."""
        self.options = options
        self.warnings: list[str] = []

    def render(self, node: Node) -> str:
        """Render any node, dispatching on its kind."""
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Exporting %s node '%s'", node.kind, _preview(node))
        return node.accept(self)

    def render_all(self, nodes: Iterable[Node]) -> str:
        """Render nodes in order and concatenate the results."""
        return "".join(self.render(node) for node in nodes)

    def generic_visit(self, node: Node) -> str:
        """Skip a node of unknown kind, rendering its children instead."""
        message = f"Don't know how to export {node.kind} node, skipped"
        logger.warning(message)
        self.warnings.append(message)
        return self.render_all(iter_children(node))

    def visit_document(self, node: Document) -> str:
        """Render a Document, wrapped in the HTML envelope unless naked.

        Parameters
        ----------
        node : Document
            Document to render

        Returns
        -------
        str
            Body, or full HTML document

        """
        body = self.render_all(iter_children(node))
        if self.options.naked:
            return body

        parts = ["<html>\n"]
        if self.options.creator:
            generated_at = self.options.generated_at or datetime.now()
            parts.append(
                f"<!-- Generated by {escape_comment(self.options.creator)} version {__version__} "
                f"on {generated_at.ctime()} -->\n\n"
            )
        title = self.options.title if self.options.title is not None else DEFAULT_HTML_TITLE
        parts.append("<head>\n")
        parts.append(f"<title>{escape_html(title)}</title>\n")
        if self.options.css_url:
            parts.append(f'<link rel="stylesheet" type="text/css" href="{escape_html(self.options.css_url)}" />\n')
        parts.append("</head>\n\n")
        parts.append("<body>\n")
        parts.append(body)
        parts.append("</body>\n\n")
        parts.append("</html>\n")
        return "".join(parts)

    def visit_headline(self, node: Headline) -> str:
        """Render a Headline and whichever of its children the tag filter keeps.

        Parameters
        ----------
        node : Headline
            Headline to render

        Returns
        -------
        str
            Heading element followed by the kept children, or an empty
            string when the headline is filtered out

        """
        selection = select_headline(node, self.options.include_tags, self.options.exclude_tags)
        if selection.is_excluded:
            return ""

        level = min(6, max(1, node.level))
        title = self.render(node.title) if node.title is not None else ""
        return f"<h{level}>{title}</h{level}>\n\n" + self.render_all(selection.children)

    def visit_list(self, node: List) -> str:
        """Render a List as a dl, ol or ul container."""
        tag = LIST_TYPE_TAGS[node.type]
        return f"<{tag}>\n{self.render_all(iter_children(node))}</{tag}>\n\n"

    def visit_list_item(self, node: ListItem) -> str:
        """Render a ListItem.

        Items with a description term render as ``<dt>term</dt><dd>body</dd>``,
        other items as ``<li>body</li>``. A check state is rendered in bold
        brackets before the term or body.

        """
        parts = ["<dt>" if node.description_term is not None else "<li>"]
        if node.check_state:
            parts.append(f"<strong>[{escape_html(node.check_state)}]</strong>")
        if node.description_term is not None:
            parts.append(self.render(node.description_term))
            parts.append("</dt><dd>")
        parts.append(self.render_all(iter_children(node)))
        parts.append("</dd>\n" if node.description_term is not None else "</li>\n")
        return "".join(parts)

    def visit_table(self, node: Table) -> str:
        """Render a Table."""
        return f"<table border>\n{self.render_all(iter_children(node))}</table>\n\n"

    def visit_table_row(self, node: TableRow) -> str:
        """Render a TableRow."""
        return f"<tr>{self.render_all(iter_children(node))}</tr>\n"

    def visit_table_cell(self, node: TableCell) -> str:
        """Render a TableCell."""
        return f"<td>{self.render_all(iter_children(node))}</td>"

    def visit_table_vline(self, node: TableVLine) -> str:
        return ""

    def visit_block(self, node: Block) -> str:
        """Render a Block as preformatted text tagged with its lower-cased name.

        Parameters
        ----------
        node : Block
            Block to render

        Returns
        -------
        str
            ``<pre class="block block_NAME">`` element with the escaped raw content

        """
        name = escape_html(node.name.lower())
        return f'<pre class="block block_{name}">{escape_html(node.raw_content)}</pre>\n\n'

    def visit_short_example(self, node: ShortExample) -> str:
        """Render a ShortExample as preformatted text."""
        return f'<pre class="short_example">{escape_html(node.example)}</pre>\n'

    def visit_comment(self, node: Comment) -> str:
        """Render a Comment as an HTML comment."""
        return f"<!-- {escape_comment(str(node))} -->\n"

    # Drawers, footnotes, radio targets and settings produce no output

    def visit_drawer(self, node: Drawer) -> str:
        return ""

    def visit_footnote(self, node: Footnote) -> str:
        return ""

    def visit_radio_target(self, node: RadioTarget) -> str:
        return ""

    def visit_setting(self, node: Setting) -> str:
        return ""

    def visit_text(self, node: Text) -> str:
        """Render a Text node.

        The text is escaped and paragraph breaks (two or more consecutive
        line breaks) are marked; inline children follow the text inside the
        same style element.

        Parameters
        ----------
        node : Text
            Text to render

        Returns
        -------
        str
            HTML fragment

        """
        tag = TEXT_STYLE_TAGS[node.style] if node.style != "none" else None
        content = mark_paragraph_breaks(escape_html(node.text)) + self.render_all(iter_children(node))
        if tag is None:
            return content
        return f"<{tag}>{content}</{tag}>"

    def visit_link(self, node: Link) -> str:
        """Render a Link.

        Targets that start with a scheme (``word:``) are used as the href
        verbatim; anything else is an internal anchor reference. Without a
        description, the raw target string is the link text.

        Parameters
        ----------
        node : Link
            Link to render

        Returns
        -------
        str
            Anchor element

        """
        if _EXTERNAL_TARGET.match(node.target):
            href = node.target
        else:
            href = "#" + escape_target(node.target)
        text = self.render(node.description) if node.description is not None else node.target
        return f'<a href="{href}">{text}</a>'

    def visit_target(self, node: Target) -> str:
        """Render a Target as an anchor definition."""
        return f'<a name="{escape_target(node.name)}"></a>'

    def visit_timestamp(self, node: Timestamp) -> str:
        return escape_html(node.text)

    def visit_time_range(self, node: TimeRange) -> str:
        return escape_html(node.text)


class HtmlRenderer(BaseRenderer):
    """Render Org document trees to HTML.

    Parameters
    ----------
    options : HtmlExportOptions or None, default = None
        Export configuration. Default options produce a full HTML document
        with no tag filtering.

    Examples
    --------
    Naked export of a single headline:

        >>> from org2html.ast import Document, Headline, Text
        >>> doc = Document(children=[
        ...     Headline(level=1, title=Text(text="Hello"), children=[Text(text="World")])
        ... ])
        >>> HtmlRenderer(HtmlExportOptions(naked=True)).render_to_string(doc)
        '<h1>Hello</h1>\\n\\nWorld'

    """

    visitor_class: type[HtmlExportVisitor] = HtmlExportVisitor

    def __init__(self, options: HtmlExportOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlExportOptions, "html")
        options = options or HtmlExportOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlExportOptions = options

    def render_with_diagnostics(self, doc: Node) -> RenderResult:
        """Render a tree to HTML and report skipped nodes.

        Parameters
        ----------
        doc : Node
            Tree to render. A Document produces a full export (subject to
            ``naked``); any other node renders as a fragment.

        Returns
        -------
        RenderResult
            HTML text and the warnings emitted for unknown node kinds

        """
        visitor = self.visitor_class(self.options)
        with debug_timer(logger, "Rendering (html)"):
            html = visitor.render(doc)
        return RenderResult(html=html, warnings=tuple(visitor.warnings))

    def render_to_string(self, doc: Node) -> str:
        """Render a tree to an HTML string.

        Parameters
        ----------
        doc : Node
            Tree to render, usually a Document

        Returns
        -------
        str
            HTML text

        """
        return self.render_with_diagnostics(doc).html

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree to HTML and write to output.

        Parameters
        ----------
        doc : Node
            Tree to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        """
        html_text = self.render_to_string(doc)
        self.write_text_output(html_text, output)


__all__ = ["HtmlExportVisitor", "HtmlRenderer", "RenderResult"]
