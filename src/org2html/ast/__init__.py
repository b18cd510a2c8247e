#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/ast/__init__.py
"""Document tree for Org-to-HTML export.

This package holds the node classes produced by the Org parser and consumed
by the HTML renderer, the visitor base class used to walk them, and the
tag-based headline selection rules.

"""

from org2html.ast.nodes import (
    LIST_TYPES,
    TEXT_STYLES,
    Block,
    Comment,
    Document,
    Drawer,
    Footnote,
    Headline,
    Link,
    List,
    ListItem,
    ListType,
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
    TextStyle,
    TimeRange,
    Timestamp,
)
from org2html.ast.selection import HeadlineSelection, normalize_include_tags, select_headline
from org2html.ast.utils import collect_tags, find_headlines, iter_descendants
from org2html.ast.visitors import NodeVisitor

__all__ = [
    "LIST_TYPES",
    "TEXT_STYLES",
    "Block",
    "Comment",
    "Document",
    "Drawer",
    "Footnote",
    "Headline",
    "HeadlineSelection",
    "Link",
    "List",
    "ListItem",
    "ListType",
    "Node",
    "NodeVisitor",
    "RadioTarget",
    "Setting",
    "ShortExample",
    "Table",
    "TableCell",
    "TableRow",
    "TableVLine",
    "Target",
    "Text",
    "TextStyle",
    "TimeRange",
    "Timestamp",
    "collect_tags",
    "find_headlines",
    "iter_descendants",
    "normalize_include_tags",
    "select_headline",
]
