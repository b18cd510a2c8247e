#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/ast/nodes.py
"""Node classes for Org document trees.

This module defines the closed set of node kinds the HTML exporter knows how
to render. Trees are produced by a parser (see :mod:`org2html.parsers.org`)
or built by hand, and are treated as read-only by every renderer.

Node Hierarchy
--------------
All nodes inherit from :class:`Node` and support the visitor pattern.

Structural nodes:
    - Document, Headline
    - List, ListItem
    - Table, TableRow, TableCell, TableVLine

Verbatim and inert nodes:
    - Block, ShortExample, Comment
    - Drawer, Footnote, RadioTarget, Setting

Inline nodes:
    - Text, Link, Target
    - Timestamp, TimeRange

A subclass of :class:`Node` that is not one of these kinds is routed to the
visitor's ``generic_visit`` method, which lets renderers degrade gracefully
on tree shapes they do not know about.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Literal, Optional

TextStyle = Literal["none", "bold", "italic", "underline", "strike", "code", "verbatim"]
ListType = Literal["description", "ordered", "unordered"]

TEXT_STYLES: tuple[str, ...] = ("none", "bold", "italic", "underline", "strike", "code", "verbatim")
LIST_TYPES: tuple[str, ...] = ("description", "ordered", "unordered")


class Node:
    """Base class for all tree nodes.

    Parameters
    ----------
    children : list of Node
        Child nodes, in document order. May be empty.
    metadata : dict
        Arbitrary metadata attached by the producer of the tree

    """

    children: list[Node]
    metadata: dict[str, Any]

    @property
    def kind(self) -> str:
        """Name of this node's kind (its class name)."""
        return type(self).__name__

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Known node kinds override this to call their dedicated ``visit_*``
        method. Anything else lands in ``visitor.generic_visit``.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        return visitor.generic_visit(self)


def _as_tags(tags: Iterable[str] | None) -> frozenset[str]:
    if not tags:
        return frozenset()
    if isinstance(tags, str):
        return frozenset([tags])
    return frozenset(tags)


# ============================================================================
# Structural Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root node of an Org document.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes (preamble content and level-1 headlines)
    metadata : dict, default = empty dict
        Document-level metadata (e.g. ``title`` from ``#+TITLE:``)

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self)


@dataclass
class Headline(Node):
    """A titled, leveled section.

    Parameters
    ----------
    level : int
        Heading depth, 1 for top-level headlines
    title : Node or None, default = None
        Title content, typically a :class:`Text` node
    tags : frozenset of str, default = empty
        Tags written on this headline only. Tags of ancestor headlines are
        never merged in here.
    children : list of Node, default = empty list
        Section body, including nested headlines
    metadata : dict, default = empty dict
        Extra information (TODO keyword, priority, source line)

    """

    level: int
    title: Optional[Node] = None
    tags: frozenset[str] = field(default_factory=frozenset)
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Normalize tags to a frozenset."""
        self.tags = _as_tags(self.tags)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_headline``."""
        return visitor.visit_headline(self)


@dataclass
class List(Node):
    """A plain list.

    Parameters
    ----------
    type : {"description", "ordered", "unordered"}, default = "unordered"
        Kind of list, selects the container element
    children : list of Node, default = empty list
        List items

    """

    type: ListType = "unordered"
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self)


@dataclass
class ListItem(Node):
    """An item of a :class:`List`.

    Parameters
    ----------
    children : list of Node, default = empty list
        Item body
    description_term : Node or None, default = None
        Term of a description list item (``- term :: body``)
    check_state : str or None, default = None
        Checkbox marker (``"X"``, ``" "`` or ``"-"``) when the item has one
    bullet : str, default = "-"
        Bullet or counter used in the source

    """

    children: list[Node] = field(default_factory=list)
    description_term: Optional[Node] = None
    check_state: Optional[str] = None
    bullet: str = "-"
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self)


@dataclass
class Table(Node):
    """A table; children are :class:`TableRow` nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self)


@dataclass
class TableRow(Node):
    """A table row; children are :class:`TableCell` nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self)


@dataclass
class TableCell(Node):
    """A table cell; children are inline nodes."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self)


@dataclass
class TableVLine(Node):
    """A column-group marker row. Purely decorative."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_table_vline``."""
        return visitor.visit_table_vline(self)


# ============================================================================
# Verbatim and Inert Nodes
# ============================================================================


@dataclass
class Block(Node):
    """A ``#+BEGIN_NAME ... #+END_NAME`` block.

    Parameters
    ----------
    name : str
        Block type as written (``SRC``, ``EXAMPLE``, ``QUOTE``...)
    raw_content : str, default = ""
        Verbatim block body; never parsed for inline markup
    args : str, default = ""
        Anything after the block name on the opening line

    """

    name: str
    raw_content: str = ""
    args: str = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_block``."""
        return visitor.visit_block(self)


@dataclass
class ShortExample(Node):
    """One or more ``: example`` lines, joined by newlines."""

    example: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_short_example``."""
        return visitor.visit_short_example(self)


@dataclass
class Comment(Node):
    """A comment line (``# ...``); ``content`` is the text after the markers.

    ``str()`` gives the comment back in its Org source form, one ``#`` per line.
    """

    content: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return "\n".join(f"# {line}" if line else "#" for line in self.content.split("\n"))

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_comment``."""
        return visitor.visit_comment(self)


@dataclass
class Drawer(Node):
    """A ``:NAME: ... :END:`` drawer."""

    name: str
    raw_content: str = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_drawer``."""
        return visitor.visit_drawer(self)


@dataclass
class Footnote(Node):
    """A footnote reference (``[fn:name]``) or definition."""

    name: str
    is_definition: bool = False
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_footnote``."""
        return visitor.visit_footnote(self)


@dataclass
class RadioTarget(Node):
    """A radio target (``<<<name>>>``)."""

    target: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_radio_target``."""
        return visitor.visit_radio_target(self)


@dataclass
class Setting(Node):
    """An in-buffer setting (``#+NAME: args``)."""

    name: str
    raw_arg: str = ""
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_setting``."""
        return visitor.visit_setting(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """A run of text, optionally styled.

    Parameters
    ----------
    text : str, default = ""
        Raw, unescaped text
    style : TextStyle, default = "none"
        Emphasis style wrapping the text and its children
    children : list of Node, default = empty list
        Nested inline nodes, rendered after ``text``

    """

    text: str = ""
    style: TextStyle = "none"
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self)


@dataclass
class Link(Node):
    """A link (``[[target]]`` or ``[[target][description]]``).

    Parameters
    ----------
    target : str
        URL (``scheme:...``) or the name of an anchor in the document
    description : Node or None, default = None
        Link text; when absent the target itself is shown

    """

    target: str
    description: Optional[Node] = None
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self)


@dataclass
class Target(Node):
    """A dedicated target (``<<name>>``) that links can point to."""

    name: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_target``."""
        return visitor.visit_target(self)


@dataclass
class Timestamp(Node):
    """A timestamp; ``text`` is its display form (``<2024-03-01 Fri>``)."""

    text: str
    active: bool = True
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_timestamp``."""
        return visitor.visit_timestamp(self)


@dataclass
class TimeRange(Node):
    """A time range; ``text`` is its display form (``<...>--<...>``)."""

    text: str
    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Dispatch to ``visitor.visit_time_range``."""
        return visitor.visit_time_range(self)


__all__ = [
    "LIST_TYPES",
    "TEXT_STYLES",
    "Block",
    "Comment",
    "Document",
    "Drawer",
    "Footnote",
    "Headline",
    "Link",
    "List",
    "ListItem",
    "ListType",
    "Node",
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
]
