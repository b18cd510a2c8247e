#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/ast/visitors.py
"""Visitor pattern implementation for tree traversal.

Visitors keep algorithms (rendering, inspection) separate from the node
classes. Each known node kind calls its own ``visit_*`` method from
``accept``; subclasses of :class:`~org2html.ast.nodes.Node` that are not
part of the closed set end up in :meth:`NodeVisitor.generic_visit`.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for tree visitors.

    Subclasses implement one ``visit_*`` method per node kind. Unknown node
    kinds are handed to :meth:`generic_visit`, whose default visits the
    children (if any) and returns their results as a list.

    Examples
    --------
    Counting headlines:

        >>> class HeadlineCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_headline(self, node):
        ...         self.count += 1
        ...         for child in node.children:
        ...             child.accept(self)
        ...
        ...     # remaining visit_* methods omitted

    """

    def generic_visit(self, node: Node) -> Any:
        """Visit a node of a kind this visitor has no method for.

        Parameters
        ----------
        node : Node
            The unrecognized node

        Returns
        -------
        Any
            List with the results of visiting each child

        """
        return [child.accept(self) for child in (getattr(node, "children", None) or [])]

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_headline(self, node: Headline) -> Any:
        """Visit a Headline node."""
        pass

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block node."""
        pass

    @abstractmethod
    def visit_short_example(self, node: ShortExample) -> Any:
        """Visit a ShortExample node."""
        pass

    @abstractmethod
    def visit_comment(self, node: Comment) -> Any:
        """Visit a Comment node."""
        pass

    @abstractmethod
    def visit_drawer(self, node: Drawer) -> Any:
        """Visit a Drawer node."""
        pass

    @abstractmethod
    def visit_footnote(self, node: Footnote) -> Any:
        """Visit a Footnote node."""
        pass

    @abstractmethod
    def visit_list(self, node: List) -> Any:
        """Visit a List node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_radio_target(self, node: RadioTarget) -> Any:
        """Visit a RadioTarget node."""
        pass

    @abstractmethod
    def visit_setting(self, node: Setting) -> Any:
        """Visit a Setting node."""
        pass

    @abstractmethod
    def visit_table(self, node: Table) -> Any:
        """Visit a Table node."""
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow) -> Any:
        """Visit a TableRow node."""
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell) -> Any:
        """Visit a TableCell node."""
        pass

    @abstractmethod
    def visit_table_vline(self, node: TableVLine) -> Any:
        """Visit a TableVLine node."""
        pass

    @abstractmethod
    def visit_target(self, node: Target) -> Any:
        """Visit a Target node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_time_range(self, node: TimeRange) -> Any:
        """Visit a TimeRange node."""
        pass

    @abstractmethod
    def visit_timestamp(self, node: Timestamp) -> Any:
        """Visit a Timestamp node."""
        pass
