#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/ast/utils.py
"""Read-only helpers for walking document trees."""

from __future__ import annotations

from typing import Iterator

from org2html.ast.nodes import Headline, Node


def iter_children(node: Node) -> list[Node]:
    """Return the children of ``node``, treating a missing list as empty."""
    return getattr(node, "children", None) or []


def iter_descendants(node: Node) -> Iterator[Node]:
    """Yield every descendant of ``node`` in depth-first pre-order.

    The node itself is not yielded. Headline titles, link descriptions and
    description-list terms are not part of the child sequence and are not
    visited.

    Parameters
    ----------
    node : Node
        Root of the subtree

    Yields
    ------
    Node
        Descendant nodes

    """
    for child in iter_children(node):
        yield child
        yield from iter_descendants(child)


def find_headlines(node: Node) -> list[Headline]:
    """Return all headlines below ``node`` in document order."""
    return [descendant for descendant in iter_descendants(node) if isinstance(descendant, Headline)]


def collect_tags(node: Node) -> set[str]:
    """Return the union of the tags of all headlines below ``node``."""
    tags: set[str] = set()
    for headline in find_headlines(node):
        tags.update(headline.tags)
    return tags


__all__ = ["collect_tags", "find_headlines", "iter_children", "iter_descendants"]
