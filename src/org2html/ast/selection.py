#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/ast/selection.py
"""Tag-based selection of headline subtrees.

This module decides, for each headline met during export, whether it is
dropped, rendered in full, or rendered as a skeleton (title only, keeping
just the sub-headlines that lead to selected content).

Rules, evaluated top-down at each headline ``H``:

1. ``H`` carries an exclude tag: ``H`` and its subtree are dropped. This
   wins over any include tag on ``H`` or below it.
2. No include tags configured: ``H`` is rendered in full.
3. ``H`` carries an include tag: ``H`` is rendered in full.
4. Otherwise, if no headline below ``H`` carries an include tag, ``H`` is
   dropped. If one does, ``H`` becomes a skeleton: its title is kept and
   its children are reduced to the direct sub-headlines whose own tags, or
   the tags of any headline in their subtree, hit an include tag.

Every kept child is evaluated again with the same rules, so the chain of
ancestors above a selected headline renders as bare titles down to the
selected headline, which renders completely.

The include tags are expected to be normalized first with
:func:`normalize_include_tags`: when no headline of the document uses any
of them, the include filter must be switched off rather than dropping the
whole document.

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Iterable, Literal, Optional

from org2html.ast.nodes import Headline, Node
from org2html.ast.utils import collect_tags, iter_children, iter_descendants

SelectionMode = Literal["excluded", "full", "skeleton"]


@dataclass(frozen=True)
class HeadlineSelection:
    """Outcome of evaluating the tag filter on one headline.

    Parameters
    ----------
    mode : {"excluded", "full", "skeleton"}
        How the headline is rendered
    children : tuple of Node, default = ()
        Children to render below the title. All children for ``"full"``,
        the retained sub-headlines for ``"skeleton"``, nothing for
        ``"excluded"``.

    """

    mode: SelectionMode
    children: tuple[Node, ...] = ()

    @property
    def is_excluded(self) -> bool:
        """Whether the headline renders as an empty string."""
        return self.mode == "excluded"


EXCLUDED = HeadlineSelection("excluded")


def carries_any(headline: Headline, tags: AbstractSet[str]) -> bool:
    """Return True if the headline's own tags intersect ``tags``."""
    return not headline.tags.isdisjoint(tags)


def subtree_has_tags(node: Node, tags: AbstractSet[str]) -> bool:
    """Return True if any headline strictly below ``node`` carries one of ``tags``."""
    return any(
        isinstance(descendant, Headline) and carries_any(descendant, tags) for descendant in iter_descendants(node)
    )


def leads_to_tags(headline: Headline, tags: AbstractSet[str]) -> bool:
    """Return True if the headline or any headline below it carries one of ``tags``."""
    return carries_any(headline, tags) or subtree_has_tags(headline, tags)


def select_headline(
    headline: Headline,
    include_tags: Optional[AbstractSet[str]],
    exclude_tags: Optional[AbstractSet[str]],
) -> HeadlineSelection:
    """Apply the tag filter to a single headline.

    Parameters
    ----------
    headline : Headline
        Headline being rendered
    include_tags : set of str or None
        Normalized include tags. ``None`` or empty means no include filter.
    exclude_tags : set of str or None
        Exclude tags. ``None`` or empty means no exclude filter.

    Returns
    -------
    HeadlineSelection
        How to render ``headline`` and which of its children to render

    """
    if exclude_tags and carries_any(headline, exclude_tags):
        return EXCLUDED

    children = tuple(iter_children(headline))
    if not include_tags or carries_any(headline, include_tags):
        return HeadlineSelection("full", children)

    if not subtree_has_tags(headline, include_tags):
        return EXCLUDED

    kept = tuple(
        child for child in children if isinstance(child, Headline) and leads_to_tags(child, include_tags)
    )
    return HeadlineSelection("skeleton", kept)


def normalize_include_tags(doc: Node, include_tags: Optional[Iterable[str]]) -> Optional[frozenset[str]]:
    """Switch the include filter off when the document never uses its tags.

    Parameters
    ----------
    doc : Node
        Document (or any subtree root) that is about to be exported
    include_tags : iterable of str or None
        Include tags requested by the caller

    Returns
    -------
    frozenset of str or None
        ``include_tags`` as a frozenset when at least one headline carries
        one of them, ``None`` otherwise

    Examples
    --------
        >>> doc = Document(children=[Headline(level=1, tags={"work"})])
        >>> sorted(normalize_include_tags(doc, ["work", "home"]))
        ['home', 'work']
        >>> normalize_include_tags(doc, ["home"]) is None
        True

    """
    if not include_tags:
        return None
    wanted = frozenset(include_tags)
    if collect_tags(doc).isdisjoint(wanted):
        return None
    return wanted


__all__ = [
    "EXCLUDED",
    "HeadlineSelection",
    "SelectionMode",
    "carries_any",
    "leads_to_tags",
    "normalize_include_tags",
    "select_headline",
    "subtree_has_tags",
]
