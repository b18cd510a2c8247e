#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_selection.py
"""Unit tests for tag-based headline selection.

Tests cover:
- Exclude tags dropping whole subtrees
- Include tags keeping tagged subtrees in full
- Skeleton rendering of ancestors of included headlines
- Exclude winning over include
- Normalization of include tags unused in the document

"""

import pytest

from org2html.ast import Document, Headline, Text
from org2html.ast.selection import (
    leads_to_tags,
    normalize_include_tags,
    select_headline,
    subtree_has_tags,
)


def _headline(title, tags=(), children=None, level=1):
    return Headline(level=level, title=Text(text=title), tags=frozenset(tags), children=children or [])


@pytest.mark.unit
class TestSelectHeadline:
    """Tests for select_headline."""

    def test_no_filters_renders_full(self) -> None:
        body = Text(text="body")
        headline = _headline("A", children=[body])
        selection = select_headline(headline, None, None)
        assert selection.mode == "full"
        assert selection.children == (body,)

    def test_exclude_tag_drops_headline(self) -> None:
        headline = _headline("A", tags={"noexport"}, children=[Text(text="x")])
        assert select_headline(headline, None, {"noexport"}).is_excluded

    def test_exclude_wins_over_include(self) -> None:
        headline = _headline("A", tags={"work", "noexport"})
        assert select_headline(headline, {"work"}, {"noexport"}).is_excluded

    def test_included_headline_renders_full(self) -> None:
        children = [Text(text="body"), _headline("B", level=2)]
        headline = _headline("A", tags={"work"}, children=children)
        selection = select_headline(headline, {"work"}, None)
        assert selection.mode == "full"
        assert list(selection.children) == children

    def test_untagged_subtree_is_dropped(self) -> None:
        headline = _headline("A", children=[Text(text="body"), _headline("B", level=2)])
        assert select_headline(headline, {"work"}, None).is_excluded

    def test_ancestor_of_included_becomes_skeleton(self) -> None:
        tagged = _headline("B", tags={"work"}, level=2)
        untagged = _headline("C", level=2)
        body = Text(text="intro")
        headline = _headline("A", children=[body, tagged, untagged])

        selection = select_headline(headline, {"work"}, None)

        assert selection.mode == "skeleton"
        assert selection.children == (tagged,)

    def test_skeleton_keeps_child_leading_to_deep_tag(self) -> None:
        deep = _headline("D", tags={"work"}, level=3)
        middle = _headline("B", children=[Text(text="middle body"), deep], level=2)
        other = _headline("C", level=2)
        headline = _headline("A", children=[middle, other])

        selection = select_headline(headline, {"work"}, None)
        assert selection.children == (middle,)

        middle_selection = select_headline(middle, {"work"}, None)
        assert middle_selection.mode == "skeleton"
        assert middle_selection.children == (deep,)

    def test_exclude_inside_included_subtree(self) -> None:
        hidden = _headline("B", tags={"noexport"}, level=2)
        headline = _headline("A", tags={"work"}, children=[hidden])
        assert select_headline(headline, {"work"}, {"noexport"}).mode == "full"
        assert select_headline(hidden, {"work"}, {"noexport"}).is_excluded

    def test_empty_sets_mean_unset(self) -> None:
        headline = _headline("A")
        assert select_headline(headline, frozenset(), frozenset()).mode == "full"


@pytest.mark.unit
class TestTagSearch:
    """Tests for subtree tag searches."""

    def test_subtree_has_tags_ignores_node_itself(self) -> None:
        headline = _headline("A", tags={"work"})
        assert not subtree_has_tags(headline, {"work"})
        assert leads_to_tags(headline, {"work"})

    def test_subtree_search_reaches_nested_headlines(self) -> None:
        nested = _headline("C", tags={"work"}, level=3)
        headline = _headline("A", children=[_headline("B", children=[nested], level=2)])
        assert subtree_has_tags(headline, {"work"})


@pytest.mark.unit
class TestNormalizeIncludeTags:
    """Tests for normalize_include_tags."""

    def test_unused_tags_disable_filter(self) -> None:
        doc = Document(children=[_headline("A", tags={"home"})])
        assert normalize_include_tags(doc, ["work"]) is None

    def test_used_tag_keeps_filter(self) -> None:
        doc = Document(children=[_headline("A", children=[_headline("B", tags={"work"}, level=2)])])
        assert normalize_include_tags(doc, ["work", "other"]) == frozenset({"work", "other"})

    def test_none_and_empty(self) -> None:
        doc = Document()
        assert normalize_include_tags(doc, None) is None
        assert normalize_include_tags(doc, []) is None
