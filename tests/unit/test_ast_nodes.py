#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for tree nodes and tree helpers.

Tests cover:
- Node kinds and visitor dispatch
- Tag normalization on headlines
- Descendant iteration and tag collection

"""

from unittest.mock import Mock

import pytest

from org2html.ast import (
    Document,
    Headline,
    Link,
    List,
    ListItem,
    Node,
    Text,
    collect_tags,
    find_headlines,
    iter_descendants,
)


@pytest.mark.unit
class TestNodes:
    """Tests for node classes."""

    def test_kind_is_class_name(self) -> None:
        assert Headline(level=1).kind == "Headline"
        assert Text().kind == "Text"

    def test_headline_tags_normalized(self) -> None:
        assert Headline(level=1, tags=["a", "b", "a"]).tags == frozenset({"a", "b"})  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "node,method",
        [
            (Document(), "visit_document"),
            (Headline(level=1), "visit_headline"),
            (List(), "visit_list"),
            (ListItem(), "visit_list_item"),
            (Text(), "visit_text"),
            (Link(target="x"), "visit_link"),
        ],
    )
    def test_accept_dispatch(self, node, method) -> None:
        visitor = Mock()
        node.accept(visitor)
        getattr(visitor, method).assert_called_once_with(node)

    def test_unknown_kind_goes_to_generic_visit(self) -> None:
        class Custom(Node):
            pass

        node = Custom()
        visitor = Mock()
        node.accept(visitor)
        visitor.generic_visit.assert_called_once_with(node)


@pytest.mark.unit
class TestTreeHelpers:
    """Tests for tree walking helpers."""

    def setup_method(self) -> None:
        self.inner = Headline(level=2, tags={"b"}, title=Text(text="inner"))
        self.outer = Headline(level=1, tags={"a"}, children=[Text(text="body"), self.inner])
        self.doc = Document(children=[self.outer])

    def test_iter_descendants_pre_order(self) -> None:
        kinds = [node.kind for node in iter_descendants(self.doc)]
        assert kinds == ["Headline", "Text", "Headline"]

    def test_titles_are_not_descendants(self) -> None:
        assert self.inner.title not in list(iter_descendants(self.doc))

    def test_find_headlines(self) -> None:
        assert find_headlines(self.doc) == [self.outer, self.inner]

    def test_collect_tags(self) -> None:
        assert collect_tags(self.doc) == {"a", "b"}
