#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_html_renderer.py
"""Unit tests for HtmlRenderer.

Tests cover:
- Rendering every node kind to HTML
- Document envelope vs naked output
- Tag filtering of headline subtrees
- Links, targets and anchor escaping
- Text styles, escaping and paragraph breaks
- Unknown node kinds and diagnostics
- Writing to paths and streams

"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from io import BytesIO, StringIO

import pytest
from hypothesis import given
from hypothesis import strategies as st

from org2html.ast import (
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
from org2html.exceptions import InvalidOptionsError
from org2html.options import HtmlExportOptions, OrgParserOptions
from org2html.parsers.org import OrgParser
from org2html.renderers.html import HtmlExportVisitor, HtmlRenderer

NAKED = HtmlExportOptions(naked=True)


def render(node, **options) -> str:
    return HtmlRenderer(HtmlExportOptions(naked=True, **options)).render_to_string(node)


def _headline(title, tags=(), children=None, level=1):
    return Headline(level=level, title=Text(text=title), tags=frozenset(tags), children=children or [])


@dataclass
class Mystery(Node):
    """Node kind the renderer has no method for."""

    children: list = field(default_factory=list)
    metadata: dict = field(default_factory=dict)


@pytest.mark.unit
class TestHeadlines:
    """Tests for headline rendering."""

    def test_headline_with_body(self) -> None:
        doc = Document(children=[_headline("Hello", children=[Text(text="World")])])
        assert render(doc) == "<h1>Hello</h1>\n\nWorld"

    def test_level_selects_heading_element(self) -> None:
        assert render(_headline("Deep", level=3)) == "<h3>Deep</h3>\n\n"

    def test_levels_beyond_six_clamped(self) -> None:
        assert render(_headline("Deeper", level=9)) == "<h6>Deeper</h6>\n\n"

    def test_headline_without_title(self) -> None:
        assert render(Headline(level=2)) == "<h2></h2>\n\n"

    def test_title_is_escaped(self) -> None:
        assert render(_headline("a < b")) == "<h1>a &lt; b</h1>\n\n"


@pytest.mark.unit
class TestTagFiltering:
    """Tests for include/exclude tags during rendering."""

    def test_exclude_removes_subtree(self) -> None:
        doc = Document(
            children=[
                _headline("Public", children=[Text(text="shown")]),
                _headline("Private", tags={"noexport"}, children=[Text(text="secret")]),
            ]
        )
        html = render(doc, exclude_tags={"noexport"})
        assert "Public" in html
        assert "Private" not in html
        assert "secret" not in html

    def test_partial_inclusion_keeps_ancestor_titles_only(self) -> None:
        included = _headline("B", tags={"x"}, level=2, children=[Text(text="kept body")])
        sibling = _headline("C", level=2, children=[Text(text="sibling body")])
        root = _headline("A", children=[Text(text="A body"), included, sibling])

        html = render(Document(children=[root]), include_tags={"x"})

        assert html == "<h1>A</h1>\n\n<h2>B</h2>\n\nkept body"

    def test_untagged_top_level_dropped_with_include(self) -> None:
        doc = Document(children=[_headline("Work", tags={"work"}), _headline("Home")])
        assert render(doc, include_tags={"work"}) == "<h1>Work</h1>\n\n"

    def test_exclude_beats_include(self) -> None:
        doc = Document(children=[_headline("Both", tags={"x", "noexport"}, children=[Text(text="body")])])
        assert render(doc, include_tags={"x"}, exclude_tags={"noexport"}) == ""

    def test_nested_exclusion_in_included_subtree(self) -> None:
        hidden = _headline("Hidden", tags={"noexport"}, level=2)
        doc = Document(children=[_headline("Work", tags={"work"}, children=[Text(text="w"), hidden])])
        html = render(doc, include_tags={"work"}, exclude_tags={"noexport"})
        assert html == "<h1>Work</h1>\n\nw"

    def test_top_level_body_always_rendered(self) -> None:
        doc = Document(children=[Text(text="preamble "), _headline("Home")])
        assert render(doc, include_tags={"work"}) == "preamble "


@pytest.mark.unit
class TestLists:
    """Tests for list rendering."""

    def test_unordered_list(self) -> None:
        node = List(type="unordered", children=[ListItem(children=[Text(text="one")])])
        assert render(node) == "<ul>\n<li>one</li>\n</ul>\n\n"

    def test_ordered_list(self) -> None:
        node = List(type="ordered", children=[ListItem(children=[Text(text="first")])])
        assert render(node) == "<ol>\n<li>first</li>\n</ol>\n\n"

    def test_description_list(self) -> None:
        item = ListItem(description_term=Text(text="term"), children=[Text(text="meaning")])
        node = List(type="description", children=[item])
        assert render(node) == "<dl>\n<dt>term</dt><dd>meaning</dd>\n</dl>\n\n"

    def test_check_state_prefix(self) -> None:
        item = ListItem(check_state="X", children=[Text(text="done")])
        assert render(item) == "<li><strong>[X]</strong>done</li>\n"

    def test_check_state_before_term(self) -> None:
        item = ListItem(check_state=" ", description_term=Text(text="t"), children=[Text(text="b")])
        assert render(item) == "<dt><strong>[ ]</strong>t</dt><dd>b</dd>\n"

    def test_unknown_list_type_raises(self) -> None:
        with pytest.raises(KeyError):
            render(List(type="bogus"))  # type: ignore[arg-type]


@pytest.mark.unit
class TestTables:
    """Tests for table rendering."""

    def test_table(self) -> None:
        table = Table(
            children=[
                TableRow(children=[TableCell(children=[Text(text="a")]), TableCell(children=[Text(text="b")])]),
                TableVLine(),
                TableRow(children=[TableCell(children=[Text(text="1")]), TableCell()]),
            ]
        )
        assert render(table) == (
            "<table border>\n<tr><td>a</td><td>b</td></tr>\n<tr><td>1</td><td></td></tr>\n</table>\n\n"
        )


@pytest.mark.unit
class TestVerbatimNodes:
    """Tests for blocks, examples and comments."""

    def test_block(self) -> None:
        node = Block(name="SRC", raw_content='print("<hi>")')
        assert render(node) == '<pre class="block block_src">print(&quot;&lt;hi&gt;&quot;)</pre>\n\n'

    def test_short_example(self) -> None:
        assert render(ShortExample(example="a & b")) == '<pre class="short_example">a &amp; b</pre>\n'

    def test_comment(self) -> None:
        assert render(Comment(content="note <x>")) == "<!-- # note &lt;x&gt; -->\n"

    def test_multiline_comment_keeps_markers(self) -> None:
        assert render(Comment(content="one\n\ntwo")) == "<!-- # one\n#\n# two -->\n"

    def test_parsed_comment_keeps_source_line(self) -> None:
        assert "<!-- # a note -->" in render(OrgParser().parse("* S\n# a note\n"))

    def test_comment_cannot_close_early(self) -> None:
        html = render(Comment(content="a --> b"))
        assert html.startswith("<!-- ")
        assert html.endswith(" -->\n")
        assert "-->" not in html[5:-5]

    def test_malformed_block_raises(self) -> None:
        node = Block(name="QUOTE", raw_content=None)  # type: ignore[arg-type]
        with pytest.raises(AttributeError):
            render(node)


@pytest.mark.unit
class TestSilentNodes:
    """Tests for node kinds that produce no output."""

    @pytest.mark.parametrize(
        "node",
        [
            Drawer(name="PROPERTIES", raw_content=":ID: 1"),
            Footnote(name="1", is_definition=True, children=[Text(text="note")]),
            RadioTarget(target="radio"),
            Setting(name="TITLE", raw_arg="x"),
            TableVLine(),
        ],
    )
    def test_renders_empty(self, node) -> None:
        assert render(node) == ""


@pytest.mark.unit
class TestText:
    """Tests for text rendering."""

    @pytest.mark.parametrize(
        "style,tag",
        [
            ("bold", "b"),
            ("italic", "i"),
            ("underline", "u"),
            ("strike", "del"),
            ("code", "code"),
            ("verbatim", "samp"),
        ],
    )
    def test_styles(self, style, tag) -> None:
        assert render(Text(text="x", style=style)) == f"<{tag}>x</{tag}>"

    def test_plain_text_escaped(self) -> None:
        assert render(Text(text="a < b & c")) == "a &lt; b &amp; c"

    def test_paragraph_break(self) -> None:
        assert render(Text(text="one\n\ntwo")) == "one\n\n<p>\n\ntwo"

    def test_children_inside_style_element(self) -> None:
        node = Text(text="a ", style="bold", children=[Text(text="b", style="italic")])
        assert render(node) == "<b>a <i>b</i></b>"

    @given(st.text())
    def test_unstyled_text_has_no_raw_markup(self, text: str) -> None:
        html = render(Text(text=text))
        assert "<" not in html.replace("<p>", "")


@pytest.mark.unit
class TestLinksAndTargets:
    """Tests for links and targets."""

    def test_external_link_without_description(self) -> None:
        assert render(Link(target="http://example.com")) == '<a href="http://example.com">http://example.com</a>'

    def test_internal_link_without_description(self) -> None:
        assert render(Link(target="My Section")) == '<a href="#My_Section">My Section</a>'

    def test_link_with_description(self) -> None:
        node = Link(target="https://x.org", description=Text(text="X & Y"))
        assert render(node) == '<a href="https://x.org">X &amp; Y</a>'

    def test_raw_target_text_not_escaped(self) -> None:
        assert render(Link(target="a<b")) == '<a href="#a_b">a<b</a>'

    def test_target(self) -> None:
        assert render(Target(name="my anchor")) == '<a name="my_anchor"></a>'

    def test_underscore_runs_collapse_in_href_and_name(self) -> None:
        assert render(Link(target="a__b__c")) == '<a href="#a_b_c">a__b__c</a>'
        assert render(Target(name="a__b__c")) == '<a name="a_b_c"></a>'


@pytest.mark.unit
class TestTimestamps:
    """Tests for timestamps and ranges."""

    def test_timestamp_escaped(self) -> None:
        assert render(Timestamp(text="<2024-03-01 Fri>")) == "&lt;2024-03-01 Fri&gt;"

    def test_time_range(self) -> None:
        node = TimeRange(text="[2024-03-01]--[2024-03-02]")
        assert render(node) == "[2024-03-01]--[2024-03-02]"


@pytest.mark.unit
class TestDocumentEnvelope:
    """Tests for the HTML document envelope."""

    def test_full_document(self) -> None:
        options = HtmlExportOptions(title="Notes", generated_at=datetime(2024, 3, 1, 12, 0, 0))
        doc = Document(children=[_headline("Hi")])
        html = HtmlRenderer(options).render_to_string(doc)
        assert html.startswith("<html>\n<!-- Generated by org2html version ")
        assert "on Fri Mar  1 12:00:00 2024 -->\n\n" in html
        assert "<head>\n<title>Notes</title>\n</head>\n\n<body>\n<h1>Hi</h1>\n\n</body>\n\n</html>\n" in html

    def test_default_title(self) -> None:
        html = HtmlRenderer().render_to_string(Document())
        assert "<title>(no title)</title>" in html

    def test_title_escaped(self) -> None:
        html = HtmlRenderer(HtmlExportOptions(title="A & B")).render_to_string(Document())
        assert "<title>A &amp; B</title>" in html

    def test_stylesheet_link(self) -> None:
        html = HtmlRenderer(HtmlExportOptions(css_url="style.css")).render_to_string(Document())
        assert '<link rel="stylesheet" type="text/css" href="style.css" />\n</head>' in html

    def test_no_stylesheet_by_default(self) -> None:
        assert "<link" not in HtmlRenderer().render_to_string(Document())

    def test_creator_none_omits_comment(self) -> None:
        html = HtmlRenderer(HtmlExportOptions(creator=None)).render_to_string(Document())
        assert html.startswith("<html>\n<head>\n")

    def test_naked_has_no_envelope(self) -> None:
        html = HtmlRenderer(NAKED).render_to_string(Document(children=[Text(text="x")]))
        assert html == "x"

    def test_deterministic_with_fixed_timestamp(self) -> None:
        options = HtmlExportOptions(generated_at=datetime(2024, 1, 1))
        doc = Document(children=[_headline("A", children=[Text(text="b")])])
        renderer = HtmlRenderer(options)
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)


@pytest.mark.unit
class TestUnknownKinds:
    """Tests for nodes of unknown kind."""

    def test_unknown_kind_renders_children(self) -> None:
        doc = Document(children=[Mystery(children=[Text(text="inner")])])
        assert render(doc) == "inner"

    def test_unknown_kind_reported(self, caplog) -> None:
        renderer = HtmlRenderer(NAKED)
        with caplog.at_level(logging.WARNING, logger="org2html.renderers.html"):
            result = renderer.render_with_diagnostics(Document(children=[Mystery()]))
        assert result.html == ""
        assert result.warnings == ("Don't know how to export Mystery node, skipped",)
        assert "Don't know how to export Mystery node, skipped" in caplog.text

    def test_diagnostics_are_per_call(self) -> None:
        renderer = HtmlRenderer(NAKED)
        renderer.render_with_diagnostics(Mystery())
        assert renderer.render_with_diagnostics(Text(text="x")).warnings == ()


@pytest.mark.unit
class TestRendererApi:
    """Tests for renderer construction and output."""

    def test_wrong_options_type(self) -> None:
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(OrgParserOptions())  # type: ignore[arg-type]

    def test_render_to_text_stream(self) -> None:
        buffer = StringIO()
        HtmlRenderer(NAKED).render(Text(text="hi"), buffer)
        assert buffer.getvalue() == "hi"

    def test_render_to_binary_stream(self) -> None:
        buffer = BytesIO()
        HtmlRenderer(NAKED).render(Text(text="hé"), buffer)
        assert buffer.getvalue() == "hé".encode("utf-8")

    def test_render_to_path(self, tmp_path) -> None:
        target = tmp_path / "out.html"
        HtmlRenderer(NAKED).render(Text(text="hi"), target)
        assert target.read_text(encoding="utf-8") == "hi"

    def test_custom_visitor_class(self) -> None:
        class ShoutingVisitor(HtmlExportVisitor):
            def visit_text(self, node):
                return super().visit_text(node).upper()

        class ShoutingRenderer(HtmlRenderer):
            visitor_class = ShoutingVisitor

        assert ShoutingRenderer(NAKED).render_to_string(Text(text="hi")) == "HI"
