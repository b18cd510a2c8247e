#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/parsers/org.py
"""Org-Mode to tree parser.

This module builds :mod:`org2html.ast` trees from Org-Mode text. The
outline (headlines, their levels, own tags, TODO keywords and priorities)
comes from the orgparse library; the body of each section is read by a
line-oriented scanner that recognizes:

- ``#+BEGIN_NAME`` / ``#+END_NAME`` blocks
- ``: example`` lines and ``# comment`` lines
- ``#+KEY: value`` settings and ``:NAME:`` ... ``:END:`` drawers
- ``[fn:name]`` footnote definitions
- tables, including horizontal rules
- plain, ordered, description and checkbox lists, nested by indentation

Everything else is text, parsed for inline markup: emphasis, links,
targets, radio targets, timestamps, time ranges and footnote references.

Headlines nest: a headline's children are its section body followed by
its sub-headlines, so tag filtering can drop whole subtrees.

"""

from __future__ import annotations

import logging
import re
import textwrap
from pathlib import Path
from typing import IO, Any, Optional, Union

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
from org2html.constants import DEPS_ORG, ORG_EMPHASIS_MARKERS
from org2html.exceptions import ParsingError
from org2html.options.org import OrgParserOptions
from org2html.parsers.base import BaseParser
from org2html.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

_BLOCK_BEGIN = re.compile(r"^\s*#\+BEGIN_(\S+)(?:[ \t]+(.*?))?\s*$", re.IGNORECASE)
_SETTING = re.compile(r"^\s*#\+(\w+):[ \t]*(.*?)\s*$")
_COMMENT = re.compile(r"^\s*#(?:[ \t](.*)|$)")
_SHORT_EXAMPLE = re.compile(r"^\s*:(?:[ \t](.*)|$)")
_DRAWER_BEGIN = re.compile(r"^\s*:([\w-]+):\s*$")
_DRAWER_END = re.compile(r"^\s*:END:\s*$", re.IGNORECASE)
_FOOTNOTE_DEFINITION = re.compile(r"^\[fn:([^\]\s]+)\]\s*(.*)$")
_TABLE_ROW = re.compile(r"^\s*\|")
_TABLE_RULE = re.compile(r"^\s*\|-")
_LIST_ITEM = re.compile(r"^(?P<indent>[ \t]*)(?P<bullet>[-+]|(?<=[ \t])\*|\d+[.)])[ \t]+(?P<rest>.*)$")
_CHECKBOX = re.compile(r"^\[([ Xx-])\](?:[ \t]+(.*))?$")
_DESCRIPTION_TERM = re.compile(r"^(.*?)[ \t]+::(?:[ \t]+(.*))?$")

_TIMESTAMP_ACTIVE = r"<\d{4}-\d{2}-\d{2}[^>\n]*>"
_TIMESTAMP_INACTIVE = r"\[\d{4}-\d{2}-\d{2}[^\]\n]*\]"

_INLINE = re.compile(
    r"(?P<link>\[\[(?P<link_target>[^\]]+)\](?:\[(?P<link_description>[^\]]+)\])?\])"
    r"|(?P<radio><<<(?P<radio_target>[^<>\n]+)>>>)"
    r"|(?P<target><<(?P<target_name>[^<>\n]+)>>)"
    rf"|(?P<range>{_TIMESTAMP_ACTIVE}--{_TIMESTAMP_ACTIVE}|{_TIMESTAMP_INACTIVE}--{_TIMESTAMP_INACTIVE})"
    rf"|(?P<timestamp>{_TIMESTAMP_ACTIVE}|{_TIMESTAMP_INACTIVE})"
    r"|(?P<footnote>\[fn:(?P<footnote_name>[^\]:\s]+)(?::[^\]]*)?\])"
    r"|(?<![^\s(\-'\"{])(?P<marker>[*/_+=~])(?P<emphasis>\S(?:.*?\S)?)(?P=marker)(?=[\s\-.,:;!?'\")}\]]|$)"
)


def _indent_of(line: str) -> int:
    return len(line) - len(line.lstrip())


class OrgParser(BaseParser):
    """Convert Org-Mode text to a Document tree.

    Parameters
    ----------
    options : OrgParserOptions or None, default = None
        Parser configuration

    Examples
    --------
        >>> parser = OrgParser()
        >>> doc = parser.parse("* Tasks :work:\\nBuy milk\\n")
        >>> headline = doc.children[0]
        >>> sorted(headline.tags)
        ['work']

    """

    def __init__(self, options: OrgParserOptions | None = None):
        """Initialize the Org parser with options."""
        BaseParser._validate_options_type(options, OrgParserOptions, "org")
        options = options or OrgParserOptions()
        super().__init__(options)
        self.options: OrgParserOptions = options

    @requires_dependencies("org", DEPS_ORG)
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse Org-Mode input into a Document tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Org source text, or a file or stream to read it from

        Returns
        -------
        Document
            Tree whose metadata holds the file-level settings
            (``#+TITLE:`` as ``"title"``, and so on)

        Raises
        ------
        DependencyError
            If orgparse is not installed
        ParsingError
            If orgparse cannot read the outline

        """
        org_content = self._load_text_content(input_data)

        import orgparse

        with debug_timer(logger, "Parsing (org)"):
            try:
                root = orgparse.loads(org_content)
            except Exception as e:
                raise ParsingError(
                    f"Failed to parse Org-Mode: {e}", parsing_stage="outline", original_error=e
                ) from e

            children = self._parse_body(self._body_of(root))
            metadata = self._collect_settings(children)
            if "title" not in metadata and hasattr(root, "get_file_property"):
                title = root.get_file_property("TITLE")
                if title:
                    metadata["title"] = title
            children.extend(self._build_headline(node) for node in root.children)

        return Document(children=children, metadata=metadata)

    @staticmethod
    def _body_of(node: Any) -> str:
        # format="raw" keeps link markup intact
        body = node.get_body(format="raw") if hasattr(node, "get_body") else (node.body or "")
        return body.strip("\n")

    @staticmethod
    def _collect_settings(nodes: list[Node]) -> dict[str, Any]:
        metadata: dict[str, Any] = {}
        for node in nodes:
            if isinstance(node, Setting):
                metadata.setdefault(node.name.lower(), node.raw_arg)
        return metadata

    def _build_headline(self, node: Any) -> Headline:
        """Convert an orgparse node and its subtree into a Headline.

        Parameters
        ----------
        node : orgparse.node.OrgNode
            Headline node

        Returns
        -------
        Headline
            Headline whose children are the section body followed by the
            sub-headlines

        """
        todo_state, heading_text = self._split_todo(node)

        tags: frozenset[str] = frozenset()
        if self.options.parse_tags:
            tags = frozenset(getattr(node, "shallow_tags", None) or ())

        metadata: dict[str, Any] = {}
        if todo_state:
            metadata["todo"] = todo_state
        if getattr(node, "priority", None):
            metadata["priority"] = node.priority
        if getattr(node, "linenumber", None) is not None:
            metadata["line"] = node.linenumber

        children = self._parse_body(self._body_of(node))
        children.extend(self._build_headline(child) for child in node.children)

        return Headline(
            level=node.level,
            title=self._parse_inline_node(heading_text) if heading_text else None,
            tags=tags,
            children=children,
            metadata=metadata,
        )

    def _split_todo(self, node: Any) -> tuple[Optional[str], str]:
        # format="raw" keeps link markup, as for bodies
        heading = (node.get_heading(format="raw") if hasattr(node, "get_heading") else node.heading) or ""
        todo = getattr(node, "todo", None)
        if todo:
            if todo in self.options.todo_keywords:
                return todo, heading
            # Keyword orgparse knows about but we were told not to treat as one
            return None, f"{todo} {heading}".rstrip()

        parts = heading.split(None, 1)
        if parts and parts[0] in self.options.todo_keywords:
            return parts[0], parts[1] if len(parts) > 1 else ""
        return None, heading

    # ------------------------------------------------------------------
    # Section bodies
    # ------------------------------------------------------------------

    def _parse_body(self, text: str) -> list[Node]:
        """Split a section body into block-level nodes.

        Lines that do not start a structural element accumulate into Text
        nodes, blank lines included, so paragraph breaks survive.

        """
        lines = text.split("\n") if text else []
        result: list[Node] = []
        text_lines: list[str] = []
        index = 0

        while index < len(lines):
            parsed = self._parse_structure(lines, index)
            if parsed is None:
                text_lines.append(lines[index])
                index += 1
                continue
            self._flush_text(text_lines, result, trailing="\n")
            node, index = parsed
            result.append(node)

        self._flush_text(text_lines, result, trailing="")
        return result

    def _flush_text(self, text_lines: list[str], result: list[Node], trailing: str) -> None:
        if not text_lines:
            return
        text = "\n".join(text_lines) + trailing
        text_lines.clear()
        if text.strip():
            result.extend(self._parse_inline(text))

    def _parse_structure(self, lines: list[str], index: int) -> Optional[tuple[Node, int]]:  # noqa: C901
        """Parse the structural element starting at ``lines[index]``, if any.

        Returns
        -------
        tuple of (Node, int) or None
            The element and the index of the first line after it, or None
            when the line is plain text

        """
        line = lines[index]

        match = _BLOCK_BEGIN.match(line)
        if match:
            name = match.group(1)
            end = self._find_line(lines, index + 1, re.compile(rf"^\s*#\+END_{re.escape(name)}\s*$", re.IGNORECASE))
            if end is None:
                logger.debug("Unterminated #+BEGIN_%s block read as text", name)
                return None
            block = Block(name=name, raw_content="\n".join(lines[index + 1 : end]), args=match.group(2) or "")
            return block, end + 1

        match = _DRAWER_BEGIN.match(line)
        if match and not _DRAWER_END.match(line):
            end = self._find_line(lines, index + 1, _DRAWER_END)
            if end is not None:
                drawer = Drawer(name=match.group(1), raw_content="\n".join(lines[index + 1 : end]))
                return drawer, end + 1

        match = _SETTING.match(line)
        if match:
            return Setting(name=match.group(1).upper(), raw_arg=match.group(2)), index + 1

        if _COMMENT.match(line):
            contents, end = self._collect_run(lines, index, _COMMENT)
            return Comment(content="\n".join(contents)), end

        if _SHORT_EXAMPLE.match(line):
            contents, end = self._collect_run(lines, index, _SHORT_EXAMPLE)
            return ShortExample(example="\n".join(contents)), end

        match = _FOOTNOTE_DEFINITION.match(line)
        if match:
            footnote = Footnote(name=match.group(1), is_definition=True, children=self._parse_inline(match.group(2)))
            return footnote, index + 1

        if _TABLE_ROW.match(line):
            return self._parse_table(lines, index)

        if _LIST_ITEM.match(line):
            return self._parse_list(lines, index)

        return None

    @staticmethod
    def _find_line(lines: list[str], start: int, pattern: re.Pattern[str]) -> Optional[int]:
        for index in range(start, len(lines)):
            if pattern.match(lines[index]):
                return index
        return None

    @staticmethod
    def _collect_run(lines: list[str], index: int, pattern: re.Pattern[str]) -> tuple[list[str], int]:
        """Collect consecutive lines matching ``pattern``, returning their first group."""
        contents = []
        while index < len(lines):
            match = pattern.match(lines[index])
            if match is None:
                break
            contents.append(match.group(1) or "")
            index += 1
        return contents, index

    def _parse_table(self, lines: list[str], index: int) -> tuple[Table, int]:
        """Parse consecutive table lines; rule lines become TableVLine nodes."""
        rows: list[Node] = []
        while index < len(lines) and _TABLE_ROW.match(lines[index]):
            line = lines[index].strip()
            index += 1
            if _TABLE_RULE.match(line):
                rows.append(TableVLine())
                continue
            line = line[1:]
            if line.endswith("|"):
                line = line[:-1]
            cells: list[Node] = [TableCell(children=self._parse_inline(cell.strip())) for cell in line.split("|")]
            rows.append(TableRow(children=cells))
        return Table(children=rows), index

    def _parse_list(self, lines: list[str], index: int) -> tuple[List, int]:
        """Parse a list whose first item is at ``lines[index]``.

        Items belong to the list while they sit at the first item's
        indentation. Lines indented deeper than the bullet continue the
        current item and are parsed recursively, so deeper bullets become
        nested lists. A blank line ends the list unless the next non-blank
        line continues the item or starts a sibling item.

        Parameters
        ----------
        lines : list of str
            Body lines
        index : int
            Index of the first item

        Returns
        -------
        tuple of (List, int)
            The list and the index of the first line after it

        """
        first = _LIST_ITEM.match(lines[index])
        assert first is not None
        indent = len(first.group("indent"))
        items: list[Node] = []

        while index < len(lines):
            match = _LIST_ITEM.match(lines[index])
            if match is None or len(match.group("indent")) != indent:
                break
            index += 1
            continuation: list[str] = []
            while index < len(lines):
                line = lines[index]
                if line.strip():
                    if _indent_of(line) <= indent:
                        break
                    continuation.append(line)
                    index += 1
                    continue
                following = self._next_non_blank(lines, index)
                if following is None:
                    break
                if _indent_of(lines[following]) > indent:
                    continuation.extend(lines[index:following])
                    index = following
                    continue
                sibling = _LIST_ITEM.match(lines[following])
                if sibling is not None and len(sibling.group("indent")) == indent:
                    index = following
                break
            items.append(self._build_list_item(match, continuation))

        list_type = "unordered"
        if first.group("bullet")[0].isdigit():
            list_type = "ordered"
        elif items and getattr(items[0], "description_term", None) is not None:
            list_type = "description"
        return List(type=list_type, children=items), index

    @staticmethod
    def _next_non_blank(lines: list[str], index: int) -> Optional[int]:
        for position in range(index, len(lines)):
            if lines[position].strip():
                return position
        return None

    def _build_list_item(self, match: re.Match[str], continuation: list[str]) -> ListItem:
        bullet = match.group("bullet")
        rest = match.group("rest")

        check_state = None
        checkbox = _CHECKBOX.match(rest)
        if checkbox:
            check_state = checkbox.group(1)
            rest = checkbox.group(2) or ""

        description_term = None
        if not bullet[0].isdigit():
            term = _DESCRIPTION_TERM.match(rest)
            if term:
                description_term = self._parse_inline_node(term.group(1))
                rest = term.group(2) or ""

        body = rest
        if continuation:
            body += "\n" + textwrap.dedent("\n".join(continuation))
        return ListItem(
            children=self._parse_body(body.strip("\n")),
            description_term=description_term,
            check_state=check_state,
            bullet=bullet,
        )

    # ------------------------------------------------------------------
    # Inline markup
    # ------------------------------------------------------------------

    def _parse_inline_node(self, text: str) -> Node:
        """Parse inline markup into a single node, wrapping several in a Text."""
        nodes = self._parse_inline(text)
        if len(nodes) == 1:
            return nodes[0]
        return Text(children=nodes)

    def _parse_inline(self, text: str) -> list[Node]:
        """Parse inline Org markup.

        Handles:

        - ``*bold*``, ``/italic/``, ``_underline_``, ``+strike+`` (nestable)
        - ``=code=``, ``~verbatim~`` (literal content)
        - ``[[target]]`` and ``[[target][description]]`` links
        - ``<<target>>`` and ``<<<radio target>>>``
        - active ``<...>`` and inactive ``[...]`` timestamps and ranges
        - ``[fn:name]`` footnote references

        Parameters
        ----------
        text : str
            Text with inline markup

        Returns
        -------
        list[Node]
            Inline nodes; plain stretches become unstyled Text nodes

        """
        result: list[Node] = []
        pos = 0

        for match in _INLINE.finditer(text):
            if match.start() > pos:
                result.append(Text(text=text[pos : match.start()]))
            result.append(self._inline_match_to_node(match))
            pos = match.end()

        if pos < len(text):
            result.append(Text(text=text[pos:]))
        return result

    def _inline_match_to_node(self, match: re.Match[str]) -> Node:
        if match.group("link"):
            description = match.group("link_description")
            return Link(
                target=match.group("link_target"),
                description=self._parse_inline_node(description) if description else None,
            )
        if match.group("radio"):
            return RadioTarget(target=match.group("radio_target"))
        if match.group("target"):
            return Target(name=match.group("target_name"))
        if match.group("range"):
            return TimeRange(text=match.group("range"))
        if match.group("timestamp"):
            stamp = match.group("timestamp")
            return Timestamp(text=stamp, active=stamp.startswith("<"))
        if match.group("footnote"):
            return Footnote(name=match.group("footnote_name"))

        style = ORG_EMPHASIS_MARKERS[match.group("marker")]
        inner = match.group("emphasis")
        if style in ("code", "verbatim"):
            return Text(text=inner, style=style)  # type: ignore[arg-type]

        children = self._parse_inline(inner)
        if len(children) == 1 and isinstance(children[0], Text) and children[0].style == "none":
            plain = children[0]
            return Text(text=plain.text, style=style, children=plain.children)  # type: ignore[arg-type]
        return Text(style=style, children=children)  # type: ignore[arg-type]
