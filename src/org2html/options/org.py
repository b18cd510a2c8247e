#  Copyright (c) 2025 Tom Villani, Ph.D.

# org2html/options/org.py
"""Configuration options for Org parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from org2html.constants import DEFAULT_ORG_PARSE_TAGS, DEFAULT_ORG_TODO_KEYWORDS
from org2html.options.base import BaseParserOptions


@dataclass(frozen=True)
class OrgParserOptions(BaseParserOptions):
    """Configuration options for Org-to-tree parsing.

    Parameters
    ----------
    todo_keywords : list[str], default ["TODO", "DONE"]
        TODO keywords to recognize at the start of headlines. A recognized
        keyword is removed from the title and kept in the headline metadata
        under ``todo``.
    parse_tags : bool, default True
        Whether to read headline tags (``:work:urgent:``). When False every
        headline is tagless, which disables tag filtering in practice.

    Examples
    --------
        >>> options = OrgParserOptions(todo_keywords=["TODO", "WAITING", "DONE"])
        >>> parser = OrgParser(options)

    """

    todo_keywords: list[str] = field(
        default_factory=lambda: DEFAULT_ORG_TODO_KEYWORDS.copy(),
        metadata={"help": "TODO keywords to recognize in headlines", "importance": "core"},
    )
    parse_tags: bool = field(
        default=DEFAULT_ORG_PARSE_TAGS,
        metadata={"help": "Parse headline tags (e.g., :work:urgent:)", "importance": "core"},
    )
