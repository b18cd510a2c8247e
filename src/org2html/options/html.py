#  Copyright (c) 2025 Tom Villani, Ph.D.

# org2html/options/html.py
"""Configuration options for HTML export.

This module defines the immutable configuration threaded through every
render call of :class:`org2html.renderers.html.HtmlRenderer`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from org2html.constants import DEFAULT_HTML_NAKED
from org2html.options.base import BaseRendererOptions


def _normalize_tags(tags: Optional[Iterable[str]]) -> Optional[frozenset[str]]:
    if tags is None:
        return None
    if isinstance(tags, str):
        tags = [tags]
    normalized = frozenset(tag for tag in tags if tag)
    return normalized or None


@dataclass(frozen=True)
class HtmlExportOptions(BaseRendererOptions):
    """Configuration options for Org-to-HTML export.

    Parameters
    ----------
    naked : bool, default False
        Emit only the rendered body, without the HTML/HEAD/BODY envelope.
    include_tags : frozenset of str or None, default None
        Export only headline subtrees carrying one of these tags, keeping the
        headline titles above them. Expected to be normalized with
        :func:`org2html.ast.selection.normalize_include_tags` so that a tag
        set no headline uses does not empty the document.
    exclude_tags : frozenset of str or None, default None
        Drop headline subtrees carrying one of these tags. Takes precedence
        over ``include_tags``.
    title : str or None, default None
        Content of the TITLE element. ``"(no title)"`` when unset.
    css_url : str or None, default None
        When set, a stylesheet LINK element pointing here is emitted.
    generated_at : datetime or None, default None
        Time written in the generated-by comment. The current local time is
        used when unset.

    Notes
    -----
    Tag collections are stored as frozensets; empty collections are stored
    as None, so "configured but empty" behaves exactly like "not configured".

    Examples
    --------
        >>> options = HtmlExportOptions(naked=True, exclude_tags={"noexport"})
        >>> renderer = HtmlRenderer(options)

    """

    naked: bool = field(
        default=DEFAULT_HTML_NAKED,
        metadata={"help": "Don't wrap exported HTML with HTML/HEAD/BODY elements", "importance": "core"},
    )
    include_tags: Optional[frozenset[str]] = field(
        default=None,
        metadata={"help": "Include only subtrees that carry one of these tags", "importance": "core"},
    )
    exclude_tags: Optional[frozenset[str]] = field(
        default=None,
        metadata={"help": "Exclude subtrees that carry one of these tags", "importance": "core"},
    )
    title: Optional[str] = field(
        default=None,
        metadata={"help": "HTML document title", "importance": "core"},
    )
    css_url: Optional[str] = field(
        default=None,
        metadata={"help": "Add a link to this CSS document", "importance": "core"},
    )
    generated_at: Optional[datetime] = field(
        default=None,
        metadata={"help": "Timestamp written in the generated-by comment", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Normalize tag collections to frozensets (or None when empty)."""
        object.__setattr__(self, "include_tags", _normalize_tags(self.include_tags))
        object.__setattr__(self, "exclude_tags", _normalize_tags(self.exclude_tags))
