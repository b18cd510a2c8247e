#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/utils/html_utils.py
"""HTML escaping helpers used by the exporter."""

from __future__ import annotations

import re
from html import escape as _html_escape

from org2html.constants import PARAGRAPH_BREAK

_SEPARATOR_RUN = re.compile(r"[\W_]+")
_BLANK_LINE_RUN = re.compile(r"(?:\r\n|\r|\n){2,}")


def escape_html(text: str) -> str:
    """Escape HTML special characters (``& < > " '``)."""
    return _html_escape(text)


def escape_target(name: str) -> str:
    """Turn an anchor name into an identifier-safe string.

    Every maximal run of non-word characters and underscores becomes a single
    underscore.

    Parameters
    ----------
    name : str
        Anchor or link target name

    Returns
    -------
    str
        Escaped name

    Examples
    --------
        >>> escape_target("Section 1: Intro!")
        'Section_1_Intro_'
        >>> escape_target("a  b--c")
        'a_b_c'

    """
    return _SEPARATOR_RUN.sub("_", name)


def mark_paragraph_breaks(text: str) -> str:
    """Replace each run of two or more line breaks with a paragraph marker."""
    return _BLANK_LINE_RUN.sub(PARAGRAPH_BREAK, text)


def escape_comment(text: str) -> str:
    """Escape text for use inside an HTML comment.

    ``--`` sequences are split so the comment cannot be closed early.
    """
    escaped = escape_html(text)
    while "--" in escaped:
        escaped = escaped.replace("--", "- -")
    return escaped


__all__ = ["escape_comment", "escape_html", "escape_target", "mark_paragraph_breaks"]
