#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for org2html.

Constants are organized by category:
1. HTML export defaults
2. Org parsing defaults
3. Dependency specifications
"""

from __future__ import annotations

# =============================================================================
# HTML Export Defaults
# =============================================================================

DEFAULT_HTML_NAKED = False
DEFAULT_HTML_TITLE = "(no title)"
DEFAULT_CREATOR = "org2html"

# Inline style -> wrapping element
TEXT_STYLE_TAGS: dict[str, str] = {
    "bold": "b",
    "italic": "i",
    "underline": "u",
    "strike": "del",
    "code": "code",
    "verbatim": "samp",
}

# List type -> container element
LIST_TYPE_TAGS: dict[str, str] = {
    "description": "dl",
    "ordered": "ol",
    "unordered": "ul",
}

PARAGRAPH_BREAK = "\n\n<p>\n\n"

# Preview length used when logging exported nodes
LOG_PREVIEW_LENGTH = 30

# =============================================================================
# Org Parsing Defaults
# =============================================================================

DEFAULT_ORG_TODO_KEYWORDS = ["TODO", "DONE"]
DEFAULT_ORG_PARSE_TAGS = True

# Org emphasis marker -> Text style
ORG_EMPHASIS_MARKERS: dict[str, str] = {
    "*": "bold",
    "/": "italic",
    "_": "underline",
    "+": "strike",
    "=": "code",
    "~": "verbatim",
}

# =============================================================================
# Dependency Specifications for @requires_dependencies decorator
# =============================================================================
# Each spec is a list of tuples: (pip_package, import_name, version_constraint)

DEPS_ORG = [("orgparse", "orgparse", ">=0.4")]
