#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers building document trees from source text."""

from org2html.parsers.base import BaseParser
from org2html.parsers.org import OrgParser

__all__ = ["BaseParser", "OrgParser"]
