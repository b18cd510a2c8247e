#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/api.py
"""Convenience entry point: Org source in, HTML out.

:func:`export_org_to_html` ties the parser and the renderer together and
takes care of what the renderer deliberately leaves to its caller: reading
the source, defaulting the title, normalizing the include tags and writing
the result.

"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from org2html.ast import normalize_include_tags
from org2html.exceptions import ValidationError
from org2html.options import HtmlExportOptions, OrgParserOptions
from org2html.parsers.org import OrgParser
from org2html.renderers.html import HtmlRenderer
from org2html.utils.io_utils import read_text_file

logger = logging.getLogger(__name__)


def _tag_list(tags: Optional[Iterable[str]]) -> list[str]:
    if tags is None:
        return []
    if isinstance(tags, str):
        return [tags]
    return [tag for tag in tags if tag]


def export_org_to_html(
    source_file: Optional[Union[str, Path]] = None,
    source_str: Optional[str] = None,
    target_file: Optional[Union[str, Path]] = None,
    include_tags: Optional[Iterable[str]] = None,
    exclude_tags: Optional[Iterable[str]] = None,
    html_title: Optional[str] = None,
    css_url: Optional[str] = None,
    naked: bool = False,
    parser_options: Optional[OrgParserOptions] = None,
    generated_at: Optional[datetime] = None,
) -> Optional[str]:
    """Export an Org document to HTML.

    Parameters
    ----------
    source_file : str or Path, optional
        Org file to read. Takes precedence over ``source_str``.
    source_str : str, optional
        Org source text
    target_file : str or Path, optional
        When given, the HTML is written here and None is returned
    include_tags : iterable of str, optional
        Export only headline subtrees carrying one of these tags (with the
        titles of the headlines above them). Tags no headline uses are
        ignored; if none is used, nothing is filtered.
    exclude_tags : iterable of str, optional
        Drop headline subtrees carrying one of these tags
    html_title : str, optional
        Document title. Defaults to the ``#+TITLE:`` setting, then to
        ``source_file``.
    css_url : str, optional
        Stylesheet to link from the document head
    naked : bool, default False
        Return only the body, without the HTML/HEAD/BODY envelope
    parser_options : OrgParserOptions, optional
        Org parser configuration
    generated_at : datetime, optional
        Fixed time for the generated-by comment (current time otherwise)

    Returns
    -------
    str or None
        The HTML, or None when it was written to ``target_file``

    Raises
    ------
    ValidationError
        If neither ``source_file`` nor ``source_str`` is given
    FileError
        If ``source_file`` cannot be read
    ParsingError
        If the Org source cannot be parsed
    OutputWriteError
        If ``target_file`` cannot be written

    Examples
    --------
        >>> html = export_org_to_html(source_str="* Hi :draft:\\n", exclude_tags=["draft"], naked=True)
        >>> html
        ''

    """
    if source_file is not None:
        source = read_text_file(source_file)
    elif source_str is not None:
        source = source_str
    else:
        raise ValidationError(
            "Please specify either source_file or source_str", parameter_name="source_file", parameter_value=None
        )

    include = _tag_list(include_tags)
    exclude = _tag_list(exclude_tags)
    doc = OrgParser(parser_options).parse(source)

    title = html_title
    if title is None:
        title = doc.metadata.get("title") or (str(source_file) if source_file is not None else None)

    normalized_include = normalize_include_tags(doc, include)
    if include and normalized_include is None:
        logger.info("None of the include tags %s is used in the document, exporting everything", sorted(include))

    options = HtmlExportOptions(
        naked=naked,
        include_tags=normalized_include,
        exclude_tags=frozenset(exclude) or None,
        title=title,
        css_url=css_url,
        generated_at=generated_at,
    )
    renderer = HtmlRenderer(options)

    if target_file is not None:
        renderer.render(doc, target_file)
        logger.debug("Wrote HTML to %s", target_file)
        return None
    return renderer.render_to_string(doc)


__all__ = ["export_org_to_html"]
