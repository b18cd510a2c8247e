#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/cli.py
"""Command line interface for org2html.

Usage::

    org2html notes.org -o notes.html --exclude-tag noexport
    python -m org2html notes.org --include-tag work --naked

"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional

from org2html._version import __version__
from org2html.api import export_org_to_html
from org2html.exceptions import (
    DependencyError,
    FileError,
    Org2HtmlError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from org2html.logging_utils import configure_logging
from org2html.options.html import HtmlExportOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
EXIT_RENDERING_ERROR = 7

LOG_LEVEL_ENV_VAR = "ORG2HTML_LOG_LEVEL"


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR

    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _option_help(name: str) -> str:
    return HtmlExportOptions.__dataclass_fields__[name].metadata["help"]


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="org2html",
        description="Export Org-Mode documents to HTML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full HTML document on stdout
  org2html notes.org

  # Only the subtrees tagged :work:, written to a file
  org2html notes.org --include-tag work -o work.html

  # Body only, without private subtrees
  org2html notes.org --naked --exclude-tag private
""",
    )
    parser.add_argument("source", metavar="SOURCE", help="Org file to export")
    parser.add_argument("-o", "--out", metavar="FILE", help="Write HTML to FILE instead of stdout")
    parser.add_argument(
        "--include-tag",
        dest="include_tags",
        action="append",
        metavar="TAG",
        help=_option_help("include_tags") + " (repeatable)",
    )
    parser.add_argument(
        "--exclude-tag",
        dest="exclude_tags",
        action="append",
        metavar="TAG",
        help=_option_help("exclude_tags") + " (repeatable)",
    )
    parser.add_argument("--title", help=_option_help("title") + " (default: #+TITLE:, then the file name)")
    parser.add_argument("--css-url", metavar="URL", help=_option_help("css_url"))
    parser.add_argument("--naked", action="store_true", help=_option_help("naked"))
    parser.add_argument(
        "--log-level",
        default=os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING"),
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Logging level (default: WARNING, or ${LOG_LEVEL_ENV_VAR})",
    )
    parser.add_argument("--log-file", metavar="FILE", help="Also write log messages to FILE")
    parser.add_argument(
        "--trace", action="store_true", help="Debug logging with timestamps and logger names (implies DEBUG)"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(args: Optional[list[str]] = None) -> int:
    """Run the command line interface.

    Parameters
    ----------
    args : list of str, optional
        Arguments to parse instead of ``sys.argv[1:]``

    Returns
    -------
    int
        Process exit code

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        html = export_org_to_html(
            source_file=parsed_args.source,
            target_file=parsed_args.out,
            include_tags=parsed_args.include_tags,
            exclude_tags=parsed_args.exclude_tags,
            html_title=parsed_args.title,
            css_url=parsed_args.css_url,
            naked=parsed_args.naked,
        )
    except Org2HtmlError as e:
        logger.debug("Export failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    if html is not None:
        sys.stdout.write(html)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
