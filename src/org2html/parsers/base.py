#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class parsers inherit from. A parser
turns source text into an :mod:`org2html.ast` tree that renderers consume.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from org2html.ast import Document
from org2html.exceptions import InvalidOptionsError
from org2html.options.base import BaseParserOptions
from org2html.utils.io_utils import read_text_file


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    ``parse`` accepts:

    - str: source text
    - Path: file to read
    - bytes: UTF-8 encoded source
    - IO[str] or IO[bytes]: stream to read from

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Document:
        """Parse the input into a Document tree.

        Raises
        ------
        ParsingError
            If the input cannot be parsed
        DependencyError
            If a library the parser needs is not installed

        """
        pass

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes], encoding: str = "utf-8") -> str:
        """Load source text from the supported input types."""
        if isinstance(input_data, str):
            return input_data
        if isinstance(input_data, Path):
            return read_text_file(input_data, encoding=encoding)
        if isinstance(input_data, bytes):
            return input_data.decode(encoding)
        data = input_data.read()
        return data.decode(encoding) if isinstance(data, bytes) else data
