#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/renderers/base.py
"""Base classes for tree renderers.

This module defines the abstract base class renderers inherit from. A
renderer turns a document tree into an output format; text renderers
produce a string and can additionally write it to a path or stream.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from org2html.ast.nodes import Node
from org2html.exceptions import InvalidOptionsError
from org2html.options.base import BaseRendererOptions
from org2html.utils.io_utils import write_content


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the tree and write the result to ``output``.

        Parameters
        ----------
        doc : Node
            Tree to render, usually a Document
        output : str, Path, IO[bytes] or IO[str]
            File path or file-like object

        Raises
        ------
        OutputWriteError
            If the output path cannot be written

        """
        pass

    def render_to_string(self, doc: Node) -> str:
        """Render the tree to a string, for renderers of text formats.

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write rendered text to a file path or a text/binary stream.

        Examples
        --------
            >>> from io import StringIO
            >>> buffer = StringIO()
            >>> BaseRenderer.write_text_output("<h1>Hi</h1>", buffer)
            >>> buffer.getvalue()
            '<h1>Hi</h1>'

        """
        write_content(text, output)
