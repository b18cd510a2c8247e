#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/org2html/utils/io_utils.py
"""I/O helpers for reading Org sources and writing rendered HTML.

These are used by the convenience API and the CLI; the renderer and the
tree never touch the filesystem themselves.

"""

from __future__ import annotations

import builtins
import io
from pathlib import Path
from typing import IO, Union, cast

from org2html.exceptions import FileAccessError, FileNotFoundError, OutputWriteError


def read_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a text file, translating OS errors into org2html exceptions.

    Parameters
    ----------
    path : str or Path
        File to read
    encoding : str, default "utf-8"
        Text encoding

    Returns
    -------
    str
        File contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file exists but cannot be read or decoded

    """
    path = Path(path)
    try:
        return path.read_text(encoding=encoding)
    except builtins.FileNotFoundError as e:
        raise FileNotFoundError(str(path), original_error=e) from e
    except (OSError, UnicodeDecodeError) as e:
        raise FileAccessError(str(path), original_error=e) from e


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]], encoding: str = "utf-8") -> None:
    """Write text to a file path or to a binary or text stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Destination. Paths are created or overwritten; streams are written
        to as-is, encoding first when the stream is binary.
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Raises
    ------
    OutputWriteError
        If the destination path cannot be written
    TypeError
        If ``output`` is neither a path nor a writable stream

    """
    if isinstance(output, (str, Path)):
        path = Path(output)
        try:
            path.write_text(content, encoding=encoding)
        except OSError as e:
            raise OutputWriteError(str(path), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    if isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        # Fallback for file-like objects outside the io hierarchy
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode(encoding))
    else:
        cast(IO[str], output).write(content)
