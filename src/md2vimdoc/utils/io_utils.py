#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2vimdoc/utils/io_utils.py
"""I/O utilities for reading Markdown input and writing help output."""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from md2vimdoc.exceptions import FileAccessError, FileNotFoundError, OutputWriteError

logger = logging.getLogger(__name__)


def read_text_file(path: Union[str, Path]) -> str:
    """Read a UTF-8 text file.

    Parameters
    ----------
    path : str or Path
        File to read

    Returns
    -------
    str
        File contents

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the path is a directory, is unreadable, or is not valid UTF-8

    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(file_path=str(file_path))
    if file_path.is_dir():
        raise FileAccessError(str(file_path), message=f"Unable to read from file: {file_path} is a directory")

    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FileAccessError(
            str(file_path), message=f"Unable to read from file: {file_path} is not valid UTF-8", original_error=e
        ) from e
    except OSError as e:
        raise FileAccessError(str(file_path), original_error=e) from e


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a path or file-like object.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes] or IO[str]
        Destination. Paths are overwritten and encoded as UTF-8. Binary
        streams receive UTF-8 bytes.

    Raises
    ------
    OutputWriteError
        If a path destination cannot be created or written
    TypeError
        If ``output`` is not a path or writable stream

    """
    if isinstance(output, (str, Path)):
        output_path = Path(output)
        try:
            # newline="" keeps "\n" line endings on every platform
            with output_path.open("w", encoding="utf-8", newline="") as handle:
                handle.write(content)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        logger.debug("Wrote %d characters to %s", len(content), output_path)
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if isinstance(output, BytesIO):
        is_binary_mode = True
    elif isinstance(output, StringIO):
        is_binary_mode = False
    elif isinstance(output, io.TextIOBase):
        is_binary_mode = False
    elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        is_binary_mode = True
    else:
        mode = getattr(output, "mode", "")
        is_binary_mode = isinstance(mode, str) and "b" in mode

    if is_binary_mode:
        cast(IO[bytes], output).write(content.encode("utf-8"))
    else:
        cast(IO[str], output).write(content)
