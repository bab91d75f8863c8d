#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docrender/utils/io_utils.py
"""Output writing helpers shared by renderers and the CLI."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

from docrender.exceptions import OutputWriteError


def _is_binary_stream(output: object) -> bool:
    # Concrete types first, then io base classes, then the mode attribute
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO) or isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text content to a file path or a text/binary stream.

    Parameters
    ----------
    content : str
        Text to write; encoded as UTF-8 for paths and binary streams
    output : str, Path, IO[bytes] or IO[str]
        Output destination

    Raises
    ------
    OutputWriteError
        If the destination cannot be written
    TypeError
        If ``output`` is neither a path nor a writable stream

    Examples
    --------
    Write to a binary buffer:
        >>> buffer = BytesIO()
        >>> write_content("<p>x</p>", buffer)
        >>> buffer.getvalue()
        b'<p>x</p>'

    """
    if isinstance(output, (str, Path)):
        try:
            Path(output).write_text(content, encoding="utf-8")
        except OSError as e:
            raise OutputWriteError(str(output), original_error=e) from e
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    try:
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
    except OSError as e:
        raise OutputWriteError(str(getattr(output, "name", "<stream>")), original_error=e) from e


__all__ = ["write_content"]
