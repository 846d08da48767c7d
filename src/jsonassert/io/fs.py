"""
Filesystem helpers for jsonassert.io (file protocol baseline).

Responsibilities
- Open a source document as a scoped resource and buffer its full contents.
- Translate OS-level failures into ResourceError with the original cause attached.

Notes
- stdlib-only. All helpers are synchronous.
- The handle is released on every exit path, including read failures.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import BinaryIO

from jsonassert.core.errors import ResourceError

__all__ = ["source_name", "open_read", "read_source"]


def source_name(source: str | os.PathLike[str]) -> str:
    """Identifier used for a source in diagnostic messages."""
    return os.fspath(source)


@contextmanager
def open_read(source: str | os.PathLike[str]) -> Iterator[BinaryIO]:
    """
    Open a file for binary read as a context manager.

    Args:
        source (str | os.PathLike[str]): Path of the document to open.

    Yields:
        BinaryIO: A readable binary handle, closed when the block exits.

    Raises:
        ResourceError: If the file cannot be opened (missing, directory, permissions).
    """
    name = source_name(source)
    try:
        fh = open(source, "rb")
    except OSError as exc:
        raise ResourceError(f"open {name}: {exc.strerror or exc}") from exc
    try:
        yield fh
    finally:
        fh.close()


def read_source(source: str | os.PathLike[str]) -> bytes:
    """
    Read the full contents of a source document.

    Args:
        source (str | os.PathLike[str]): Path of the document.

    Returns:
        bytes: Raw file contents.

    Raises:
        ResourceError: If the file cannot be opened or read.
    """
    with open_read(source) as fh:
        try:
            return fh.read()
        except OSError as exc:
            raise ResourceError(f"read {source_name(source)}: {exc.strerror or exc}") from exc
