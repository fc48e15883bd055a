"""File helpers for reading and rewriting outline documents."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from outline_archive.config import DEFAULT_ENCODING


def read_text_or_empty(path: Path, encoding: str = DEFAULT_ENCODING) -> str:
    """Read a text file, treating a missing file as an empty document.

    Args:
        path: Path to the file to read.
        encoding: Text encoding to use.

    Returns:
        The file contents, or an empty string if the file does not exist.
    """
    try:
        return path.read_text(encoding=encoding)
    except FileNotFoundError:
        return ""


def write_text_atomic(path: Path, content: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Replace the contents of ``path`` in a single step.

    The text is written to a temporary file next to ``path`` and moved over it
    with ``os.replace``, so readers see either the old or the new document.

    Args:
        path: Path to the file to write.
        content: Text content to write.
        encoding: Text encoding to use.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
