"""Local configuration for outline_archive."""

from __future__ import annotations

import os
from pathlib import Path

from outline_archive.exceptions import ConfigurationError

DEFAULT_HEADING_MARKER = "*"
DEFAULT_SOURCE_SUFFIXES = ".org"
DEFAULT_ENCODING = "utf-8"


def validate_marker(marker: str) -> str:
    """Return ``marker`` if it is a single non-space character.

    Raises:
        ConfigurationError: If the marker is empty, longer than one character
            or whitespace.
    """
    if len(marker) != 1 or marker.isspace():
        raise ConfigurationError(
            f"Heading marker must be a single non-space character, got {marker!r}"
        )
    return marker


def _split_env_list(value: str, sep: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in value.split(sep) if item.strip())


def _optional_path(value: str | None) -> Path | None:
    if not value:
        return None
    return Path(value).expanduser()


# Archive document every fragment is merged into; unset means "not configured".
OUTLINE_ARCHIVE_TARGET = _optional_path(os.getenv("OUTLINE_ARCHIVE_TARGET"))
OUTLINE_ARCHIVE_HEADING_MARKER = os.getenv("OUTLINE_ARCHIVE_HEADING_MARKER", DEFAULT_HEADING_MARKER)
OUTLINE_ARCHIVE_SOURCE_SUFFIXES = _split_env_list(
    os.getenv("OUTLINE_ARCHIVE_SOURCE_SUFFIXES", DEFAULT_SOURCE_SUFFIXES), ","
)
OUTLINE_ARCHIVE_SOURCE_DIRS = tuple(
    Path(item).expanduser() for item in _split_env_list(os.getenv("OUTLINE_ARCHIVE_SOURCE_DIRS", ""), os.pathsep)
)
OUTLINE_ARCHIVE_ENCODING = os.getenv("OUTLINE_ARCHIVE_ENCODING", DEFAULT_ENCODING)
