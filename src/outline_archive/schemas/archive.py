"""Archive operation output model."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel


class ArchiveResult(BaseModel):
    """Outcome of a completed archive operation."""

    archive_path: Path
    source_path: Path | None = None
    heading_path: tuple[str, ...]
    archived_nodes: int
    created_archive: bool = False
