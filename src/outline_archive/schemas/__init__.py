"""Shared schemas for outline_archive."""

from outline_archive.schemas.archive import ArchiveResult
from outline_archive.schemas.fragment import AncestorHeading, SourceFragment
from outline_archive.schemas.outline import ROOT_HEADING, OutlineNode

__all__ = ["ROOT_HEADING", "AncestorHeading", "ArchiveResult", "OutlineNode", "SourceFragment"]
