"""outline_archive: move outline headings into an archive, keeping their ancestors."""

from outline_archive.archiver import ArchiveOptions, archive_current, archive_fragment, archive_heading
from outline_archive.document import FragmentRemover, LiveDocument, OutlineFile
from outline_archive.exceptions import (
    ArchiveReadError,
    ArchiveWriteError,
    ConfigurationError,
    HeadingNotFoundError,
    OutlineArchiveError,
    SourceDocumentError,
    SourceNotRecognizedError,
)
from outline_archive.merger import merge_outline
from outline_archive.parser import parse_outline
from outline_archive.path_builder import build_path_tree, treeify
from outline_archive.schemas import ROOT_HEADING, AncestorHeading, ArchiveResult, OutlineNode, SourceFragment
from outline_archive.serializer import serialize_outline, serialize_subtree

__all__ = [
    "ROOT_HEADING",
    "AncestorHeading",
    "ArchiveOptions",
    "ArchiveReadError",
    "ArchiveResult",
    "ArchiveWriteError",
    "ConfigurationError",
    "FragmentRemover",
    "HeadingNotFoundError",
    "LiveDocument",
    "OutlineArchiveError",
    "OutlineFile",
    "OutlineNode",
    "SourceDocumentError",
    "SourceFragment",
    "SourceNotRecognizedError",
    "archive_current",
    "archive_fragment",
    "archive_heading",
    "build_path_tree",
    "merge_outline",
    "parse_outline",
    "serialize_outline",
    "serialize_subtree",
    "treeify",
]
