"""Archive pipeline: live fragment -> merged archive document."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from outline_archive.config import (
    OUTLINE_ARCHIVE_ENCODING,
    OUTLINE_ARCHIVE_HEADING_MARKER,
    OUTLINE_ARCHIVE_SOURCE_DIRS,
    OUTLINE_ARCHIVE_SOURCE_SUFFIXES,
)
from outline_archive.document import (
    FragmentRemover,
    LiveDocument,
    OutlineCursor,
    OutlineFile,
    is_recognized_source,
)
from outline_archive.exceptions import (
    ArchiveReadError,
    ArchiveWriteError,
    ConfigurationError,
    SourceNotRecognizedError,
)
from outline_archive.file_utils import read_text_or_empty, write_text_atomic
from outline_archive.merger import merge_outline
from outline_archive.parser import parse_outline
from outline_archive.path_builder import build_path_tree
from outline_archive.schemas import ArchiveResult, SourceFragment
from outline_archive.serializer import serialize_outline
from outline_archive.tree import count_nodes

logger = logging.getLogger(__name__)


@dataclass
class ArchiveOptions:
    """Options for archive operations.

    Attributes:
        marker: Character repeated to mark heading depth.
        encoding: Text encoding of the source and archive documents.
        source_suffixes: File suffixes accepted for source documents.
        source_dirs: Directories source documents must live under. Empty
            accepts any location.
        keep_source: If True, leave the fragment in the source document.
    """

    marker: str = OUTLINE_ARCHIVE_HEADING_MARKER
    encoding: str = OUTLINE_ARCHIVE_ENCODING
    source_suffixes: tuple[str, ...] = OUTLINE_ARCHIVE_SOURCE_SUFFIXES
    source_dirs: tuple[Path, ...] = OUTLINE_ARCHIVE_SOURCE_DIRS
    keep_source: bool = False


def archive_fragment(
    fragment: SourceFragment,
    *,
    archive_path: Path | None,
    remove_fragment: Callable[[SourceFragment], None],
    source_path: Path | None = None,
    options: ArchiveOptions | None = None,
) -> ArchiveResult:
    """Merge ``fragment`` into the archive document, then drop it from the source.

    The archive is read, merged and rewritten in one pass. The fragment is only
    removed from its source after the archive write succeeded, so a failure
    leaves both documents unchanged.

    Args:
        fragment: The heading to archive, with its ancestors.
        archive_path: Archive document to merge into.
        remove_fragment: Callback deleting the fragment from its source.
        source_path: Source document path, checked against the accepted
            sources when given.
        options: Processing options. Uses defaults if None.

    Returns:
        Details of the completed operation.

    Raises:
        ConfigurationError: If no archive path is configured.
        SourceNotRecognizedError: If ``source_path`` is not an accepted source.
        ArchiveReadError: If the archive document cannot be read or decoded.
        ArchiveWriteError: If the archive document cannot be written.
    """
    opts = options or ArchiveOptions()
    archive_path = _check_preconditions(archive_path, source_path, opts)
    return _archive(fragment, archive_path, remove_fragment, source_path, opts)


def archive_current(
    document: LiveDocument,
    remover: FragmentRemover,
    *,
    archive_path: Path | None,
    source_path: Path | None = None,
    options: ArchiveOptions | None = None,
) -> ArchiveResult:
    """Archive the heading ``document`` currently points at.

    Configuration and source checks run before the document is consulted.
    """
    opts = options or ArchiveOptions()
    archive_path = _check_preconditions(archive_path, source_path, opts)
    return _archive(document.current_fragment(), archive_path, remover.remove_fragment, source_path, opts)


def archive_heading(
    source_path: Path,
    heading_path: Sequence[str],
    *,
    archive_path: Path | None,
    options: ArchiveOptions | None = None,
) -> ArchiveResult:
    """Move the heading at ``heading_path`` of a source file into the archive file."""
    opts = options or ArchiveOptions()
    source = OutlineFile(source_path, marker=opts.marker, encoding=opts.encoding)
    return archive_current(
        OutlineCursor(source, tuple(heading_path)),
        source,
        archive_path=archive_path,
        source_path=source_path,
        options=opts,
    )


def _check_preconditions(archive_path: Path | None, source_path: Path | None, opts: ArchiveOptions) -> Path:
    if archive_path is None:
        raise ConfigurationError(
            "No archive target configured; pass an archive path or set OUTLINE_ARCHIVE_TARGET"
        )
    if source_path is not None and not is_recognized_source(
        source_path, suffixes=opts.source_suffixes, source_dirs=opts.source_dirs
    ):
        raise SourceNotRecognizedError(f"{source_path} is not a recognized archive source")
    return archive_path


def _archive(
    fragment: SourceFragment,
    archive_path: Path,
    remove_fragment: Callable[[SourceFragment], None],
    source_path: Path | None,
    opts: ArchiveOptions,
) -> ArchiveResult:
    created = not archive_path.exists()
    try:
        archive_text = read_text_or_empty(archive_path, encoding=opts.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise ArchiveReadError(f"Failed to read archive {archive_path}: {exc}") from exc
    archive_tree = parse_outline(archive_text, marker=opts.marker)
    path_tree = build_path_tree(fragment.subtree, fragment.ancestors)
    merged = merge_outline(archive_tree, path_tree)

    try:
        write_text_atomic(archive_path, serialize_outline(merged, marker=opts.marker), encoding=opts.encoding)
    except OSError as exc:
        raise ArchiveWriteError(f"Failed to write archive {archive_path}: {exc}") from exc
    logger.info("Archived %s into %s", " / ".join(fragment.heading_path), archive_path)

    if not opts.keep_source:
        remove_fragment(fragment)

    return ArchiveResult(
        archive_path=archive_path,
        source_path=source_path,
        heading_path=fragment.heading_path,
        archived_nodes=count_nodes(fragment.subtree),
        created_archive=created,
    )
