"""Command line entry point for outline_archive."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from outline_archive.archiver import ArchiveOptions, archive_heading
from outline_archive.config import (
    OUTLINE_ARCHIVE_HEADING_MARKER,
    OUTLINE_ARCHIVE_SOURCE_DIRS,
    OUTLINE_ARCHIVE_SOURCE_SUFFIXES,
    OUTLINE_ARCHIVE_TARGET,
)
from outline_archive.exceptions import OutlineArchiveError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="outline-archive",
        description="Move an outline heading and its subtree into an archive file, keeping its ancestor headings.",
    )
    parser.add_argument("source", type=Path, help="Outline file holding the heading to archive")
    parser.add_argument(
        "-H",
        "--heading",
        dest="headings",
        action="append",
        required=True,
        help="Heading on the path to the archived heading, outermost first (repeat per level)",
    )
    parser.add_argument("--archive", type=Path, help="Archive file (defaults to $OUTLINE_ARCHIVE_TARGET)")
    parser.add_argument("--marker", default=OUTLINE_ARCHIVE_HEADING_MARKER, help="Heading marker character")
    parser.add_argument("--keep-source", action="store_true", help="Do not remove the heading from the source")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = ArchiveOptions(
        marker=args.marker,
        source_suffixes=OUTLINE_ARCHIVE_SOURCE_SUFFIXES,
        source_dirs=OUTLINE_ARCHIVE_SOURCE_DIRS,
        keep_source=args.keep_source,
    )
    try:
        result = archive_heading(
            args.source,
            args.headings,
            archive_path=args.archive or OUTLINE_ARCHIVE_TARGET,
            options=options,
        )
    except OutlineArchiveError as exc:
        logger.debug("Archive failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    verb = "Created" if result.created_archive else "Updated"
    print(f"{verb} {result.archive_path}: archived {' / '.join(result.heading_path)} ({result.archived_nodes} headings)")
    return 0


if __name__ == "__main__":
    sys.exit(main())
