"""Access to the live document a fragment is archived from."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol, Sequence

from outline_archive.config import DEFAULT_ENCODING, DEFAULT_HEADING_MARKER
from outline_archive.exceptions import HeadingNotFoundError, SourceDocumentError
from outline_archive.file_utils import write_text_atomic
from outline_archive.parser import parse_outline
from outline_archive.schemas import AncestorHeading, OutlineNode, SourceFragment
from outline_archive.serializer import serialize_outline
from outline_archive.tree import find_path, remove_child_at, replace_child_at

logger = logging.getLogger(__name__)


class LiveDocument(Protocol):
    """Supplies the heading under the cursor together with its ancestors."""

    def current_fragment(self) -> SourceFragment: ...


class FragmentRemover(Protocol):
    """Deletes an archived heading and its subtree from the live document."""

    def remove_fragment(self, fragment: SourceFragment) -> None: ...


def is_recognized_source(
    path: Path,
    *,
    suffixes: Iterable[str] = (),
    source_dirs: Iterable[Path] = (),
) -> bool:
    """Check whether ``path`` may be used as an archive source.

    Args:
        path: Source document path.
        suffixes: Accepted file suffixes; empty accepts any suffix.
        source_dirs: Directories sources must live under; empty accepts any
            location.
    """
    suffixes = tuple(suffixes)
    if suffixes and path.suffix not in suffixes:
        return False
    dirs = tuple(source_dirs)
    if not dirs:
        return True
    resolved = path.expanduser().resolve()
    return any(resolved.is_relative_to(directory.expanduser().resolve()) for directory in dirs)


class OutlineFile:
    """An outline document stored in a plain text file."""

    def __init__(
        self,
        path: Path,
        *,
        marker: str = DEFAULT_HEADING_MARKER,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self.path = path
        self.marker = marker
        self.encoding = encoding

    def read_tree(self) -> OutlineNode:
        """Parse the file into an outline tree.

        Raises:
            SourceDocumentError: If the file cannot be read or decoded.
        """
        try:
            text = self.path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise SourceDocumentError(f"Failed to read source {self.path}: {exc}") from exc
        return parse_outline(text, marker=self.marker)

    def locate(self, heading_path: Sequence[str]) -> SourceFragment:
        """Find the heading at ``heading_path`` and describe it as a fragment.

        Raises:
            HeadingNotFoundError: If the path is empty or does not exist.
        """
        if not heading_path:
            raise HeadingNotFoundError("Heading path is empty")
        tree = self.read_tree()
        indices = find_path(tree, heading_path)

        chain: list[OutlineNode] = []
        node = tree
        for index in indices:
            node = node.children[index]
            chain.append(node)

        ancestors = tuple(
            AncestorHeading(heading=ancestor.heading, body=ancestor.body)
            for ancestor in reversed(chain[:-1])
        )
        return SourceFragment(
            heading_path=tuple(heading_path),
            indices=indices,
            subtree=chain[-1],
            ancestors=ancestors,
        )

    def remove_fragment(self, fragment: SourceFragment) -> None:
        """Delete the fragment's heading and subtree, then rewrite the file.

        Raises:
            HeadingNotFoundError: If the file changed and the fragment is no
                longer at its recorded position.
            SourceDocumentError: If the file cannot be read or rewritten.
        """
        tree = _remove_at(self.read_tree(), fragment.indices, fragment.heading_path)
        try:
            write_text_atomic(self.path, serialize_outline(tree, marker=self.marker), encoding=self.encoding)
        except OSError as exc:
            raise SourceDocumentError(f"Failed to rewrite source {self.path}: {exc}") from exc
        logger.info("Removed %s from %s", " / ".join(fragment.heading_path), self.path)


@dataclass
class OutlineCursor:
    """A position in an ``OutlineFile``, addressed by its heading path."""

    document: OutlineFile
    heading_path: tuple[str, ...]

    def current_fragment(self) -> SourceFragment:
        return self.document.locate(self.heading_path)


def _remove_at(node: OutlineNode, indices: Sequence[int], headings: Sequence[str]) -> OutlineNode:
    index = indices[0]
    if index >= len(node.children) or node.children[index].heading != headings[0]:
        raise HeadingNotFoundError(f"Heading moved or missing: {headings[0]}")
    if len(indices) == 1:
        return remove_child_at(node, index)
    child = _remove_at(node.children[index], indices[1:], headings[1:])
    return replace_child_at(node, index, child)
