"""Render ``OutlineNode`` trees back to outline text."""

from __future__ import annotations

from outline_archive.config import DEFAULT_HEADING_MARKER, validate_marker
from outline_archive.schemas import OutlineNode


def serialize_outline(tree: OutlineNode, *, marker: str = DEFAULT_HEADING_MARKER) -> str:
    """Render a root node: its body verbatim, then each child at depth 1.

    Every heading starts on a line of its own. When the preceding body does
    not end with a newline (the last line of a document usually), one is
    inserted before the heading.
    """
    marker = validate_marker(marker)
    parts = [tree.body]
    for child in tree.children:
        _render(child, 1, marker, parts)
    return "".join(parts)


def serialize_subtree(node: OutlineNode, depth: int, *, marker: str = DEFAULT_HEADING_MARKER) -> str:
    """Render ``node`` as a heading of ``depth`` followed by its body and children."""
    if depth < 1:
        raise ValueError(f"Heading depth must be at least 1, got {depth}")
    parts: list[str] = []
    _render(node, depth, validate_marker(marker), parts)
    return "".join(parts)


def _render(node: OutlineNode, depth: int, marker: str, parts: list[str]) -> None:
    _start_line(parts)
    parts.append(f"{marker * depth} {node.heading}")
    if node.line_break:
        parts.append("\n")
    if node.body:
        _start_line(parts)
        parts.append(node.body)
    for child in node.children:
        _render(child, depth + 1, marker, parts)


def _start_line(parts: list[str]) -> None:
    """Terminate the last emitted line if it is still open."""
    for part in reversed(parts):
        if part:
            if not part.endswith("\n"):
                parts.append("\n")
            return
