"""Merge a path tree into an archive tree."""

from __future__ import annotations

import logging

from outline_archive.schemas import OutlineNode
from outline_archive.tree import append_child, find_child, replace_child_at

logger = logging.getLogger(__name__)


def merge_outline(tree: OutlineNode, path_node: OutlineNode) -> OutlineNode:
    """Merge ``path_node`` under ``tree`` without duplicating sibling branches.

    Children of ``tree`` are scanned in order for the first one whose heading
    equals ``path_node.heading``:

    * On a match, the existing child keeps its heading and body and each child
      of ``path_node`` is merged into it in turn. The incoming body is dropped.
    * Otherwise ``path_node`` is grafted whole as the first child of ``tree``.

    Several incoming children are merged last to first so that grafted
    branches end up in their original order ahead of existing siblings.

    Args:
        tree: Archive node to merge into (the document root at the top level).
        path_node: Head of the incoming path tree.

    Returns:
        A new tree; neither argument is modified.
    """
    index = find_child(tree, path_node.heading)
    if index is None:
        logger.debug("Grafting %r under %r", path_node.heading, tree.heading)
        return append_child(tree, path_node)

    merged = tree.children[index]
    # Reversed: merging forward would prepend each graft in turn and flip
    # the incoming order. Grafts still land ahead of existing siblings.
    for child in reversed(path_node.children):
        merged = merge_outline(merged, child)
    return replace_child_at(tree, index, merged)
