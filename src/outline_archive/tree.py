"""Pure operations on outline trees.

Every function returns a new ``OutlineNode``; inputs are never modified.
"""

from __future__ import annotations

from typing import Sequence

from outline_archive.exceptions import HeadingNotFoundError
from outline_archive.schemas import OutlineNode


def replace_child_at(tree: OutlineNode, index: int, child: OutlineNode) -> OutlineNode:
    """Return ``tree`` with the child at ``index`` replaced by ``child``."""
    children = list(tree.children)
    children[index] = child
    return tree.model_copy(update={"children": tuple(children)})


def append_child(tree: OutlineNode, child: OutlineNode) -> OutlineNode:
    """Return ``tree`` with ``child`` added as a new branch.

    New branches are placed *before* the existing children, so a freshly
    archived heading shows up first under its parent.
    """
    return tree.model_copy(update={"children": (child, *tree.children)})


def remove_child_at(tree: OutlineNode, index: int) -> OutlineNode:
    """Return ``tree`` without the child at ``index``."""
    children = list(tree.children)
    del children[index]
    return tree.model_copy(update={"children": tuple(children)})


def find_child(tree: OutlineNode, heading: str) -> int | None:
    """Return the index of the first child titled ``heading``, if any."""
    for index, child in enumerate(tree.children):
        if child.heading == heading:
            return index
    return None


def find_path(tree: OutlineNode, headings: Sequence[str]) -> tuple[int, ...]:
    """Resolve a heading path to child indices, first match winning at each level.

    Raises:
        HeadingNotFoundError: If any heading along the path is missing.
    """
    indices: list[int] = []
    node = tree
    for depth, heading in enumerate(headings):
        index = find_child(node, heading)
        if index is None:
            trail = " / ".join(headings[: depth + 1])
            raise HeadingNotFoundError(f"Heading not found: {trail}")
        indices.append(index)
        node = node.children[index]
    return tuple(indices)


def count_nodes(tree: OutlineNode) -> int:
    """Count ``tree`` and all of its descendants."""
    return 1 + sum(count_nodes(child) for child in tree.children)
