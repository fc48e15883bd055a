"""Build single-branch path trees from an archived heading and its ancestors."""

from __future__ import annotations

from typing import Iterable, Sequence

from outline_archive.schemas import AncestorHeading, OutlineNode


def build_path_tree(subtree: OutlineNode, ancestors: Iterable[AncestorHeading]) -> OutlineNode:
    """Wrap ``subtree`` in its ancestors, immediate parent first.

    Each ancestor becomes a node whose only child is the chain built so far, so
    the result is rooted at the outermost ancestor and ends in ``subtree`` with
    its own children intact. With no ancestors the subtree is returned as is.
    """
    node = subtree
    for ancestor in ancestors:
        node = OutlineNode(heading=ancestor.heading, body=ancestor.body, children=(node,))
    return node


def treeify(headings: Sequence[str]) -> OutlineNode:
    """Turn ``["a", "b", "c"]`` into the chain ``a -> b -> c`` with empty bodies."""
    if not headings:
        raise ValueError("treeify requires at least one heading")
    ancestors = [AncestorHeading(heading=heading) for heading in reversed(headings[:-1])]
    return build_path_tree(OutlineNode(heading=headings[-1]), ancestors)
