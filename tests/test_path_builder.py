"""Tests for path tree construction."""

from __future__ import annotations

import pytest

from outline_archive.path_builder import build_path_tree, treeify
from outline_archive.schemas import AncestorHeading
from trees import node


class TestBuildPathTree:
    """Tests for build_path_tree."""

    def test_no_ancestors_returns_subtree(self) -> None:
        subtree = node("Task", "t\n", node("Note"))
        assert build_path_tree(subtree, []) is subtree

    def test_nearest_ancestor_is_direct_parent(self) -> None:
        subtree = node("Task", "t\n", node("Note"), node("Log"))
        ancestors = [
            AncestorHeading(heading="Alpha", body="alpha\n"),
            AncestorHeading(heading="Projects", body="projects\n"),
        ]

        result = build_path_tree(subtree, ancestors)

        assert result == node(
            "Projects",
            "projects\n",
            node("Alpha", "alpha\n", subtree),
        )

    def test_subtree_children_preserved(self) -> None:
        subtree = node("Task", "", node("A"), node("B"), node("C"))
        result = build_path_tree(subtree, [AncestorHeading(heading="P")])
        assert result.children[0].children == subtree.children

    def test_accepts_generator(self) -> None:
        ancestors = (AncestorHeading(heading=h) for h in ["B", "A"])
        assert build_path_tree(node("C"), ancestors) == node("A", "", node("B", "", node("C")))


class TestTreeify:
    """Tests for treeify."""

    def test_chain(self) -> None:
        assert treeify(["a", "b", "c"]) == node("a", "", node("b", "", node("c")))

    def test_single(self) -> None:
        assert treeify(["a"]) == node("a")

    def test_empty(self) -> None:
        with pytest.raises(ValueError):
            treeify([])
