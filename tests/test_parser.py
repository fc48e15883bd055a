"""Tests for the outline parser."""

from __future__ import annotations

import pytest

from outline_archive.exceptions import ConfigurationError
from outline_archive.parser import parse_outline
from outline_archive.schemas import ROOT_HEADING, OutlineNode
from trees import headings, node, root


class TestParseOutline:
    """Tests for parse_outline."""

    def test_empty_document(self) -> None:
        assert parse_outline("") == root()

    def test_no_headings(self) -> None:
        """A document without headings is all root body."""
        text = "just text\nbut **bold** is not a heading\n"
        assert parse_outline(text) == root(text)

    def test_root_heading_sentinel(self) -> None:
        assert parse_outline("* A\n").heading == ROOT_HEADING

    def test_preamble_becomes_root_body(self, notes_text: str) -> None:
        tree = parse_outline(notes_text)
        assert tree.body == "#+TITLE: Notes\n"
        assert headings(tree) == ["Projects", "Inbox"]

    def test_nested_structure(self, notes_text: str) -> None:
        tree = parse_outline(notes_text)
        projects = tree.children[0]

        assert projects.body == "projects body\n"
        assert headings(projects) == ["Alpha", "Beta"]
        alpha = projects.children[0]
        assert alpha.body == "alpha body\n"
        assert headings(alpha) == ["Task one", "Task two"]
        assert alpha.children[0].body == "done\n"
        assert alpha.children[1].body == ""
        assert tree.children[1] == node("Inbox", "- item\n")

    def test_body_stops_at_first_child(self) -> None:
        tree = parse_outline("* A\nintro\n** B\nb body\n")
        assert tree.children[0].body == "intro\n"
        assert tree.children[0].children[0].body == "b body\n"

    def test_body_kept_verbatim(self) -> None:
        body = "  indented\n\n\ttabbed  \n * indented star is not a heading\n"
        tree = parse_outline("* A\n" + body)
        assert tree.children[0].body == body

    def test_heading_text_verbatim(self) -> None:
        tree = parse_outline("*  spaced  :tag:\n** * starred\n")
        assert tree.children[0].heading == " spaced  :tag:"
        assert tree.children[0].children[0].heading == "* starred"

    def test_empty_heading(self) -> None:
        assert parse_outline("* \nbody\n") == root("", node("", "body\n"))

    def test_marker_without_space_is_body(self) -> None:
        assert parse_outline("*A\n***\n") == root("*A\n***\n")

    def test_last_heading_without_newline(self) -> None:
        tree = parse_outline("x\n* A")
        assert tree == root("x\n", OutlineNode(heading="A", line_break=False))

    def test_heading_lines_with_newline_keep_line_break(self) -> None:
        tree = parse_outline("* A\n** B\n")
        assert tree.children[0].line_break
        assert tree.children[0].children[0].line_break

    def test_body_without_trailing_newline(self) -> None:
        assert parse_outline("* A\ntail") == root("", node("A", "tail"))

    def test_deep_nesting(self) -> None:
        text = "".join(f"{'*' * depth} H{depth}\n" for depth in range(1, 30))
        tree = parse_outline(text)
        for depth in range(1, 30):
            assert len(tree.children) == 1
            tree = tree.children[0]
            assert tree.heading == f"H{depth}"
        assert tree.children == ()

    def test_return_to_shallower_level(self) -> None:
        tree = parse_outline("* A\n** B\n*** C\n* D\n** E\n")
        assert tree == root(
            "",
            node("A", "", node("B", "", node("C"))),
            node("D", "", node("E")),
        )

    def test_skipped_level_attaches_to_nearest_shallower(self) -> None:
        """A heading that skips levels still nests under the last shallower heading."""
        tree = parse_outline("* A\n*** C\n** B\n")
        assert tree == root("", node("A", "", node("C"), node("B")))

    def test_skipped_level_at_top(self) -> None:
        tree = parse_outline("** A\n* B\n")
        assert headings(tree) == ["A", "B"]

    def test_custom_marker(self) -> None:
        tree = parse_outline("# A\n## B\n* body\n", marker="#")
        assert tree == root("", node("A", "", node("B", "* body\n")))

    @pytest.mark.parametrize("marker", ["", "**", " "])
    def test_invalid_marker(self, marker: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_outline("* A\n", marker=marker)
