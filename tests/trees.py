"""Shorthand for building outline trees in tests."""

from __future__ import annotations

from outline_archive.schemas import ROOT_HEADING, OutlineNode


def node(heading: str, body: str = "", *children: OutlineNode) -> OutlineNode:
    return OutlineNode(heading=heading, body=body, children=children)


def root(body: str = "", *children: OutlineNode) -> OutlineNode:
    return node(ROOT_HEADING, body, *children)


def headings(tree: OutlineNode) -> list[str]:
    return [child.heading for child in tree.children]
