"""Outline tree models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

ROOT_HEADING = "ROOT"


class OutlineNode(BaseModel):
    """An immutable outline heading with its body text and child headings.

    Two nodes are equal when their headings, bodies and children are equal,
    with children compared position by position.

    Attributes:
        heading: Heading text without the depth marker.
        body: Raw text owned by the heading, up to its first child heading.
        children: Child headings in document order.
        line_break: Whether the heading line ends with a newline. Only the
            final heading of a document can lack one.
    """

    model_config = ConfigDict(frozen=True)

    heading: str
    body: str = ""
    children: tuple["OutlineNode", ...] = ()
    line_break: bool = True
