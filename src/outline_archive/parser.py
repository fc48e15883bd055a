"""Parse outline text into an ``OutlineNode`` tree."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterator

from outline_archive.config import DEFAULT_HEADING_MARKER, validate_marker
from outline_archive.schemas import ROOT_HEADING, OutlineNode

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+$")


@dataclass
class _OpenHeading:
    depth: int
    heading: str
    body: list[str] = field(default_factory=list)
    children: list[OutlineNode] = field(default_factory=list)
    line_break: bool = True

    def close(self) -> OutlineNode:
        return OutlineNode(
            heading=self.heading,
            body="".join(self.body),
            children=tuple(self.children),
            line_break=self.line_break,
        )


def parse_outline(text: str, *, marker: str = DEFAULT_HEADING_MARKER) -> OutlineNode:
    """Parse outline text into a root node.

    The root collects everything before the first heading as its body. A
    heading's depth is the length of its marker run; it is attached to the
    nearest preceding heading of smaller depth, so skipped levels are
    tolerated rather than rejected.

    Args:
        text: Outline document text.
        marker: Character repeated to mark heading depth.

    Returns:
        The root node, titled ``ROOT``.
    """
    heading_re = _heading_pattern(validate_marker(marker))
    stack = [_OpenHeading(depth=0, heading=ROOT_HEADING)]

    for line in _iter_lines(text):
        match = heading_re.fullmatch(line.rstrip("\n"))
        if match is None:
            stack[-1].body.append(line)
            continue
        depth = len(match.group(1))
        if depth > stack[-1].depth + 1:
            logger.debug("Heading %r skips from depth %d to %d", match.group(2), stack[-1].depth, depth)
        while stack[-1].depth >= depth:
            _close_top(stack)
        stack.append(_OpenHeading(depth=depth, heading=match.group(2), line_break=line.endswith("\n")))

    while len(stack) > 1:
        _close_top(stack)
    return stack[0].close()


def _heading_pattern(marker: str) -> re.Pattern[str]:
    return re.compile(rf"({re.escape(marker)}+) (.*)")


def _iter_lines(text: str) -> Iterator[str]:
    """Yield lines with their newline kept, so joining them restores ``text``."""
    for match in _LINE_RE.finditer(text):
        yield match.group(0)


def _close_top(stack: list[_OpenHeading]) -> None:
    node = stack.pop().close()
    stack[-1].children.append(node)
