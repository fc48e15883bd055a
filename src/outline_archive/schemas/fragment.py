"""Models describing the fragment picked from a live document."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from outline_archive.schemas.outline import OutlineNode


class AncestorHeading(BaseModel):
    """One ancestor of the archived heading."""

    model_config = ConfigDict(frozen=True)

    heading: str
    body: str = ""


class SourceFragment(BaseModel):
    """A heading selected for archiving, with its context in the source.

    Attributes:
        heading_path: Headings from the top level down to the archived heading.
        indices: Child positions along ``heading_path``.
        subtree: The archived heading with its full subtree.
        ancestors: Ancestors of the archived heading, immediate parent first.
    """

    model_config = ConfigDict(frozen=True)

    heading_path: tuple[str, ...]
    indices: tuple[int, ...]
    subtree: OutlineNode
    ancestors: tuple[AncestorHeading, ...] = ()
