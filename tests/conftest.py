"""Test setup for outline_archive."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from outline_archive.archiver import ArchiveOptions  # noqa: E402


@pytest.fixture
def options() -> ArchiveOptions:
    """Archive options independent of the environment."""
    return ArchiveOptions(marker="*", encoding="utf-8", source_suffixes=(".org",), source_dirs=())


@pytest.fixture
def notes_text() -> str:
    return (
        "#+TITLE: Notes\n"
        "* Projects\n"
        "projects body\n"
        "** Alpha\n"
        "alpha body\n"
        "*** Task one\n"
        "done\n"
        "*** Task two\n"
        "** Beta\n"
        "beta body\n"
        "* Inbox\n"
        "- item\n"
    )
