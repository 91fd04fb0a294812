# topmark:header:start
#
#   project      : DocVariant
#   file         : test_build_list.py
#   file_relpath : tests/unit/test_build_list.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Tests for build-list parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from docvariant.build_list import parse_build_list, read_build_list
from docvariant.core.errors import SourceFileNotFoundError, UnmatchedDirectiveError
from tests.conftest import make_config, write_tree


def test_comments_and_blank_lines_are_skipped() -> None:
    text = "# header\n\nintro.rst\n  guide/storage.rst  \n# trailing\n"
    assert parse_build_list(text, "freenas") == [Path("intro.rst"), Path("guide/storage.rst")]


def test_entries_are_filtered_by_tag() -> None:
    text = "a.rst\n#ifdef truenas\nha.rst\n#endif truenas\nb.rst\n"
    assert parse_build_list(text, "freenas") == [Path("a.rst"), Path("b.rst")]
    assert parse_build_list(text, "truenas") == [Path("a.rst"), Path("ha.rst"), Path("b.rst")]


def test_broken_conditional_in_list_fails() -> None:
    with pytest.raises(UnmatchedDirectiveError):
        parse_build_list("#ifdef truenas\nha.rst\n", "freenas")


def test_read_build_list_uses_configured_file(source_dir: Path, tmp_path: Path) -> None:
    """An explicit build list may live outside the source dir."""
    write_tree(tmp_path, {"lists/truenas.txt": "one.rst\n"})
    cfg = make_config(source_dir, build_list=tmp_path / "lists" / "truenas.txt")
    assert read_build_list(cfg) == [Path("one.rst")]


def test_missing_build_list(source_dir: Path) -> None:
    with pytest.raises(SourceFileNotFoundError):
        read_build_list(make_config(source_dir))
