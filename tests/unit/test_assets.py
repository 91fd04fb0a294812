# topmark:header:start
#
#   project      : DocVariant
#   file         : test_assets.py
#   file_relpath : tests/unit/test_assets.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Tests for the copy-list driven asset copier."""

from __future__ import annotations

from pathlib import Path

import pytest

from docvariant.assets import copy_assets, load_patterns, select_assets
from docvariant.core.errors import SourceFileNotFoundError
from tests.conftest import make_config, read, write_tree

FILES: dict[str, str] = {
    "images/a.png": "A",
    "images/sub/b.png": "B",
    "images/raw.psd": "PSD",
    "_static/custom.css": "css",
    "conf.py": "conf",
    "index.rst": "doc",
}


def test_load_patterns_skips_comments() -> None:
    text = "# assets\n\nimages/**/*.png\n  conf.py \n"
    assert load_patterns(text) == ["images/**/*.png", "conf.py"]


def test_select_assets_with_gitwildmatch(source_dir: Path) -> None:
    """Patterns follow gitignore semantics, including negation."""
    write_tree(source_dir, FILES)
    selected = select_assets(source_dir, ["images/", "!*.psd", "_static/"])
    assert [p.as_posix() for p in selected] == [
        "_static/custom.css",
        "images/a.png",
        "images/sub/b.png",
    ]


def test_select_assets_excludes_documents_and_output(source_dir: Path) -> None:
    write_tree(source_dir, {**FILES, "processed/old.rst": "old"})
    selected = select_assets(
        source_dir,
        ["*.rst", "conf.py"],
        exclude=[Path("index.rst")],
        output_dir=(source_dir / "processed").resolve(),
    )
    assert [p.as_posix() for p in selected] == ["conf.py"]


def test_copy_assets(source_dir: Path) -> None:
    write_tree(source_dir, {**FILES, "copy-list.txt": "images/**/*.png\nconf.py\n"})
    cfg = make_config(source_dir)

    copied = copy_assets(cfg)

    assert [p.as_posix() for p in copied] == ["conf.py", "images/a.png", "images/sub/b.png"]
    assert read(cfg.output_dir / "images/sub/b.png") == "B"
    assert not (cfg.output_dir / "images/raw.psd").exists()


def test_missing_default_copy_list_copies_nothing(source_dir: Path) -> None:
    write_tree(source_dir, FILES)
    cfg = make_config(source_dir)
    assert copy_assets(cfg) == []
    assert not cfg.output_dir.exists()


def test_missing_explicit_copy_list_fails(source_dir: Path) -> None:
    cfg = make_config(source_dir, copy_list=source_dir / "assets.txt")
    with pytest.raises(SourceFileNotFoundError):
        copy_assets(cfg)


def test_dry_run_selects_without_copying(source_dir: Path) -> None:
    write_tree(source_dir, {**FILES, "copy-list.txt": "conf.py\n"})
    cfg = make_config(source_dir, dry_run=True)
    assert [p.as_posix() for p in copy_assets(cfg)] == ["conf.py"]
    assert not cfg.output_dir.exists()
