# topmark:header:start
#
#   project      : DocVariant
#   file         : test_public_api.py
#   file_relpath : tests/api/test_public_api.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Tests for the public `docvariant.api` surface."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from docvariant import api
from docvariant.core.errors import ConfigError, UnmatchedDirectiveError
from docvariant.directives.brands import Brand
from tests.conftest import make_config, read, write_tree

if TYPE_CHECKING:
    from pathlib import Path


def test_render_text_scenarios() -> None:
    """Conditional blocks are dropped or unwrapped depending on the tag."""
    assert api.render_text("#ifdef truenas\nHello\n#endif truenas\n", tag="freenas") == ""
    assert api.render_text("#ifdef freenas\nHello\n#endif freenas\n", tag="freenas") == "Hello\n"


def test_render_text_substitutes(tmp_path: Path) -> None:
    text = "%brandplain% %chapternum% %docurl%\n"
    out = api.render_text(text, tag="bsg-acme", chapter_index=2, doc_url="u", source_dir=tmp_path)
    assert out == "TrueNAS 2 u\n"


def test_render_text_with_custom_brands() -> None:
    brands = (Brand(name="AcmeOS", tags=("acme",)),)
    assert api.render_text("%brandlower%\n", tag="acme", brands=brands) == "acmeos\n"


def test_render_text_resolves_includes(source_dir: Path) -> None:
    write_tree(source_dir, {"sub.rst": "text\n"})
    out = api.render_text("  #include sub.rst\n", tag="freenas", source_dir=source_dir)
    assert out == "  text\n"


def test_render_text_errors_propagate() -> None:
    with pytest.raises(UnmatchedDirectiveError, match="foo"):
        api.render_text("#ifdef foo\n", tag="freenas")


def test_render_file_does_not_write(source_dir: Path) -> None:
    write_tree(source_dir, {"doc.rst": "%brandplain%\n"})
    cfg = make_config(source_dir, tag="truenas")
    assert api.render_file(source_dir / "doc.rst", cfg, chapter_index=1) == "TrueNAS\n"
    assert not cfg.output_dir.exists()


def test_build_accepts_mapping(source_dir: Path, tmp_path: Path) -> None:
    """A plain mapping is normalized into a frozen config."""
    write_tree(source_dir, {"build-list.txt": "doc.rst\n", "doc.rst": "%brandplain%\n"})
    result = api.build(
        {
            "tag": "acme",
            "source_dir": source_dir,
            "output_dir": tmp_path / "out",
            "brands": {"acme": {"name": "AcmeOS"}},
        }
    )
    assert len(result.documents) == 1
    assert read(tmp_path / "out" / "doc.rst") == "AcmeOS\n"


def test_build_mapping_requires_tag(source_dir: Path) -> None:
    with pytest.raises(ConfigError):
        api.build({"source_dir": source_dir})
