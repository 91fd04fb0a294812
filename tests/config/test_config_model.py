# topmark:header:start
#
#   project      : DocVariant
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Tests for config discovery, layering and freezing."""

from __future__ import annotations

from pathlib import Path

import pytest

from docvariant.config import Config, MutableConfig
from docvariant.constants import DEFAULT_DOC_URL
from docvariant.core.errors import ConfigError
from docvariant.directives.brands import DEFAULT_BRANDS, Brand
from tests.conftest import write_tree


def test_freeze_requires_tag() -> None:
    """A config without tag cannot be frozen."""
    with pytest.raises(ConfigError, match="tag"):
        MutableConfig.from_defaults().freeze()


def test_freeze_applies_defaults(tmp_path: Path) -> None:
    """Output defaults to ``<source>/processed``; lists default inside the source dir."""
    cfg: Config = MutableConfig(tag="freenas", source_dir=tmp_path).freeze()
    src = tmp_path.resolve()
    assert cfg.source_dir == src
    assert cfg.output_dir == src / "processed"
    assert cfg.build_list_path == src / "build-list.txt"
    assert cfg.copy_list_path == src / "copy-list.txt"
    assert not cfg.copy_list_required
    assert cfg.doc_url == DEFAULT_DOC_URL
    assert cfg.brands == DEFAULT_BRANDS


@pytest.mark.parametrize("output", [".", ".."])
def test_output_must_not_contain_source(tmp_path: Path, output: str) -> None:
    """Writing over (or around) the sources is refused."""
    src = tmp_path / "docs"
    src.mkdir()
    draft = MutableConfig(tag="freenas", source_dir=src, output_dir=src / output)
    with pytest.raises(ConfigError, match="must not contain"):
        draft.freeze()


def test_thaw_freeze_round_trip(tmp_path: Path) -> None:
    """Thawing and freezing again yields an equal config."""
    cfg = MutableConfig(tag="truenas", source_dir=tmp_path, clean=True).freeze()
    assert cfg.thaw().freeze() == cfg
    assert cfg.with_tag("freenas").tag == "freenas"


def test_docvariant_toml_paths_are_relative_to_file(tmp_path: Path) -> None:
    """Paths in a config file are resolved against the file's directory."""
    write_tree(
        tmp_path,
        {
            "conf/docvariant.toml": (
                'tag = "truenas"\n'
                'source_dir = "../docs"\n'
                'output_dir = "../out"\n'
                'doc_url = "https://example.org/docs/"\n'
                "clean = true\n"
            )
        },
    )
    layer = MutableConfig.from_toml_file(tmp_path / "conf" / "docvariant.toml")
    assert layer is not None
    assert layer.tag == "truenas"
    assert layer.source_dir == (tmp_path / "docs").resolve()
    assert layer.output_dir == (tmp_path / "out").resolve()
    assert layer.doc_url == "https://example.org/docs/"
    assert layer.clean is True


def test_pyproject_tool_table(tmp_path: Path) -> None:
    """``[tool.docvariant]`` in pyproject.toml is a config source."""
    write_tree(
        tmp_path,
        {"pyproject.toml": '[project]\nname = "x"\n\n[tool.docvariant]\ntag = "freenas"\n'},
    )
    layer = MutableConfig.from_toml_file(tmp_path / "pyproject.toml")
    assert layer is not None
    assert layer.tag == "freenas"


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    write_tree(tmp_path, {"pyproject.toml": '[project]\nname = "x"\n'})
    assert MutableConfig.from_toml_file(tmp_path / "pyproject.toml") is None


def test_discovery_order_and_precedence(tmp_path: Path) -> None:
    """docvariant.toml overrides pyproject.toml in the same directory."""
    write_tree(
        tmp_path,
        {
            "pyproject.toml": '[tool.docvariant]\ntag = "freenas"\ndoc_url = "https://py/"\n',
            "docvariant.toml": 'tag = "truenas"\n',
        },
    )
    merged = MutableConfig.load_merged(cwd=tmp_path)
    assert merged.tag == "truenas"
    assert merged.doc_url == "https://py/"
    assert [p.name for p in merged.config_files] == ["pyproject.toml", "docvariant.toml"]


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    write_tree(tmp_path, {"docvariant.toml": 'tag = "truenas"\n'})
    merged = MutableConfig.load_merged(cwd=tmp_path, no_config=True)
    assert merged.tag is None


def test_explicit_config_wins_over_discovered(tmp_path: Path) -> None:
    write_tree(
        tmp_path,
        {"docvariant.toml": 'tag = "truenas"\n', "other.toml": 'tag = "bsg-acme"\n'},
    )
    merged = MutableConfig.load_merged(config_paths=[tmp_path / "other.toml"], cwd=tmp_path)
    assert merged.tag == "bsg-acme"


def test_explicit_config_must_exist(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        MutableConfig.load_merged(config_paths=[tmp_path / "nope.toml"], no_config=True)


def test_cli_args_override_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """CLI values win; ``None`` leaves the layer below untouched; paths use the CWD."""
    monkeypatch.chdir(tmp_path)
    draft = MutableConfig(tag="freenas", doc_url="https://cfg/")
    draft.apply_cli_args({"tag": "truenas", "doc_url": None, "output_dir": "out", "dry_run": True})
    assert draft.tag == "truenas"
    assert draft.doc_url == "https://cfg/"
    assert draft.output_dir == (tmp_path / "out").resolve()
    assert draft.dry_run is True


def test_brand_tables_replace_defaults(tmp_path: Path) -> None:
    """``[brands.<key>]`` tables replace the built-in brands."""
    write_tree(
        tmp_path,
        {
            "docvariant.toml": (
                'tag = "acme"\n'
                "[brands.acme]\n"
                'name = "AcmeOS"\n'
                'prefixes = ["acme-"]\n'
                "[brands.other]\n"
                'name = "Other"\n'
                'tags = ["o1", "o2"]\n'
            )
        },
    )
    cfg = MutableConfig.load_merged(cwd=tmp_path).freeze()
    assert cfg.brands == (
        Brand(name="AcmeOS", tags=("acme",), prefixes=("acme-",)),
        Brand(name="Other", tags=("o1", "o2")),
    )


@pytest.mark.parametrize(
    "content",
    [
        "tag = 1\n",
        "clean = \"yes\"\n",
        "brands = 3\n",
        "[brands.x]\ntags = [\"x\"]\n",
        "[brands.x]\nname = \"X\"\nprefixes = \"x-\"\n",
        "tag = \n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    """Wrong types and invalid TOML are configuration errors."""
    write_tree(tmp_path, {"docvariant.toml": content})
    with pytest.raises(ConfigError):
        MutableConfig.from_toml_file(tmp_path / "docvariant.toml")
