# topmark:header:start
#
#   project      : DocVariant
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Pytest configuration for the DocVariant test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `docvariant.config.MutableConfig`, then `freeze()` it (see `make_config`).
    Do **not** mutate a frozen `Config`; use `Config.thaw()` or
    `Config.with_tag()` instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest

from docvariant.config import MutableConfig, logging

if TYPE_CHECKING:
    from collections.abc import Mapping

    from docvariant.config import Config


@pytest.fixture(autouse=True)
def silence_docvariant_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_tree(root: Path, files: Mapping[str, str]) -> Path:
    """Create ``files`` (relative path → content) below ``root``.

    Content is written verbatim (no newline translation).

    Returns:
        Path: ``root``, for chaining.
    """
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="") as fh:
            fh.write(content)
    return root


def read(path: Path) -> str:
    """Read a file without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fh:
        return fh.read()


def make_config(source_dir: Path, tag: str = "freenas", **overrides: Any) -> Config:
    """Return a frozen `Config` for ``source_dir`` built from defaults and overrides."""
    draft = MutableConfig.from_defaults()
    draft.tag = tag
    draft.source_dir = source_dir
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    """An empty source tree below ``tmp_path``."""
    src = tmp_path / "src"
    src.mkdir()
    return src
