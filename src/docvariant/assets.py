# topmark:header:start
#
#   project      : DocVariant
#   file         : assets.py
#   file_relpath : src/docvariant/assets.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Copy auxiliary files (images, Sphinx ``conf.py``, static assets) to the output tree.

The copy list holds gitignore-style patterns, one per line, evaluated relative
to the source directory with `pathspec`. Blank lines and ``#`` comments are
ignored, and ``!pattern`` re-excludes files. Documents that the pipeline
writes itself are never copied, nor is anything inside the output directory.
"""

from __future__ import annotations

import shutil
from typing import TYPE_CHECKING

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from docvariant.config.logging import get_logger
from docvariant.utils.file import compute_relpath, read_text

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from docvariant.config import Config
    from docvariant.config.logging import DocvariantLogger

logger: DocvariantLogger = get_logger(__name__)


def load_patterns(text: str) -> list[str]:
    """Return the non-empty, non-comment patterns of a copy list."""
    patterns: list[str] = []
    for line in text.splitlines():
        s: str = line.strip()
        if not s or s.startswith("#"):
            continue
        patterns.append(s)
    return patterns


def select_assets(
    source_dir: Path,
    patterns: Iterable[str],
    *,
    exclude: Iterable[Path] = (),
    output_dir: Path | None = None,
) -> list[Path]:
    """Return the files under ``source_dir`` matched by ``patterns``, sorted.

    Args:
        source_dir (Path): Directory the patterns are relative to.
        patterns (Iterable[str]): Gitignore-style patterns.
        exclude (Iterable[Path]): Relative paths never selected (processed documents).
        output_dir (Path | None): Directory skipped while scanning.

    Returns:
        list[Path]: Relative paths of the selected files.
    """
    spec: PathSpec = PathSpec.from_lines(GitWildMatchPattern, patterns)
    skip: set[str] = {p.as_posix() for p in exclude}
    selected: list[Path] = []
    for path in source_dir.rglob("*"):
        if not path.is_file():
            continue
        if output_dir is not None and path.resolve().is_relative_to(output_dir):
            continue
        rel = compute_relpath(path, source_dir)
        if rel.as_posix() in skip:
            continue
        if spec.match_file(rel.as_posix()):
            selected.append(rel)
    return sorted(selected)


def copy_assets(config: Config, *, exclude: Iterable[Path] = ()) -> list[Path]:
    """Copy the files selected by the copy list into the output directory.

    Args:
        config (Config): Run configuration (source/output dirs, copy list).
        exclude (Iterable[Path]): Relative paths of documents already written.

    Returns:
        list[Path]: Relative paths of the copied files (empty without a copy list).

    Raises:
        SourceFileNotFoundError: If an explicitly configured copy list is missing.
    """
    list_path: Path = config.copy_list_path
    if not list_path.is_file() and not config.copy_list_required:
        logger.debug("No copy list at %s; skipping asset copy", list_path)
        return []

    patterns = load_patterns(read_text(list_path))
    assets = select_assets(
        config.source_dir, patterns, exclude=exclude, output_dir=config.output_dir
    )
    if config.dry_run:
        logger.info("Dry run: not copying %d asset(s)", len(assets))
        return assets

    for rel in assets:
        target: Path = config.output_dir / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(config.source_dir / rel, target)
        logger.debug("Copied %s", rel)
    logger.info("Copied %d asset(s) to %s", len(assets), config.output_dir)
    return assets
