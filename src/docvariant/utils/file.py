# topmark:header:start
#
#   project      : DocVariant
#   file         : file.py
#   file_relpath : src/docvariant/utils/file.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""File utilities for DocVariant.

Text is always read and written as UTF-8 with ``newline=""`` so that line
terminators pass through the pipeline untouched.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path

from docvariant.config.logging import get_logger
from docvariant.core.errors import FileAccessError, SourceEncodingError, SourceFileNotFoundError

logger = get_logger(__name__)


def compute_relpath(file_path: Path, root_path: Path) -> Path:
    """Compute the relative path from root_path to file_path.

    Args:
        file_path (Path): The file path to compute the relative path for.
        root_path (Path): The root path to compute the relative path from.

    Returns:
        Path: The relative path from root_path to file_path.
    """
    resolved_path = file_path.resolve()
    resolved_root = (root_path or Path.cwd()).resolve()

    try:
        return resolved_path.relative_to(resolved_root)
    except ValueError:
        # Not a direct subpath
        return Path(os.path.relpath(resolved_path, start=resolved_root))


def read_text(path: Path, *, referenced_from: Path | None = None) -> str:
    """Read a UTF-8 text file, preserving its line terminators.

    Raises:
        SourceFileNotFoundError: If ``path`` does not exist or is a directory.
        SourceEncodingError: If the file is not valid UTF-8.
        FileAccessError: If the file cannot be read (e.g. permission denied).
    """
    try:
        with path.open("r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (FileNotFoundError, IsADirectoryError) as e:
        logger.error("Cannot read %s: %s", path, e)
        raise SourceFileNotFoundError(path, referenced_from=referenced_from) from e
    except UnicodeDecodeError as e:
        logger.error("Encoding error while reading %s: %s", path, e)
        raise SourceEncodingError(path, offset=e.start, referenced_from=referenced_from) from e
    except OSError as e:
        logger.error("Filesystem error while reading %s: %s", path, e)
        raise FileAccessError(path, e.strerror or str(e)) from e


def write_text(path: Path, text: str) -> None:
    """Write a UTF-8 text file verbatim, creating parent directories.

    Raises:
        FileAccessError: If the file or its parent directory cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except OSError as e:
        logger.error("Filesystem error while writing %s: %s", path, e)
        raise FileAccessError(path, e.strerror or str(e)) from e


def prepare_output_dir(output_dir: Path, *, clean: bool = False) -> None:
    """Create the output directory, optionally removing a previous build first."""
    if clean and output_dir.exists():
        logger.info("Removing previous output in %s", output_dir)
        shutil.rmtree(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
