# topmark:header:start
#
#   project      : DocVariant
#   file         : build_list.py
#   file_relpath : src/docvariant/build_list.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Enumerate the top-level documents of a build.

The build list is a plain text file with one document path per line, relative
to the source directory, in chapter order. The list goes through the same
conditional filter as the documents, so variant-specific chapters can be
wrapped in ``#ifdef``/``#endif``::

    intro.rst
    #ifdef truenas
    failover.rst
    #endif truenas
    storage.rst

Blank lines and ``#`` comments are ignored.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.directives.conditionals import filter_conditionals
from docvariant.directives.patterns import split_lines, split_newline
from docvariant.utils.file import read_text

if TYPE_CHECKING:
    from docvariant.config import Config
    from docvariant.config.logging import DocvariantLogger

logger: DocvariantLogger = get_logger(__name__)


def parse_build_list(text: str, tag: str, *, path: Path | None = None) -> list[Path]:
    """Return the document paths listed in ``text`` for ``tag``.

    Args:
        text (str): Content of a build-list file.
        tag (str): Active build tag.
        path (Path | None): The list file, used in error messages.

    Returns:
        list[Path]: Relative document paths in build order.
    """
    out: list[Path] = []
    for line in filter_conditionals(split_lines(text), tag, path=path):
        entry = split_newline(line)[0].strip()
        if not entry or entry.startswith("#"):
            continue
        out.append(Path(entry))
    return out


def read_build_list(config: Config) -> list[Path]:
    """Read the configured build list for the configured tag.

    Raises:
        SourceFileNotFoundError: If the build-list file does not exist.
    """
    list_path: Path = config.build_list_path
    documents = parse_build_list(read_text(list_path), config.tag, path=list_path)
    logger.debug("Loaded %d document(s) from %s", len(documents), list_path)
    return documents
