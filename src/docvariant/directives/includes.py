# topmark:header:start
#
#   project      : DocVariant
#   file         : includes.py
#   file_relpath : src/docvariant/directives/includes.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Expansion of ``#include <path>`` directives.

An include directive occupies a whole line::

    <indent>#include <path>

The directive line is replaced by the included file's content, each line
prefixed with ``<indent>``. Nested includes therefore accumulate indentation.
The included content is produced by a *loader* callback which is expected to
run the complete per-file pipeline on the referenced file, so conditionals and
placeholders inside included files are already resolved when spliced in.

Nothing after ``<path>`` is allowed on the line except whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.core.errors import IncludeCycleError, MalformedDirectiveError
from docvariant.directives.patterns import (
    INCLUDE_MARKER_RE,
    INCLUDE_RE,
    NEWLINES,
    split_newline,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from pathlib import Path

    from docvariant.config.logging import DocvariantLogger

logger: DocvariantLogger = get_logger(__name__)


@dataclass(frozen=True)
class IncludeDirective:
    """A parsed ``#include`` line.

    Attributes:
        indent (str): Leading whitespace of the directive line.
        target (str): The path token as written by the author.
        lineno (int): 1-based line number of the directive in its buffer.
    """

    indent: str
    target: str
    lineno: int


def parse_include(line: str, *, lineno: int, path: Path | None = None) -> IncludeDirective | None:
    """Parse a single line as an include directive.

    Args:
        line (str): The line to inspect (terminator optional).
        lineno (int): 1-based line number, used in error messages.
        path (Path | None): File being processed, used in error messages.

    Returns:
        IncludeDirective | None: The parsed directive, or ``None`` if the line is
        not an include directive.

    Raises:
        MalformedDirectiveError: If the line starts with ``#include`` but has no
            path or carries trailing text after the path.
    """
    content, _ = split_newline(line)
    if not INCLUDE_MARKER_RE.match(content):
        return None
    m = INCLUDE_RE.match(content)
    if m is None or m.group("trailing").strip():
        raise MalformedDirectiveError(content, lineno=lineno, path=path)
    return IncludeDirective(indent=m.group("indent"), target=m.group("target"), lineno=lineno)


def has_includes(lines: Sequence[str]) -> bool:
    """Return True if any line of the buffer looks like an include directive."""
    return any(INCLUDE_MARKER_RE.match(split_newline(ln)[0]) for ln in lines)


def indent_lines(lines: Sequence[str], indent: str) -> list[str]:
    """Prefix every line with ``indent`` (blank lines included)."""
    if not indent:
        return list(lines)
    return [indent + ln for ln in lines]


def check_include_chain(chain: Sequence[Path], candidate: Path) -> None:
    """Fail if ``candidate`` is already open in the current include chain.

    Args:
        chain (Sequence[Path]): Resolved paths currently being expanded, outermost first.
        candidate (Path): Resolved path about to be included.

    Raises:
        IncludeCycleError: If ``candidate`` is part of ``chain``.
    """
    if candidate in chain:
        raise IncludeCycleError([*chain, candidate], path=chain[-1] if chain else None)


def expand_includes(
    lines: Sequence[str],
    load: Callable[[IncludeDirective], list[str]],
    *,
    path: Path | None = None,
) -> list[str]:
    """Replace every include directive with the indented, loaded content.

    Args:
        lines (Sequence[str]): The buffer (``keepends=True`` lines).
        load (Callable[[IncludeDirective], list[str]]): Returns the fully processed
            lines of the file referenced by a directive.
        path (Path | None): File being processed, used in error messages.

    Returns:
        list[str]: A new buffer without include directives. A buffer without
        directives is returned as an equal copy.
    """
    out: list[str] = []
    for lineno, line in enumerate(lines, start=1):
        directive = parse_include(line, lineno=lineno, path=path)
        if directive is None:
            out.append(line)
            continue

        logger.debug("%s:%d: including %s", path, lineno, directive.target)
        block: list[str] = indent_lines(load(directive), directive.indent)

        # Keep the directive's own line break when the included file lacks a final newline
        _, nl = split_newline(line)
        if block and nl and not block[-1].endswith(NEWLINES):
            block[-1] += nl

        out.extend(block)
    return out
