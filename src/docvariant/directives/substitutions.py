# topmark:header:start
#
#   project      : DocVariant
#   file         : substitutions.py
#   file_relpath : src/docvariant/directives/substitutions.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Alignment-preserving placeholder substitution.

Placeholders are plain tokens such as ``%brand%``. Outside tables they are
replaced verbatim. Inside a grid-table row, a replacement of a different length
would shift the cell's closing delimiter and break the table, so the cell's
trailing padding is adjusted to keep every column exactly as wide as before:

* longer replacement: ``k`` occurrences grow the cell by ``k * delta``
  characters, so as many trailing spaces are removed first. The cell must keep
  at least one space before its delimiter; otherwise `InsufficientPaddingError`
  is raised, because fixing it would mean re-padding every sibling row of the
  column.
* shorter replacement: the cell is padded with ``k * delta`` spaces after the
  substitution.

Pairs whose replacement has the same length as the placeholder are substituted
directly and skip the table pass, as no padding is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.core.errors import InsufficientPaddingError
from docvariant.directives.patterns import split_newline
from docvariant.directives.tables import parse_row, trailing_spaces

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from docvariant.config.logging import DocvariantLogger

logger: DocvariantLogger = get_logger(__name__)


def substitute_in_cell(
    cell: str,
    placeholder: str,
    replacement: str,
    *,
    path: Path | None = None,
) -> str:
    """Substitute ``placeholder`` in one table cell, keeping the cell width.

    Args:
        cell (str): Cell text between two delimiters.
        placeholder (str): Token to replace.
        replacement (str): Literal to insert.
        path (Path | None): File being processed, used in error messages.

    Returns:
        str: The rewritten cell, exactly as long as ``cell``.

    Raises:
        InsufficientPaddingError: If a longer replacement does not fit in the
            cell's trailing spaces.
    """
    count = cell.count(placeholder)
    if count == 0:
        return cell
    delta = len(replacement) - len(placeholder)
    pad = count * abs(delta)

    if delta > 0:
        # Keep at least one space before the delimiter
        if trailing_spaces(cell) < pad + 1:
            raise InsufficientPaddingError(placeholder, cell, needed=pad + 1, path=path)
        return cell[: len(cell) - pad].replace(placeholder, replacement)

    return cell.replace(placeholder, replacement) + " " * pad


def substitute_in_row(
    line: str,
    placeholder: str,
    replacement: str,
    *,
    path: Path | None = None,
) -> str:
    """Rewrite a table row containing ``placeholder``; other lines pass through.

    Args:
        line (str): A buffer line (terminator preserved).
        placeholder (str): Token to replace.
        replacement (str): Literal to insert.
        path (Path | None): File being processed, used in error messages.

    Returns:
        str: The rewritten line.
    """
    content, nl = split_newline(line)
    if placeholder not in content:
        return line
    row = parse_row(content)
    if row is None or placeholder not in row.body:
        return line

    width = row.width
    row.cells = [substitute_in_cell(c, placeholder, replacement, path=path) for c in row.cells]
    assert row.width == width, "table row width changed during substitution"
    return row.render() + nl


def substitute_placeholders(
    lines: Sequence[str],
    replacements: Mapping[str, str],
    *,
    path: Path | None = None,
) -> list[str]:
    """Apply a replacement table to a buffer.

    Args:
        lines (Sequence[str]): The buffer (``keepends=True`` lines).
        replacements (Mapping[str, str]): Placeholder → literal, applied in order.
        path (Path | None): File being processed, used in error messages.

    Returns:
        list[str]: A new buffer with all placeholders replaced.

    Raises:
        InsufficientPaddingError: If a table cell is too narrow for a longer replacement.
    """
    buf: list[str] = list(lines)
    for placeholder, replacement in replacements.items():
        if len(replacement) == len(placeholder):
            buf = [ln.replace(placeholder, replacement) for ln in buf]
            continue

        buf = [substitute_in_row(ln, placeholder, replacement, path=path) for ln in buf]
        # Anything left is outside table rows
        buf = [ln.replace(placeholder, replacement) for ln in buf]
    return buf
