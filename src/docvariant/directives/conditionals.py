# topmark:header:start
#
#   project      : DocVariant
#   file         : conditionals.py
#   file_relpath : src/docvariant/directives/conditionals.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Tag-conditional blocks: ``#ifdef <label>`` ... ``#endif <label>``.

A block whose label equals the active build tag is *unwrapped*: the two marker
lines disappear and the body stays. Any other block is removed together with
its body.

Matching is scoped by label and non-greedy: an ``#ifdef L`` closes at the
nearest following ``#endif L``. Markers of other labels that sit between them
are removed with the region, whether or not they balance on their own.

Labels are compared verbatim; private-build labels such as ``bsg-acme`` are
ordinary labels here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.constants import ENDIF_DIRECTIVE, IFDEF_DIRECTIVE
from docvariant.core.errors import MalformedDirectiveError, UnmatchedDirectiveError
from docvariant.directives.patterns import (
    CONDITIONAL_MARKER_RE,
    CONDITIONAL_RE,
    split_newline,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from docvariant.config.logging import DocvariantLogger

logger: DocvariantLogger = get_logger(__name__)


@dataclass(frozen=True)
class Marker:
    """A validated conditional marker line.

    Attributes:
        kind (str): ``"#ifdef"`` or ``"#endif"``.
        label (str): The block label.
        lineno (int): 1-based line number in the buffer the marker was found in.
    """

    kind: str
    label: str
    lineno: int

    @property
    def is_open(self) -> bool:
        return self.kind == IFDEF_DIRECTIVE


def parse_marker(line: str, *, lineno: int, path: Path | None = None) -> Marker | None:
    """Parse a line as a conditional marker.

    Returns:
        Marker | None: The marker, or ``None`` for ordinary text lines.

    Raises:
        MalformedDirectiveError: If the line starts with ``#ifdef``/``#endif`` but
            has no label or extra text after it.
    """
    content, _ = split_newline(line)
    if not CONDITIONAL_MARKER_RE.match(content):
        return None
    m = CONDITIONAL_RE.match(content)
    if m is None:
        raise MalformedDirectiveError(content, lineno=lineno, path=path)
    return Marker(kind=m.group("kind"), label=m.group("label"), lineno=lineno)


def _scan(lines: Sequence[str], path: Path | None) -> list[Marker | None]:
    return [parse_marker(ln, lineno=i, path=path) for i, ln in enumerate(lines, start=1)]


def _unwrap_active(
    lines: list[str],
    markers: list[Marker | None],
    tag: str,
    path: Path | None,
) -> tuple[list[str], list[Marker | None]]:
    """Drop the marker lines of blocks labelled ``tag``, keeping their bodies."""
    drop: set[int] = set()
    open_at: Marker | None = None
    for idx, marker in enumerate(markers):
        if marker is None or marker.label != tag:
            continue
        if marker.is_open:
            if open_at is not None:
                # A second open before the close: the first one never closes
                raise UnmatchedDirectiveError(tag, lineno=open_at.lineno, path=path)
            open_at = marker
        else:
            if open_at is None:
                raise UnmatchedDirectiveError(tag, lineno=marker.lineno, path=path)
            open_at = None
        drop.add(idx)
    if open_at is not None:
        raise UnmatchedDirectiveError(tag, lineno=open_at.lineno, path=path)

    kept = [i for i in range(len(lines)) if i not in drop]
    return [lines[i] for i in kept], [markers[i] for i in kept]


def _remove_inactive(
    lines: list[str],
    markers: list[Marker | None],
    path: Path | None,
) -> tuple[list[str], list[Marker | None]]:
    """Remove every remaining ``#ifdef`` block, body included."""
    idx = 0
    while idx < len(lines):
        marker = markers[idx]
        if marker is None or not marker.is_open:
            idx += 1
            continue
        close = next(
            (
                j
                for j in range(idx + 1, len(lines))
                if (m := markers[j]) is not None and not m.is_open and m.label == marker.label
            ),
            None,
        )
        if close is None:
            raise UnmatchedDirectiveError(marker.label, lineno=marker.lineno, path=path)
        logger.trace(
            "Removing block %r (lines %d-%d)", marker.label, marker.lineno, markers[close].lineno
        )
        del lines[idx : close + 1]
        del markers[idx : close + 1]
    return lines, markers


def filter_conditionals(
    lines: Sequence[str],
    tag: str,
    *,
    path: Path | None = None,
) -> list[str]:
    """Resolve all conditional blocks of a buffer against the active build tag.

    Args:
        lines (Sequence[str]): The include-expanded buffer (``keepends=True`` lines).
        tag (str): The active build tag.
        path (Path | None): File being processed, used in error messages.

    Returns:
        list[str]: A new buffer without conditional markers.

    Raises:
        MalformedDirectiveError: If a marker line carries trailing content.
        UnmatchedDirectiveError: If a block cannot be closed, or a marker survives.
    """
    buf: list[str] = list(lines)
    markers = _scan(buf, path)
    if not any(markers):
        return buf

    buf, markers = _unwrap_active(buf, markers, tag, path)
    buf, markers = _remove_inactive(buf, markers, path)

    leftover = next((m for m in markers if m is not None), None)
    if leftover is not None:
        # Only a stray #endif can survive the removal pass
        logger.debug("Stray %s %s at line %d", ENDIF_DIRECTIVE, leftover.label, leftover.lineno)
        raise UnmatchedDirectiveError(leftover.label, lineno=leftover.lineno, path=path)
    return buf
