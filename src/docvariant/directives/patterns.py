# topmark:header:start
#
#   project      : DocVariant
#   file         : patterns.py
#   file_relpath : src/docvariant/directives/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Regular expressions and line helpers shared by the directive processors.

Directive lines are recognised in two passes: a loose *marker* pattern finds
every line that starts with a directive keyword, and a strict pattern validates
its shape. A marker line that fails the strict pattern is malformed.
"""

from __future__ import annotations

import re
from typing import Final

from docvariant.constants import ENDIF_DIRECTIVE, IFDEF_DIRECTIVE, INCLUDE_DIRECTIVE

NEWLINES: Final[tuple[str, ...]] = ("\r\n", "\n", "\r")

INCLUDE_MARKER_RE: Final[re.Pattern[str]] = re.compile(
    rf"^[ \t]*{re.escape(INCLUDE_DIRECTIVE)}(?=\s|$)"
)

# <indent>#include<ws+><target><trailing>
INCLUDE_RE: Final[re.Pattern[str]] = re.compile(
    rf"""
    ^
    (?P<indent>[ \t]*)
    {re.escape(INCLUDE_DIRECTIVE)}
    [ \t]+
    (?P<target>\S+)
    (?P<trailing>.*)
    $
    """,
    re.VERBOSE,
)

CONDITIONAL_MARKER_RE: Final[re.Pattern[str]] = re.compile(
    rf"^[ \t]*(?P<kind>{re.escape(IFDEF_DIRECTIVE)}|{re.escape(ENDIF_DIRECTIVE)})(?=\s|$)"
)

# <indent>#ifdef<ws+><label><ws*>   (same for #endif)
CONDITIONAL_RE: Final[re.Pattern[str]] = re.compile(
    rf"""
    ^
    [ \t]*
    (?P<kind>{re.escape(IFDEF_DIRECTIVE)}|{re.escape(ENDIF_DIRECTIVE)})
    [ \t]+
    (?P<label>\S+)
    [ \t]*
    $
    """,
    re.VERBOSE,
)


def split_newline(line: str) -> tuple[str, str]:
    """Split a ``keepends=True`` line into its content and its line terminator.

    Args:
        line (str): A single line, possibly ending with ``\\r\\n``, ``\\n`` or ``\\r``.

    Returns:
        tuple[str, str]: ``(content, terminator)``; the terminator is ``""`` for a
        final line without newline.
    """
    for nl in NEWLINES:
        if line.endswith(nl):
            return line[: -len(nl)], nl
    return line, ""


_LINE_RE: Final[re.Pattern[str]] = re.compile(r"[^\r\n]*(?:\r\n|\n|\r)|[^\r\n]+")


def split_lines(text: str) -> list[str]:
    """Split text into ``keepends=True`` lines.

    Only CRLF, LF and CR terminate a line. Unlike `str.splitlines`, form feeds and
    other Unicode separators stay inside the line so that ``"".join(split_lines(t)) == t``.
    """
    return _LINE_RE.findall(text)
