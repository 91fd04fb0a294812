# topmark:header:start
#
#   project      : DocVariant
#   file         : tables.py
#   file_relpath : src/docvariant/directives/tables.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Minimal grid-table row model.

A *row* is a line whose trimmed content starts and ends with the column
delimiter ``|``::

    <indent>| cell one | cell two |<trailing whitespace>

The first and last delimiter are the outer boundaries of the row. Inside the
row, a ``|`` separates cells when whitespace (or the closing delimiter) follows
it, so ``| %brand%| x |`` has two cells. Two kinds of bar stay inside a cell:

- escaped bars (``\\|``);
- inline substitution references such as ``|logo|``: a bar with whitespace
  before it and text after it opens a reference, and the next bar with text
  before it closes that reference.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

from docvariant.constants import COLUMN_DELIMITER

_D: Final[str] = re.escape(COLUMN_DELIMITER)

ROW_RE: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<indent>[ \t]*){_D}(?P<body>.*){_D}(?P<trailing>[ \t]*)$"
)

DELIMITER_RE: Final[re.Pattern[str]] = re.compile(_D)

_BLANKS: Final[str] = " \t"


@dataclass
class TableRow:
    """A table row split into cells.

    Attributes:
        indent (str): Whitespace before the opening delimiter.
        cells (list[str]): Cell texts between delimiters, padding included.
        trailing (str): Whitespace after the closing delimiter.
    """

    indent: str
    cells: list[str] = field(default_factory=lambda: [])
    trailing: str = ""

    @property
    def width(self) -> int:
        """Number of characters between the outer delimiters."""
        return len(self.body)

    @property
    def body(self) -> str:
        return COLUMN_DELIMITER.join(self.cells)

    def render(self) -> str:
        """Reassemble the row text (without line terminator)."""
        return f"{self.indent}{COLUMN_DELIMITER}{self.body}{COLUMN_DELIMITER}{self.trailing}"


def split_cells(body: str) -> list[str]:
    """Split the text between the outer delimiters into cells."""
    cells: list[str] = []
    start = 0
    in_reference = False
    for m in DELIMITER_RE.finditer(body):
        i = m.start()
        if i > 0 and body[i - 1] == "\\":
            continue
        blank_before = i == 0 or body[i - 1] in _BLANKS
        blank_after = m.end() == len(body) or body[m.end()] in _BLANKS
        if in_reference and not blank_before:
            in_reference = False
        elif blank_after:
            cells.append(body[start:i])
            start = m.end()
            in_reference = False
        elif blank_before:
            in_reference = True
    cells.append(body[start:])
    return cells


def parse_row(content: str) -> TableRow | None:
    """Parse a line (without terminator) as a table row.

    Returns:
        TableRow | None: The row, or ``None`` if the line is not delimited on both ends.
    """
    m = ROW_RE.match(content)
    if m is None:
        return None
    return TableRow(
        indent=m.group("indent"),
        cells=split_cells(m.group("body")),
        trailing=m.group("trailing"),
    )


def trailing_spaces(cell: str) -> int:
    """Count the spaces that end a cell."""
    return len(cell) - len(cell.rstrip(" "))
