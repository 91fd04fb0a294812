# topmark:header:start
#
#   project      : DocVariant
#   file         : test_includes.py
#   file_relpath : tests/directives/test_includes.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Unit tests for `#include` parsing and splicing (loader stubbed out)."""

from __future__ import annotations

from pathlib import Path

import pytest

from docvariant.core.errors import IncludeCycleError, MalformedDirectiveError
from docvariant.directives.includes import (
    IncludeDirective,
    check_include_chain,
    expand_includes,
    has_includes,
    indent_lines,
    parse_include,
)
from docvariant.directives.patterns import split_lines


def _loader(files: dict[str, str]):
    def load(directive: IncludeDirective) -> list[str]:
        return split_lines(files[directive.target])

    return load


def test_parse_include_extracts_indent_and_target() -> None:
    """Indent and path token are captured."""
    d = parse_include("  #include sub/part.rst\n", lineno=3)
    assert d == IncludeDirective(indent="  ", target="sub/part.rst", lineno=3)


def test_parse_include_ignores_ordinary_lines() -> None:
    """Lines that do not start with the keyword are not directives."""
    assert parse_include("see #include foo.rst\n", lineno=1) is None
    assert parse_include("#included.rst\n", lineno=1) is None


@pytest.mark.parametrize("line", ["#include a.rst b.rst\n", "#include\n", "  #include   \n"])
def test_parse_include_malformed(line: str) -> None:
    """Trailing text or a missing path is malformed."""
    with pytest.raises(MalformedDirectiveError):
        parse_include(line, lineno=1, path=Path("doc.rst"))


def test_parse_include_allows_trailing_whitespace() -> None:
    """Blanks after the path are ignored."""
    d = parse_include("#include a.rst  \t\n", lineno=1)
    assert d is not None
    assert d.target == "a.rst"


def test_indented_include_is_spliced_with_indent() -> None:
    """An indented directive indents every included line."""
    lines = split_lines("before\n  #include sub.rst\nafter\n")
    out = expand_includes(lines, _loader({"sub.rst": "text\n"}))
    assert "".join(out) == "before\n  text\nafter\n"


def test_indent_applies_to_every_line() -> None:
    """Blank lines get the indent too."""
    assert indent_lines(["a\n", "\n", "b\n"], "\t") == ["\ta\n", "\t\n", "\tb\n"]


def test_missing_final_newline_is_completed() -> None:
    """Included content without final newline gets the directive's line break."""
    lines = split_lines("#include sub.rst\r\nnext\r\n")
    out = expand_includes(lines, _loader({"sub.rst": "one\r\ntwo"}))
    assert out == ["one\r\n", "two\r\n", "next\r\n"]


def test_empty_include_removes_directive_line() -> None:
    """Including an empty file leaves nothing behind."""
    out = expand_includes(split_lines("a\n#include empty.rst\nb\n"), _loader({"empty.rst": ""}))
    assert out == ["a\n", "b\n"]


def test_buffer_without_directives_is_unchanged() -> None:
    """Expansion of directive-free text is the identity."""
    lines = split_lines("no\ndirectives here\n")
    assert not has_includes(lines)
    assert expand_includes(lines, _loader({})) == lines


def test_include_chain_detects_cycle() -> None:
    """A candidate already in the chain is a cycle."""
    a, b = Path("/d/a.rst"), Path("/d/b.rst")
    check_include_chain((a,), b)
    with pytest.raises(IncludeCycleError) as excinfo:
        check_include_chain((a, b), a)
    assert excinfo.value.chain == (a, b, a)
