# topmark:header:start
#
#   project      : DocVariant
#   file         : errors.py
#   file_relpath : src/docvariant/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Exceptions raised while preprocessing a document tree.

Every error kind is fatal: the engine stops at the first one and the CLI maps it
to a non-zero exit code (see `ExitCode`). The messages always name the file and
the offending text so authors can fix the source without a debugger.

Hierarchy:
    DocvariantError
      ├── ConfigError
      ├── SourceFileNotFoundError   (also a FileNotFoundError)
      ├── FileAccessError
      ├── SourceEncodingError
      └── DirectiveError
            ├── MalformedDirectiveError
            ├── UnmatchedDirectiveError
            ├── InsufficientPaddingError
            └── IncludeCycleError
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docvariant.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class DocvariantError(Exception):
    """Base class for all DocVariant errors."""

    exit_code: ExitCode = ExitCode.FAILURE


class ConfigError(DocvariantError):
    """Configuration is missing, malformed, or inconsistent."""

    exit_code = ExitCode.CONFIG_ERROR


class SourceFileNotFoundError(DocvariantError, FileNotFoundError):
    """A master document, included file, or list file does not exist.

    Args:
        path (Path): The path that could not be read.
        referenced_from (Path | None): The file whose directive referenced ``path``, if any.
    """

    exit_code = ExitCode.FILE_NOT_FOUND

    def __init__(self, path: Path, *, referenced_from: Path | None = None) -> None:
        self.path = path
        self.referenced_from = referenced_from
        msg = f"File not found: {path}"
        if referenced_from is not None:
            msg += f" (referenced from {referenced_from})"
        super().__init__(msg)


class FileAccessError(DocvariantError):
    """A file exists but cannot be read or written (permissions, I/O failure)."""

    exit_code = ExitCode.IO_ERROR

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot access {path}: {reason}")


class SourceEncodingError(DocvariantError):
    """A source file is not valid UTF-8."""

    exit_code = ExitCode.DATA_ERROR

    def __init__(self, path: Path, *, offset: int, referenced_from: Path | None = None) -> None:
        self.path = path
        self.offset = offset
        self.referenced_from = referenced_from
        msg = f"{path}: not valid UTF-8 (byte offset {offset})"
        if referenced_from is not None:
            msg += f" (referenced from {referenced_from})"
        super().__init__(msg)


class DirectiveError(DocvariantError):
    """Base class for errors in the source text itself.

    Args:
        message (str): Human readable description.
        path (Path | None): The file being processed when the error was detected.
    """

    exit_code = ExitCode.DATA_ERROR

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        self.path = path
        super().__init__(f"{path}: {message}" if path is not None else message)


class MalformedDirectiveError(DirectiveError):
    """A directive line carries unexpected trailing content or lacks its argument."""

    def __init__(self, line: str, *, lineno: int, path: Path | None = None) -> None:
        self.line = line
        self.lineno = lineno
        super().__init__(f"line {lineno}: malformed directive: {line!r}", path=path)


class UnmatchedDirectiveError(DirectiveError):
    """A conditional block has no matching close (or a marker survived filtering)."""

    def __init__(self, label: str, *, lineno: int, path: Path | None = None) -> None:
        self.label = label
        self.lineno = lineno
        super().__init__(f"line {lineno}: unmatched conditional for label {label!r}", path=path)


class InsufficientPaddingError(DirectiveError):
    """A table cell cannot absorb a longer replacement without breaking column alignment."""

    def __init__(
        self,
        placeholder: str,
        cell: str,
        *,
        needed: int,
        path: Path | None = None,
    ) -> None:
        self.placeholder = placeholder
        self.cell = cell
        self.needed = needed
        super().__init__(
            f"not enough trailing spaces to replace {placeholder!r} "
            f"(need {needed}) in table cell {cell!r}",
            path=path,
        )


class IncludeCycleError(DirectiveError):
    """An ``#include`` chain revisits a file that is already being expanded."""

    def __init__(self, chain: Sequence[Path], *, path: Path | None = None) -> None:
        self.chain = tuple(chain)
        rendered = " -> ".join(str(p) for p in self.chain)
        super().__init__(f"include cycle detected: {rendered}", path=path)
