# topmark:header:start
#
#   project      : DocVariant
#   file         : errors.py
#   file_relpath : src/docvariant/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Exceptions for the DocVariant CLI.

Domain errors (`docvariant.core.errors.DocvariantError`) are converted into a
`DocvariantCliError` at the command boundary so that Click prints the message
through the project console and exits with the error's `ExitCode`.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import IO, Any

import click

from docvariant.core.errors import DocvariantError
from docvariant.core.exit_codes import ExitCode


class DocvariantCliError(click.ClickException):
    """Base class for all DocVariant CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    def format_message(self) -> str:
        """Return the plain error message text (colour is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", bold=True))
                return
        super().show(file)


class DocvariantUsageError(DocvariantCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


@contextmanager
def domain_errors() -> Iterator[None]:
    """Re-raise `DocvariantError` as `DocvariantCliError` with the same exit code."""
    try:
        yield
    except DocvariantError as e:
        raise DocvariantCliError(str(e), exit_code=int(e.exit_code)) from e

