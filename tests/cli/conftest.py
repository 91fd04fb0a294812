# topmark:header:start
#
#   project      : DocVariant
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""CLI test helpers for running DocVariant in a controlled working directory.

`run_cli_in()` changes the process working directory to the given directory
before invoking the Click CLI, so that config discovery and relative paths are
resolved against the test tree.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import TYPE_CHECKING

from click.testing import CliRunner, Result

from docvariant.cli.main import cli
from docvariant.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(cwd: Path, argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI with ``cwd`` as the working directory.

    Args:
        cwd (Path): Directory to run the command from.
        argv (str | Sequence[str] | None): CLI argument vector.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    previous: str = os.getcwd()
    try:
        os.chdir(cwd)
        return runner.invoke(cli, argv)
    finally:
        os.chdir(previous)


def run_cli(argv: str | Sequence[str] | None) -> Result:
    """Invoke the CLI in the current working directory."""
    return CliRunner().invoke(cli, argv)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert an exit code, showing the output on failure."""
    assert result.exit_code == code, (
        f"expected {code.name} ({int(code)}), got {result.exit_code}\n{result.output}"
    )


def assert_SUCCESS(result: Result) -> None:  # noqa: N802
    """Assert that the command succeeded."""
    assert_exit(result, ExitCode.SUCCESS)
