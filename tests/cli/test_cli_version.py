# topmark:header:start
#
#   project      : DocVariant
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

from docvariant.constants import DOCVARIANT_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_version() -> None:
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == DOCVARIANT_VERSION


def test_version_verbose() -> None:
    result = run_cli(["--no-color", "-v", "version"])
    assert_SUCCESS(result)
    assert "DocVariant version:" in result.output
    assert DOCVARIANT_VERSION in result.output


def test_group_without_command_prints_hint() -> None:
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "docvariant build --tag TAG" in result.output
