# topmark:header:start
#
#   project      : DocVariant
#   file         : options.py
#   file_relpath : src/docvariant/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Common CLI option utilities for the DocVariant CLI.

This module centralizes reusable options (verbosity, color, config, build
paths) and their resolution logic, so commands and groups can stay thin.
"""

import os
import sys
from collections.abc import Callable
from enum import Enum
from typing import Any, ParamSpec, TypeVar

import click

from docvariant.cli.errors import DocvariantUsageError

P = ParamSpec("P")
R = TypeVar("R")

#: Program-output verbosity levels (independent from logging).
QUIET = -1
NORMAL = 0
VERBOSE = 1
DETAILED = 2


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from ``-v``/``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        One of ``QUIET``, ``NORMAL``, ``VERBOSE``, ``DETAILED``.

    Raises:
        DocvariantUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DocvariantUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count >= 2:
        return DETAILED
    if verbose_count == 1:
        return VERBOSE
    if quiet_count >= 1:
        return QUIET
    return NORMAL


#: Click context settings shared by the group and its commands.
CONTEXT_SETTINGS: dict[str, Any] = {
    "help_option_names": ["-h", "--help"],
}


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags first, then the FORCE_COLOR and
        NO_COLOR environment variables, and defaults to color on a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the mutually exclusive ``-v/--verbose`` and ``-q/--quiet`` counters."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output detail. Specify twice for per-file details.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress the build summary.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config``.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore docvariant.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_source_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--tag``, ``--source-dir`` and ``--doc-url``, shared by all processing commands."""
    f = click.option(
        "--tag",
        "-t",
        "tag",
        default=None,
        help="Build tag selecting the variant (e.g. freenas, truenas, bsg-xxx).",
    )(f)
    f = click.option(
        "--source-dir",
        "source_dir",
        type=click.Path(exists=True, file_okay=False, dir_okay=True),
        default=None,
        help="Root of the reST sources (default: current directory).",
    )(f)
    f = click.option(
        "--doc-url",
        "doc_url",
        default=None,
        metavar="URL",
        help="Value substituted for %docurl%.",
    )(f)
    return f


def common_build_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the output and list options of the ``build`` command."""
    f = click.option(
        "--output-dir",
        "output_dir",
        type=click.Path(file_okay=False, dir_okay=True),
        default=None,
        help="Root of the generated tree (default: <source-dir>/processed).",
    )(f)
    f = click.option(
        "--build-list",
        "build_list",
        type=click.Path(dir_okay=False),
        default=None,
        metavar="FILE",
        help="Document list (default: <source-dir>/build-list.txt).",
    )(f)
    f = click.option(
        "--copy-list",
        "copy_list",
        type=click.Path(dir_okay=False),
        default=None,
        metavar="FILE",
        help="Asset patterns to copy (default: <source-dir>/copy-list.txt, if present).",
    )(f)
    f = click.option(
        "--clean",
        is_flag=True,
        help="Remove the output directory before building.",
    )(f)
    f = click.option(
        "--dry-run",
        "dry_run",
        is_flag=True,
        help="Process every document without writing anything.",
    )(f)
    return f
