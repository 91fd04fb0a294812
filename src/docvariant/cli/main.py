# topmark:header:start
#
#   project      : DocVariant
#   file         : main.py
#   file_relpath : src/docvariant/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""DocVariant command line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj`` together with the console; subcommands read them from there.
Internal logging is configured from the ``DOCVARIANT_LOG_LEVEL`` environment
variable and is independent from program output.
"""

from __future__ import annotations

import click

from docvariant.cli.commands.build import build_command
from docvariant.cli.commands.render import render_command
from docvariant.cli.commands.version import version_command
from docvariant.cli.console import ClickConsole
from docvariant.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from docvariant.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    enable_color = resolve_color_mode(cli_mode=mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Build product-specific reStructuredText trees from one shared source.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the DocVariant CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'docvariant build --tag TAG' to build a variant.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(build_command)
cli.add_command(render_command)
cli.add_command(version_command)

if __name__ == "__main__":
    cli()
