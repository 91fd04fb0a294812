# topmark:header:start
#
#   project      : DocVariant
#   file         : version.py
#   file_relpath : src/docvariant/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""DocVariant `version` command.

Prints the current DocVariant version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docvariant.constants import DOCVARIANT_VERSION

if TYPE_CHECKING:
    from docvariant.cli.console import ClickConsole


@click.command(
    name="version",
    help="Show the current version of DocVariant.",
)
def version_command() -> None:
    """Show the current version of DocVariant."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("DocVariant version:", bold=True, underline=True))
        console.print(f"    {console.styled(DOCVARIANT_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCVARIANT_VERSION, bold=True))
