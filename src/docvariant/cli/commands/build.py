# topmark:header:start
#
#   project      : DocVariant
#   file         : build.py
#   file_relpath : src/docvariant/cli/commands/build.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""DocVariant `build` command.

Processes every document of the build list for one tag and writes the result
under the output directory, then copies the assets named by the copy list.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docvariant.cli.config_resolver import resolve_config_from_click
from docvariant.cli.errors import domain_errors
from docvariant.cli.options import (
    CONTEXT_SETTINGS,
    DETAILED,
    QUIET,
    common_build_options,
    common_config_options,
    common_source_options,
)
from docvariant.pipeline.engine import run_build

if TYPE_CHECKING:
    from docvariant.cli.console import ClickConsole
    from docvariant.config import Config
    from docvariant.pipeline.engine import BuildResult


@click.command(
    name="build",
    context_settings=CONTEXT_SETTINGS,
    help="Build the documentation tree for one product variant.",
)
@common_source_options
@common_build_options
@common_config_options
@click.pass_context
def build_command(
    ctx: click.Context,
    *,
    tag: str | None,
    source_dir: str | None,
    doc_url: str | None,
    output_dir: str | None,
    build_list: str | None,
    copy_list: str | None,
    clean: bool,
    dry_run: bool,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Build the documentation tree for one product variant."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    with domain_errors():
        config: Config = resolve_config_from_click(
            no_config=no_config,
            config_paths=config_paths,
            overrides={
                "tag": tag,
                "source_dir": source_dir,
                "doc_url": doc_url,
                "output_dir": output_dir,
                "build_list": build_list,
                "copy_list": copy_list,
                "clean": clean,
                "dry_run": dry_run,
            },
        )
        result: BuildResult = run_build(config)

    if vlevel <= QUIET:
        return

    if vlevel >= DETAILED:
        for doc in result.documents:
            target = doc.output_path or "(not written)"
            console.print(f"  [{doc.chapter_index}] {doc.relpath} -> {target}")
        for asset in result.assets:
            console.print(f"  [asset] {asset}")

    verb = "Processed" if config.dry_run else "Built"
    summary = (
        f"{verb} {len(result.documents)} document(s) and {len(result.assets)} asset(s) "
        f"for tag '{config.tag}'"
    )
    console.print(console.styled(summary, fg="green", bold=True))
    if not config.dry_run:
        console.print(f"Output: {config.output_dir}")
