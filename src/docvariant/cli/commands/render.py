# topmark:header:start
#
#   project      : DocVariant
#   file         : render.py
#   file_relpath : src/docvariant/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""DocVariant `render` command.

Runs the per-file pipeline on a single document and prints the result to
stdout. Nothing is written to disk, which makes it handy for checking how a
chapter looks for a given tag.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from docvariant.cli.config_resolver import resolve_config_from_click
from docvariant.cli.errors import domain_errors
from docvariant.cli.options import CONTEXT_SETTINGS, common_config_options, common_source_options
from docvariant.pipeline.engine import process_document
from docvariant.pipeline.pipelines import Pipeline

if TYPE_CHECKING:
    from docvariant.cli.console import ClickConsole
    from docvariant.config import Config


@click.command(
    name="render",
    context_settings=CONTEXT_SETTINGS,
    help="Render one document for a tag and print it to stdout.",
)
@click.argument("file", type=click.Path(dir_okay=False))
@click.option(
    "--chapter",
    "chapter",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Chapter index substituted for %chapternum%.",
)
@common_source_options
@common_config_options
@click.pass_context
def render_command(
    ctx: click.Context,
    *,
    file: str,
    chapter: int,
    tag: str | None,
    source_dir: str | None,
    doc_url: str | None,
    no_config: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Render FILE for a tag and print it to stdout."""
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    with domain_errors():
        config: Config = resolve_config_from_click(
            no_config=no_config,
            config_paths=config_paths,
            overrides={"tag": tag, "source_dir": source_dir, "doc_url": doc_url},
        )
        path = Path(file).resolve()
        ctx_doc = process_document(
            path,
            config=config,
            chapter_index=chapter,
            steps=Pipeline.RENDER.steps,
            prune=False,
        )

    console.write(ctx_doc.text)
