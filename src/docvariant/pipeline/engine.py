# topmark:header:start
#
#   project      : DocVariant
#   file         : engine.py
#   file_relpath : src/docvariant/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Execution helpers for running a complete build (engine layer).

This module runs the per-document pipeline for every entry of the build list
and then copies the auxiliary files. It is shared by the public API and the
CLI so that neither duplicates the orchestration.

Design goals:
  - No CLI dependencies: Do not import Click or anything under
    ``docvariant.cli.*`` from here. Presentation is the CLI's job.
  - Chapter numbering: the engine owns the chapter counter. Every top-level
    document gets the zero-based index of its position in the (filtered) build
    list; included files inherit the index of the document that includes them.
  - Fail fast: the first `DocvariantError` is logged and re-raised; documents
    already written stay on disk, nothing later is attempted.

Typical usage:

    result = run_build(cfg)
    for ctx in result.documents:
        print(ctx.relpath, ctx.output_path)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from docvariant.assets import copy_assets
from docvariant.build_list import read_build_list
from docvariant.config.logging import get_logger
from docvariant.core.errors import DocvariantError
from docvariant.pipeline import runner
from docvariant.pipeline.context import ProcessingContext
from docvariant.pipeline.pipelines import Pipeline
from docvariant.utils.file import prepare_output_dir

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from docvariant.config import Config
    from docvariant.config.logging import DocvariantLogger
    from docvariant.pipeline.contracts import Step

logger: DocvariantLogger = get_logger(__name__)


@dataclass
class BuildResult:
    """Outcome of a build.

    Attributes:
        documents (list[ProcessingContext]): One context per processed document,
            in build-list order.
        assets (list[Path]): Copied (or, in dry-run mode, selected) asset paths,
            relative to the source directory.
    """

    documents: list[ProcessingContext] = field(default_factory=lambda: [])
    assets: list[Path] = field(default_factory=lambda: [])

    @property
    def written(self) -> list[Path]:
        """Output paths of the documents actually written."""
        return [c.output_path for c in self.documents if c.output_path is not None]


def process_document(
    path: Path,
    *,
    config: Config,
    chapter_index: int = 0,
    steps: Sequence[Step] | None = None,
    prune: bool = True,
) -> ProcessingContext:
    """Run a pipeline for a single top-level document.

    Args:
        path (Path): Document path (relative paths are resolved against the source dir).
        config (Config): Frozen run configuration.
        chapter_index (int): Zero-based chapter index of the document.
        steps (Sequence[Step] | None): Pipeline to run (default: ``Pipeline.BUILD``).
        prune (bool): Release the buffer after writing.

    Returns:
        ProcessingContext: The final context.
    """
    ctx = ProcessingContext.bootstrap(path=path, config=config, chapter_index=chapter_index)
    return runner.run(ctx, steps if steps is not None else Pipeline.BUILD.steps, prune=prune)


def run_build(config: Config, *, prune: bool = True) -> BuildResult:
    """Build every document of the build list, then copy the assets.

    Args:
        config (Config): Frozen run configuration.
        prune (bool): Release document buffers once written (default: `True`).
            Dry runs keep the buffers so callers can inspect the output.

    Returns:
        BuildResult: The processed documents and copied assets.

    Raises:
        DocvariantError: The first error encountered (missing file, malformed or
            unmatched directive, include cycle, insufficient table padding).
    """
    result = BuildResult()
    steps: tuple[Step, ...] = Pipeline.RENDER.steps if config.dry_run else Pipeline.BUILD.steps

    try:
        documents: list[Path] = read_build_list(config)
        if not config.dry_run:
            prepare_output_dir(config.output_dir, clean=config.clean)

        for chapter_index, doc in enumerate(documents):
            logger.info("[%d] %s", chapter_index, doc)
            ctx = process_document(
                doc, config=config, chapter_index=chapter_index, steps=steps, prune=prune
            )
            result.documents.append(ctx)

        result.assets = copy_assets(config, exclude=[c.relpath for c in result.documents])
    except DocvariantError as e:
        logger.error("Build for tag '%s' failed: %s", config.tag, e)
        raise

    logger.info(
        "Built %d document(s) and %d asset(s) for tag '%s'",
        len(result.documents),
        len(result.assets),
        config.tag,
    )
    return result
