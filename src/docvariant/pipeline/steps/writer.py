# topmark:header:start
#
#   project      : DocVariant
#   file         : writer.py
#   file_relpath : src/docvariant/pipeline/steps/writer.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Writer step: persist the processed document under the output tree.

The output path mirrors the document's path relative to the source directory.
Nothing is written in dry-run mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.pipeline.context import Stage
from docvariant.pipeline.steps.base import BaseStep
from docvariant.utils.file import write_text

if TYPE_CHECKING:
    from pathlib import Path

    from docvariant.config.logging import DocvariantLogger
    from docvariant.pipeline.context import ProcessingContext

logger: DocvariantLogger = get_logger(__name__)


class WriterStep(BaseStep):
    """Write ``ctx.lines`` to ``<output_dir>/<relpath>``."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, stage=Stage.WRITTEN)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Write only fully substituted documents, and never in dry-run mode."""
        if ctx.config.dry_run:
            logger.info("Dry run: not writing %s", ctx.relpath)
            return False
        return ctx.lines is not None and ctx.stage == Stage.SUBSTITUTED

    def run(self, ctx: ProcessingContext) -> None:
        target: Path = ctx.config.output_dir / ctx.relpath
        write_text(target, ctx.text)
        ctx.output_path = target
        logger.info("Wrote %s", target)
