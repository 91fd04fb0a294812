# topmark:header:start
#
#   project      : DocVariant
#   file         : runner.py
#   file_relpath : src/docvariant/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Run a DocVariant pipeline for a single document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.pipeline.context import Stage

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docvariant.config.logging import DocvariantLogger

    from .context import ProcessingContext
    from .contracts import Step

logger: DocvariantLogger = get_logger(__name__)


def run(
    ctx: ProcessingContext,
    steps: Sequence[Step],
    *,
    prune: bool = True,
) -> ProcessingContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ProcessingContext): Mutable processing context.
        steps (Sequence[Step]): Ordered sequence of pipeline steps.
        prune (bool): Release the buffer once the document has been written
            (default: `True`). Unwritten buffers are always kept.

    Returns:
        ProcessingContext: The final processing context after all steps have run.
    """
    logger.debug("tag=%s chapter=%d document=%s", ctx.config.tag, ctx.chapter_index, ctx.path)
    for step in steps:
        ctx = step(ctx)

    if prune and ctx.stage == Stage.WRITTEN:
        ctx.release()

    return ctx
