# topmark:header:start
#
#   project      : DocVariant
#   file         : conditional.py
#   file_relpath : src/docvariant/pipeline/steps/conditional.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Conditional filter step: resolve ``#ifdef``/``#endif`` blocks for the build tag."""

from __future__ import annotations

from typing import TYPE_CHECKING

from docvariant.directives.conditionals import filter_conditionals
from docvariant.pipeline.context import Stage
from docvariant.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from docvariant.pipeline.context import ProcessingContext


class ConditionalStep(BaseStep):
    """Unwrap blocks labelled with the build tag and drop all other blocks."""

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, stage=Stage.CONDITIONALS_RESOLVED)

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.lines is not None, "context.lines not loaded"
        ctx.lines = filter_conditionals(ctx.lines, ctx.config.tag, path=ctx.path)
