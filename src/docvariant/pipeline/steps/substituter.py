# topmark:header:start
#
#   project      : DocVariant
#   file         : substituter.py
#   file_relpath : src/docvariant/pipeline/steps/substituter.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Substitution step: build the replacement table and apply it.

The table is rebuilt for every document because ``%chapternum%`` depends on
the chapter index. A tag that selects no brand yields no brand entries, so
``%brand%`` and friends are left untouched for such builds.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.constants import BRAND_PLACEHOLDER
from docvariant.directives.brands import build_replacements
from docvariant.directives.substitutions import substitute_placeholders
from docvariant.pipeline.context import Stage
from docvariant.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from docvariant.config.logging import DocvariantLogger
    from docvariant.pipeline.context import ProcessingContext

logger: DocvariantLogger = get_logger(__name__)


class SubstituterStep(BaseStep):
    """Replace ``%placeholder%`` markers, keeping grid-table columns aligned.

    Raises:
        InsufficientPaddingError: If a table cell is too narrow for a longer replacement.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, stage=Stage.SUBSTITUTED)

    def run(self, ctx: ProcessingContext) -> None:
        assert ctx.lines is not None, "context.lines not loaded"
        cfg = ctx.config
        ctx.replacements = build_replacements(
            cfg.tag,
            ctx.chapter_index,
            doc_url=cfg.doc_url,
            brands=cfg.brands,
        )
        if BRAND_PLACEHOLDER not in ctx.replacements:
            logger.debug("Tag %r selects no brand; brand placeholders are left as-is", cfg.tag)
        ctx.lines = substitute_placeholders(ctx.lines, ctx.replacements, path=ctx.path)
