# topmark:header:start
#
#   project      : DocVariant
#   file         : reader.py
#   file_relpath : src/docvariant/pipeline/steps/reader.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""File reader step for the DocVariant pipeline.

Loads the document as UTF-8 text, keeping its native line terminators, and
exposes it as a ``keepends=True`` line buffer on ``ctx.lines``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.directives.patterns import split_lines
from docvariant.pipeline.context import Stage
from docvariant.pipeline.steps.base import BaseStep
from docvariant.utils.file import read_text

if TYPE_CHECKING:
    from docvariant.config.logging import DocvariantLogger
    from docvariant.pipeline.context import ProcessingContext

logger: DocvariantLogger = get_logger(__name__)


class ReaderStep(BaseStep):
    """Load the document into the context buffer.

    Raises:
        SourceFileNotFoundError: If the document (or an included file) is missing.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, stage=Stage.READ)

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Read only once; a pre-filled buffer (e.g. from the API) is kept."""
        return ctx.lines is None

    def run(self, ctx: ProcessingContext) -> None:
        """Read ``ctx.path`` into ``ctx.lines``."""
        text: str = read_text(ctx.path, referenced_from=ctx.included_from)
        ctx.lines = split_lines(text)
        logger.debug("Read %d line(s) from %s", len(ctx.lines), ctx.path)
