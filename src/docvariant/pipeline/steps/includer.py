# topmark:header:start
#
#   project      : DocVariant
#   file         : includer.py
#   file_relpath : src/docvariant/pipeline/steps/includer.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Include resolver step for the DocVariant pipeline.

Every ``#include <path>`` line is replaced with the referenced file after that
file went through the complete per-file pipeline (read → includes →
conditionals → substitutions) with the same build tag and chapter index. The
recursion is a plain call into the runner; the context's include chain turns
a cyclic include into an `IncludeCycleError` instead of a stack overflow.

Include paths are resolved against the configured source directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger
from docvariant.directives.includes import check_include_chain, expand_includes, has_includes
from docvariant.pipeline.context import ProcessingContext, Stage
from docvariant.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from docvariant.config.logging import DocvariantLogger
    from docvariant.directives.includes import IncludeDirective

logger: DocvariantLogger = get_logger(__name__)


def resolve_include_path(target: str, source_dir: Path) -> Path:
    """Return the absolute path referenced by an include target."""
    p = Path(target)
    return (p if p.is_absolute() else source_dir / p).resolve()


class IncluderStep(BaseStep):
    """Expand ``#include`` directives recursively.

    Raises:
        MalformedDirectiveError: If an include line has trailing text.
        SourceFileNotFoundError: If an included file is missing.
        IncludeCycleError: If a file (transitively) includes itself.
    """

    def __init__(self) -> None:
        super().__init__(name=self.__class__.__name__, stage=Stage.INCLUDES_RESOLVED)

    def run(self, ctx: ProcessingContext) -> None:
        """Splice every included file into ``ctx.lines``."""
        assert ctx.lines is not None, "context.lines not loaded"
        if not has_includes(ctx.lines):
            return

        def load(directive: IncludeDirective) -> list[str]:
            return self.load_included(ctx, directive)

        ctx.lines = expand_includes(ctx.lines, load, path=ctx.path)

    def load_included(self, ctx: ProcessingContext, directive: IncludeDirective) -> list[str]:
        """Run the per-file pipeline on the file referenced by ``directive``.

        Args:
            ctx (ProcessingContext): Context of the including document.
            directive (IncludeDirective): The directive being expanded.

        Returns:
            list[str]: The fully processed lines of the included file.
        """
        # Imported here: the pipeline registry imports this module.
        from docvariant.pipeline import runner
        from docvariant.pipeline.pipelines import Pipeline

        target: Path = resolve_include_path(directive.target, ctx.config.source_dir)
        check_include_chain(ctx.include_chain, target)

        child = ProcessingContext.bootstrap(path=target, config=ctx.config, parent=ctx)
        child = runner.run(child, Pipeline.RENDER.steps, prune=False)
        assert child.lines is not None
        return child.lines
