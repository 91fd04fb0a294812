# topmark:header:start
#
#   project      : DocVariant
#   file         : base.py
#   file_relpath : src/docvariant/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run?

Design goals
------------
- Single place for per-step bookkeeping (executed-steps list, tracing).
- Steps mutate the context; fatal source errors propagate as exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docvariant.config.logging import get_logger

if TYPE_CHECKING:
    from docvariant.config.logging import DocvariantLogger
    from docvariant.pipeline.context import ProcessingContext, Stage

logger: DocvariantLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``may_proceed()``
    and ``run()``. Do not override ``__call__`` unless you need custom
    lifecycle behavior.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
        stage (Stage | None): Stage recorded on the context after a successful ``run()``.
    """

    name: str
    stage: Stage | None = None

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (ProcessingContext): The mutable processing context for the current file.

        Returns:
             ProcessingContext: The same context instance after mutation.
        """
        ctx.steps.append(self)

        if not self.may_proceed(ctx):
            logger.debug("%s may not proceed for %s", self.name, ctx.path)
            return ctx

        logger.trace("%s: running for %s (depth %d)", self.name, ctx.relpath, ctx.depth)
        self.run(ctx)
        if self.stage is not None:
            ctx.stage = self.stage
        return ctx

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context.

        Default: run whenever a buffer has been loaded.

        Args:
            ctx (ProcessingContext): The mutable processing context.

        Returns:
            bool: True to run ``run()``, False to skip.
        """
        return ctx.lines is not None

    def run(self, ctx: ProcessingContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place.

        Args:
            ctx (ProcessingContext): The mutable processing context.
        """
        pass
