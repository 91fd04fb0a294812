# topmark:header:start
#
#   project      : DocVariant
#   file         : contracts.py
#   file_relpath : src/docvariant/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Type contracts for pipeline steps (engine-facing).

Steps are instantiated objects that are *callable*; the runner invokes them as
``step(ctx)`` where ``ctx`` is a `ProcessingContext`.

Lifecycle
---------
1) ``step.may_proceed(ctx)`` gates execution.
2) If allowed, ``step.run(ctx)`` mutates ``ctx`` in place. Source errors are
   raised as `DocvariantError` subclasses and abort the whole build.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .context import ProcessingContext


class Step(Protocol):
    """Protocol for a single pipeline step.

    Implementations typically subclass `docvariant.pipeline.steps.base.BaseStep`.
    """

    name: str

    def may_proceed(self, ctx: ProcessingContext) -> bool:
        """Return whether the step should run given the current context."""
        ...

    def run(self, ctx: ProcessingContext) -> None:
        """Execute the step, mutating the context in place."""
        ...

    def __call__(self, ctx: ProcessingContext) -> ProcessingContext:
        """Run the step lifecycle: gate → run (optional).

        Args:
            ctx (ProcessingContext): The mutable processing context.

        Returns:
            ProcessingContext: The same context object, for chaining.
        """
        ...
