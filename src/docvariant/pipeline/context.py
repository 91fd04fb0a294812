# topmark:header:start
#
#   project      : DocVariant
#   file         : context.py
#   file_relpath : src/docvariant/pipeline/context.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Processing context model for the DocVariant pipeline.

A `ProcessingContext` carries the state of a single document as it flows
through the steps: the frozen configuration, the chapter index handed down by
the engine, the include chain used for cycle detection, and the line buffer
each step rewrites.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from docvariant.utils.file import compute_relpath

if TYPE_CHECKING:
    from docvariant.config import Config
    from docvariant.pipeline.contracts import Step

__all__: list[str] = [
    "ProcessingContext",
    "Stage",
]


class Stage(Enum):
    """Last pipeline stage completed for a document."""

    PENDING = "pending"
    READ = "read"
    INCLUDES_RESOLVED = "includes resolved"
    CONDITIONALS_RESOLVED = "conditionals resolved"
    SUBSTITUTED = "substituted"
    WRITTEN = "written"


@dataclass
class ProcessingContext:
    r"""Context for one document in the DocVariant pipeline.

    Attributes:
        path (Path): Absolute path of the document.
        config (Config): Frozen configuration of the run (carries the build tag).
        chapter_index (int): Zero-based position of the top-level document in the
            build; included files inherit their parent's index.
        include_chain (tuple[Path, ...]): Documents currently open in the include
            stack, outermost first, ending with ``path``.
        included_from (Path | None): The including document, ``None`` at top level.
        steps (list[Step]): Steps executed so far.
        stage (Stage): Last completed stage.
        lines (list[str] | None): The document buffer (``keepends=True`` lines);
            ``None`` before reading or after pruning.
        replacements (dict[str, str]): Replacement table used by the substituter.
        output_path (Path | None): Where the writer stored the result.
    """

    path: Path
    config: Config
    chapter_index: int = 0
    include_chain: tuple[Path, ...] = ()
    included_from: Path | None = None
    steps: list[Step] = field(default_factory=lambda: [])
    stage: Stage = Stage.PENDING
    lines: list[str] | None = None
    replacements: dict[str, str] = field(default_factory=lambda: {})
    output_path: Path | None = None

    @classmethod
    def bootstrap(
        cls,
        *,
        path: Path,
        config: Config,
        chapter_index: int = 0,
        parent: ProcessingContext | None = None,
    ) -> ProcessingContext:
        """Create a context for a top-level document or for a file included by ``parent``.

        Args:
            path (Path): Document path; relative paths are resolved against the source dir.
            config (Config): Frozen run configuration.
            chapter_index (int): Chapter index (ignored when ``parent`` is given).
            parent (ProcessingContext | None): Including document, if any.

        Returns:
            ProcessingContext: A fresh context in the ``PENDING`` stage.
        """
        resolved = path if path.is_absolute() else config.source_dir / path
        resolved = resolved.resolve()
        if parent is None:
            return cls(
                path=resolved,
                config=config,
                chapter_index=chapter_index,
                include_chain=(resolved,),
            )
        return cls(
            path=resolved,
            config=config,
            chapter_index=parent.chapter_index,
            include_chain=(*parent.include_chain, resolved),
            included_from=parent.path,
        )

    @property
    def relpath(self) -> Path:
        """Document path relative to the source directory."""
        return compute_relpath(self.path, self.config.source_dir)

    @property
    def depth(self) -> int:
        """Include nesting depth (0 for top-level documents)."""
        return len(self.include_chain) - 1

    @property
    def text(self) -> str:
        """The current buffer as a single string."""
        return "".join(self.lines or [])

    def release(self) -> None:
        """Drop the buffer once it is no longer needed."""
        self.lines = None
