# topmark:header:start
#
#   project      : DocVariant
#   file         : pipelines.py
#   file_relpath : src/docvariant/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Named pipeline variants for DocVariant (immutable, typed step sequences).

Overview
--------
- ``RESOLVE``: includer → conditional → substituter (buffer already loaded)
- ``RENDER``: reader + RESOLVE (also used for every included file)
- ``BUILD``: RENDER + writer

```mermaid
flowchart LR
  D[reader] --> I[includer] --> C[conditional] --> S[substituter] --> W[writer]
  I -. recursive RENDER .-> D
```

Notes:
* Includes come first so that included text goes through the conditional and
  substitution passes; substitutions come last so that they also see text that
  was just included or unwrapped.
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from docvariant.pipeline.contracts import Step

from .steps import conditional, includer, reader, substituter, writer

RESOLVE_PIPELINE: Final[tuple[Step, ...]] = (
    includer.IncluderStep(),  # Expand #include directives (recursively)
    conditional.ConditionalStep(),  # Resolve #ifdef/#endif blocks for the tag
    substituter.SubstituterStep(),  # Replace %placeholders%, keeping tables aligned
)

RENDER_PIPELINE: Final[tuple[Step, ...]] = (reader.ReaderStep(),) + RESOLVE_PIPELINE

BUILD_PIPELINE: Final[tuple[Step, ...]] = RENDER_PIPELINE + (
    writer.WriterStep(),  # Persist under the output tree
)


class Pipeline(tuple[Step, ...], Enum):
    """Available execution pipelines, mapped to their step sequences."""

    RESOLVE = RESOLVE_PIPELINE
    RENDER = RENDER_PIPELINE
    BUILD = BUILD_PIPELINE

    @property
    def steps(self) -> tuple[Step, ...]:
        """Return the instantiated, ordered step sequence for this pipeline."""
        return self.value
