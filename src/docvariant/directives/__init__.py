# topmark:header:start
#
#   project      : DocVariant
#   file         : __init__.py
#   file_relpath : src/docvariant/directives/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Directive processors operating on line buffers.

The modules in this package are pure text transformations with no knowledge of
the pipeline. Each takes a list of ``keepends=True`` lines and returns a new
list:

- `includes`: expand ``#include <path>`` lines through a caller-supplied loader.
- `conditionals`: keep or drop ``#ifdef <label>`` / ``#endif <label>`` blocks.
- `substitutions`: replace ``%placeholder%`` markers, keeping table columns aligned.

The pipeline steps in `docvariant.pipeline.steps` wrap these functions and
thread the build configuration through them.
"""

from __future__ import annotations
