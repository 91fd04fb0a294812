# topmark:header:start
#
#   project      : DocVariant
#   file         : __init__.py
#   file_relpath : src/docvariant/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""DocVariant processing pipeline package.

This package contains the components that run the directive processors over
one document at a time:

- Context handling and per-file state (`docvariant.pipeline.context`)
- Step implementations (reader, includer, conditional, substituter, writer)
- Pipeline assembly (`docvariant.pipeline.pipelines`) and execution helpers
  (`docvariant.pipeline.runner`, `docvariant.pipeline.engine`)
"""
