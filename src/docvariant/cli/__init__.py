# topmark:header:start
#
#   project      : DocVariant
#   file         : __init__.py
#   file_relpath : src/docvariant/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Click-based command line interface for DocVariant."""
