# topmark:header:start
#
#   project      : DocVariant
#   file         : __init__.py
#   file_relpath : src/docvariant/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""DocVariant CLI subcommands."""
