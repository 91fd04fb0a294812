# topmark:header:start
#
#   project      : DocVariant
#   file         : __init__.py
#   file_relpath : src/docvariant/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""DocVariant package.

DocVariant preprocesses reStructuredText sources before they are handed to
Sphinx. It expands ``#include`` directives, keeps or drops ``#ifdef``/``#endif``
blocks depending on the build tag, and substitutes ``%placeholder%`` markers
while keeping grid-table columns aligned. It exposes both a CLI and a small
typed API (`docvariant.api`).
"""

from __future__ import annotations
