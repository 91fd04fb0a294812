# topmark:header:start
#
#   project      : DocVariant
#   file         : __init__.py
#   file_relpath : src/docvariant/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across DocVariant.

Included modules:

- ``errors``
  The fatal error kinds raised by the directive processors and collaborators.

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``.
"""

from __future__ import annotations
