# topmark:header:start
#
#   project      : DocVariant
#   file         : __main__.py
#   file_relpath : src/docvariant/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Module entry point for running DocVariant via ``python -m docvariant``.

Examples:
    Build the FreeNAS variant of a guide::

        python -m docvariant build --tag freenas
"""

from __future__ import annotations

from docvariant.cli.main import cli

if __name__ == "__main__":
    cli()
