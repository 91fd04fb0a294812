# topmark:header:start
#
#   project      : DocVariant
#   file         : __init__.py
#   file_relpath : src/docvariant/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Configuration for DocVariant.

Build configs with `MutableConfig` (discovery, merge, CLI overrides), then
`freeze()` into a `Config` for the pipeline. Do not mutate a frozen `Config`;
use `Config.thaw()` to edit a copy.
"""

from __future__ import annotations

from docvariant.config.model import ArgsLike, Config, MutableConfig

__all__ = [
    "ArgsLike",
    "Config",
    "MutableConfig",
]
