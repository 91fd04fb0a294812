# topmark:header:start
#
#   project      : DocVariant
#   file         : config_resolver.py
#   file_relpath : src/docvariant/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Resolve a frozen DocVariant configuration from Click parameters."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from docvariant.config import MutableConfig
from docvariant.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docvariant.config import ArgsLike, Config
    from docvariant.config.logging import DocvariantLogger

logger: DocvariantLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    no_config: bool,
    config_paths: Sequence[str],
    overrides: ArgsLike,
) -> Config:
    """Build a `Config` from Click parameters.

    Resolution order (lowest → highest precedence):
      1. Built-in defaults.
      2. ``pyproject.toml`` (``[tool.docvariant]``) then ``docvariant.toml`` in the
         current directory, unless ``--no-config`` is set.
      3. Explicit ``--config`` files, in order.
      4. CLI options (``overrides``; ``None`` values are ignored).

    Args:
        no_config (bool): Skip config discovery in the current directory.
        config_paths (Sequence[str]): Paths given with ``--config``.
        overrides (ArgsLike): CLI option values keyed by config field name.

    Returns:
        Config: The frozen configuration.

    Raises:
        ConfigError: If a config file is invalid or the result is inconsistent.
    """
    draft = MutableConfig.load_merged(
        config_paths=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    draft.apply_cli_args(overrides)
    config: Config = draft.freeze()
    logger.debug("Resolved config: %s", config)
    return config
