# topmark:header:start
#
#   project      : DocVariant
#   file         : logging.py
#   file_relpath : src/docvariant/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Diagnostic logging for DocVariant.

Every module logs through ``get_logger(__name__)``. Records go to stdout,
coloured by severity with `yachalk`. The threshold defaults to CRITICAL and can
be lowered with the ``DOCVARIANT_LOG_LEVEL`` environment variable, which
accepts level names (including the extra ``TRACE`` level) or numbers.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "DOCVARIANT_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"


class DocvariantLogger(logging.Logger):
    """Logger with a ``trace()`` method for the TRACE level below DEBUG."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` with severity TRACE."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(DocvariantLogger)


# Highest threshold first
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colours each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.blue(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``DOCVARIANT_LOG_LEVEL``, or None if unset or unknown."""
    val = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not val:
        return None
    if val.isdigit():
        return int(val)
    level = logging.getLevelName(val)
    return level if isinstance(level, int) else None


def setup_logging(level: int | None = None) -> None:
    """Install a single coloured stdout handler on the root logger.

    Args:
        level (int | None): Threshold to use. When None, the environment is
            consulted and CRITICAL is the fallback.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> DocvariantLogger:
    """Return the `DocvariantLogger` registered under ``name``."""
    return cast("DocvariantLogger", logging.getLogger(name))
