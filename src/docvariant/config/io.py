# topmark:header:start
#
#   project      : DocVariant
#   file         : io.py
#   file_relpath : src/docvariant/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

DocVariant reads its settings from ``docvariant.toml`` or from the
``[tool.docvariant]`` table of ``pyproject.toml``. Parsing is done with
`tomlkit` and returned as plain `dict` structures.

A broken config file never falls back to defaults: parse errors and wrongly
typed values raise `ConfigError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docvariant.config.logging import get_logger
from docvariant.constants import PYPROJECT_FILE_NAME
from docvariant.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from docvariant.config.logging import DocvariantLogger

TomlTable = dict[str, Any]

logger: DocvariantLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``docvariant.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_tool_table(data: TomlTable, path: Path) -> TomlTable | None:
    """Return the DocVariant section of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.docvariant]`` (``None`` when absent);
    any other file is taken as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool", {})
    section: Any = tool.get("docvariant") if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        logger.debug("No [tool.docvariant] section in %s", path)
        return None
    return cast("TomlTable", section)


def get_string_value_or_none(table: TomlTable, key: str, *, source: object = None) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (object): Origin of the table, used in error messages.

    Returns:
        str | None: The value, or ``None`` when the key is missing.

    Raises:
        ConfigError: If the value is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{source or 'config'}: '{key}' must be a string, got {value!r}")
    return value


def get_string_list(table: TomlTable, key: str, *, source: object = None) -> list[str]:
    """Extract a list of strings from a TOML table (missing key → empty list).

    Raises:
        ConfigError: If the value is not a list of strings.
    """
    value: Any = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"{source or 'config'}: '{key}' must be a list of strings")
    return list(cast("list[str]", value))


def get_bool_value_or_none(table: TomlTable, key: str, *, source: object = None) -> bool | None:
    """Extract an optional boolean from a TOML table.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"{source or 'config'}: '{key}' must be a boolean, got {value!r}")
    return value


def get_table_value(table: TomlTable, key: str, *, source: object = None) -> TomlTable:
    """Extract a sub-table from a TOML table (missing key → empty dict).

    Raises:
        ConfigError: If the value is not a table.
    """
    value: Any = table.get(key, {})
    if not isinstance(value, dict):
        raise ConfigError(f"{source or 'config'}: [{key}] must be a table")
    return cast("TomlTable", value)
