# topmark:header:start
#
#   project      : YamlScribe
#   file         : getters.py
#   file_relpath : src/yamlscribe/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

These helpers extract typed values from parsed TOML tables. A value of the
wrong shape is logged as a warning and treated as absent (``None``), so a user
mistake in one key never prevents the rest of the file from loading.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from yamlscribe.config.logging import get_logger

if TYPE_CHECKING:
    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.config.types import TomlTable

logger: YamlScribeLogger = get_logger(__name__)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    if isinstance(value, Mapping):
        return dict(value)
    if value is not None:
        logger.warning("Ignoring [%s]: expected a table, got %s", key, type(value).__name__)
    return {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table."""
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    logger.warning("Ignoring %s = %r: expected a boolean", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return int(value)
    logger.warning("Ignoring %s = %r: expected an integer", key, value)
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return str(value)
    logger.warning("Ignoring %s = %r: expected a string", key, value)
    return None


def get_string_list_value_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table.

    Non-string items are dropped with a warning; a non-list value is ignored.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        list[str] | None: The string items, or None when the key is absent or not a list.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        logger.warning("Ignoring %s = %r: expected a list of strings", key, value)
        return None
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(str(item))
        else:
            logger.warning("Ignoring non-string item %r in %s", item, key)
    return out
