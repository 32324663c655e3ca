# topmark:header:start
#
#   project      : YamlScribe
#   file         : loaders.py
#   file_relpath : src/yamlscribe/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading YamlScribe configuration from
on-disk TOML files (``yamlscribe.toml`` / ``[tool.yamlscribe]`` in
``pyproject.toml``), and for parsing TOML input documents handed to the CLI.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from yamlscribe.config.logging import get_logger
from yamlscribe.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_SECTION
from yamlscribe.core.errors import ConfigError

if TYPE_CHECKING:
    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.config.types import TomlTable

logger: YamlScribeLogger = get_logger(__name__)


def parse_toml_text(text: str) -> TomlTable:
    """Parse TOML text into plain Python data.

    Args:
        text (str): TOML document.

    Returns:
        TomlTable: The top-level table, with tomlkit wrappers unwrapped.

    Raises:
        ConfigError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise ConfigError(f"invalid TOML: {exc}") from exc
    data: Any = doc.unwrap()
    return data if isinstance(data, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file.

    Args:
        path (Path): The path to the TOML file.

    Returns:
        TomlTable: The parsed TOML data.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read config file {path}: {exc}") from exc
    logger.debug("Loading TOML config from %s", path)
    try:
        return parse_toml_text(text)
    except ConfigError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the YamlScribe table from a parsed config source.

    ``pyproject.toml`` files contribute their ``[tool.yamlscribe]`` table; any
    other file is taken whole.

    Args:
        path (Path): Source path, used to recognize ``pyproject.toml``.
        data (TomlTable): Parsed TOML data.

    Returns:
        TomlTable | None: The config table, or None when a pyproject has no such section.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for part in PYPROJECT_SECTION.split("."):
        if not isinstance(table, dict):
            return None
        table = table.get(part)
    return table if isinstance(table, dict) else None


def discover_config_file(start: Path | None = None) -> Path | None:
    """Find a config file in `start` (default: current directory).

    ``yamlscribe.toml`` wins over ``pyproject.toml``; a ``pyproject.toml`` only
    counts when it carries a ``[tool.yamlscribe]`` section.

    Args:
        start (Path | None): Directory to look in.

    Returns:
        Path | None: The config file, or None if none applies.
    """
    base: Path = start or Path.cwd()

    candidate: Path = base / CONFIG_FILE_NAME
    if candidate.is_file():
        return candidate

    pyproject: Path = base / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        try:
            data: TomlTable = load_toml_dict(pyproject)
        except ConfigError as exc:
            logger.warning("Ignoring unreadable %s: %s", pyproject, exc)
            return None
        if extract_config_table(pyproject, data) is not None:
            return pyproject

    return None
