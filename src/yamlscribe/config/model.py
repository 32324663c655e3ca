# topmark:header:start
#
#   project      : YamlScribe
#   file         : model.py
#   file_relpath : src/yamlscribe/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generator configuration model.

This module defines `GeneratorConfig`, the immutable settings snapshot a
`YamlGenerator` renders with, and `load_config()`, which layers a TOML config
file over the built-in defaults.

Layering (lowest to highest precedence):
    1. Built-in defaults (the `GeneratorConfig` field defaults).
    2. ``yamlscribe.toml`` or ``[tool.yamlscribe]`` in ``pyproject.toml``.
    3. Explicit overrides (CLI options, API keyword arguments) via
       `GeneratorConfig.with_overrides`.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from yamlscribe.config.io import (
    discover_config_file,
    extract_config_table,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
)
from yamlscribe.config.keys import Toml
from yamlscribe.config.logging import get_logger
from yamlscribe.config.types import DuplicateKeyPolicy
from yamlscribe.constants import (
    DEFAULT_FLOW_MAX_ITEMS,
    DEFAULT_HEADER_LINES,
    DEFAULT_INDENT,
    WORKFLOW_HEADER_LINES,
)
from yamlscribe.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.config.types import ArgsLike, TomlTable

logger: YamlScribeLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GeneratorConfig:
    """Immutable rendering settings.

    Attributes:
        indent (str): One indentation unit; spaces only (default two spaces).
        flow_max_items (int): Longest sequence of simple items written in flow style.
        duplicate_keys (DuplicateKeyPolicy): Resolution of mapping keys sharing one textual form.
        header_lines (tuple[str, ...]): Comment lines opening a generic document.
        workflow_header_lines (tuple[str, ...]): Comment lines opening a workflow document.
    """

    indent: str = DEFAULT_INDENT
    flow_max_items: int = DEFAULT_FLOW_MAX_ITEMS
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.FIRST_WINS
    header_lines: tuple[str, ...] = DEFAULT_HEADER_LINES
    workflow_header_lines: tuple[str, ...] = WORKFLOW_HEADER_LINES

    def __post_init__(self) -> None:
        if not self.indent or self.indent.strip(" "):
            raise ConfigError(f"indent must be one or more spaces, got {self.indent!r}")
        if self.flow_max_items < 0:
            raise ConfigError(f"flow_max_items must be >= 0, got {self.flow_max_items}")
        for line in (*self.header_lines, *self.workflow_header_lines):
            if not line.startswith("#") or "\n" in line:
                raise ConfigError(f"header lines must be single-line comments, got {line!r}")

    def with_overrides(self, overrides: ArgsLike) -> GeneratorConfig:
        """Return a copy with the non-None entries of `overrides` applied.

        Args:
            overrides (ArgsLike): Field name → value; unknown names are ignored.

        Returns:
            GeneratorConfig: The updated snapshot.
        """
        known: set[str] = {f.name for f in dataclasses.fields(self)}
        changes: dict[str, Any] = {}
        for key, value in overrides.items():
            if value is None:
                continue
            if key not in known:
                logger.debug("Ignoring unknown config override %r", key)
                continue
            changes[key] = tuple(value) if key.endswith("header_lines") else value
        return dataclasses.replace(self, **changes) if changes else self

    @classmethod
    def from_toml_table(
        cls,
        table: TomlTable,
        base: GeneratorConfig | None = None,
    ) -> GeneratorConfig:
        """Build a config from a parsed YamlScribe TOML table.

        Values of the wrong type are logged and ignored; values of the right type
        that are out of range raise `ConfigError`.

        Args:
            table (TomlTable): The ``[tool.yamlscribe]`` table or a whole ``yamlscribe.toml``.
            base (GeneratorConfig | None): Config to layer over (defaults if None).

        Returns:
            GeneratorConfig: The resulting snapshot.

        Raises:
            ConfigError: If a value is invalid.
        """
        fmt: TomlTable = get_table_value(table, Toml.SECTION_FORMAT)
        header: TomlTable = get_table_value(table, Toml.SECTION_HEADER)

        overrides: dict[str, Any] = {}

        indent: int | None = get_int_value_or_none(fmt, Toml.KEY_INDENT)
        if indent is not None:
            if indent < 1:
                raise ConfigError(f"{Toml.KEY_INDENT} must be >= 1, got {indent}")
            overrides["indent"] = " " * indent
        overrides["flow_max_items"] = get_int_value_or_none(fmt, Toml.KEY_FLOW_MAX_ITEMS)

        policy_name: str | None = get_string_value_or_none(fmt, Toml.KEY_DUPLICATE_KEYS)
        if policy_name is not None:
            policy: DuplicateKeyPolicy | None = DuplicateKeyPolicy.from_name(policy_name)
            if policy is None:
                raise ConfigError(
                    f"{Toml.KEY_DUPLICATE_KEYS} must be one of "
                    f"{', '.join(p.value for p in DuplicateKeyPolicy)}; got {policy_name!r}"
                )
            overrides["duplicate_keys"] = policy

        overrides["header_lines"] = get_string_list_value_or_none(header, Toml.KEY_HEADER_LINES)
        overrides["workflow_header_lines"] = get_string_list_value_or_none(
            header, Toml.KEY_WORKFLOW_HEADER_LINES
        )
        if get_bool_value_or_none(header, Toml.KEY_HEADER_ENABLED) is False:
            overrides["header_lines"] = ()
            overrides["workflow_header_lines"] = ()

        return (base or cls()).with_overrides(overrides)


def load_config(path: Path | None = None, *, discover: bool = True) -> GeneratorConfig:
    """Load a `GeneratorConfig` from a TOML file.

    Args:
        path (Path | None): Explicit config file. When None and `discover` is
            True, ``yamlscribe.toml`` / ``pyproject.toml`` in the current
            directory are consulted.
        discover (bool): Whether to look for a config file when `path` is None.

    Returns:
        GeneratorConfig: The loaded config, or the defaults when no file applies.

    Raises:
        ConfigError: If the file cannot be read or holds invalid values.
    """
    source: Path | None = path
    if source is None and discover:
        source = discover_config_file()
    if source is None:
        logger.debug("No config file found; using defaults")
        return GeneratorConfig()

    data: TomlTable = load_toml_dict(source)
    table: TomlTable | None = extract_config_table(source, data)
    if table is None:
        logger.info("%s has no [tool.yamlscribe] section; using defaults", source)
        return GeneratorConfig()
    logger.debug("Using config from %s", source)
    return GeneratorConfig.from_toml_table(table)
