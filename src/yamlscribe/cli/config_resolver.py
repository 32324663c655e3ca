# topmark:header:start
#
#   project      : YamlScribe
#   file         : config_resolver.py
#   file_relpath : src/yamlscribe/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a `GeneratorConfig` from Click parameters.

This module bridges CLI parsing and `yamlscribe.config`: it loads the config
file (explicit or discovered) and layers the CLI overrides on top.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from yamlscribe.cli.errors import YamlScribeConfigError, from_library_error
from yamlscribe.config import GeneratorConfig, load_config
from yamlscribe.config.logging import get_logger
from yamlscribe.core.errors import YamlScribeError

if TYPE_CHECKING:
    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.config.types import DuplicateKeyPolicy

logger: YamlScribeLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    config_path: str | None,
    no_config: bool,
    indent: int | None,
    flow_max_items: int | None,
    duplicate_keys: DuplicateKeyPolicy | None,
    no_header: bool,
) -> GeneratorConfig:
    """Build a `GeneratorConfig` from Click parameters.

    Resolution order (lowest → highest precedence):
      1. Built-in defaults.
      2. The config file: ``--config PATH`` if given, else ``yamlscribe.toml``
         or ``pyproject.toml`` (``[tool.yamlscribe]``) in the current directory
         unless ``--no-config`` is set.
      3. CLI overrides.

    Args:
        config_path (str | None): Explicit config file.
        no_config (bool): If True, skip config file discovery.
        indent (int | None): Spaces per indentation level.
        flow_max_items (int | None): Flow-style threshold for simple sequences.
        duplicate_keys (DuplicateKeyPolicy | None): Duplicate mapping key policy.
        no_header (bool): If True, drop the banner comment lines.

    Returns:
        GeneratorConfig: The effective configuration.

    Raises:
        YamlScribeConfigError: If the config file is missing or invalid.
    """
    explicit: Path | None = None
    if config_path is not None:
        explicit = Path(config_path)
        if not explicit.is_file():
            raise YamlScribeConfigError(f"Config file not found: {config_path}")

    try:
        config: GeneratorConfig = load_config(explicit, discover=not no_config)
        overrides: dict[str, Any] = {
            "indent": " " * indent if indent is not None else None,
            "flow_max_items": flow_max_items,
            "duplicate_keys": duplicate_keys,
        }
        if no_header:
            overrides["header_lines"] = ()
            overrides["workflow_header_lines"] = ()
        config = config.with_overrides(overrides)
    except YamlScribeError as exc:
        raise from_library_error(exc) from exc

    logger.trace("Effective config: %s", config)
    return config
