# topmark:header:start
#
#   project      : YamlScribe
#   file         : constants.py
#   file_relpath : src/yamlscribe/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    YAMLSCRIBE_VERSION: str = get_version("yamlscribe")
except PackageNotFoundError:  # pragma: no cover - source checkout without install
    YAMLSCRIBE_VERSION = "0.0.0"

# Config discovery
CONFIG_FILE_NAME: Final[str] = "yamlscribe.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_SECTION: Final[str] = "tool.yamlscribe"

# Environment variable consulted by `resolve_env_log_level()`
LOG_LEVEL_ENV_VAR: Final[str] = "YAMLSCRIBE_LOG_LEVEL"

# Rendering defaults
DEFAULT_INDENT: Final[str] = "  "
DEFAULT_FLOW_MAX_ITEMS: Final[int] = 5

NULL_LITERAL: Final[str] = "null"
EMPTY_SEQUENCE_LITERAL: Final[str] = "[]"
EMPTY_MAPPING_LITERAL: Final[str] = "{}"
BLOCK_SEQUENCE_MARKER: Final[str] = "- "
KEY_SEPARATOR: Final[str] = ": "
FLOW_SEPARATOR: Final[str] = ", "

# Field metadata keys, most specific first
YAML_METADATA_KEY: Final[str] = "yaml"
JSON_METADATA_KEY: Final[str] = "json"
OMIT_MARKER: Final[str] = "-"

DEFAULT_HEADER_LINES: Final[tuple[str, ...]] = (
    "# Qlib workflow configuration file",
    "# Generated automatically by the Qlib visualization platform",
    "# https://github.com/microsoft/qlib",
)

WORKFLOW_HEADER_LINES: Final[tuple[str, ...]] = (
    "# Qlib workflow configuration file",
    "# Generated by Qlib Visualization Platform",
    "# Visit: https://github.com/microsoft/qlib",
)
