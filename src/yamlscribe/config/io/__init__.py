# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for YamlScribe configuration.

This package centralizes helpers for reading TOML config files and extracting
typed values from them. Keeping these utilities separate from the config model
keeps the model import-light.

TOML parsing:
    YamlScribe uses `tomlkit` for parsing; ``load_toml_dict()`` returns plain dicts.
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
)
from .loaders import (
    discover_config_file,
    extract_config_table,
    load_toml_dict,
    parse_toml_text,
)

__all__: list[str] = [
    "discover_config_file",
    "extract_config_table",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_string_list_value_or_none",
    "get_string_value_or_none",
    "get_table_value",
    "load_toml_dict",
    "parse_toml_text",
]
