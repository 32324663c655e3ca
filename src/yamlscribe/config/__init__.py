# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for YamlScribe: settings model, TOML loading and logging."""

from __future__ import annotations

from .model import GeneratorConfig, load_config
from .types import ArgsLike, DuplicateKeyPolicy, TomlTable

__all__: list[str] = [
    "ArgsLike",
    "DuplicateKeyPolicy",
    "GeneratorConfig",
    "TomlTable",
    "load_config",
]
