# topmark:header:start
#
#   project      : YamlScribe
#   file         : __init__.py
#   file_relpath : src/yamlscribe/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe package.

YamlScribe serializes arbitrary Python values (scalars, sequences, mappings,
dataclasses and NamedTuples, arbitrarily nested) into deterministic,
human-readable YAML. It exposes both a small typed API and a CLI.

Example:
    ```python
    from dataclasses import dataclass

    from yamlscribe import generate, yaml_field


    @dataclass
    class Dataset:
        market: str
        start_time: str = yaml_field("start")


    print(generate({"dataset": Dataset("csi300", "2020-01-01")}))
    ```
"""

from __future__ import annotations

from yamlscribe.config import DuplicateKeyPolicy, GeneratorConfig, load_config
from yamlscribe.core.classifier import Classifier, Ref, YamlRenderable, classify
from yamlscribe.core.errors import (
    ConfigError,
    DuplicateKeyError,
    UnsupportedTypeError,
    YamlScribeError,
)
from yamlscribe.core.naming import resolve_field_name, yaml_field
from yamlscribe.core.scalars import escape_string, needs_quotes, render_scalar
from yamlscribe.generator import YamlGenerator, generate, generate_workflow_section
from yamlscribe.workflow import WorkflowStep

__all__: list[str] = [
    "Classifier",
    "ConfigError",
    "DuplicateKeyError",
    "DuplicateKeyPolicy",
    "GeneratorConfig",
    "Ref",
    "UnsupportedTypeError",
    "WorkflowStep",
    "YamlGenerator",
    "YamlRenderable",
    "YamlScribeError",
    "classify",
    "escape_string",
    "generate",
    "generate_workflow_section",
    "load_config",
    "needs_quotes",
    "render_scalar",
    "resolve_field_name",
    "yaml_field",
]
