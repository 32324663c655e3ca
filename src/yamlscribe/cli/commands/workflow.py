# topmark:header:start
#
#   project      : YamlScribe
#   file         : workflow.py
#   file_relpath : src/yamlscribe/cli/commands/workflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe `workflow` command.

Reads a workflow definition (JSON or TOML) and writes it with the fixed
workflow layout: name/description/version, ``config``, ``workflow.steps`` and
``metadata``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import click

from yamlscribe.cli.cli_types import InputFormat
from yamlscribe.cli.config_resolver import resolve_config_from_click
from yamlscribe.cli.errors import YamlScribeDataError, from_library_error
from yamlscribe.cli.io import load_input, write_output
from yamlscribe.cli.options import generator_options, input_options
from yamlscribe.core.errors import YamlScribeError
from yamlscribe.generator import YamlGenerator

if TYPE_CHECKING:
    from yamlscribe.cli.console import ConsoleLike
    from yamlscribe.config import GeneratorConfig
    from yamlscribe.config.types import DuplicateKeyPolicy


@click.command(
    name="workflow",
    help="Serialize a workflow definition (file or '-' for STDIN) with the workflow layout.",
)
@input_options
@generator_options
def workflow_command(
    *,
    input_path: str,
    input_format: InputFormat,
    output_path: str | None,
    config_path: str | None,
    no_config: bool,
    duplicate_keys: DuplicateKeyPolicy | None,
    flow_max_items: int | None,
    indent: int | None,
    no_header: bool,
) -> None:
    """Serialize the workflow definition in INPUT."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    config: GeneratorConfig = resolve_config_from_click(
        config_path=config_path,
        no_config=no_config,
        indent=indent,
        flow_max_items=flow_max_items,
        duplicate_keys=duplicate_keys,
        no_header=no_header,
    )
    workflow: Any = load_input(input_path, input_format)
    if not isinstance(workflow, Mapping):
        raise YamlScribeDataError(
            f"A workflow definition must be a mapping, got {type(workflow).__name__}"
        )

    try:
        document: str = YamlGenerator(config).generate_workflow_section(workflow)
    except YamlScribeError as exc:
        raise from_library_error(exc) from exc

    write_output(document, output_path, console)
