# topmark:header:start
#
#   project      : YamlScribe
#   file         : render.py
#   file_relpath : src/yamlscribe/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe `render` command.

Reads a JSON or TOML document and writes it as YAML.

Examples:
  Render a JSON file to STDOUT:

    $ yamlscribe render data.json

  Render TOML from STDIN into a file, without the banner:

    $ cat settings.toml | yamlscribe render - --input-format toml --no-header -o settings.yaml
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from yamlscribe.cli.cli_types import InputFormat
from yamlscribe.cli.config_resolver import resolve_config_from_click
from yamlscribe.cli.errors import from_library_error
from yamlscribe.cli.io import load_input, write_output
from yamlscribe.cli.options import generator_options, input_options
from yamlscribe.config.logging import get_logger
from yamlscribe.core.errors import YamlScribeError
from yamlscribe.generator import YamlGenerator

if TYPE_CHECKING:
    from yamlscribe.cli.console import ConsoleLike
    from yamlscribe.config import GeneratorConfig
    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.config.types import DuplicateKeyPolicy

logger: YamlScribeLogger = get_logger(__name__)


@click.command(
    name="render",
    help="Serialize a JSON or TOML document (file or '-' for STDIN) as YAML.",
)
@input_options
@generator_options
def render_command(
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
    """Serialize INPUT as a YAML document."""
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
    value: Any = load_input(input_path, input_format)
    logger.debug("Rendering %s (%s)", input_path, type(value).__name__)

    try:
        document: str = YamlGenerator(config).generate(value)
    except YamlScribeError as exc:
        raise from_library_error(exc) from exc

    write_output(document, output_path, console)
