# topmark:header:start
#
#   project      : YamlScribe
#   file         : version.py
#   file_relpath : src/yamlscribe/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""YamlScribe `version` command.

Prints the current YamlScribe version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from yamlscribe.constants import YAMLSCRIBE_VERSION

if TYPE_CHECKING:
    from yamlscribe.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of YamlScribe.",
)
def version_command() -> None:
    """Show the current version of YamlScribe."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    # -v and above also name the program
    if ctx.obj.get("verbosity_level", logging.WARNING) <= logging.INFO:
        console.print(f"yamlscribe {YAMLSCRIBE_VERSION}")
    else:
        console.print(YAMLSCRIBE_VERSION)
