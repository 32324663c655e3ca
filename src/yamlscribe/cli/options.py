# topmark:header:start
#
#   project      : YamlScribe
#   file         : options.py
#   file_relpath : src/yamlscribe/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based YamlScribe CLI.

This module centralizes reusable options (verbosity, color, generator settings,
input selection) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, ParamSpec, TypeVar

import click

from yamlscribe.cli.cli_types import EnumChoiceParam, InputFormat
from yamlscribe.cli.errors import YamlScribeUsageError
from yamlscribe.config.logging import TRACE_LEVEL
from yamlscribe.config.types import DuplicateKeyPolicy

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The logging level as an integer.

    Raises:
        YamlScribeUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise YamlScribeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO
    if quiet_count >= 1:  # -q
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Repeat up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress diagnostics except errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode: Explicit color mode from CLI options (auto, always, never).
        stdout_isatty: Whether stdout is a TTY; if None, auto-detected.

    Returns:
        True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def input_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the INPUT argument and --input-format / --output options.

    INPUT defaults to ``-`` (STDIN).
    """
    f = click.option(
        "--output",
        "-o",
        "output_path",
        type=click.Path(dir_okay=False, writable=True),
        default=None,
        help="Write the YAML document to this file instead of STDOUT.",
    )(f)
    f = click.option(
        "--input-format",
        "input_format",
        type=EnumChoiceParam(InputFormat),
        default=InputFormat.AUTO.value,
        show_default=True,
        help="Format of INPUT; 'auto' picks TOML for *.toml files and JSON otherwise.",
    )(f)
    f = click.argument("input_path", metavar="INPUT", required=False, default="-")(f)
    return f


def generator_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds config file selection and generator setting overrides."""
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False),
        default=None,
        help="Read settings from this TOML file (yamlscribe.toml or pyproject.toml).",
    )(f)
    f = click.option(
        "--no-config",
        is_flag=True,
        help="Ignore yamlscribe.toml / pyproject.toml in the current directory.",
    )(f)
    f = click.option(
        "--duplicate-keys",
        "duplicate_keys",
        type=EnumChoiceParam(DuplicateKeyPolicy),
        default=None,
        help="How to handle mapping keys that render to the same text.",
    )(f)
    f = click.option(
        "--flow-max-items",
        type=click.IntRange(min=0),
        default=None,
        help="Longest list of simple items written on one line (default 5).",
    )(f)
    f = click.option(
        "--indent",
        type=click.IntRange(min=1),
        default=None,
        help="Spaces per indentation level (default 2).",
    )(f)
    f = click.option(
        "--no-header",
        is_flag=True,
        help="Omit the banner comment lines.",
    )(f)
    return f
