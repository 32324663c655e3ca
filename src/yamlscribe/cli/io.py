# topmark:header:start
#
#   project      : YamlScribe
#   file         : io.py
#   file_relpath : src/yamlscribe/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input and output plumbing for Click commands.

This module reads the command input document (a file or STDIN), decodes it as
JSON or TOML, and writes the rendered YAML to STDOUT or a file. OS-level errors
are translated into the matching `YamlScribeCliError` subclasses so commands
exit with a sysexits-aligned code.
"""

from __future__ import annotations

import datetime
import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from yamlscribe.cli.cli_types import InputFormat
from yamlscribe.cli.errors import (
    YamlScribeDataError,
    YamlScribeFileNotFoundError,
    YamlScribeIOError,
    YamlScribePermissionDeniedError,
)
from yamlscribe.config.io import parse_toml_text
from yamlscribe.config.logging import get_logger
from yamlscribe.core.errors import ConfigError

if TYPE_CHECKING:
    from yamlscribe.cli.console import ConsoleLike
    from yamlscribe.config.logging import YamlScribeLogger

logger: YamlScribeLogger = get_logger(__name__)

STDIN_SENTINEL = "-"


def read_input_text(input_path: str) -> str:
    """Return the text of `input_path`, or of STDIN when it is ``-``.

    Raises:
        YamlScribeFileNotFoundError: If the file does not exist.
        YamlScribePermissionDeniedError: If the file cannot be opened for reading.
        YamlScribeIOError: On any other OS-level failure.
        YamlScribeDataError: If the bytes are not valid UTF-8.
    """
    if input_path == STDIN_SENTINEL:
        logger.debug("Reading input document from STDIN")
        try:
            return click.get_text_stream("stdin").read()
        except UnicodeDecodeError as exc:
            raise YamlScribeDataError(f"STDIN is not valid UTF-8: {exc}") from exc

    path = Path(input_path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise YamlScribeFileNotFoundError(f"No such file: {input_path}") from exc
    except PermissionError as exc:
        raise YamlScribePermissionDeniedError(f"Permission denied: {input_path}") from exc
    except IsADirectoryError as exc:
        raise YamlScribeIOError(f"Is a directory: {input_path}") from exc
    except UnicodeDecodeError as exc:
        raise YamlScribeDataError(f"{input_path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise YamlScribeIOError(f"Cannot read {input_path}: {exc}") from exc


def decode_document(text: str, fmt: InputFormat, *, source: str = STDIN_SENTINEL) -> Any:
    """Decode `text` as JSON or TOML.

    Args:
        text (str): The raw document.
        fmt (InputFormat): Concrete format; ``AUTO`` is resolved against `source`.
        source (str): Input name, used for format detection and messages.

    Returns:
        Any: The decoded value (dicts, lists and scalars).

    Raises:
        YamlScribeDataError: If the document does not parse.
    """
    if fmt == InputFormat.AUTO:
        fmt = InputFormat.for_path(source)
    logger.debug("Decoding %s as %s", source, fmt.value)

    if fmt == InputFormat.TOML:
        try:
            return isoformat_dates(parse_toml_text(text))
        except ConfigError as exc:
            raise YamlScribeDataError(f"{source}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise YamlScribeDataError(f"{source}: invalid JSON: {exc}") from exc


def isoformat_dates(value: Any) -> Any:
    """Replace TOML date, time and datetime values with their ISO 8601 text."""
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, dict):
        return {key: isoformat_dates(item) for key, item in value.items()}
    if isinstance(value, list):
        return [isoformat_dates(item) for item in value]
    return value


def load_input(input_path: str, fmt: InputFormat) -> Any:
    """Read and decode the command input document."""
    return decode_document(read_input_text(input_path), fmt, source=input_path)


def write_output(document: str, output_path: str | None, console: ConsoleLike) -> None:
    """Write `document` followed by a newline to `output_path`, or to STDOUT.

    Raises:
        YamlScribePermissionDeniedError: If the file cannot be written.
        YamlScribeIOError: On any other OS-level failure.
    """
    if output_path is None or output_path == STDIN_SENTINEL:
        console.print(document)
        return

    path = Path(output_path)
    try:
        path.write_text(document + "\n", encoding="utf-8")
    except PermissionError as exc:
        raise YamlScribePermissionDeniedError(f"Permission denied: {output_path}") from exc
    except OSError as exc:
        raise YamlScribeIOError(f"Cannot write {output_path}: {exc}") from exc
    logger.info("Wrote %d characters to %s", len(document) + 1, path)
