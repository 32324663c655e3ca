# topmark:header:start
#
#   project      : YamlScribe
#   file         : errors.py
#   file_relpath : src/yamlscribe/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the YamlScribe CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (`yamlscribe.core.errors`) are
    translated with `from_library_error()`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from yamlscribe.cli.exit_codes import ExitCode
from yamlscribe.core.errors import (
    ConfigError,
    DuplicateKeyError,
    UnsupportedTypeError,
    YamlScribeError,
)


class YamlScribeCliError(click.ClickException):
    """Base class for all YamlScribe CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class YamlScribeUsageError(YamlScribeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class YamlScribeDataError(YamlScribeCliError):
    """Error for input that cannot be parsed or serialized."""

    exit_code = ExitCode.DATA_ERROR


class YamlScribeConfigError(YamlScribeCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class YamlScribeFileNotFoundError(YamlScribeCliError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class YamlScribePermissionDeniedError(YamlScribeCliError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class YamlScribeIOError(YamlScribeCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


def from_library_error(exc: YamlScribeError) -> YamlScribeCliError:
    """Map a library error onto the matching CLI error.

    Args:
        exc (YamlScribeError): Error raised by the serializer or config layer.

    Returns:
        YamlScribeCliError: The CLI error to raise.
    """
    if isinstance(exc, ConfigError):
        return YamlScribeConfigError(str(exc))
    if isinstance(exc, (UnsupportedTypeError, DuplicateKeyError)):
        return YamlScribeDataError(str(exc))
    return YamlScribeCliError(str(exc))
