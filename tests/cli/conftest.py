# topmark:header:start
#
#   project      : YamlScribe
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running YamlScribe through Click's test runner.

`run_cli()` invokes the Click group in-process; `run_cli_in()` does the same
from a given working directory so config discovery sees the files a test
creates there.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from yamlscribe.cli.exit_codes import ExitCode
from yamlscribe.cli.main import cli
from yamlscribe.config import logging

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_logging() -> Iterator[None]:
    """Reinstall the test logging setup after each CLI run.

    The CLI installs a handler on the runner's (temporary) stderr stream.
    """
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["version"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory to run from; config discovery starts here.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` produced by `CliRunner.invoke`.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return run_cli(argv, input_text=input_text)
    finally:
        os.chdir(cwd)


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with `code`, showing the output otherwise."""
    assert result.exit_code == code, result.output


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert_exit(result, ExitCode.SUCCESS)
