# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_render_command.py
#   file_relpath : tests/cli/test_render_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `render` command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli
from yamlscribe.cli.exit_codes import ExitCode
from yamlscribe.constants import DEFAULT_HEADER_LINES

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

DOC_JSON: str = '{"b": 1, "a": [1, 2], "c": {"d": "on"}}'
DOC_YAML: str = 'a: [1, 2]\nb: 1\nc: \n  d: "on"\n'


@mark_cli
def test_render_stdin_json() -> None:
    """JSON on STDIN is rendered to STDOUT with a trailing newline."""
    result: Result = run_cli(["render", "--no-config", "--no-header"], input_text=DOC_JSON)
    assert_SUCCESS(result)
    assert result.stdout == DOC_YAML


@mark_cli
def test_render_includes_default_header() -> None:
    """Without --no-header the banner precedes the document."""
    result: Result = run_cli(["render", "--no-config", "-"], input_text="null")
    assert_SUCCESS(result)
    assert result.stdout == "\n".join(DEFAULT_HEADER_LINES) + "\n\nnull\n"


@mark_cli
def test_render_toml_file(tmp_path: Path) -> None:
    """*.toml inputs are decoded as TOML."""
    src: Path = tmp_path / "settings.toml"
    src.write_text('name = "x"\n[model]\nlr = 0.5\n', encoding="utf-8")
    result: Result = run_cli(["render", "--no-config", "--no-header", str(src)])
    assert_SUCCESS(result)
    assert result.stdout == "model: \n  lr: 0.5\nname: x\n"


@mark_cli
def test_render_toml_dates_as_iso_text(tmp_path: Path) -> None:
    """TOML dates, times and datetimes are written as quoted ISO 8601 text."""
    src: Path = tmp_path / "d.toml"
    src.write_text(
        "when = 2024-01-01\n"
        "at = 07:32:00\n"
        "[run]\n"
        "stamps = [1979-05-27T07:32:00, 2024-02-29]\n",
        encoding="utf-8",
    )
    result: Result = run_cli(["render", "--no-config", "--no-header", str(src)])
    assert_SUCCESS(result)
    assert result.stdout == (
        'at: "07:32:00"\n'
        "run: \n"
        '  stamps: ["1979-05-27T07:32:00", "2024-02-29"]\n'
        'when: "2024-01-01"\n'
    )


@mark_cli
def test_render_explicit_input_format(tmp_path: Path) -> None:
    """--input-format overrides suffix detection."""
    src: Path = tmp_path / "data.txt"
    src.write_text("k = 1\n", encoding="utf-8")
    result: Result = run_cli(
        ["render", "--no-config", "--no-header", "--input-format", "toml", str(src)]
    )
    assert_SUCCESS(result)
    assert result.stdout == "k: 1\n"


@mark_cli
def test_render_overrides(tmp_path: Path) -> None:
    """--indent and --flow-max-items change the layout."""
    result: Result = run_cli(
        ["render", "--no-config", "--no-header", "--indent", "4", "--flow-max-items", "1"],
        input_text='{"a": {"b": [1, 2]}}',
    )
    assert_SUCCESS(result)
    assert result.stdout == "a: \n    b: \n        - 1\n        - 2\n"


@mark_cli
def test_render_output_file(tmp_path: Path) -> None:
    """-o writes the document to a file and nothing to STDOUT."""
    out: Path = tmp_path / "out.yaml"
    result: Result = run_cli(
        ["render", "--no-config", "--no-header", "-o", str(out)], input_text=DOC_JSON
    )
    assert_SUCCESS(result)
    assert result.stdout == ""
    assert out.read_text(encoding="utf-8") == DOC_YAML


@mark_cli
def test_render_uses_discovered_config(tmp_path: Path) -> None:
    """yamlscribe.toml in the working directory is honored unless --no-config."""
    (tmp_path / "yamlscribe.toml").write_text(
        '[format]\nindent = 3\n[header]\nlines = ["# custom"]\n', encoding="utf-8"
    )
    doc = '{"a": {"b": 1}}'

    result: Result = run_cli_in(tmp_path, ["render"], input_text=doc)
    assert_SUCCESS(result)
    assert result.stdout == "# custom\n\na: \n   b: 1\n"

    result = run_cli_in(tmp_path, ["render", "--no-config", "--no-header"], input_text=doc)
    assert_SUCCESS(result)
    assert result.stdout == "a: \n  b: 1\n"


@mark_cli
def test_render_explicit_config(tmp_path: Path) -> None:
    """--config reads a pyproject.toml [tool.yamlscribe] table."""
    cfg: Path = tmp_path / "pyproject.toml"
    cfg.write_text("[tool.yamlscribe.header]\nenabled = false\n", encoding="utf-8")
    result: Result = run_cli(["render", "--config", str(cfg)], input_text="[1]")
    assert_SUCCESS(result)
    assert result.stdout == "[1]\n"


@mark_cli
def test_render_missing_input_file(tmp_path: Path) -> None:
    """A missing INPUT exits with FILE_NOT_FOUND."""
    result: Result = run_cli(["render", "--no-config", str(tmp_path / "absent.json")])
    assert_exit(result, ExitCode.FILE_NOT_FOUND)
    assert result.stdout == ""


@mark_cli
def test_render_invalid_json() -> None:
    """Undecodable input exits with DATA_ERROR."""
    result: Result = run_cli(["render", "--no-config"], input_text="{not json")
    assert_exit(result, ExitCode.DATA_ERROR)
    assert "invalid JSON" in result.stderr


@mark_cli
def test_render_invalid_toml(tmp_path: Path) -> None:
    """Undecodable TOML also exits with DATA_ERROR."""
    src: Path = tmp_path / "bad.toml"
    src.write_text("a = = 1\n", encoding="utf-8")
    result: Result = run_cli(["render", "--no-config", str(src)])
    assert_exit(result, ExitCode.DATA_ERROR)


@mark_cli
def test_render_bad_config(tmp_path: Path) -> None:
    """Invalid or missing config files exit with CONFIG_ERROR."""
    cfg: Path = tmp_path / "yamlscribe.toml"
    cfg.write_text("[format]\nindent = 0\n", encoding="utf-8")
    result: Result = run_cli(["render", "--config", str(cfg)], input_text="1")
    assert_exit(result, ExitCode.CONFIG_ERROR)

    result = run_cli(["render", "--config", str(tmp_path / "absent.toml")], input_text="1")
    assert_exit(result, ExitCode.CONFIG_ERROR)


@mark_cli
def test_render_logs_go_to_stderr() -> None:
    """Diagnostics never mix with the YAML on STDOUT."""
    result: Result = run_cli(
        ["-vv", "render", "--no-config", "--no-header"], input_text=DOC_JSON
    )
    assert_SUCCESS(result)
    assert result.stdout == DOC_YAML
    assert "DEBUG" in result.stderr
