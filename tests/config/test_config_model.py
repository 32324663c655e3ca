# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `GeneratorConfig` validation, overrides and TOML tables."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from yamlscribe.config import DuplicateKeyPolicy, GeneratorConfig
from yamlscribe.constants import DEFAULT_HEADER_LINES
from yamlscribe.core.errors import ConfigError

if TYPE_CHECKING:
    from yamlscribe.config.types import TomlTable


def test_defaults() -> None:
    """Defaults: two-space indent, flow up to five items, first duplicate key wins."""
    cfg = GeneratorConfig()
    assert cfg.indent == "  "
    assert cfg.flow_max_items == 5
    assert cfg.duplicate_keys is DuplicateKeyPolicy.FIRST_WINS
    assert cfg.header_lines == DEFAULT_HEADER_LINES


@pytest.mark.parametrize(
    "kwargs",
    [
        {"indent": ""},
        {"indent": "\t"},
        {"flow_max_items": -1},
        {"header_lines": ("not a comment",)},
        {"workflow_header_lines": ("# two\nlines",)},
    ],
)
def test_invalid_values_raise(kwargs: dict[str, object]) -> None:
    """Invalid settings are rejected at construction time."""
    with pytest.raises(ConfigError):
        GeneratorConfig(**kwargs)  # type: ignore[arg-type]


def test_with_overrides_skips_none_and_unknown() -> None:
    """None means "keep"; unknown keys are ignored; list headers become tuples."""
    base = GeneratorConfig()
    cfg = base.with_overrides(
        {"indent": None, "flow_max_items": 3, "bogus": 1, "header_lines": ["# a"]}
    )
    assert cfg.indent == base.indent
    assert cfg.flow_max_items == 3
    assert cfg.header_lines == ("# a",)
    assert base.with_overrides({}) is base


def test_from_toml_table_full() -> None:
    """All recognized keys are applied."""
    table: TomlTable = {
        "format": {
            "indent": 4,
            "flow_max_items": 2,
            "duplicate_keys": "LAST_WINS",
        },
        "header": {"lines": ["# one"], "workflow_lines": ["# wf"]},
    }
    cfg = GeneratorConfig.from_toml_table(table)
    assert cfg.indent == "    "
    assert cfg.flow_max_items == 2
    assert cfg.duplicate_keys is DuplicateKeyPolicy.LAST_WINS
    assert cfg.header_lines == ("# one",)
    assert cfg.workflow_header_lines == ("# wf",)


def test_from_toml_table_header_disabled() -> None:
    """``enabled = false`` clears both header tuples, even when lines are given."""
    cfg = GeneratorConfig.from_toml_table({"header": {"enabled": False, "lines": ["# x"]}})
    assert cfg.header_lines == ()
    assert cfg.workflow_header_lines == ()


def test_from_toml_table_ignores_wrong_types(caplog: pytest.LogCaptureFixture) -> None:
    """Values of the wrong type are logged and ignored."""
    caplog.set_level(logging.WARNING)
    cfg = GeneratorConfig.from_toml_table(
        {"format": {"indent": "two", "flow_max_items": True}, "header": "nope"}
    )
    assert cfg == GeneratorConfig()
    assert "expected an integer" in caplog.text


@pytest.mark.parametrize(
    "table",
    [
        {"format": {"indent": 0}},
        {"format": {"flow_max_items": -2}},
        {"format": {"duplicate_keys": "sometimes"}},
        {"header": {"lines": ["plain text"]}},
    ],
)
def test_from_toml_table_invalid_values(table: TomlTable) -> None:
    """Well-typed but invalid values raise ConfigError."""
    with pytest.raises(ConfigError):
        GeneratorConfig.from_toml_table(table)


def test_from_toml_table_layers_over_base() -> None:
    """Keys absent from the table keep the base value."""
    base = GeneratorConfig(flow_max_items=9)
    cfg = GeneratorConfig.from_toml_table({"format": {"indent": 3}}, base=base)
    assert cfg.flow_max_items == 9
    assert cfg.indent == "   "


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("error", DuplicateKeyPolicy.ERROR),
        ("First-Wins", DuplicateKeyPolicy.FIRST_WINS),
        ("last_wins", DuplicateKeyPolicy.LAST_WINS),
        ("other", None),
        (None, None),
    ],
)
def test_duplicate_key_policy_from_name(
    name: str | None, expected: DuplicateKeyPolicy | None
) -> None:
    """Policy names are matched case-insensitively, with _ and - interchangeable."""
    assert DuplicateKeyPolicy.from_name(name) is expected
