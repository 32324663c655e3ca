# topmark:header:start
#
#   project      : YamlScribe
#   file         : test_classifier.py
#   file_relpath : tests/core/test_classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for value classification into Value Tree nodes."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import NamedTuple

import pytest

from yamlscribe.config.types import DuplicateKeyPolicy
from yamlscribe.core.classifier import Ref, classify, key_text
from yamlscribe.core.errors import DuplicateKeyError, UnsupportedTypeError
from yamlscribe.core.naming import yaml_field
from yamlscribe.core.nodes import (
    IndirectionNode,
    MappingNode,
    RecordNode,
    ScalarKind,
    ScalarNode,
    SequenceNode,
)


class Color(str, Enum):
    RED = "red"


@dataclass
class Inner:
    value: int = 0


@dataclass
class Outer:
    name: str
    inner: Inner = field(default_factory=Inner)
    tags: list[str] = field(default_factory=list)
    _secret: str = "hidden"
    renamed: int = yaml_field("alias", default=0)


class Point(NamedTuple):
    x: int
    y: int


def test_scalars_are_classified_by_kind() -> None:
    """bool is checked before int; numeric tower types are accepted."""
    assert classify(True) == ScalarNode(ScalarKind.BOOL, True)
    assert classify(3) == ScalarNode(ScalarKind.INT, 3)
    assert classify(2.5) == ScalarNode(ScalarKind.FLOAT, 2.5)
    assert classify(Fraction(1, 2)) == ScalarNode(ScalarKind.FLOAT, 0.5)
    assert classify("x") == ScalarNode(ScalarKind.TEXT, "x")
    assert classify(None) == ScalarNode(ScalarKind.NULL)


def test_str_enum_reduces_to_its_value() -> None:
    """A str-based Enum member is text, not its repr."""
    assert classify(Color.RED) == ScalarNode(ScalarKind.TEXT, "red")


def test_mapping_keys_are_sorted_by_text() -> None:
    """Mapping entries come out ordered by key text regardless of input order."""
    node = classify(OrderedDict([("c", 3), ("a", 1), ("b", 2)]))
    assert isinstance(node, MappingNode)
    assert [key for key, _ in node.entries] == ["a", "b", "c"]


def test_mapping_order_ignores_insertion_order() -> None:
    """Two dicts with the same items classify to the same tree."""
    assert classify({"c": 3, "a": 1}) == classify({"a": 1, "c": 3})


def test_non_string_keys_use_their_literal() -> None:
    """Scalar keys take their canonical literal; others fall back to str()."""
    assert key_text(True) == "true"
    assert key_text(1.0) == "1"
    assert key_text((1, 2)) == "(1, 2)"
    node = classify({2: "b", 10: "a"})
    assert isinstance(node, MappingNode)
    # Ordering is textual, not numeric.
    assert [key for key, _ in node.entries] == ["10", "2"]


def test_duplicate_textual_keys_keep_first_by_default() -> None:
    """1 and "1" are distinct dict keys but render identically; the first one wins."""
    node = classify({1: "int", "1": "str"})
    assert node == MappingNode((("1", ScalarNode(ScalarKind.TEXT, "int")),))


def test_duplicate_textual_keys_raise_under_error_policy() -> None:
    """The error policy reports the colliding key and where it was found."""
    with pytest.raises(DuplicateKeyError) as excinfo:
        classify({1: "int", "1": "str"}, duplicate_keys=DuplicateKeyPolicy.ERROR)
    assert excinfo.value.key == "1"
    assert excinfo.value.path == "$"


@pytest.mark.parametrize(
    ("policy", "expected"),
    [
        (DuplicateKeyPolicy.FIRST_WINS, "int"),
        (DuplicateKeyPolicy.LAST_WINS, "str"),
    ],
)
def test_duplicate_key_policies(policy: DuplicateKeyPolicy, expected: str) -> None:
    """Non-error policies keep one value in source order."""
    node = classify({1: "int", "1": "str"}, duplicate_keys=policy)
    assert node == MappingNode((("1", ScalarNode(ScalarKind.TEXT, expected)),))


def test_dataclass_fields_follow_declaration_order_and_skip_ineligible() -> None:
    """Private, zero-valued and empty fields are dropped; names are resolved."""
    node = classify(Outer(name="n", inner=Inner(5), renamed=7))
    assert isinstance(node, RecordNode)
    assert [key for key, _ in node.fields] == ["name", "inner", "alias"]


def test_nested_zero_record_is_kept() -> None:
    """A record field is never a zero value, even when its own body is empty."""
    node = classify(Outer(name="n"))
    assert isinstance(node, RecordNode)
    assert dict(node.fields)["inner"] == RecordNode(())


def test_named_tuple_is_a_record() -> None:
    """NamedTuples are records with lower-cased field names."""
    node = classify(Point(1, 0))
    assert node == RecordNode((("x", ScalarNode(ScalarKind.INT, 1)),))


def test_named_tuple_yaml_names() -> None:
    """``__yaml_names__`` renames NamedTuple fields."""

    class Window(NamedTuple):
        start: str
        end: str

    Window.__yaml_names__ = {"start": "from"}  # type: ignore[attr-defined]
    node = classify(Window("a", "b"))
    assert isinstance(node, RecordNode)
    assert [key for key, _ in node.fields] == ["from", "end"]


def test_sequences_and_sets() -> None:
    """Lists, tuples and ranges keep order; sets are sorted by text."""
    assert classify((1, 2)) == classify([1, 2])
    assert classify(range(2)) == classify([0, 1])
    node = classify({"b", "a", "c"})
    assert node == SequenceNode(
        tuple(ScalarNode(ScalarKind.TEXT, s) for s in ("a", "b", "c"))
    )


def test_ref_wraps_target() -> None:
    """Ref becomes an indirection; an empty Ref has no target."""
    assert classify(Ref()) == IndirectionNode(None)
    assert classify(Ref(1)) == IndirectionNode(ScalarNode(ScalarKind.INT, 1))


def test_yaml_renderable_hook() -> None:
    """Objects exposing ``__yaml_node__`` choose their own shape."""

    class Money:
        def __init__(self, amount: Decimal) -> None:
            self.amount = amount

        def __yaml_node__(self) -> object:
            return {"amount": str(self.amount), "currency": "EUR"}

    node = classify(Money(Decimal("1.50")))
    assert isinstance(node, MappingNode)
    assert dict(node.entries)["amount"] == ScalarNode(ScalarKind.TEXT, "1.50")


@pytest.mark.parametrize(
    "value",
    [
        lambda: None,
        (i for i in range(3)),
        b"bytes",
        object(),
        int,
        1 + 2j,
    ],
)
def test_unsupported_values_raise(value: object) -> None:
    """Callables, generators, bytes, opaque objects and types are rejected."""
    with pytest.raises(UnsupportedTypeError):
        classify(value)


def test_unsupported_error_reports_path() -> None:
    """The error names the offending type and where it sits in the input."""
    with pytest.raises(UnsupportedTypeError) as excinfo:
        classify({"steps": [{"ok": 1}, {"fn": print}]})
    assert excinfo.value.type_name == "builtin_function_or_method"
    assert excinfo.value.path == "$.steps[1].fn"
    assert isinstance(excinfo.value, TypeError)
