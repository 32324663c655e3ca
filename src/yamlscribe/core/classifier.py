# topmark:header:start
#
#   project      : YamlScribe
#   file         : classifier.py
#   file_relpath : src/yamlscribe/core/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value classifier: turn live Python values into a Value Tree.

`classify()` inspects a value whose shape is unknown at the call site and builds
the matching node from `yamlscribe.core.nodes`. The whole tree is built before
any text is rendered, so an unsupported value anywhere in the input fails the
call without producing partial output.

Recognized shapes, in dispatch order:
    - already-built nodes (returned as-is);
    - ``None`` and `Ref` (optional references);
    - objects implementing `YamlRenderable` (classified through their hook);
    - ``bool``, integers, real numbers and ``str`` (scalars);
    - mappings;
    - dataclass and ``NamedTuple`` instances (records);
    - lists, tuples, ranges and other sequences, sets (sequences).

Anything else raises `UnsupportedTypeError`. Cyclic inputs are not detected.
"""

from __future__ import annotations

import dataclasses
import numbers
from collections.abc import Mapping, Sequence, Set
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

from yamlscribe.config.logging import get_logger
from yamlscribe.config.types import DuplicateKeyPolicy
from yamlscribe.core.errors import DuplicateKeyError, UnsupportedTypeError
from yamlscribe.core.naming import is_public_field, resolve_field_name
from yamlscribe.core.nodes import (
    NODE_TYPES,
    NULL_NODE,
    IndirectionNode,
    MappingNode,
    RecordNode,
    ScalarKind,
    ScalarNode,
    SequenceNode,
    is_zero,
)
from yamlscribe.core.scalars import scalar_text

if TYPE_CHECKING:
    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.core.nodes import Node

logger: YamlScribeLogger = get_logger(__name__)

T = TypeVar("T")

# Byte strings have no text representation; they are rejected rather than
# rendered as sequences of ints.
_NON_SEQUENCE_TYPES: tuple[type, ...] = (str, bytes, bytearray, memoryview)


@dataclass(frozen=True, slots=True)
class Ref(Generic[T]):
    """Optional reference to a value.

    An empty `Ref` renders as ``null`` and counts as a zero value inside
    records; a non-empty one renders exactly like the value it holds.

    Attributes:
        value (T | None): The referenced value, or None.
    """

    value: T | None = None

    @property
    def is_empty(self) -> bool:
        return self.value is None


@runtime_checkable
class YamlRenderable(Protocol):
    """Capability for domain types that choose their own YAML shape.

    ``__yaml_node__`` returns any value `classify()` understands: a node, a
    plain scalar, a dict, a list, a dataclass...
    """

    def __yaml_node__(self) -> object:
        """Return the value to serialize in place of `self`."""
        ...


def key_text(key: object) -> str:
    """Return the textual form of a mapping key.

    Scalars use their canonical literal (``True`` → ``true``, ``1.0`` → ``1``);
    other hashable keys fall back to ``str()``.

    Args:
        key (object): Mapping key.

    Returns:
        str: Text used for ordering, uniqueness and output.
    """
    text: str | None = scalar_text(key)
    return text if text is not None else str(key)


def _child_path(path: str, name: str) -> str:
    if name.isidentifier():
        return f"{path}.{name}"
    return f"{path}[{name!r}]"


class Classifier:
    """Builds Value Trees under a fixed mapping-key policy.

    Args:
        duplicate_keys (DuplicateKeyPolicy): Resolution of colliding textual keys.

    Attributes:
        duplicate_keys (DuplicateKeyPolicy): Resolution of colliding textual keys.
    """

    duplicate_keys: DuplicateKeyPolicy

    def __init__(
        self,
        *,
        duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.FIRST_WINS,
    ) -> None:
        self.duplicate_keys = duplicate_keys

    def classify(self, value: object, path: str = "$") -> Node:
        """Classify `value` and, recursively, everything it contains.

        Args:
            value (object): Value of arbitrary shape.
            path (str): Location of `value`, used in error messages.

        Returns:
            Node: The root of the Value Tree.

        Raises:
            UnsupportedTypeError: If any value in the tree has no YAML shape.
            DuplicateKeyError: If two mapping keys collide under the ``error`` policy.
        """
        if isinstance(value, NODE_TYPES):
            return value  # type: ignore[return-value]
        if value is None:
            return NULL_NODE
        if isinstance(value, type):
            raise UnsupportedTypeError(f"type[{value.__qualname__}]", path)
        if isinstance(value, Ref):
            if value.is_empty:
                return IndirectionNode(None)
            return IndirectionNode(self.classify(value.value, path))
        if isinstance(value, YamlRenderable):
            return self.classify(value.__yaml_node__(), path)

        scalar: ScalarNode | None = self._classify_scalar(value)
        if scalar is not None:
            return scalar

        if isinstance(value, Mapping):
            return self._classify_mapping(value, path)
        if dataclasses.is_dataclass(value):
            return self._classify_dataclass(value, path)
        if isinstance(value, tuple) and hasattr(type(value), "_fields"):
            return self._classify_named_tuple(value, path)
        if isinstance(value, Sequence) and not isinstance(value, _NON_SEQUENCE_TYPES):
            return SequenceNode(
                tuple(self.classify(item, f"{path}[{i}]") for i, item in enumerate(value))
            )
        if isinstance(value, Set):
            return self._classify_set(value, path)

        raise UnsupportedTypeError(_type_name(value), path)

    # --- scalars ---

    def _classify_scalar(self, value: object) -> ScalarNode | None:
        # bool is an int subclass: test it first
        if isinstance(value, bool):
            return ScalarNode(ScalarKind.BOOL, value)
        if isinstance(value, numbers.Integral):
            return ScalarNode(ScalarKind.INT, int(value))
        if isinstance(value, numbers.Real):
            return ScalarNode(ScalarKind.FLOAT, float(value))
        if isinstance(value, str):
            return ScalarNode(ScalarKind.TEXT, str.__str__(value))
        return None

    # --- mappings ---

    def _classify_mapping(self, value: Mapping[Any, Any], path: str) -> MappingNode:
        entries: dict[str, Node] = {}
        for key, item in value.items():
            text: str = key_text(key)
            if text in entries:
                if self.duplicate_keys is DuplicateKeyPolicy.ERROR:
                    raise DuplicateKeyError(text, path)
                if self.duplicate_keys is DuplicateKeyPolicy.FIRST_WINS:
                    logger.debug("Duplicate key %r at %s: keeping first value", text, path)
                    continue
                logger.debug("Duplicate key %r at %s: keeping last value", text, path)
            entries[text] = self.classify(item, _child_path(path, text))

        # Output order never depends on insertion order.
        pairs: list[tuple[str, Node]] = sorted(entries.items(), key=lambda pair: pair[0])
        return MappingNode(tuple(pairs))

    # --- records ---

    def _record_field(
        self,
        owner: object,
        name: str,
        metadata: Mapping[str, Any] | None,
        path: str,
    ) -> tuple[str, Node] | None:
        if not is_public_field(name):
            logger.trace("Skipping private field %s.%s", path, name)
            return None
        external: str | None = resolve_field_name(name, metadata)
        if external is None:
            logger.trace("Skipping unnamed field %s.%s", path, name)
            return None
        node: Node = self.classify(getattr(owner, name), _child_path(path, name))
        if is_zero(node):
            logger.trace("Skipping zero-valued field %s.%s", path, name)
            return None
        return external, node

    def _classify_dataclass(self, value: Any, path: str) -> RecordNode:
        fields: list[tuple[str, Node]] = []
        for f in dataclasses.fields(value):
            entry = self._record_field(value, f.name, f.metadata, path)
            if entry is not None:
                fields.append(entry)
        return RecordNode(tuple(fields))

    def _classify_named_tuple(self, value: tuple[Any, ...], path: str) -> RecordNode:
        names: Mapping[str, str] = getattr(type(value), "__yaml_names__", None) or {}
        fields: list[tuple[str, Node]] = []
        for name in type(value)._fields:  # type: ignore[attr-defined]
            metadata: dict[str, str] | None = {"yaml": names[name]} if name in names else None
            entry = self._record_field(value, name, metadata, path)
            if entry is not None:
                fields.append(entry)
        return RecordNode(tuple(fields))

    # --- sets ---

    def _classify_set(self, value: Set[Any], path: str) -> SequenceNode:
        # Sets have no stable iteration order; sort by textual form.
        ordered: list[Any] = sorted(value, key=key_text)
        return SequenceNode(
            tuple(self.classify(item, f"{path}[{i}]") for i, item in enumerate(ordered))
        )


def _type_name(value: object) -> str:
    cls: type = type(value)
    module: str = cls.__module__
    if module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def classify(
    value: object,
    *,
    duplicate_keys: DuplicateKeyPolicy = DuplicateKeyPolicy.FIRST_WINS,
) -> Node:
    """Build the Value Tree for `value`.

    Args:
        value (object): Value of arbitrary shape.
        duplicate_keys (DuplicateKeyPolicy): Resolution of colliding textual mapping keys.

    Returns:
        Node: Root node of the tree.

    Raises:
        UnsupportedTypeError: If any value in the tree has no YAML shape.
        DuplicateKeyError: If two mapping keys collide under the ``error`` policy.
    """
    return Classifier(duplicate_keys=duplicate_keys).classify(value)
