# topmark:header:start
#
#   project      : YamlScribe
#   file         : nodes.py
#   file_relpath : src/yamlscribe/core/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value Tree: the closed set of node shapes the emitter knows how to render.

The classifier (`yamlscribe.core.classifier`) turns live Python values into
these nodes; the emitter (`yamlscribe.core.emitter`) walks them. Nodes are
immutable once built.

Shapes:
    - `ScalarNode`: null, bool, int, float or text.
    - `SequenceNode`: ordered items.
    - `MappingNode`: textual keys, already unique and ordered for output.
    - `RecordNode`: eligible fields of a struct-like value, in declaration order.
    - `IndirectionNode`: an optional reference; empty renders as ``null``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class ScalarKind(str, Enum):
    """Variant tag of a `ScalarNode`."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class ScalarNode:
    """A leaf value.

    Attributes:
        kind (ScalarKind): Variant tag.
        value (bool | int | float | str | None): The literal value.
    """

    kind: ScalarKind
    value: bool | int | float | str | None = None

    def is_zero(self) -> bool:
        """Return True for the "nothing interesting here" value of the kind."""
        if self.kind is ScalarKind.NULL:
            return True
        if self.kind is ScalarKind.BOOL:
            return not self.value
        if self.kind is ScalarKind.TEXT:
            return self.value == ""
        return self.value == 0


@dataclass(frozen=True, slots=True)
class SequenceNode:
    """Ordered collection of child nodes."""

    items: tuple[Node, ...] = ()

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class MappingNode:
    """Key/value pairs with unique textual keys, in output order."""

    entries: tuple[tuple[str, Node], ...] = ()

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True, slots=True)
class RecordNode:
    """Named fields of a struct-like value, in declaration order.

    Fields that are private, unnamed or zero-valued are dropped by the
    classifier and never reach this node.
    """

    fields: tuple[tuple[str, Node], ...] = ()

    def __len__(self) -> int:
        return len(self.fields)


@dataclass(frozen=True, slots=True)
class IndirectionNode:
    """An optional reference to another node.

    Unwrapping does not change the indentation depth.
    """

    target: Node | None = None


Node = Union[ScalarNode, SequenceNode, MappingNode, RecordNode, IndirectionNode]

NODE_TYPES: tuple[type, ...] = (
    ScalarNode,
    SequenceNode,
    MappingNode,
    RecordNode,
    IndirectionNode,
)

NULL_NODE: ScalarNode = ScalarNode(ScalarKind.NULL)


def is_complex(node: Node) -> bool:
    """Return True when a node renders over several lines.

    Non-empty sequences and mappings and all records are complex. Indirections
    take the complexity of their target; empty indirections are not complex.

    Args:
        node (Node): Node to test.

    Returns:
        bool: Whether the node is complex.
    """
    if isinstance(node, IndirectionNode):
        return node.target is not None and is_complex(node.target)
    if isinstance(node, RecordNode):
        return True
    if isinstance(node, (SequenceNode, MappingNode)):
        return len(node) > 0
    return False


def is_zero(node: Node) -> bool:
    """Return True when a record field holding `node` should be omitted.

    Zero values are: null, ``false``, ``0``, ``0.0``, ``""``, empty sequences,
    empty mappings and empty indirections. A record is never zero, and neither
    is an indirection holding something, even a zero scalar.

    Args:
        node (Node): Field value to test.

    Returns:
        bool: Whether the value counts as zero/empty.
    """
    if isinstance(node, ScalarNode):
        return node.is_zero()
    if isinstance(node, (SequenceNode, MappingNode)):
        return len(node) == 0
    if isinstance(node, IndirectionNode):
        return node.target is None
    return False
