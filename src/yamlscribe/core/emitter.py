# topmark:header:start
#
#   project      : YamlScribe
#   file         : emitter.py
#   file_relpath : src/yamlscribe/core/emitter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render a Value Tree into YAML text.

The `Emitter` walks nodes depth-first and appends to a single text buffer.
Layout rules:

- Sequences: ``[]`` when empty; flow style ``[a, b, c]`` when every item is
  simple and there are at most ``flow_max_items`` of them; otherwise one
  ``- item`` line per element, the item rendered one level deeper.
- Mappings and records: ``{}`` for an empty mapping (an empty record writes
  nothing); otherwise one ``key: value`` line per entry. Every entry starts on
  a new line except the very first one of a depth-0 container. Complex values
  are rendered one level deeper than their key.
- Indirections render their target at the same depth.

Continuation lines are prefixed with ``indent * depth``.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING

from yamlscribe.constants import (
    BLOCK_SEQUENCE_MARKER,
    DEFAULT_FLOW_MAX_ITEMS,
    DEFAULT_INDENT,
    EMPTY_MAPPING_LITERAL,
    EMPTY_SEQUENCE_LITERAL,
    FLOW_SEPARATOR,
    KEY_SEPARATOR,
    NULL_LITERAL,
)
from yamlscribe.core.nodes import (
    IndirectionNode,
    MappingNode,
    RecordNode,
    ScalarNode,
    SequenceNode,
    is_complex,
)
from yamlscribe.core.scalars import render_scalar, render_string

if TYPE_CHECKING:
    from collections.abc import Sequence

    from yamlscribe.core.nodes import Node


class Emitter:
    """Accumulates the YAML rendering of one or more nodes.

    An emitter is single-use and not thread-safe; create one per document.

    Args:
        indent (str): One indentation unit.
        flow_max_items (int): Longest sequence of simple items written in flow style.
    """

    indent: str
    flow_max_items: int

    def __init__(
        self,
        *,
        indent: str = DEFAULT_INDENT,
        flow_max_items: int = DEFAULT_FLOW_MAX_ITEMS,
    ) -> None:
        self.indent = indent
        self.flow_max_items = flow_max_items
        self._buffer: io.StringIO = io.StringIO()

    def write(self, text: str) -> None:
        self._buffer.write(text)

    def getvalue(self) -> str:
        return self._buffer.getvalue()

    def newline(self, depth: int) -> None:
        """Start a continuation line indented to `depth`."""
        self._buffer.write("\n")
        self._buffer.write(self.indent * depth)

    def emit(self, node: Node, depth: int = 0) -> None:
        """Render `node` at nesting `depth`.

        Args:
            node (Node): Node to render.
            depth (int): Current nesting depth.
        """
        match node:
            case ScalarNode():
                self.write(render_scalar(node))
            case IndirectionNode(target=None):
                self.write(NULL_LITERAL)
            case IndirectionNode(target=target):
                self.emit(target, depth)
            case SequenceNode():
                self.emit_sequence(node.items, depth)
            case MappingNode():
                if not node.entries:
                    self.write(EMPTY_MAPPING_LITERAL)
                    return
                self.emit_entries(node.entries, depth)
            case RecordNode():
                self.emit_entries(node.fields, depth)
            case _:
                raise TypeError(f"not a Value Tree node: {type(node).__name__}")

    def emit_sequence(self, items: Sequence[Node], depth: int) -> None:
        """Render sequence items in flow or block style."""
        if not items:
            self.write(EMPTY_SEQUENCE_LITERAL)
            return

        if len(items) <= self.flow_max_items and not any(is_complex(item) for item in items):
            self.write("[")
            for i, item in enumerate(items):
                if i > 0:
                    self.write(FLOW_SEPARATOR)
                self.emit(item, depth)
            self.write("]")
            return

        for item in items:
            self.newline(depth)
            self.write(BLOCK_SEQUENCE_MARKER)
            self.emit(item, depth + 1)

    def emit_entries(self, entries: Sequence[tuple[str, Node]], depth: int) -> None:
        """Render ``key: value`` entries in the given order.

        Args:
            entries (Sequence[tuple[str, Node]]): Key/value pairs.
            depth (int): Current nesting depth.
        """
        for i, (key, value) in enumerate(entries):
            if i > 0 or depth > 0:
                self.newline(depth)
            self.write(render_string(key))
            self.write(KEY_SEPARATOR)
            self.emit(value, depth + 1 if is_complex(value) else depth)


def render_node(
    node: Node,
    depth: int = 0,
    *,
    indent: str = DEFAULT_INDENT,
    flow_max_items: int = DEFAULT_FLOW_MAX_ITEMS,
) -> str:
    """Render a single node to text, without any document header.

    Args:
        node (Node): Node to render.
        depth (int): Starting depth.
        indent (str): One indentation unit.
        flow_max_items (int): Longest sequence of simple items written in flow style.

    Returns:
        str: The rendered text.
    """
    emitter = Emitter(indent=indent, flow_max_items=flow_max_items)
    emitter.emit(node, depth)
    return emitter.getvalue()
