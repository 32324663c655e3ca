# topmark:header:start
#
#   project      : YamlScribe
#   file         : generator.py
#   file_relpath : src/yamlscribe/generator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Document assembly: header lines plus the rendered root value.

`YamlGenerator` ties the classifier and the emitter together under one
`GeneratorConfig`. It holds no per-call state, so one instance can serve
concurrent callers as long as they do not mutate their input while it is
being serialized.

Example:
    ```python
    from yamlscribe import generate

    text = generate({"b": 1, "a": [1, 2, 3]})
    # # Qlib workflow configuration file
    # # Generated automatically by the Qlib visualization platform
    # # https://github.com/microsoft/qlib
    #
    # a: [1, 2, 3]
    # b: 1
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from yamlscribe.config.logging import get_logger
from yamlscribe.config.model import GeneratorConfig
from yamlscribe.core.classifier import Classifier
from yamlscribe.core.emitter import Emitter

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.core.nodes import Node

logger: YamlScribeLogger = get_logger(__name__)


def render_header(lines: Sequence[str]) -> str:
    """Return the header comment block followed by one blank line.

    An empty `lines` yields an empty string (no blank line either).
    """
    if not lines:
        return ""
    return "".join(f"{line}\n" for line in lines) + "\n"


class YamlGenerator:
    """Serialize arbitrary values to YAML documents.

    Args:
        config (GeneratorConfig | None): Rendering settings; defaults when None.

    Attributes:
        config (GeneratorConfig): Rendering settings.
    """

    config: GeneratorConfig

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()

    def classifier(self) -> Classifier:
        return Classifier(duplicate_keys=self.config.duplicate_keys)

    def classify(self, value: object) -> Node:
        """Build the Value Tree for `value` under this generator's key policy."""
        return self.classifier().classify(value)

    def emitter(self) -> Emitter:
        """Return a fresh emitter configured for this generator."""
        return Emitter(indent=self.config.indent, flow_max_items=self.config.flow_max_items)

    def render(self, value: object, depth: int = 0) -> str:
        """Render `value` without a document header.

        Args:
            value (object): Value to serialize.
            depth (int): Starting depth.

        Returns:
            str: The YAML text of the value alone.
        """
        node: Node = self.classify(value)
        emitter: Emitter = self.emitter()
        emitter.emit(node, depth)
        return emitter.getvalue()

    def generate(self, value: object) -> str:
        """Serialize `value` into a complete YAML document.

        The whole value is classified before any text is produced, so a failure
        never leaves partial output behind.

        Args:
            value (object): Value of arbitrary shape.

        Returns:
            str: Header lines, a blank line, then the rendered value.

        Raises:
            UnsupportedTypeError: If any value in the tree has no YAML shape.
            DuplicateKeyError: If two mapping keys collide under the ``error`` policy.
        """
        node: Node = self.classify(value)
        emitter: Emitter = self.emitter()
        emitter.write(render_header(self.config.header_lines))
        emitter.emit(node, 0)
        logger.debug("Generated YAML document (%s root)", type(node).__name__)
        return emitter.getvalue()

    def generate_workflow_section(self, config: Mapping[str, Any]) -> str:
        """Serialize a workflow definition with the fixed workflow layout.

        See `yamlscribe.workflow.WorkflowSectionWriter` for the recognized keys.

        Args:
            config (Mapping[str, Any]): Workflow definition.

        Returns:
            str: The YAML document.
        """
        # Imported here: workflow builds on this module.
        from yamlscribe.workflow import WorkflowSectionWriter

        return WorkflowSectionWriter(self).render(config)


def generate(value: object, *, config: GeneratorConfig | None = None) -> str:
    """Serialize `value` into a YAML document using `config` (defaults when None)."""
    return YamlGenerator(config).generate(value)


def generate_workflow_section(
    workflow: Mapping[str, Any],
    *,
    config: GeneratorConfig | None = None,
) -> str:
    """Serialize a workflow definition with the fixed workflow layout."""
    return YamlGenerator(config).generate_workflow_section(workflow)
