# topmark:header:start
#
#   project      : YamlScribe
#   file         : workflow.py
#   file_relpath : src/yamlscribe/workflow.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Fixed-layout rendering of workflow definitions.

A workflow definition is a mapping with these recognized top-level keys:

=============== ===================== =========================================
key             expected shape        rendered as
=============== ===================== =========================================
``name``        str                   ``name: ...``
``description`` non-empty str         ``description: ...``
``version``     str                   ``version: ...``
``config``      non-empty mapping     ``config:`` block
``steps``       non-empty list        ``workflow:`` / ``steps:`` block
``metadata``    non-empty mapping     ``# Metadata`` / ``metadata:`` block
=============== ===================== =========================================

Keys that are absent are left out; keys holding a value of the wrong shape are
skipped without error. Other keys are ignored. Sections are written in the
order above, not in mapping order.

Each step is a mapping (or a `WorkflowStep` / other dataclass or NamedTuple)
with ``name``, ``type``, and optionally ``description``, ``enabled``,
``required``, ``dependencies`` and ``config``.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from yamlscribe.config.logging import get_logger
from yamlscribe.constants import BLOCK_SEQUENCE_MARKER, KEY_SEPARATOR
from yamlscribe.core.naming import is_public_field, resolve_field_name
from yamlscribe.core.nodes import is_complex
from yamlscribe.core.scalars import render_string
from yamlscribe.generator import render_header

if TYPE_CHECKING:
    from yamlscribe.config.logging import YamlScribeLogger
    from yamlscribe.core.emitter import Emitter
    from yamlscribe.generator import YamlGenerator

logger: YamlScribeLogger = get_logger(__name__)

# Nesting of the step block: "workflow:" > "steps:" > "- " > step keys.
_STEPS_DEPTH: int = 2
_STEP_KEY_DEPTH: int = 3
_STEP_CHILD_DEPTH: int = 4


@dataclass
class WorkflowStep:
    """One step of a workflow definition.

    Attributes:
        name (str): Step name.
        type (str): Step type (e.g. ``data``, ``model``, ``backtest``).
        description (str): Free-form description; omitted when empty.
        enabled (bool | None): Whether the step runs; omitted when None.
        required (bool | None): Whether the step is mandatory; omitted when None.
        dependencies (list[str]): Names of steps this one depends on.
        config (dict[str, Any]): Step parameters.
    """

    name: str
    type: str
    description: str = ""
    enabled: bool | None = None
    required: bool | None = None
    dependencies: list[str] = field(default_factory=list)
    config: dict[str, Any] = field(default_factory=dict)


def _non_empty_str(value: object) -> bool:
    return isinstance(value, str) and value != ""


def _non_empty_mapping(value: object) -> bool:
    return isinstance(value, Mapping) and len(value) > 0


def _non_empty_list(value: object) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes, bytearray))
        and len(value) > 0
    )


def step_fields(step: object) -> Mapping[Any, Any] | None:
    """Return the keys of a step as a mapping, or None for unusable steps.

    Record steps are read through their external field names; unlike generic
    record rendering, zero values are kept so that ``enabled = False`` still
    shows up.

    Args:
        step (object): A mapping, dataclass instance or NamedTuple.

    Returns:
        Mapping[Any, Any] | None: External name → value, or None.
    """
    if isinstance(step, Mapping):
        return step

    pairs: list[tuple[str, Mapping[str, Any] | None]] = []
    if dataclasses.is_dataclass(step) and not isinstance(step, type):
        pairs = [(f.name, f.metadata) for f in dataclasses.fields(step)]
    elif isinstance(step, tuple) and hasattr(type(step), "_fields"):
        names: Mapping[str, str] = getattr(type(step), "__yaml_names__", None) or {}
        pairs = [
            (name, {"yaml": names[name]} if name in names else None)
            for name in type(step)._fields  # type: ignore[attr-defined]
        ]
    else:
        return None

    out: dict[str, Any] = {}
    for name, metadata in pairs:
        if not is_public_field(name):
            continue
        external: str | None = resolve_field_name(name, metadata)
        if external is not None:
            out[external] = getattr(step, name)
    return out


class WorkflowSectionWriter:
    """Writes the fixed workflow layout using a generator's renderers.

    Args:
        generator (YamlGenerator): Supplies the config, classifier and emitter.
    """

    def __init__(self, generator: YamlGenerator) -> None:
        self.generator = generator
        self.indent: str = generator.config.indent

    def _pair(self, emitter: Emitter, key: str, value: object, depth: int) -> None:
        # `key: value` with the value on the same line or nested below it.
        node = self.generator.classify(value)
        emitter.write(render_string(key))
        emitter.write(KEY_SEPARATOR)
        emitter.emit(node, depth + 1 if is_complex(node) else depth)
        emitter.write("\n")

    def _block(self, emitter: Emitter, key: str, value: Mapping[Any, Any], depth: int) -> None:
        # `key:` followed by the mapping entries one level deeper.
        emitter.write(render_string(key))
        emitter.write(":")
        emitter.emit(self.generator.classify(value), depth + 1)

    def render(self, workflow: Mapping[str, Any]) -> str:
        """Render a workflow definition.

        Args:
            workflow (Mapping[str, Any]): Workflow definition.

        Returns:
            str: The YAML document.

        Raises:
            UnsupportedTypeError: If a rendered value has no YAML shape.
            DuplicateKeyError: If mapping keys collide under the ``error`` policy.
        """
        emitter: Emitter = self.generator.emitter()
        emitter.write(render_header(self.generator.config.workflow_header_lines))

        name: Any = workflow.get("name")
        if isinstance(name, str):
            self._pair(emitter, "name", name, 0)
        description: Any = workflow.get("description")
        if _non_empty_str(description):
            self._pair(emitter, "description", description, 0)
        version: Any = workflow.get("version")
        if isinstance(version, str):
            self._pair(emitter, "version", version, 0)

        emitter.write("\n")

        config: Any = workflow.get("config")
        if _non_empty_mapping(config):
            self._block(emitter, "config", config, 0)
            emitter.write("\n\n")

        steps: Any = workflow.get("steps")
        if _non_empty_list(steps):
            self._render_steps(emitter, steps)

        metadata: Any = workflow.get("metadata")
        if _non_empty_mapping(metadata):
            emitter.write("\n# Metadata\n")
            self._block(emitter, "metadata", metadata, 0)

        return emitter.getvalue()

    def _render_steps(self, emitter: Emitter, steps: Sequence[Any]) -> None:
        usable: list[Mapping[Any, Any]] = []
        for index, step in enumerate(steps):
            fields: Mapping[Any, Any] | None = step_fields(step)
            if fields is None:
                logger.debug("Skipping workflow step %d: unsupported shape %s", index, type(step))
                continue
            usable.append(fields)

        emitter.write("workflow:\n")
        emitter.write(f"{self.indent}steps:\n")

        key_indent: str = self.indent * _STEP_KEY_DEPTH
        child_indent: str = self.indent * _STEP_CHILD_DEPTH

        for i, step in enumerate(usable):
            emitter.write(self.indent * _STEPS_DEPTH + BLOCK_SEQUENCE_MARKER)
            self._pair(emitter, "name", step.get("name"), _STEP_KEY_DEPTH)
            emitter.write(key_indent)
            self._pair(emitter, "type", step.get("type"), _STEP_KEY_DEPTH)

            description: Any = step.get("description")
            if _non_empty_str(description):
                emitter.write(key_indent)
                self._pair(emitter, "description", description, _STEP_KEY_DEPTH)

            for flag in ("enabled", "required"):
                value: Any = step.get(flag)
                if isinstance(value, bool):
                    emitter.write(key_indent)
                    self._pair(emitter, flag, value, _STEP_KEY_DEPTH)

            dependencies: Any = step.get("dependencies")
            if _non_empty_list(dependencies):
                emitter.write(f"{key_indent}dependencies:\n")
                for dependency in dependencies:
                    emitter.write(child_indent + BLOCK_SEQUENCE_MARKER)
                    emitter.emit(self.generator.classify(dependency), _STEP_CHILD_DEPTH + 1)
                    emitter.write("\n")

            step_config: Any = step.get("config")
            if _non_empty_mapping(step_config):
                emitter.write(key_indent)
                self._block(emitter, "config", step_config, _STEP_KEY_DEPTH)
                emitter.write("\n")

            if i < len(usable) - 1:
                emitter.write("\n")
