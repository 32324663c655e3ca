# topmark:header:start
#
#   project      : YamlScribe
#   file         : naming.py
#   file_relpath : src/yamlscribe/core/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""External names for record fields.

Record fields carry their YAML key as declarative metadata attached at definition
time. Two metadata entries are consulted, most specific first:

- ``"yaml"``: the YAML-specific name;
- ``"json"``: a general-purpose serialization name shared with JSON encoders.

Both accept the ``"name,flag,flag"`` form; anything after the first comma is
ignored. The marker ``"-"`` means the field has no external name and is left
out of the output. Without metadata the field's own name is used, lower-cased.

Example:
    ```python
    @dataclass
    class Step:
        step_name: str = yaml_field("name")
        secret: str = yaml_field(omit=True)
        retries: int = field(default=0, metadata={"json": "max_retries,omitempty"})
    ```
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any

from yamlscribe.constants import JSON_METADATA_KEY, OMIT_MARKER, YAML_METADATA_KEY


def is_public_field(name: str) -> bool:
    """Return True for fields that are part of a value's external surface."""
    return not name.startswith("_")


def _tag_head(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.split(",", 1)[0].strip()


def resolve_field_name(name: str, metadata: Mapping[str, Any] | None = None) -> str | None:
    """Resolve the YAML key for a record field.

    Args:
        name (str): The field's Python identifier.
        metadata (Mapping[str, Any] | None): Field metadata (e.g. ``dataclasses.Field.metadata``).

    Returns:
        str | None: The external name, or None when the field must be omitted.
    """
    meta: Mapping[str, Any] = metadata or {}

    for key in (YAML_METADATA_KEY, JSON_METADATA_KEY):
        head: str = _tag_head(meta.get(key))
        if head == OMIT_MARKER:
            return None
        if head:
            return head

    resolved: str = name.lower()
    return resolved or None


def yaml_field(
    name: str | None = None,
    *,
    omit: bool = False,
    json: str | None = None,
    **field_kwargs: Any,
) -> Any:
    """Declare a dataclass field with an explicit YAML name.

    Thin wrapper around `dataclasses.field`; every other keyword argument
    (``default``, ``default_factory``, ``repr``...) is forwarded.

    Args:
        name (str | None): External YAML name. None keeps the default resolution.
        omit (bool): If True the field is never written.
        json (str | None): Optional general-purpose name, used when no YAML name is set.
        **field_kwargs (Any): Forwarded to `dataclasses.field`.

    Returns:
        Any: The `dataclasses.Field` sentinel to assign in the class body.
    """
    metadata: dict[str, Any] = dict(field_kwargs.pop("metadata", None) or {})
    if omit:
        metadata[YAML_METADATA_KEY] = OMIT_MARKER
    elif name is not None:
        metadata[YAML_METADATA_KEY] = name
    if json is not None:
        metadata[JSON_METADATA_KEY] = json
    return dataclasses.field(metadata=metadata, **field_kwargs)
