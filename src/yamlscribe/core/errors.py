# topmark:header:start
#
#   project      : YamlScribe
#   file         : errors.py
#   file_relpath : src/yamlscribe/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the YamlScribe serializer.

Usage:
    Library callers catch `YamlScribeError` (or one of its subclasses). The CLI
    maps these onto Click exceptions with sysexits-aligned exit codes, see
    `yamlscribe.cli.errors`.

Only `UnsupportedTypeError` is raised during ordinary serialization. Empty
collections, zero-valued record fields and fields without an external name are
policy decisions handled by omission, never by raising.
"""

from __future__ import annotations


class YamlScribeError(Exception):
    """Base class for all YamlScribe errors."""


class UnsupportedTypeError(YamlScribeError, TypeError):
    """A value in the input tree has no YAML representation.

    Args:
        type_name (str): Qualified name of the offending Python type.
        path (str): Location of the value inside the input tree (e.g. ``$.steps[1].fn``).

    Attributes:
        type_name (str): Qualified name of the offending Python type.
        path (str): Location of the value inside the input tree.
    """

    type_name: str
    path: str

    def __init__(self, type_name: str, path: str = "$") -> None:
        self.type_name = type_name
        self.path = path
        super().__init__(f"unsupported type: {type_name} (at {path})")


class DuplicateKeyError(YamlScribeError, ValueError):
    """Two mapping keys render to the same text under the ``error`` policy.

    Attributes:
        key (str): The colliding textual key.
        path (str): Location of the mapping inside the input tree.
    """

    key: str
    path: str

    def __init__(self, key: str, path: str = "$") -> None:
        self.key = key
        self.path = path
        super().__init__(f"duplicate mapping key {key!r} (at {path})")


class ConfigError(YamlScribeError):
    """Error for malformed YamlScribe configuration values."""
