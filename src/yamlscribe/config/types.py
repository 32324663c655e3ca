# topmark:header:start
#
#   project      : YamlScribe
#   file         : types.py
#   file_relpath : src/yamlscribe/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
and the core serializer can depend on without risk of circular imports.

Exports:
    - `ArgsLike`: structural mapping type for CLI/API override dicts.
    - `TomlTable`: a parsed TOML table as plain Python data.
    - `DuplicateKeyPolicy`: what to do when two mapping keys render to the same text.
"""

from __future__ import annotations

# For runtime type checks, prefer collections.abc
from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config builders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

TomlTable = dict[str, Any]


class DuplicateKeyPolicy(str, Enum):
    """Resolution of mapping keys that share one textual form.

    Keys such as ``1`` and ``"1"`` are distinct in a Python dict but both render
    as ``"1"``. Collisions are resolved in source iteration order.

    Attributes:
        ERROR: Raise `DuplicateKeyError`.
        FIRST_WINS: Keep the value of the first colliding key (default).
        LAST_WINS: Keep the value of the last colliding key.
    """

    ERROR = "error"
    FIRST_WINS = "first-wins"
    LAST_WINS = "last-wins"

    @classmethod
    def from_name(cls, key_name: str | None) -> DuplicateKeyPolicy | None:
        """Find the policy by its value or member name, case-insensitively.

        Args:
            key_name (str | None): ``"error"``, ``"first-wins"``, ``"FIRST_WINS"``... or None.

        Returns:
            DuplicateKeyPolicy | None: The matching member, or None if unmatched.
        """
        if key_name is None:
            return None

        normalized: str = key_name.strip().lower().replace("_", "-")
        for member in cls:
            if member.value == normalized:
                return member
        return None
