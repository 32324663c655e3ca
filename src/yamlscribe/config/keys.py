# topmark:header:start
#
#   project      : YamlScribe
#   file         : keys.py
#   file_relpath : src/yamlscribe/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for YamlScribe configuration.

This module defines the authoritative string constants used when reading
YamlScribe configuration from TOML sources (``yamlscribe.toml`` and
``[tool.yamlscribe]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by YamlScribe configuration.

    Example:
        ```toml
        [tool.yamlscribe.format]
        indent = 2
        flow_max_items = 5
        duplicate_keys = "first-wins"

        [tool.yamlscribe.header]
        enabled = true
        lines = ["# My pipeline", "# generated", "# do not edit"]
        ```
    """

    # [format]
    SECTION_FORMAT: Final[str] = "format"

    KEY_INDENT: Final[str] = "indent"
    KEY_FLOW_MAX_ITEMS: Final[str] = "flow_max_items"
    KEY_DUPLICATE_KEYS: Final[str] = "duplicate_keys"

    # [header]
    SECTION_HEADER: Final[str] = "header"

    KEY_HEADER_ENABLED: Final[str] = "enabled"
    KEY_HEADER_LINES: Final[str] = "lines"
    KEY_WORKFLOW_HEADER_LINES: Final[str] = "workflow_lines"
