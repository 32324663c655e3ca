# topmark:header:start
#
#   project      : YamlScribe
#   file         : scalars.py
#   file_relpath : src/yamlscribe/core/scalars.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scalar literals: quoting decision, escaping and canonical number forms.

Every function in this module is pure: the rendering of a scalar depends only on
its kind and value.

Quoting rules:
    A text scalar is written inside double quotes when it is empty, contains one
    of the YAML indicator characters in `SPECIAL_CHARACTERS`, parses as a float,
    equals one of the YAML 1.1 boolean words in `BOOLEAN_WORDS`, or starts or
    ends with a space. Everything else is written bare.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from typing import Final

from yamlscribe.constants import NULL_LITERAL
from yamlscribe.core.nodes import ScalarKind, ScalarNode

SPECIAL_CHARACTERS: Final[tuple[str, ...]] = (
    ":",
    "{",
    "}",
    "[",
    "]",
    ",",
    "&",
    "*",
    "#",
    "?",
    "|",
    "-",
    "<",
    ">",
    "=",
    "!",
    "%",
    "@",
    "`",
)

BOOLEAN_WORDS: Final[frozenset[str]] = frozenset({"true", "false", "yes", "no", "on", "off"})

# Applied in order; the backslash must come first.
ESCAPES: Final[tuple[tuple[str, str], ...]] = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\t", "\\t"),
)


# Hexadecimal floats need a binary exponent (`0x1p4`, `0x1.8P+1`).
HEX_FLOAT_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)


def _parses_as_float(value: str) -> bool:
    if HEX_FLOAT_PATTERN.fullmatch(value):
        return True
    try:
        float(value)
    except ValueError:
        return False
    return True


def needs_quotes(value: str) -> bool:
    """Return True if a text scalar cannot be written bare.

    Args:
        value (str): Text to test.

    Returns:
        bool: Whether the text must be quoted.
    """
    if value == "":
        return True
    if any(char in value for char in SPECIAL_CHARACTERS):
        return True
    if _parses_as_float(value):
        return True
    if value in BOOLEAN_WORDS:
        return True
    return value.startswith(" ") or value.endswith(" ")


def escape_string(value: str) -> str:
    """Escape backslashes, double quotes, LF, CR and TAB.

    Args:
        value (str): Raw text.

    Returns:
        str: The escaped text, without surrounding quotes.
    """
    for raw, escaped in ESCAPES:
        value = value.replace(raw, escaped)
    return value


def render_string(value: str) -> str:
    """Render text bare, or quoted and escaped when required."""
    if needs_quotes(value):
        return f'"{escape_string(value)}"'
    return value


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def format_int(value: int) -> str:
    return str(int(value))


def format_float(value: float) -> str:
    """Render a float as its shortest round-tripping decimal, in positional form.

    Integral values carry no fractional part (``2.0`` renders ``2``) and large or
    small magnitudes are spelled out rather than written with an exponent.
    Non-finite values use the YAML spellings ``.nan``, ``.inf`` and ``-.inf``.

    Args:
        value (float): Number to render.

    Returns:
        str: The decimal literal.
    """
    if math.isnan(value):
        return ".nan"
    if math.isinf(value):
        return ".inf" if value > 0 else "-.inf"
    # repr() gives the shortest round-tripping digits; Decimal drops the exponent.
    return format(Decimal(repr(float(value))).normalize(), "f")


def render_scalar(node: ScalarNode) -> str:
    """Render a scalar node to its YAML literal.

    Args:
        node (ScalarNode): Node to render.

    Returns:
        str: The literal text.
    """
    if node.kind is ScalarKind.NULL:
        return NULL_LITERAL
    if node.kind is ScalarKind.BOOL:
        return format_bool(bool(node.value))
    if node.kind is ScalarKind.INT:
        return format_int(int(node.value or 0))
    if node.kind is ScalarKind.FLOAT:
        return format_float(float(node.value or 0.0))
    return render_string(str(node.value))


def scalar_text(value: object) -> str | None:
    """Return the unquoted textual form of a plain scalar, or None.

    Used for mapping keys and set ordering: ``True`` becomes ``true``, ``1.50``
    becomes ``1.5``, ``None`` becomes ``null`` and text is returned unchanged.

    Args:
        value (object): Candidate scalar.

    Returns:
        str | None: The textual form, or None when `value` is not a plain scalar.
    """
    if value is None:
        return NULL_LITERAL
    if isinstance(value, str):
        # str.__str__ strips str-based Enum members down to their value
        return str.__str__(value)
    if isinstance(value, bool):
        return format_bool(value)
    if isinstance(value, int):
        return format_int(value)
    if isinstance(value, float):
        return format_float(value)
    return None
