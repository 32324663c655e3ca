# topmark:header:start
#
#   project      : YamlScribe
#   file         : strategies_yamlscribe.py
#   file_relpath : tests/strategies_yamlscribe.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Hypothesis strategies for YamlScribe property tests."""

from __future__ import annotations

from typing import Any

from hypothesis import strategies as st

# Printable text: no control characters (which YAML would need escaped) and no surrogates.
s_printable_text: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=("Cc", "Cs")),
    max_size=12,
)

s_scalar: st.SearchStrategy[Any] = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-(10**12), max_value=10**12),
    st.floats(allow_nan=False),
    s_printable_text,
)


def s_json_like(max_leaves: int = 20) -> st.SearchStrategy[Any]:
    """Nested lists and string-keyed dicts of scalars, as decoded from JSON."""
    return st.recursive(
        s_scalar,
        lambda children: st.one_of(
            st.lists(children, max_size=7),
            st.dictionaries(s_printable_text, children, max_size=5),
        ),
        max_leaves=max_leaves,
    )
