# topmark:header:start
#
#   project      : Packscope
#   file         : strategies_packscope.py
#   file_relpath : tests/strategies_packscope.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for project paths and scoped file type definitions.

Segments come from a tiny alphabet so generated scopes and paths share
prefixes often enough to exercise the first-match ordering.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

Draw = Callable[[st.SearchStrategy[Any]], Any]

SEGMENTS: tuple[str, ...] = ("a", "b", "ab", "entities", "texts")
EXTENSIONS: tuple[str, ...] = (".json", ".lang", ".mcfunction", "")


@st.composite
def s_path(draw: Draw) -> str:
    """A relative POSIX path, optionally ending in a known extension."""
    parts: list[str] = draw(st.lists(st.sampled_from(SEGMENTS), min_size=1, max_size=4))
    ext: str = draw(st.sampled_from(EXTENSIONS))
    return "/".join(parts) + ext


@st.composite
def s_scoped_definition(draw: Draw, index: int) -> dict[str, Any]:
    """A raw definition with a one- or two-segment scope and maybe an extension filter."""
    scope: list[str] = draw(st.lists(st.sampled_from(SEGMENTS), min_size=1, max_size=2))
    detect: dict[str, Any] = {"scope": "/".join(scope)}
    if draw(st.booleans()):
        detect["fileExtensions"] = draw(
            st.lists(st.sampled_from([e for e in EXTENSIONS if e]), max_size=2, unique=True)
        )
    return {"id": f"d{index}", "detect": detect}


@st.composite
def s_definitions(draw: Draw) -> list[dict[str, Any]]:
    """Between one and six scoped definitions with distinct ids."""
    size: int = draw(st.integers(min_value=1, max_value=6))
    return [draw(s_scoped_definition(i)) for i in range(size)]
