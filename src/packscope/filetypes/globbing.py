# topmark:header:start
#
#   project      : Packscope
#   file         : globbing.py
#   file_relpath : src/packscope/filetypes/globbing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glob matching for ``matcher`` templates.

A pattern must match the whole path; naming a folder never claims the files
below it. Paths and patterns are compared segment by segment:

    * ``**`` spans zero or more segments.
    * Any other segment is matched with `fnmatch.fnmatchcase`, so ``*``, ``?``
      and ``[...]`` stay within one segment and matching is case sensitive.

A pattern without a slash therefore only matches a top-level path.
"""

from __future__ import annotations

from fnmatch import fnmatchcase
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

GLOBSTAR = "**"


def split_segments(path: str) -> tuple[str, ...]:
    """Split a POSIX or Windows path into its non-empty segments (``.`` dropped)."""
    return tuple(part for part in path.replace("\\", "/").split("/") if part not in ("", "."))


def matches_glob(path: str, pattern: str) -> bool:
    """Return True if the whole of ``path`` satisfies ``pattern``."""
    path_segs = split_segments(path)
    pattern_segs = split_segments(pattern)

    @lru_cache(maxsize=None)
    def _match(i: int, j: int) -> bool:
        if j == len(pattern_segs):
            return i == len(path_segs)
        if pattern_segs[j] == GLOBSTAR:
            return _match(i, j + 1) or (i < len(path_segs) and _match(i + 1, j))
        return (
            i < len(path_segs)
            and fnmatchcase(path_segs[i], pattern_segs[j])
            and _match(i + 1, j + 1)
        )

    return _match(0, 0)


def matches_any(path: str, patterns: Iterable[str]) -> bool:
    """Return True if ``path`` satisfies at least one glob in ``patterns``.

    Args:
        path (str): POSIX-style path to test.
        patterns (Iterable[str]): Expanded glob patterns.

    Returns:
        bool: Whether any pattern matches. An empty pattern list never matches.
    """
    return any(matches_glob(path, pattern) for pattern in patterns if pattern)
