# topmark:header:start
#
#   project      : Packscope
#   file         : test_globbing.py
#   file_relpath : tests/unit/test_globbing.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for matcher glob evaluation."""

from __future__ import annotations

import pytest

from packscope.filetypes.globbing import matches_any, matches_glob, split_segments


@pytest.mark.parametrize(
    ("path", "patterns", "expected"),
    [
        ("BP/functions/a/b.mcfunction", ["**/*.mcfunction"], True),
        ("b.mcfunction", ["**/*.mcfunction"], True),
        ("BP/functions/a/b.mcfunction", ["BP/functions/*.mcfunction"], False),
        ("BP/functions/b.mcfunction", ["BP/functions/*.mcfunction"], True),
        ("BP/manifest.json", ["BP/manifest.json"], True),
        ("RP/manifest.json", ["BP/manifest.json"], False),
        ("config.json", ["config.json"], True),
        ("deep/nested/config.json", ["config.json"], False),
        ("RP\\texts\\en_US.lang", ["RP/texts/*.lang"], True),
        ("a.json", ["*.lang", "*.json"], True),
        ("BP/Entities/a.json", ["BP/entities/*.json"], False),
        ("BP/loot/a/b/c.json", ["BP/**/c.json"], True),
        ("BP/loot/a/b/c.json", ["BP/**"], True),
    ],
)
def test_matches_any(path: str, patterns: list[str], expected: bool) -> None:
    assert matches_any(path, patterns) is expected


@pytest.mark.parametrize(
    ("path", "pattern"),
    [
        ("packs/behavior/x.mcfunction/readme.txt", "**/*.mcfunction"),
        ("BP/functions/tick.mcfunction", "BP/functions"),
        ("BP/functions/tick.mcfunction", "BP/functions/"),
        ("BP/functions/nested/tick.mcfunction", "BP/*"),
    ],
)
def test_folder_match_does_not_claim_descendants(path: str, pattern: str) -> None:
    """A pattern matching a folder does not match the files below it."""
    assert matches_glob(path, pattern) is False


def test_no_patterns_never_match() -> None:
    """An empty (or all-empty) pattern list matches nothing."""
    assert matches_any("anything.json", []) is False
    assert matches_any("anything.json", ["", ""]) is False


def test_split_segments_normalizes_separators() -> None:
    assert split_segments("./BP\\entities//zombie.json") == ("BP", "entities", "zombie.json")
