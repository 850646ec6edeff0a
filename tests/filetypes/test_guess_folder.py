# topmark:header:start
#
#   project      : Packscope
#   file         : test_guess_folder.py
#   file_relpath : tests/filetypes/test_guess_folder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for guessing the destination folder of an unplaced file.

Handles are faked so the tests can observe whether the content was read at
all, and can simulate read failures.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from packscope.filetypes.guess import FileHandle, LocalFileHandle, guess_by_extension
from packscope.filetypes.registry import BundledFileTypeRegistry
from tests.conftest import make_registry

if TYPE_CHECKING:
    from pathlib import Path

LOOT_TABLE: dict[str, Any] = {
    "id": "lootTable",
    "type": "json",
    "detect": {"scope": "packs/behavior/loot_tables", "fileContent": ["pools"]},
}


class _FakeContent:
    def __init__(self, text: str) -> None:
        self._text = text

    async def text(self) -> str:
        return self._text


class _FakeHandle:
    """In-memory `FileHandle` counting content reads."""

    def __init__(self, name: str, text: str = "", error: Exception | None = None) -> None:
        self.name = name
        self._text = text
        self._error = error
        self.reads = 0

    async def get_file(self) -> _FakeContent:
        self.reads += 1
        if self._error is not None:
            raise self._error
        return _FakeContent(self._text)


def _guess(definitions: list[dict[str, Any]], handle: FileHandle) -> str | None:
    return asyncio.run(make_registry(definitions).guess_folder(handle))


def test_guess_by_content() -> None:
    """A JSON file lands in the scope of the first definition with content hints."""
    handle = _FakeHandle("loot_table.json", '{"pools": []}')

    assert _guess([LOOT_TABLE], handle) == "packs/behavior/loot_tables/"
    assert handle.reads == 1


def test_guess_by_extension_skips_content() -> None:
    """An extension match is returned without reading the file."""
    handle = _FakeHandle("tick.mcfunction")
    definitions = [
        LOOT_TABLE,
        {
            "id": "function",
            "type": "text",
            "detect": {"scope": "functions", "fileExtensions": [".mcfunction"]},
        },
    ]

    assert _guess(definitions, handle) == "functions/"
    assert handle.reads == 0


def test_trailing_slash_is_not_doubled() -> None:
    """A scope already ending in ``/`` is returned unchanged."""
    registry = make_registry(
        [{"id": "a", "detect": {"scope": "texts/", "fileExtensions": [".lang"]}}]
    )
    assert guess_by_extension(registry.file_types, "en_US.lang") == "texts/"


def test_extension_phase_needs_a_scope() -> None:
    """Definitions with a matcher only are never used for guessing."""
    handle = _FakeHandle("tick.mcfunction")
    definitions = [
        {"id": "f", "detect": {"matcher": "**/*.mcfunction", "fileExtensions": [".mcfunction"]}}
    ]

    assert _guess(definitions, handle) is None


def test_non_json_file_without_extension_match() -> None:
    """Only ``.json`` files are sniffed."""
    handle = _FakeHandle("notes.txt", '{"pools": []}')

    assert _guess([LOOT_TABLE], handle) is None
    assert handle.reads == 0


def test_unparseable_content_gives_no_guess() -> None:
    """A parse failure ends the guess."""
    handle = _FakeHandle("loot_table.json", "{ this is not json")

    assert _guess([LOOT_TABLE], handle) is None
    assert handle.reads == 1


def test_deeply_nested_content_gives_no_guess() -> None:
    """Content nested beyond the parser's recursion limit ends the guess."""
    handle = _FakeHandle("loot_table.json", "[" * 20000)

    assert _guess([LOOT_TABLE], handle) is None
    assert handle.reads == 1


def test_lenient_json_is_accepted() -> None:
    """Comments and trailing commas do not prevent a guess."""
    handle = _FakeHandle("loot_table.json", '// drops\n{"pools": [],}')

    assert _guess([LOOT_TABLE], handle) == "packs/behavior/loot_tables/"


def test_read_failure_gives_no_guess() -> None:
    """I/O errors while fetching the file end the guess."""
    handle = _FakeHandle("loot_table.json", error=PermissionError("denied"))

    assert _guess([LOOT_TABLE], handle) is None


def test_content_phase_skips_text_kinds_and_missing_hints() -> None:
    """Only JSON-like definitions declaring ``fileContent`` are eligible."""
    definitions: list[dict[str, Any]] = [
        {"id": "text", "type": "text", "detect": {"scope": "texts", "fileContent": ["a"]}},
        {"id": "nbt", "type": "nbt", "detect": {"scope": "structures", "fileContent": ["a"]}},
        {"id": "no_hints", "type": "json", "detect": {"scope": "plain"}},
        {"id": "untyped", "detect": {"scope": "untyped", "fileContent": []}},
    ]
    handle = _FakeHandle("thing.json", "{}")

    assert _guess(definitions, handle) == "untyped/"


def test_content_phase_without_candidates() -> None:
    """A parsed file with no eligible definition gives no guess."""
    handle = _FakeHandle("thing.json", "{}")

    assert _guess([{"id": "x", "detect": {"scope": "x"}}], handle) is None


def test_local_file_handle(tmp_path: Path) -> None:
    """`LocalFileHandle` reads content from disk."""
    path = tmp_path / "drops.json"
    path.write_text('{"pools": [{"rolls": 1}]}', encoding="utf-8")

    assert _guess([LOOT_TABLE], LocalFileHandle(path)) == "packs/behavior/loot_tables/"
    assert _guess([LOOT_TABLE], LocalFileHandle(tmp_path / "missing.json")) is None


def test_bundled_definitions_guess_functions() -> None:
    """The bundled function definition claims ``.mcfunction`` files."""
    registry = BundledFileTypeRegistry()
    registry.setup()

    assert asyncio.run(registry.guess_folder(_FakeHandle("init.mcfunction"))) == "functions/"
    assert asyncio.run(registry.guess_folder(_FakeHandle("blob.bin"))) is None
