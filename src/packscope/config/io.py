# topmark:header:start
#
#   project      : Packscope
#   file         : io.py
#   file_relpath : src/packscope/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Packscope reads its project configuration from ``packscope.toml`` or from the
``[tool.packscope]`` table of ``pyproject.toml``. Parsing is done with
`tomlkit` and returned as plain ``dict`` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from packscope.config.logging import PackscopeLogger, get_logger

logger: PackscopeLogger = get_logger(__name__)

TomlTable = dict[str, Any]

CONFIG_FILE_NAME: Final[str] = "packscope.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"

SECTION_PROJECT: Final[str] = "project"
SECTION_PACKS: Final[str] = "packs"
SECTION_FILETYPES: Final[str] = "filetypes"
KEY_ROOT: Final[str] = "root"
KEY_DIRECTORIES: Final[str] = "directories"

DEFAULT_PACKS: Final[dict[str, str]] = {
    "behaviorPack": "BP",
    "resourcePack": "RP",
    "skinPack": "SP",
    "worldTemplate": "WT",
}


def load_defaults_dict() -> TomlTable:
    """Return Packscope's runtime defaults as a fresh dict (no I/O).

    Returns:
        TomlTable: A TOML-table-compatible dict; callers may mutate it.
    """
    return {
        SECTION_PROJECT: {KEY_ROOT: ""},
        SECTION_PACKS: dict(DEFAULT_PACKS),
        SECTION_FILETYPES: {KEY_DIRECTORIES: []},
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed content.

    Notes:
        Errors are logged and an empty dict is returned on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_packscope_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the Packscope settings held in a parsed TOML file.

    For ``pyproject.toml`` this is the ``[tool.packscope]`` table (None when
    absent); any other file is a Packscope config as a whole.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    tool: Any = data.get("tool")
    if isinstance(tool, dict):
        table: Any = tool.get("packscope")
        if isinstance(table, dict):
            return cast("TomlTable", table)
    return None


def find_config_file(start: Path) -> Path | None:
    """Walk upward from ``start`` for ``packscope.toml`` or a pyproject with Packscope settings.

    Args:
        start (Path): Directory to start from.

    Returns:
        Path | None: The first config file found, or None.
    """
    current = start.resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILE_NAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILE_NAME
        if pyproject.is_file() and extract_packscope_table(pyproject, load_toml_dict(pyproject)):
            return pyproject
    return None


def merge_tables(base: TomlTable, overlay: TomlTable) -> TomlTable:
    """Merge ``overlay`` into a copy of ``base`` (tables recursively, other values replaced)."""
    merged: TomlTable = dict(base)
    for key, value in overlay.items():
        existing = merged.get(key)
        if isinstance(existing, dict) and isinstance(value, dict):
            merged[key] = merge_tables(cast("TomlTable", existing), cast("TomlTable", value))
        else:
            merged[key] = value
    return merged
