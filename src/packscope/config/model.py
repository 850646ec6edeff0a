# topmark:header:start
#
#   project      : Packscope
#   file         : model.py
#   file_relpath : src/packscope/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable Packscope configuration.

A `Config` is built from the merged TOML layers (runtime defaults, then the
discovered or explicit config file) and turned into the `ProjectConfig`
templater used by file type resolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from packscope.config.io import (
    KEY_DIRECTORIES,
    KEY_ROOT,
    SECTION_FILETYPES,
    SECTION_PACKS,
    SECTION_PROJECT,
    extract_packscope_table,
    find_config_file,
    load_defaults_dict,
    load_toml_dict,
    merge_tables,
)
from packscope.config.logging import PackscopeLogger, get_logger
from packscope.errors import ProjectConfigError
from packscope.project import ProjectConfig

if TYPE_CHECKING:
    from collections.abc import Mapping

    from packscope.config.io import TomlTable

logger: PackscopeLogger = get_logger(__name__)


def _table(data: TomlTable, key: str) -> TomlTable:
    value: Any = data.get(key, {})
    if not isinstance(value, dict):
        raise ProjectConfigError(f"[{key}] must be a table")
    return value


@dataclass(frozen=True)
class Config:
    """Resolved Packscope configuration.

    Attributes:
        project_root (str): Prefix joined in front of every scope and matcher template.
        packs (Mapping[str, str]): Pack category -> folder relative to ``project_root``.
        definition_dirs (tuple[Path, ...]): Extra directories of JSON file definitions,
            appended after the bundled built-ins in this order.
        config_file (Path | None): The file the settings were read from, if any.
    """

    project_root: str = ""
    packs: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    definition_dirs: tuple[Path, ...] = ()
    config_file: Path | None = None

    @classmethod
    def from_dict(
        cls, data: TomlTable, *, base: Path, config_file: Path | None = None
    ) -> Config:
        """Build a config from a merged TOML table.

        Args:
            data (TomlTable): Merged settings.
            base (Path): Directory relative definition directories are resolved against.
            config_file (Path | None): Origin of the settings, for diagnostics.

        Returns:
            Config: The frozen configuration.

        Raises:
            ProjectConfigError: If a section or value has the wrong type.
        """
        project = _table(data, SECTION_PROJECT)
        packs = _table(data, SECTION_PACKS)
        filetypes = _table(data, SECTION_FILETYPES)

        root: Any = project.get(KEY_ROOT, "")
        if not isinstance(root, str):
            raise ProjectConfigError(f"[{SECTION_PROJECT}] {KEY_ROOT} must be a string")
        for name, folder in packs.items():
            if not isinstance(folder, str):
                raise ProjectConfigError(f"[{SECTION_PACKS}] {name} must be a string")

        directories: Any = filetypes.get(KEY_DIRECTORIES, [])
        if not isinstance(directories, list) or not all(isinstance(d, str) for d in directories):
            raise ProjectConfigError(
                f"[{SECTION_FILETYPES}] {KEY_DIRECTORIES} must be a list of strings"
            )
        definition_dirs = tuple(
            p if p.is_absolute() else (base / p).resolve()
            for p in (Path(d) for d in directories)
        )

        return cls(
            project_root=root,
            packs=MappingProxyType(dict(packs)),
            definition_dirs=definition_dirs,
            config_file=config_file,
        )

    def project_config(self) -> ProjectConfig:
        """Return the path templater for this configuration."""
        return ProjectConfig(root=self.project_root, packs=self.packs)


def load_config(path: Path | None = None, *, cwd: Path | None = None) -> Config:
    """Load the effective configuration.

    Args:
        path (Path | None): Explicit config file. When None, one is searched for
            upward from ``cwd``.
        cwd (Path | None): Search start; defaults to the current directory.

    Returns:
        Config: Defaults overlaid with the config file (if any).

    Raises:
        ProjectConfigError: If an explicit file does not exist or holds invalid values.
    """
    start = cwd or Path.cwd()
    data: TomlTable = load_defaults_dict()

    config_file = path if path is not None else find_config_file(start)
    if path is not None and not path.is_file():
        raise ProjectConfigError(f"Config file not found: {path}")

    if config_file is None:
        logger.debug("No config file found from %s; using defaults", start)
        return Config.from_dict(data, base=start)

    table = extract_packscope_table(config_file, load_toml_dict(config_file))
    if table:
        data = merge_tables(data, table)
    logger.debug("Loaded config from %s", config_file)
    return Config.from_dict(data, base=config_file.parent, config_file=config_file)
