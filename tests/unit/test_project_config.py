# topmark:header:start
#
#   project      : Packscope
#   file         : test_project_config.py
#   file_relpath : tests/unit/test_project_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the default path templater `ProjectConfig`."""

from __future__ import annotations

import pytest

from packscope.errors import ProjectConfigError
from packscope.project import PathTemplater, ProjectConfig
from tests.conftest import RecordingTemplater

CONFIG = ProjectConfig(root="projects/demo", packs={"behaviorPack": "BP", "resourcePack": "RP"})


@pytest.mark.parametrize(
    ("pack_type", "template", "expected"),
    [
        (None, "config.json", "projects/demo/config.json"),
        ("behaviorPack", "entities", "projects/demo/BP/entities"),
        ("resourcePack", "texts/*.lang", "projects/demo/RP/texts/*.lang"),
        ("behaviorPack", "./functions/", "projects/demo/BP/functions/"),
        ("behaviorPack", "/items", "projects/demo/BP/items"),
        ("behaviorPack", "**/*.json", "projects/demo/BP/**/*.json"),
    ],
)
def test_resolve_pack_path(pack_type: str | None, template: str, expected: str) -> None:
    """Templates are joined onto the root and the category folder."""
    assert CONFIG.resolve_pack_path(pack_type, template) == expected


def test_empty_root_keeps_paths_relative() -> None:
    """An empty root adds no leading slash."""
    config = ProjectConfig(packs={"behaviorPack": "BP"})
    assert config.resolve_pack_path("behaviorPack", "entities") == "BP/entities"
    assert config.resolve_pack_path(None, "entities") == "entities"
    assert ProjectConfig().resolve_pack_path(None, "a/b") == "a/b"


def test_trailing_and_back_slashes_are_normalized() -> None:
    """Separators are POSIX and never doubled."""
    config = ProjectConfig(root="projects\\demo\\", packs={"behaviorPack": "BP/"})
    assert config.resolve_pack_path("behaviorPack", "entities") == "projects/demo/BP/entities"


def test_unknown_pack_type_is_an_error() -> None:
    with pytest.raises(ProjectConfigError, match="skinPack"):
        CONFIG.resolve_pack_path("skinPack", "skins")


def test_packs_are_frozen_copies() -> None:
    """Mutating the source mapping does not affect the config."""
    packs = {"behaviorPack": "BP"}
    config = ProjectConfig(packs=packs)
    packs["behaviorPack"] = "changed"

    assert config.pack_path("behaviorPack") == "BP"
    assert config.pack_types == ("behaviorPack",)


def test_templaters_satisfy_the_protocol() -> None:
    assert isinstance(CONFIG, PathTemplater)
    assert isinstance(RecordingTemplater(), PathTemplater)
