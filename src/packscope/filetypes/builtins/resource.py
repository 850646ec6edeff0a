# topmark:header:start
#
#   project      : Packscope
#   file         : resource.py
#   file_relpath : src/packscope/filetypes/builtins/resource.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resource pack file types.

Exports:
    FILETYPES: Client entities, attachables, models, render controllers,
        language files, sound definitions and the pack manifest.
"""

from __future__ import annotations

from packscope.filetypes.model import (
    DetectRules,
    FileTypeDefinition,
    FileTypeKind,
    FileTypeMeta,
)

SCHEMA_BASE = "file:///data/packages/minecraftBedrock/schema"

FILETYPES: list[FileTypeDefinition] = [
    FileTypeDefinition(
        id="clientEntity",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("resourcePack",),
            scope=("entity",),
            file_extensions=(".json",),
            file_content=("minecraft:client_entity",),
        ),
        schema=f"{SCHEMA_BASE}/clientEntity/main.json",
        lightning_cache="clientEntity.lc",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="attachable",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("resourcePack",),
            scope=("attachables",),
            file_extensions=(".json",),
            file_content=("minecraft:attachable",),
        ),
        schema=f"{SCHEMA_BASE}/attachable/main.json",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="geometry",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("resourcePack",),
            scope=("models",),
            file_extensions=(".json",),
            file_content=("minecraft:geometry",),
        ),
        schema=f"{SCHEMA_BASE}/geometry/main.json",
    ),
    FileTypeDefinition(
        id="renderController",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("resourcePack",),
            scope=("render_controllers",),
            file_extensions=(".json",),
            file_content=("render_controllers",),
        ),
        schema=f"{SCHEMA_BASE}/renderController/main.json",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="lang",
        kind=FileTypeKind.TEXT,
        detect=DetectRules(
            pack_types=("resourcePack", "behaviorPack"),
            scope=("texts",),
            file_extensions=(".lang",),
        ),
        meta=FileTypeMeta(language="lang"),
    ),
    FileTypeDefinition(
        id="soundDefinition",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("resourcePack",),
            matcher=("sounds/sound_definitions.json",),
        ),
        schema=f"{SCHEMA_BASE}/soundDefinition/main.json",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="resourceManifest",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("resourcePack",),
            matcher=("manifest.json",),
        ),
        schema=f"{SCHEMA_BASE}/manifest/main.json",
        format_on_save_capable=True,
    ),
]
