# topmark:header:start
#
#   project      : Packscope
#   file         : behavior.py
#   file_relpath : src/packscope/filetypes/builtins/behavior.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Behavior pack file types.

Exports:
    FILETYPES: Entities, items, blocks, loot tables, recipes, functions,
        animation controllers, spawn rules, structures and the pack manifest.

Notes:
    - Scopes are relative to the ``behaviorPack`` category.
    - The manifest uses a matcher so it does not shadow the scoped folders.
"""

from __future__ import annotations

from packscope.filetypes.model import (
    DetectRules,
    DocumentationConfig,
    FileTypeDefinition,
    FileTypeKind,
    FileTypeMeta,
    HighlighterConfiguration,
)

SCHEMA_BASE = "file:///data/packages/minecraftBedrock/schema"

FILETYPES: list[FileTypeDefinition] = [
    FileTypeDefinition(
        id="entity",
        kind=FileTypeKind.JSON,
        icon="mdi-account-outline",
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("entities",),
            file_extensions=(".json",),
            file_content=("minecraft:entity",),
        ),
        schema=f"{SCHEMA_BASE}/entity/main.json",
        pack_spider="entity.json",
        lightning_cache="entity.lc",
        format_on_save_capable=True,
        documentation=DocumentationConfig(base_url="https://bedrock.dev/docs/stable/Entities"),
    ),
    FileTypeDefinition(
        id="item",
        kind=FileTypeKind.JSON,
        icon="mdi-sword",
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("items",),
            file_extensions=(".json",),
            file_content=("minecraft:item",),
        ),
        schema=f"{SCHEMA_BASE}/item/main.json",
        lightning_cache="item.lc",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="block",
        kind=FileTypeKind.JSON,
        icon="mdi-cube-outline",
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("blocks",),
            file_extensions=(".json",),
            file_content=("minecraft:block",),
        ),
        schema=f"{SCHEMA_BASE}/block/main.json",
        lightning_cache="block.lc",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="lootTable",
        kind=FileTypeKind.JSON,
        icon="mdi-chest",
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("loot_tables",),
            file_extensions=(".json",),
            file_content=("pools",),
        ),
        schema=f"{SCHEMA_BASE}/lootTable/main.json",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="recipe",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("recipes",),
            file_extensions=(".json",),
            file_content=(
                "minecraft:recipe_shaped",
                "minecraft:recipe_shapeless",
                "minecraft:recipe_furnace",
            ),
        ),
        schema=f"{SCHEMA_BASE}/recipe/main.json",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="function",
        kind=FileTypeKind.TEXT,
        icon="mdi-function",
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("functions",),
            file_extensions=(".mcfunction",),
        ),
        lightning_cache="function.lc",
        meta=FileTypeMeta(language="mcfunction", commands_use_slash=False),
        highlighter=HighlighterConfiguration(
            keywords=("execute", "function", "say", "scoreboard", "tag", "tp"),
            type_identifiers=("@a", "@e", "@p", "@r", "@s"),
        ),
        documentation=DocumentationConfig(
            base_url="https://bedrock.dev/docs/stable/Functions",
            supports_querying=False,
        ),
    ),
    FileTypeDefinition(
        id="animationController",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("animation_controllers",),
            file_extensions=(".json",),
            file_content=("animation_controllers",),
        ),
        schema=f"{SCHEMA_BASE}/animationController/main.json",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="spawnRule",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("spawn_rules",),
            file_extensions=(".json",),
            file_content=("minecraft:spawn_rules",),
        ),
        schema=f"{SCHEMA_BASE}/spawnRule/main.json",
        format_on_save_capable=True,
    ),
    FileTypeDefinition(
        id="structure",
        kind=FileTypeKind.NBT,
        detect=DetectRules(
            pack_types=("behaviorPack",),
            scope=("structures",),
            file_extensions=(".mcstructure",),
        ),
    ),
    FileTypeDefinition(
        id="behaviorManifest",
        kind=FileTypeKind.JSON,
        detect=DetectRules(
            pack_types=("behaviorPack",),
            matcher=("manifest.json",),
        ),
        schema=f"{SCHEMA_BASE}/manifest/main.json",
        format_on_save_capable=True,
    ),
]
