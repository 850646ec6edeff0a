# topmark:header:start
#
#   project      : Packscope
#   file         : general.py
#   file_relpath : src/packscope/filetypes/builtins/general.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Project-level file types not tied to a pack category.

Exports:
    FILETYPES: The project configuration file and Molang scripts.

Notes:
    These come last: their matchers are broad and must not shadow pack files.
"""

from __future__ import annotations

from packscope.filetypes.model import DetectRules, FileTypeDefinition, FileTypeKind, FileTypeMeta

FILETYPES: list[FileTypeDefinition] = [
    FileTypeDefinition(
        id="projectConfig",
        kind=FileTypeKind.JSON,
        detect=DetectRules(matcher=("config.json",)),
        schema="file:///data/packages/common/schema/config/main.json",
        meta=FileTypeMeta(language="json"),
    ),
    FileTypeDefinition(
        id="molang",
        kind=FileTypeKind.TEXT,
        detect=DetectRules(matcher=("**/*.molang",)),
        meta=FileTypeMeta(language="molang"),
    ),
]
