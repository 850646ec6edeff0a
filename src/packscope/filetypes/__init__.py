# topmark:header:start
#
#   project      : Packscope
#   file         : __init__.py
#   file_relpath : src/packscope/filetypes/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File type definitions and the engine that resolves project paths to them.

Most users should import from here:

```python
from packscope.filetypes import BundledFileTypeRegistry
from packscope.project import ProjectConfig

registry = BundledFileTypeRegistry(ProjectConfig(packs={"behaviorPack": "BP"}))
registry.setup()
registry.get_id("BP/entities/zombie.json")  # "entity"
```
"""

from __future__ import annotations

from .guess import FileHandle, LocalFileHandle
from .model import (
    UNKNOWN_FILE_TYPE_ID,
    DetectRules,
    DocumentationConfig,
    FileTypeDefinition,
    FileTypeKind,
    FileTypeMeta,
    HighlighterConfiguration,
)
from .registry import (
    BundledFileTypeRegistry,
    DirectoryFileTypeRegistry,
    Disposable,
    FileTypeRegistry,
    StaticFileTypeRegistry,
)
from .resolver import expand_templates, resolve

__all__ = [
    "UNKNOWN_FILE_TYPE_ID",
    "BundledFileTypeRegistry",
    "DetectRules",
    "DirectoryFileTypeRegistry",
    "Disposable",
    "DocumentationConfig",
    "FileHandle",
    "FileTypeDefinition",
    "FileTypeKind",
    "FileTypeMeta",
    "FileTypeRegistry",
    "HighlighterConfiguration",
    "LocalFileHandle",
    "StaticFileTypeRegistry",
    "expand_templates",
    "resolve",
]
