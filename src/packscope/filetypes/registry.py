# topmark:header:start
#
#   project      : Packscope
#   file         : registry.py
#   file_relpath : src/packscope/filetypes/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File type registries.

A registry holds two collections:

* the **built-in sequence**, assigned once by `FileTypeRegistry.setup`. Its
  order is the match priority used by `FileTypeRegistry.get`;
* the **plugin collection**, definitions contributed at runtime (e.g. by
  extensions). Each `add_plugin_file_type` call returns a `Disposable` that
  removes exactly that definition again.

Resolution and placement guessing scan the built-in sequence only. Plugin
definitions are kept separately for the host application, which decides how
to surface them.

Concrete registries differ only in how ``setup`` obtains the built-ins:

* `BundledFileTypeRegistry` imports ``FILETYPES`` lists from Python modules.
* `DirectoryFileTypeRegistry` loads JSON definition files from a directory.
* `StaticFileTypeRegistry` takes definitions (or raw dicts) directly.
"""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Generic, TypeVar

from packscope.config.logging import PackscopeLogger, get_logger
from packscope.filetypes.guess import guess_folder
from packscope.filetypes.loaders import (
    BUILTIN_MODULES,
    iter_module_file_types,
    load_definition_directory,
)
from packscope.filetypes.model import (
    UNKNOWN_FILE_TYPE_ID,
    FileTypeDefinition,
    FileTypeLike,
    coerce_definition,
    is_json_content,
)
from packscope.filetypes.resolver import resolve

if TYPE_CHECKING:
    from collections.abc import Callable

    from packscope.filetypes.guess import FileHandle
    from packscope.project import PathTemplater

logger: PackscopeLogger = get_logger(__name__)

TSetupArg = TypeVar("TSetupArg")


class Disposable:
    """Handle returned by `FileTypeRegistry.add_plugin_file_type`.

    Calling `dispose` removes the registration; further calls do nothing.
    """

    def __init__(self, on_dispose: Callable[[], None]) -> None:
        self._on_dispose: Callable[[], None] | None = on_dispose

    @property
    def disposed(self) -> bool:
        return self._on_dispose is None

    def dispose(self) -> None:
        """Remove the registration (idempotent)."""
        on_dispose, self._on_dispose = self._on_dispose, None
        if on_dispose is not None:
            on_dispose()


class FileTypeRegistry(ABC, Generic[TSetupArg]):
    """Built-in and plugin file type definitions plus the lookups built on them.

    Args:
        project_config (PathTemplater | None): Templater used to expand scopes and
            matchers. Without one, path resolution matches nothing.

    Notes:
        Not thread safe. Do not mutate the plugin collection while iterating a
        snapshot you expect to stay consistent with the registry.
    """

    def __init__(self, project_config: PathTemplater | None = None) -> None:
        self.project_config: PathTemplater | None = project_config
        self._file_types: list[FileTypeDefinition] = []
        self._plugin_file_types: dict[int, FileTypeDefinition] = {}
        self._plugin_keys = itertools.count()

    def set_project_config(self, project_config: PathTemplater | None) -> None:
        """Replace the templater used for path resolution."""
        self.project_config = project_config

    @abstractmethod
    def setup(self, arg: TSetupArg) -> None:
        """Populate the built-in sequence from ``arg``."""

    def _set_file_types(self, definitions: Iterable[FileTypeLike]) -> None:
        self._file_types = [coerce_definition(d) for d in definitions]
        logger.debug("Registered %d built-in file types", len(self._file_types))

    @property
    def file_types(self) -> tuple[FileTypeDefinition, ...]:
        """Built-in definitions in priority order."""
        return tuple(self._file_types)

    # --- Plugin definitions ---

    def add_plugin_file_type(self, definition: FileTypeLike) -> Disposable:
        """Register a plugin definition.

        Args:
            definition (FileTypeLike): A definition or its raw dict form.

        Returns:
            Disposable: Handle whose ``dispose()`` removes exactly this registration.
        """
        file_type = coerce_definition(definition)
        key = next(self._plugin_keys)
        self._plugin_file_types[key] = file_type
        logger.debug("Added plugin file type %r", file_type.id)

        def _remove() -> None:
            removed = self._plugin_file_types.pop(key, None)
            if removed is not None:
                logger.debug("Removed plugin file type %r", removed.id)

        return Disposable(_remove)

    def get_plugin_file_types(self) -> list[FileTypeDefinition]:
        """Return a snapshot of the plugin definitions."""
        return list(self._plugin_file_types.values())

    def set_plugin_file_types(self, definitions: Iterable[FileTypeLike] = ()) -> None:
        """Replace all plugin definitions.

        Disposables handed out before this call no longer remove anything.
        """
        self._plugin_file_types.clear()
        for definition in definitions:
            self._plugin_file_types[next(self._plugin_keys)] = coerce_definition(definition)

    # --- Lookups ---

    def get(
        self, file_path: str | None = None, file_type_id: str | None = None
    ) -> FileTypeDefinition | None:
        """Return the definition for ``file_path`` or with id ``file_type_id``.

        See `packscope.filetypes.resolver.resolve` for the matching rules.

        Raises:
            InvalidFileDefinitionError: If a definition without scope and matcher is
                reached during the scan.
        """
        return resolve(self._file_types, self.project_config, file_path, file_type_id)

    def get_ids(self) -> list[str]:
        """Return the ids of the built-in definitions in priority order."""
        return [file_type.id for file_type in self._file_types]

    def get_id(self, file_path: str) -> str:
        """Return the file type id of ``file_path``, or ``"unknown"``."""
        file_type = self.get(file_path)
        return file_type.id if file_type is not None else UNKNOWN_FILE_TYPE_ID

    def is_json_file(self, file_path: str) -> bool:
        """Return whether ``file_path`` should be treated as JSON.

        A matched definition declaring ``meta.language`` decides; otherwise the
        ``.json`` suffix does.
        """
        return is_json_content(self.get(file_path), file_path)

    async def guess_folder(self, handle: FileHandle) -> str | None:
        """Guess the folder an unplaced file belongs in.

        See `packscope.filetypes.guess.guess_folder`.
        """
        return await guess_folder(self._file_types, handle)


class StaticFileTypeRegistry(FileTypeRegistry[Iterable[FileTypeLike]]):
    """Registry whose built-ins are passed in directly."""

    def setup(self, arg: Iterable[FileTypeLike]) -> None:
        self._set_file_types(arg)


class BundledFileTypeRegistry(FileTypeRegistry[Sequence[str]]):
    """Registry loading built-ins from ``FILETYPES`` lists in Python modules."""

    def setup(self, arg: Sequence[str] = BUILTIN_MODULES) -> None:
        """Import each module in order and register its ``FILETYPES``."""
        self._set_file_types(iter_module_file_types(arg))


class DirectoryFileTypeRegistry(FileTypeRegistry[Path | str]):
    """Registry loading built-ins from JSON definition files below a directory.

    Raises:
        DefinitionError: From `setup`, if a definition file is malformed.
    """

    def setup(self, arg: Path | str) -> None:
        """Load every ``*.json`` file below ``arg`` (sorted by relative path)."""
        self._set_file_types(load_definition_directory(Path(arg)))
