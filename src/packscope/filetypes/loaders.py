# topmark:header:start
#
#   project      : Packscope
#   file         : loaders.py
#   file_relpath : src/packscope/filetypes/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load file type definitions from modules, JSON files and plugin entry points.

Sources:
    * **Python modules** exporting a ``FILETYPES`` list (the bundled built-ins
      live in `packscope.filetypes.builtins`).
    * **Definition files**: ``*.json`` documents (lenient JSON) holding one
      definition object or a list of them.
    * **Entry points** in the ``packscope.filetypes`` group. Each entry point
      loads a provider: an iterable of definitions, or a callable returning
      one.

Notes:
    * Module and entry point failures are logged and skipped so one broken
      provider cannot take down the others.
    * Malformed definition files raise `DefinitionError`: they are authored
      configuration and must be fixed.
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from collections.abc import Mapping
from importlib import import_module
from importlib.metadata import entry_points
from typing import TYPE_CHECKING, Any, Final, cast

from packscope.config.logging import PackscopeLogger, get_logger
from packscope.errors import DefinitionError
from packscope.filetypes.lenient import parse_lenient_json
from packscope.filetypes.model import FileTypeDefinition, coerce_definition

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from importlib.metadata import EntryPoints
    from pathlib import Path
    from types import ModuleType

    from packscope.filetypes.registry import Disposable, FileTypeRegistry

logger: PackscopeLogger = get_logger(__name__)

BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "packscope.filetypes.builtins.behavior",
    "packscope.filetypes.builtins.resource",
    "packscope.filetypes.builtins.general",
)

ENTRYPOINT_GROUP: Final[str] = "packscope.filetypes"


def iter_module_file_types(
    modules: Sequence[str] = BUILTIN_MODULES,
) -> Iterable[FileTypeDefinition]:
    """Yield definitions from the ``FILETYPES`` list of each module, in order."""
    for modname in modules:
        try:
            mod: ModuleType = import_module(modname)
        except ImportError:
            logger.exception("Failed to import file types from %s", modname)
            continue
        filetypes: Any = getattr(mod, "FILETYPES", None)
        if not isinstance(filetypes, list):
            logger.warning("Module %s has no FILETYPES list; skipping", modname)
            continue
        for obj in cast("list[object]", filetypes):
            if isinstance(obj, FileTypeDefinition):
                yield obj
            else:
                logger.warning("Non-FileTypeDefinition entry in %s.FILETYPES: %r", modname, obj)


def load_definition_file(path: Path) -> list[FileTypeDefinition]:
    """Load the definition(s) stored in one JSON file.

    Args:
        path (Path): A ``.json`` file holding a definition object or a list of them.

    Returns:
        list[FileTypeDefinition]: The definitions, in file order.

    Raises:
        DefinitionError: If the file cannot be read or parsed, or holds a malformed
            definition.
    """
    try:
        data: Any = parse_lenient_json(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise DefinitionError(f"Cannot load file definitions from {path}: {exc}") from exc

    items: list[Any] = data if isinstance(data, list) else [data]
    try:
        return [FileTypeDefinition.from_dict(item) for item in items]
    except DefinitionError as exc:
        raise DefinitionError(f"{path}: {exc}") from exc


def iter_definition_files(directory: Path) -> list[Path]:
    """Return all ``*.json`` files below ``directory``, sorted by relative path."""
    if not directory.is_dir():
        logger.warning("Definition directory %s does not exist", directory)
        return []
    return sorted(
        (p for p in directory.rglob("*.json") if p.is_file()),
        key=lambda p: p.relative_to(directory).as_posix(),
    )


def load_definition_directory(directory: Path) -> list[FileTypeDefinition]:
    """Load every definition file below ``directory``."""
    definitions: list[FileTypeDefinition] = []
    for path in iter_definition_files(directory):
        loaded = load_definition_file(path)
        logger.debug("Loaded %d file type(s) from %s", len(loaded), path)
        definitions.extend(loaded)
    return definitions


def iter_entry_point_file_types() -> Iterable[FileTypeDefinition]:
    """Yield definitions provided by installed plugins (entry points)."""
    candidates: EntryPoints = entry_points().select(group=ENTRYPOINT_GROUP)

    for ep in candidates:
        name = getattr(ep, "name", ep)
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
        except Exception:
            logger.exception("Failed loading file types from entry point %s", name)
            continue
        if isinstance(provided, Mapping) or not isinstance(provided, IterABC):
            logger.warning(
                "Entry point %s did not return an iterable of file types: %r", name, provided
            )
            continue
        for obj in cast("IterABC[object]", provided):
            try:
                yield coerce_definition(obj)
            except DefinitionError as exc:
                logger.warning("Entry point %s provided an invalid file type: %s", name, exc)


def load_entry_point_file_types(registry: FileTypeRegistry[Any]) -> list[Disposable]:
    """Register every entry point definition as a plugin file type of ``registry``.

    Returns:
        list[Disposable]: One disposer per registered definition.
    """
    disposables = [registry.add_plugin_file_type(ft) for ft in iter_entry_point_file_types()]
    logger.debug("Registered %d plugin file type(s) from entry points", len(disposables))
    return disposables
