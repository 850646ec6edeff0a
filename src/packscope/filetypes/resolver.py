# topmark:header:start
#
#   project      : Packscope
#   file         : resolver.py
#   file_relpath : src/packscope/filetypes/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve a project path to its file type definition.

The engine scans an ordered sequence of definitions and returns the first one
whose detection rules match. The sequence order is the only priority
mechanism: an earlier definition always wins over a later one that would also
match.

Per definition, in order:
    1. An explicitly requested id short-circuits all detection logic.
    2. Without a path nothing else can be tested.
    3. A declared ``fileExtensions`` list filters on the path extension.
    4. A non-empty ``scope`` matches by path prefix.
    5. Otherwise a non-empty ``matcher`` matches by glob.
    6. Otherwise the definition is malformed and resolution aborts with
       `InvalidFileDefinitionError`.

Both ``scope`` and ``matcher`` templates are expanded through a
`PathTemplater`, once per pack category (or once without a category).

Notes:
    The definitions and the templater are explicit parameters. Callers that
    mutate the underlying collection while a scan is running get no
    isolation guarantee.
"""

from __future__ import annotations

import posixpath
from typing import TYPE_CHECKING

from packscope.config.logging import PackscopeLogger, get_logger
from packscope.errors import InvalidFileDefinitionError
from packscope.filetypes.globbing import matches_any

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from packscope.filetypes.model import FileTypeDefinition
    from packscope.project import PathTemplater

logger: PackscopeLogger = get_logger(__name__)


def expand_templates(
    templater: PathTemplater | None,
    pack_types: Sequence[str],
    templates: Sequence[str],
) -> list[str]:
    """Expand ``templates`` relative to each pack category.

    Args:
        templater (PathTemplater | None): Path templater; without one nothing can be
            expanded.
        pack_types (Sequence[str]): Pack categories. Empty means project-relative.
        templates (Sequence[str]): Scope or matcher templates.

    Returns:
        list[str]: One entry per template when ``pack_types`` is empty; otherwise
            one entry per ``(category, template)`` pair, categories in the outer loop.
    """
    if templater is None:
        return []

    if not pack_types:
        return [templater.resolve_pack_path(None, template) for template in templates]

    expanded: list[str] = []
    for pack_type in pack_types:
        for template in templates:
            expanded.append(templater.resolve_pack_path(pack_type, template))
    return expanded


def file_extension(path: str) -> str:
    """Return the dot-prefixed extension of the last path segment (``""`` if none)."""
    return posixpath.splitext(path.replace("\\", "/"))[1]


def resolve(
    definitions: Iterable[FileTypeDefinition],
    templater: PathTemplater | None,
    path: str | None = None,
    file_type_id: str | None = None,
) -> FileTypeDefinition | None:
    """Return the first definition matching ``path`` (or carrying ``file_type_id``).

    Args:
        definitions (Iterable[FileTypeDefinition]): Definitions in priority order.
        templater (PathTemplater | None): Templater used to expand scopes and matchers.
        path (str | None): Project path to classify.
        file_type_id (str | None): Identifier to look up directly; takes precedence over
            path detection for that definition.

    Returns:
        FileTypeDefinition | None: The matching definition, or None if nothing matches.

    Raises:
        InvalidFileDefinitionError: If the scan reaches a definition that declares
            neither ``scope`` nor ``matcher``.
    """
    extension: str | None = file_extension(path) if path else None

    for definition in definitions:
        if file_type_id is not None and definition.id == file_type_id:
            logger.debug("Resolved file type %r by id", definition.id)
            return definition
        if not path:
            continue

        detect = definition.detect
        if not detect.accepts_extension(extension or ""):
            logger.trace("%s: extension %r filtered out by %r", path, extension, definition.id)
            continue

        if detect.has_scope:
            prefixes = expand_templates(templater, detect.pack_types, detect.scope)
            if any(path.startswith(prefix) for prefix in prefixes):
                logger.debug("%s: matched %r by scope", path, definition.id)
                return definition
        elif detect.has_matcher:
            patterns = expand_templates(templater, detect.pack_types, detect.matcher)
            if matches_any(path, patterns):
                logger.debug("%s: matched %r by matcher", path, definition.id)
                return definition
        else:
            logger.error("Invalid file definition without scope or matcher: %r", definition)
            raise InvalidFileDefinitionError(definition.id)

        logger.trace("%s: no match for %r", path, definition.id)

    logger.debug("No file type for path=%r id=%r", path, file_type_id)
    return None
