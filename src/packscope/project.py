# topmark:header:start
#
#   project      : Packscope
#   file         : project.py
#   file_relpath : src/packscope/project.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Project path templating.

File type definitions describe their location with *templates* such as
``"entities"`` or ``"**/*.mcfunction"`` relative to a pack category. The
resolution engine turns those into concrete prefixes or globs through a
`PathTemplater`. `ProjectConfig` is the default templater: it joins the
project root, the folder of the pack category and the template.

Key behaviors:
    - ``resolve_pack_path(None, "x")`` yields ``<root>/x``.
    - ``resolve_pack_path("behaviorPack", "x")`` yields ``<root>/<packs[behaviorPack]>/x``.
    - Unknown categories raise `ProjectConfigError`.
    - Joins are POSIX-style and never add a trailing slash.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from packscope.config.logging import PackscopeLogger, get_logger
from packscope.errors import ProjectConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

logger: PackscopeLogger = get_logger(__name__)


@runtime_checkable
class PathTemplater(Protocol):
    """Protocol for expanding ``(pack category, template)`` pairs into concrete paths.

    Implementations must be deterministic for a given category, template and
    project state.
    """

    def resolve_pack_path(self, pack_type: str | None, template: str) -> str:
        """Return the concrete path for ``template`` inside ``pack_type``.

        Args:
            pack_type (str | None): Pack category, or None for a project-relative template.
            template (str): Path prefix or glob template.

        Returns:
            str: The expanded path.
        """
        ...


def _join(*parts: str) -> str:
    """Join POSIX path fragments, skipping empty ones and collapsing duplicate slashes."""
    cleaned: list[str] = []
    for i, part in enumerate(parts):
        if not part:
            continue
        part = part.replace("\\", "/")
        part = part.rstrip("/") if i < len(parts) - 1 else part
        if cleaned:
            part = part.lstrip("/")
        if part:
            cleaned.append(part)
    return "/".join(cleaned)


@dataclass(frozen=True)
class ProjectConfig:
    """Default `PathTemplater` backed by a project root and a pack folder mapping.

    Attributes:
        root (str): Project root prefix (POSIX, may be empty).
        packs (Mapping[str, str]): Pack category -> folder relative to ``root``.
    """

    root: str = ""
    packs: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        # Freeze a private copy so callers cannot mutate the mapping behind our back
        object.__setattr__(self, "packs", MappingProxyType(dict(self.packs)))

    @property
    def pack_types(self) -> tuple[str, ...]:
        """Known pack categories, in declaration order."""
        return tuple(self.packs)

    def pack_path(self, pack_type: str) -> str:
        """Return the folder of ``pack_type`` joined onto the project root.

        Raises:
            ProjectConfigError: If the category is not configured.
        """
        try:
            folder = self.packs[pack_type]
        except KeyError:
            raise ProjectConfigError(f"Unknown pack type: {pack_type!r}") from None
        return _join(self.root, folder)

    def resolve_pack_path(self, pack_type: str | None, template: str) -> str:
        """Expand ``template`` relative to ``pack_type`` (or the project root).

        Args:
            pack_type (str | None): Pack category, or None for a project-relative template.
            template (str): Path prefix or glob template.

        Returns:
            str: The expanded path.

        Raises:
            ProjectConfigError: If ``pack_type`` is not configured.
        """
        relative = template
        while relative.startswith(("./", "/")):
            relative = relative[1:] if relative.startswith("/") else relative[2:]

        base = self.root if pack_type is None else self.pack_path(pack_type)
        resolved = _join(base, relative)
        logger.trace("resolve_pack_path(%r, %r) -> %r", pack_type, template, resolved)
        return resolved
