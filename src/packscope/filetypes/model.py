# topmark:header:start
#
#   project      : Packscope
#   file         : model.py
#   file_relpath : src/packscope/filetypes/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File type definition model.

A *file type definition* is a declarative record describing how Packscope
recognizes a project file (pack category, scope prefix, glob matcher, file
extension, content hints) and which editing affordances apply once it is
recognized (schema, language, highlighter). Definitions usually arrive as
camelCase JSON objects; `FileTypeDefinition.from_dict` normalizes them into
immutable dataclasses.

Normalization rules:
    * ``packType``, ``scope`` and ``matcher`` accept a string or a list and
      become tuples; empty strings are dropped.
    * ``fileExtensions`` and ``fileContent`` keep the distinction between
      "not declared" (``None``) and "declared but empty" (``()``).
    * A missing ``type`` becomes `FileTypeKind.UNSPECIFIED`.
    * Optional sections get their defaults from factories, never from the
      call site (e.g. ``documentation.supportsQuerying`` defaults to True).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Final

from packscope.errors import DefinitionError

UNKNOWN_FILE_TYPE_ID: Final[str] = "unknown"

JSON_EXTENSION: Final[str] = ".json"


class FileTypeKind(Enum):
    """Content family of a file type.

    Attributes:
        JSON: JSON (or lenient JSON) documents.
        TEXT: Plain text formats such as functions or language files.
        NBT: Binary NBT structures.
        UNSPECIFIED: No ``type`` declared; treated as JSON-leaning by heuristics.
    """

    JSON = "json"
    TEXT = "text"
    NBT = "nbt"
    UNSPECIFIED = "unspecified"

    @classmethod
    def parse(cls, value: object) -> FileTypeKind:
        """Return the kind for a raw ``type`` value (None means unspecified).

        Raises:
            DefinitionError: If the tag is not one of ``json``, ``text`` or ``nbt``.
        """
        if value is None:
            return cls.UNSPECIFIED
        if isinstance(value, str) and value in ("json", "text", "nbt"):
            return cls(value)
        raise DefinitionError(f"Unknown file type kind: {value!r}")

    @property
    def is_json_like(self) -> bool:
        """True for kinds eligible for JSON content sniffing."""
        return self in (FileTypeKind.JSON, FileTypeKind.UNSPECIFIED)


def _str_tuple(value: object, key: str, *, single: bool = True) -> tuple[str, ...]:
    """Normalize a string or list of strings to a tuple, dropping empty strings."""
    if value is None:
        return ()
    if isinstance(value, str):
        if not single:
            raise DefinitionError(f'"{key}" must be a list of strings')
        return (value,) if value else ()
    if isinstance(value, Sequence):
        items: list[str] = []
        for item in value:
            if not isinstance(item, str):
                raise DefinitionError(f'"{key}" must only contain strings, got {item!r}')
            if item:
                items.append(item)
        return tuple(items)
    raise DefinitionError(f'"{key}" must be a string or a list of strings')


def _optional_str_tuple(value: object, key: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    return _str_tuple(value, key, single=False)


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is None or isinstance(value, str):
        return value
    raise DefinitionError(f'"{key}" must be a string')


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise DefinitionError(f'"{key}" must be an object')
    return value


@dataclass(frozen=True)
class DetectRules:
    """Detection rules of a file type.

    Attributes:
        pack_types (tuple[str, ...]): Pack categories the templates are relative to.
            Empty means project-relative.
        scope (tuple[str, ...]): Path-prefix templates.
        matcher (tuple[str, ...]): Glob templates, consulted only without a scope.
        file_extensions (tuple[str, ...] | None): Dot-prefixed extensions a path must
            carry; None when not declared.
        file_content (tuple[str, ...] | None): Hint paths into parsed JSON used for
            placement guessing; None when not declared.
    """

    pack_types: tuple[str, ...] = ()
    scope: tuple[str, ...] = ()
    matcher: tuple[str, ...] = ()
    file_extensions: tuple[str, ...] | None = None
    file_content: tuple[str, ...] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> DetectRules:
        """Build detection rules from the raw ``detect`` object."""
        if data is None:
            return cls()
        return cls(
            pack_types=_str_tuple(data.get("packType"), "packType"),
            scope=_str_tuple(data.get("scope"), "scope"),
            matcher=_str_tuple(data.get("matcher"), "matcher"),
            file_extensions=_optional_str_tuple(data.get("fileExtensions"), "fileExtensions"),
            file_content=_optional_str_tuple(data.get("fileContent"), "fileContent"),
        )

    @property
    def has_scope(self) -> bool:
        return bool(self.scope)

    @property
    def has_matcher(self) -> bool:
        return bool(self.matcher)

    def accepts_extension(self, extension: str) -> bool:
        """Return True unless an extension filter is declared and excludes ``extension``."""
        if self.file_extensions is None:
            return True
        return extension in self.file_extensions

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.pack_types:
            out["packType"] = list(self.pack_types)
        if self.scope:
            out["scope"] = list(self.scope)
        if self.matcher:
            out["matcher"] = list(self.matcher)
        if self.file_extensions is not None:
            out["fileExtensions"] = list(self.file_extensions)
        if self.file_content is not None:
            out["fileContent"] = list(self.file_content)
        return out


@dataclass(frozen=True)
class DocumentationConfig:
    """Documentation lookup settings.

    Attributes:
        base_url (str): Base URL for documentation pages.
        supports_querying (bool): Whether the documentation site accepts search
            queries. Defaults to True when the raw data omits it.
    """

    base_url: str
    supports_querying: bool = True

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DocumentationConfig:
        base_url = data.get("baseUrl")
        if not isinstance(base_url, str):
            raise DefinitionError('"documentation.baseUrl" must be a string')
        supports_querying = data.get("supportsQuerying")
        if supports_querying is None:
            return cls(base_url=base_url)
        return cls(base_url=base_url, supports_querying=bool(supports_querying))


@dataclass(frozen=True)
class FileTypeMeta:
    """Editor metadata attached to a file type.

    Attributes:
        language (str | None): Language mode override; drives `is_json_file`.
        commands_use_slash (bool | None): Whether commands in this file type use a
            leading slash.
    """

    language: str | None = None
    commands_use_slash: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> FileTypeMeta:
        if data is None:
            return cls()
        slash = data.get("commandsUseSlash")
        return cls(
            language=_optional_str(data, "language"),
            commands_use_slash=None if slash is None else bool(slash),
        )


@dataclass(frozen=True)
class HighlighterConfiguration:
    """Token lists used by syntax highlighters; passed through untouched."""

    keywords: tuple[str, ...] = ()
    type_identifiers: tuple[str, ...] = ()
    variables: tuple[str, ...] = ()
    definitions: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> HighlighterConfiguration:
        return cls(
            keywords=_str_tuple(data.get("keywords"), "keywords", single=False),
            type_identifiers=_str_tuple(
                data.get("typeIdentifiers"), "typeIdentifiers", single=False
            ),
            variables=_str_tuple(data.get("variables"), "variables", single=False),
            definitions=_str_tuple(data.get("definitions"), "definitions", single=False),
        )


@dataclass(frozen=True, eq=False)
class FileTypeDefinition:
    """A recognizable file type and its detection rules.

    Only `id`, `kind`, `detect` and `meta.language` are interpreted by
    Packscope; every other field is opaque and passed through to consumers
    (schema validation, highlighting, language services). Definitions compare
    by identity, so two equal records are still two registrations.

    Attributes:
        id (str): Identifier, e.g. ``"entity"``. Uniqueness is not enforced.
        kind (FileTypeKind): Content family.
        detect (DetectRules): Detection rules.
        schema (str | None): Schema reference.
        icon (str | None): Icon name.
        pack_spider (str | None): Pack spider configuration reference.
        lightning_cache (str | None): Lightning cache configuration reference.
        types (tuple[Any, ...]): Type declaration references.
        definitions (Mapping[str, Any]): Definition lookups (opaque).
        format_on_save_capable (bool): Whether the editor may format on save.
        documentation (DocumentationConfig | None): Documentation settings.
        meta (FileTypeMeta): Editor metadata.
        highlighter (HighlighterConfiguration | None): Highlighter token lists.
    """

    id: str
    kind: FileTypeKind = FileTypeKind.UNSPECIFIED
    detect: DetectRules = field(default_factory=DetectRules)
    schema: str | None = None
    icon: str | None = None
    pack_spider: str | None = None
    lightning_cache: str | None = None
    types: tuple[Any, ...] = ()
    definitions: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    format_on_save_capable: bool = False
    documentation: DocumentationConfig | None = None
    meta: FileTypeMeta = field(default_factory=FileTypeMeta)
    highlighter: HighlighterConfiguration | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FileTypeDefinition:
        """Build a definition from its camelCase JSON representation.

        Args:
            data (Mapping[str, Any]): The raw definition object.

        Returns:
            FileTypeDefinition: The normalized definition.

        Raises:
            DefinitionError: If ``id`` is missing or a field has the wrong shape.
        """
        if not isinstance(data, Mapping):
            raise DefinitionError(f"File type definition must be an object, got {data!r}")
        file_type_id = data.get("id")
        if not isinstance(file_type_id, str) or not file_type_id:
            raise DefinitionError(f'File type definition without "id": {dict(data)!r}')

        try:
            detect = DetectRules.from_dict(_section(data, "detect"))
            documentation = _section(data, "documentation")
            highlighter = _section(data, "highlighterConfiguration")
            definitions = _section(data, "definitions") or {}
            types = data.get("types") or ()
            if isinstance(types, str) or not isinstance(types, Sequence):
                raise DefinitionError('"types" must be a list')

            return cls(
                id=file_type_id,
                kind=FileTypeKind.parse(data.get("type")),
                detect=detect,
                schema=_optional_str(data, "schema"),
                icon=_optional_str(data, "icon"),
                pack_spider=_optional_str(data, "packSpider"),
                lightning_cache=_optional_str(data, "lightningCache"),
                types=tuple(types),
                definitions=MappingProxyType(dict(definitions)),
                format_on_save_capable=bool(data.get("formatOnSaveCapable", False)),
                documentation=(
                    DocumentationConfig.from_dict(documentation) if documentation else None
                ),
                meta=FileTypeMeta.from_dict(_section(data, "meta")),
                highlighter=(
                    HighlighterConfiguration.from_dict(highlighter) if highlighter else None
                ),
            )
        except DefinitionError as exc:
            raise DefinitionError(f"File type {file_type_id!r}: {exc}") from exc

    def to_dict(self) -> dict[str, Any]:
        """Render the interpreted fields as a JSON-serializable dict."""
        out: dict[str, Any] = {"id": self.id}
        if self.kind is not FileTypeKind.UNSPECIFIED:
            out["type"] = self.kind.value
        out["detect"] = self.detect.to_dict()
        if self.schema is not None:
            out["schema"] = self.schema
        if self.meta.language is not None:
            out["meta"] = {"language": self.meta.language}
        return out


FileTypeLike = FileTypeDefinition | Mapping[str, Any]


def coerce_definition(obj: object) -> FileTypeDefinition:
    """Return ``obj`` as a `FileTypeDefinition`, converting raw mappings.

    Raises:
        DefinitionError: If ``obj`` is neither a definition nor a valid mapping.
    """
    if isinstance(obj, FileTypeDefinition):
        return obj
    if isinstance(obj, Mapping):
        return FileTypeDefinition.from_dict(obj)
    raise DefinitionError(f"Not a file type definition: {obj!r}")


def is_json_content(file_type: FileTypeDefinition | None, file_path: str) -> bool:
    """Return whether ``file_path``, resolved to ``file_type``, holds JSON.

    A declared ``meta.language`` decides; otherwise the ``.json`` suffix does.
    """
    language = file_type.meta.language if file_type is not None else None
    if language:
        return language == "json"
    return file_path.endswith(JSON_EXTENSION)
