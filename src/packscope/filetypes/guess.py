# topmark:header:start
#
#   project      : Packscope
#   file         : guess.py
#   file_relpath : src/packscope/filetypes/guess.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Guess the destination folder for a file that is not placed in a project yet.

Used when a user drops or imports a file: only its name and (lazily) its
content are known. Two phases run in order:

1. **Extension**: the first definition that declares a ``scope`` and lists
   the file's extension in ``fileExtensions`` wins.
2. **Content** (``.json`` files only): the text is parsed as lenient JSON.
   A read or parse failure ends the guess with no result. Otherwise the first
   JSON-like definition declaring both ``scope`` and ``fileContent`` wins.

The folder returned is the definition's first scope entry, with a trailing
``/``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from packscope.config.logging import PackscopeLogger, get_logger
from packscope.filetypes.lenient import parse_lenient_json
from packscope.filetypes.model import JSON_EXTENSION

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from packscope.filetypes.model import FileTypeDefinition

logger: PackscopeLogger = get_logger(__name__)


@runtime_checkable
class FileContent(Protocol):
    """Loaded file whose text can be decoded asynchronously."""

    async def text(self) -> str:
        """Return the decoded file text."""
        ...


@runtime_checkable
class FileHandle(Protocol):
    """Handle to a file with a name and lazily readable content."""

    name: str

    async def get_file(self) -> FileContent:
        """Fetch the file behind this handle."""
        ...


class LocalFile:
    """`FileContent` backed by a path on the local filesystem."""

    def __init__(self, path: Path, encoding: str = "utf-8") -> None:
        self.path = path
        self.encoding = encoding

    async def text(self) -> str:
        """Read and decode the file in a worker thread."""
        return await asyncio.to_thread(self.path.read_text, encoding=self.encoding)


class LocalFileHandle:
    """`FileHandle` for a local file.

    Args:
        path (Path | str): Path to the file.
    """

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.name: str = self.path.name

    async def get_file(self) -> LocalFile:
        return LocalFile(self.path)


def _start_path(scope: Sequence[str]) -> str:
    start = scope[0]
    return start if start.endswith("/") else f"{start}/"


def guess_by_extension(definitions: Iterable[FileTypeDefinition], name: str) -> str | None:
    """Return the folder of the first scoped definition accepting the extension of ``name``."""
    extension = "." + name.split(".")[-1]
    for definition in definitions:
        detect = definition.detect
        if not detect.has_scope:
            continue
        if detect.file_extensions is not None and extension in detect.file_extensions:
            return _start_path(detect.scope)
    return None


def guess_by_content(definitions: Iterable[FileTypeDefinition], document: object) -> str | None:
    """Return the folder of the first JSON-like definition carrying content hints.

    The parsed ``document`` is not inspected yet: every JSON-like definition
    that declares both ``scope`` and ``fileContent`` is accepted.
    """
    # TODO: match ``detect.file_content`` hint paths against ``document`` once
    # hint path semantics are defined for the definition format.
    for definition in definitions:
        if not definition.kind.is_json_like:
            continue
        detect = definition.detect
        if not detect.has_scope or detect.file_content is None:
            continue
        return _start_path(detect.scope)
    return None


async def guess_folder(
    definitions: Sequence[FileTypeDefinition],
    handle: FileHandle,
) -> str | None:
    """Guess the project folder ``handle`` belongs in.

    Args:
        definitions (Sequence[FileTypeDefinition]): Definitions in priority order.
        handle (FileHandle): The unplaced file.

    Returns:
        str | None: A folder ending in ``/``, or None without a guess.
    """
    folder = guess_by_extension(definitions, handle.name)
    if folder is not None:
        logger.debug("Guessed %s for %s by extension", folder, handle.name)
        return folder

    if not handle.name.endswith(JSON_EXTENSION):
        return None

    try:
        file = await handle.get_file()
        document = parse_lenient_json(await file.text())
    except (OSError, ValueError) as exc:
        logger.debug("Cannot sniff content of %s: %s", handle.name, exc)
        return None

    folder = guess_by_content(definitions, document)
    if folder is not None:
        logger.debug("Guessed %s for %s by content", folder, handle.name)
    return folder
