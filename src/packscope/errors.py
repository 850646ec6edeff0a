# topmark:header:start
#
#   project      : Packscope
#   file         : errors.py
#   file_relpath : src/packscope/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for Packscope.

"Not found" is never an exception in Packscope: resolution returns ``None``
(or the ``"unknown"`` id) for unmatched paths. Exceptions are reserved for
malformed input that the caller must fix.
"""

from __future__ import annotations


class PackscopeError(Exception):
    """Base class for all Packscope errors."""


class DefinitionError(PackscopeError, ValueError):
    """A raw file type definition cannot be turned into a `FileTypeDefinition`."""


class InvalidFileDefinitionError(DefinitionError):
    """A definition declares neither a ``scope`` nor a ``matcher``.

    Raised by the resolution engine the moment it reaches such a definition.

    Attributes:
        file_type_id (str): Identifier of the offending definition.
    """

    def __init__(self, file_type_id: str) -> None:
        self.file_type_id = file_type_id
        super().__init__(
            f'Invalid file definition "{file_type_id}": no "scope" or "matcher" in "detect"'
        )


class ProjectConfigError(PackscopeError):
    """Project configuration is malformed or references an unknown pack category."""
