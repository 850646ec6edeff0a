# topmark:header:start
#
#   project      : Packscope
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Packscope test suite.

Sets up TRACE logging for test runs and provides small builders shared by
the file type tests.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

import pytest

from packscope.config import logging
from packscope.filetypes.registry import StaticFileTypeRegistry
from packscope.project import ProjectConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

    from packscope.filetypes.model import FileTypeDefinition
    from packscope.project import PathTemplater


class RecordingTemplater:
    """Templater that renders ``<pack>:<template>`` and records every call."""

    def __init__(self) -> None:
        self.calls: list[tuple[str | None, str]] = []

    def resolve_pack_path(self, pack_type: str | None, template: str) -> str:
        """Record the call and return a deterministic expansion."""
        self.calls.append((pack_type, template))
        return template if pack_type is None else f"{pack_type}:{template}"


def make_registry(
    definitions: Iterable[FileTypeDefinition | Mapping[str, Any]],
    project_config: PathTemplater | None = None,
) -> StaticFileTypeRegistry:
    """Return a registry whose built-ins are ``definitions``.

    Args:
        definitions (Iterable[FileTypeDefinition | Mapping[str, Any]]): Built-ins in
            priority order.
        project_config (PathTemplater | None): Templater; defaults to an identity
            `ProjectConfig` (empty root, no packs).

    Returns:
        StaticFileTypeRegistry: The populated registry.
    """
    registry = StaticFileTypeRegistry(project_config or ProjectConfig())
    registry.setup(definitions)
    return registry


@pytest.fixture(autouse=True)
def reset_packscope_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the env log level unset, and restore TRACE logging after CLI runs."""
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE so failing tests show every candidate the resolver tried."""
    logging.setup_logging(level=logging.TRACE_LEVEL)
