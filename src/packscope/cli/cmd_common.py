# topmark:header:start
#
#   project      : Packscope
#   file         : cmd_common.py
#   file_relpath : src/packscope/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by Packscope commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from packscope.cli.errors import PackscopeConfigError
from packscope.config.logging import get_logger
from packscope.errors import DefinitionError
from packscope.filetypes.loaders import (
    BUILTIN_MODULES,
    iter_module_file_types,
    load_definition_directory,
)
from packscope.filetypes.registry import StaticFileTypeRegistry

if TYPE_CHECKING:
    from packscope.cli.console import ConsoleLike
    from packscope.config import Config
    from packscope.filetypes.model import FileTypeDefinition

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    """Return the configuration stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["config"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-v`` positive, ``-q`` negative)."""
    return int(ctx.obj.get("verbosity_level", 0))


def build_registry(config: Config) -> StaticFileTypeRegistry:
    """Build a registry with the bundled built-ins followed by configured definition files.

    Raises:
        PackscopeConfigError: If a definition file is malformed.
    """
    definitions: list[FileTypeDefinition] = list(iter_module_file_types(BUILTIN_MODULES))
    try:
        for directory in config.definition_dirs:
            definitions.extend(load_definition_directory(directory))
    except DefinitionError as exc:
        raise PackscopeConfigError(str(exc)) from exc

    registry = StaticFileTypeRegistry(config.project_config())
    registry.setup(definitions)
    logger.debug("CLI registry holds %d file types", len(definitions))
    return registry
