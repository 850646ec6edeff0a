# topmark:header:start
#
#   project      : Packscope
#   file         : filetypes.py
#   file_relpath : src/packscope/cli/commands/filetypes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope `filetypes` command.

Lists the registered file types in match priority order. Useful to see which
definition will win for a path, and which ones installed plugins contribute.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from packscope.cli.cmd_common import (
    build_registry,
    get_config,
    get_console,
    get_effective_verbosity,
)
from packscope.cli.options import OutputFormat, output_format_option
from packscope.filetypes.loaders import load_entry_point_file_types

if TYPE_CHECKING:
    from packscope.cli.console import ConsoleLike
    from packscope.filetypes.model import FileTypeDefinition


def _print_details(console: ConsoleLike, ft: FileTypeDefinition) -> None:
    detect = ft.detect
    console.print(f"      kind           : {ft.kind.value}")
    if detect.pack_types:
        console.print(f"      pack types     : {', '.join(detect.pack_types)}")
    if detect.scope:
        console.print(f"      scope          : {', '.join(detect.scope)}")
    if detect.matcher:
        console.print(f"      matcher        : {', '.join(detect.matcher)}")
    if detect.file_extensions is not None:
        console.print(f"      extensions     : {', '.join(detect.file_extensions)}")
    if ft.meta.language:
        console.print(f"      language       : {ft.meta.language}")


@click.command(
    name="filetypes",
    help="List registered file types in priority order.",
)
@output_format_option
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show extended information (kind, pack types, scope, matcher, extensions).",
)
@click.option(
    "--plugins",
    "show_plugins",
    is_flag=True,
    help="Also list file types contributed by installed plugins.",
)
def filetypes_command(
    *,
    show_details: bool = False,
    show_plugins: bool = False,
    output_format: OutputFormat | None = None,
) -> None:
    """List registered file types.

    Args:
        show_details (bool): Show the detection rules of each file type.
        show_plugins (bool): Include plugin file types (listed after the built-ins).
        output_format (OutputFormat | None): Output format; defaults to text.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    registry = build_registry(get_config(ctx))
    if show_plugins:
        load_entry_point_file_types(registry)

    builtins = list(registry.file_types)
    plugins = registry.get_plugin_file_types() if show_plugins else []

    if (output_format or OutputFormat.DEFAULT) is OutputFormat.JSON:
        payload: dict[str, Any] = {
            "filetypes": [
                ft.to_dict() if show_details else {"id": ft.id} for ft in builtins
            ],
        }
        if show_plugins:
            payload["plugins"] = [ft.to_dict() if show_details else {"id": ft.id} for ft in plugins]
        console.emit_json(payload)
        return

    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Registered file types:\n", bold=True, underline=True))

    num_width = len(str(max(len(builtins), 1)))
    for idx, ft in enumerate(builtins, start=1):
        console.print(f"{idx:>{num_width}}. {ft.id}")
        if show_details:
            _print_details(console, ft)

    if plugins:
        console.print()
        console.print(console.styled("Plugin file types:", bold=True))
        for ft in plugins:
            console.print(f"   - {ft.id}")
            if show_details:
                _print_details(console, ft)
