# topmark:header:start
#
#   project      : Packscope
#   file         : detect.py
#   file_relpath : src/packscope/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope `detect` command.

Resolves project paths to file type ids. Paths are project paths as the
editor sees them (e.g. ``BP/entities/zombie.json``); they do not need to exist.

Exit codes:
    * ``SUCCESS`` when every path resolved.
    * ``UNKNOWN_FILE_TYPE`` when at least one path did not.
    * ``CONFIG_ERROR`` when a file type definition is malformed.
"""

from __future__ import annotations

from typing import Any

import click

from packscope.cli.cmd_common import build_registry, get_config, get_console
from packscope.cli.errors import PackscopeConfigError
from packscope.cli.exit_codes import ExitCode
from packscope.cli.options import OutputFormat, output_format_option
from packscope.errors import InvalidFileDefinitionError, ProjectConfigError
from packscope.filetypes.model import UNKNOWN_FILE_TYPE_ID, is_json_content


@click.command(
    name="detect",
    help="Resolve the file type of one or more project paths.",
)
@click.argument("paths", nargs=-1, required=True)
@click.option(
    "--id",
    "file_type_id",
    default=None,
    help="Return the file type with this id whenever it is reached, regardless of the path.",
)
@output_format_option
def detect_command(
    *,
    paths: tuple[str, ...],
    file_type_id: str | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Resolve the file type of each path.

    Args:
        paths (tuple[str, ...]): Project paths to classify.
        file_type_id (str | None): Explicit file type id to look up.
        output_format (OutputFormat | None): Output format; defaults to text.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    registry = build_registry(get_config(ctx))

    results: list[dict[str, Any]] = []
    for raw in paths:
        path = raw.replace("\\", "/")
        try:
            file_type = registry.get(path, file_type_id)
        except (InvalidFileDefinitionError, ProjectConfigError) as exc:
            raise PackscopeConfigError(str(exc)) from exc
        results.append(
            {
                "path": path,
                "id": file_type.id if file_type is not None else UNKNOWN_FILE_TYPE_ID,
                "json": is_json_content(file_type, path),
            }
        )

    if (output_format or OutputFormat.DEFAULT) is OutputFormat.JSON:
        console.emit_json(results)
    else:
        for result in results:
            kind = "json" if result["json"] else "other"
            console.print(f"{result['path']}\t{result['id']}\t{kind}")

    if any(result["id"] == UNKNOWN_FILE_TYPE_ID for result in results):
        ctx.exit(ExitCode.UNKNOWN_FILE_TYPE)
