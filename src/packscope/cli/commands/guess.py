# topmark:header:start
#
#   project      : Packscope
#   file         : guess.py
#   file_relpath : src/packscope/cli/commands/guess.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope `guess` command.

Suggests the project folder a local file belongs in, from its name and, for
JSON files, its content.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from packscope.cli.cmd_common import build_registry, get_config, get_console
from packscope.cli.errors import PackscopeFileNotFoundError
from packscope.cli.exit_codes import ExitCode
from packscope.filetypes.guess import LocalFileHandle


@click.command(
    name="guess",
    help="Guess the destination folder of a file that is not in the project yet.",
)
@click.argument(
    "file",
    type=click.Path(dir_okay=False, path_type=Path),
)
def guess_command(*, file: Path) -> None:
    """Print the guessed folder, or exit with ``UNKNOWN_FILE_TYPE`` without a guess.

    Args:
        file (Path): The file to place.

    Raises:
        PackscopeFileNotFoundError: If ``file`` does not exist.
    """
    ctx = click.get_current_context()
    if not file.is_file():
        raise PackscopeFileNotFoundError(f"File not found: {file}")

    console = get_console(ctx)
    registry = build_registry(get_config(ctx))

    folder = asyncio.run(registry.guess_folder(LocalFileHandle(file)))
    if folder is None:
        console.warn(f"No folder guess for {file.name}")
        ctx.exit(ExitCode.UNKNOWN_FILE_TYPE)
    console.print(folder)
