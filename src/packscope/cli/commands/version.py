# topmark:header:start
#
#   project      : Packscope
#   file         : version.py
#   file_relpath : src/packscope/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope `version` command.

Prints the current Packscope version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from packscope.cli.cmd_common import get_console
from packscope.cli.options import OutputFormat, output_format_option
from packscope.constants import PACKSCOPE_VERSION


@click.command(
    name="version",
    help="Show the current version of Packscope.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Packscope.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    console = get_console(click.get_current_context())
    if (output_format or OutputFormat.DEFAULT) is OutputFormat.JSON:
        console.emit_json({"packscope_version": PACKSCOPE_VERSION})
        return
    console.print(PACKSCOPE_VERSION)
