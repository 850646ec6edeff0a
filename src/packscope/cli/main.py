# topmark:header:start
#
#   project      : Packscope
#   file         : main.py
#   file_relpath : src/packscope/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope CLI entry point.

Group-level options are initialized once and placed into ``ctx.obj``:
``console``, ``config`` and ``verbosity_level``. Subcommands read them back
through the helpers in `packscope.cli.cmd_common`.
"""

from __future__ import annotations

from pathlib import Path

import click

from packscope.cli.commands.detect import detect_command
from packscope.cli.commands.filetypes import filetypes_command
from packscope.cli.commands.guess import guess_command
from packscope.cli.commands.version import version_command
from packscope.cli.console import ClickConsole
from packscope.cli.errors import PackscopeConfigError
from packscope.cli.options import common_verbose_options, resolve_verbosity
from packscope.config import load_config
from packscope.config.logging import get_logger, resolve_env_log_level, setup_logging
from packscope.errors import ProjectConfigError

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, console, config) on the Click context.

    Raises:
        PackscopeConfigError: If the configuration cannot be loaded.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    try:
        ctx.obj["config"] = load_config(config_path)
    except ProjectConfigError as exc:
        raise PackscopeConfigError(str(exc)) from exc


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Packscope CLI",
)
@common_verbose_options
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: packscope.toml or pyproject.toml found upward).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the Packscope CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_path=config_path,
    )
    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'packscope detect [PATHS...]' to resolve file types.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(filetypes_command)

cli.add_command(detect_command)

cli.add_command(guess_command)

if __name__ == "__main__":
    cli()
