# topmark:header:start
#
#   project      : Packscope
#   file         : errors.py
#   file_relpath : src/packscope/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Packscope CLI.

Library errors (`packscope.errors`) are translated into these at the command
boundary so each failure class exits with its own code.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from packscope.cli.exit_codes import ExitCode


class PackscopeCliError(click.ClickException):
    """Base class for all Packscope CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class PackscopeUsageError(PackscopeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class PackscopeConfigError(PackscopeCliError):
    """Error for malformed configuration or file type definitions."""

    exit_code = ExitCode.CONFIG_ERROR


class PackscopeFileNotFoundError(PackscopeCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
