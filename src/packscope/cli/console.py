# topmark:header:start
#
#   project      : Packscope
#   file         : console.py
#   file_relpath : src/packscope/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""User-facing output for the Packscope CLI.

Command results (detected ids, guessed folders, listings) go through the
console; diagnostics go through `logging`. Machine-readable output is
emitted with `ConsoleLike.emit_json` so every command renders JSON the same
way.
"""

from __future__ import annotations

import json
import sys
from typing import Any, Protocol, TextIO

import click


class ConsoleLike(Protocol):
    """What commands need from a console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a result line to stdout."""
        ...

    def emit_json(self, payload: Any) -> None:
        """Write ``payload`` as one JSON document to stdout."""
        ...

    def warn(self, text: str) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled for the terminal (unchanged without color)."""
        ...


class ClickConsole:
    """`ConsoleLike` writing through `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styling. Disabled by ``--no-color``.
        stdout (TextIO | None): Result stream; `sys.stdout` when None.
        stderr (TextIO | None): Warning and error stream; `sys.stderr` when None.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self._stdout, color=self.enable_color)

    def emit_json(self, payload: Any) -> None:
        # JSON is never colored so it can be piped into other tools
        click.echo(json.dumps(payload, indent=2), file=self._stdout, color=False)

    def warn(self, text: str) -> None:
        self._diagnostic(text, fg="yellow")

    def error(self, text: str) -> None:
        self._diagnostic(text, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        return click.style(text, **style_kwargs) if self.enable_color else text

    def _diagnostic(self, text: str, *, fg: str) -> None:
        click.echo(self.styled(text, fg=fg), file=self._stderr, color=self.enable_color)
