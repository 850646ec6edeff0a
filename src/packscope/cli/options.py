# topmark:header:start
#
#   project      : Packscope
#   file         : options.py
#   file_relpath : src/packscope/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared Click options and parameter types for Packscope commands."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Generic, TypeVar

import click

from packscope.cli.errors import PackscopeUsageError

E = TypeVar("E", bound=Enum)
F = TypeVar("F", bound=Callable[..., Any])


class OutputFormat(str, Enum):
    """Output formats supported by listing commands.

    Attributes:
        DEFAULT: Human-readable text.
        JSON: A single JSON document.
    """

    DEFAULT = "default"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Case-insensitive choice parameter yielding members of ``enum_cls``.

    Args:
        enum_cls (type[E]): Enum whose values are the accepted strings.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self._members: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Return the member for ``value``, failing the parameter otherwise."""
        if isinstance(value, self.enum_cls):
            return value
        member = self._members.get(str(value).lower())
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self._members)}",
                param,
                ctx,
            )
        return member


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v``/``-q`` counts.

    Returns:
        int: Positive for ``-v``, negative for ``-q``, 0 by default.

    Raises:
        PackscopeUsageError: If both flags are given.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise PackscopeUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count - quiet_count


def common_verbose_options(f: F) -> F:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def output_format_option(f: F) -> F:
    """Add the ``--format`` option to a command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
