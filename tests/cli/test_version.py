# topmark:header:start
#
#   project      : Packscope
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `packscope version` and group-level options."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from packscope.constants import PACKSCOPE_VERSION
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli_in,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_version(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == PACKSCOPE_VERSION


def test_version_json(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {"packscope_version": PACKSCOPE_VERSION}


def test_no_subcommand_prints_help(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, [])

    assert_SUCCESS(result)
    assert "Hint: use 'packscope detect" in result.output
    assert "detect" in result.output and "guess" in result.output


def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["-v", "-q", "version"])

    assert_USAGE_ERROR(result)
    assert "mutually exclusive" in result.output


def test_explicit_missing_config(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--config", "nope.toml", "version"])

    assert_CONFIG_ERROR(result)
    assert "Config file not found" in result.output
