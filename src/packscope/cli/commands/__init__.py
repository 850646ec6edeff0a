# topmark:header:start
#
#   project      : Packscope
#   file         : __init__.py
#   file_relpath : src/packscope/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope CLI subcommands."""

from __future__ import annotations
