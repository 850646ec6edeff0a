# topmark:header:start
#
#   project      : Packscope
#   file         : __init__.py
#   file_relpath : src/packscope/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope command line interface (Click)."""

from __future__ import annotations
