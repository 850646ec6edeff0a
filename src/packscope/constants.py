# topmark:header:start
#
#   project      : Packscope
#   file         : constants.py
#   file_relpath : src/packscope/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    PACKSCOPE_VERSION: str = get_version("packscope")
except PackageNotFoundError:
    PACKSCOPE_VERSION = "0.0.0+unknown"
