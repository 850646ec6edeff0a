# topmark:header:start
#
#   project      : Packscope
#   file         : __init__.py
#   file_relpath : src/packscope/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope configuration and logging.

Configuration layers, lowest precedence first:

1. runtime defaults (`packscope.config.io.load_defaults_dict`),
2. ``packscope.toml`` or ``[tool.packscope]`` in ``pyproject.toml``, either
   passed explicitly or discovered upward from the working directory.
"""

from __future__ import annotations

from .model import Config, load_config

__all__ = ["Config", "load_config"]
