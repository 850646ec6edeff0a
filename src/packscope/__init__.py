# topmark:header:start
#
#   project      : Packscope
#   file         : __init__.py
#   file_relpath : src/packscope/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Packscope package.

Packscope classifies the files of add-on projects (behavior packs, resource
packs, ...) into declared file types, and guesses where unplaced files belong.
It exposes a small typed API (`packscope.filetypes`) and a CLI.
"""

from __future__ import annotations
