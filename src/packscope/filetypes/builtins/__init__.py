# topmark:header:start
#
#   project      : Packscope
#   file         : __init__.py
#   file_relpath : src/packscope/filetypes/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in file type groups for Packscope.

Each submodule exports a ``FILETYPES`` list of
[`packscope.filetypes.model.FileTypeDefinition`][] instances.
`BundledFileTypeRegistry` concatenates them in the order listed in
``packscope.filetypes.loaders.BUILTIN_MODULES``; that order is the match
priority.
"""

from __future__ import annotations
