# topmark:header:start
#
#   project      : Packscope
#   file         : __main__.py
#   file_relpath : src/packscope/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Packscope via ``python -m packscope``.

Examples:
    Resolve the file type of a project path::

        python -m packscope detect BP/entities/zombie.json
"""

from __future__ import annotations

from packscope.cli.main import cli

if __name__ == "__main__":
    cli()
