# topmark:header:start
#
#   project      : Packscope
#   file         : lenient.py
#   file_relpath : src/packscope/filetypes/lenient.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lenient JSON parsing (comments, trailing commas, unquoted keys) via `json5`."""

from __future__ import annotations

from typing import Any

import json5


def parse_lenient_json(text: str) -> Any:
    """Parse ``text`` as JSON5.

    Args:
        text (str): Document text.

    Returns:
        Any: The parsed value.

    Raises:
        ValueError: If the text is not valid JSON5 or nests too deeply to parse.
    """
    try:
        return json5.loads(text)
    except RecursionError as exc:
        # json5 parses recursively; deep nesting exhausts the interpreter stack
        raise ValueError("Document is nested too deeply to parse") from exc
