# topmark:header:start
#
#   project      : Packscope
#   file         : exit_codes.py
#   file_relpath : src/packscope/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Packscope CLI.

Packscope aligns with the BSD `sysexits` convention where practical, so other
tooling can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Packscope CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure.
        USAGE_ERROR: Invalid flags or arguments. Mirrors BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNKNOWN_FILE_TYPE: A path matched no file type, or no folder could be
            guessed. Mirrors BSD ``EX_UNAVAILABLE (69)``.
        CONFIG_ERROR: Malformed configuration or file type definition. Mirrors
            BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNKNOWN_FILE_TYPE = 69  # EX_UNAVAILABLE
    CONFIG_ERROR = 78  # EX_CONFIG
