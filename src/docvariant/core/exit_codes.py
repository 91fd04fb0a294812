# topmark:header:start
#
#   project      : DocVariant
#   file         : exit_codes.py
#   file_relpath : src/docvariant/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 DocVariant contributors
#
# topmark:header:end

"""Exit codes for the DocVariant CLI.

DocVariant aligns with the BSD `sysexits` convention so that build scripts can
tell a broken source tree (data error) from a missing file or a bad config.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DocVariant CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: A source document is malformed (directive, table or encoding problems).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: A referenced file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
