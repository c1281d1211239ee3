# topmark:header:start
#
#   project      : AssignMark
#   file         : exit_codes.py
#   file_relpath : src/assignmark/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the AssignMark CLI.

AssignMark aligns with the BSD `sysexits` convention so that other tooling
(Makefiles, CI jobs, course build scripts) can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the AssignMark CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error, including an input document
            without the ``-main.Rmd`` suffix. Mirrors BSD ``EX_USAGE (64)``.
        MALFORMED_DOCUMENT: A tagged chunk is not closed by a fence line.
            Mirrors BSD ``EX_DATAERR (65)``.
        ENCODING_ERROR: The document is not valid UTF-8. Shares ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input document or bundled example does not exist.
            Mirrors BSD ``EX_NOINPUT (66)``.
        RENDER_UNAVAILABLE: The external renderer is missing or failed.
            Mirrors BSD ``EX_UNAVAILABLE (69)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Configuration error (missing/invalid/malformed config).
            Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    MALFORMED_DOCUMENT = 65  # EX_DATAERR
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    RENDER_UNAVAILABLE = 69  # EX_UNAVAILABLE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
