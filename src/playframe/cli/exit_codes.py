# topmark:header:start
#
#   project      : PlayFrame
#   file         : exit_codes.py
#   file_relpath : src/playframe/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Process exit codes of the ``playframe`` command (BSD sysexits where one fits)."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit status of a ``playframe`` invocation.

    ``FAILURE`` also reports ``analyze --strict`` finding a warning or error.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR: bad envelope, non-UTF-8 input
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
