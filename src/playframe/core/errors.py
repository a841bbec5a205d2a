# topmark:header:start
#
#   project      : PlayFrame
#   file         : errors.py
#   file_relpath : src/playframe/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Library-level exceptions for PlayFrame.

The analysis, injection and protocol layers are total and never raise for bad
markup or bad messages. Exceptions are reserved for the edges where PlayFrame
reads something from the outside world: configuration files and game inputs.
Frontends (the CLI) translate these into their own error types and exit codes.
"""

from __future__ import annotations


class PlayframeError(Exception):
    """Base class for all PlayFrame library errors."""


class ConfigError(PlayframeError):
    """Raised when a configuration source is unreadable, unparsable or ill-typed."""


class GameDataError(PlayframeError):
    """Raised when a game input cannot be read or does not carry an HTML document."""
