# topmark:header:start
#
#   project      : PlayFrame
#   file         : logging.py
#   file_relpath : src/playframe/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Internal logging for PlayFrame.

Adds a TRACE level below DEBUG, a `PlayframeLogger` exposing ``trace()``,
and a yachalk-colored formatter. Logging is silent (CRITICAL) unless
``PLAYFRAME_LOG_LEVEL`` or an explicit level says otherwise, and it writes
to stderr so that JSON written to stdout by the CLI stays parseable.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "PLAYFRAME_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class PlayframeLogger(logging.Logger):
    """Logger with a ``trace()`` method for per-message and per-rule detail."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` at TRACE level."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(PlayframeLogger)


# Highest threshold first; the first one at or below the record level wins.
_LEVEL_COLORS: tuple[tuple[int, Callable[[str], str]], ...] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and paint it by level."""
        message: str = super().format(record)
        for threshold, paint in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``PLAYFRAME_LOG_LEVEL``, or None.

    Accepts level names (case-insensitive, ``WARN`` and ``FATAL`` included)
    and plain integers. Unknown values are treated as unset.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stderr handler on the root logger.

    Args:
        level: Root level; the environment is consulted when None, and
            CRITICAL (effectively silent) is used when that is unset too.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for old in root.handlers[:]:
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)


def get_logger(name: str) -> PlayframeLogger:
    """Return the `PlayframeLogger` for `name`."""
    return cast("PlayframeLogger", logging.getLogger(name))
