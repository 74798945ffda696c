# topmark:header:start
#
#   project      : PipeConsole
#   file         : logging.py
#   file_relpath : src/pipeconsole/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Logging for PipeConsole: a TRACE level below DEBUG and a colored stderr handler.

Log records always go to standard error. Standard output is the data channel of the
relay and only ever carries pipeline output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, TextIO, cast

from yachalk import chalk

from pipeconsole.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class PipeconsoleLogger(logging.Logger):
    """Logger with a `trace` method for per-read and per-write detail."""

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
logging.setLoggerClass(PipeconsoleLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Accepts the logging names plus the diagnostic stream names they map onto.
LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "VERBOSE": logging.DEBUG,
    "INFO": logging.INFO,
    "INFORMATION": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Checked top-down; the first threshold at or below the record level wins.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity, unless color is disabled.

    Args:
        fmt (str): The `logging` format string.
        color (bool): If False, records are formatted without escape sequences.
    """

    def __init__(self, fmt: str, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and color it by level."""
        message = super().format(record)
        if not self.color:
            return message
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by PIPECONSOLE_LOG_LEVEL, or None if unset or unknown.

    Accepts level names in any case (``trace``, ``verbose``, ``warning``) and numbers.
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return LEVEL_NAMES.get(v)


def setup_logging(
    level: int | None = None,
    *,
    color: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Install a single colored handler on the root logger.

    Args:
        level (int | None): Root level; falls back to `resolve_env_log_level`, then
            to CRITICAL so that a plain relay logs nothing.
        color (bool): Color records by level.
        stream (TextIO | None): Target stream; defaults to the current ``sys.stderr``.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT, color=color)
    )
    root_logger.addHandler(handler)


def get_logger(name: str) -> PipeconsoleLogger:
    """Return the `PipeconsoleLogger` named ``name``."""
    return cast("PipeconsoleLogger", logging.getLogger(name))
