# topmark:header:start
#
#   project      : PipeConsole
#   file         : model.py
#   file_relpath : src/pipeconsole/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic records and helpers for PipeConsole.

Diagnostic records are the pipeline objects that never travel on standard output:
the console writer renders them and routes them to standard error. They are also
used internally to collect configuration problems before they are reported.

Sections:
    * DiagnosticLevel: the five diagnostic streams (error, warning, verbose,
      debug, information).
    * DiagnosticRecord: immutable structured diagnostic payload.
    * Conversions from Python's own diagnostic carriers (exceptions, log records,
      captured warnings).
    * DiagnosticLog: mutable collection with helpers for adding diagnostics.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from pipeconsole.config.logging import TRACE_LEVEL, get_logger

if TYPE_CHECKING:
    import warnings
    from collections.abc import Iterable, Iterator

    from pipeconsole.config.logging import PipeconsoleLogger


logger: PipeconsoleLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """Diagnostic streams, ordered from most to least severe."""

    ERROR = "error"
    WARNING = "warning"
    INFORMATION = "information"
    VERBOSE = "verbose"
    DEBUG = "debug"

    @classmethod
    def from_log_level(cls, levelno: int) -> DiagnosticLevel:
        """Map a `logging` level number to a diagnostic level.

        ``ERROR`` and above map to `ERROR`, ``WARNING`` to `WARNING`, ``INFO`` to
        `INFORMATION`, ``DEBUG`` to `VERBOSE` and anything below (``TRACE``) to `DEBUG`.
        """
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFORMATION
        if levelno > TRACE_LEVEL:
            return cls.VERBOSE
        return cls.DEBUG


@dataclass(frozen=True)
class DiagnosticRecord:
    """Structured diagnostic payload destined for the error stream.

    Attributes:
        level (DiagnosticLevel): The diagnostic stream this record belongs to.
        message (object): The payload. Usually a string; any other object is
            rendered through ``str()``.
        exception (BaseException | None): The exception an error record was built from.
        source (str | None): Optional origin of the record (logger name, module, file).
        tags (tuple[str, ...]): Optional free-form tags.
    """

    level: DiagnosticLevel
    message: object
    exception: BaseException | None = None
    source: str | None = None
    tags: tuple[str, ...] = ()

    def render(self) -> str:
        """Return the human-readable form written to the error stream.

        Records without a message fall back to the exception text, then to the
        exception type name.
        """
        if self.message is not None and self.message != "":
            return str(self.message)
        if self.exception is not None:
            return str(self.exception) or type(self.exception).__name__
        return ""

    def __str__(self) -> str:
        """Return the rendered record."""
        return self.render()

    # --- Convenience constructors ---

    @classmethod
    def error(cls, message: object, *, exception: BaseException | None = None) -> DiagnosticRecord:
        """Build an error record."""
        return cls(DiagnosticLevel.ERROR, message, exception=exception)

    @classmethod
    def warning(cls, message: object) -> DiagnosticRecord:
        """Build a warning record."""
        return cls(DiagnosticLevel.WARNING, message)

    @classmethod
    def information(cls, message: object, *, tags: Iterable[str] = ()) -> DiagnosticRecord:
        """Build an information record."""
        return cls(DiagnosticLevel.INFORMATION, message, tags=tuple(tags))

    @classmethod
    def verbose(cls, message: object) -> DiagnosticRecord:
        """Build a verbose record."""
        return cls(DiagnosticLevel.VERBOSE, message)

    @classmethod
    def debug(cls, message: object) -> DiagnosticRecord:
        """Build a debug record."""
        return cls(DiagnosticLevel.DEBUG, message)


def record_from_exception(exc: BaseException) -> DiagnosticRecord:
    """Wrap an exception into an error record rendering as ``str(exc)``."""
    return DiagnosticRecord(
        DiagnosticLevel.ERROR,
        str(exc),
        exception=exc,
        source=type(exc).__name__,
    )


def record_from_log_record(record: logging.LogRecord) -> DiagnosticRecord:
    """Convert a `logging.LogRecord` into a diagnostic record.

    The message is the fully interpolated ``record.getMessage()``; the record's
    exception (if any) is carried along but not rendered.
    """
    exc: BaseException | None = record.exc_info[1] if record.exc_info else None
    return DiagnosticRecord(
        DiagnosticLevel.from_log_level(record.levelno),
        record.getMessage(),
        exception=exc,
        source=record.name,
    )


def record_from_warning(captured: warnings.WarningMessage) -> DiagnosticRecord:
    """Convert a warning captured by `warnings.catch_warnings(record=True)`."""
    return DiagnosticRecord(
        DiagnosticLevel.WARNING,
        str(captured.message),
        source=f"{captured.filename}:{captured.lineno}",
        tags=(captured.category.__name__,),
    )


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics gathered while building a configuration."""

    items: list[DiagnosticRecord] = field(default_factory=lambda: [])

    def _add(self, diagnostic: DiagnosticRecord) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)

    def add_error(self, message: str) -> None:
        """Add an ``error`` diagnostic to the log.

        Args:
            message: The diagnostic message.
        """
        self._add(DiagnosticRecord.error(message))

    def add_warning(self, message: str) -> None:
        """Add a ``warning`` diagnostic to the log.

        Args:
            message: The diagnostic message.
        """
        self._add(DiagnosticRecord.warning(message))

    def add_information(self, message: str) -> None:
        """Add an ``information`` diagnostic to the log.

        Args:
            message: The diagnostic message.
        """
        self._add(DiagnosticRecord.information(message))

    def extend(self, diagnostics: Iterable[DiagnosticRecord]) -> None:
        """Append diagnostics from another log or snapshot, in order."""
        for d in diagnostics:
            self._add(d)

    def has_error(self) -> bool:
        """Return True if the log contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def freeze(self) -> tuple[DiagnosticRecord, ...]:
        """Return an immutable snapshot of this log's diagnostics."""
        return tuple(self.items)

    def __iter__(self) -> Iterator[DiagnosticRecord]:
        """Iterate over all diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)
