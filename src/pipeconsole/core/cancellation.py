# topmark:header:start
#
#   project      : PipeConsole
#   file         : cancellation.py
#   file_relpath : src/pipeconsole/core/cancellation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Cooperative cancellation for blocking console reads.

A `CancellationToken` is a single settable flag. The host sets it from its
stop hook (a signal handler, another thread, a test); the reader checks it
before starting each blocking read. A read that is already in flight is never
interrupted, so one more line or chunk may still be delivered after `cancel()`.
"""

from __future__ import annotations

from threading import Event

from pipeconsole.config.logging import get_logger

logger = get_logger(__name__)


class CancellationToken:
    """Settable, thread-safe cancellation flag."""

    __slots__ = ("_event",)

    def __init__(self) -> None:
        self._event = Event()

    def cancel(self) -> None:
        """Request cancellation; idempotent."""
        if not self._event.is_set():
            logger.debug("Cancellation requested")
        self._event.set()

    @property
    def cancelled(self) -> bool:
        """Return True once `cancel()` has been called."""
        return self._event.is_set()

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"CancellationToken(cancelled={self.cancelled})"
