# topmark:header:start
#
#   project      : PipeConsole
#   file         : handles.py
#   file_relpath : src/pipeconsole/streams/handles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scoped handles on the process's binary standard streams.

A `StreamHandle` wraps a binary stream for the duration of one read or write
session and is released exactly once, on every exit path (use it as a context
manager). Handles on the process streams *borrow* them: releasing such a handle
flushes pending output and drops the reference but never closes the underlying
file descriptor, which other I/O paths of the process keep using. Handles created
over private streams (tests, in-memory buffers) may *own* them and close them on
release.

The process streams are obtained through Click (`click.get_binary_stream`) so that
`click.testing.CliRunner` can redirect them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO

import click

from pipeconsole.config.logging import get_logger

if TYPE_CHECKING:
    from types import TracebackType

    from pipeconsole.config.logging import PipeconsoleLogger

logger: PipeconsoleLogger = get_logger(__name__)


class StreamHandle:
    """Releasable handle on a binary stream.

    Args:
        stream (BinaryIO): The underlying binary stream.
        name (str): Label used in log messages and errors.
        owned (bool): If True, releasing the handle closes ``stream``; otherwise the
            stream is only flushed (when writable).
    """

    def __init__(self, stream: BinaryIO, *, name: str = "<stream>", owned: bool = False) -> None:
        self._stream: BinaryIO | None = stream
        self.name = name
        self.owned = owned
        logger.trace("Opened handle on %s (owned=%s)", name, owned)

    @property
    def closed(self) -> bool:
        """Return True once the handle has been released."""
        return self._stream is None

    def _require(self) -> BinaryIO:
        if self._stream is None:
            raise ValueError(f"I/O operation on released handle {self.name}")
        return self._stream

    def read_into(self, buffer: bytearray | memoryview) -> int:
        """Perform one read of up to ``len(buffer)`` bytes; block until some are available.

        Buffered streams are read through their unbuffered ``raw`` stream, so each call
        is a single OS read: a regular file fills the whole buffer, while a pipe or
        terminal returns whatever is available without waiting for more.

        Returns:
            int: The number of bytes read; 0 at end of input.
        """
        stream = self._require()
        raw = getattr(stream, "raw", None)
        n = raw.readinto(buffer) if raw is not None else stream.readinto(buffer)
        return n or 0

    def write(self, data: bytes) -> None:
        """Write ``data`` verbatim."""
        self._require().write(data)

    def flush(self) -> None:
        """Flush pending output to the underlying stream."""
        self._require().flush()

    def release(self) -> None:
        """Release the handle; idempotent.

        Writable streams are flushed first. Owned streams are then closed.
        """
        stream = self._stream
        if stream is None:
            return
        self._stream = None
        try:
            if stream.writable() and not stream.closed:
                stream.flush()
        finally:
            if self.owned:
                stream.close()
            logger.trace("Released handle on %s", self.name)

    def __enter__(self) -> StreamHandle:
        """Return the handle itself."""
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Release the handle."""
        self.release()

    def __repr__(self) -> str:
        """Return a string representation."""
        state = "released" if self.closed else "open"
        return f"StreamHandle({self.name}, {state}, owned={self.owned})"


def open_standard_input() -> StreamHandle:
    """Borrow the process's binary standard input."""
    return StreamHandle(click.get_binary_stream("stdin"), name="<stdin>")


def open_standard_output() -> StreamHandle:
    """Borrow the process's binary standard output."""
    return StreamHandle(click.get_binary_stream("stdout"), name="<stdout>")
