# topmark:header:start
#
#   project      : PipeConsole
#   file         : reader.py
#   file_relpath : src/pipeconsole/streams/reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console reader: standard input as a lazy sequence of pipeline objects.

Two modes are supported:

Text mode (default)
    Each pull reads one line from the standard input text stream and yields it as a
    `Line` without its terminator. A final line without terminator is yielded as-is;
    end of input (an empty read) ends the sequence.

Binary mode (``as_byte_stream=True``)
    The binary standard input is borrowed once for the whole call. Each pull fills a
    buffer of ``read_count`` bytes with whatever is available and yields the bytes
    actually read as a `ByteChunk`. Short reads do not end the sequence; only a
    zero-length read does.

Cancellation is cooperative: `ConsoleReader.stop()` sets a token that is checked
before every read. A read already blocked in the OS is not interrupted, so one more
line or chunk may be yielded after `stop()`.

I/O errors are not handled here; they propagate to the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, TextIO

import click

from pipeconsole.config.logging import get_logger
from pipeconsole.constants import DEFAULT_READ_COUNT
from pipeconsole.core.cancellation import CancellationToken
from pipeconsole.core.encoding import strip_line_terminator
from pipeconsole.core.objects import ByteChunk, Line
from pipeconsole.streams.handles import StreamHandle, open_standard_input

if TYPE_CHECKING:
    from collections.abc import Iterator

    from pipeconsole.config.logging import PipeconsoleLogger

logger: PipeconsoleLogger = get_logger(__name__)


@dataclass
class ReadSession:
    """State of one binary read: the borrowed input handle and the read buffer.

    Attributes:
        handle (StreamHandle): Handle on the input byte stream.
        capacity (int): Buffer length, i.e. the maximum chunk size.
        token (CancellationToken): Checked before every read.
        buffer (bytearray): The read buffer; contents are copied out before yielding.
    """

    handle: StreamHandle
    capacity: int
    token: CancellationToken
    buffer: bytearray = field(init=False)

    def __post_init__(self) -> None:
        self.buffer = bytearray(self.capacity)

    def chunks(self) -> Iterator[ByteChunk]:
        """Yield chunks until end of input or cancellation."""
        view = memoryview(self.buffer)
        while not self.token.cancelled:
            n: int = self.handle.read_into(view)
            if n == 0:
                logger.debug("End of input on %s", self.handle.name)
                return
            logger.trace("Read %d/%d bytes from %s", n, self.capacity, self.handle.name)
            yield ByteChunk(bytes(view[:n]))
        logger.debug("Binary read on %s cancelled", self.handle.name)


class ConsoleReader:
    """Read standard input as lines or byte chunks.

    Args:
        read_count (int): Buffer length for binary mode; must be positive.
        as_byte_stream (bool): If True, read raw bytes instead of lines.
        stdin (TextIO | None): Text stream for text mode. Defaults to the process's
            standard input (resolved when reading starts).
        open_input (Callable[[], StreamHandle] | None): Factory returning the handle
            used in binary mode. Defaults to borrowing the process's binary stdin.
        token (CancellationToken | None): Cancellation token; a new one is created
            when omitted.

    Raises:
        ValueError: If ``read_count`` is not a positive integer.
    """

    def __init__(
        self,
        *,
        read_count: int = DEFAULT_READ_COUNT,
        as_byte_stream: bool = False,
        stdin: TextIO | None = None,
        open_input: Callable[[], StreamHandle] | None = None,
        token: CancellationToken | None = None,
    ) -> None:
        if isinstance(read_count, bool) or not isinstance(read_count, int) or read_count <= 0:
            raise ValueError(f"read_count must be a positive integer, got {read_count!r}")
        self.read_count = read_count
        self.as_byte_stream = as_byte_stream
        self._stdin = stdin
        self._open_input = open_input or open_standard_input
        self.token = token or CancellationToken()

    def stop(self) -> None:
        """Request cancellation (host stop hook); takes effect before the next read."""
        self.token.cancel()

    @property
    def cancelled(self) -> bool:
        """Return True once `stop()` has been called."""
        return self.token.cancelled

    def process(self) -> Iterator[Line | ByteChunk]:
        """Return the lazy sequence of objects read from standard input."""
        if self.as_byte_stream:
            return self._read_bytes()
        return self._read_lines()

    def __iter__(self) -> Iterator[Line | ByteChunk]:
        """Same as `process()`."""
        return self.process()

    def _read_lines(self) -> Iterator[Line]:
        stream: TextIO = self._stdin or click.get_text_stream("stdin")
        logger.debug("Reading lines from %s", getattr(stream, "name", "<stdin>"))
        while not self.token.cancelled:
            raw: str = stream.readline()
            if raw == "":
                logger.debug("End of input")
                return
            yield Line(strip_line_terminator(raw))

    def _read_bytes(self) -> Iterator[ByteChunk]:
        # The handle is released when the generator finishes, is cancelled, raises,
        # or is closed early by the consumer.
        with self._open_input() as handle:
            logger.debug("Reading %d-byte chunks from %s", self.read_count, handle.name)
            session = ReadSession(handle=handle, capacity=self.read_count, token=self.token)
            yield from session.chunks()
