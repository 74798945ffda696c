# topmark:header:start
#
#   project      : PipeConsole
#   file         : writer.py
#   file_relpath : src/pipeconsole/streams/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console writer: render pipeline objects onto standard output and standard error.

The writer is driven by the host through three lifecycle hooks: `begin()` once,
`process(obj)` per pipeline object, and `end()` once (also on early termination).
Objects are dispatched on their tag:

* `RawBytes` / `ByteChunk` take the **raw path**: the binary standard output is
  borrowed on first use and written verbatim. Empty payloads are skipped.
* `Text` / `Line` take the **formatted path**: any open raw handle is released
  first (so buffered bytes reach the OS before the text layer writes to the same
  descriptor), then the text goes through the console's line primitive, encoded by
  the platform's console encoding.
* `DiagnosticRecord` is rendered and written to the error console. It never
  touches standard output and does not close the raw handle.

With an explicit ``encoding``, text values stay on the raw path instead: they are
encoded with that encoding and followed by the platform newline encoded once per
invocation. Use this when byte-exact control over the output encoding is required.

Write and rendering errors propagate to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from pipeconsole.cli_shared.console import ClickConsole
from pipeconsole.config.logging import get_logger
from pipeconsole.core.encoding import encode_text, newline_bytes, resolve_encoding
from pipeconsole.core.objects import (
    ByteChunk,
    Line,
    RawBytes,
    Text,
    to_pipeline_object,
)
from pipeconsole.diagnostic.model import DiagnosticRecord
from pipeconsole.streams.handles import StreamHandle, open_standard_output

if TYPE_CHECKING:
    from types import TracebackType

    from pipeconsole.cli_shared.console_api import ConsoleLike
    from pipeconsole.config.logging import PipeconsoleLogger

logger: PipeconsoleLogger = get_logger(__name__)


class WriteSession:
    """Output state of one writer invocation.

    Holds the lazily-borrowed raw output handle and the newline bytes cached for the
    explicit-encoding path.

    Args:
        open_output (Callable[[], StreamHandle]): Factory for the raw output handle.
        newline (bytes | None): Encoded newline appended after encoded text, or
            ``None`` when no newline is written (or text is not encoded).
    """

    def __init__(self, open_output: Callable[[], StreamHandle], newline: bytes | None) -> None:
        self._open_output = open_output
        self.newline = newline
        self.handle: StreamHandle | None = None

    def write_raw(self, data: bytes) -> None:
        """Write bytes to the raw handle, borrowing it on first use."""
        if self.handle is None:
            self.handle = self._open_output()
            logger.debug("Raw output opened on %s", self.handle.name)
        self.handle.write(data)

    def release(self) -> None:
        """Release the raw handle if one is held."""
        handle, self.handle = self.handle, None
        if handle is not None:
            handle.release()
            logger.debug("Raw output released on %s", handle.name)


class ConsoleWriter:
    """Write pipeline objects to the console.

    Args:
        no_newline (bool): If True, text values are written without a trailing
            newline and empty text values are skipped.
        encoding (str | None): Explicit encoding for text values. When set, text is
            encoded and written to the raw output stream; when ``None`` (default),
            text goes through the console using the platform encoding.
        console (ConsoleLike | None): Line-oriented console used for text and
            diagnostics. Defaults to a `ClickConsole` on the process streams.
        open_output (Callable[[], StreamHandle] | None): Factory for the raw output
            handle. Defaults to borrowing the process's binary stdout.

    Raises:
        LookupError: If ``encoding`` names an unknown codec.
    """

    def __init__(
        self,
        *,
        no_newline: bool = False,
        encoding: str | None = None,
        console: ConsoleLike | None = None,
        open_output: Callable[[], StreamHandle] | None = None,
    ) -> None:
        self.no_newline = no_newline
        self.encoding: str | None = resolve_encoding(encoding) if encoding else None
        self._console = console
        self._open_output = open_output or open_standard_output
        self._session: WriteSession | None = None

    # --- Lifecycle ---

    def begin(self) -> None:
        """Start an invocation: set up the write session."""
        if self._session is not None:
            raise RuntimeError("ConsoleWriter.begin() called twice without end()")
        newline: bytes | None = None
        if self.encoding is not None and not self.no_newline:
            newline = newline_bytes(self.encoding)
        self._session = WriteSession(self._open_output, newline)
        logger.trace(
            "Writer started (no_newline=%s, encoding=%s)", self.no_newline, self.encoding
        )

    def end(self) -> None:
        """Finish the invocation: release whatever handle is still open; idempotent."""
        session, self._session = self._session, None
        if session is not None:
            session.release()
            logger.trace("Writer finished")

    def __enter__(self) -> ConsoleWriter:
        """Call `begin()` and return the writer."""
        self.begin()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Call `end()`."""
        self.end()

    # --- Processing ---

    @property
    def session(self) -> WriteSession:
        """Return the active write session."""
        if self._session is None:
            raise RuntimeError("ConsoleWriter.process() called outside begin()/end()")
        return self._session

    @property
    def console(self) -> ConsoleLike:
        """Return the console used for formatted and diagnostic output."""
        if self._console is None:
            self._console = ClickConsole()
        return self._console

    def process(self, value: object) -> None:
        """Write one pipeline value.

        Args:
            value (object): A pipeline object, or a host value accepted by
                `to_pipeline_object`. ``None`` is ignored.
        """
        obj = to_pipeline_object(value)
        if obj is None:
            return
        if isinstance(obj, (RawBytes, ByteChunk)):
            self._write_bytes(obj.data)
        elif isinstance(obj, (Text, Line)):
            self._write_text(obj.text)
        elif isinstance(obj, DiagnosticRecord):
            self._write_diagnostic(obj)
        else:  # pragma: no cover - the union is closed
            raise TypeError(f"Unhandled pipeline object: {obj!r}")

    def _write_bytes(self, data: bytes) -> None:
        if not data:
            return
        self.session.write_raw(data)

    def _write_text(self, text: str) -> None:
        session = self.session
        if self.encoding is not None:
            if text:
                session.write_raw(encode_text(text, self.encoding))
            if session.newline is not None:
                session.write_raw(session.newline)
            return

        # Flush and drop raw output before the text layer writes to the same stream.
        session.release()
        if self.no_newline:
            if text:
                self.console.print(text, nl=False)
        else:
            self.console.print(text)

    def _write_diagnostic(self, record: DiagnosticRecord) -> None:
        self.console.error(record.render())
