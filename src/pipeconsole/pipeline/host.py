# topmark:header:start
#
#   project      : PipeConsole
#   file         : host.py
#   file_relpath : src/pipeconsole/pipeline/host.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal pipeline host driving the console reader and writer.

The reader and writer never talk to each other; the host pulls objects from a
source, passes them through optional stages and delivers them one at a time to the
writer, calling the writer's lifecycle hooks around the run. It also wires the
process's interrupt signal to the reader's stop hook.
"""

from __future__ import annotations

import signal
import threading
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Callable

from pipeconsole.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence
    from types import FrameType

    from pipeconsole.config.logging import PipeconsoleLogger
    from pipeconsole.streams.reader import ConsoleReader
    from pipeconsole.streams.writer import ConsoleWriter

logger: PipeconsoleLogger = get_logger(__name__)

# A stage maps one pipeline value to zero or more values.
Stage = Callable[[Any], "Iterable[Any]"]


def _apply_stages(source: Iterable[Any], stages: Sequence[Stage]) -> Iterator[Any]:
    for value in source:
        values: Iterable[Any] = (value,)
        for stage in stages:
            values = [out for v in values for out in stage(v)]
        yield from values


def run_pipeline(
    source: Iterable[Any],
    writer: ConsoleWriter,
    *,
    stages: Sequence[Stage] = (),
) -> int:
    """Deliver every value from ``source`` to ``writer``.

    ``writer.begin()`` is called before the first value and ``writer.end()`` after the
    last one, also when the source or a stage raises. Generator sources are closed
    on exit so that the resources they hold are released.

    Args:
        source (Iterable[Any]): The upstream values (e.g. a `ConsoleReader`).
        writer (ConsoleWriter): The sink.
        stages (Sequence[Stage]): Transformations applied, in order, to each value.

    Returns:
        int: The number of values delivered to the writer.
    """
    delivered = 0
    upstream: Iterator[Any] = iter(source)
    values = _apply_stages(upstream, stages)
    writer.begin()
    try:
        for value in values:
            writer.process(value)
            delivered += 1
    finally:
        try:
            values.close()
            close = getattr(upstream, "close", None)
            if close is not None:
                close()
        finally:
            writer.end()
    logger.debug("Pipeline delivered %d object(s)", delivered)
    return delivered


@contextmanager
def cancel_on_interrupt(reader: ConsoleReader) -> Iterator[None]:
    """Route the first SIGINT to ``reader.stop()`` while the block runs.

    The first interrupt only requests cooperative cancellation and restores the
    previous handler, so a second interrupt behaves as usual (KeyboardInterrupt).
    Outside the main thread, signals cannot be rerouted and the block runs unchanged.
    """
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    previous = signal.getsignal(signal.SIGINT)
    if previous is None:  # installed outside Python
        previous = signal.SIG_DFL

    def _handler(signum: int, frame: FrameType | None) -> None:
        logger.info("Interrupt received; stopping after the current read")
        reader.stop()
        signal.signal(signal.SIGINT, previous)

    signal.signal(signal.SIGINT, _handler)
    try:
        yield
    finally:
        signal.signal(signal.SIGINT, previous)
