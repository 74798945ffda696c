# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public PipeConsole API (stable surface).

This module exposes a **small, typed API** for integrations that want to read
from or write to the standard streams programmatically without going through
the CLI. Internal modules remain private.

Versioning policy
-----------------
- The **signatures** in this module follow semver.
- Adding optional parameters with defaults is allowed in minor releases.
- Removing/renaming anything here is a breaking change (major release).

Example:
```python
from pipeconsole import api
from pipeconsole.core import Text

for obj in api.read_console(as_byte_stream=True, read_count=1024):
    ...

api.write_console([Text("hello"), b"\\x1b[0m"], no_newline=True)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pipeconsole.config.logging import get_logger
from pipeconsole.constants import DEFAULT_READ_COUNT, PIPECONSOLE_VERSION
from pipeconsole.pipeline.host import run_pipeline
from pipeconsole.streams.reader import ConsoleReader
from pipeconsole.streams.writer import ConsoleWriter

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from pipeconsole.cli_shared.console_api import ConsoleLike
    from pipeconsole.core.cancellation import CancellationToken
    from pipeconsole.core.objects import ByteChunk, Line

__all__ = [
    "get_version",
    "read_console",
    "write_console",
]

logger = get_logger(__name__)


def get_version() -> str:
    """Return the installed PipeConsole version."""
    return PIPECONSOLE_VERSION


def read_console(
    *,
    read_count: int = DEFAULT_READ_COUNT,
    as_byte_stream: bool = False,
    token: CancellationToken | None = None,
) -> Iterator[Line | ByteChunk]:
    """Return the lazy sequence of objects read from standard input.

    Args:
        read_count (int): Buffer length in binary mode.
        as_byte_stream (bool): Yield `ByteChunk` objects instead of `Line` objects.
        token (CancellationToken | None): Token to stop reading from another thread
            or a signal handler.

    Returns:
        Iterator[Line | ByteChunk]: A generator; closing it releases the input handle.

    Raises:
        ValueError: If ``read_count`` is not a positive integer.
    """
    reader = ConsoleReader(read_count=read_count, as_byte_stream=as_byte_stream, token=token)
    return reader.process()


def write_console(
    objects: Iterable[Any],
    *,
    no_newline: bool = False,
    encoding: str | None = None,
    console: ConsoleLike | None = None,
) -> int:
    """Write ``objects`` to the standard streams.

    Text values go to standard output followed by a newline (unless ``no_newline``),
    byte values are written unchanged, and diagnostic records go to standard error.

    Args:
        objects (Iterable[Any]): Pipeline objects or host values (``str``, ``bytes``,
            exceptions, ...).
        no_newline (bool): Do not terminate text values with a newline.
        encoding (str | None): Encode text with this codec onto the raw output stream.
        console (ConsoleLike | None): Console for formatted and diagnostic output.

    Returns:
        int: The number of objects written.

    Raises:
        LookupError: If ``encoding`` names an unknown codec.
        TypeError: If a value cannot be converted to a pipeline object.
    """
    writer = ConsoleWriter(no_newline=no_newline, encoding=encoding, console=console)
    count = run_pipeline(objects, writer)
    logger.debug("write_console: wrote %d object(s)", count)
    return count
