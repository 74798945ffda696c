# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/streams/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console reader and writer.

[`ConsoleReader`][pipeconsole.streams.reader.ConsoleReader] turns standard input into
pipeline objects; [`ConsoleWriter`][pipeconsole.streams.writer.ConsoleWriter] renders
pipeline objects onto standard output and standard error.
"""

from __future__ import annotations

from pipeconsole.streams.handles import StreamHandle, open_standard_input, open_standard_output
from pipeconsole.streams.reader import ConsoleReader, ReadSession
from pipeconsole.streams.writer import ConsoleWriter, WriteSession

__all__ = [
    "ConsoleReader",
    "ConsoleWriter",
    "ReadSession",
    "StreamHandle",
    "WriteSession",
    "open_standard_input",
    "open_standard_output",
]
