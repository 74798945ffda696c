# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core primitives shared by the console reader and writer.

- [`pipeconsole.core.objects`][]: the closed set of pipeline object variants.
- [`pipeconsole.core.encoding`][]: encoding and newline helpers.
- [`pipeconsole.core.cancellation`][]: the cooperative cancellation token.
"""

from __future__ import annotations

from pipeconsole.core.cancellation import CancellationToken
from pipeconsole.core.objects import (
    ByteChunk,
    Line,
    ObjectKind,
    PipelineObject,
    RawBytes,
    Text,
    kind_of,
    to_pipeline_object,
)

__all__ = [
    "ByteChunk",
    "CancellationToken",
    "Line",
    "ObjectKind",
    "PipelineObject",
    "RawBytes",
    "Text",
    "kind_of",
    "to_pipeline_object",
]
