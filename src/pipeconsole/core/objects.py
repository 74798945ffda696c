# topmark:header:start
#
#   project      : PipeConsole
#   file         : objects.py
#   file_relpath : src/pipeconsole/core/objects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline objects exchanged between the console reader, user stages and the writer.

A pipeline object is a closed, tagged value: exactly one of

* `Line`: a line of text read from standard input, without its terminator;
* `ByteChunk`: a chunk of at most *read count* bytes read from standard input;
* `RawBytes`: an explicit binary payload produced upstream;
* `Text`: a string (or character sequence) produced upstream;
* `DiagnosticRecord`: an error, warning, information, verbose or debug payload.

All variants are immutable. Arbitrary host values are normalized with
`to_pipeline_object`, which is the only place where open-ended type inspection
happens; everything downstream matches on the closed `PipelineObject` union.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Union

from pipeconsole.diagnostic.model import (
    DiagnosticRecord,
    record_from_exception,
    record_from_log_record,
    record_from_warning,
)


class ObjectKind(str, Enum):
    """Tag naming the active variant of a pipeline object."""

    LINE = "line"
    BYTE_CHUNK = "byte-chunk"
    RAW_BYTES = "raw-bytes"
    TEXT = "text"
    DIAGNOSTIC = "diagnostic"


@dataclass(frozen=True, slots=True)
class Line:
    """One line of text read from standard input (no trailing terminator)."""

    text: str

    kind = ObjectKind.LINE


@dataclass(frozen=True, slots=True)
class ByteChunk:
    """A chunk of bytes read from standard input.

    Never empty: a zero-length read ends the stream instead of producing a chunk.
    """

    data: bytes

    kind = ObjectKind.BYTE_CHUNK

    def __len__(self) -> int:
        """Return the number of bytes in the chunk."""
        return len(self.data)


@dataclass(frozen=True, slots=True)
class RawBytes:
    """An explicit binary payload to be written verbatim."""

    data: bytes

    kind = ObjectKind.RAW_BYTES

    def __len__(self) -> int:
        """Return the number of bytes in the payload."""
        return len(self.data)


@dataclass(frozen=True, slots=True)
class Text:
    """A text value to be written through the console."""

    text: str

    kind = ObjectKind.TEXT


PipelineObject = Union[Line, ByteChunk, RawBytes, Text, DiagnosticRecord]


def kind_of(obj: PipelineObject) -> ObjectKind:
    """Return the tag of a pipeline object."""
    if isinstance(obj, DiagnosticRecord):
        return ObjectKind.DIAGNOSTIC
    return obj.kind


def _is_char_sequence(value: object) -> bool:
    return (
        isinstance(value, (list, tuple))
        and len(value) > 0
        and all(isinstance(c, str) and len(c) == 1 for c in value)
    )


def to_pipeline_object(value: object) -> PipelineObject | None:
    """Normalize a host value into a pipeline object.

    Args:
        value (object): A value delivered by the host pipeline.

    Returns:
        PipelineObject | None: The normalized object, or ``None`` when ``value`` is
        ``None`` (an unbound optional input).

    Raises:
        TypeError: If the value has no pipeline object representation.

    Mapping:
        - pipeline objects are returned unchanged;
        - ``bytes``, ``bytearray``, ``memoryview`` become `RawBytes`;
        - ``str`` and sequences of one-character strings become `Text`;
        - exceptions, ``logging.LogRecord`` and ``warnings.WarningMessage``
          become `DiagnosticRecord`;
        - other iterables of integers in ``range(256)`` become `RawBytes`.
    """
    if value is None:
        return None
    if isinstance(value, (Line, ByteChunk, RawBytes, Text, DiagnosticRecord)):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return RawBytes(bytes(value))
    if isinstance(value, str):
        return Text(value)
    if _is_char_sequence(value):
        return Text("".join(value))  # type: ignore[arg-type]
    if isinstance(value, BaseException):
        return record_from_exception(value)
    if isinstance(value, logging.LogRecord):
        return record_from_log_record(value)
    if isinstance(value, warnings.WarningMessage):
        return record_from_warning(value)
    if isinstance(value, Iterable):
        items = list(value)
        if all(isinstance(b, int) and 0 <= b < 256 for b in items):
            return RawBytes(bytes(items))
    raise TypeError(f"Cannot write object of type {type(value).__name__} to the console")
