# topmark:header:start
#
#   project      : PipeConsole
#   file         : formats.py
#   file_relpath : src/pipeconsole/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Describing pipeline objects for inspection output.

Used by ``pipeconsole read`` to show what the reader produces. The descriptions
are themselves text, so they travel to the console writer as `Text` objects.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from pipeconsole.core.objects import (
    ByteChunk,
    Line,
    PipelineObject,
    RawBytes,
    Text,
    kind_of,
)
from pipeconsole.diagnostic.model import DiagnosticRecord


class OutputFormat(str, Enum):
    """Output format for object descriptions.

    Attributes:
        TEXT: One human-readable line per object.
        NDJSON: One JSON object per line (newline-delimited JSON; machine-readable).
    """

    TEXT = "text"
    NDJSON = "ndjson"


def describe_object(obj: PipelineObject) -> dict[str, Any]:
    """Return a JSON-friendly mapping describing ``obj``.

    Byte payloads are hex-encoded under ``"hex"``; text payloads appear under
    ``"value"``; diagnostics add their ``"level"``.
    """
    out: dict[str, Any] = {"kind": kind_of(obj).value}
    if isinstance(obj, (ByteChunk, RawBytes)):
        out["length"] = len(obj.data)
        out["hex"] = obj.data.hex()
    elif isinstance(obj, (Line, Text)):
        out["length"] = len(obj.text)
        out["value"] = obj.text
    elif isinstance(obj, DiagnosticRecord):
        rendered = obj.render()
        out["level"] = obj.level.value
        out["length"] = len(rendered)
        out["value"] = rendered
    return out


def render_description(obj: PipelineObject, fmt: OutputFormat) -> str:
    """Render the description of ``obj`` as a single line in format ``fmt``.

    Examples:
        ``line: 'abc'``, ``byte-chunk[4]: 61626364`` (text) or
        ``{"kind": "line", "length": 3, "value": "abc"}`` (NDJSON).
    """
    info = describe_object(obj)
    if fmt == OutputFormat.NDJSON:
        return json.dumps(info, ensure_ascii=False)
    if "hex" in info:
        return f"{info['kind']}[{info['length']}]: {info['hex']}"
    if "level" in info:
        return f"{info['kind']}[{info['level']}]: {info['value']!r}"
    return f"{info['kind']}: {info['value']!r}"
