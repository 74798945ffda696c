# topmark:header:start
#
#   project      : PipeConsole
#   file         : encoding.py
#   file_relpath : src/pipeconsole/core/encoding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text encoding and newline helpers shared by the console reader and writer.

The relay only ever applies two text transformations: removing the line terminator
from lines read in text mode, and encoding text (plus the platform newline) when the
writer runs with an explicit encoding. Both live here so the two sides agree.
"""

from __future__ import annotations

import codecs
import locale
import os
import sys
from typing import Final

PLATFORM_NEWLINE: Final[str] = os.linesep

# Codecs that emit a byte order mark on every `encode()` call, mapped to the
# BOM-less variant matching the machine's byte order.
_BOM_CODECS: Final[dict[str, str]] = {
    "utf-8-sig": "utf-8",
    "utf-16": "utf-16-le" if sys.byteorder == "little" else "utf-16-be",
    "utf-32": "utf-32-le" if sys.byteorder == "little" else "utf-32-be",
}


def platform_output_encoding() -> str:
    """Return the encoding used for console output on this platform.

    Prefers the encoding reported by ``sys.stdout``, then the locale's preferred
    encoding, and finally falls back to UTF-8.
    """
    stream_encoding: str | None = getattr(sys.stdout, "encoding", None)
    name: str = stream_encoding or locale.getpreferredencoding(False) or "utf-8"
    return resolve_encoding(name)


def resolve_encoding(name: str) -> str:
    """Return the canonical codec name for ``name``.

    Args:
        name (str): An encoding name or alias (e.g. ``"UTF8"``, ``"latin-1"``).

    Returns:
        str: The canonical codec name (e.g. ``"utf-8"``, ``"iso8859-1"``).

    Raises:
        LookupError: If no codec is registered under ``name``.
    """
    return codecs.lookup(name.strip()).name


def encode_text(text: str, encoding: str) -> bytes:
    """Encode ``text`` without a byte order mark.

    Args:
        text (str): The text to encode.
        encoding (str): Codec name or alias.

    Returns:
        bytes: The encoded text.
    """
    name: str = resolve_encoding(encoding)
    return text.encode(_BOM_CODECS.get(name, name))


def newline_bytes(encoding: str) -> bytes:
    """Return the platform newline encoded with ``encoding``."""
    return encode_text(PLATFORM_NEWLINE, encoding)


def strip_line_terminator(line: str) -> str:
    r"""Remove a single trailing line terminator (``\r\n``, ``\n`` or ``\r``)."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line
