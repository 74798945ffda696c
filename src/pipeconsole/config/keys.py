# topmark:header:start
#
#   project      : PipeConsole
#   file         : keys.py
#   file_relpath : src/pipeconsole/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for PipeConsole configuration.

Keys defined here are the external configuration schema as it appears in
``pipeconsole.toml`` and in ``[tool.pipeconsole]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change. CLI option spellings live in
`pipeconsole.cli.keys`.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by PipeConsole configuration."""

    # [reader]
    SECTION_READER: Final[str] = "reader"

    KEY_READ_COUNT: Final[str] = "read_count"
    KEY_AS_BYTE_STREAM: Final[str] = "as_byte_stream"

    # [writer]
    SECTION_WRITER: Final[str] = "writer"

    KEY_NO_NEWLINE: Final[str] = "no_newline"
    KEY_ENCODING: Final[str] = "encoding"

    # Known keys per section, used to report unknown keys.
    KNOWN_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_READER: frozenset({KEY_READ_COUNT, KEY_AS_BYTE_STREAM}),
        SECTION_WRITER: frozenset({KEY_NO_NEWLINE, KEY_ENCODING}),
    }
