# topmark:header:start
#
#   project      : PipeConsole
#   file         : keys.py
#   file_relpath : src/pipeconsole/cli/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical CLI command names and option spellings for PipeConsole.

Centralizing these values avoids string duplication between command definitions
and tests. Neither class contains behavior; they are pure namespaces for constants.
"""

from __future__ import annotations

from typing import Final


class CliCmd:
    """Command names exposed by the PipeConsole CLI."""

    CAT: Final[str] = "cat"
    READ: Final[str] = "read"
    WRITE: Final[str] = "write"
    VERSION: Final[str] = "version"


class CliOpt:
    """User-facing long option spellings (including the leading ``--``)."""

    # Reader
    AS_BYTE_STREAM: Final[str] = "--as-byte-stream"
    NO_AS_BYTE_STREAM: Final[str] = "--no-as-byte-stream"
    READ_COUNT: Final[str] = "--read-count"
    OUTPUT_FORMAT: Final[str] = "--format"

    # Writer
    NO_NEWLINE: Final[str] = "--no-newline"
    NEWLINE: Final[str] = "--newline"
    ENCODING: Final[str] = "--encoding"
    HEX: Final[str] = "--hex"
    DIAGNOSTIC: Final[str] = "--diagnostic"

    # Config discovery
    CONFIG_PATHS: Final[str] = "--config"
    NO_CONFIG: Final[str] = "--no-config"

    # Logging / UX
    VERBOSE: Final[str] = "--verbose"
    QUIET: Final[str] = "--quiet"
    COLOR_MODE: Final[str] = "--color"
    NO_COLOR_MODE: Final[str] = "--no-color"
    HELP: Final[str] = "--help"


class ArgKey:
    """Destination keys shared between Click parsing and config application."""

    READ_COUNT: Final[str] = "read_count"
    AS_BYTE_STREAM: Final[str] = "as_byte_stream"
    NO_NEWLINE: Final[str] = "no_newline"
    ENCODING: Final[str] = "encoding"
