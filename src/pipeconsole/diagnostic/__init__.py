# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic records and helpers.

Diagnostic records carry error, warning, information, verbose and debug payloads.
The console writer always routes them to the error stream.
"""

from __future__ import annotations

from pipeconsole.diagnostic.model import (
    DiagnosticLevel,
    DiagnosticLog,
    DiagnosticRecord,
    record_from_exception,
    record_from_log_record,
    record_from_warning,
)

__all__ = [
    "DiagnosticLevel",
    "DiagnosticLog",
    "DiagnosticRecord",
    "record_from_exception",
    "record_from_log_record",
    "record_from_warning",
]
