# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic CLI helpers shared by the CLI and the Python API."""

from __future__ import annotations
