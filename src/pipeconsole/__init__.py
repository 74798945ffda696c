# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeConsole package.

PipeConsole relays the process's standard streams through an object pipeline:
a reader surfaces standard input as lines or byte chunks, and a writer renders
pipeline objects back onto standard output (data) and standard error
(diagnostic records). Both a CLI and a small typed API are provided.
"""

from __future__ import annotations
