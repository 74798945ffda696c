# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline host: drives a source into a console writer."""

from __future__ import annotations

from pipeconsole.pipeline.host import Stage, cancel_on_interrupt, run_pipeline

__all__ = ["Stage", "cancel_on_interrupt", "run_pipeline"]
