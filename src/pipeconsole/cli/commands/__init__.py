# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PipeConsole CLI subcommands (one module per command)."""
