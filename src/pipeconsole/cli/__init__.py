# topmark:header:start
#
#   project      : PipeConsole
#   file         : __init__.py
#   file_relpath : src/pipeconsole/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for PipeConsole.

The entry point is [`pipeconsole.cli.main.cli`][]; subcommands live in
`pipeconsole.cli.commands`.
"""
