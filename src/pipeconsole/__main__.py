# topmark:header:start
#
#   project      : PipeConsole
#   file         : __main__.py
#   file_relpath : src/pipeconsole/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running PipeConsole via ``python -m pipeconsole``.

It delegates directly to :func:`pipeconsole.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how PipeConsole is launched.

Examples:
    Relay standard input to standard output byte for byte::

        python -m pipeconsole cat --as-byte-stream
"""

from __future__ import annotations

from pipeconsole.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
