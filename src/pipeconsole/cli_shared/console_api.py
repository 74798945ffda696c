# topmark:header:start
#
#   project      : PipeConsole
#   file         : console_api.py
#   file_relpath : src/pipeconsole/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Framework-agnostic console interface for line-oriented program output.

This protocol is the "formatted console path" of the console writer: text values go
through `print()` and diagnostic records through `error()`. It is kept separate from
internal logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Minimal interface for a line-oriented console.

    Implementations may use Click or plain stdlib streams.
    """

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a message to stderr."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return a styled string (no-op if styling is disabled)."""
        ...
