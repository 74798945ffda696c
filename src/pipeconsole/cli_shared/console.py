# topmark:header:start
#
#   project      : PipeConsole
#   file         : console.py
#   file_relpath : src/pipeconsole/cli_shared/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for user-facing program output.

`ClickConsole` separates program output from internal logging. Text written through
it is encoded by the target text stream (the platform's console encoding), which is
the canonical output path of the console writer for text values.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO, TypedDict

import click


# This TypedDict is for documentation and type-checking on the *caller* side.
class StyleKwargs(TypedDict, total=False):
    """Keyword arguments accepted by click.style()."""

    fg: str
    bg: str
    bold: bool
    dim: bool
    underline: bool
    reverse: bool


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, `styled()` emits ANSI color codes.
            Otherwise, all output is plain text.
        out (TextIO | None): The text stream to use for standard output.
            Defaults to `sys.stdout`, resolved at construction time.
        err (TextIO | None): The text stream to use for error output.
            Defaults to `sys.stderr`, resolved at construction time.

    Notes:
        `print()` and `error()` write their text verbatim; only text produced by
        `styled()` carries ANSI codes.
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        # color=True keeps Click from stripping escape sequences out of relayed text
        click.echo(text, nl=nl, file=self.out, color=True)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a message to stderr.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.err, color=True)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style.

        Args:
            text (str): Text to style.
            **style_kwargs (Any): Subset of keyword arguments supported by click.style.
                Expected keys are defined in the StyleKwargs TypedDict.

        Returns:
            str: The styled text (or plain text if color is disabled).
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
