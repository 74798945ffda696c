# topmark:header:start
#
#   project      : PipeConsole
#   file         : cli_types.py
#   file_relpath : src/pipeconsole/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the PipeConsole CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

import click

from pipeconsole.core.encoding import resolve_encoding

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem as ClickCompletionItem

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumParam
E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Click parameter type mapping an option value onto a member of ``enum_cls``.

    Matching is case-insensitive on the members' string values, so
    ``--diagnostic WARNING`` and ``--format NDJSON`` are accepted.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self._by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}
        self.choices: list[str] = [str(m.value) for m in enum_cls]

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Return the enum member named by ``value``."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        member = self._by_value.get(str(value).strip().lower())
        if member is None:
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param=param,
                ctx=ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Complete enum values: ``eval "$(_PIPECONSOLE_COMPLETE=bash_source pipeconsole)"``."""
        from click.shell_completion import CompletionItem

        prefix = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"


class EncodingParam(ParamTypeBase):
    """A Click parameter type validating a text encoding name.

    Converts to the canonical codec name (e.g. ``UTF8`` -> ``utf-8``).
    """

    name = "encoding"

    def convert(
        self,
        value: str | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> str | None:
        """Return the canonical codec name for ``value``."""
        if value is None:
            return None
        try:
            return resolve_encoding(value)
        except LookupError:
            raise click.BadParameter(f"Unknown encoding '{value}'", param=param, ctx=ctx) from None

    def __repr__(self) -> str:
        """Return a string representation."""
        return "EncodingParam()"
