# topmark:header:start
#
#   project      : PlayFrame
#   file         : cli_types.py
#   file_relpath : src/playframe/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 PlayFrame contributors
#
# topmark:header:end

"""Click parameter types for PlayFrame commands."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """Case-insensitive choice over the string values of an Enum.

    ``--format JSON`` and ``--color Never`` resolve to the enum member; the
    command receives the member, never the raw string.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.by_value: dict[str, E] = {str(m.value).lower(): m for m in enum_cls}

    @property
    def choices(self) -> list[str]:
        """Accepted spellings, in declaration order."""
        return list(self.by_value)

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the accepted values, e.g. ``[text|markdown|json|ndjson]``."""
        return "[" + "|".join(self.choices) + "]"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> E:
        """Resolve a string (or an existing member) to the enum member."""
        if isinstance(value, self.enum_cls):
            return value
        member: E | None = self.by_value.get(str(value).lower())
        if member is None:
            self.fail(
                f"{value!r} is not one of {', '.join(self.choices)}.",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self, ctx: click.Context, param: click.Parameter, incomplete: str
    ) -> list[CompletionItem]:
        """Complete enum values matching the typed prefix."""
        from click.shell_completion import CompletionItem

        prefix: str = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.startswith(prefix)]
