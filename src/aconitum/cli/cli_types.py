# topmark:header:start
#
#   project      : Aconitum
#   file         : cli_types.py
#   file_relpath : src/aconitum/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Aconitum contributors
#
# topmark:header:end

"""Click parameter types for the Aconitum CLI."""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

import click

from aconitum.core.enum_mixins import KeyedStrEnum

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

K = TypeVar("K", bound=KeyedStrEnum)


class EnumChoiceParam(click.ParamType, Generic[K]):
    """Accept a `KeyedStrEnum` member by key, name or alias.

    Help and shell completion only offer the keys; aliases are accepted silently,
    so ``--format text`` works as well as ``--format default``.
    """

    enum_cls: type[K]
    name: str

    def __init__(self, enum_cls: type[K]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()

    @property
    def choices(self) -> list[str]:
        return self.enum_cls.keys()

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        return "[" + "|".join(self.choices) + "]"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> K | None:
        if value is None or isinstance(value, self.enum_cls):
            return value
        member = self.enum_cls.parse(str(value))
        if member is None:
            self.fail(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete the member keys starting with ``incomplete``.

        Enable with ``eval "$(_ACONITUM_COMPLETE=bash_source aconitum)"``.
        """
        from click.shell_completion import CompletionItem

        prefix = incomplete.lower()
        return [CompletionItem(key) for key in self.choices if key.startswith(prefix)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"
