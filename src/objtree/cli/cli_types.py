# topmark:header:start
#
#   project      : ObjTree
#   file         : cli_types.py
#   file_relpath : src/objtree/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the ObjTree CLI."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click

from objtree.config.getters import check_limit
from objtree.core.diagnostics import DiagnosticLog

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem as ClickCompletionItem

    from objtree.config.types import Limit

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    # At runtime, subclass the real Click type
    ParamTypeBase = click.ParamType  # type: ignore[assignment]

# Type variable bounded to Enum for generic EnumChoiceParam
E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive)."""
        if value is None:
            return None
        if isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[ClickCompletionItem]:
        """Tab completion for Click."""
        from click.shell_completion import CompletionItem as RuntimeCompletionItem

        prefix: str = (incomplete or "").lower()
        return [RuntimeCompletionItem(val) for val in self.choices if val.lower().startswith(prefix)]

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"


class LimitParam(ParamTypeBase):
    """A Click parameter type for limits: a non-negative integer or ``inf``."""

    name: str = "limit"

    def convert(
        self,
        value: str | int | float | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Limit | None:
        """Convert ``"3"`` to ``3`` and ``"inf"`` / ``"unbounded"`` to `UNBOUNDED`."""
        if value is None:
            return None
        limit: Limit | None = check_limit(
            value,
            where=param.name if param is not None and param.name else "limit",
            diagnostics=DiagnosticLog(),
        )
        if limit is None:
            raise click.BadParameter(
                f"Invalid value '{value}'. Must be a non-negative integer or 'inf'",
                param=param,
                ctx=ctx,
            )
        return limit

    def __repr__(self) -> str:
        return "LimitParam()"


LIMIT: LimitParam = LimitParam()
