# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Structural view of the Typer surface used when registering commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, cast

import typer

CommandResult = int | None
CommandCallable = Callable[..., CommandResult]
CommandDecorator = Callable[[CommandCallable], CommandCallable]


class TyperLike(Protocol):
    """Minimal Typer-compatible application interface."""

    def command(
        self,
        name: str | None = None,
        *,
        help_text: str | None = None,
    ) -> CommandDecorator:
        """Return a decorator registering a command."""

    def add_typer(self, sub_command: typer.Typer, *, name: str | None = None) -> None:
        """Attach a nested application as a sub-command group."""


@dataclass(frozen=True, slots=True)
class TyperAdapter:
    """Expose a :class:`typer.Typer` instance through :class:`TyperLike`."""

    app: typer.Typer

    def command(
        self,
        name: str | None = None,
        *,
        help_text: str | None = None,
    ) -> CommandDecorator:
        """Return the underlying Typer decorator for a command.

        Args:
            name: Optional explicit command name.
            help_text: Help text shown in CLI usage output.

        Returns:
            CommandDecorator: Decorator returned by the Typer app.
        """

        return cast(CommandDecorator, self.app.command(name=name, help=help_text))

    def add_typer(self, sub_command: typer.Typer, *, name: str | None = None) -> None:
        """Attach ``sub_command`` beneath the wrapped application.

        Raises:
            TypeError: If ``sub_command`` is not a Typer application.
        """

        if not isinstance(sub_command, typer.Typer):
            raise TypeError("add_typer expects a Typer application")
        self.app.add_typer(sub_command, name=name)


__all__ = [
    "CommandCallable",
    "CommandDecorator",
    "CommandResult",
    "TyperAdapter",
    "TyperLike",
]
