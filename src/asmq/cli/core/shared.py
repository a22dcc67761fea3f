# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors, registration)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console

from ...logging import fail as core_fail
from ...logging import warn as core_warn
from ...runtime.console.manager import get_console_manager
from ..protocols import CommandCallable, TyperLike


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Route status messages to stderr and results to stdout."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        """Log a failure message honouring emoji preferences."""

        core_fail(message, use_emoji=self.use_emoji, console=self.console)

    def warn(self, message: str) -> None:
        """Log a warning message honouring emoji preferences."""

        core_warn(message, use_emoji=self.use_emoji, console=self.console)

    def echo(self, message: str) -> None:
        """Write ``message`` verbatim to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to the shared stderr console.

    Args:
        emoji: Whether log output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger instance.
    """

    console = get_console_manager().get(color=not no_color, emoji=emoji, stderr=True)
    return CLILogger(console=console, use_emoji=emoji)


def register_command(
    app: TyperLike,
    callback: CommandCallable,
    *,
    name: str | None = None,
    help_text: str | None = None,
) -> CommandCallable:
    """Register ``callback`` on ``app`` with consistent metadata handling.

    Args:
        app: Typer-compatible application receiving the command registration.
        callback: Command callable.
        name: Optional explicit command name.
        help_text: Help text shown in CLI usage output; defaults to the
            callback docstring.

    Returns:
        CommandCallable: Callback returned by Typer registration.
    """

    decorator = app.command(name=name, help_text=help_text)
    return decorator(callback)


__all__: Final = [
    "CLIError",
    "CLILogger",
    "build_cli_logger",
    "register_command",
]
