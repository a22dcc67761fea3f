# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""User-facing status messages with optional colour and emoji support.

Messages are written to standard error so that query results on standard
output stay machine-readable.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from .runtime.console.manager import detect_tty, get_console_manager


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise an empty string."""

    return symbol if enable else ""


def _print_line(
    msg: str,
    *,
    style: str | None,
    use_emoji: bool,
    console: Console | None = None,
) -> None:
    """Render ``msg`` with ``style`` on ``console`` (default: the shared stderr console).

    Args:
        msg: Message text to print.
        style: Rich style applied when colour output is active.
        use_emoji: Flag indicating whether emoji output is desired.
        console: Explicit console overriding the shared one.
    """

    color_enabled = detect_tty(stderr=True)
    target = console or get_console_manager().get(color=color_enabled, emoji=use_emoji, stderr=True)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    target.print(text)


def warn(msg: str, *, use_emoji: bool, console: Console | None = None) -> None:
    """Emit a warning message."""

    _print_line(f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow", use_emoji=use_emoji, console=console)


def fail(msg: str, *, use_emoji: bool, console: Console | None = None) -> None:
    """Emit an error message."""

    _print_line(f"{emoji('❌ ', use_emoji)}{msg}", style="red", use_emoji=use_emoji, console=console)


__all__ = ["emoji", "fail", "warn"]
