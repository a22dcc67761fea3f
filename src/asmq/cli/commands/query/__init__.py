# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Query CLI command package."""

from __future__ import annotations

from ...core.shared import register_command
from ...protocols import TyperLike
from .command import get_command, list_command

__all__ = ["register"]


def register(app: TyperLike) -> None:
    """Register the ``get`` and ``list`` commands on ``app``.

    Args:
        app: Typer-compatible application receiving the commands.
    """

    register_command(app, get_command, name="get")
    register_command(app, list_command, name="list")
