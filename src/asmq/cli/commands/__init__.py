# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from ..protocols import TyperAdapter, TyperLike
from . import config, query

__all__ = ["register_commands"]


def register_commands(app: TyperLike | typer.Typer) -> None:
    """Register the built-in commands on ``app``.

    Args:
        app: Typer-compatible application receiving command registrations.
    """

    cli_app: TyperLike = TyperAdapter(app) if isinstance(app, typer.Typer) else app
    query.register(cli_app)
    config.register(cli_app)
