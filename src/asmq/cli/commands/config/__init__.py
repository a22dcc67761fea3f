# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Config CLI command package."""

from __future__ import annotations

from ...protocols import TyperLike
from .command import config_app

__all__ = ["register"]


def register(app: TyperLike) -> None:
    """Attach the ``config`` command group to ``app``."""

    app.add_typer(config_app, name="config")
