# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Entry point for the ``asmq`` command line."""

from __future__ import annotations

from .commands import register_commands
from .core.typer_ext import create_typer

app = create_typer(
    name="asmq",
    help="Look up documentation for assembly instructions, registers and directives.",
    no_args_is_help=True,
    add_completion=False,
)

register_commands(app)


__all__ = ["app"]
