# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands that describe and list assembly names."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...core.shared import CLIError, build_cli_logger
from .services import open_session, run_get, run_list

RootOption = Annotated[
    Path | None,
    typer.Option(
        "--root",
        "-r",
        help="Workspace directory used for configuration lookup (default: current directory).",
        file_okay=False,
    ),
]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in status output.")]


def get_command(
    name: Annotated[str, typer.Option("--name", "-n", help="Instruction, register or directive name.")],
    root: RootOption = None,
    emoji: EmojiOption = False,
) -> None:
    """Print the documentation for a single instruction, register or directive."""

    logger = build_cli_logger(emoji=emoji)
    try:
        session = open_session(root, logger=logger)
        text = run_get(session, name, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    logger.echo(text)


def list_command(
    root: RootOption = None,
    emoji: EmojiOption = False,
) -> None:
    """Print every known register, directive and instruction name."""

    logger = build_cli_logger(emoji=emoji)
    try:
        session = open_session(root, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    logger.echo(run_list(session, logger=logger))


__all__ = ["get_command", "list_command"]
