# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI commands for inspecting the resolved configuration."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import typer

from ....config import RootConfig
from ...core.shared import CLIError, build_cli_logger, register_command
from ...core.typer_ext import create_typer
from ...protocols import TyperAdapter
from ..query.services import open_session

config_app = create_typer(
    name="config",
    help="Inspect the configuration that governs catalog construction.",
    no_args_is_help=True,
)


def render_config(root_config: RootConfig) -> dict[str, Any]:
    """Return the JSON payload printed by ``config show``."""

    payload = root_config.to_dict()
    payload["effective_arches"] = [arch.value for arch in root_config.effective_arches()]
    payload["effective_assemblers"] = [assembler.value for assembler in root_config.effective_assemblers()]
    return payload


def show_command(
    root: Annotated[
        Path | None,
        typer.Option("--root", "-r", help="Workspace directory used for configuration lookup.", file_okay=False),
    ] = None,
) -> None:
    """Print the resolved configuration and effective targets as JSON."""

    logger = build_cli_logger(emoji=False)
    try:
        session = open_session(root, logger=logger)
    except CLIError as exc:
        raise typer.Exit(code=exc.exit_code) from exc
    logger.echo(json.dumps(render_config(session.root_config), indent=2))


register_command(TyperAdapter(config_app), show_command, name="show")


__all__ = ["config_app", "render_config"]
