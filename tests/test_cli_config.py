# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI tests for configuration commands."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from typer.testing import CliRunner

from asmq.cli.app import app

WriteConfig = Callable[[Path, str], Path]


def test_config_show_defaults(workspace: Path) -> None:
    runner = CliRunner()

    result = runner.invoke(app, ["config", "show", "--root", str(workspace)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["default_config"] == {"assembler": "gas", "instruction_set": "x86/x86-64"}
    assert payload["effective_arches"] == ["x86", "x86-64"]
    assert payload["effective_assemblers"] == ["gas"]


def test_config_show_includes_anchored_projects(workspace: Path, write_config: WriteConfig) -> None:
    runner = CliRunner()
    write_config(
        workspace,
        """
[[project]]
path = "mips"
assembler = "mars"
instruction_set = "mips"
""",
    )

    result = runner.invoke(app, ["config", "show", "-r", str(workspace)])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert "default_config" not in payload
    assert payload["project"][0]["path"] == str((workspace / "mips").resolve())
    assert payload["effective_arches"] == ["mips"]
    assert payload["effective_assemblers"] == ["mars"]


def test_config_show_reports_bad_toml(workspace: Path, write_config: WriteConfig) -> None:
    runner = CliRunner()
    write_config(workspace, "[default_config")

    result = runner.invoke(app, ["config", "show", "--root", str(workspace)])

    assert result.exit_code == 1
    assert result.stdout == ""
    assert "Invalid TOML" in result.stderr
