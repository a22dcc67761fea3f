# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the shared CLI logging helpers."""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console
from typer.testing import CliRunner

from asmq.cli.app import app
from asmq.cli.core.shared import build_cli_logger
from asmq.runtime.console.manager import RichConsoleManager, get_console_manager


def test_cli_logger_uses_the_shared_stderr_console() -> None:
    logger = build_cli_logger(emoji=False)

    assert logger.console is get_console_manager().get(color=True, emoji=False, stderr=True)
    assert logger.console.stderr
    assert build_cli_logger(emoji=False).console is logger.console


def test_no_color_selects_a_separate_console() -> None:
    coloured = build_cli_logger(emoji=False)
    plain = build_cli_logger(emoji=False, no_color=True)

    assert plain.console is not coloured.console
    assert plain.console.no_color


def test_commands_obtain_consoles_from_the_manager(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    runner = CliRunner()
    requests: list[tuple[bool, bool, bool]] = []
    original_get = RichConsoleManager.get

    def recording_get(self: RichConsoleManager, *, color: bool, emoji: bool, stderr: bool = False) -> Console:
        requests.append((color, emoji, stderr))
        return original_get(self, color=color, emoji=emoji, stderr=stderr)

    monkeypatch.setattr(RichConsoleManager, "get", recording_get)

    failed = runner.invoke(app, ["get", "--name", "frobnicate", "--root", str(workspace)])
    listed = runner.invoke(app, ["list", "--root", str(workspace)])

    assert failed.exit_code == 1
    assert "frobnicate" in failed.stderr
    assert listed.exit_code == 0
    assert requests == [(True, False, True), (True, False, True)]
