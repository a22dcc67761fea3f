# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point user configuration lookup at an empty directory and clear ``ASMQ_LOG``."""

    config_home = tmp_path / "xdg"
    config_home.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("ASMQ_LOG", raising=False)
    return config_home


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Return an empty workspace directory."""

    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def write_config() -> Callable[[Path, str], Path]:
    """Return a helper writing ``.asm-lsp.toml`` into a directory."""

    def _write(directory: Path, body: str) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / ".asm-lsp.toml"
        path.write_text(body.strip() + "\n", encoding="utf-8")
        return path

    return _write
