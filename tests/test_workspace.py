# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for workspace identity helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from asmq.errors import ConfigurationError
from asmq.workspace import initialize_params_for, path_to_uri, uri_to_path


def test_initialize_params_for_directory(workspace: Path) -> None:
    params = initialize_params_for(workspace)

    assert params.root is not None
    assert params.root.uri == workspace.resolve().as_uri()
    assert params.root.name == "workspace"
    assert params.root.path == workspace.resolve()


def test_missing_directory_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Invalid working directory"):
        initialize_params_for(tmp_path / "missing")


def test_file_is_rejected(tmp_path: Path) -> None:
    target = tmp_path / "file.s"
    target.write_text("nop\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="not a directory"):
        initialize_params_for(target)


def test_uri_round_trip_with_spaces(tmp_path: Path) -> None:
    target = tmp_path / "with space"
    target.mkdir()

    assert uri_to_path(path_to_uri(target)) == target.resolve()


def test_bare_paths_are_accepted() -> None:
    assert uri_to_path("/tmp/project") == Path("/tmp/project")


def test_foreign_schemes_are_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Unsupported"):
        uri_to_path("https://example.com/project")
