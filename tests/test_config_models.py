# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for configuration models and effective target resolution."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from asmq.config import Config, ProjectConfig, RootConfig
from asmq.types import Arch, Assembler
from asmq.workspace import path_to_uri


def test_default_root_enables_gas_and_both_x86_widths() -> None:
    root = RootConfig.default()

    assert root.effective_arches() == [Arch.X86, Arch.X86_64]
    assert root.effective_assemblers() == [Assembler.GAS]


def test_effective_lists_are_ordered_and_unique(tmp_path: Path) -> None:
    root = RootConfig(
        default_config=Config(assembler=Assembler.GAS, instruction_set=Arch.X86_64),
        projects=[
            ProjectConfig(path=tmp_path / "a", assembler=Assembler.MARS, instruction_set=Arch.MIPS),
            ProjectConfig(path=tmp_path / "b", assembler=Assembler.GAS, instruction_set=Arch.X86_AND_X86_64),
            ProjectConfig(path=tmp_path / "c"),
        ],
    )

    assert root.effective_arches() == [Arch.X86_64, Arch.MIPS, Arch.X86]
    assert root.effective_assemblers() == [Assembler.GAS, Assembler.MARS]


def test_empty_root_has_no_targets() -> None:
    root = RootConfig()

    assert root.effective_arches() == []
    assert root.effective_assemblers() == []


def test_get_config_prefers_most_specific_project(tmp_path: Path) -> None:
    outer = ProjectConfig(path=tmp_path / "src", assembler=Assembler.GAS, instruction_set=Arch.ARM)
    inner = ProjectConfig(path=tmp_path / "src" / "mips", assembler=Assembler.MARS, instruction_set=Arch.MIPS)
    root = RootConfig(default_config=Config.default(), projects=[inner, outer])

    assert root.get_config(path_to_uri(tmp_path / "src" / "mips" / "main.s")) == inner
    assert root.get_config(path_to_uri(tmp_path / "src" / "boot.s")) == outer
    assert root.get_config(path_to_uri(tmp_path / "other.s")) == Config.default()


def test_get_config_without_default_is_empty(tmp_path: Path) -> None:
    root = RootConfig(projects=[ProjectConfig(path=tmp_path / "only")])

    assert root.get_config(path_to_uri(tmp_path)) == Config.empty()


def test_is_arch_enabled_understands_combined_x86() -> None:
    config = Config.default()

    assert config.is_arch_enabled(Arch.X86)
    assert config.is_arch_enabled(Arch.X86_64)
    assert not config.is_arch_enabled(Arch.ARM)
    assert not Config.empty().is_arch_enabled(Arch.X86)


def test_toml_shape_parses_with_project_alias() -> None:
    root = RootConfig.model_validate(
        {
            "default_config": {"assembler": "gas", "instruction_set": "riscv", "opts": {"diagnostics": False}},
            "project": [{"path": "mips", "assembler": "mars", "instruction_set": "mips", "unknown": 1}],
        }
    )

    assert root.default_config is not None
    assert root.default_config.opts is not None
    assert root.default_config.opts.diagnostics is False
    assert root.projects[0].assembler is Assembler.MARS


def test_unknown_arch_is_rejected() -> None:
    with pytest.raises(ValidationError):
        RootConfig.model_validate({"default_config": {"instruction_set": "vax"}})


def test_anchored_at_resolves_relative_paths(tmp_path: Path) -> None:
    root = RootConfig.model_validate({"project": [{"path": "sub/../mips"}]})

    anchored = root.anchored_at(tmp_path)

    assert anchored.projects[0].path == (tmp_path / "mips").resolve()
    assert root.projects[0].path == Path("sub/../mips")


def test_to_dict_uses_on_disk_keys() -> None:
    payload = RootConfig.default().to_dict()

    assert payload == {
        "default_config": {"assembler": "gas", "instruction_set": "x86/x86-64"},
        "project": [],
    }
