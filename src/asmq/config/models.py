# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models describing which architectures and assemblers are active."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from ..types import Arch, Assembler
from ..workspace import uri_to_path


class ConfigOptions(BaseModel):
    """Toolchain options accepted for compatibility with existing config files."""

    model_config = ConfigDict(extra="ignore")

    compiler: str | None = None
    compile_flags_txt: list[str] | None = None
    diagnostics: bool | None = None
    default_diagnostics: bool | None = None


class Config(BaseModel):
    """Settings applied to one workspace or project directory."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    version: str | None = None
    assembler: Assembler | None = None
    instruction_set: Arch | None = None
    opts: ConfigOptions | None = None

    @classmethod
    def default(cls) -> Config:
        """Return the configuration used when no config file is found."""

        return cls(assembler=Assembler.GAS, instruction_set=Arch.X86_AND_X86_64)

    @classmethod
    def empty(cls) -> Config:
        """Return a configuration that enables nothing."""

        return cls()

    def is_arch_enabled(self, arch: Arch) -> bool:
        """Return ``True`` when ``arch`` is the configured instruction set or part of it."""

        return self.instruction_set is not None and self.instruction_set.covers(arch)


class ProjectConfig(Config):
    """Configuration scoped to a directory inside the workspace."""

    path: Path


class RootConfig(BaseModel):
    """Top-level configuration document: a default plus per-project overrides."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    default_config: Config | None = None
    projects: list[ProjectConfig] = Field(default_factory=list, alias="project")

    @classmethod
    def default(cls) -> RootConfig:
        return cls(default_config=Config.default())

    def configs(self) -> Iterator[Config]:
        """Yield the default configuration followed by each project in file order."""

        if self.default_config is not None:
            yield self.default_config
        yield from self.projects

    def effective_arches(self) -> list[Arch]:
        """Return every architecture enabled anywhere, de-duplicated in first-seen order.

        Returns:
            list[Arch]: Concrete architectures; ``x86/x86-64`` is expanded.
        """

        return _ordered_unique(
            arch
            for config in self.configs()
            if config.instruction_set is not None
            for arch in config.instruction_set.expand()
        )

    def effective_assemblers(self) -> list[Assembler]:
        """Return every assembler enabled anywhere, de-duplicated in first-seen order."""

        return _ordered_unique(config.assembler for config in self.configs() if config.assembler is not None)

    def get_config(self, uri: str) -> Config:
        """Return the configuration governing ``uri``.

        The project whose directory contains ``uri`` wins, the most specific
        directory first; otherwise the default configuration applies.

        Args:
            uri: ``file://`` URI (or plain path) of a file or directory.

        Returns:
            Config: Matching configuration, or :meth:`Config.empty`.
        """

        target = uri_to_path(uri)
        matches = [project for project in self.projects if target.is_relative_to(project.path)]
        if matches:
            return max(matches, key=lambda project: len(project.path.parts))
        if self.default_config is not None:
            return self.default_config
        return Config.empty()

    def anchored_at(self, root: Path) -> RootConfig:
        """Return a copy whose relative project paths are resolved against ``root``."""

        projects = [
            project.model_copy(update={"path": (root / project.path).resolve()})
            for project in self.projects
        ]
        return self.model_copy(update={"projects": projects})

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly mapping using the on-disk key names."""

        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


T = TypeVar("T")


def _ordered_unique(values: Iterable[T]) -> list[T]:
    return list(dict.fromkeys(values))


__all__ = ["Config", "ConfigOptions", "ProjectConfig", "RootConfig"]
