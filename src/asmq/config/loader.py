# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Discover and parse the root configuration for a workspace."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from ..diagnostics import null_logger
from ..errors import ConfigurationError
from ..workspace import InitializeParams
from .models import RootConfig
from .sources import TomlConfigSource

CONFIG_FILENAME: Final[str] = ".asm-lsp.toml"
USER_CONFIG_DIRNAME: Final[str] = "asm-lsp"


def user_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the per-user configuration file location.

    ``$XDG_CONFIG_HOME/asm-lsp/.asm-lsp.toml`` when the variable is set,
    otherwise ``~/.config/asm-lsp/.asm-lsp.toml``.
    """

    environ = os.environ if env is None else env
    base = environ.get("XDG_CONFIG_HOME")
    config_home = Path(base) if base else Path.home() / ".config"
    return config_home / USER_CONFIG_DIRNAME / CONFIG_FILENAME


class ConfigLoader:
    """Pick the first existing configuration source and parse it."""

    def __init__(
        self,
        *,
        project_root: Path | None,
        sources: Sequence[TomlConfigSource],
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialise a loader over ``sources`` in precedence order.

        Args:
            project_root: Workspace root anchoring relative project paths.
            sources: Candidate sources; the first existing one wins.
            logger: Diagnostic logger.
        """

        self._project_root = project_root
        self._sources = list(sources)
        self._logger = logger or null_logger()

    @classmethod
    def for_params(
        cls,
        params: InitializeParams,
        *,
        user_config: Path | None = None,
        env: Mapping[str, str] | None = None,
        logger: logging.Logger | None = None,
    ) -> ConfigLoader:
        """Build a loader that checks the workspace file, then the user file.

        Args:
            params: Workspace description; its first folder anchors lookup.
            user_config: Optional override for the per-user file.
            env: Environment mapping used to locate the per-user file.
            logger: Diagnostic logger.

        Returns:
            ConfigLoader: Loader with workspace-then-user precedence.
        """

        folder = params.root
        project_root = folder.path if folder is not None else None
        sources: list[TomlConfigSource] = []
        if project_root is not None:
            sources.append(TomlConfigSource(project_root / CONFIG_FILENAME))
        user_path = user_config if user_config is not None else user_config_path(env)
        sources.append(TomlConfigSource(user_path))
        return cls(project_root=project_root, sources=sources, logger=logger)

    def load(self) -> RootConfig:
        """Return the parsed root configuration, or the built-in default.

        Raises:
            ConfigurationError: If the selected file is malformed.
        """

        for source in self._sources:
            if not source.exists():
                self._logger.debug("config source=%s missing", source.name)
                continue
            self._logger.info("config source=%s", source.describe())
            return self._parse(source)
        self._logger.info("config source=defaults")
        return RootConfig.default()

    def _parse(self, source: TomlConfigSource) -> RootConfig:
        try:
            root = RootConfig.model_validate(source.load())
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration in {source.name}: {exc}") from exc
        if self._project_root is not None:
            root = root.anchored_at(self._project_root)
        elif any(not project.path.is_absolute() for project in root.projects):
            raise ConfigurationError(f"{source.name}: relative project paths require a workspace folder")
        return root


def get_root_config(
    params: InitializeParams,
    *,
    user_config: Path | None = None,
    env: Mapping[str, str] | None = None,
    logger: logging.Logger | None = None,
) -> RootConfig:
    """Resolve the root configuration for the workspace described by ``params``."""

    return ConfigLoader.for_params(params, user_config=user_config, env=env, logger=logger).load()


__all__ = ["CONFIG_FILENAME", "ConfigLoader", "get_root_config", "user_config_path"]
