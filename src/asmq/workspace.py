# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Workspace identity helpers (folders, initialisation parameters, URIs)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from urllib.parse import unquote, urlparse

from .errors import ConfigurationError


def path_to_uri(path: Path) -> str:
    """Return the ``file://`` URI for an absolute ``path``."""

    return path.resolve().as_uri()


def uri_to_path(uri: str) -> Path:
    """Return the filesystem path named by a ``file://`` URI or a bare path.

    Raises:
        ConfigurationError: If ``uri`` uses a scheme other than ``file``.
    """

    parsed = urlparse(uri)
    if parsed.scheme in ("", "file"):
        return Path(unquote(parsed.path) if parsed.scheme else uri)
    raise ConfigurationError(f"Unsupported workspace URI scheme: {uri}")


@dataclass(frozen=True, slots=True)
class WorkspaceFolder:
    """A workspace root identified by URI, with a display name."""

    uri: str
    name: str

    @property
    def path(self) -> Path:
        return uri_to_path(self.uri)


@dataclass(frozen=True, slots=True)
class InitializeParams:
    """Workspace description handed to the configuration resolver."""

    workspace_folders: tuple[WorkspaceFolder, ...] = field(default_factory=tuple)

    @property
    def root(self) -> WorkspaceFolder | None:
        """Return the first workspace folder, which anchors configuration lookup."""

        return self.workspace_folders[0] if self.workspace_folders else None


def initialize_params_for(root: Path) -> InitializeParams:
    """Return initialisation parameters describing the workspace at ``root``.

    Args:
        root: Workspace directory, usually the current working directory.

    Returns:
        InitializeParams: Parameters holding a single workspace folder.

    Raises:
        ConfigurationError: If ``root`` is not an existing directory.
    """

    try:
        resolved = root.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise ConfigurationError(f"Invalid working directory: {root}") from exc
    if not resolved.is_dir():
        raise ConfigurationError(f"Invalid working directory: {root} is not a directory")
    folder = WorkspaceFolder(uri=path_to_uri(resolved), name=resolved.name or str(resolved))
    return InitializeParams(workspace_folders=(folder,))


__all__ = [
    "InitializeParams",
    "WorkspaceFolder",
    "initialize_params_for",
    "path_to_uri",
    "uri_to_path",
]
