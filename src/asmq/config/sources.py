# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources backed by TOML documents."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..errors import ConfigurationError


class TomlConfigSource:
    """Load a root configuration table from a TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        self.path = path
        self.name = name or str(path)

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Mapping[str, Any]:
        """Return the parsed TOML table, or an empty mapping when the file is absent.

        Raises:
            ConfigurationError: If the file cannot be read or is not valid TOML.
        """

        if not self.exists():
            return {}
        try:
            with self.path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigurationError(f"Invalid TOML in {self.name}: {exc}") from exc
        except OSError as exc:
            raise ConfigurationError(f"Unable to read {self.name}: {exc}") from exc

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


__all__ = ["TomlConfigSource"]
