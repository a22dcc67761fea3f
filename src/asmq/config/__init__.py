# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration models and loading."""

from __future__ import annotations

from .loader import CONFIG_FILENAME, ConfigLoader, get_root_config, user_config_path
from .models import Config, ConfigOptions, ProjectConfig, RootConfig

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigLoader",
    "ConfigOptions",
    "ProjectConfig",
    "RootConfig",
    "get_root_config",
    "user_config_path",
]
