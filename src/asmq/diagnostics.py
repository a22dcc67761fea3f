# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Environment-driven diagnostic logger construction.

Loggers built here are plain :class:`logging.Logger` instances that are not
registered with the global logging manager; callers pass them explicitly to
the components that emit diagnostics.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Mapping
from typing import Final, TextIO

from .errors import ConfigurationError

LOG_ENV_VAR: Final[str] = "ASMQ_LOG"
LOGGER_NAME: Final[str] = "asmq"

_LEVELS: Final[dict[str, int]] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}


def null_logger() -> logging.Logger:
    """Return a detached logger that discards every record."""

    logger = logging.Logger(LOGGER_NAME)
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    logger.disabled = True
    return logger


def parse_level(raw: str) -> int:
    """Return the :mod:`logging` level named by ``raw``.

    Args:
        raw: Level name such as ``"debug"`` or ``"WARN"``.

    Returns:
        int: Numeric logging level.

    Raises:
        ConfigurationError: If ``raw`` does not name a supported level.
    """

    level = _LEVELS.get(raw.strip().lower())
    if level is None:
        choices = ", ".join(sorted(_LEVELS))
        raise ConfigurationError(f"Invalid {LOG_ENV_VAR} level '{raw}' (expected one of: {choices})")
    return level


def build_diagnostic_logger(
    env: Mapping[str, str] | None = None,
    *,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Return the diagnostic logger for one invocation.

    ``ASMQ_LOG`` is read once. When it is unset the returned logger is
    disabled; there is no default level.

    Args:
        env: Environment mapping; defaults to :data:`os.environ`.
        stream: Destination for log records; defaults to ``sys.stderr``.

    Returns:
        logging.Logger: Configured, unregistered logger.
    """

    environ = os.environ if env is None else env
    raw = environ.get(LOG_ENV_VAR)
    if raw is None:
        return null_logger()
    level = parse_level(raw)
    logger = logging.Logger(LOGGER_NAME, level=level)
    handler = logging.StreamHandler(stream=stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = ["LOG_ENV_VAR", "build_diagnostic_logger", "null_logger", "parse_level"]
