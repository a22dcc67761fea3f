# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Error hierarchy shared by configuration, query and CLI layers."""

from __future__ import annotations

from typing import Any


class AsmqError(Exception):
    """Base class for recoverable asmq failures."""


class ConfigurationError(AsmqError):
    """Raised when the workspace or root configuration cannot be resolved."""


class NotFound(AsmqError):
    """Raised when a queried token has no descriptor in the catalog."""

    def __init__(self, name: str) -> None:
        """Record the queried ``name`` for reporting.

        Args:
            name: Token name exactly as it was queried.
        """

        super().__init__(f"Received empty hover response for name: '{name}'")
        self.name = name


class InvalidResponseShape(AsmqError):
    """Raised when the description resolver returns something other than Markdown."""

    def __init__(self, contents: Any) -> None:
        """Record the unexpected ``contents`` for diagnostics.

        Args:
            contents: Payload returned by the resolver.
        """

        super().__init__(f"Invalid hover response contents: {contents!r}")
        self.contents = contents


__all__ = [
    "AsmqError",
    "ConfigurationError",
    "InvalidResponseShape",
    "NotFound",
]
