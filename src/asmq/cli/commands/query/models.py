# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Data structures shared by the query commands."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ....catalog.store import Catalog
from ....config.models import Config, RootConfig
from ....query import CatalogContext


@dataclass(frozen=True, slots=True)
class QuerySession:
    """Resolved workspace state for a single CLI invocation.

    Attributes:
        uri: ``file://`` URI of the workspace root.
        root_config: Configuration document discovered for the workspace.
        config: Configuration governing the workspace root itself.
        catalog: Catalog built from every effective architecture and assembler.
        logger: Diagnostic logger configured from the environment.
    """

    uri: str
    root_config: RootConfig
    config: Config
    catalog: Catalog
    logger: logging.Logger

    def context(self) -> CatalogContext:
        """Return the query context carried by this session."""

        return CatalogContext(
            config=self.config,
            catalog=self.catalog,
            workspace_uri=self.uri,
            logger=self.logger,
        )


__all__ = ["QuerySession"]
