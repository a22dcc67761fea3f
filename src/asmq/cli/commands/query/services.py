# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helper services backing the ``get`` and ``list`` commands."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from ....catalog import CatalogIntegrityError, CatalogValidationError, build_catalog
from ....config import get_root_config
from ....diagnostics import build_diagnostic_logger
from ....errors import ConfigurationError, InvalidResponseShape, NotFound
from ....query import describe, list_all, render_listing
from ....workspace import initialize_params_for
from ...core.shared import CLIError, CLILogger
from .models import QuerySession


def open_session(
    root: Path | None,
    *,
    logger: CLILogger,
    env: Mapping[str, str] | None = None,
) -> QuerySession:
    """Resolve configuration and build the catalog for the workspace at ``root``.

    Args:
        root: Workspace directory; defaults to the current working directory.
        logger: CLI logger used to report failures.
        env: Environment mapping consulted for diagnostics and user config.

    Returns:
        QuerySession: Ready-to-query session.

    Raises:
        CLIError: If the environment, configuration or catalog data is invalid.
    """

    try:
        diagnostics = build_diagnostic_logger(env)
        params = initialize_params_for(root if root is not None else Path.cwd())
        root_config = get_root_config(params, env=env, logger=diagnostics)
        folder = params.root
        if folder is None:
            raise ConfigurationError("No workspace folder available")
        config = root_config.get_config(folder.uri)
        catalog = build_catalog(
            root_config.effective_arches(),
            root_config.effective_assemblers(),
            logger=diagnostics,
        )
    except ConfigurationError as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    except (CatalogValidationError, CatalogIntegrityError) as exc:
        logger.fail(f"Bundled documentation is invalid: {exc}")
        raise CLIError(str(exc)) from exc
    diagnostics.debug("workspace=%s entries=%d", folder.uri, len(catalog))
    return QuerySession(
        uri=folder.uri,
        root_config=root_config,
        config=config,
        catalog=catalog,
        logger=diagnostics,
    )


def run_get(session: QuerySession, name: str, *, logger: CLILogger) -> str:
    """Return the cleaned description of ``name``.

    Raises:
        CLIError: If ``name`` is empty, unknown, or resolves to non-Markdown content.
    """

    try:
        return describe(session.context(), name)
    except (NotFound, InvalidResponseShape) as exc:
        logger.fail(str(exc))
        raise CLIError(str(exc)) from exc
    except ValueError as exc:
        logger.fail(f"Invalid name: {exc}")
        raise CLIError(str(exc)) from exc


def run_list(session: QuerySession, *, logger: CLILogger) -> str:
    """Return every catalog name, registers then directives then instructions."""

    if not session.catalog:
        logger.warn("No architectures or assemblers are enabled; the catalog is empty")
    return render_listing(list_all(session.catalog))


__all__ = ["open_session", "run_get", "run_list"]
