# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Description and listing queries over a built catalog."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from .catalog.store import Catalog
from .config.models import Config
from .diagnostics import null_logger
from .errors import InvalidResponseShape, NotFound
from .hover import HoverResponse, MarkupContent, MarkupKind, describe_name

NameResolver = Callable[..., HoverResponse | None]

_BLANK_RUN: Final[re.Pattern[str]] = re.compile(r"\n{3,}")


@dataclass(frozen=True, slots=True)
class CatalogContext:
    """Everything a description query needs besides the token name."""

    config: Config
    catalog: Catalog
    workspace_uri: str
    logger: logging.Logger = field(default_factory=null_logger)


@dataclass(frozen=True, slots=True)
class NameListing:
    """Every catalog name grouped by kind."""

    registers: tuple[str, ...]
    directives: tuple[str, ...]
    instructions: tuple[str, ...]


def clean_markup(text: str) -> str:
    """Collapse every run of three or more newlines to a single blank line.

    Args:
        text: Markdown produced by the resolver.

    Returns:
        str: Text whose longest newline run is two characters.
    """

    return _BLANK_RUN.sub("\n\n", text)


def describe(
    context: CatalogContext,
    token_name: str,
    *,
    resolver: NameResolver = describe_name,
) -> str:
    """Return cleaned Markdown describing ``token_name``.

    Args:
        context: Configuration, catalog and logger for the lookup.
        token_name: Exact name to look up.
        resolver: Name-only description resolver.

    Returns:
        str: Markdown text after :func:`clean_markup`.

    Raises:
        ValueError: If ``token_name`` is empty.
        NotFound: If the resolver produced nothing.
        InvalidResponseShape: If the resolver produced non-Markdown content.
    """

    if not token_name:
        raise ValueError("token name must be non-empty")
    context.logger.debug("describe name=%s workspace=%s", token_name, context.workspace_uri)
    response = resolver(token_name, context.config, context.catalog, logger=context.logger)
    if response is None:
        raise NotFound(token_name)
    contents = response.contents
    if isinstance(contents, MarkupContent) and contents.kind is MarkupKind.MARKDOWN:
        return clean_markup(contents.value)
    raise InvalidResponseShape(contents)


def list_all(catalog: Catalog) -> NameListing:
    """Return every descriptor name in catalog order, registers first."""

    return NameListing(
        registers=tuple(info.name for info in catalog.registers.values()),
        directives=tuple(info.name for info in catalog.directives.values()),
        instructions=tuple(info.name for info in catalog.instructions.values()),
    )


def render_listing(listing: NameListing) -> str:
    """Return the listing as one name per line, groups separated by a newline.

    An empty listing renders as ``"\\n\\n"``.
    """

    return "\n".join(
        "\n".join(group) for group in (listing.registers, listing.directives, listing.instructions)
    )


__all__ = [
    "CatalogContext",
    "NameListing",
    "clean_markup",
    "describe",
    "list_all",
    "render_listing",
]
