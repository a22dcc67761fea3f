# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Single-token description resolver.

Two entry points share one catalog lookup: :func:`hover` resolves the token
under a cursor in an open document, :func:`describe_name` resolves a bare
token name.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from .catalog.store import Catalog
from .config.models import Config
from .diagnostics import null_logger
from .rendering import render_directive, render_instruction, render_register


class MarkupKind(str, Enum):
    """Formats a hover payload may be expressed in."""

    PLAINTEXT = "plaintext"
    MARKDOWN = "markdown"


@dataclass(frozen=True, slots=True)
class MarkupContent:
    """Formatted hover text."""

    kind: MarkupKind
    value: str


HoverContents = MarkupContent | str | tuple[str, ...]


@dataclass(frozen=True, slots=True)
class HoverResponse:
    """Result of a successful lookup."""

    contents: HoverContents


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based line/character position within a document."""

    line: int = 0
    character: int = 0


@dataclass(frozen=True, slots=True)
class TextDocumentIdentifier:
    uri: str


@dataclass(frozen=True, slots=True)
class HoverParams:
    """Document and cursor position of a live hover request."""

    text_document: TextDocumentIdentifier
    position: Position = field(default_factory=Position)


class DocumentStore:
    """In-memory text of open documents keyed by URI."""

    def __init__(self) -> None:
        self._documents: dict[str, str] = {}

    def open(self, uri: str, text: str) -> None:
        self._documents[uri] = text

    def close(self, uri: str) -> None:
        self._documents.pop(uri, None)

    def get(self, uri: str) -> str | None:
        return self._documents.get(uri)


_TOKEN_CHARS: Final[re.Pattern[str]] = re.compile(r"[\w.$%#@]")


def word_at(text: str, position: Position) -> str | None:
    """Return the token touching ``position`` in ``text``, if any.

    Args:
        text: Full document text.
        position: Zero-based cursor position.

    Returns:
        str | None: Token under the cursor, or ``None`` for whitespace,
        punctuation and out-of-range positions.
    """

    lines = text.splitlines()
    if not 0 <= position.line < len(lines):
        return None
    line = lines[position.line]
    cursor = min(max(position.character, 0), len(line))
    start = cursor
    while start > 0 and _TOKEN_CHARS.match(line[start - 1]):
        start -= 1
    end = cursor
    while end < len(line) and _TOKEN_CHARS.match(line[end]):
        end += 1
    word = line[start:end]
    return word or None


def hover(
    params: HoverParams,
    config: Config,
    doc_store: DocumentStore,
    catalog: Catalog,
    *,
    logger: logging.Logger | None = None,
) -> HoverResponse | None:
    """Describe the token under the cursor of an open document.

    Args:
        params: Document URI and cursor position.
        config: Configuration governing the document.
        doc_store: Store holding the document text.
        catalog: Catalog to search.
        logger: Diagnostic logger.

    Returns:
        HoverResponse | None: Markdown description, or ``None`` when the
        document is unknown, the cursor is not on a token, or the token is
        not in the catalog.
    """

    log = logger or null_logger()
    text = doc_store.get(params.text_document.uri)
    if text is None:
        log.debug("hover uri=%s not open", params.text_document.uri)
        return None
    word = word_at(text, params.position)
    if word is None:
        return None
    return _lookup(word, config, catalog, log)


def describe_name(
    name: str,
    config: Config,
    catalog: Catalog,
    *,
    logger: logging.Logger | None = None,
) -> HoverResponse | None:
    """Describe ``name`` without any document or cursor context.

    Lookup order is instructions, directives, then registers; matching is
    exact.
    """

    return _lookup(name, config, catalog, logger or null_logger())


def _lookup(word: str, config: Config, catalog: Catalog, log: logging.Logger) -> HoverResponse | None:
    if (instruction := catalog.instructions.get(word)) is not None:
        log.debug("hover name=%s kind=instruction arch=%s", word, instruction.arch.value)
        return _markdown(render_instruction(instruction, config))
    if (directive := catalog.directives.get(word)) is not None:
        log.debug("hover name=%s kind=directive assembler=%s", word, directive.assembler.value)
        return _markdown(render_directive(directive, config))
    if (register := catalog.registers.get(word)) is not None:
        log.debug("hover name=%s kind=register arch=%s", word, register.arch.value)
        return _markdown(render_register(register, config))
    log.debug("hover name=%s kind=none", word)
    return None


def _markdown(value: str) -> HoverResponse:
    return HoverResponse(contents=MarkupContent(kind=MarkupKind.MARKDOWN, value=value))


__all__ = [
    "DocumentStore",
    "HoverContents",
    "HoverParams",
    "HoverResponse",
    "MarkupContent",
    "MarkupKind",
    "Position",
    "TextDocumentIdentifier",
    "describe_name",
    "hover",
    "word_at",
]
