# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the cursor and name based description resolvers."""

from __future__ import annotations

import pytest

from asmq.catalog import Catalog, DirectiveInfo, InstructionInfo, RegisterInfo, build_catalog
from asmq.config import Config
from asmq.hover import (
    DocumentStore,
    HoverParams,
    MarkupContent,
    MarkupKind,
    Position,
    TextDocumentIdentifier,
    describe_name,
    hover,
    word_at,
)
from asmq.types import Arch, Assembler

URI = "file:///workspace/main.s"


@pytest.fixture
def catalog() -> Catalog:
    return build_catalog([Arch.X86, Arch.X86_64, Arch.MIPS], [Assembler.GAS])


@pytest.mark.parametrize(
    ("line", "character", "expected"),
    [
        (0, 4, "mov"),
        (0, 6, "mov"),
        (0, 8, "rax"),
        (1, 1, ".globl"),
        (2, 6, "$t0"),
        (0, 7, "mov"),
        (0, 2, None),
        (3, 0, None),
        (9, 0, None),
    ],
)
def test_word_at(line: int, character: int, expected: str | None) -> None:
    text = "    mov rax, 1\n.globl main\nlw    $t0, 0($sp)\n\n"

    assert word_at(text, Position(line=line, character=character)) == expected


def test_hover_resolves_token_under_cursor(catalog: Catalog) -> None:
    store = DocumentStore()
    store.open(URI, "    mov rax, 1\n")

    response = hover(HoverParams(TextDocumentIdentifier(URI), Position(0, 5)), Config.default(), store, catalog)

    assert response is not None
    assert isinstance(response.contents, MarkupContent)
    assert response.contents.kind is MarkupKind.MARKDOWN
    assert response.contents.value.startswith("# mov\n")


def test_hover_on_unknown_document_returns_none(catalog: Catalog) -> None:
    store = DocumentStore()
    store.open(URI, "mov\n")
    store.close(URI)

    assert store.get(URI) is None
    assert hover(HoverParams(TextDocumentIdentifier(URI)), Config.default(), store, catalog) is None


def test_lookup_prefers_instructions_then_directives_then_registers() -> None:
    catalog = Catalog(
        instructions={"x": InstructionInfo(name="x", arch=Arch.X86, summary="instruction")},
        directives={
            "x": DirectiveInfo(name="x", assembler=Assembler.GAS, description="directive"),
            "y": DirectiveInfo(name="y", assembler=Assembler.GAS, description="directive"),
        },
        registers={
            "x": RegisterInfo(name="x", arch=Arch.X86, description="register"),
            "y": RegisterInfo(name="y", arch=Arch.X86, description="register"),
            "z": RegisterInfo(name="z", arch=Arch.X86, description="register"),
        },
    )

    def body(name: str) -> str:
        response = describe_name(name, Config.default(), catalog)
        assert response is not None
        assert isinstance(response.contents, MarkupContent)
        return response.contents.value

    assert "instruction" in body("x")
    assert "directive" in body("y")
    assert "register" in body("z")


def test_describe_name_is_exact_match(catalog: Catalog) -> None:
    assert describe_name("MOV", Config.default(), catalog) is None
    assert describe_name("mo", Config.default(), catalog) is None
