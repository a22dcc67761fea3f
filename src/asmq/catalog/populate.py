# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Per-architecture and per-assembler population routines.

Each routine is a pure function returning an ordered ``name -> descriptor``
mapping that the builder merges into the catalog. Dispatch over
:class:`~asmq.types.Arch` and :class:`~asmq.types.Assembler` is exhaustive, so
a new variant must be given a table (or an explicit "no table") here.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from functools import lru_cache
from pathlib import Path
from typing import assert_never

from ..types import Arch, Assembler
from .errors import CatalogIntegrityError
from .io import document_path, load_document
from .models import DirectiveInfo, InstructionInfo, RegisterInfo, parse_arch, parse_assembler
from .schema import default_schemas
from .types import DIRECTIVES, DOCUMENT_SCHEMA_VERSION, INSTRUCTIONS, REGISTERS, DocumentKind, JSONValue
from .utils import expect_mapping, expect_string, mapping_array, optional_string


def instruction_entries(arch: Arch, dialect: Assembler | None = None) -> dict[str, InstructionInfo]:
    """Return the instructions ``arch`` contributes, optionally scoped to ``dialect``.

    Args:
        arch: Architecture whose instruction table is requested.
        dialect: When given, only the dialect-specific overlay table for
            ``arch`` is returned (empty when the dialect has none).

    Returns:
        dict[str, InstructionInfo]: Entries keyed by instruction name.
    """

    stem = _overlay_stem(arch, dialect) if dialect is not None else _arch_stem(arch)
    if stem is None:
        return {}
    return {info.name: info for info in _instruction_table(stem, arch, dialect)}


def register_entries(arch: Arch) -> dict[str, RegisterInfo]:
    """Return the registers ``arch`` contributes keyed by register name."""

    stem = _arch_stem(arch)
    if stem is None:
        return {}
    return {info.name: info for info in _register_table(stem, arch)}


def directive_entries(assembler: Assembler) -> dict[str, DirectiveInfo]:
    """Return the directives ``assembler`` contributes keyed by directive name."""

    return {info.name: info for info in _directive_table(_assembler_stem(assembler), assembler)}


def _arch_stem(arch: Arch) -> str | None:
    match arch:
        case Arch.X86:
            return "x86"
        case Arch.X86_64:
            return "x86_64"
        case Arch.X86_AND_X86_64:
            # configuration shorthand, expanded before population
            return None
        case Arch.ARM:
            return "arm"
        case Arch.ARM64:
            return "arm64"
        case Arch.RISCV:
            return "riscv"
        case Arch.Z80:
            return "z80"
        case Arch.MOS6502:
            return "mos6502"
        case Arch.POWER_ISA:
            return "power_isa"
        case Arch.AVR:
            return "avr"
        case Arch.MIPS:
            return "mips"
        case _:
            assert_never(arch)


def _overlay_stem(arch: Arch, dialect: Assembler) -> str | None:
    match dialect:
        case Assembler.MARS:
            return "mips_mars" if arch is Arch.MIPS else None
        case (
            Assembler.GAS
            | Assembler.GO
            | Assembler.MASM
            | Assembler.NASM
            | Assembler.CA65
            | Assembler.AVR
            | Assembler.FASM
        ):
            return None
        case _:
            assert_never(dialect)


def _assembler_stem(assembler: Assembler) -> str:
    match assembler:
        case Assembler.GAS:
            return "gas"
        case Assembler.GO:
            return "go"
        case Assembler.MASM:
            return "masm"
        case Assembler.NASM:
            return "nasm"
        case Assembler.CA65:
            return "ca65"
        case Assembler.AVR:
            return "avr"
        case Assembler.FASM:
            return "fasm"
        case Assembler.MARS:
            return "mars"
        case _:
            assert_never(assembler)


@lru_cache(maxsize=None)
def _instruction_table(stem: str, arch: Arch, dialect: Assembler | None) -> tuple[InstructionInfo, ...]:
    path, document = _load(INSTRUCTIONS, stem)
    _check_arch(document, arch, source=path)
    declared = optional_string(document.get("dialect"), key="dialect", context=str(path))
    declared_dialect = parse_assembler(declared, context=str(path)) if declared is not None else None
    if declared_dialect is not dialect:
        raise CatalogIntegrityError(f"{path}: declares dialect {declared!r}, expected {dialect}")
    entries = tuple(
        InstructionInfo.from_mapping(entry, arch=arch, dialect=dialect, context=f"{path}.entries[{index}]")
        for index, entry in enumerate(_entries(document, source=path))
    )
    _check_unique(entries, source=path)
    return entries


@lru_cache(maxsize=None)
def _register_table(stem: str, arch: Arch) -> tuple[RegisterInfo, ...]:
    path, document = _load(REGISTERS, stem)
    _check_arch(document, arch, source=path)
    entries = tuple(
        RegisterInfo.from_mapping(entry, arch=arch, context=f"{path}.entries[{index}]")
        for index, entry in enumerate(_entries(document, source=path))
    )
    _check_unique(entries, source=path)
    return entries


@lru_cache(maxsize=None)
def _directive_table(stem: str, assembler: Assembler) -> tuple[DirectiveInfo, ...]:
    path, document = _load(DIRECTIVES, stem)
    declared = expect_string(document.get("assembler"), key="assembler", context=str(path))
    if parse_assembler(declared, context=str(path)) is not assembler:
        raise CatalogIntegrityError(f"{path}: declares assembler '{declared}', expected '{assembler.value}'")
    entries = tuple(
        DirectiveInfo.from_mapping(entry, assembler=assembler, context=f"{path}.entries[{index}]")
        for index, entry in enumerate(_entries(document, source=path))
    )
    _check_unique(entries, source=path)
    return entries


def _load(kind: DocumentKind, stem: str) -> tuple[Path, Mapping[str, JSONValue]]:
    path = document_path(kind, stem)
    document = load_document(path)
    default_schemas().validate(kind, document, source=path)
    mapping = expect_mapping(document, key="<root>", context=str(path))
    version = expect_string(mapping.get("schemaVersion"), key="schemaVersion", context=str(path))
    if version != DOCUMENT_SCHEMA_VERSION:
        raise CatalogIntegrityError(
            f"{path}: unsupported schemaVersion '{version}', expected '{DOCUMENT_SCHEMA_VERSION}'"
        )
    declared_kind = expect_string(mapping.get("kind"), key="kind", context=str(path))
    if declared_kind != kind:
        raise CatalogIntegrityError(f"{path}: declares kind '{declared_kind}', expected '{kind}'")
    return path, mapping


def _entries(document: Mapping[str, JSONValue], *, source: Path) -> tuple[Mapping[str, JSONValue], ...]:
    return mapping_array(document.get("entries"), key="entries", context=str(source))


def _check_arch(document: Mapping[str, JSONValue], arch: Arch, *, source: Path) -> None:
    declared = expect_string(document.get("arch"), key="arch", context=str(source))
    if parse_arch(declared, context=str(source)) is not arch:
        raise CatalogIntegrityError(f"{source}: declares arch '{declared}', expected '{arch.value}'")


def _check_unique(entries: Iterable[InstructionInfo | RegisterInfo | DirectiveInfo], *, source: Path) -> None:
    seen: set[str] = set()
    for entry in entries:
        if entry.name in seen:
            raise CatalogIntegrityError(f"{source}: duplicate entry '{entry.name}'")
        seen.add(entry.name)


__all__ = ["directive_entries", "instruction_entries", "register_entries"]
