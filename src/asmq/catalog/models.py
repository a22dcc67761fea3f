# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Descriptor records stored in the catalog."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from ..types import Arch, Assembler
from .errors import CatalogIntegrityError
from .types import JSONValue
from .utils import expect_string, mapping_array, optional_string, string_array


def _enum_value(enum_cls: type[Arch] | type[Assembler], raw: str, *, context: str) -> Arch | Assembler:
    try:
        return enum_cls(raw)
    except ValueError as exc:
        raise CatalogIntegrityError(f"{context}: unknown {enum_cls.__name__.lower()} '{raw}'") from exc


@dataclass(frozen=True, slots=True)
class InstructionInfo:
    """Instruction (opcode or pseudo-instruction) of one architecture."""

    name: str
    arch: Arch
    summary: str
    forms: tuple[str, ...] = ()
    aliases: tuple[str, ...] = ()
    url: str | None = None
    dialect: Assembler | None = None

    @staticmethod
    def from_mapping(
        data: Mapping[str, JSONValue],
        *,
        arch: Arch,
        dialect: Assembler | None,
        context: str,
    ) -> InstructionInfo:
        """Create an instruction descriptor from a document entry.

        Args:
            data: Entry mapping taken from an instruction document.
            arch: Architecture declared by the enclosing document.
            dialect: Overlay assembler declared by the document, if any.
            context: Human-readable context used in error messages.

        Returns:
            InstructionInfo: Frozen descriptor.
        """

        return InstructionInfo(
            name=expect_string(data.get("name"), key="name", context=context),
            arch=arch,
            summary=expect_string(data.get("summary"), key="summary", context=context),
            forms=string_array(data.get("forms"), key="forms", context=context),
            aliases=string_array(data.get("aliases"), key="aliases", context=context),
            url=optional_string(data.get("url"), key="url", context=context),
            dialect=dialect,
        )


@dataclass(frozen=True, slots=True)
class RegisterBit:
    """Named bit (or bit range) within a register."""

    bit: str
    label: str
    description: str


@dataclass(frozen=True, slots=True)
class RegisterInfo:
    """Register of one architecture."""

    name: str
    arch: Arch
    description: str
    reg_type: str | None = None
    width: str | None = None
    bits: tuple[RegisterBit, ...] = ()
    url: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, arch: Arch, context: str) -> RegisterInfo:
        """Create a register descriptor from a document entry."""

        bits = tuple(
            RegisterBit(
                bit=expect_string(entry.get("bit"), key="bit", context=f"{context}.bits"),
                label=expect_string(entry.get("label"), key="label", context=f"{context}.bits"),
                description=optional_string(entry.get("description"), key="description", context=context) or "",
            )
            for entry in mapping_array(data.get("bits"), key="bits", context=context)
        )
        return RegisterInfo(
            name=expect_string(data.get("name"), key="name", context=context),
            arch=arch,
            description=expect_string(data.get("description"), key="description", context=context),
            reg_type=optional_string(data.get("type"), key="type", context=context),
            width=optional_string(data.get("width"), key="width", context=context),
            bits=bits,
            url=optional_string(data.get("url"), key="url", context=context),
        )


@dataclass(frozen=True, slots=True)
class DirectiveInfo:
    """Assembler directive (pseudo-op) of one toolchain."""

    name: str
    assembler: Assembler
    description: str
    signatures: tuple[str, ...] = ()
    url: str | None = None

    @staticmethod
    def from_mapping(data: Mapping[str, JSONValue], *, assembler: Assembler, context: str) -> DirectiveInfo:
        """Create a directive descriptor from a document entry."""

        return DirectiveInfo(
            name=expect_string(data.get("name"), key="name", context=context),
            assembler=assembler,
            description=expect_string(data.get("description"), key="description", context=context),
            signatures=string_array(data.get("signatures"), key="signatures", context=context),
            url=optional_string(data.get("url"), key="url", context=context),
        )


def parse_arch(raw: str, *, context: str) -> Arch:
    """Return the :class:`Arch` named by ``raw`` or raise a catalog error."""

    return Arch(_enum_value(Arch, raw, context=context))


def parse_assembler(raw: str, *, context: str) -> Assembler:
    """Return the :class:`Assembler` named by ``raw`` or raise a catalog error."""

    return Assembler(_enum_value(Assembler, raw, context=context))


__all__ = [
    "DirectiveInfo",
    "InstructionInfo",
    "RegisterBit",
    "RegisterInfo",
    "parse_arch",
    "parse_assembler",
]
