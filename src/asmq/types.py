# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Closed sets of supported instruction-set architectures and assemblers."""

from __future__ import annotations

from enum import Enum


class Arch(str, Enum):
    """Enumerate the instruction-set families known to the knowledge base."""

    X86 = "x86"
    X86_64 = "x86-64"
    X86_AND_X86_64 = "x86/x86-64"
    ARM = "arm"
    ARM64 = "arm64"
    RISCV = "riscv"
    Z80 = "z80"
    MOS6502 = "6502"
    POWER_ISA = "power-isa"
    AVR = "avr"
    MIPS = "mips"

    def expand(self) -> tuple[Arch, ...]:
        """Return the concrete architectures this configuration value stands for.

        Returns:
            tuple[Arch, ...]: ``(x86, x86-64)`` for the combined shorthand,
            otherwise a one-element tuple holding ``self``.
        """

        if self is Arch.X86_AND_X86_64:
            return (Arch.X86, Arch.X86_64)
        return (self,)

    def covers(self, other: Arch) -> bool:
        """Return ``True`` when ``other`` is one of the architectures ``self`` expands to."""

        return other in self.expand()


class Assembler(str, Enum):
    """Enumerate the assembler toolchains and dialects with directive tables."""

    GAS = "gas"
    GO = "go"
    MASM = "masm"
    NASM = "nasm"
    CA65 = "ca65"
    AVR = "avr"
    FASM = "fasm"
    MARS = "mars"

    @property
    def overlay_arch(self) -> Arch | None:
        """Return the base architecture this dialect overlays, if any."""

        if self is Assembler.MARS:
            return Arch.MIPS
        return None


__all__ = ["Arch", "Assembler"]
