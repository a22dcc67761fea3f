# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Name-indexed catalog of instructions, registers and directives."""

from __future__ import annotations

from dataclasses import dataclass, field

from .models import DirectiveInfo, InstructionInfo, RegisterInfo


@dataclass(slots=True)
class Catalog:
    """Three independent name→descriptor tables owned by one invocation."""

    instructions: dict[str, InstructionInfo] = field(default_factory=dict)
    registers: dict[str, RegisterInfo] = field(default_factory=dict)
    directives: dict[str, DirectiveInfo] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.instructions) + len(self.registers) + len(self.directives)

    def summary(self) -> str:
        """Return a ``key=value`` summary of table sizes for debug output."""

        return (
            f"instructions={len(self.instructions)} "
            f"registers={len(self.registers)} "
            f"directives={len(self.directives)}"
        )


__all__ = ["Catalog"]
