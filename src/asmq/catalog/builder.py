# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Assemble a :class:`Catalog` from the effective architectures and assemblers."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..diagnostics import null_logger
from ..types import Arch, Assembler
from .populate import directive_entries, instruction_entries, register_entries
from .store import Catalog


def build_catalog(
    arches: Sequence[Arch],
    assemblers: Sequence[Assembler],
    *,
    logger: logging.Logger | None = None,
) -> Catalog:
    """Return a catalog populated from ``arches`` and ``assemblers``.

    Generic architecture passes run first, then directive passes, then the
    dialect overlays of any assembler that has one. Within each phase later
    contributors overwrite earlier ones that share a name, so overlay entries
    always win over the generic pass of their base architecture.

    Args:
        arches: Effective architectures in priority order.
        assemblers: Effective assemblers in priority order.
        logger: Diagnostic logger receiving per-pass debug output.

    Returns:
        Catalog: Freshly populated catalog.
    """

    log = logger or null_logger()
    catalog = Catalog()

    for arch in arches:
        instructions = instruction_entries(arch)
        registers = register_entries(arch)
        log.debug("populate arch=%s instructions=%d registers=%d", arch.value, len(instructions), len(registers))
        catalog.instructions.update(instructions)
        catalog.registers.update(registers)

    for assembler in assemblers:
        directives = directive_entries(assembler)
        log.debug("populate assembler=%s directives=%d", assembler.value, len(directives))
        catalog.directives.update(directives)

    for assembler in dict.fromkeys(assemblers):
        base_arch = assembler.overlay_arch
        if base_arch is None:
            continue
        overlay = instruction_entries(base_arch, assembler)
        log.debug("overlay assembler=%s arch=%s instructions=%d", assembler.value, base_arch.value, len(overlay))
        catalog.instructions.update(overlay)

    log.debug("catalog built %s", catalog.summary())
    return catalog


__all__ = ["build_catalog"]
