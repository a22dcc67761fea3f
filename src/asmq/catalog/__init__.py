# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Knowledge-base loading and catalog construction."""

from __future__ import annotations

from .builder import build_catalog
from .errors import CatalogIntegrityError, CatalogValidationError
from .models import DirectiveInfo, InstructionInfo, RegisterBit, RegisterInfo
from .populate import directive_entries, instruction_entries, register_entries
from .store import Catalog

__all__ = [
    "Catalog",
    "CatalogIntegrityError",
    "CatalogValidationError",
    "DirectiveInfo",
    "InstructionInfo",
    "RegisterBit",
    "RegisterInfo",
    "build_catalog",
    "directive_entries",
    "instruction_entries",
    "register_entries",
]
