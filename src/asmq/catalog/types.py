# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared type aliases and constants for the knowledge-base documents."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Final, Literal, TypeAlias

JSONPrimitive: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONPrimitive | Sequence["JSONValue"] | Mapping[str, "JSONValue"]

DocumentKind = Literal["instructions", "registers", "directives"]
INSTRUCTIONS: Final[DocumentKind] = "instructions"
REGISTERS: Final[DocumentKind] = "registers"
DIRECTIVES: Final[DocumentKind] = "directives"

DOCUMENT_SCHEMA_VERSION: Final[str] = "1.0.0"

__all__ = [
    "DIRECTIVES",
    "DOCUMENT_SCHEMA_VERSION",
    "DocumentKind",
    "INSTRUCTIONS",
    "JSONPrimitive",
    "JSONValue",
    "REGISTERS",
]
