# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while reading the static knowledge base."""

from __future__ import annotations


class CatalogValidationError(RuntimeError):
    """Raised when a knowledge-base document fails schema validation."""


class CatalogIntegrityError(RuntimeError):
    """Raised when a document is unreadable or violates semantic checks."""


__all__ = ["CatalogIntegrityError", "CatalogValidationError"]
