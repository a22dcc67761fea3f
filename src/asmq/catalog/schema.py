# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Schema loading utilities for validating knowledge-base documents."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from jsonschema import Draft202012Validator

from .errors import CatalogValidationError
from .io import SCHEMA_ROOT, load_schema
from .types import DIRECTIVES, INSTRUCTIONS, REGISTERS, DocumentKind, JSONValue

_SCHEMA_FILES: dict[DocumentKind, str] = {
    INSTRUCTIONS: "instruction_document.schema.json",
    REGISTERS: "register_document.schema.json",
    DIRECTIVES: "directive_document.schema.json",
}


@dataclass(slots=True)
class SchemaRepository:
    """Hold one Draft 2020-12 validator per document kind."""

    schema_root: Path
    validators: dict[DocumentKind, Draft202012Validator]

    @classmethod
    def load(cls, schema_root: Path | None = None) -> SchemaRepository:
        """Load schema validators from disk.

        Args:
            schema_root: Optional override for the schema directory.

        Returns:
            SchemaRepository: Repository configured with a validator per document kind.
        """

        resolved_root = schema_root or SCHEMA_ROOT
        validators = {
            kind: Draft202012Validator(load_schema(resolved_root / filename))
            for kind, filename in _SCHEMA_FILES.items()
        }
        return cls(schema_root=resolved_root, validators=validators)

    def validate(self, kind: DocumentKind, document: JSONValue, *, source: Path) -> None:
        """Validate ``document`` against the schema registered for ``kind``.

        Args:
            kind: Document kind selecting the schema.
            document: Parsed JSON payload.
            source: Path of the document, used in error messages.

        Raises:
            CatalogValidationError: If the document violates the schema.
        """

        validator = self.validators[kind]
        errors = sorted(validator.iter_errors(document), key=lambda error: [str(part) for part in error.path])
        if errors:
            details = "; ".join(
                f"{'/'.join(str(part) for part in error.path) or '<root>'}: {error.message}" for error in errors
            )
            raise CatalogValidationError(f"{source}: {details}")


@lru_cache(maxsize=1)
def default_schemas() -> SchemaRepository:
    """Return the repository bound to the packaged schema directory."""

    return SchemaRepository.load()


__all__ = ["SchemaRepository", "default_schemas"]
