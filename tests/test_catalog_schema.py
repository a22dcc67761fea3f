# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for schema validation and document loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from asmq.catalog import CatalogIntegrityError, CatalogValidationError
from asmq.catalog.io import DATA_ROOT, document_path, load_document, load_schema
from asmq.catalog.schema import SchemaRepository, default_schemas
from asmq.catalog.types import DIRECTIVES, INSTRUCTIONS, REGISTERS


def test_packaged_documents_validate() -> None:
    schemas = default_schemas()
    for kind in (INSTRUCTIONS, REGISTERS, DIRECTIVES):
        paths = sorted((DATA_ROOT / kind).glob("*.json"))
        assert paths, kind
        for path in paths:
            schemas.validate(kind, load_document(path), source=path)


def test_document_path_layout() -> None:
    assert document_path(INSTRUCTIONS, "mips_mars") == DATA_ROOT / "instructions" / "mips_mars.json"


def test_validation_reports_offending_location() -> None:
    document = {
        "schemaVersion": "1.0.0",
        "kind": "instructions",
        "arch": "x86",
        "entries": [{"name": "mov"}],
    }

    with pytest.raises(CatalogValidationError) as excinfo:
        default_schemas().validate(INSTRUCTIONS, document, source=Path("broken.json"))

    message = str(excinfo.value)
    assert message.startswith("broken.json: ")
    assert "entries/0" in message
    assert "summary" in message


def test_repository_loads_from_explicit_root() -> None:
    repository = SchemaRepository.load(DATA_ROOT / "schema")

    assert set(repository.validators) == {INSTRUCTIONS, REGISTERS, DIRECTIVES}


def test_load_document_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogIntegrityError):
        load_document(path)


def test_load_document_round_trips_valid_json(tmp_path: Path) -> None:
    path = tmp_path / "doc.json"
    path.write_text(json.dumps({"kind": "directives"}), encoding="utf-8")

    assert load_document(path) == {"kind": "directives"}


def test_load_schema_requires_an_object(tmp_path: Path) -> None:
    path = tmp_path / "list.schema.json"
    path.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(CatalogIntegrityError, match="expected a JSON object"):
        load_schema(path)
