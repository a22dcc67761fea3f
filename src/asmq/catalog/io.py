# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""I/O helpers for reading knowledge-base JSON documents and schemas."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Final, cast

from .errors import CatalogIntegrityError
from .types import JSONValue

DATA_ROOT: Final[Path] = Path(__file__).resolve().parents[1] / "data"
SCHEMA_ROOT: Final[Path] = DATA_ROOT / "schema"


def load_schema(path: Path) -> Mapping[str, JSONValue]:
    """Load a JSON schema from disk and ensure it is a JSON object.

    Args:
        path: Filesystem path to the schema file.

    Returns:
        Mapping[str, JSONValue]: Parsed JSON schema mapping.

    Raises:
        FileNotFoundError: If the schema file does not exist.
        CatalogIntegrityError: If the schema cannot be parsed or is not a JSON object.
    """

    mapping = _read_json(path, what="JSON schema")
    if not isinstance(mapping, Mapping):
        raise CatalogIntegrityError(f"{path}: expected a JSON object")
    return mapping


def load_document(path: Path) -> JSONValue:
    """Load a knowledge-base document from disk.

    Args:
        path: Filesystem path to the JSON document.

    Returns:
        JSONValue: Parsed JSON value extracted from the document.

    Raises:
        FileNotFoundError: If the JSON document is missing.
        CatalogIntegrityError: If the document cannot be parsed or is not valid JSON.
    """

    return _read_json(path, what="knowledge-base JSON")


def document_path(kind: str, stem: str, *, data_root: Path = DATA_ROOT) -> Path:
    """Return the on-disk location of the ``kind`` document named ``stem``."""

    return data_root / kind / f"{stem}.json"


def _read_json(path: Path, *, what: str) -> JSONValue:
    if not path.exists():
        raise FileNotFoundError(path)
    with path.open("r", encoding="utf-8") as stream:
        try:
            return cast(JSONValue, json.load(stream))
        except json.JSONDecodeError as exc:
            raise CatalogIntegrityError(f"{path}: failed to parse {what}") from exc


__all__ = ["DATA_ROOT", "SCHEMA_ROOT", "document_path", "load_document", "load_schema"]
