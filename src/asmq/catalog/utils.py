# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Coercion helpers for turning validated JSON into descriptor fields."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .errors import CatalogIntegrityError
from .types import JSONValue


def expect_string(value: JSONValue | None, *, key: str, context: str) -> str:
    """Return ``value`` as ``str`` or raise a catalog error.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        str: The string value.

    Raises:
        CatalogIntegrityError: If ``value`` is not a string.
    """

    if not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string")
    return value


def optional_string(value: JSONValue | None, *, key: str, context: str) -> str | None:
    """Return ``value`` as an optional string, rejecting other types."""

    if value is None:
        return None
    if not isinstance(value, str):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be a string if present")
    return value


def string_array(value: JSONValue | None, *, key: str, context: str) -> tuple[str, ...]:
    """Return ``value`` as a tuple of strings.

    Args:
        value: Raw JSON value extracted from the document.
        key: Attribute name used in error messages.
        context: Human-friendly prefix describing the validation context.

    Returns:
        tuple[str, ...]: Every string entry from ``value``; empty when absent.

    Raises:
        CatalogIntegrityError: If ``value`` is not a sequence of strings.
    """

    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an array of strings")
    result: list[str] = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            raise CatalogIntegrityError(f"{context}: expected '{key}[{index}]' to be a string")
        result.append(item)
    return tuple(result)


def expect_mapping(value: JSONValue | None, *, key: str, context: str) -> Mapping[str, JSONValue]:
    """Return ``value`` as a mapping of JSON values or raise an error."""

    if not isinstance(value, Mapping):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an object")
    return value


def mapping_array(value: JSONValue | None, *, key: str, context: str) -> tuple[Mapping[str, JSONValue], ...]:
    """Return ``value`` as a tuple of JSON objects; empty when absent."""

    if value is None:
        return ()
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes, bytearray)):
        raise CatalogIntegrityError(f"{context}: expected '{key}' to be an array of objects")
    return tuple(
        expect_mapping(item, key=f"{key}[{index}]", context=context) for index, item in enumerate(value)
    )


__all__ = [
    "expect_mapping",
    "expect_string",
    "mapping_array",
    "optional_string",
    "string_array",
]
