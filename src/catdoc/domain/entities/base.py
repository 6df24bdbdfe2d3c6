"""Shared construction helpers for immutable entities.

Entities are frozen dataclasses. Their `__post_init__` hooks use the helpers in
this module to validate required strings and to replace caller-supplied
collections with private, read-only copies.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from catdoc.domain.errors import ValidationError

IDENTITY_PREFIX = "id-"  # pragma: no mutate


def identity_id(object_id: str) -> str:
    """Return the conventional id of the identity morphism on `object_id`."""
    return f"{IDENTITY_PREFIX}{object_id}"


def require_non_empty(kind: str, field: str, value: object) -> str:
    """Return `value` unchanged if it is a non-blank string.

    Args:
        kind: Entity kind used in the error message (e.g. "morphism").
        field: Name of the field being validated.
        value: The candidate value.

    Returns:
        The validated string.

    Raises:
        ValidationError: If `value` is not a string or is empty/whitespace.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(kind, field)
    return value


def freeze_mapping(
    kind: str, field: str, mapping: Mapping[str, str] | None
) -> Mapping[str, str]:
    """Copy an id→id mapping into a read-only view.

    Raises:
        ValidationError: If `mapping` is not a mapping, or if any key or value
            is not a non-empty string.
    """
    if mapping is None:
        return MappingProxyType({})
    if not isinstance(mapping, Mapping):
        raise ValidationError(kind, field, f"{field} must be a mapping")
    for key, value in mapping.items():
        if not _is_id(key) or not _is_id(value):
            raise ValidationError(
                kind,
                field,
                f"{field} must map non-empty strings to non-empty strings, "
                f"got {key!r}: {value!r}",
            )
    return MappingProxyType(dict(mapping))


def freeze_metadata(kind: str, metadata: Mapping[str, Any] | None) -> Mapping[str, Any]:
    """Deep-copy metadata into nested read-only structures.

    Nested mappings become read-only views and lists become tuples, so the
    stored value cannot be altered through the entity.

    Raises:
        ValidationError: If `metadata` is not a mapping.
    """
    if metadata is None:
        return MappingProxyType({})
    if not isinstance(metadata, Mapping):
        raise ValidationError(kind, "metadata", "metadata must be a mapping")
    return _freeze(metadata)


def thaw(value: Any) -> Any:
    """Return a plain, mutable deep copy of a frozen metadata value."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [thaw(item) for item in value]
    return copy.deepcopy(value)


def _is_id(value: object) -> bool:
    return isinstance(value, str) and bool(value.strip())


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return copy.deepcopy(value)
