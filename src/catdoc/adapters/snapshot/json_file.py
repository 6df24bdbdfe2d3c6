"""JSON-file snapshot source.

The document layout uses camelCase keys::

    {
      "categories": [
        {"id": "...", "name": "...",
         "objects": [{"id", "title", "domain", "metadata"?, "content"?}],
         "morphisms": [{"id", "name", "source", "target", "metadata"?}]}
      ],
      "functors": [
        {"id", "name", "sourceCategory", "targetCategory",
         "objectMapping": {...}, "morphismMapping": {...}}
      ],
      "naturalTransformations": [
        {"id", "name", "sourceFunctor", "targetFunctor", "components": {...}}
      ]
    }

Every top-level key is optional and defaults to an empty list.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from catdoc.domain.entities import (
    Category,
    CategoryObject,
    Functor,
    Morphism,
    NaturalTransformation,
)
from catdoc.domain.errors import ValidationError
from catdoc.domain.snapshot import KnowledgeGraph
from catdoc.interfaces.errors import (
    SnapshotFormatError,
    SnapshotNotFoundError,
    SnapshotUnreadableError,
)
from catdoc.interfaces.snapshot_source import SnapshotSource

logger = logging.getLogger(__name__)


class JsonFileSnapshotSource(SnapshotSource):
    """SnapshotSource that decodes a single JSON document from disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        """Location of the JSON document."""
        return self._path

    def load(self) -> KnowledgeGraph:
        location = str(self._path)
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise SnapshotNotFoundError(location) from None
        except UnicodeDecodeError as e:
            raise SnapshotFormatError(location, "not valid UTF-8") from e
        except OSError as e:
            raise SnapshotUnreadableError(location, e.strerror or str(e)) from e

        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise SnapshotFormatError(location, f"invalid JSON ({e.msg})") from e

        try:
            graph = decode_knowledge_graph(document)
        except ValidationError as e:
            raise SnapshotFormatError(location, str(e)) from e
        except (KeyError, TypeError, AttributeError) as e:
            raise SnapshotFormatError(location, _describe(e)) from e

        logger.debug(
            "Loaded snapshot %s: %d categories, %d functors, %d natural transformations",
            location,
            len(graph.categories),
            len(graph.functors),
            len(graph.natural_transformations),
        )
        return graph


def decode_knowledge_graph(document: dict[str, Any]) -> KnowledgeGraph:
    """Build a KnowledgeGraph from a decoded JSON document.

    Raises:
        TypeError: If the document is not a JSON object.
        KeyError: If a required key is missing.
        ValidationError: If an entity field is invalid.
    """
    if not isinstance(document, dict):
        raise TypeError("snapshot root must be a JSON object")
    return KnowledgeGraph(
        categories=tuple(_category(c) for c in document.get("categories", [])),
        functors=tuple(_functor(f) for f in document.get("functors", [])),
        natural_transformations=tuple(
            _natural_transformation(nt)
            for nt in document.get("naturalTransformations", [])
        ),
    )


def _category(data: dict[str, Any]) -> Category:
    return Category(
        id=data["id"],
        name=data["name"],
        objects=tuple(_object(o) for o in data.get("objects", [])),
        morphisms=tuple(_morphism(m) for m in data.get("morphisms", [])),
    )


def _object(data: dict[str, Any]) -> CategoryObject:
    return CategoryObject(
        id=data["id"],
        title=data["title"],
        domain=data["domain"],
        metadata=data.get("metadata") or {},
        content=data.get("content"),
    )


def _morphism(data: dict[str, Any]) -> Morphism:
    return Morphism(
        id=data["id"],
        name=data["name"],
        source=data["source"],
        target=data["target"],
        metadata=data.get("metadata") or {},
    )


def _functor(data: dict[str, Any]) -> Functor:
    return Functor(
        id=data["id"],
        name=data["name"],
        source_category=data["sourceCategory"],
        target_category=data["targetCategory"],
        object_mapping=data.get("objectMapping") or {},
        morphism_mapping=data.get("morphismMapping") or {},
    )


def _natural_transformation(data: dict[str, Any]) -> NaturalTransformation:
    return NaturalTransformation(
        id=data["id"],
        name=data["name"],
        source_functor=data["sourceFunctor"],
        target_functor=data["targetFunctor"],
        components=data.get("components") or {},
    )


def _describe(error: Exception) -> str:
    if isinstance(error, KeyError):
        return f"missing required key {error.args[0]!r}"
    return str(error)
