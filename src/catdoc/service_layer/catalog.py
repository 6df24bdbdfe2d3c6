"""Listings and detail views of snapshot contents.

`list_*` functions filter and paginate plain entity sequences. `show_*`
functions resolve one entity by id in a `KnowledgeGraph` and gather what is
connected to it.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from catdoc.domain.entities import Category, CategoryObject, Functor, Morphism
from catdoc.domain.snapshot import KnowledgeGraph

from .views import (
    CategorySummary,
    functor_dict,
    morphism_dict,
    object_dict,
    to_dict,
)

T = TypeVar("T", CategoryObject, Morphism, CategorySummary)


@dataclass(frozen=True, slots=True)
class Listing(Generic[T]):
    """One page of a filtered listing.

    Attributes:
        items: The entries of the page.
        total_count: Number of entries after filtering, before pagination.
    """

    items: tuple[T, ...] = field(default_factory=tuple)
    total_count: int = 0

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        return {
            "items": [to_dict(item) for item in self.items],
            "totalCount": self.total_count,
        }


def list_objects(
    objects: Iterable[CategoryObject],
    *,
    domain: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> Listing[CategoryObject]:
    """List objects, optionally restricted to one domain.

    Raises:
        ValueError: If `limit` or `offset` is negative.
    """
    filtered = [obj for obj in objects if domain is None or obj.domain == domain]
    return _paginate(filtered, limit, offset)


def list_morphisms(
    morphisms: Iterable[Morphism],
    *,
    source: str | None = None,
    target: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> Listing[Morphism]:
    """List morphisms, optionally restricted by source and/or target object.

    Raises:
        ValueError: If `limit` or `offset` is negative.
    """
    filtered = [
        m
        for m in morphisms
        if (source is None or m.source == source)
        and (target is None or m.target == target)
    ]
    return _paginate(filtered, limit, offset)


def list_categories(
    categories: Iterable[Category], *, limit: int | None = None, offset: int = 0
) -> Listing[CategorySummary]:
    """List category summaries.

    Raises:
        ValueError: If `limit` or `offset` is negative.
    """
    return _paginate([CategorySummary.of(c) for c in categories], limit, offset)


# ============================================================================
#                           Detail views
# ============================================================================


@dataclass(frozen=True, slots=True)
class ObjectDetail:
    """An object with the morphisms leaving and entering it."""

    object_id: str
    obj: CategoryObject | None = None
    outgoing: tuple[Morphism, ...] = field(default_factory=tuple)
    incoming: tuple[Morphism, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        return self.obj is not None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        if self.obj is None:
            return {"found": False, "id": self.object_id}
        return {
            "found": True,
            "object": object_dict(self.obj),
            "outgoingMorphisms": [morphism_dict(m) for m in self.outgoing],
            "incomingMorphisms": [morphism_dict(m) for m in self.incoming],
        }


@dataclass(frozen=True, slots=True)
class CategoryDetail:
    """A category with all its objects and morphisms."""

    category_id: str
    category: Category | None = None

    @property
    def found(self) -> bool:
        return self.category is not None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        if self.category is None:
            return {"found": False, "id": self.category_id}
        return {
            "found": True,
            "category": {"id": self.category.id, "name": self.category.name},
            "objectCount": len(self.category.objects),
            "morphismCount": len(self.category.morphisms),
            "objects": [object_dict(o) for o in self.category.objects],
            "morphisms": [morphism_dict(m) for m in self.category.morphisms],
        }


@dataclass(frozen=True, slots=True)
class FunctorDetail:
    """A functor with its mapping tables as ordered (source, target) pairs."""

    functor_id: str
    functor: Functor | None = None

    @property
    def found(self) -> bool:
        return self.functor is not None

    @property
    def object_mappings(self) -> list[tuple[str, str]]:
        if self.functor is None:
            return []
        return list(self.functor.object_mapping.items())

    @property
    def morphism_mappings(self) -> list[tuple[str, str]]:
        if self.functor is None:
            return []
        return list(self.functor.morphism_mapping.items())

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        if self.functor is None:
            return {"found": False, "id": self.functor_id}
        return {
            "found": True,
            "functor": functor_dict(self.functor),
            "objectMappings": [
                {"source": s, "target": t} for s, t in self.object_mappings
            ],
            "morphismMappings": [
                {"source": s, "target": t} for s, t in self.morphism_mappings
            ],
        }


def show_object(object_id: str, graph: KnowledgeGraph) -> ObjectDetail:
    """Resolve `object_id` and collect its morphisms across all categories.

    The object is the first one with that id in snapshot order. Self-loops
    appear both as outgoing and as incoming morphisms.
    """
    obj = graph.find_object(object_id)
    if obj is None:
        return ObjectDetail(object_id)
    morphisms = graph.all_morphisms()
    return ObjectDetail(
        object_id,
        obj,
        outgoing=tuple(m for m in morphisms if m.source == object_id),
        incoming=tuple(m for m in morphisms if m.target == object_id),
    )


def show_category(category_id: str, graph: KnowledgeGraph) -> CategoryDetail:
    return CategoryDetail(category_id, graph.get_category(category_id))


def show_functor(functor_id: str, graph: KnowledgeGraph) -> FunctorDetail:
    return FunctorDetail(functor_id, graph.get_functor(functor_id))


def _paginate(items: list[T], limit: int | None, offset: int) -> Listing[T]:
    if offset < 0:
        raise ValueError("offset must be >= 0")
    if limit is not None and limit < 0:
        raise ValueError("limit must be >= 0")
    page = items[offset:] if limit is None else items[offset : offset + limit]
    return Listing(tuple(page), len(items))
