"""Lookups over a snapshot: free-text object search and mapping queries.

Searches never fail on a miss; each returns a result whose `found` property
tells the caller whether anything matched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Literal

from catdoc.domain.entities import CategoryObject, Functor, NaturalTransformation

from .views import object_dict

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 100
"""Maximum number of matches returned by `search_objects` unless overridden."""

MappingKind = Literal["object", "morphism"]


@dataclass(frozen=True, slots=True)
class ObjectSearch:
    """Objects matching a query, truncated to the requested limit.

    Attributes:
        query: The query as given.
        matches: The first matches, in snapshot order.
        total_matches: Number of matches before truncation.
    """

    query: str
    matches: tuple[CategoryObject, ...] = field(default_factory=tuple)
    total_matches: int = 0

    @property
    def found(self) -> bool:
        return self.total_matches > 0

    @property
    def truncated(self) -> bool:
        """True when more objects matched than were returned."""
        return self.total_matches > len(self.matches)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        return {
            "query": self.query,
            "matches": [object_dict(obj) for obj in self.matches],
            "totalMatches": self.total_matches,
        }


@dataclass(frozen=True, slots=True)
class FunctorLookup:
    """Image of an object or morphism id under a functor."""

    functor: str
    source_id: str
    mapped_to: str | None = None
    kind: MappingKind | None = None

    @property
    def found(self) -> bool:
        return self.mapped_to is not None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        return {
            "found": self.found,
            "functor": self.functor,
            "sourceId": self.source_id,
            "mappedTo": self.mapped_to,
            "type": self.kind,
        }


@dataclass(frozen=True, slots=True)
class ComponentLookup:
    """Component of a natural transformation at one object.

    The source and target functors are reported even when the component is
    missing.
    """

    natural_transformation: str
    object_id: str
    source_functor: str
    target_functor: str
    component: str | None = None

    @property
    def found(self) -> bool:
        return self.component is not None

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        return {
            "found": self.found,
            "naturalTransformation": self.natural_transformation,
            "objectId": self.object_id,
            "component": self.component,
            "sourceFunctor": self.source_functor,
            "targetFunctor": self.target_functor,
        }


def search_objects(
    objects: Iterable[CategoryObject],
    query: str = "",
    *,
    domain: str | None = None,
    limit: int = DEFAULT_SEARCH_LIMIT,
) -> ObjectSearch:
    """Find objects whose text contains `query`.

    An object matches when `query` is a case-insensitive substring of its id,
    title, domain and content joined by single spaces. A blank query matches
    every object. When `domain` is given only objects of exactly that domain
    are considered.

    Args:
        objects: Objects to search, in the order results should keep.
        query: Text to look for.
        domain: Exact domain filter, or None for all domains.
        limit: Maximum number of matches returned.

    Returns:
        The search result. `total_matches` counts every match, not just the
        returned ones.

    Raises:
        ValueError: If `limit` is negative.
    """
    if limit < 0:
        raise ValueError("limit must be >= 0")

    candidates = [obj for obj in objects if domain is None or obj.domain == domain]
    if query.strip():
        needle = query.lower()
        candidates = [obj for obj in candidates if needle in _searchable_text(obj)]

    logger.debug(
        "Search %r (domain=%s): %d match(es)", query, domain or "*", len(candidates)
    )
    return ObjectSearch(query, tuple(candidates[:limit]), len(candidates))


def search_by_functor(functor: Functor, source_id: str) -> FunctorLookup:
    """Look up the image of `source_id` under `functor`.

    The object mapping is consulted first, then the morphism mapping, so an
    id present in both resolves as an object.
    """
    mapped = functor.map_object(source_id)
    if mapped is not None:
        return FunctorLookup(functor.id, source_id, mapped, "object")
    mapped = functor.map_morphism(source_id)
    if mapped is not None:
        return FunctorLookup(functor.id, source_id, mapped, "morphism")
    return FunctorLookup(functor.id, source_id)


def search_by_natural_transformation(
    nt: NaturalTransformation, object_id: str
) -> ComponentLookup:
    """Look up the component of `nt` at `object_id`."""
    return ComponentLookup(
        nt.id,
        object_id,
        nt.source_functor,
        nt.target_functor,
        nt.get_component(object_id),
    )


def _searchable_text(obj: CategoryObject) -> str:
    return " ".join((obj.id, obj.title, obj.domain, obj.content or "")).lower()
