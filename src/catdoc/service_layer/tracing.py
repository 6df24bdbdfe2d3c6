"""Presenter-ready trace results built on the traversal functions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from catdoc.domain.entities import Category, Functor, Morphism
from catdoc.domain.snapshot import KnowledgeGraph

from .traversal import MAX_DEPTH, Step, find_all_paths, find_domain_path, find_path
from .views import morphism_dict

StepKind = Literal["functor", "natural_transformation"]


@dataclass(frozen=True, slots=True)
class PathTrace:
    """Paths found between two objects of one category."""

    source: str
    target: str
    paths: tuple[tuple[Morphism, ...], ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        """True when at least one path (possibly empty) was found."""
        return bool(self.paths)

    @property
    def shortest(self) -> tuple[Morphism, ...] | None:
        """The first path of minimal length, or None when nothing was found."""
        if not self.paths:
            return None
        return min(self.paths, key=len)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        shortest = self.shortest
        return {
            "source": self.source,
            "target": self.target,
            "found": self.found,
            "paths": [[morphism_dict(m) for m in path] for path in self.paths],
            "shortestPathLength": None if shortest is None else len(shortest),
        }


@dataclass(frozen=True, slots=True)
class DomainStep:
    """A single functor or natural-transformation step of a domain path."""

    kind: StepKind
    id: str
    name: str


@dataclass(frozen=True, slots=True)
class DomainRoute:
    """A rendered route into the target category."""

    steps: tuple[DomainStep, ...]
    result_object: str


@dataclass(frozen=True, slots=True)
class DomainTrace:
    """Routes found from an object into a target category."""

    source: str
    target_category: str
    routes: tuple[DomainRoute, ...] = field(default_factory=tuple)

    @property
    def found(self) -> bool:
        """True when at least one route was found."""
        return bool(self.routes)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        return {
            "source": self.source,
            "targetCategory": self.target_category,
            "found": self.found,
            "paths": [
                {
                    "steps": [
                        {"type": s.kind, "id": s.id, "name": s.name}
                        for s in route.steps
                    ],
                    "resultObject": route.result_object,
                }
                for route in self.routes
            ],
        }


def trace_path(
    source: str,
    target: str,
    category: Category,
    *,
    find_all: bool = False,
    max_depth: int = MAX_DEPTH,
) -> PathTrace:
    """Trace the path(s) from `source` to `target` inside `category`.

    When `source == target` the trace is always found: its single path is
    the object's identity (first self-loop) if one exists, otherwise the
    empty path.

    Args:
        source: Id of the start object.
        target: Id of the end object.
        category: The category to search.
        find_all: Enumerate all simple paths instead of one shortest path.
        max_depth: Depth bound for `find_all`.

    Returns:
        The trace.
    """
    if source == target:
        identity = category.identity_of(source)
        path = (identity,) if identity is not None else ()
        return PathTrace(source, target, (path,))

    if find_all:
        paths = find_all_paths(source, target, category, max_depth)
    else:
        single = find_path(source, target, category)
        paths = [single] if single else []
    return PathTrace(source, target, tuple(tuple(p) for p in paths))


def trace_domain_path(
    source_object: str, target_category: str, graph: KnowledgeGraph
) -> DomainTrace:
    """Trace routes from `source_object` into `target_category`.

    Returns:
        A trace with no routes when the object belongs to no category; a
        single zero-step route when it already lives in the target category;
        otherwise the routes found by `find_domain_path`.
    """
    home = graph.category_of(source_object)
    if home is None:
        return DomainTrace(source_object, target_category)
    if home.id == target_category:
        return DomainTrace(
            source_object,
            target_category,
            (DomainRoute(steps=(), result_object=source_object),),
        )

    found = find_domain_path(
        source_object,
        target_category,
        graph.categories,
        graph.functors,
        graph.natural_transformations,
    )
    routes = tuple(
        DomainRoute(
            steps=tuple(_render_step(step) for step in path.steps),
            result_object=path.result_object,
        )
        for path in found
    )
    return DomainTrace(source_object, target_category, routes)


def _render_step(step: Step) -> DomainStep:
    kind: StepKind = (
        "functor" if isinstance(step, Functor) else "natural_transformation"
    )
    return DomainStep(kind=kind, id=step.id, name=step.name)
