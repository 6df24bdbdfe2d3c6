"""Path search inside a category and across categories.

Every function here is a pure function of its arguments. Missing objects or
categories produce empty results, and the depth bound truncates search
silently so that cyclic graphs always terminate.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import TypeAlias

from catdoc.domain.entities import Category, Functor, Morphism, NaturalTransformation

logger = logging.getLogger(__name__)

MAX_DEPTH = 10
"""Upper bound on path length (in morphisms or steps) for every search."""

Step: TypeAlias = Functor | NaturalTransformation
Path: TypeAlias = list[Morphism]


@dataclass(frozen=True, slots=True)
class DomainPath:
    """A route from an object to a target category.

    Attributes:
        steps: Functors and natural transformations applied, in order.
        result_object: Id of the object reached in the target category.
    """

    steps: tuple[Step, ...]
    result_object: str


# ============================================================================
#                           Within a category
# ============================================================================


def find_path(source: str, target: str, category: Category) -> Path:
    """Find a shortest path of morphisms from `source` to `target`.

    Self-loops are not traversed. Breadth-first search guarantees the result
    is shortest in number of morphisms.

    Args:
        source: Id of the start object.
        target: Id of the end object.
        category: The category to search.

    Returns:
        The morphisms of the path in order. Empty when `source == target`
        (the trivial path), when either object is absent, or when `target` is
        unreachable.
    """
    if source == target:
        return []
    if not _has_endpoints(source, target, category):
        return []

    adjacency = _adjacency(category)
    visited: set[str] = set()
    queue: deque[tuple[str, Path]] = deque([(source, [])])

    while queue:
        object_id, path = queue.popleft()
        if object_id == target:
            return path
        if object_id in visited:
            continue
        visited.add(object_id)

        for morphism in adjacency.get(object_id, ()):
            if morphism.target not in visited:
                queue.append((morphism.target, [*path, morphism]))

    logger.debug("No path from %s to %s in category %s", source, target, category.id)
    return []


def find_all_paths(
    source: str, target: str, category: Category, max_depth: int = MAX_DEPTH
) -> list[Path]:
    """Enumerate every simple path from `source` to `target`.

    A simple path never visits the same object twice. Branches longer than
    `max_depth` morphisms are pruned. The walk uses an explicit stack, so the
    depth limit does not depend on the interpreter's recursion limit.

    Args:
        source: Id of the start object.
        target: Id of the end object.
        category: The category to search.
        max_depth: Maximum number of morphisms per path.

    Returns:
        All paths found, sorted by ascending length. Paths of equal length
        keep their depth-first discovery order.
    """
    if source == target:
        return []
    if not _has_endpoints(source, target, category):
        return []

    adjacency = _adjacency(category)
    paths: list[Path] = []
    path: Path = []
    on_path = {source}
    stack: list[Iterator[Morphism]] = [iter(adjacency.get(source, ()))]

    while stack:
        morphism = next(stack[-1], None)
        if morphism is None:
            stack.pop()
            if path:
                on_path.discard(path.pop().target)
            continue
        if morphism.target in on_path or len(path) >= max_depth:
            continue

        path.append(morphism)
        if morphism.target == target:
            paths.append(list(path))
            path.pop()
            continue
        on_path.add(morphism.target)
        stack.append(iter(adjacency.get(morphism.target, ())))

    paths.sort(key=len)
    return paths


# ============================================================================
#                           Across categories
# ============================================================================


def find_domain_path(
    source_object: str,
    target_category: str,
    categories: Sequence[Category],
    functors: Sequence[Functor],
    natural_transformations: Sequence[NaturalTransformation],
) -> list[DomainPath]:
    """Find routes from an object into a target category.

    Searches breadth-first over `(category id, object id)` states, visiting
    each state once. Functors move the state to their target category when
    they map the current object. Natural transformations never move the
    state; a step through one is recorded as a completed path only when the
    current category already is the target category.

    Args:
        source_object: Id of the object to start from.
        target_category: Id of the category to reach.
        categories: Categories available for the search.
        functors: Functors available for the search.
        natural_transformations: Natural transformations available for the search.

    Returns:
        Completed paths sorted by ascending step count. Empty when the source
        object belongs to no category. When the object already lives in the
        target category, the result includes a zero-step path to itself.
    """
    home = next((c for c in categories if c.has_object(source_object)), None)
    if home is None:
        logger.debug("Object %s is not in any category", source_object)
        return []

    paths: list[DomainPath] = []
    if home.id == target_category:
        paths.append(DomainPath(steps=(), result_object=source_object))

    functors_by_source: dict[str, list[Functor]] = {}
    for functor in functors:
        functors_by_source.setdefault(functor.source_category, []).append(functor)

    visited: set[tuple[str, str]] = set()
    queue: deque[tuple[str, str, tuple[Step, ...]]] = deque(
        [(home.id, source_object, ())]
    )

    while queue:
        category_id, object_id, steps = queue.popleft()
        if (category_id, object_id) in visited:
            continue
        visited.add((category_id, object_id))

        if category_id == target_category and steps:
            paths.append(DomainPath(steps=steps, result_object=object_id))
            continue
        if len(steps) >= MAX_DEPTH:
            continue

        for functor in functors_by_source.get(category_id, ()):
            mapped = functor.map_object(object_id)
            if mapped is not None:
                queue.append((functor.target_category, mapped, (*steps, functor)))

        # natural transformations keep the state; see docstring
        for nt in natural_transformations:
            if nt.get_component(object_id) is not None and category_id == target_category:
                paths.append(DomainPath(steps=(*steps, nt), result_object=object_id))

    paths.sort(key=lambda p: len(p.steps))
    return paths


# ============================================================================
#                           Helpers
# ============================================================================


def _has_endpoints(source: str, target: str, category: Category) -> bool:
    object_ids = category.object_ids
    return source in object_ids and target in object_ids


def _adjacency(category: Category) -> dict[str, list[Morphism]]:
    """Outgoing non-self-loop morphisms per object, in category order."""
    adjacency: dict[str, list[Morphism]] = {obj.id: [] for obj in category.objects}
    for morphism in category.morphisms:
        if not morphism.is_self_loop and morphism.source in adjacency:
            adjacency[morphism.source].append(morphism)
    return adjacency
