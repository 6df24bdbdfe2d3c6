"""Composition of morphisms and functors.

Composition in a category is a partial operation: a pair that cannot be
composed yields ``None`` rather than raising.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from catdoc.domain.entities import Functor, Morphism

logger = logging.getLogger(__name__)

COMPOSED_PREFIX = "composed"  # pragma: no mutate
COMPOSE_SYMBOL = "∘"  # pragma: no mutate


def compose_morphisms(f: Morphism, g: Morphism) -> Morphism | None:
    """Compose two morphisms into `g∘f`.

    Args:
        f: The morphism applied first (`A → B`).
        g: The morphism applied second (`B → C`).

    Returns:
        The composite `A → C` with id `composed-<f.id>-<g.id>` and metadata
        recording both operands under ``composedFrom``, or None if
        `f.target != g.source`.
    """
    if f.target != g.source:
        logger.debug(
            "Morphisms %s and %s are not composable (%s != %s)",
            f.id,
            g.id,
            f.target,
            g.source,
        )
        return None

    return Morphism(
        id=f"{COMPOSED_PREFIX}-{f.id}-{g.id}",
        name=f"{g.name}{COMPOSE_SYMBOL}{f.name}",
        source=f.source,
        target=g.target,
        metadata={"composedFrom": [f.id, g.id]},
    )


def compose_functors(F: Functor, G: Functor) -> Functor | None:  # pylint: disable=invalid-name
    """Compose two functors into `G∘F`.

    Object and morphism mappings are chained: `a ↦ F(a) ↦ G(F(a))`. Entries
    whose intermediate image is not mapped by `G` are dropped from the result
    without notice.

    Args:
        F: The functor applied first.
        G: The functor applied second.

    Returns:
        The composite functor from `F.source_category` to `G.target_category`,
        or None if `F.target_category != G.source_category`.
    """
    if F.target_category != G.source_category:
        logger.debug(
            "Functors %s and %s are not composable (%s != %s)",
            F.id,
            G.id,
            F.target_category,
            G.source_category,
        )
        return None

    return Functor(
        id=f"{COMPOSED_PREFIX}-{F.id}-{G.id}",
        name=f"{G.name}{COMPOSE_SYMBOL}{F.name}",
        source_category=F.source_category,
        target_category=G.target_category,
        object_mapping=_chain(F.object_mapping, G.object_mapping),
        morphism_mapping=_chain(F.morphism_mapping, G.morphism_mapping),
    )


def compose_morphism_chain(morphisms: Sequence[Morphism]) -> Morphism | None:
    """Compose a sequence of morphisms left to right.

    `[f, g, h]` yields `h∘g∘f`. A single morphism is returned unchanged.

    Returns:
        The composite, or None if the sequence is empty or any adjacent pair
        is not composable.
    """
    if not morphisms:
        return None
    result: Morphism | None = morphisms[0]
    for morphism in morphisms[1:]:
        if result is None:
            break
        result = compose_morphisms(result, morphism)
    return result


def compose_functor_chain(functors: Sequence[Functor]) -> Functor | None:
    """Compose a sequence of functors left to right.

    Returns:
        The composite, or None if the sequence is empty or any adjacent pair
        is not composable.
    """
    if not functors:
        return None
    result: Functor | None = functors[0]
    for functor in functors[1:]:
        if result is None:
            break
        result = compose_functors(result, functor)
    return result


def _chain(first: Mapping[str, str], second: Mapping[str, str]) -> dict[str, str]:
    return {
        key: second[intermediate]
        for key, intermediate in first.items()
        if intermediate in second
    }
