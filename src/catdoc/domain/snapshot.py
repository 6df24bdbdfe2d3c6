"""Snapshot of a complete knowledge graph handed to the services."""

from __future__ import annotations

from dataclasses import dataclass, field

from .entities import (
    Category,
    CategoryObject,
    Functor,
    Morphism,
    NaturalTransformation,
)


@dataclass(frozen=True, slots=True)
class KnowledgeGraph:
    """Immutable bundle of categories, functors and natural transformations.

    Lookups return the first entity with a matching id, in snapshot order.
    No cross-reference checking is performed on construction.
    """

    categories: tuple[Category, ...] = field(default_factory=tuple)
    functors: tuple[Functor, ...] = field(default_factory=tuple)
    natural_transformations: tuple[NaturalTransformation, ...] = field(
        default_factory=tuple
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "categories", tuple(self.categories))
        object.__setattr__(self, "functors", tuple(self.functors))
        object.__setattr__(
            self, "natural_transformations", tuple(self.natural_transformations)
        )

    def get_category(self, category_id: str) -> Category | None:
        """Return the category with `category_id`, or None."""
        return next((c for c in self.categories if c.id == category_id), None)

    def get_functor(self, functor_id: str) -> Functor | None:
        """Return the functor with `functor_id`, or None."""
        return next((f for f in self.functors if f.id == functor_id), None)

    def get_natural_transformation(self, nt_id: str) -> NaturalTransformation | None:
        """Return the natural transformation with `nt_id`, or None."""
        return next((nt for nt in self.natural_transformations if nt.id == nt_id), None)

    def category_of(self, object_id: str) -> Category | None:
        """Return the first category containing `object_id`, or None."""
        return next((c for c in self.categories if c.has_object(object_id)), None)

    def all_objects(self) -> list[CategoryObject]:
        """Every object of every category, in snapshot order."""
        return [obj for category in self.categories for obj in category.objects]

    def all_morphisms(self) -> list[Morphism]:
        """Every morphism of every category, in snapshot order."""
        return [m for category in self.categories for m in category.morphisms]

    def find_object(self, object_id: str) -> CategoryObject | None:
        """Return the first object with `object_id` in any category, or None."""
        return next((o for o in self.all_objects() if o.id == object_id), None)
