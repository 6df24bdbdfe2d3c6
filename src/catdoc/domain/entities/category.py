"""Categories: ordered collections of objects and morphisms."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .base import require_non_empty
from .category_object import CategoryObject
from .morphism import Morphism

KIND = "category"  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class Category:
    """Immutable category.

    `objects` and `morphisms` are stored as tuples in the order given. The
    type performs no structural checks (identity coverage, dangling morphism
    endpoints); those are reported by `verify_category`.
    """

    id: str
    name: str
    objects: tuple[CategoryObject, ...] = field(default_factory=tuple)
    morphisms: tuple[Morphism, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        require_non_empty(KIND, "id", self.id)
        require_non_empty(KIND, "name", self.name)
        object.__setattr__(self, "objects", tuple(self.objects))
        object.__setattr__(self, "morphisms", tuple(self.morphisms))

    # --- Lookups ---

    @property
    def object_ids(self) -> frozenset[str]:
        """Ids of every object in the category."""
        return frozenset(obj.id for obj in self.objects)

    def get_objects(self) -> list[CategoryObject]:
        """Return a new list of the objects."""
        return list(self.objects)

    def get_morphisms(self) -> list[Morphism]:
        """Return a new list of the morphisms."""
        return list(self.morphisms)

    def has_object(self, object_id: str) -> bool:
        """Return True if an object with `object_id` belongs to the category."""
        return any(obj.id == object_id for obj in self.objects)

    def get_object(self, object_id: str) -> CategoryObject | None:
        """Return the first object with `object_id`, or None."""
        return next((obj for obj in self.objects if obj.id == object_id), None)

    def get_morphism(self, morphism_id: str) -> Morphism | None:
        """Return the first morphism with `morphism_id`, or None."""
        return next((m for m in self.morphisms if m.id == morphism_id), None)

    def morphisms_by_source(self, object_id: str) -> list[Morphism]:
        """Return the morphisms leaving `object_id`, in category order."""
        return [m for m in self.morphisms if m.source == object_id]

    def morphisms_by_target(self, object_id: str) -> list[Morphism]:
        """Return the morphisms entering `object_id`, in category order."""
        return [m for m in self.morphisms if m.target == object_id]

    def identity_of(self, object_id: str) -> Morphism | None:
        """Return the first self-loop on `object_id`, or None."""
        return next(
            (m for m in self.morphisms if m.source == object_id == m.target), None
        )

    # --- Derivations ---

    def with_objects(self, objects: Iterable[CategoryObject]) -> Category:
        """Return a copy of the category holding `objects` instead."""
        return Category(self.id, self.name, tuple(objects), self.morphisms)

    def with_morphisms(self, morphisms: Iterable[Morphism]) -> Category:
        """Return a copy of the category holding `morphisms` instead."""
        return Category(self.id, self.name, self.objects, tuple(morphisms))
