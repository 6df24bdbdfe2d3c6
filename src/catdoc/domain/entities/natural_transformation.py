"""Natural transformations between two functors."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .base import freeze_mapping, require_non_empty

KIND = "natural transformation"  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class NaturalTransformation:
    """Immutable natural transformation `η: F ⇒ G`.

    `components` maps each object id `A` of the shared source category to the
    id of the component morphism `η_A: F(A) → G(A)`.
    """

    id: str
    name: str
    source_functor: str
    target_functor: str
    components: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        require_non_empty(KIND, "id", self.id)
        require_non_empty(KIND, "name", self.name)
        require_non_empty(KIND, "source_functor", self.source_functor)
        require_non_empty(KIND, "target_functor", self.target_functor)
        object.__setattr__(
            self, "components", freeze_mapping(KIND, "components", self.components)
        )

    def get_component(self, object_id: str) -> str | None:
        """Return the component morphism id for `object_id`, or None."""
        return self.components.get(object_id)

    def get_components(self) -> dict[str, str]:
        """Return an independent copy of all components."""
        return dict(self.components)
