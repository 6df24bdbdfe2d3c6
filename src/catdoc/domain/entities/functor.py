"""Functors: structure-preserving mappings between categories."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from .base import freeze_mapping, require_non_empty

KIND = "functor"  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class Functor:
    """Immutable functor `F: source_category → target_category`.

    Conventions:
      - `source_category` / `target_category` are category ids.
      - `object_mapping` maps object ids to object ids; it is meant to be
        total but may be partial in practice.
      - `morphism_mapping` maps morphism ids to morphism ids.
      - Both mappings are private read-only copies of what was passed in.
    """

    id: str
    name: str
    source_category: str
    target_category: str
    object_mapping: Mapping[str, str] = field(default_factory=dict, hash=False)
    morphism_mapping: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        require_non_empty(KIND, "id", self.id)
        require_non_empty(KIND, "name", self.name)
        require_non_empty(KIND, "source_category", self.source_category)
        require_non_empty(KIND, "target_category", self.target_category)
        object.__setattr__(
            self,
            "object_mapping",
            freeze_mapping(KIND, "object_mapping", self.object_mapping),
        )
        object.__setattr__(
            self,
            "morphism_mapping",
            freeze_mapping(KIND, "morphism_mapping", self.morphism_mapping),
        )

    def map_object(self, object_id: str) -> str | None:
        """Return F(object_id), or None when the object is unmapped."""
        return self.object_mapping.get(object_id)

    def map_morphism(self, morphism_id: str) -> str | None:
        """Return F(morphism_id), or None when the morphism is unmapped."""
        return self.morphism_mapping.get(morphism_id)

    def get_object_mapping(self) -> dict[str, str]:
        """Return an independent copy of the object mapping."""
        return dict(self.object_mapping)

    def get_morphism_mapping(self) -> dict[str, str]:
        """Return an independent copy of the morphism mapping."""
        return dict(self.morphism_mapping)
