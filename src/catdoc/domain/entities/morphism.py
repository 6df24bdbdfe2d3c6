"""Morphisms: directed, possibly self-looping edges between objects."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .base import freeze_metadata, identity_id, require_non_empty, thaw

KIND = "morphism"  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class Morphism:
    """Immutable arrow `source → target` between two object ids.

    A self-loop denotes an identity morphism by convention; identities are
    named `id-<objectId>` (see `Morphism.identity`). Neither convention is
    enforced here: checking that `source`/`target` exist and that every object
    has an identity is the job of the verification service.
    """

    id: str
    name: str
    source: str
    target: str
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        require_non_empty(KIND, "id", self.id)
        require_non_empty(KIND, "name", self.name)
        require_non_empty(KIND, "source", self.source)
        require_non_empty(KIND, "target", self.target)
        object.__setattr__(self, "metadata", freeze_metadata(KIND, self.metadata))

    @classmethod
    def identity(cls, object_id: str) -> Morphism:
        """Build the conventional identity morphism on `object_id`.

        Args:
            object_id: Id of the object the identity loops on.

        Returns:
            A morphism with id `id-<object_id>` and name `id_<object_id>`.
        """
        return cls(
            id=identity_id(object_id),
            name=f"id_{object_id}",
            source=object_id,
            target=object_id,
        )

    @property
    def is_self_loop(self) -> bool:
        """True when source and target are the same object."""
        return self.source == self.target

    @property
    def is_identity(self) -> bool:
        """True for a self-loop named after the `id-<objectId>` convention."""
        return self.is_self_loop and self.id == identity_id(self.source)

    def get_metadata(self) -> dict[str, Any]:
        """Return an independent, mutable copy of the metadata."""
        return thaw(self.metadata)
