"""Objects of a category (the documents of the knowledge graph)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .base import freeze_metadata, require_non_empty, thaw

KIND = "category object"  # pragma: no mutate


@dataclass(frozen=True, slots=True)
class CategoryObject:
    """Immutable object of a category.

    Conventions:
      - `id` is unique within its category.
      - `domain` is a free-text classification tag (e.g. "algebra").
      - `metadata` is an opaque key→value map stored as a read-only deep copy;
        use `get_metadata()` for a mutable copy.
      - `content` is the optional document body.
    """

    id: str
    title: str
    domain: str
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)
    content: str | None = None

    def __post_init__(self) -> None:
        require_non_empty(KIND, "id", self.id)
        require_non_empty(KIND, "title", self.title)
        require_non_empty(KIND, "domain", self.domain)
        object.__setattr__(self, "metadata", freeze_metadata(KIND, self.metadata))

    def get_metadata(self) -> dict[str, Any]:
        """Return an independent, mutable copy of the metadata."""
        return thaw(self.metadata)
