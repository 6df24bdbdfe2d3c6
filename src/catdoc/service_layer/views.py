"""JSON-ready dictionaries for entities shown by the CLI reports."""

from __future__ import annotations

from dataclasses import dataclass

from catdoc.domain.entities import Category, CategoryObject, Functor, Morphism


@dataclass(frozen=True, slots=True)
class CategorySummary:
    """Id, name and sizes of a category, as listed by ``catdoc list``."""

    id: str
    name: str
    object_count: int
    morphism_count: int

    @classmethod
    def of(cls, category: Category) -> CategorySummary:
        return cls(
            category.id, category.name, len(category.objects), len(category.morphisms)
        )


def morphism_dict(morphism: Morphism, *, metadata: bool = False) -> dict[str, object]:
    data: dict[str, object] = {
        "id": morphism.id,
        "name": morphism.name,
        "source": morphism.source,
        "target": morphism.target,
    }
    if metadata:
        data["metadata"] = morphism.get_metadata()
    return data


def object_dict(obj: CategoryObject) -> dict[str, object]:
    return {
        "id": obj.id,
        "title": obj.title,
        "domain": obj.domain,
        "metadata": obj.get_metadata(),
        "content": obj.content,
    }


def functor_dict(functor: Functor) -> dict[str, object]:
    return {
        "id": functor.id,
        "name": functor.name,
        "sourceCategory": functor.source_category,
        "targetCategory": functor.target_category,
    }


def summary_dict(summary: CategorySummary) -> dict[str, object]:
    return {
        "id": summary.id,
        "name": summary.name,
        "objectCount": summary.object_count,
        "morphismCount": summary.morphism_count,
    }


def to_dict(item: CategoryObject | Morphism | CategorySummary) -> dict[str, object]:
    """Render any listable item.

    Raises:
        TypeError: If `item` is of another type.
    """
    if isinstance(item, CategoryObject):
        return object_dict(item)
    if isinstance(item, Morphism):
        return morphism_dict(item, metadata=True)
    if isinstance(item, CategorySummary):
        return summary_dict(item)
    raise TypeError(f"Cannot render {type(item).__name__}")
