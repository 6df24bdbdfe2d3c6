"""Immutable entities of the knowledge graph."""

from .base import identity_id
from .category import Category
from .category_object import CategoryObject
from .functor import Functor
from .morphism import Morphism
from .natural_transformation import NaturalTransformation

__all__ = [
    "Category",
    "CategoryObject",
    "Functor",
    "Morphism",
    "NaturalTransformation",
    "identity_id",
]
