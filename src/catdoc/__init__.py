"""CATDOC

A category-theoretic knowledge graph. Documents are modelled as objects of
categories, relations as morphisms, and cross-domain correspondences as
functors and natural transformations. The core composes, traverses and
verifies these structures.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
