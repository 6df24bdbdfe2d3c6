"""Domain layer for CATDOC.

Contains the entity model: categories, objects, morphisms, functors and
natural transformations, plus the snapshot that bundles them. This package is
deliberately technology-agnostic and performs no I/O.

Dependency rule: do not import from `catdoc.adapters` or `catdoc.entrypoints`.
"""
