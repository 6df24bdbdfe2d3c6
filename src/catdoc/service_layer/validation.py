"""Whole-snapshot validation.

Resolves the cross references of every functor and natural transformation in
a `KnowledgeGraph`, runs the matching law checks, and aggregates the findings
into a single report. Messages from the per-entity checks are prefixed with
the id of the entity they came from, e.g. ``[cat-1] Object 'a' lacks ...``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from catdoc.domain.snapshot import KnowledgeGraph

from .verification import (
    VerificationResult,
    verify_category,
    verify_functor,
    verify_natural_transformation,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Aggregated outcome of validating a whole snapshot."""

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)
    categories_checked: int = 0
    functors_checked: int = 0
    natural_transformations_checked: int = 0

    @property
    def is_valid(self) -> bool:
        """True when no errors were reported."""
        return not self.errors

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation including summary totals."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "summary": {
                "categoriesChecked": self.categories_checked,
                "functorsChecked": self.functors_checked,
                "naturalTransformationsChecked": self.natural_transformations_checked,
                "totalErrors": len(self.errors),
                "totalWarnings": len(self.warnings),
            },
        }


def validate_knowledge_graph(graph: KnowledgeGraph) -> ValidationReport:
    """Validate every category, functor and natural transformation of `graph`.

    - An empty category (no objects, no morphisms) only yields a warning.
    - A functor whose source or target category is missing yields an error
      and is not verified further. Otherwise each source object it leaves
      unmapped also yields an unprefixed coverage warning.
    - A natural transformation whose source or target functor is missing
      yields an error. It is verified against the source category of its
      source functor, and skipped silently when that category is missing.

    Args:
        graph: The snapshot to validate.

    Returns:
        The aggregated report.
    """
    errors: list[str] = []
    warnings: list[str] = []

    for category in graph.categories:
        if not category.objects and not category.morphisms:
            warnings.append(f"Category '{category.id}' is empty")
            continue
        _collect(category.id, verify_category(category), errors, warnings)

    for functor in graph.functors:
        source = graph.get_category(functor.source_category)
        if source is None:
            errors.append(
                f"Functor '{functor.id}' has invalid source category "
                f"'{functor.source_category}'"
            )
            continue
        target = graph.get_category(functor.target_category)
        if target is None:
            errors.append(
                f"Functor '{functor.id}' has invalid target category "
                f"'{functor.target_category}'"
            )
            continue
        _collect(functor.id, verify_functor(functor, source, target), errors, warnings)
        warnings.extend(
            f"Functor '{functor.id}' does not map object '{obj.id}'"
            for obj in source.objects
            if obj.id not in functor.object_mapping
        )

    for nt in graph.natural_transformations:
        source_functor = graph.get_functor(nt.source_functor)
        if source_functor is None:
            errors.append(
                f"NaturalTransformation '{nt.id}' has invalid source functor "
                f"'{nt.source_functor}'"
            )
            continue
        target_functor = graph.get_functor(nt.target_functor)
        if target_functor is None:
            errors.append(
                f"NaturalTransformation '{nt.id}' has invalid target functor "
                f"'{nt.target_functor}'"
            )
            continue
        category = graph.get_category(source_functor.source_category)
        if category is None:
            logger.debug(
                "Skipping natural transformation %s: category %s not in snapshot",
                nt.id,
                source_functor.source_category,
            )
            continue
        result = verify_natural_transformation(
            nt, source_functor, target_functor, category
        )
        _collect(nt.id, result, errors, warnings)

    report = ValidationReport(
        errors=tuple(errors),
        warnings=tuple(warnings),
        categories_checked=len(graph.categories),
        functors_checked=len(graph.functors),
        natural_transformations_checked=len(graph.natural_transformations),
    )
    logger.info(
        "Validated %d categories, %d functors, %d natural transformations: "
        "%d error(s), %d warning(s)",
        report.categories_checked,
        report.functors_checked,
        report.natural_transformations_checked,
        len(report.errors),
        len(report.warnings),
    )
    return report


def _collect(
    entity_id: str,
    result: VerificationResult,
    errors: list[str],
    warnings: list[str],
) -> None:
    errors.extend(f"[{entity_id}] {message}" for message in result.errors)
    warnings.extend(f"[{entity_id}] {message}" for message in result.warnings)
