"""Law checks for categories, functors and natural transformations.

Violations are never raised. Each check returns a `VerificationResult` whose
errors mark broken laws and whose warnings mark incompleteness hints; the
messages name the offending entity and are shown to users verbatim.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from catdoc.domain.entities import (
    Category,
    Functor,
    Morphism,
    NaturalTransformation,
    identity_id,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VerificationResult:
    """Outcome of a law check. Valid iff there are no errors."""

    errors: tuple[str, ...] = field(default_factory=tuple)
    warnings: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        """True when no errors were reported; warnings do not count."""
        return not self.errors

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-ready representation."""
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
        }


def verify_category(category: Category) -> VerificationResult:
    """Check the category laws on `category`.

    Checks:
        1. Every object has an identity (a self-loop morphism). Error.
        2. Every morphism's source and target name an existing object. Error.
        3. Composition closure: for every composable pair of non-self-loop
           morphisms `f: A→B`, `g: B→C` some morphism `A→C` exists. Warning.

    The closure check is quadratic in the number of morphisms.
    """
    errors: list[str] = []
    warnings: list[str] = []

    object_ids = category.object_ids
    endpoints = {(m.source, m.target) for m in category.morphisms}

    for obj in category.objects:
        if (obj.id, obj.id) not in endpoints:
            errors.append(
                f"Object '{obj.id}' lacks an identity morphism "
                f"(id: {obj.id} → {obj.id})"
            )

    for m in category.morphisms:
        if m.source not in object_ids:
            errors.append(f"Morphism '{m.id}' has undefined source object '{m.source}'")
        if m.target not in object_ids:
            errors.append(f"Morphism '{m.id}' has undefined target object '{m.target}'")

    arrows = [m for m in category.morphisms if not m.is_self_loop]
    for f in arrows:
        for g in arrows:
            if f.target == g.source and (f.source, g.target) not in endpoints:
                warnings.append(
                    f"Missing composition: {g.name}∘{f.name} "
                    f"({f.source} → {g.target})"
                )

    logger.debug(
        "Verified category %s: %d error(s), %d warning(s)",
        category.id,
        len(errors),
        len(warnings),
    )
    return VerificationResult(tuple(errors), tuple(warnings))


def verify_functor(
    functor: Functor, source_category: Category, target_category: Category
) -> VerificationResult:
    """Check the functor laws for `functor: source_category → target_category`.

    Checks:
        1. Every source object is mapped. Error.
        2. Every mapped-to object exists in the target category. Error.
        3. Identity preservation: where `F(id-A)` is defined, it is a self-loop
           on `F(A)` in the target category or, when that morphism cannot be
           found, its id is `id-<F(A)>`. Error.

    Composition preservation is not checked.
    """
    errors: list[str] = []

    target_object_ids = target_category.object_ids
    target_morphisms: dict[str, Morphism] = {}
    for m in target_category.morphisms:
        target_morphisms.setdefault(m.id, m)

    for obj in source_category.objects:
        if functor.map_object(obj.id) is None:
            errors.append(f"Object '{obj.id}' is not mapped by functor '{functor.id}'")

    for source_obj, target_obj in functor.object_mapping.items():
        if target_obj not in target_object_ids:
            errors.append(
                f"Functor '{functor.id}' maps '{source_obj}' "
                f"to non-existent object '{target_obj}'"
            )

    for obj in source_category.objects:
        mapped_object = functor.map_object(obj.id)
        mapped_identity = functor.map_morphism(identity_id(obj.id))
        if mapped_object is None or mapped_identity is None:
            continue

        expected_identity = identity_id(mapped_object)
        image = target_morphisms.get(mapped_identity)
        if image is not None:
            if image.source != mapped_object or image.target != mapped_object:
                errors.append(
                    f"Functor '{functor.id}' does not preserve identity for object "
                    f"'{obj.id}': F(id_{obj.id}) = {mapped_identity} "
                    f"is not id_{mapped_object}"
                )
        elif mapped_identity != expected_identity:
            errors.append(
                f"Functor '{functor.id}' does not preserve identity for object "
                f"'{obj.id}': F(id_{obj.id}) = {mapped_identity} "
                f"should be {expected_identity}"
            )

    logger.debug("Verified functor %s: %d error(s)", functor.id, len(errors))
    return VerificationResult(tuple(errors))


def verify_natural_transformation(
    nt: NaturalTransformation,
    source_functor: Functor,
    target_functor: Functor,
    category: Category,
) -> VerificationResult:
    """Check the typing of every component of `nt: F ⇒ G`.

    For each object `A` of `category`:
        1. A component is registered for `A`. Error.
        2. The component morphism exists in `category`. Error.
        3. The component is typed `η_A: F(A) → G(A)`, checked only when both
           `F(A)` and `G(A)` are defined. Error.

    The commuting-square condition `η_B ∘ F(f) = G(f) ∘ η_A` is not checked.
    """
    errors: list[str] = []

    morphisms: dict[str, Morphism] = {}
    for m in category.morphisms:
        morphisms.setdefault(m.id, m)

    for obj in category.objects:
        component = nt.get_component(obj.id)
        if component is None:
            errors.append(
                f"Natural transformation '{nt.id}' is missing component "
                f"for object '{obj.id}'"
            )
            continue

        morphism = morphisms.get(component)
        if morphism is None:
            errors.append(
                f"Natural transformation '{nt.id}' has non-existent component "
                f"morphism '{component}' for object '{obj.id}'"
            )
            continue

        expected_source = source_functor.map_object(obj.id)
        expected_target = target_functor.map_object(obj.id)
        if expected_source is None or expected_target is None:
            continue
        if morphism.source != expected_source:
            errors.append(
                f"Component η_{obj.id} has wrong source: "
                f"expected '{expected_source}', got '{morphism.source}'"
            )
        if morphism.target != expected_target:
            errors.append(
                f"Component η_{obj.id} has wrong target: "
                f"expected '{expected_target}', got '{morphism.target}'"
            )

    logger.debug("Verified natural transformation %s: %d error(s)", nt.id, len(errors))
    return VerificationResult(tuple(errors))
