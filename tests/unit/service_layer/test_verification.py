"""Unit tests for the category, functor and naturality law checks."""

import pytest

from catdoc.domain.entities import Functor, Morphism, NaturalTransformation
from catdoc.service_layer.verification import (
    VerificationResult,
    verify_category,
    verify_functor,
    verify_natural_transformation,
)

# pylint: disable=magic-value-comparison,redefined-outer-name


def test_result_validity_ignores_warnings():
    """Warnings alone keep a result valid."""
    result = VerificationResult(warnings=("hint",))
    assert result.is_valid
    assert result.to_dict() == {"isValid": True, "errors": [], "warnings": ["hint"]}
    assert not VerificationResult(errors=("broken",)).is_valid


class TestVerifyCategory:
    """Tests for verify_category."""

    @staticmethod
    def test_closed_category_is_clean(closed_category):
        """Identities, integrity and closure all hold."""
        result = verify_category(closed_category)
        assert result.errors == ()
        assert result.warnings == ()

    @staticmethod
    def test_missing_identity(make_category):
        """Removing one identity produces exactly one error naming the object."""
        category = make_category("c", ["A", "B"], [("f", "A", "B")])
        category = category.with_morphisms(
            [m for m in category.morphisms if m.id != "id-B"]
        )
        result = verify_category(category)
        assert result.errors == ("Object 'B' lacks an identity morphism (id: B → B)",)

    @staticmethod
    def test_any_self_loop_counts_as_identity(make_category):
        """The identity check only needs a self-loop, whatever its id."""
        category = make_category(
            "c", ["A"], [("loop", "A", "A")], identities=False
        )
        assert verify_category(category).is_valid

    @staticmethod
    def test_dangling_endpoints(make_category):
        """Both undefined endpoints of a morphism are reported."""
        category = make_category("c", ["A"], [("x", "P", "Q")])
        assert verify_category(category).errors == (
            "Morphism 'x' has undefined source object 'P'",
            "Morphism 'x' has undefined target object 'Q'",
        )

    @staticmethod
    def test_missing_composition_is_a_warning(linear_category):
        """Composable pairs without a composite are warnings, not errors."""
        result = verify_category(linear_category)
        assert result.is_valid
        assert result.warnings == (
            "Missing composition: g∘f (A → C)",
            "Missing composition: h∘g (B → D)",
        )

    @staticmethod
    def test_empty_category(make_category):
        """An empty category has nothing to violate."""
        result = verify_category(make_category("empty", []))
        assert result == VerificationResult()


class TestVerifyFunctor:
    """Tests for verify_functor."""

    @staticmethod
    def test_lawful_functor(structure_functor, source_category, target_category):
        """A complete, identity-preserving functor passes."""
        result = verify_functor(structure_functor, source_category, target_category)
        assert result.is_valid
        assert result.warnings == ()

    @staticmethod
    def test_unmapped_object(source_category, target_category):
        """Every source object must be mapped."""
        functor = Functor("F", "F", "src", "tgt", {"x": "p"}, {"id-x": "id-p"})
        result = verify_functor(functor, source_category, target_category)
        assert result.errors == ("Object 'y' is not mapped by functor 'F'",)

    @staticmethod
    def test_non_existent_image(source_category, target_category):
        """Mapped-to objects must exist in the target category."""
        functor = Functor("F", "F", "src", "tgt", {"x": "p", "y": "zz"})
        result = verify_functor(functor, source_category, target_category)
        assert result.errors == ("Functor 'F' maps 'y' to non-existent object 'zz'",)

    @staticmethod
    def test_identity_mapped_to_non_identity(source_category, target_category):
        """F(id-x) = n is an existing morphism but not a loop on p."""
        functor = Functor(
            "F", "F", "src", "tgt", {"x": "p", "y": "q"}, {"id-x": "n"}
        )
        result = verify_functor(functor, source_category, target_category)
        assert len(result.errors) == 1
        assert "identity" in result.errors[0]
        assert result.errors[0] == (
            "Functor 'F' does not preserve identity for object 'x': "
            "F(id_x) = n is not id_p"
        )

    @staticmethod
    def test_identity_mapped_to_unknown_morphism(source_category, target_category):
        """An unknown image id is accepted only when it is id-<F(A)>."""
        functor = Functor(
            "F", "F", "src", "tgt", {"x": "p", "y": "q"}, {"id-x": "ghost"}
        )
        result = verify_functor(functor, source_category, target_category)
        assert result.errors == (
            "Functor 'F' does not preserve identity for object 'x': "
            "F(id_x) = ghost should be id-p",
        )

    @staticmethod
    def test_identity_image_by_naming_convention(source_category, make_category):
        """A missing id-<F(A)> morphism still satisfies the identity law."""
        target = make_category("tgt", ["p", "q"], identities=False)
        functor = Functor(
            "F", "F", "src", "tgt", {"x": "p", "y": "q"}, {"id-x": "id-p"}
        )
        assert verify_functor(functor, source_category, target).is_valid

    @staticmethod
    def test_unmapped_identity_is_not_checked(source_category, target_category):
        """Identity preservation is only checked where F(id-A) is defined."""
        functor = Functor("F", "F", "src", "tgt", {"x": "p", "y": "q"})
        assert verify_functor(functor, source_category, target_category).is_valid

    @staticmethod
    @pytest.mark.parametrize(
        ("targets", "valid"),
        [(("p", "q"), True), (("q", "p"), False)],
        ids=["loop-first", "arrow-first"],
    )
    def test_duplicate_morphism_ids_first_wins(
        source_category, target_category, targets, valid
    ):
        """With two target morphisms sharing an id, the first one is checked."""
        duplicates = [Morphism("dup", "dup", "p", t) for t in targets]
        target = target_category.with_morphisms(
            [*target_category.morphisms, *duplicates]
        )
        functor = Functor(
            "F", "F", "src", "tgt", {"x": "p", "y": "q"}, {"id-x": "dup"}
        )
        assert verify_functor(functor, source_category, target).is_valid is valid


@pytest.fixture
def functors():
    """F, G: C → D with F(a) = x and G(a) = y."""
    return (
        Functor("F", "F", "C", "D", {"a": "x"}),
        Functor("G", "G", "C", "D", {"a": "y"}),
    )


class TestVerifyNaturalTransformation:
    """Tests for verify_natural_transformation."""

    @staticmethod
    def test_well_typed(functors, make_category):
        """A component x → y is correctly typed."""
        category = make_category("C", ["a"], [("eta_a", "x", "y")])
        nt = NaturalTransformation("eta", "eta", "F", "G", {"a": "eta_a"})
        assert verify_natural_transformation(nt, *functors, category).is_valid

    @staticmethod
    def test_wrong_target(functors, make_category):
        """A component x → z is reported as having the wrong target."""
        category = make_category("C", ["a"], [("eta_a", "x", "z")])
        nt = NaturalTransformation("eta", "eta", "F", "G", {"a": "eta_a"})
        result = verify_natural_transformation(nt, *functors, category)
        assert result.errors == (
            "Component η_a has wrong target: expected 'y', got 'z'",
        )

    @staticmethod
    def test_wrong_source_and_target(functors, make_category):
        """Both typing errors are reported for one component."""
        category = make_category("C", ["a"], [("eta_a", "u", "v")])
        nt = NaturalTransformation("eta", "eta", "F", "G", {"a": "eta_a"})
        result = verify_natural_transformation(nt, *functors, category)
        assert result.errors == (
            "Component η_a has wrong source: expected 'x', got 'u'",
            "Component η_a has wrong target: expected 'y', got 'v'",
        )

    @staticmethod
    def test_missing_component(functors, make_category):
        """Every object needs a component."""
        category = make_category("C", ["a"])
        nt = NaturalTransformation("eta", "eta", "F", "G")
        result = verify_natural_transformation(nt, *functors, category)
        assert result.errors == (
            "Natural transformation 'eta' is missing component for object 'a'",
        )

    @staticmethod
    def test_non_existent_component(functors, make_category):
        """Components must name a morphism of the category."""
        category = make_category("C", ["a"])
        nt = NaturalTransformation("eta", "eta", "F", "G", {"a": "ghost"})
        result = verify_natural_transformation(nt, *functors, category)
        assert result.errors == (
            "Natural transformation 'eta' has non-existent component "
            "morphism 'ghost' for object 'a'",
        )

    @staticmethod
    def test_typing_skipped_for_unmapped_objects(make_category):
        """No typing check when F(A) or G(A) is undefined."""
        category = make_category("C", ["a"], [("eta_a", "u", "v")])
        F = Functor("F", "F", "C", "D")
        G = Functor("G", "G", "C", "D", {"a": "y"})
        nt = NaturalTransformation("eta", "eta", "F", "G", {"a": "eta_a"})
        assert verify_natural_transformation(nt, F, G, category).is_valid

    @staticmethod
    def test_duplicate_component_ids_first_wins(functors, make_category):
        """With two morphisms sharing the component id, the first one is typed."""
        category = make_category("C", ["a"])
        nt = NaturalTransformation("eta", "eta", "F", "G", {"a": "eta_a"})
        well_typed = Morphism("eta_a", "eta_a", "x", "y")
        mistyped = Morphism("eta_a", "eta_a", "x", "z")

        first_ok = category.with_morphisms([*category.morphisms, well_typed, mistyped])
        assert verify_natural_transformation(nt, *functors, first_ok).is_valid

        first_bad = category.with_morphisms([*category.morphisms, mistyped, well_typed])
        result = verify_natural_transformation(nt, *functors, first_bad)
        assert result.errors == (
            "Component η_a has wrong target: expected 'y', got 'z'",
        )
