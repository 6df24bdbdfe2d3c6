"""Unit tests for morphism and functor composition."""

import pytest

from catdoc.domain.entities import Functor, Morphism
from catdoc.service_layer.composition import (
    compose_functor_chain,
    compose_functors,
    compose_morphism_chain,
    compose_morphisms,
)

# pylint: disable=magic-value-comparison


class TestComposeMorphisms:
    """Tests for compose_morphisms."""

    @staticmethod
    def test_composable_pair():
        """g∘f runs from f.source to g.target and records its operands."""
        f = Morphism("f", "f", "A", "B")
        g = Morphism("g", "g", "B", "C")
        composed = compose_morphisms(f, g)
        assert composed is not None
        assert composed.id == "composed-f-g"
        assert composed.name == "g∘f"
        assert composed.source == "A"
        assert composed.target == "C"
        assert composed.get_metadata() == {"composedFrom": ["f", "g"]}

    @staticmethod
    @pytest.mark.parametrize(
        "f, g",
        [
            (Morphism("f", "f", "A", "B"), Morphism("g", "g", "C", "D")),
            (Morphism("g", "g", "B", "C"), Morphism("f", "f", "A", "B")),
        ],
    )
    def test_not_composable(f, g):
        """Mismatched endpoints yield None, not an exception."""
        assert compose_morphisms(f, g) is None

    @staticmethod
    def test_identity_on_either_side():
        """Composing with an identity keeps the endpoints of f."""
        f = Morphism("f", "f", "A", "B")
        left = compose_morphisms(Morphism.identity("A"), f)
        right = compose_morphisms(f, Morphism.identity("B"))
        assert (left.source, left.target) == ("A", "B")
        assert (right.source, right.target) == ("A", "B")

    @staticmethod
    def test_self_composition_of_loop():
        """A self-loop composes with itself."""
        loop = Morphism("l", "l", "A", "A")
        composed = compose_morphisms(loop, loop)
        assert composed.id == "composed-l-l"
        assert composed.is_self_loop


class TestComposeFunctors:
    """Tests for compose_functors."""

    @staticmethod
    def test_chains_mappings():
        """(G∘F)(a) = G(F(a)) for objects and morphisms."""
        F = Functor("F", "F", "C", "D", {"a": "b", "a2": "b2"}, {"f": "g"})
        G = Functor("G", "G", "D", "E", {"b": "c", "b2": "c2"}, {"g": "h"})
        composed = compose_functors(F, G)
        assert composed is not None
        assert composed.id == "composed-F-G"
        assert composed.name == "G∘F"
        assert composed.source_category == "C"
        assert composed.target_category == "E"
        assert composed.get_object_mapping() == {"a": "c", "a2": "c2"}
        assert composed.get_morphism_mapping() == {"f": "h"}

    @staticmethod
    def test_unmapped_intermediates_are_dropped():
        """Entries whose image G does not map vanish from the composite."""
        F = Functor("F", "F", "C", "D", {"a": "b", "x": "y"}, {"f": "g", "k": "l"})
        G = Functor("G", "G", "D", "E", {"b": "c"}, {"g": "h"})
        composed = compose_functors(F, G)
        assert composed.get_object_mapping() == {"a": "c"}
        assert composed.get_morphism_mapping() == {"f": "h"}

    @staticmethod
    def test_not_composable():
        """Mismatched categories yield None."""
        F = Functor("F", "F", "C", "D")
        G = Functor("G", "G", "X", "E")
        assert compose_functors(F, G) is None


class TestChains:
    """Tests for left-to-right chain composition."""

    @staticmethod
    def test_morphism_chain():
        """[f, g, h] composes to h∘g∘f."""
        chain = [
            Morphism("f", "f", "A", "B"),
            Morphism("g", "g", "B", "C"),
            Morphism("h", "h", "C", "D"),
        ]
        composed = compose_morphism_chain(chain)
        assert composed.name == "h∘g∘f"
        assert composed.id == "composed-composed-f-g-h"
        assert (composed.source, composed.target) == ("A", "D")

    @staticmethod
    def test_morphism_chain_edge_cases():
        """Empty chains and broken chains give None; singletons pass through."""
        f = Morphism("f", "f", "A", "B")
        assert compose_morphism_chain([]) is None
        assert compose_morphism_chain([f]) is f
        assert compose_morphism_chain([f, f, f]) is None

    @staticmethod
    def test_functor_chain():
        """Functors compose left to right."""
        F = Functor("F", "F", "C", "D", {"a": "b"})
        G = Functor("G", "G", "D", "E", {"b": "c"})
        H = Functor("H", "H", "E", "K", {"c": "d"})
        composed = compose_functor_chain([F, G, H])
        assert composed.name == "H∘G∘F"
        assert composed.get_object_mapping() == {"a": "d"}
        assert compose_functor_chain([]) is None
        assert compose_functor_chain([F, H]) is None
