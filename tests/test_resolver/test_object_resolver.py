"""Tests for ObjectResolver.

These tests verify:
- Noun check
- Existence check with partial, unordered adjectives
- Kind filtering before ambiguity counting
- Stage ordering across several spans
"""

from itertools import combinations, permutations

import pytest

from src.resolver.object_resolver import (
    ObjectResolver,
    ResolutionFailure,
    ResolutionResult,
)
from src.world.objects import GAME_OBJECTS, GameObject, WorldCatalog


def _phrasings(obj: GameObject) -> list[tuple[str, ...]]:
    """Every subset of adjectives, in every order, followed by the noun."""
    phrasings = []
    for size in range(len(obj.adjectives) + 1):
        for subset in combinations(obj.adjectives, size):
            for ordering in permutations(subset):
                phrasings.append((*ordering, obj.noun))
    return phrasings


# =============================================================================
# Initialization Tests
# =============================================================================


class TestObjectResolverInit:
    """Tests for ObjectResolver initialization."""

    def test_init_with_world(self, world: WorldCatalog) -> None:
        """ObjectResolver keeps the world it was given."""
        resolver = ObjectResolver(world)

        assert resolver.world is world


# =============================================================================
# Successful Resolution Tests
# =============================================================================


class TestResolveSuccess:
    """Tests for spans that resolve to one object."""

    def test_noun_only(self, resolver: ObjectResolver) -> None:
        """A bare noun resolves when only one object has it."""
        result = resolver.resolve(("table",), "supporter")

        assert isinstance(result, ResolutionResult)
        assert result.resolved is True
        assert result.entity.descriptor == "solid wooden table"

    @pytest.mark.parametrize(
        "span",
        [
            ("wooden", "table"),
            ("solid", "table"),
            ("solid", "wooden", "table"),
            ("wooden", "solid", "table"),
        ],
    )
    def test_partial_adjectives_any_order(self, resolver: ObjectResolver, span) -> None:
        """Any subset of adjectives in any order resolves."""
        result = resolver.resolve(span, "supporter")

        assert result.resolved is True
        assert result.entity == GameObject("solid wooden table", "supporter")

    def test_object_slot_accepts_direction(self, resolver: ObjectResolver) -> None:
        """Object slots accept directions too."""
        result = resolver.resolve(("north",), "object")

        assert result.resolved is True
        assert result.entity.kind == "direction"

    def test_adjective_disambiguates(self, resolver: ObjectResolver) -> None:
        """An adjective picks one of two same-noun objects."""
        result = resolver.resolve(("tree", "frog"), "item")

        assert result.entity.descriptor == "small tree frog"

    def test_kind_filter_disambiguates(self, resolver: ObjectResolver) -> None:
        """Two chests of different kinds are not ambiguous for a typed slot."""
        as_container = resolver.resolve(("chest",), "container")
        as_item = resolver.resolve(("chest",), "item")

        assert as_container.entity.descriptor == "wooden chest"
        assert as_item.entity.descriptor == "toy chest"

    @pytest.mark.parametrize("obj", [GameObject(d, k) for d, k in GAME_OBJECTS], ids=lambda o: o.descriptor)
    def test_full_descriptor_resolves_to_itself(self, resolver: ObjectResolver, obj: GameObject) -> None:
        """Every object's full descriptor, adjectives in any order, finds it."""
        for ordering in permutations(obj.adjectives):
            result = resolver.resolve((*ordering, obj.noun), obj.kind)
            assert result.entity == obj

    def test_unique_phrasings_resolve(self) -> None:
        """Every phrasing that no other same-kind object satisfies finds the object."""
        world = WorldCatalog([("big red ball", "item"), ("small blue ball", "item"), ("red box", "container")])
        resolver = ObjectResolver(world)

        for obj in world.objects:
            for phrasing in _phrasings(obj):
                rivals = [
                    other
                    for other in world.objects
                    if other != obj and other.kind == obj.kind and other.describes(phrasing)
                ]
                result = resolver.resolve(phrasing, obj.kind)
                if rivals:
                    assert result.ambiguous
                else:
                    assert result.entity == obj


# =============================================================================
# Failure Tests
# =============================================================================


class TestResolveFailures:
    """Tests for spans that cannot be resolved."""

    def test_unknown_noun(self, resolver: ObjectResolver) -> None:
        """A span ending in an adjective fails the noun check."""
        result = resolver.resolve(("small", "tree"), "item")

        assert result.resolved is False
        assert result.failure == ResolutionFailure.UNKNOWN_NOUN

    def test_unknown_game_object(self, resolver: ObjectResolver) -> None:
        """Known words that no object combines fail the existence check."""
        result = resolver.resolve(("green", "ball"), "item")

        assert result.failure == ResolutionFailure.UNKNOWN_GAME_OBJECT

    def test_adjective_from_other_object(self, resolver: ObjectResolver) -> None:
        """An adjective belonging to a different noun fails."""
        result = resolver.resolve(("oak", "table"), "supporter")

        assert result.failure == ResolutionFailure.UNKNOWN_GAME_OBJECT

    def test_wrong_kind(self, resolver: ObjectResolver) -> None:
        """An existing object of another kind fails the kind check."""
        result = resolver.resolve(("wooden", "table"), "item")

        assert result.failure == ResolutionFailure.WRONG_KIND
        assert result.slot_kind == "item"
        assert result.span == ("wooden", "table")

    def test_ambiguous(self, resolver: ObjectResolver) -> None:
        """Two same-kind matches are ambiguous."""
        result = resolver.resolve(("small", "frog"), "item")

        assert result.ambiguous is True
        assert [c.descriptor for c in result.candidates] == ["small tree frog", "small green frog"]

    def test_ambiguous_across_kinds_for_object_slot(self, resolver: ObjectResolver) -> None:
        """Object slots count every kind, so two chests are ambiguous."""
        result = resolver.resolve(("chest",), "object")

        assert result.ambiguous is True
        assert len(result.candidates) == 2


# =============================================================================
# Staged Resolution Tests
# =============================================================================


class TestResolveAll:
    """Tests for resolving several spans stage by stage."""

    def test_no_spans(self, resolver: ObjectResolver) -> None:
        """Zero slots resolve to nothing."""
        assert resolver.resolve_all([], []) == []

    def test_two_spans_in_order(self, resolver: ObjectResolver) -> None:
        """Results follow slot order."""
        results = resolver.resolve_all([("ball",), ("box",)], ["item", "container"])

        assert [r.entity.descriptor for r in results] == ["red ball", "cardboard box"]

    def test_noun_check_runs_before_existence(self, resolver: ObjectResolver) -> None:
        """A bad noun in the second span wins over a missing first object."""
        results = resolver.resolve_all([("green", "ball"), ("tree",)], ["item", "container"])

        assert len(results) == 1
        assert results[0].failure == ResolutionFailure.UNKNOWN_NOUN
        assert results[0].span == ("tree",)

    def test_existence_runs_before_kind(self, resolver: ObjectResolver) -> None:
        """A missing second object wins over a wrong-kind first object."""
        results = resolver.resolve_all([("wooden", "table"), ("green", "box")], ["item", "container"])

        assert results[0].failure == ResolutionFailure.UNKNOWN_GAME_OBJECT
        assert results[0].span == ("green", "box")

    def test_first_kind_failure_stops(self, resolver: ObjectResolver) -> None:
        """Kind checks run left to right and stop at the first failure."""
        results = resolver.resolve_all([("frog",), ("table",)], ["item", "container"])

        assert results[0].ambiguous is True
        assert results[0].span == ("frog",)

    def test_mismatched_lengths(self, resolver: ObjectResolver) -> None:
        """Spans and slot kinds must pair up."""
        with pytest.raises(ValueError, match="spans for"):
            resolver.resolve_all([("ball",)], ["item", "container"])


# =============================================================================
# Noun Used As Adjective Tests
# =============================================================================


class TestNounUsedAsAdjective:
    """Tests for worlds where one object's noun is another's adjective."""

    def test_both_objects_are_candidates(self) -> None:
        """'key' describes both the key and the key ring."""
        resolver = ObjectResolver(WorldCatalog([("key", "item"), ("key ring", "item")]))

        result = resolver.check_exists(("key",))

        assert result.failure is None
        assert [c.descriptor for c in result.candidates] == ["key", "key ring"]

    def test_same_kind_is_ambiguous(self) -> None:
        """Two items described by 'key' are ambiguous."""
        resolver = ObjectResolver(WorldCatalog([("key", "item"), ("key ring", "item")]))

        result = resolver.resolve(("key",), "item")

        assert result.ambiguous is True

    def test_kind_picks_adjective_object(self) -> None:
        """An item slot resolves 'box' to the box lid, not the container."""
        resolver = ObjectResolver(WorldCatalog([("box", "container"), ("box lid", "item")]))

        as_item = resolver.resolve(("box",), "item")
        as_container = resolver.resolve(("box",), "container")

        assert as_item.entity.descriptor == "box lid"
        assert as_container.entity.descriptor == "box"


class TestSelectKind:
    """Tests for the kind check on existing candidates."""

    def test_uses_existence_candidates(self, resolver: ObjectResolver) -> None:
        """Kind selection filters the candidates found by the existence check."""
        found = resolver.check_exists(("chest",))

        result = resolver.select_kind(found, "container")

        assert result.resolved is True
        assert result.entity.descriptor == "wooden chest"
        assert result.slot_kind == "container"
