"""ObjectResolver for binding slot word spans to game objects.

A span like "wooden table" is resolved against the world catalog in three
checks, each of which can fail on its own:

1. Noun check - the span's last word must be a known noun
2. Existence check - some object must have every word of the span in its
   descriptor (adjectives may be partial, in any order)
3. Kind check - of those objects, exactly one must have the slot's kind
   (any kind for "object" slots); none is a wrong-kind failure, several
   is an ambiguity

Kinds are filtered before ambiguity is counted, so two objects that share
the same words but differ in kind are not ambiguous for a typed slot.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from src.world.objects import ANY_KIND, GameObject, WorldCatalog

logger = logging.getLogger(__name__)


class ResolutionFailure(str, Enum):
    """Why a span could not be resolved."""

    UNKNOWN_NOUN = "unknown_noun"
    UNKNOWN_GAME_OBJECT = "unknown_game_object"
    WRONG_KIND = "wrong_kind"
    AMBIGUOUS_OBJECT = "ambiguous_object"


@dataclass(frozen=True)
class ResolutionResult:
    """Outcome of resolving one span.

    Attributes:
        span: The words bound to the slot.
        slot_kind: Kind the slot requires, None before the kind check.
        resolved: Whether exactly one object was found.
        entity: The resolved object.
        candidates: Objects still in the running after the last check.
        failure: Why resolution stopped, if it did.
    """

    span: tuple[str, ...]
    slot_kind: str | None = None
    resolved: bool = False
    entity: GameObject | None = None
    candidates: tuple[GameObject, ...] = field(default_factory=tuple)
    failure: ResolutionFailure | None = None

    @property
    def ambiguous(self) -> bool:
        return self.failure == ResolutionFailure.AMBIGUOUS_OBJECT


class ObjectResolver:
    """Resolves slot spans to game objects in the world catalog.

    Usage:
        resolver = ObjectResolver(world)
        result = resolver.resolve(("wooden", "table"), "supporter")
        if result.resolved:
            obj = result.entity
        elif result.ambiguous:
            candidates = result.candidates
    """

    def __init__(self, world: WorldCatalog) -> None:
        self.world = world

    def check_noun(self, span: Sequence[str]) -> ResolutionResult | None:
        """Fail if the span does not end in a known noun."""
        if not span or not self.world.is_noun(span[-1]):
            return ResolutionResult(span=tuple(span), failure=ResolutionFailure.UNKNOWN_NOUN)
        return None

    def find_candidates(self, span: Sequence[str]) -> tuple[GameObject, ...]:
        """All objects whose descriptor has every span word, in catalog order."""
        if not span:
            return ()
        return tuple(obj for obj in self.world.objects if obj.describes(span))

    def check_exists(self, span: Sequence[str]) -> ResolutionResult:
        """Collect the objects described by the span, failing if there are none."""
        span = tuple(span)
        candidates = self.find_candidates(span)
        if not candidates:
            return ResolutionResult(span=span, failure=ResolutionFailure.UNKNOWN_GAME_OBJECT)
        return ResolutionResult(span=span, candidates=candidates)

    def select_kind(self, found: ResolutionResult, slot_kind: str) -> ResolutionResult:
        """Pick the single candidate of the required kind from an existence check."""
        span = found.span
        candidates = found.candidates
        if slot_kind != ANY_KIND:
            candidates = tuple(obj for obj in candidates if obj.kind == slot_kind)
        if not candidates:
            return ResolutionResult(
                span=span,
                slot_kind=slot_kind,
                failure=ResolutionFailure.WRONG_KIND,
            )
        if len(candidates) > 1:
            return ResolutionResult(
                span=span,
                slot_kind=slot_kind,
                candidates=candidates,
                failure=ResolutionFailure.AMBIGUOUS_OBJECT,
            )
        return ResolutionResult(
            span=span,
            slot_kind=slot_kind,
            resolved=True,
            entity=candidates[0],
            candidates=candidates,
        )

    def resolve(self, span: Sequence[str], slot_kind: str) -> ResolutionResult:
        """Run all three checks on a single span."""
        return self.resolve_all([span], [slot_kind])[0]

    def resolve_all(
        self,
        spans: Sequence[Sequence[str]],
        slot_kinds: Sequence[str],
    ) -> list[ResolutionResult]:
        """Resolve spans stage by stage.

        Each check runs over every span, left to right, before the next
        check starts. The first failure stops everything.

        Args:
            spans: Word spans in slot order.
            slot_kinds: Required kind of each slot, same order.

        Returns:
            One resolved result per span on success, otherwise a single
            item list holding the first failure.
        """
        if len(spans) != len(slot_kinds):
            raise ValueError(f"Got {len(spans)} spans for {len(slot_kinds)} slots")

        for span in spans:
            if failure := self.check_noun(span):
                logger.debug(f"Unknown noun in span {span}")
                return [failure]

        found = []
        for span in spans:
            result = self.check_exists(span)
            if result.failure:
                logger.debug(f"No object described by span {span}")
                return [result]
            found.append(result)

        results = []
        for existing, slot_kind in zip(found, slot_kinds):
            result = self.select_kind(existing, slot_kind)
            if not result.resolved:
                logger.debug(f"Span {result.span} failed kind check for <{slot_kind}>: {result.failure}")
                return [result]
            results.append(result)
        return results
