"""Game object catalog.

Every game object is named by a multi-word descriptor. The last word of
the descriptor is the object's noun; every word before it is an
adjective. Each object also carries a kind tag (item, container,
supporter, direction, ...) that grammar slots are checked against.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

logger = logging.getLogger(__name__)

# Slot kind that accepts every game object, directions included
ANY_KIND = "object"

# Default world: (descriptor, kind)
GAME_OBJECTS: tuple[tuple[str, str], ...] = (
    ("small tree frog", "item"),
    ("small green frog", "item"),
    ("red ball", "item"),
    ("rusty iron key", "item"),
    ("very heavy rock", "item"),
    ("toy chest", "item"),
    ("cardboard box", "container"),
    ("wooden chest", "container"),
    ("solid wooden table", "supporter"),
    ("old oak shelf", "supporter"),
    ("north", "direction"),
    ("south", "direction"),
    ("east", "direction"),
    ("west", "direction"),
    ("up", "direction"),
    ("down", "direction"),
)


class WorldCatalogError(ValueError):
    """Error building a world catalog from object definitions."""

    pass


@dataclass(frozen=True)
class GameObject:
    """An immutable game object.

    Attributes:
        descriptor: Full name, e.g. "solid wooden table".
        kind: Kind tag, e.g. "supporter".
    """

    descriptor: str
    kind: str

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(self.descriptor.split())

    @property
    def noun(self) -> str:
        return self.words[-1]

    @property
    def adjectives(self) -> tuple[str, ...]:
        return self.words[:-1]

    def describes(self, words: Iterable[str]) -> bool:
        """Whether every given word appears in this object's descriptor."""
        return set(words) <= set(self.words)

    def __str__(self) -> str:
        return self.descriptor


class WorldCatalog:
    """Immutable table of game objects and the word lists derived from it.

    Usage:
        world = WorldCatalog(GAME_OBJECTS)
        world.nouns                     # ("ball", "box", "chest", ...)
        world.objects_by_noun("frog")   # both frogs, catalog order
    """

    def __init__(self, objects: Iterable[tuple[str, str] | GameObject]) -> None:
        self.objects: tuple[GameObject, ...] = tuple(self._to_object(o) for o in objects)
        self._build_indices()
        logger.debug(
            f"World built: {len(self.objects)} objects, "
            f"{len(self.nouns)} nouns, {len(self.adjectives)} adjectives"
        )

    @staticmethod
    def _to_object(definition: tuple[str, str] | GameObject) -> GameObject:
        if isinstance(definition, GameObject):
            obj = definition
        else:
            descriptor, kind = definition
            obj = GameObject(descriptor=" ".join(descriptor.split()), kind=kind)

        if not obj.descriptor.strip():
            raise WorldCatalogError("Object descriptor cannot be empty")
        if not obj.kind.strip():
            raise WorldCatalogError(f"Object '{obj.descriptor}' has no kind")
        return obj

    def _build_indices(self) -> None:
        self._by_noun: dict[str, list[GameObject]] = {}
        seen: set[str] = set()
        adjectives: set[str] = set()

        for obj in self.objects:
            if obj.descriptor in seen:
                raise WorldCatalogError(f"Duplicate object descriptor: '{obj.descriptor}'")
            seen.add(obj.descriptor)
            adjectives.update(obj.adjectives)
            self._by_noun.setdefault(obj.noun, []).append(obj)

        self.adjectives: tuple[str, ...] = tuple(sorted(adjectives))
        self.nouns: tuple[str, ...] = tuple(sorted(self._by_noun))
        self.kinds: tuple[str, ...] = tuple(sorted({obj.kind for obj in self.objects}))

    def is_noun(self, word: str) -> bool:
        return word in self._by_noun

    def objects_by_noun(self, noun: str) -> tuple[GameObject, ...]:
        """All objects whose descriptor ends in ``noun``, in catalog order."""
        return tuple(self._by_noun.get(noun, ()))


@lru_cache
def get_default_world() -> WorldCatalog:
    """Get the cached world built from ``GAME_OBJECTS``."""
    return WorldCatalog(GAME_OBJECTS)
