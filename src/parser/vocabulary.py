"""Known-word index built from the grammar and world catalogs."""

from src.parser.grammar import GrammarCatalog
from src.world.objects import WorldCatalog


class VocabularyIndex:
    """Every word the parser can understand.

    The vocabulary is the union of world adjectives and nouns with grammar
    verbs and prepositions. Slot kind names such as "object" are not words
    a player can type and are never members.
    """

    def __init__(self, grammar: GrammarCatalog, world: WorldCatalog) -> None:
        self._words = frozenset(
            (*world.adjectives, *world.nouns, *grammar.verbs, *grammar.prepositions)
        )
        self.words: tuple[str, ...] = tuple(sorted(self._words))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def first_unknown(self, tokens: list[str]) -> str | None:
        """Return the first token not in the vocabulary, if any."""
        for token in tokens:
            if token not in self._words:
                return token
        return None
