"""Template grammar for player commands.

Each grammar line is a sequence of literal words and named slots, written
as space-separated tokens with slots in angle brackets:

    put <item> in <container>

The first token is always the verb. Slots name the kind of game object
they accept; the special kind ``object`` accepts any game object.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from functools import lru_cache

from src.world.objects import ANY_KIND

logger = logging.getLogger(__name__)

# Default command grammar. Order matters: templates sharing a verb are
# tried top to bottom and the first match wins.
GRAMMAR: tuple[str, ...] = (
    "look",
    "look at <object>",
    "inventory",
    "wait",
    "go <direction>",
    "take <item> from <container>",
    "take <item>",
    "drop <item>",
    "examine <object>",
    "open <container>",
    "close <container>",
    "put <item> in <container>",
    "put <item> on <supporter>",
    "climb <supporter>",
)


class GrammarError(ValueError):
    """Error building a grammar from template lines."""

    pass


@dataclass(frozen=True)
class Word:
    """A literal word that must appear verbatim in the input."""

    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Slot:
    """A placeholder bound to one or more input words naming a game object."""

    kind: str

    def __str__(self) -> str:
        return f"<{self.kind}>"


TemplateToken = Word | Slot


def _parse_token(raw: str, line: str) -> TemplateToken:
    if raw.startswith("<") and raw.endswith(">"):
        kind = raw[1:-1]
        if not kind:
            raise GrammarError(f"Empty slot name in template: '{line}'")
        return Slot(kind)
    return Word(raw)


@dataclass(frozen=True)
class Template:
    """One grammar line as a tagged sequence of words and slots.

    Attributes:
        tokens: Template tokens in order; the first is always the verb.
    """

    tokens: tuple[TemplateToken, ...]

    @classmethod
    def parse(cls, line: str) -> "Template":
        """Parse a grammar line like ``put <item> in <container>``.

        Raises:
            GrammarError: If the line is empty, starts with a slot, or has
                two slots with no literal word between them.
        """
        raw_tokens = line.split()
        if not raw_tokens:
            raise GrammarError("Template cannot be empty")

        tokens = tuple(_parse_token(raw, line) for raw in raw_tokens)
        if isinstance(tokens[0], Slot):
            raise GrammarError(f"Template must start with a verb: '{line}'")

        for current, following in zip(tokens, tokens[1:]):
            if isinstance(current, Slot) and isinstance(following, Slot):
                raise GrammarError(f"Adjacent slots have no boundary word: '{line}'")

        return cls(tokens=tokens)

    @property
    def verb(self) -> str:
        return self.tokens[0].text

    @property
    def preposition(self) -> str | None:
        """First literal word after the verb, if any."""
        for token in self.tokens[1:]:
            if isinstance(token, Word):
                return token.text
        return None

    @property
    def action(self) -> str:
        """Action identifier: ``verb`` or ``verb_preposition``."""
        if self.preposition:
            return f"{self.verb}_{self.preposition}"
        return self.verb

    @property
    def slots(self) -> tuple[Slot, ...]:
        return tuple(token for token in self.tokens if isinstance(token, Slot))

    def __str__(self) -> str:
        return " ".join(str(token) for token in self.tokens)


class GrammarCatalog:
    """Immutable table of templates and the word lists derived from it.

    All derived lists are computed once at construction. Every list is
    sorted and duplicate-free except ``prepositions``, which keeps the
    order in which words first appear in the grammar.

    Usage:
        grammar = GrammarCatalog(GRAMMAR)
        grammar.verbs            # ("close", "climb", "drop", ...)
        grammar.templates_for_verb("put")
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self.templates: tuple[Template, ...] = tuple(Template.parse(line) for line in lines)
        self._build_indices()
        logger.debug(
            f"Grammar built: {len(self.templates)} templates, "
            f"{len(self.verbs)} verbs, {len(self.prepositions)} prepositions"
        )

    def _build_indices(self) -> None:
        prepositions: list[str] = []
        slot_kinds: set[str] = set()
        errors: set[str] = set()
        self._by_verb: dict[str, list[Template]] = {}

        for template in self.templates:
            self._by_verb.setdefault(template.verb, []).append(template)

            for token in template.tokens[1:]:
                if isinstance(token, Word):
                    if token.text not in prepositions:
                        prepositions.append(token.text)
                else:
                    slot_kinds.add(token.kind)
                    if token.kind != ANY_KIND:
                        errors.add(f"{template.action}_non_{token.kind}")

        self.verbs: tuple[str, ...] = tuple(sorted(self._by_verb))
        self.prepositions: tuple[str, ...] = tuple(prepositions)
        self.actions: tuple[str, ...] = tuple(sorted({t.action for t in self.templates}))
        self.slot_kinds: tuple[str, ...] = tuple(sorted(slot_kinds))
        self.errors: tuple[str, ...] = tuple(sorted(errors))

    def is_verb(self, word: str) -> bool:
        return word in self._by_verb

    def templates_for_verb(self, verb: str) -> tuple[Template, ...]:
        """All templates starting with ``verb``, in catalog order."""
        return tuple(self._by_verb.get(verb, ()))


@lru_cache
def get_default_grammar() -> GrammarCatalog:
    """Get the cached grammar built from ``GRAMMAR``."""
    return GrammarCatalog(GRAMMAR)
