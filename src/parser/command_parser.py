"""Command parser for turning one line of player input into a Command.

Parsing runs through fixed stages and stops at the first failure:

1. Blank input                      -> empty_command
2. Every word in the vocabulary     -> unknown_word_<word>
3. First word is a verb             -> unknown_verb_<word>
4. A template for the verb matches  -> unknown_pattern_<verb>
5. Slot spans extracted
6. Each span ends in a noun         -> unknown_noun_<word>
7. Each span describes an object    -> unknown_game_object_<words>
8. Each span has one object of the
   slot's kind                      -> <action>_non_<kind>_<words>
                                       or ambiguous_object_<words>

Bad input never raises; every line yields a ParsedCommand or a
CommandError.
"""

import logging
from functools import lru_cache

from src.parser.command_types import Command, CommandError, ErrorKind, ParsedCommand
from src.parser.grammar import GrammarCatalog, get_default_grammar
from src.parser.matcher import PatternMatcher
from src.parser.vocabulary import VocabularyIndex
from src.resolver.object_resolver import (
    ObjectResolver,
    ResolutionFailure,
    ResolutionResult,
)
from src.world.objects import WorldCatalog, get_default_world

logger = logging.getLogger(__name__)


class CommandParser:
    """Parser for converting player input into commands.

    The catalogs are read-only, so one parser can be shared by any number
    of callers.

    Example:
        parser = CommandParser()

        parser.parse("put red ball in box")
        # -> ParsedCommand(action="put_in", objects=("red ball", "cardboard box"))

        parser.parse("take small frog")
        # -> CommandError(kind=AMBIGUOUS_OBJECT, words=("small", "frog"))
    """

    def __init__(
        self,
        grammar: GrammarCatalog | None = None,
        world: WorldCatalog | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            grammar: Template grammar. Defaults to the built-in grammar.
            world: Game objects. Defaults to the built-in world.
        """
        self.grammar = grammar or get_default_grammar()
        self.world = world or get_default_world()
        self.vocabulary = VocabularyIndex(self.grammar, self.world)
        self.matcher = PatternMatcher(self.grammar)
        self.resolver = ObjectResolver(self.world)

    def parse(self, text: str) -> Command:
        """Parse one line of input.

        Args:
            text: Raw player input, space-separated words.

        Returns:
            ParsedCommand on success, CommandError otherwise.
        """
        command = self._parse(text)
        if isinstance(command, CommandError):
            logger.debug(f"Rejected {text!r}: {command.code}")
        else:
            logger.debug(f"Parsed {text!r}: {command}")
        return command

    def _parse(self, text: str) -> Command:
        tokens = text.split()
        if not tokens:
            return CommandError(ErrorKind.EMPTY_COMMAND)

        if (unknown := self.vocabulary.first_unknown(tokens)) is not None:
            return CommandError(ErrorKind.UNKNOWN_WORD, (unknown,))

        verb = tokens[0]
        if not self.grammar.is_verb(verb):
            return CommandError(ErrorKind.UNKNOWN_VERB, (verb,))

        template = self.matcher.select(tokens)
        if template is None:
            return CommandError(ErrorKind.UNKNOWN_PATTERN, (verb,))

        spans = self.matcher.extract_spans(tokens, template)
        slot_kinds = [slot.kind for slot in template.slots]
        results = self.resolver.resolve_all(spans, slot_kinds)

        if results and not results[-1].resolved:
            return self._resolution_error(results[-1], template.action)

        return ParsedCommand(
            action=template.action,
            objects=tuple(result.entity.descriptor for result in results),
        )

    @staticmethod
    def _resolution_error(result: ResolutionResult, action: str) -> CommandError:
        failure, span = result.failure, result.span
        if failure == ResolutionFailure.UNKNOWN_NOUN:
            return CommandError(ErrorKind.UNKNOWN_NOUN, span[-1:])
        if failure == ResolutionFailure.UNKNOWN_GAME_OBJECT:
            return CommandError(ErrorKind.UNKNOWN_GAME_OBJECT, span)
        if failure == ResolutionFailure.AMBIGUOUS_OBJECT:
            return CommandError(ErrorKind.AMBIGUOUS_OBJECT, span)
        return CommandError(ErrorKind.WRONG_KIND, span, action=action, slot_kind=result.slot_kind)


@lru_cache
def get_default_parser() -> CommandParser:
    """Get the cached parser over the built-in grammar and world."""
    return CommandParser()


def get_command(text: str) -> Command:
    """Parse one line of input with the built-in grammar and world.

    Examples:
        >>> get_command("look")
        ParsedCommand(action='look', objects=())
        >>> get_command("take yellow ball").code
        'unknown_word_yellow'
    """
    return get_default_parser().parse(text)
