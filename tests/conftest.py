"""Core test fixtures for command parser tests."""

import pytest

from src.parser.command_parser import CommandParser
from src.parser.grammar import GRAMMAR, GrammarCatalog
from src.parser.matcher import PatternMatcher
from src.parser.vocabulary import VocabularyIndex
from src.resolver.object_resolver import ObjectResolver
from src.world.objects import GAME_OBJECTS, WorldCatalog


@pytest.fixture(scope="session")
def grammar() -> GrammarCatalog:
    """Grammar built from the default template lines."""
    return GrammarCatalog(GRAMMAR)


@pytest.fixture(scope="session")
def world() -> WorldCatalog:
    """World built from the default game objects."""
    return WorldCatalog(GAME_OBJECTS)


@pytest.fixture
def vocabulary(grammar: GrammarCatalog, world: WorldCatalog) -> VocabularyIndex:
    """Vocabulary over the default grammar and world."""
    return VocabularyIndex(grammar, world)


@pytest.fixture
def matcher(grammar: GrammarCatalog) -> PatternMatcher:
    """Pattern matcher over the default grammar."""
    return PatternMatcher(grammar)


@pytest.fixture
def resolver(world: WorldCatalog) -> ObjectResolver:
    """Object resolver over the default world."""
    return ObjectResolver(world)


@pytest.fixture
def parser(grammar: GrammarCatalog, world: WorldCatalog) -> CommandParser:
    """Command parser over the default grammar and world."""
    return CommandParser(grammar=grammar, world=world)
