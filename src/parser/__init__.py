"""Command parser module for converting player input to commands.

This module turns one line of player input into either a structured
command or a diagnostic error, using a fixed template grammar and the
world's game objects.

Main Components:
    - GrammarCatalog: Template grammar and the verbs/prepositions it defines
    - VocabularyIndex: Every word the parser understands
    - PatternMatcher: Template selection and slot span extraction
    - CommandParser: Staged pipeline from raw text to Command
    - ParsedCommand / CommandError: The two possible outcomes
"""

from src.parser.command_types import (
    Command,
    CommandError,
    ErrorKind,
    ParsedCommand,
)
from src.parser.grammar import (
    GRAMMAR,
    GrammarCatalog,
    GrammarError,
    Slot,
    Template,
    Word,
    get_default_grammar,
)
from src.parser.vocabulary import VocabularyIndex
from src.parser.matcher import PatternMatcher
from src.parser.command_parser import CommandParser, get_command, get_default_parser

__all__ = [
    # Result types
    "Command",
    "CommandError",
    "ErrorKind",
    "ParsedCommand",
    # Grammar
    "GRAMMAR",
    "GrammarCatalog",
    "GrammarError",
    "Slot",
    "Template",
    "Word",
    "get_default_grammar",
    # Matching
    "VocabularyIndex",
    "PatternMatcher",
    # Parsing
    "CommandParser",
    "get_command",
    "get_default_parser",
]
