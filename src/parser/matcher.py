"""Template matching for tokenized player input.

Input and template are walked in lockstep with no backtracking. A literal
word must equal the current input word. A slot takes one or more input
words and stops only when the next input word equals the literal that
follows the slot in the template, or when input runs out if the slot is
last. A slot never tries a shorter length, so a template whose boundary
word never appears in the input does not match even if a shorter slot
would have worked.
"""

import logging

from src.parser.grammar import GrammarCatalog, Template, Word

logger = logging.getLogger(__name__)


def _bind_slots(tokens: list[str], template: Template) -> list[tuple[str, ...]] | None:
    """Walk input against a template.

    Returns:
        One word span per slot in left-to-right order, or None if the
        input does not match.
    """
    spans: list[tuple[str, ...]] = []
    position = 0
    template_tokens = template.tokens

    for index, token in enumerate(template_tokens):
        if isinstance(token, Word):
            if position >= len(tokens) or tokens[position] != token.text:
                return None
            position += 1
            continue

        # Slot: needs at least one word
        if position >= len(tokens):
            return None
        start = position
        position += 1

        following = template_tokens[index + 1] if index + 1 < len(template_tokens) else None
        if following is None:
            position = len(tokens)
        elif isinstance(following, Word):
            while position < len(tokens) and tokens[position] != following.text:
                position += 1

        spans.append(tuple(tokens[start:position]))

    if position != len(tokens):
        return None
    return spans


class PatternMatcher:
    """Selects the grammar template that fits a line of input.

    Usage:
        matcher = PatternMatcher(grammar)
        template = matcher.select(["put", "red", "ball", "in", "box"])
        matcher.extract_spans(tokens, template)  # [("red", "ball"), ("box",)]
    """

    def __init__(self, grammar: GrammarCatalog) -> None:
        self.grammar = grammar

    def match(self, tokens: list[str], template: Template) -> bool:
        """Whether the tokens fit the template exactly."""
        return _bind_slots(tokens, template) is not None

    def select(self, tokens: list[str]) -> Template | None:
        """Return the first template for the input's verb that matches.

        Templates are tried in catalog order. Returns None when the input
        is empty or no template for its verb matches.
        """
        if not tokens:
            return None

        for template in self.grammar.templates_for_verb(tokens[0]):
            if self.match(tokens, template):
                logger.debug(f"Input {tokens} matched template '{template}'")
                return template
        return None

    def extract_spans(self, tokens: list[str], template: Template) -> list[tuple[str, ...]]:
        """Split matched input into one word span per template slot.

        Raises:
            ValueError: If the tokens do not match the template.
        """
        spans = _bind_slots(tokens, template)
        if spans is None:
            raise ValueError(f"Input {tokens} does not match template '{template}'")
        return spans
