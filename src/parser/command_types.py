"""Command result types for the command parser.

A parsed line is either a ParsedCommand (action plus resolved objects) or
a CommandError (a diagnostic code). The two never mix: a command never
carries an error and an error never carries objects.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Why a line of input could not be turned into a command.

    Values are the prefixes of the error codes. WRONG_KIND codes are built
    from the action and slot kind instead of a fixed prefix.
    """

    EMPTY_COMMAND = "empty_command"  # Blank input
    UNKNOWN_WORD = "unknown_word"  # Word outside the vocabulary
    UNKNOWN_VERB = "unknown_verb"  # First word is not a verb
    UNKNOWN_PATTERN = "unknown_pattern"  # No template for the verb fits
    UNKNOWN_NOUN = "unknown_noun"  # Object phrase does not end in a noun
    UNKNOWN_GAME_OBJECT = "unknown_game_object"  # No object has all the words
    AMBIGUOUS_OBJECT = "ambiguous_object"  # Several objects of the right kind fit
    WRONG_KIND = "wrong_kind"  # Object exists but the slot needs another kind


@dataclass(frozen=True)
class ParsedCommand:
    """A successfully parsed command.

    Attributes:
        action: Action identifier, e.g. "look" or "put_in".
        objects: Full descriptors of the resolved objects, in slot order.
    """

    action: str
    objects: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return True

    def __str__(self) -> str:
        if not self.objects:
            return self.action
        return f"{self.action}({', '.join(self.objects)})"


@dataclass(frozen=True)
class CommandError:
    """A line of input that could not be parsed.

    Attributes:
        kind: Category of the failure.
        words: Offending word or words, empty for EMPTY_COMMAND.
        action: Action identifier, only set for WRONG_KIND.
        slot_kind: Kind the slot required, only set for WRONG_KIND.
    """

    kind: ErrorKind
    words: tuple[str, ...] = ()
    action: str | None = None
    slot_kind: str | None = None

    @property
    def ok(self) -> bool:
        return False

    @property
    def phrase(self) -> str:
        """Offending words as typed."""
        return " ".join(self.words)

    @property
    def code(self) -> str:
        """Diagnostic code, e.g. ``unknown_word_yellow``."""
        joined = "_".join(self.words)
        if self.kind == ErrorKind.EMPTY_COMMAND:
            return self.kind.value
        if self.kind == ErrorKind.WRONG_KIND:
            return f"{self.action}_non_{self.slot_kind}_{joined}"
        return f"{self.kind.value}_{joined}"

    @property
    def message(self) -> str:
        """One-sentence explanation suitable for showing to a player."""
        phrase = self.phrase
        if self.kind == ErrorKind.EMPTY_COMMAND:
            return "Please type a command."
        if self.kind == ErrorKind.UNKNOWN_WORD:
            return f"I don't know the word '{phrase}'."
        if self.kind == ErrorKind.UNKNOWN_VERB:
            return f"'{phrase}' is not something you can do."
        if self.kind == ErrorKind.UNKNOWN_PATTERN:
            return f"I only understood you as far as wanting to {phrase}."
        if self.kind == ErrorKind.UNKNOWN_NOUN:
            return f"'{phrase}' doesn't name anything here."
        if self.kind == ErrorKind.UNKNOWN_GAME_OBJECT:
            return f"There is no {phrase} here."
        if self.kind == ErrorKind.AMBIGUOUS_OBJECT:
            return f"Which {phrase} do you mean?"

        return f"The {phrase} is not {_article(self.slot_kind)}."

    def __str__(self) -> str:
        return self.code


def _article(kind: str | None) -> str:
    kind = kind or "object"
    article = "an" if kind[0] in "aeiou" else "a"
    return f"{article} {kind}"


# Either outcome of parsing one line
Command = ParsedCommand | CommandError
