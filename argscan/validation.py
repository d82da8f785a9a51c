"""Structural validation of option vocabularies.

Validation is opt-in: the parser never runs it on its own. A program that
builds its vocabulary dynamically calls ``validate()`` (or ``is_valid()``)
once, before parsing.
"""

from typing import Iterable, List, Optional, Tuple

from .config import Flaw, FlawKind, Vocabulary


# Replacement character; marks text that was lossily decoded
REPLACEMENT_CHAR = '\ufffd'

LONG_FORBIDDEN = ('=', REPLACEMENT_CHAR)
SHORT_FORBIDDEN = ('-', REPLACEMENT_CHAR)


def _forbidden_in_name(name: str, forbidden: Tuple[str, ...]) -> Optional[str]:
    """Return the first forbidden character of a long or command name."""
    if name.startswith('-'):
        return '-'
    for char in name:
        if char in forbidden or char.isspace():
            return char
    return None


def _duplicates(identifiers: Iterable[str]) -> List[str]:
    """Identifiers declared more than once, in order of first declaration."""
    seen = set()
    duplicated = []
    for identifier in identifiers:
        if identifier in seen and identifier not in duplicated:
            duplicated.append(identifier)
        seen.add(identifier)
    return duplicated


class VocabularyValidator:
    """Finds structural flaws in a vocabulary and its command tree."""

    def validate(self, vocabulary: Vocabulary, path: Tuple[str, ...] = ()) -> List[Flaw]:
        """Return every flaw found, in a stable order.

        Per level: long names, short characters, short duplicates, long
        duplicates, command names, command duplicates; then each command's
        nested vocabulary in declaration order.
        """
        flaws = []
        flaws.extend(self._long_flaws(vocabulary, path))
        flaws.extend(self._short_flaws(vocabulary, path))
        flaws.extend(Flaw(FlawKind.SHORT_DUPLICATED, char, path=path)
                     for char in _duplicates(opt.char for opt in vocabulary.short))
        flaws.extend(Flaw(FlawKind.LONG_DUPLICATED, name, path=path)
                     for name in _duplicates(opt.name for opt in vocabulary.long))
        flaws.extend(self._command_flaws(vocabulary, path))
        flaws.extend(Flaw(FlawKind.COMMAND_DUPLICATED, name, path=path)
                     for name in _duplicates(cmd.name for cmd in vocabulary.commands))

        for command in vocabulary.commands:
            flaws.extend(self.validate(command.vocabulary, path + (command.name,)))
        return flaws

    def is_valid(self, vocabulary: Vocabulary) -> bool:
        return not self.validate(vocabulary)

    def _long_flaws(self, vocabulary: Vocabulary, path: Tuple[str, ...]) -> List[Flaw]:
        flaws = []
        for option in vocabulary.long:
            if not option.name:
                flaws.append(Flaw(FlawKind.LONG_EMPTY_NAME, option.name, path=path))
                continue
            char = _forbidden_in_name(option.name, LONG_FORBIDDEN)
            if char is not None:
                flaws.append(Flaw(FlawKind.LONG_FORBIDDEN_CHAR, option.name, char, path))
        return flaws

    def _short_flaws(self, vocabulary: Vocabulary, path: Tuple[str, ...]) -> List[Flaw]:
        flaws = []
        for option in vocabulary.short:
            char = option.char
            if len(char) != 1:
                flaws.append(Flaw(FlawKind.SHORT_NOT_SINGLE_CHAR, char, path=path))
            elif char in SHORT_FORBIDDEN or char.isdecimal() or char.isspace():
                flaws.append(Flaw(FlawKind.SHORT_FORBIDDEN_CHAR, char, char, path))
        return flaws

    def _command_flaws(self, vocabulary: Vocabulary, path: Tuple[str, ...]) -> List[Flaw]:
        flaws = []
        for command in vocabulary.commands:
            if not command.name:
                flaws.append(Flaw(FlawKind.COMMAND_EMPTY_NAME, command.name, path=path))
                continue
            char = _forbidden_in_name(command.name, (REPLACEMENT_CHAR,))
            if char is not None:
                flaws.append(Flaw(FlawKind.COMMAND_FORBIDDEN_CHAR, command.name, char, path))
        return flaws
