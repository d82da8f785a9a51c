"""Matching of tokens against declared options and commands.

All functions here are pure lookups over a ``Vocabulary``; none of them
touch parser state.
"""

import difflib
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple

from .config import Command, LongOption, ShortOption, Vocabulary


# Minimum similarity ratio for a "did you mean" suggestion
SUGGESTION_CUTOFF = 0.8


class MatchKind(Enum):
    """How a long option name was resolved"""
    EXACT = "exact"
    ABBREVIATED = "abbreviated"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class LongMatch:
    """Outcome of a long option lookup that found at least one candidate"""
    kind: MatchKind
    option: Optional[LongOption] = None
    candidates: Tuple[str, ...] = ()


def match_long(name: str, vocabulary: Vocabulary,
               allow_abbreviations: bool = True) -> Optional[LongMatch]:
    """Resolve a long option name, optionally accepting abbreviations.

    An exact match always wins, even when the name is also a prefix of
    other declared names. Otherwise every declared name having ``name`` as
    a proper prefix is a candidate: one candidate is an abbreviation, more
    are reported as ambiguous in declaration order.

    Returns None when nothing matches.
    """
    for option in vocabulary.long:
        if option.name == name:
            return LongMatch(MatchKind.EXACT, option)

    if not allow_abbreviations or not name:
        return None

    prefixed = [opt for opt in vocabulary.long
                if len(opt.name) > len(name) and opt.name.startswith(name)]
    if not prefixed:
        return None
    if len(prefixed) == 1:
        return LongMatch(MatchKind.ABBREVIATED, prefixed[0])
    return LongMatch(MatchKind.AMBIGUOUS, candidates=tuple(opt.name for opt in prefixed))


def match_short(char: str, vocabulary: Vocabulary) -> Optional[ShortOption]:
    """Look up a short option character."""
    for option in vocabulary.short:
        if option.char == char:
            return option
    return None


def match_command(token: str, vocabulary: Vocabulary) -> Optional[Command]:
    """Look up a command by exact name."""
    return vocabulary.get_command(token)


def suggest(unknown: str, names: Iterable[str]) -> Optional[str]:
    """Return the declared name closest to ``unknown``, if close enough."""
    matches = difflib.get_close_matches(unknown, list(names), n=1, cutoff=SUGGESTION_CUTOFF)
    return matches[0] if matches else None
