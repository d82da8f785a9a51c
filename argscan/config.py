"""Configuration and data classes for argscan."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple


class OptionType(Enum):
    """Whether an option takes a data value"""
    FLAG = "flag"
    DATA = "data"    # data mandatory, may come from the next token
    MIXED = "mixed"  # data optional, same token only

    @property
    def takes_data(self) -> bool:
        return self is not OptionType.FLAG


class DataLocation(Enum):
    """Where an option's data value was found"""
    SAME_ARG = "same_arg"
    NEXT_ARG = "next_arg"


@dataclass(frozen=True)
class LongOption:
    """A declared long option, name excluding the dash prefix"""
    name: str
    opt_type: OptionType = OptionType.FLAG

    @property
    def takes_data(self) -> bool:
        return self.opt_type.takes_data


@dataclass(frozen=True)
class ShortOption:
    """A declared short option character"""
    char: str
    opt_type: OptionType = OptionType.FLAG

    @property
    def takes_data(self) -> bool:
        return self.opt_type.takes_data


@dataclass(frozen=True)
class Command:
    """A named command owning its own nested vocabulary"""
    name: str
    vocabulary: 'Vocabulary'


@dataclass(frozen=True)
class Vocabulary:
    """Immutable set of options, optionally with a tree of commands.

    Declaration order is kept; it decides the order of ambiguity candidates
    and of validation reports.
    """
    long: Tuple[LongOption, ...] = ()
    short: Tuple[ShortOption, ...] = ()
    commands: Tuple[Command, ...] = ()

    def is_empty(self) -> bool:
        return not (self.long or self.short or self.commands)

    def get_command(self, name: str) -> Optional[Command]:
        for command in self.commands:
            if command.name == name:
                return command
        return None

    def validate(self) -> List['Flaw']:
        """Return the ordered list of structural flaws (empty if valid)."""
        from .validation import VocabularyValidator
        return VocabularyValidator().validate(self)

    def is_valid(self) -> bool:
        from .validation import VocabularyValidator
        return VocabularyValidator().is_valid(self)

    def suggest_long(self, unknown: str) -> Optional[str]:
        """Closest declared long option name, for "did you mean" hints."""
        from .matching import suggest
        return suggest(unknown, [opt.name for opt in self.long])

    def suggest_command(self, unknown: str) -> Optional[str]:
        from .matching import suggest
        return suggest(unknown, [cmd.name for cmd in self.commands])


@dataclass(frozen=True)
class Settings:
    """Parsing mode toggles, fixed for the duration of one parse"""
    allow_abbreviations: bool = True
    posix_strict: bool = False
    alt_mode: bool = False


class ItemKind(Enum):
    """Classification of one analysed token (or cluster character)"""
    POSITIONAL = "positional"
    EARLY_TERMINATOR = "early_terminator"
    COMMAND = "command"
    LONG = "long"
    SHORT = "short"
    UNKNOWN_LONG = "unknown_long"
    UNKNOWN_SHORT = "unknown_short"
    AMBIGUOUS_LONG = "ambiguous_long"
    LONG_WITH_UNEXPECTED_DATA = "long_with_unexpected_data"
    LONG_MISSING_DATA = "long_missing_data"
    SHORT_MISSING_DATA = "short_missing_data"

    @property
    def is_problem(self) -> bool:
        return self in _PROBLEM_KINDS


_PROBLEM_KINDS = frozenset({
    ItemKind.UNKNOWN_LONG,
    ItemKind.UNKNOWN_SHORT,
    ItemKind.AMBIGUOUS_LONG,
    ItemKind.LONG_WITH_UNEXPECTED_DATA,
    ItemKind.LONG_MISSING_DATA,
    ItemKind.SHORT_MISSING_DATA,
})


@dataclass(frozen=True)
class Item:
    """One classified item of an analysis.

    Which fields are set depends on ``kind``:

    - ``name``: long option name (full name when matched, raw name or prefix
      otherwise) or command name
    - ``char``: short option character
    - ``value``: option data, or the raw token of a positional
    - ``location``: where option data was found
    - ``candidates``: full names matching an ambiguous abbreviation
    """
    kind: ItemKind
    index: int
    name: Optional[str] = None
    char: Optional[str] = None
    value: Optional[str] = None
    location: Optional[DataLocation] = None
    candidates: Tuple[str, ...] = field(default=())

    @property
    def is_problem(self) -> bool:
        return self.kind.is_problem


class FlawKind(Enum):
    """Structural problems a vocabulary can have"""
    LONG_EMPTY_NAME = "long_empty_name"
    LONG_FORBIDDEN_CHAR = "long_forbidden_char"
    LONG_DUPLICATED = "long_duplicated"
    SHORT_NOT_SINGLE_CHAR = "short_not_single_char"
    SHORT_FORBIDDEN_CHAR = "short_forbidden_char"
    SHORT_DUPLICATED = "short_duplicated"
    COMMAND_EMPTY_NAME = "command_empty_name"
    COMMAND_FORBIDDEN_CHAR = "command_forbidden_char"
    COMMAND_DUPLICATED = "command_duplicated"


@dataclass(frozen=True)
class Flaw:
    """A vocabulary flaw found by validation"""
    kind: FlawKind
    subject: str
    char: Optional[str] = None
    path: Tuple[str, ...] = ()

    def describe(self) -> str:
        where = f" (in command '{' '.join(self.path)}')" if self.path else ""
        messages = {
            FlawKind.LONG_EMPTY_NAME: "long option name is empty",
            FlawKind.LONG_FORBIDDEN_CHAR: f"long option '{self.subject}' contains forbidden character {self.char!r}",
            FlawKind.LONG_DUPLICATED: f"long option '{self.subject}' is declared more than once",
            FlawKind.SHORT_NOT_SINGLE_CHAR: f"short option {self.subject!r} is not a single character",
            FlawKind.SHORT_FORBIDDEN_CHAR: f"short option {self.subject!r} is a forbidden character",
            FlawKind.SHORT_DUPLICATED: f"short option '{self.subject}' is declared more than once",
            FlawKind.COMMAND_EMPTY_NAME: "command name is empty",
            FlawKind.COMMAND_FORBIDDEN_CHAR: f"command '{self.subject}' contains forbidden character {self.char!r}",
            FlawKind.COMMAND_DUPLICATED: f"command '{self.subject}' is declared more than once",
        }
        return messages[self.kind] + where


@dataclass
class RunConfig:
    """Configuration for one analysis run of the command line tool"""
    args: List[str] = field(default_factory=list)
    settings: Optional[Settings] = None  # None = take settings from the vocabulary file
    output_path: Optional[Path] = None   # None = stdout
    show_vocabulary: bool = True
    suggestions: bool = True
    verbose: bool = False
