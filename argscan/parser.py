"""Parser pairing a vocabulary with parse settings."""

from typing import Iterable, List, Optional

from .analysis import Analysis
from .config import Flaw, Item, ItemKind, Settings, Vocabulary
from .engine import ParseIter


class Parser:
    """Entry point for parsing argument lists.

    The argument list given to ``parse`` / ``parse_iter`` must not include
    the program name.
    """

    def __init__(self, vocabulary: Optional[Vocabulary] = None,
                 settings: Optional[Settings] = None):
        self.vocabulary = vocabulary if vocabulary is not None else Vocabulary()
        self.settings = settings if settings is not None else Settings()

    def parse_iter(self, args: Iterable[str]) -> ParseIter:
        """Lazily classify ``args``, one item at a time."""
        return ParseIter(args, self.vocabulary, self.settings)

    def parse(self, args: Iterable[str]) -> Analysis:
        """Classify all of ``args`` and return the complete analysis."""
        return Analysis.from_items(self.parse_iter(args))

    def validate(self) -> List[Flaw]:
        return self.vocabulary.validate()

    def is_valid(self) -> bool:
        return self.vocabulary.is_valid()

    def suggest(self, item: Item, analysis: Optional[Analysis] = None) -> Optional[str]:
        """Suggest a declared long option name for an unknown long item.

        The suggestion is drawn from the vocabulary active where the item
        was found, so pass the item's analysis when commands are in use.
        """
        if item.kind is not ItemKind.UNKNOWN_LONG or not item.name:
            return None
        return self._vocabulary_at(item, analysis).suggest_long(item.name)

    def _vocabulary_at(self, item: Item, analysis: Optional[Analysis]) -> Vocabulary:
        vocabulary = self.vocabulary
        if analysis is None:
            return vocabulary
        for earlier in analysis.items:
            if earlier.index >= item.index:
                break
            if earlier.kind is ItemKind.COMMAND:
                command = vocabulary.get_command(earlier.name)
                if command is not None:
                    vocabulary = command.vocabulary
        return vocabulary
