"""Analysis results and data-mining queries."""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import Item, ItemKind


@dataclass(frozen=True)
class Analysis:
    """Complete, ordered result of one parse.

    Queries take one or more identifiers; an identifier matches a long
    option item by name and a short option item by character, so
    ``used('o', 'output')`` covers both forms of an option pair. Only
    successfully matched options count; problem items never do.
    """
    items: Tuple[Item, ...]
    problems_found: bool

    @classmethod
    def from_items(cls, items: Iterable[Item]) -> 'Analysis':
        items = tuple(items)
        return cls(items=items, problems_found=any(item.is_problem for item in items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def _matching(self, identifiers: Tuple[str, ...]) -> Iterator[Item]:
        for item in self.items:
            if item.kind is ItemKind.LONG and item.name in identifiers:
                yield item
            elif item.kind is ItemKind.SHORT and item.char in identifiers:
                yield item

    def used(self, *identifiers: str) -> bool:
        """Whether any of the given options was used."""
        return next(self._matching(identifiers), None) is not None

    def count(self, *identifiers: str) -> int:
        """Number of times the given options were used."""
        return sum(1 for _ in self._matching(identifiers))

    def last_value(self, *identifiers: str) -> Optional[str]:
        """Data value of the most recent use of the given options.

        None if never used, or if the most recent use carried no data.
        """
        value = None
        for item in self._matching(identifiers):
            value = item.value
        return value

    def all_values(self, *identifiers: str) -> List[str]:
        """All data values given to the options, in order of occurrence."""
        return [item.value for item in self._matching(identifiers) if item.value is not None]

    def positionals(self) -> Iterator[str]:
        """Yield positional values; each call starts a fresh iteration."""
        return (item.value for item in self.items if item.kind is ItemKind.POSITIONAL)

    def command_path(self) -> List[str]:
        """Names of the matched commands, outermost first."""
        return [item.name for item in self.items if item.kind is ItemKind.COMMAND]

    def problems(self) -> Iterator[Item]:
        return (item for item in self.items if item.is_problem)

    def first_problem(self) -> Optional[Item]:
        return next(self.problems(), None)
