"""Token-walk engine classifying an argument list item by item.

``ParseIter`` holds the cursor and mode state of one parse. Its ``step``
method consumes exactly one token (plus a following token taken as option
data, when needed) and returns the items produced for it; iteration simply
drives ``step`` and hands items out one at a time.
"""

import logging
from collections import deque
from enum import Enum
from typing import Deque, Iterable, List, Optional, Tuple

from .config import DataLocation, Item, ItemKind, OptionType, Settings, Vocabulary
from .matching import MatchKind, match_command, match_long, match_short


logger = logging.getLogger(__name__)

EARLY_TERMINATOR = '--'


class TokenShape(Enum):
    """Basic shape of a token, judged from its dash prefix only"""
    NON_OPTION = "non_option"
    EARLY_TERMINATOR = "early_terminator"
    LONG = "long"
    SHORT_CLUSTER = "short_cluster"


def token_shape(token: str, alt_mode: bool = False) -> Tuple[TokenShape, str]:
    """Return the shape of ``token`` and its text with the prefix removed."""
    if token == EARLY_TERMINATOR:
        return TokenShape.EARLY_TERMINATOR, ''
    if alt_mode:
        if len(token) > 1 and token.startswith('-'):
            return TokenShape.LONG, token[1:]
    else:
        if len(token) > 2 and token.startswith('--'):
            return TokenShape.LONG, token[2:]
        if len(token) > 1 and token.startswith('-'):
            return TokenShape.SHORT_CLUSTER, token[1:]
    return TokenShape.NON_OPTION, token


class ParseIter:
    """Lazy producer of analysis items for one argument list.

    Not reentrant: advance it from a single consumer. The argument list and
    vocabulary are only read, so independent instances may share them.
    """

    def __init__(self, args: Iterable[str], vocabulary: Vocabulary,
                 settings: Optional[Settings] = None):
        self.args = tuple(args)
        self.settings = settings if settings is not None else Settings()
        self._vocabulary = vocabulary
        self._cursor = 0
        self._rest_are_positionals = False
        self._try_commands = True
        self._pending: Deque[Item] = deque()

    @property
    def vocabulary(self) -> Vocabulary:
        """The vocabulary active at the current nesting level."""
        return self._vocabulary

    @property
    def accepting_options(self) -> bool:
        return not self._rest_are_positionals

    @property
    def exhausted(self) -> bool:
        return not self._pending and self._cursor >= len(self.args)

    def __iter__(self):
        return self

    def __next__(self) -> Item:
        while not self._pending:
            if self._cursor >= len(self.args):
                raise StopIteration
            self._pending.extend(self.step())
        return self._pending.popleft()

    def step(self) -> List[Item]:
        """Consume the next token and return the items it produces."""
        index = self._cursor
        token = self.args[index]
        self._cursor += 1

        if self._rest_are_positionals:
            shape, body = TokenShape.NON_OPTION, token
        else:
            shape, body = token_shape(token, self.settings.alt_mode)

        if shape is TokenShape.NON_OPTION:
            items = [self._non_option(index, token)]
        elif shape is TokenShape.EARLY_TERMINATOR:
            self._rest_are_positionals = True
            items = [Item(ItemKind.EARLY_TERMINATOR, index)]
        elif shape is TokenShape.LONG:
            items = [self._long(index, body)]
        else:
            items = self._short_cluster(index, body)

        logger.debug("token %d %r -> %s", index, token,
                     ', '.join(item.kind.value for item in items))
        return items

    def _take_next_arg(self) -> Optional[str]:
        if self._cursor >= len(self.args):
            return None
        data = self.args[self._cursor]
        self._cursor += 1
        return data

    def _non_option(self, index: int, token: str) -> Item:
        if not self._rest_are_positionals:
            if self._try_commands:
                command = match_command(token, self._vocabulary)
                if command is not None:
                    logger.debug("entering command %r", command.name)
                    self._vocabulary = command.vocabulary
                    return Item(ItemKind.COMMAND, index, name=command.name)
                self._try_commands = False
            if self.settings.posix_strict:
                self._rest_are_positionals = True
        return Item(ItemKind.POSITIONAL, index, value=token)

    def _long(self, index: int, body: str) -> Item:
        name, separator, data = body.partition('=')
        in_arg_data = data if separator else None

        if not name:
            return Item(ItemKind.UNKNOWN_LONG, index, name='', value=in_arg_data)

        match = match_long(name, self._vocabulary, self.settings.allow_abbreviations)
        if match is None:
            return Item(ItemKind.UNKNOWN_LONG, index, name=name, value=in_arg_data)
        if match.kind is MatchKind.AMBIGUOUS:
            return Item(ItemKind.AMBIGUOUS_LONG, index, name=name, candidates=match.candidates)

        option = match.option
        if option.opt_type is OptionType.FLAG:
            if in_arg_data:
                return Item(ItemKind.LONG_WITH_UNEXPECTED_DATA, index, name=option.name,
                            value=in_arg_data, location=DataLocation.SAME_ARG)
            return Item(ItemKind.LONG, index, name=option.name)

        if in_arg_data is not None:
            return Item(ItemKind.LONG, index, name=option.name,
                        value=in_arg_data, location=DataLocation.SAME_ARG)
        if option.opt_type is OptionType.MIXED:
            return Item(ItemKind.LONG, index, name=option.name)

        next_arg = self._take_next_arg()
        if next_arg is None:
            return Item(ItemKind.LONG_MISSING_DATA, index, name=option.name)
        return Item(ItemKind.LONG, index, name=option.name,
                    value=next_arg, location=DataLocation.NEXT_ARG)

    def _short_cluster(self, index: int, body: str) -> List[Item]:
        items = []
        for position, char in enumerate(body):
            option = match_short(char, self._vocabulary)
            if option is None:
                items.append(Item(ItemKind.UNKNOWN_SHORT, index, char=char))
                continue
            if option.opt_type is OptionType.FLAG:
                items.append(Item(ItemKind.SHORT, index, char=char))
                continue

            # Data-taking: the rest of the cluster, if any, is the value
            remainder = body[position + 1:]
            if remainder:
                items.append(Item(ItemKind.SHORT, index, char=char,
                                  value=remainder, location=DataLocation.SAME_ARG))
            elif option.opt_type is OptionType.MIXED:
                items.append(Item(ItemKind.SHORT, index, char=char))
            else:
                next_arg = self._take_next_arg()
                if next_arg is None:
                    items.append(Item(ItemKind.SHORT_MISSING_DATA, index, char=char))
                else:
                    items.append(Item(ItemKind.SHORT, index, char=char,
                                      value=next_arg, location=DataLocation.NEXT_ARG))
            break
        return items
