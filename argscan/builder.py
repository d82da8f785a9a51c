"""Growable vocabulary construction."""

from typing import List, Union

from .config import Command, Flaw, LongOption, OptionType, ShortOption, Vocabulary


class VocabularyBuilder:
    """Builds a ``Vocabulary`` incrementally.

    Methods return the builder, so calls chain. Identifiers are not checked
    here; call ``validate()`` on the built vocabulary (or on the builder)
    to find flaws.

    Usage:
        vocab = (VocabularyBuilder()
                 .add_pair('h', 'help')
                 .add_long('output', OptionType.DATA)
                 .add_command('deploy', VocabularyBuilder().add_long('target', OptionType.DATA))
                 .build())
    """

    def __init__(self):
        self.long: List[LongOption] = []
        self.short: List[ShortOption] = []
        self.commands: List[Command] = []

    def add_long(self, name: str, opt_type: OptionType = OptionType.FLAG) -> 'VocabularyBuilder':
        self.long.append(LongOption(name, _option_type(opt_type)))
        return self

    def add_short(self, char: str, opt_type: OptionType = OptionType.FLAG) -> 'VocabularyBuilder':
        self.short.append(ShortOption(char, _option_type(opt_type)))
        return self

    def add_pair(self, char: str, name: str,
                 opt_type: OptionType = OptionType.FLAG) -> 'VocabularyBuilder':
        """Add a short and a long option sharing the same type."""
        return self.add_short(char, opt_type).add_long(name, opt_type)

    def add_shorts_from_str(self, spec: str) -> 'VocabularyBuilder':
        """Add short options from a getopt style string.

        A character followed by ``:`` takes data, by ``::`` takes optional
        data (mixed). Leading colons are ignored, and more than two colons
        count as two.
        """
        position = 0
        while position < len(spec) and spec[position] == ':':
            position += 1

        while position < len(spec):
            char = spec[position]
            position += 1
            colons = 0
            while position < len(spec) and spec[position] == ':':
                colons += 1
                position += 1
            if colons == 0:
                opt_type = OptionType.FLAG
            elif colons == 1:
                opt_type = OptionType.DATA
            else:
                opt_type = OptionType.MIXED
            self.short.append(ShortOption(char, opt_type))
        return self

    def add_command(self, name: str,
                    vocabulary: Union[Vocabulary, 'VocabularyBuilder', None] = None) -> 'VocabularyBuilder':
        """Add a command; its nested vocabulary may itself hold commands."""
        if vocabulary is None:
            vocabulary = Vocabulary()
        elif isinstance(vocabulary, VocabularyBuilder):
            vocabulary = vocabulary.build()
        elif not isinstance(vocabulary, Vocabulary):
            raise TypeError(f"Command '{name}' needs a Vocabulary or VocabularyBuilder, "
                            f"got {type(vocabulary).__name__}")
        self.commands.append(Command(name, vocabulary))
        return self

    def build(self) -> Vocabulary:
        """Return an immutable snapshot of what was added so far."""
        return Vocabulary(long=tuple(self.long), short=tuple(self.short),
                          commands=tuple(self.commands))

    def validate(self) -> List[Flaw]:
        return self.build().validate()

    def is_valid(self) -> bool:
        return self.build().is_valid()

    @classmethod
    def from_vocabulary(cls, vocabulary: Vocabulary) -> 'VocabularyBuilder':
        """Start a builder holding a copy of an existing vocabulary."""
        builder = cls()
        builder.long.extend(vocabulary.long)
        builder.short.extend(vocabulary.short)
        builder.commands.extend(vocabulary.commands)
        return builder


def _option_type(opt_type: Union[OptionType, str, bool, None]) -> OptionType:
    """Accept an OptionType, its string value, or a takes-data boolean."""
    if isinstance(opt_type, OptionType):
        return opt_type
    if isinstance(opt_type, bool):
        return OptionType.DATA if opt_type else OptionType.FLAG
    if isinstance(opt_type, str):
        return OptionType(opt_type)
    raise TypeError(f"Unsupported option type: {opt_type!r}")
