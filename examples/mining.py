#!/usr/bin/env python3
"""
Example program using argscan to interpret its own command line.

Demonstrates both ways of declaring a vocabulary and the data-mining
queries of an analysis:

  python mining.py --verbose -o out.txt deploy --target=prod a.txt b.txt
  python mining.py --vocabulary vocabulary.json --colour -- -not-an-option

Problems are reported one per line, with a "did you mean" hint for
unknown long options.
"""

import sys
from pathlib import Path

from argscan import ItemKind, OptionType, Parser, VocabularyBuilder, load_vocabulary


def build_vocabulary():
    """Declare the vocabulary in code."""
    deploy = (VocabularyBuilder()
              .add_long('target', OptionType.DATA)
              .add_long('dry-run'))
    return (VocabularyBuilder()
            .add_pair('h', 'help')
            .add_pair('v', 'verbose')
            .add_pair('o', 'output', OptionType.DATA)
            .add_long('colour', OptionType.MIXED)
            .add_long('vocabulary', OptionType.DATA)
            .add_command('deploy', deploy)
            .add_command('status')
            .build())


def describe_problem(parser, analysis, item):
    if item.kind is ItemKind.UNKNOWN_LONG:
        message = f"unknown option '--{item.name}'"
        suggestion = parser.suggest(item, analysis)
        if suggestion is not None:
            message += f", did you mean '--{suggestion}'?"
        return message
    if item.kind is ItemKind.UNKNOWN_SHORT:
        return f"unknown option '-{item.char}'"
    if item.kind is ItemKind.AMBIGUOUS_LONG:
        return f"'--{item.name}' is ambiguous: {', '.join(item.candidates)}"
    if item.kind is ItemKind.LONG_WITH_UNEXPECTED_DATA:
        return f"'--{item.name}' does not take a value"
    if item.kind is ItemKind.LONG_MISSING_DATA:
        return f"'--{item.name}' needs a value"
    return f"'-{item.char}' needs a value"


def main(argv):
    parser = Parser(build_vocabulary())
    analysis = parser.parse(argv)

    # A vocabulary file replaces the built-in one; parse again against it
    vocabulary_path = analysis.last_value('vocabulary')
    if vocabulary_path:
        parser = Parser(load_vocabulary(Path(vocabulary_path)))
        analysis = parser.parse(argv)

    if not parser.is_valid():
        for flaw in parser.validate():
            print(f"vocabulary flaw: {flaw.describe()}")
        return 2

    if analysis.problems_found:
        for item in analysis.problems():
            print(f"error: {describe_problem(parser, analysis, item)}")
        return 1

    if analysis.used('help', 'h'):
        print("usage: mining.py [-hv] [-o FILE] [--colour[=WHEN]] [deploy|status] [FILE...]")
        return 0

    print(f"verbosity: {analysis.count('verbose', 'v')}")
    print(f"output: {analysis.last_value('output', 'o') or 'stdout'}")
    print(f"colour: {analysis.last_value('colour') or ('auto' if analysis.used('colour') else 'never')}")
    print(f"commands: {' '.join(analysis.command_path()) or '(none)'}")
    for positional in analysis.positionals():
        print(f"file: {positional}")
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv[1:]))
