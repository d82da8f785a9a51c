"""Tests for option and command matching."""
from argscan import (
    LongOption,
    MatchKind,
    OptionType,
    ShortOption,
    match_command,
    match_long,
    match_short,
    suggest,
)


def test_match_long_exact(vocabulary):
    match = match_long('foo', vocabulary)
    assert match.kind is MatchKind.EXACT
    assert match.option == LongOption('foo')


def test_match_long_abbreviated(vocabulary):
    match = match_long('outp', vocabulary)
    assert match.kind is MatchKind.ABBREVIATED
    assert match.option == LongOption('output', OptionType.DATA)


def test_match_long_ambiguous_in_declaration_order(vocabulary):
    match = match_long('h', vocabulary)
    assert match.kind is MatchKind.AMBIGUOUS
    assert match.option is None
    assert match.candidates == ('help', 'hah')


def test_match_long_without_abbreviations(vocabulary):
    assert match_long('outp', vocabulary, allow_abbreviations=False) is None
    assert match_long('output', vocabulary, allow_abbreviations=False).kind is MatchKind.EXACT


def test_match_long_no_match(vocabulary):
    assert match_long('nothing', vocabulary) is None
    assert match_long('', vocabulary) is None
    # Longer than any declared name
    assert match_long('foobarbaz', vocabulary) is None


def test_match_short(vocabulary):
    assert match_short('o', vocabulary) == ShortOption('o', OptionType.DATA)
    assert match_short('❤', vocabulary) == ShortOption('❤')
    assert match_short('z', vocabulary) is None


def test_match_command_is_exact(command_vocabulary):
    assert match_command('deploy', command_vocabulary).name == 'deploy'
    assert match_command('dep', command_vocabulary) is None
    assert match_command('deployment', command_vocabulary) is None


def test_match_command_on_nested_level(command_vocabulary):
    remote = match_command('remote', command_vocabulary).vocabulary
    assert match_command('add', remote).name == 'add'
    assert match_command('add', command_vocabulary) is None


def test_suggest():
    assert suggest('verison', ['help', 'version', 'verbose']) == 'version'
    assert suggest('zzz', ['help', 'version']) is None
    assert suggest('help', []) is None


def test_vocabulary_suggestions(vocabulary, command_vocabulary):
    assert vocabulary.suggest_long('fooo') == 'foo'
    assert command_vocabulary.suggest_command('deplyo') == 'deploy'
    assert command_vocabulary.suggest_command('xyz') is None
