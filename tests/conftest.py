"""Shared fixtures for argscan tests."""
import json

import pytest

from argscan import OptionType, Parser, Settings, VocabularyBuilder


@pytest.fixture
def vocabulary():
    """A flat vocabulary exercising every option type.

    Long ``foo`` is also a prefix of ``foobar``; ``help`` and ``hah`` share
    the prefix ``h``.
    """
    return (VocabularyBuilder()
            .add_long('help')
            .add_long('foo')
            .add_long('version')
            .add_long('foobar')
            .add_long('hah', OptionType.DATA)
            .add_long('output', OptionType.DATA)
            .add_long('colour', OptionType.MIXED)
            .add_long('ábc')
            .add_short('h')
            .add_short('x')
            .add_short('v')
            .add_short('o', OptionType.DATA)
            .add_short('c', OptionType.MIXED)
            .add_short('❤')
            .build())


@pytest.fixture
def command_vocabulary():
    """A vocabulary with layered commands: deploy [rollback], remote [add, remove]."""
    rollback = VocabularyBuilder().add_long('force')
    deploy = (VocabularyBuilder()
              .add_long('target', OptionType.DATA)
              .add_short('f')
              .add_command('rollback', rollback))
    remote = (VocabularyBuilder()
              .add_long('verbose')
              .add_command('add', VocabularyBuilder().add_short('f').add_long('tags'))
              .add_command('remove'))
    return (VocabularyBuilder()
            .add_long('help')
            .add_short('v')
            .add_command('deploy', deploy)
            .add_command('remote', remote)
            .build())


@pytest.fixture
def parser(vocabulary):
    return Parser(vocabulary)


@pytest.fixture
def make_parser(vocabulary):
    """Factory for parsers over the flat vocabulary with custom settings."""
    def _make(**settings):
        return Parser(vocabulary, Settings(**settings))
    return _make


@pytest.fixture
def vocabulary_document():
    return {
        "metadata": {"tool_name": "shipit"},
        "settings": {"posix_strict": True},
        "options": {
            "long": [
                {"name": "help"},
                {"name": "output", "type": "data"},
            ],
            "short": [{"char": "q"}],
            "pairs": [{"char": "c", "name": "colour", "type": "mixed"}],
            "shorts": "ab:",
        },
        "commands": [
            {
                "name": "deploy",
                "options": {"long": [{"name": "target", "type": "data"}]},
                "commands": [
                    {"name": "rollback", "options": {"long": [{"name": "force"}]}},
                ],
            },
            {"name": "status"},
        ],
    }


@pytest.fixture
def vocabulary_file(tmp_path, vocabulary_document):
    path = tmp_path / "vocab.json"
    path.write_text(json.dumps(vocabulary_document), encoding='utf-8')
    return path
