"""Declarative vocabulary construction from JSON documents."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .builder import VocabularyBuilder
from .config import Command, Settings, Vocabulary
from .schema import SchemaValidator


logger = logging.getLogger(__name__)


class VocabularyLoader:
    """Turns a vocabulary document into a ``Vocabulary`` tree.

    Documents are checked against the JSON schema first, so the parsing
    methods below can index required keys directly.
    """

    def __init__(self, schema_path: Optional[Path] = None):
        self.validator = SchemaValidator(schema_path)

    def load(self, document_path: Path) -> Vocabulary:
        """Load and validate a vocabulary file"""
        document = self.validator.validate(document_path)
        logger.debug("loaded vocabulary document %s", document_path)
        return self._parse_vocabulary(document)

    def load_settings(self, document_path: Path) -> Settings:
        """Read the optional settings object of a vocabulary file"""
        document = self.validator.validate(document_path)
        return self.parse_settings(document)

    def load_with_settings(self, document_path: Path) -> Tuple[Vocabulary, Settings]:
        """Load a vocabulary file and its settings from one validated read"""
        document = self.validator.validate(document_path)
        logger.debug("loaded vocabulary document %s", document_path)
        return self._parse_vocabulary(document), self.parse_settings(document)

    def from_mapping(self, document: Dict[str, Any]) -> Vocabulary:
        """Validate an in-memory document and build its vocabulary"""
        return self._parse_vocabulary(self.validator.validate_document(document))

    @staticmethod
    def parse_settings(document: Dict[str, Any]) -> Settings:
        settings = document.get('settings', {})
        return Settings(
            allow_abbreviations=settings.get('allow_abbreviations', True),
            posix_strict=settings.get('posix_strict', False),
            alt_mode=settings.get('alt_mode', False),
        )

    def _parse_vocabulary(self, spec: Dict[str, Any]) -> Vocabulary:
        builder = VocabularyBuilder()
        self._parse_options(builder, spec.get('options', {}))
        builder.commands.extend(self._parse_commands(spec.get('commands', [])))
        vocabulary = builder.build()
        logger.debug("vocabulary with %d long, %d short options and %d commands",
                     len(vocabulary.long), len(vocabulary.short), len(vocabulary.commands))
        return vocabulary

    def _parse_options(self, builder: VocabularyBuilder, options: Dict[str, Any]) -> None:
        """Parse long, short, pair and getopt style declarations"""
        for long_spec in options.get('long', []):
            builder.add_long(long_spec['name'], long_spec.get('type', 'flag'))
        for short_spec in options.get('short', []):
            builder.add_short(short_spec['char'], short_spec.get('type', 'flag'))
        for pair_spec in options.get('pairs', []):
            builder.add_pair(pair_spec['char'], pair_spec['name'], pair_spec.get('type', 'flag'))
        if 'shorts' in options:
            builder.add_shorts_from_str(options['shorts'])

    def _parse_commands(self, command_specs: List[Dict[str, Any]]) -> List[Command]:
        """Parse commands, recursing into their sub-commands"""
        return [Command(cmd_spec['name'], self._parse_vocabulary(cmd_spec))
                for cmd_spec in command_specs]


def load_vocabulary(document_path: Path, schema_path: Optional[Path] = None) -> Vocabulary:
    """Convenience wrapper around ``VocabularyLoader.load``"""
    return VocabularyLoader(schema_path).load(document_path)
