"""
argscan - command-line argument analysis

Classifies argument lists against a declared vocabulary of long options,
short options and nested commands, reporting every problem as an item
instead of failing.
"""

from .config import (
    Command,
    DataLocation,
    Flaw,
    FlawKind,
    Item,
    ItemKind,
    LongOption,
    OptionType,
    RunConfig,
    Settings,
    ShortOption,
    Vocabulary,
)
from .builder import VocabularyBuilder
from .matching import LongMatch, MatchKind, match_command, match_long, match_short, suggest
from .validation import VocabularyValidator
from .schema import SchemaValidator
from .loader import VocabularyLoader, load_vocabulary
from .engine import ParseIter
from .analysis import Analysis
from .parser import Parser
from .writer import AnalysisWriter
from .runner import ScanRunner


__version__ = '1.0.0'

__all__ = [
    # Main entry point
    'Parser',

    # Configuration
    'Settings',
    'RunConfig',

    # Data classes
    'Vocabulary',
    'LongOption',
    'ShortOption',
    'Command',
    'OptionType',
    'Item',
    'ItemKind',
    'DataLocation',
    'Flaw',
    'FlawKind',

    # Components
    'VocabularyBuilder',
    'VocabularyLoader',
    'load_vocabulary',
    'SchemaValidator',
    'VocabularyValidator',
    'ParseIter',
    'Analysis',
    'AnalysisWriter',
    'ScanRunner',

    # Matching
    'LongMatch',
    'MatchKind',
    'match_long',
    'match_short',
    'match_command',
    'suggest',
]
