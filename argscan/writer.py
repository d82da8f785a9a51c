"""Plain text reports of analysis results."""

import sys
from pathlib import Path
from typing import List, Optional

from .analysis import Analysis
from .config import DataLocation, Item, ItemKind, OptionType, Settings, Vocabulary


_LABELS = {
    ItemKind.POSITIONAL: "Positional",
    ItemKind.EARLY_TERMINATOR: "EarlyTerminator",
    ItemKind.COMMAND: "Command",
    ItemKind.LONG: "Long",
    ItemKind.SHORT: "Short",
    ItemKind.UNKNOWN_LONG: "UnknownLong",
    ItemKind.UNKNOWN_SHORT: "UnknownShort",
    ItemKind.AMBIGUOUS_LONG: "AmbiguousLong",
    ItemKind.LONG_WITH_UNEXPECTED_DATA: "LongWithUnexpectedData",
    ItemKind.LONG_MISSING_DATA: "LongMissingData",
    ItemKind.SHORT_MISSING_DATA: "ShortMissingData",
}


class AnalysisWriter:
    """Writes analysis reports to a file, or to stdout when no path is given."""

    def __init__(self, output_path: Optional[Path] = None):
        self.output_path = output_path

    def describe_vocabulary(self, vocabulary: Vocabulary, settings: Settings) -> List[str]:
        lines = [
            "[ Mode ]",
            "ALTERNATE (long options take a single dash)" if settings.alt_mode else "STANDARD",
            f"Abbreviations: {'on' if settings.allow_abbreviations else 'off'}",
            f"POSIX strict: {'on' if settings.posix_strict else 'off'}",
            "",
            "[ Available options ]",
        ]
        lines.extend(self._vocabulary_lines(vocabulary, indent=''))
        return lines

    def _vocabulary_lines(self, vocabulary: Vocabulary, indent: str) -> List[str]:
        lines = []
        for option in vocabulary.long:
            lines.append(f"{indent}LONG {option.name}{_type_note(option.opt_type)}")
        for option in vocabulary.short:
            lines.append(f"{indent}SHORT {option.char}{_type_note(option.opt_type)}")
        for command in vocabulary.commands:
            lines.append(f"{indent}COMMAND {command.name}")
            lines.extend(self._vocabulary_lines(command.vocabulary, indent + '    '))
        return lines

    def render(self, analysis: Analysis, args: Optional[List[str]] = None) -> List[str]:
        """Render the analysis as report lines"""
        lines = []
        if args is not None:
            lines.append("[ Input arguments ]")
            lines.extend(f"[{i}]: {arg}" for i, arg in enumerate(args))
            if not args:
                lines.append("None!")
            lines.append("")

        lines.append("[ Analysis ]")
        lines.append(f"Problems: {'true' if analysis.problems_found else 'false'}")
        lines.append(f"Items: {len(analysis)}")
        lines.append("")
        for item in analysis:
            lines.extend(self.render_item(item))
        return lines

    def render_item(self, item: Item) -> List[str]:
        label = f"[arg {item.index}] {_LABELS[item.kind]}"
        if item.kind is ItemKind.EARLY_TERMINATOR:
            lines = [label]
        elif item.kind is ItemKind.POSITIONAL:
            lines = [f"{label}: {item.value}"]
        elif item.char is not None:
            lines = [f"{label}: {item.char} ({_escape(item.char)})"]
        else:
            lines = [f"{label}: {item.name}"]

        if item.kind is ItemKind.AMBIGUOUS_LONG:
            lines.append(f"    candidates: {', '.join(item.candidates)}")
        elif item.value is not None and item.kind is not ItemKind.POSITIONAL:
            if item.location is DataLocation.NEXT_ARG:
                lines.append("    data found in NEXT arg")
            elif item.location is DataLocation.SAME_ARG:
                lines.append("    data found in SAME arg")
            lines.append(f"    data: {item.value}" if item.value else "    empty-data")
        return lines

    def write(self, lines: List[str]) -> int:
        """Write report lines and return how many were written"""
        text = '\n'.join(lines) + '\n'
        if self.output_path is None:
            sys.stdout.write(text)
            return len(lines)
        try:
            self.output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.output_path, 'w', encoding='utf-8') as f:
                f.write(text)
        except IOError as e:
            raise IOError(f"Failed to write report to {self.output_path}: {e}")
        return len(lines)


def _type_note(opt_type: OptionType) -> str:
    if opt_type is OptionType.DATA:
        return " [expects data]"
    if opt_type is OptionType.MIXED:
        return " [optional data]"
    return ""


def _escape(char: str) -> str:
    return ''.join(f"\\u{{{ord(c):x}}}" for c in char)
