"""Analysis run orchestrator for the command line tool."""

from pathlib import Path
from typing import Optional

from .analysis import Analysis
from .config import ItemKind, RunConfig
from .loader import VocabularyLoader
from .parser import Parser
from .writer import AnalysisWriter


class ScanRunner:
    """Loads a vocabulary file, analyses an argument list and reports it."""

    def __init__(self, vocabulary_path: Path, run_config: RunConfig,
                 schema_path: Optional[Path] = None):
        self.vocabulary_path = vocabulary_path
        self.run_config = run_config
        self.verbose = run_config.verbose

        # Pipeline components (initialized in run())
        self.loader = VocabularyLoader(schema_path)
        self.parser = None
        self.writer = None
        self.analysis = None

    def run(self) -> Analysis:
        """Run the complete analysis pipeline."""
        self._log("[1/4] Loading and validating vocabulary...")
        vocabulary, file_settings = self.loader.load_with_settings(self.vocabulary_path)
        settings = self.run_config.settings
        if settings is None:
            settings = file_settings
        self._log(f"      Long options: {len(vocabulary.long)}")
        self._log(f"      Short options: {len(vocabulary.short)}")
        self._log(f"      Commands: {len(vocabulary.commands)}")

        self._log("[2/4] Checking vocabulary flaws...")
        self.parser = Parser(vocabulary, settings)
        flaws = self.parser.validate()
        for flaw in flaws:
            self._log(f"      Flaw: {flaw.describe()}")
        if not flaws:
            self._log("      None found")

        self._log("[3/4] Parsing arguments...")
        self.analysis = self.parser.parse(self.run_config.args)
        self._log(f"      Items: {len(self.analysis)}")

        self._log("[4/4] Writing report...")
        self.writer = AnalysisWriter(self.run_config.output_path)
        lines = []
        if self.run_config.show_vocabulary:
            lines.extend(self.writer.describe_vocabulary(vocabulary, settings))
            lines.append("")
        lines.extend(self.writer.render(self.analysis, self.run_config.args))
        if self.run_config.suggestions:
            lines.extend(self._suggestion_lines())
        count = self.writer.write(lines)
        self._log(f"      Lines: {count}")
        self._log(f"      Output: {self.run_config.output_path or 'stdout'}")

        return self.analysis

    def _suggestion_lines(self) -> list:
        lines = []
        for item in self.analysis.problems():
            if item.kind is not ItemKind.UNKNOWN_LONG:
                continue
            suggestion = self.parser.suggest(item, self.analysis)
            if suggestion is not None:
                lines.append(f"Unknown option '{item.name}', did you mean '{suggestion}'?")
        if lines:
            lines.insert(0, "")
        return lines

    def _log(self, message: str) -> None:
        """Log message if verbose mode is enabled."""
        if self.verbose:
            print(message)
