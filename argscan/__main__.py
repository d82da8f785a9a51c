"""CLI entry point for argscan."""

import sys
import argparse
from pathlib import Path

from .config import RunConfig, Settings
from .runner import ScanRunner


TOKEN_SEPARATOR = '--'


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='argscan',
        description='Analyse an argument list against a declared option vocabulary',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Analyse arguments against a vocabulary file
  python -m argscan vocab.json -- --output=a -vx file.txt

  # Single dash long options, no abbreviations
  python -m argscan --alt-mode --no-abbreviations vocab.json -- -help

  # Stop recognizing options at the first positional
  python -m argscan --posix vocab.json -- --flag1 pos1 --flag2
        """
    )

    parser.add_argument('vocabulary', type=Path,
                        help='Path to vocabulary JSON file')
    parser.add_argument('tokens', nargs='*', default=[],
                        help="Argument tokens to analyse (put them after --)")
    parser.add_argument('-s', '--schema', type=Path, default=None,
                        help='Path to schema file (default: bundled vocabulary-schema.json)')
    parser.add_argument('--no-abbreviations', action='store_true',
                        help='Disable abbreviated long option matching')
    parser.add_argument('--posix', action='store_true',
                        help='Stop option recognition at the first positional')
    parser.add_argument('--alt-mode', action='store_true',
                        help='Long options take a single dash; no short options')
    parser.add_argument('-o', '--output', type=Path, default=None,
                        help='Write the report to a file instead of stdout')
    parser.add_argument('--no-vocabulary', action='store_true',
                        help='Do not list the available options in the report')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show progress output')
    return parser


def main(argv=None):
    """Main entry point."""
    if argv is None:
        argv = sys.argv[1:]
    argv = list(argv)

    # Everything after the first -- is analysed verbatim, later -- included
    trailing = []
    if TOKEN_SEPARATOR in argv:
        split = argv.index(TOKEN_SEPARATOR)
        argv, trailing = argv[:split], argv[split + 1:]

    parser = build_arg_parser()
    args = parser.parse_args(argv)
    tokens = list(args.tokens) + trailing

    # Validate arguments
    if not args.vocabulary.exists():
        print(f"ERROR: Vocabulary file not found: {args.vocabulary}")
        sys.exit(1)

    if args.schema is not None and not args.schema.exists():
        print(f"ERROR: Schema file not found: {args.schema}")
        sys.exit(1)

    settings = None
    if args.no_abbreviations or args.posix or args.alt_mode:
        settings = Settings(
            allow_abbreviations=not args.no_abbreviations,
            posix_strict=args.posix,
            alt_mode=args.alt_mode,
        )

    run_config = RunConfig(
        args=tokens,
        settings=settings,
        output_path=args.output,
        show_vocabulary=not args.no_vocabulary,
        verbose=args.verbose,
    )

    try:
        runner = ScanRunner(args.vocabulary, run_config, args.schema)
        analysis = runner.run()
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    sys.exit(1 if analysis.problems_found else 0)


if __name__ == '__main__':
    main()
