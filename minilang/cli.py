"""
Command-line driver for the minilang front-end.

Runs the pipeline over a source file (or the bundled sample program),
prints the artifacts and writes them to tokens.txt, ast.txt and
semantic_analysis.txt.
"""

import argparse
import json
import sys
from typing import List, Optional

from . import __version__
from .config import FrontendConfig
from .lexer import FrontendError
from .lexer.errors import ERROR_CODES
from .parser.errors import PARSER_ERROR_CODES
from .analyzer.errors import SEMANTIC_ERROR_CODES
from .pipeline import analyze_source, FrontendResult
from .sample import SAMPLE_PROGRAM, SAMPLE_FILENAME
from .serialization import (
    write_artifacts, result_to_dict, ast_to_json, symbols_to_json
)

# Error code -> category title, for every stage
ERROR_TITLES = {**ERROR_CODES, **PARSER_ERROR_CODES, **SEMANTIC_ERROR_CODES}


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minilang",
        description="Tokenize, parse and semantically check a minilang program",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    minilang                          # Analyze the bundled sample program
    minilang prog.txt                 # Analyze a source file
    minilang prog.txt --output-dir out --strict
    minilang prog.txt --no-emit --json
        """
    )

    parser.add_argument('source', nargs='?',
                        help='Source file to analyze (default: bundled sample program)')

    # Output options
    parser.add_argument('--output-dir', default='.',
                        help='Directory for tokens.txt, ast.txt and semantic_analysis.txt')
    parser.add_argument('--no-emit', action='store_true',
                        help='Do not write the artifact files')
    parser.add_argument('--json', action='store_true',
                        help='Print all artifacts as a single JSON document')
    parser.add_argument('--quiet', action='store_true',
                        help='Suppress progress lines and artifact dumps')

    # Analysis options
    parser.add_argument('--keep-quotes', action='store_true',
                        help='Keep surrounding quotes in string literal values')
    parser.add_argument('--strict', action='store_true',
                        help='Also check operand types in the semantic traversal')
    parser.add_argument('--encoding', default='utf-8',
                        help='Source file encoding (default: utf-8)')

    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def config_from_args(args: argparse.Namespace) -> FrontendConfig:
    return FrontendConfig(
        strip_string_quotes=not args.keep_quotes,
        encoding=args.encoding,
        strict_traversal=args.strict,
        output_dir=args.output_dir,
        emit_files=not args.no_emit,
        verbose=not args.quiet and not args.json
    )


def print_result(result: FrontendResult):
    print("Tokens:")
    for token in result.tokens:
        print(f"  {token.as_pair()}")

    print("\nAST:")
    print(ast_to_json(result.ast, indent=2))

    print("\nSemantic analysis results:")
    print(symbols_to_json(result.symbol_table, indent=2))


def run(source: str, filename: str, config: FrontendConfig) -> FrontendResult:
    """Run the pipeline with progress reporting and optional file output."""
    if config.verbose:
        print(f"🔧 Analyzing {filename}...")

    result = analyze_source(source, filename, config)

    if config.verbose:
        print(f"     Generated {len(result.tokens)} tokens")
        print(f"     Generated AST with {len(result.ast.body)} top-level statements")
        print(f"     Declared {len(result.symbol_table)} variables")

    if config.emit_files:
        written = write_artifacts(result, config.output_dir, config.encoding)
        if config.verbose:
            for path in written.values():
                print(f"     Wrote {path}")

    return result


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_arg_parser().parse_args(argv)
    config = config_from_args(args)

    if args.source:
        filename = args.source
        try:
            with open(filename, 'r', encoding=config.encoding) as f:
                source = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"❌ Cannot read {filename}: {e}", file=sys.stderr)
            return 1
    else:
        filename = SAMPLE_FILENAME
        source = SAMPLE_PROGRAM

    try:
        result = run(source, filename, config)
    except FrontendError as e:
        title = ERROR_TITLES.get(e.code, "Error")
        print(f"❌ {type(e).__name__}: {title}", file=sys.stderr)
        print(str(e), file=sys.stderr, end="")
        return 1

    if args.json:
        print(json.dumps(result_to_dict(result), ensure_ascii=False, indent=2))
    elif config.verbose:
        print()
        print_result(result)

    return 0


if __name__ == "__main__":
    sys.exit(main())
