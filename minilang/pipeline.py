"""
The three-stage front-end pipeline: tokenize, parse with inline checks,
then re-validate with the independent semantic traversal.
"""

from dataclasses import dataclass
from typing import List, Optional

from .config import FrontendConfig
from .lexer import Lexer, Token
from .parser import Parser, Program
from .analyzer import SemanticAnalyzer, SymbolTable


@dataclass
class FrontendResult:
    """Everything a successful run produces."""
    tokens: List[Token]
    ast: Program
    parser_symbols: SymbolTable   # table filled by the parser's inline checks
    symbol_table: SymbolTable     # table rebuilt by the semantic traversal


def analyze_source(source: str, filename: str = "<string>",
                   config: Optional[FrontendConfig] = None) -> FrontendResult:
    """
    Run all three stages over a source string.

    Raises:
        FrontendError: The first lexical, syntax or semantic error; later
            stages do not run.
    """
    config = config or FrontendConfig()

    tokens = Lexer(source, filename, strip_string_quotes=config.strip_string_quotes).tokenize()

    parser = Parser(tokens)
    ast = parser.parse()

    analyzer = SemanticAnalyzer(strict=config.strict_traversal)
    symbol_table = analyzer.analyze(ast)

    return FrontendResult(
        tokens=tokens,
        ast=ast,
        parser_symbols=parser.symbol_table,
        symbol_table=symbol_table
    )


def analyze_file(filepath: str, config: Optional[FrontendConfig] = None) -> FrontendResult:
    """Run the pipeline over a UTF-8 (by default) source file."""
    config = config or FrontendConfig()
    with open(filepath, 'r', encoding=config.encoding) as f:
        source = f.read()
    return analyze_source(source, str(filepath), config)
