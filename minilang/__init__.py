"""
minilang Front-End Package

Tokenizer, recursive-descent parser and semantic checker for a minimal
imperative teaching language (programa ... fimprog). There is no code
generator or interpreter: programs are recognized and checked, not run.

Architecture:
    minilang/
    ├── lexer/           # Tokenization
    ├── parser/          # Syntax analysis, AST generation, inline checks
    ├── analyzer/        # Symbol table and post-parse semantic traversal
    ├── pipeline.py      # The three stages chained together
    └── cli.py           # Command-line driver
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer
from .parser import Parser
from .analyzer import SemanticAnalyzer, SymbolTable
from .config import FrontendConfig
from .pipeline import analyze_source, analyze_file, FrontendResult

__all__ = [
    # Core classes
    "Lexer",
    "Parser",
    "SemanticAnalyzer",
    "SymbolTable",

    # Pipeline
    "FrontendConfig",
    "FrontendResult",
    "analyze_source",
    "analyze_file",

    # Version info
    "__version__",
    "__license__",
]
