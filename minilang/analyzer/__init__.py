"""
minilang Semantic Analyzer Package

Implements the semantic checks of the teaching language:
- Declaration before use
- No duplicate declarations
- Type agreement in binary expressions

The symbol table is shared by the parser's inline checks and the
post-parse traversal; each stage creates its own instance.
"""

from .symbol_table import SymbolTable, Symbol
from .errors import (
    SemanticError, DuplicateDeclarationError, UndeclaredVariableError,
    TypeMismatchError
)
from .semantic_analyzer import SemanticAnalyzer, analyze_program

__all__ = [
    # Main analyzer
    "SemanticAnalyzer", "analyze_program",

    # Symbol management
    "SymbolTable", "Symbol",

    # Error handling
    "SemanticError", "DuplicateDeclarationError", "UndeclaredVariableError",
    "TypeMismatchError",
]
