"""
minilang Lexer Package

Implements the tokenizer for the minilang teaching language.

Key Features:
- Closed keyword, operator and delimiter sets
- Keyword-before-identifier and longest-operator-first matching
- Accented Latin letters in identifiers
- Source location tracking for diagnostics
"""

from .tokens import Token, TokenType, TypeTag, SourceLocation
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import Diagnostic, FrontendError, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "TypeTag",
    "SourceLocation",
    "Diagnostic",
    "FrontendError",
    "LexerError",
    "tokenize_string",
    "tokenize_file",
]
