"""
minilang Parser Package

Implements a recursive-descent parser for the minilang teaching language.
Produces a tagged Abstract Syntax Tree with source spans.

Key Features:
- One method per grammar production
- Inline semantic checks against an owned symbol table
- Flat, left-associative binary expressions
- Stops at the first error
"""

from .ast_nodes import *
from .parser import Parser, parse_string, parse_file
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser", "parse_string", "parse_file",

    # AST nodes
    "AST", "ASTNode", "ASTVisitor", "ASTNodeType", "SourceSpan",
    "Program", "Statement", "Expression",
    "Declaration", "Assignment", "Read", "Write", "If", "IfElse", "Block",
    "BinOp", "IdentifierRef", "NumberLiteral", "StringLiteral",

    # Error handling
    "ParseError",
]
