"""
Token definitions for the minilang lexer.

The teaching language has a small lexical vocabulary:
- Keywords (Portuguese program structure words plus if/else)
- Identifiers (ASCII letters and the accented Latin range)
- Integer numbers
- Operators and delimiters from two closed sets
- Double-quoted string literals
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Tuple


class TokenType(Enum):
    """
    Lexical classes recognized by the tokenizer.

    The enum values are the kind names used in the token dump.
    """

    KEYWORD = "Keyword"
    IDENTIFIER = "Identifier"
    NUMBER = "Number"
    OPERATOR = "Operator"
    DELIMITER = "Delimiter"
    STRING_LITERAL = "StringLiteral"


class TypeTag(str, Enum):
    """Declarable variable types."""

    INTEIRO = "inteiro"
    DECIMAL = "decimal"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source code.

    Used for error reporting only; tokens compare equal regardless of where
    they were found.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    A classified lexical unit.

    `lexeme` is the raw source text. `value` is the text handed to later
    stages; it differs from the lexeme only for string literals, whose
    surrounding quotes are stripped.
    """
    type: TokenType
    lexeme: str
    value: str
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        return f"{self.value},{self.type.value}"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    def as_pair(self) -> Tuple[str, str]:
        """Render the token as its (value, kind) pair."""
        return (self.value, self.type.value)

    def matches(self, token_type: TokenType, value: Optional[str] = None) -> bool:
        """Check the token kind and, optionally, its exact value."""
        if self.type != token_type:
            return False
        return value is None or self.value == value

    @property
    def is_keyword(self) -> bool:
        return self.type == TokenType.KEYWORD

    @property
    def is_identifier(self) -> bool:
        return self.type == TokenType.IDENTIFIER


# Closed vocabulary of the language

KEYWORDS = (
    "programa", "fimprog", "inteiro", "decimal",
    "leia", "escreva", "if", "else",
)

TYPE_KEYWORDS = {tag.value: tag for tag in TypeTag}

# Multi-character operators come first so they win over their prefixes
OPERATORS = ("<=", ">=", "!=", "==", ":=", "+", "-", "*", "/", "<", ">", "=")

# Operators that never continue a binary expression
ASSIGNMENT_OPERATORS = (":=", "=")

DELIMITERS = ("(", ")", "{", "}", ",", ";")

# Letters accepted in identifiers besides ASCII: the accented Latin ranges
# á-ú and Á-Ú without the signs ÷ (U+00F7) and × (U+00D7)
ACCENTED_LETTERS = "á-öø-úÁ-ÖØ-Ú"
