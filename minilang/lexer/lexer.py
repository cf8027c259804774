"""
minilang Lexer - turns source text into classified tokens

One master regex tried at the scan position; the alternatives are ordered so
keywords beat identifiers and two-character operators beat their prefixes.
There is no recovery: the first position nothing matches raises LexerError.
"""

import re
from typing import List, Optional, TYPE_CHECKING

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, OPERATORS, DELIMITERS,
    ACCENTED_LETTERS
)
from .errors import LexerError, create_invalid_token_error

if TYPE_CHECKING:
    from ..config import FrontendConfig


class Lexer:
    """
    minilang lexical analyzer.

    Converts source code text into a list of tokens in source order.
    """

    # Named groups, tried left to right
    _TOKEN_GROUPS = (
        ("KEYWORD", r"(?:" + "|".join(KEYWORDS) + r")\b"),
        ("IDENTIFIER", rf"[a-zA-Z_{ACCENTED_LETTERS}][a-zA-Z0-9_{ACCENTED_LETTERS}]*"),
        ("NUMBER", r"[0-9]+"),
        ("OPERATOR", "|".join(re.escape(op) for op in OPERATORS)),
        ("DELIMITER", "|".join(re.escape(d) for d in DELIMITERS)),
        ("STRING_LITERAL", r'"[^"\\]*(?:\\.[^"\\]*)*"'),
    )

    def __init__(self, source: str, filename: str = "<unknown>", strip_string_quotes: bool = True):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            strip_string_quotes: Store string literal values without their quotes
        """
        self.source = source
        self.filename = filename
        self.strip_string_quotes = strip_string_quotes
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []

        self._compile_patterns()

    def _compile_patterns(self):
        """Compile regex patterns used by the lexer."""
        self.token_pattern = re.compile(
            "|".join(f"(?P<{name}>{pattern})" for name, pattern in self._TOKEN_GROUPS),
            re.DOTALL
        )
        self.whitespace_pattern = re.compile(r"\s+")

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens in source order (no end-of-file marker)

        Raises:
            LexerError: At the first position no pattern matches
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []

        while True:
            self._skip_whitespace()
            if self.pos >= len(self.source):
                break
            self.tokens.append(self._next_token())

        return self.tokens

    def _next_token(self) -> Token:
        """Match one token at the current position."""
        location = SourceLocation(self.filename, self.line, self.column, self.pos)
        match = self.token_pattern.match(self.source, self.pos)

        if match is None:
            raise create_invalid_token_error(self.source[self.pos:], location)

        lexeme = match.group(0)
        token_type = TokenType[match.lastgroup]
        value = lexeme

        if token_type == TokenType.STRING_LITERAL and self.strip_string_quotes:
            value = lexeme[1:-1]

        self._advance_by(len(lexeme))
        return Token(token_type, lexeme, value, location)

    def _skip_whitespace(self):
        match = self.whitespace_pattern.match(self.source, self.pos)
        if match:
            self._advance_by(len(match.group(0)))

    def _advance_by(self, count: int):
        """Advance position by multiple characters, updating line/column."""
        consumed = self.source[self.pos:self.pos + count]
        newlines = consumed.count("\n")
        if newlines:
            self.line += newlines
            self.column = len(consumed) - consumed.rfind("\n")
        else:
            self.column += len(consumed)
        self.pos += len(consumed)


def tokenize_string(source: str, filename: str = "<string>",
                    config: Optional["FrontendConfig"] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        config: Front-end options; defaults strip string quotes

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    strip = config.strip_string_quotes if config is not None else True
    return Lexer(source, filename, strip_string_quotes=strip).tokenize()


def tokenize_file(filepath: str, config: Optional["FrontendConfig"] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    encoding = config.encoding if config is not None else "utf-8"
    with open(filepath, 'r', encoding=encoding) as f:
        source = f.read()

    return tokenize_string(source, str(filepath), config)
