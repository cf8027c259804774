"""
Error handling for the minilang parser.

Syntax errors name the token that was found and what the grammar expected
at that position. Parsing stops at the first one.
"""

from typing import Optional, List

from ..lexer.tokens import Token, TokenType, SourceLocation
from ..lexer.errors import FrontendError, ErrorRecovery


class ParseError(FrontendError):
    """
    Exception raised when the parser meets a token the grammar does not
    allow, or runs out of tokens.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation],
        token: Optional[Token] = None,
        expected: Optional[str] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(
            message,
            location,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.token = token
        self.expected = expected


# Suggestions for commonly forgotten delimiters
_MISSING_TOKEN_SUGGESTIONS = {
    ";": ["Add a semicolon ';' to end the statement"],
    ")": ["Add a closing parenthesis ')'"],
    "(": ["Add an opening parenthesis '('"],
    "}": ["Add a closing brace '}'"],
    "{": ["Add an opening brace '{' to start a block"],
    ":=": ["Assignments use ':=', not '='"],
    "fimprog": ["End the program with 'fimprog'"],
    "programa": ["Start the program with 'programa'"],
}


# Parser error codes
PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Invalid construct",
    "P010": "Unexpected end of input",
}


def describe_expected(token_type: Optional[TokenType], value: Optional[str]) -> str:
    """Render an expectation like "Delimiter ';'" or "Identifier"."""
    parts = []
    if token_type is not None:
        parts.append(token_type.value)
    if value is not None:
        parts.append(f"'{value}'")
    return " ".join(parts) or "a token"


def describe_token(token: Token) -> str:
    return f"{token.type.value} '{token.value}'"


def create_unexpected_token_error(expected: str, found: Token,
                                  expected_value: Optional[str] = None) -> ParseError:
    """Create an error for a token of the wrong kind or value."""
    suggestions = list(_MISSING_TOKEN_SUGGESTIONS.get(expected_value, []))
    if found.is_identifier:
        suggestions.extend(
            f"Did you mean '{keyword}'?"
            for keyword in ErrorRecovery.suggest_keyword_corrections(found.value)
        )

    return ParseError(
        message=f"Expected {expected} but got {describe_token(found)}",
        location=found.location,
        token=found,
        expected=expected,
        code="P001",
        help_text=f"The parser expected to see {expected} at this position.",
        suggestions=suggestions
    )


def create_invalid_construct_error(construct: str, found: Token) -> ParseError:
    """Create an error for a token that cannot start the given construct."""
    return ParseError(
        message=f"Invalid {construct}: {describe_token(found)}",
        location=found.location,
        token=found,
        expected=construct,
        code="P002",
        help_text=f"{describe_token(found)} cannot start a {construct}."
    )


def create_unexpected_eof_error(expected: str, location: Optional[SourceLocation],
                                expected_value: Optional[str] = None) -> ParseError:
    """Create an error for running out of tokens."""
    suggestions = _MISSING_TOKEN_SUGGESTIONS.get(expected_value, [])
    return ParseError(
        message=f"Unexpected end of input, expected {expected}",
        location=location,
        expected=expected,
        code="P010",
        help_text=f"The parser reached the end of the source while expecting {expected}.",
        suggestions=list(suggestions) or [f"Add the missing {expected}", "Check for incomplete statements"]
    )
