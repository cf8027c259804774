"""
Error handling for the minilang lexer.

Also home of the diagnostic record and the base exception shared by every
front-end stage, so the parser and analyzer errors render the same way.
"""

from typing import Optional, List
from dataclasses import dataclass
from .tokens import SourceLocation, KEYWORDS, OPERATORS


@dataclass
class Diagnostic:
    """Base record for front-end diagnostics."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class FrontendError(Exception):
    """
    Base class for every fatal error raised by the front-end.

    Carries a Diagnostic; the first error found aborts the pipeline.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def location(self) -> Optional[SourceLocation]:
        return self.diagnostic.location

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(FrontendError):
    """
    Raised when no token pattern matches at the current scan position.

    `remainder` holds the unconsumed source text from that position on.
    """

    def __init__(self, message: str, location: Optional[SourceLocation], remainder: str, **kwargs):
        super().__init__(message, location, **kwargs)
        self.remainder = remainder


class ErrorRecovery:
    """
    Suggestion helpers for diagnostics.

    The front-end never resumes after an error; these only improve the
    message shown to the student.
    """

    @staticmethod
    def suggest_keyword_corrections(invalid_word: str) -> List[str]:
        """Suggest keywords within two edits of a word."""
        suggestions = []
        for keyword in KEYWORDS:
            distance = ErrorRecovery._edit_distance(invalid_word.lower(), keyword)
            if distance <= 2:
                suggestions.append(keyword)

        return sorted(suggestions, key=lambda k: ErrorRecovery._edit_distance(invalid_word.lower(), k))[:3]

    @staticmethod
    def suggest_operator_corrections(invalid_char: str) -> List[str]:
        """Suggest operators that start with an unrecognized character."""
        return [op for op in OPERATORS if len(op) > 1 and op.startswith(invalid_char)]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


# Lexer error codes
ERROR_CODES = {
    "L001": "Invalid token",
    "L002": "Unterminated string literal",
}


def _preview(remainder: str, limit: int = 20) -> str:
    text = remainder.replace("\n", " ")
    return text if len(text) <= limit else text[:limit] + "..."


def create_invalid_token_error(remainder: str, location: SourceLocation) -> LexerError:
    """Create an error for source text no token pattern accepts."""
    char = remainder[0]

    if char == '"':
        return LexerError(
            message=f"Unterminated string literal: {_preview(remainder)}",
            location=location,
            remainder=remainder,
            code="L002",
            help_text="String literals must be closed with a matching double quote.",
            suggestions=['Add a closing " quote', "Check for unescaped quotes in the string"]
        )

    suggestions = ErrorRecovery.suggest_operator_corrections(char)
    if suggestions:
        help_text = f"'{char}' is only valid as part of {', '.join(suggestions)}."
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in minilang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message=f"Invalid token: {_preview(remainder)}",
        location=location,
        remainder=remainder,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )
