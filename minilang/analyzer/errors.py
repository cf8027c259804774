"""
Semantic analysis error handling for minilang.

Three semantic error kinds exist: duplicate declaration, undeclared
variable and type mismatch. The parser's inline checks and the post-parse
traversal raise the same classes.
"""

from typing import Optional, List

from ..lexer.tokens import SourceLocation
from ..lexer.errors import FrontendError, ErrorRecovery


class SemanticError(FrontendError):
    """
    Exception raised when semantic analysis encounters a fatal error.

    Contains detailed diagnostic information for error reporting.
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None,
        related_locations: Optional[List[SourceLocation]] = None
    ):
        super().__init__(
            message,
            location,
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )
        self.related_locations = related_locations or []

    def __str__(self) -> str:
        result = str(self.diagnostic)

        if self.related_locations:
            result += "Related locations:\n"
            for loc in self.related_locations:
                result += f"  --> {loc}\n"

        return result


class DuplicateDeclarationError(SemanticError):
    """A name was declared twice in one symbol table's lifetime."""

    def __init__(self, name: str, message: str, location: Optional[SourceLocation] = None, **kwargs):
        super().__init__(message, location, **kwargs)
        self.name = name


class UndeclaredVariableError(SemanticError):
    """A name was used without a prior declaration."""

    def __init__(self, name: str, message: str, location: Optional[SourceLocation] = None, **kwargs):
        super().__init__(message, location, **kwargs)
        self.name = name


class TypeMismatchError(SemanticError):
    """Two types that must agree do not."""

    def __init__(self, expected: Optional[str], actual: Optional[str], message: str,
                 location: Optional[SourceLocation] = None, **kwargs):
        super().__init__(message, location, **kwargs)
        self.expected = expected
        self.actual = actual


# Semantic error codes for categorization
SEMANTIC_ERROR_CODES = {
    "S001": "Type mismatch",
    "S010": "Undeclared variable",
    "S011": "Duplicate declaration",
}


def create_duplicate_declaration_error(
    name: str,
    location: Optional[SourceLocation],
    original_location: Optional[SourceLocation] = None
) -> DuplicateDeclarationError:
    """Create an error for a second declaration of the same name."""
    related = [original_location] if original_location else []
    return DuplicateDeclarationError(
        name,
        f"Variable '{name}' already declared",
        location,
        code="S011",
        help_text="Every variable is declared exactly once; there is a single global scope.",
        suggestions=[f"Remove the second declaration of '{name}'", "Rename one of the variables"],
        related_locations=related
    )


def create_undeclared_variable_error(
    name: str,
    location: Optional[SourceLocation],
    similar_names: Optional[List[str]] = None
) -> UndeclaredVariableError:
    """Create an error for a reference to an undeclared name."""
    suggestions = []
    if similar_names:
        suggestions.extend([f"Did you mean '{other}'?" for other in similar_names[:3]])
    suggestions.extend(
        f"Did you mean the keyword '{keyword}'?"
        for keyword in ErrorRecovery.suggest_keyword_corrections(name)
    )
    suggestions.append(f"Declare '{name}' with 'inteiro' or 'decimal' before using it")

    return UndeclaredVariableError(
        name,
        f"Variable '{name}' not declared",
        location,
        code="S010",
        help_text=f"'{name}' must appear in a declaration before it is used.",
        suggestions=suggestions
    )


def create_type_mismatch_error(
    name: str,
    expected: str,
    actual: str,
    location: Optional[SourceLocation]
) -> TypeMismatchError:
    """Create an error for a variable whose declared type is not the expected one."""
    return TypeMismatchError(
        expected,
        actual,
        f"Incompatible type: variable '{name}' is of type '{actual}', expected '{expected}'",
        location,
        code="S001",
        help_text=f"'{name}' was declared as '{actual}'."
    )


def create_operand_mismatch_error(
    operator: str,
    left_type: Optional[str],
    right_type: Optional[str],
    location: Optional[SourceLocation]
) -> TypeMismatchError:
    """Create an error for a binary operation between different types."""
    return TypeMismatchError(
        left_type,
        right_type,
        f"Invalid operation '{operator}' between types '{left_type}' and '{right_type}'",
        location,
        code="S001",
        help_text="Both operands of a binary operator must have the same type; number literals are 'inteiro'.",
        suggestions=["Use variables of the same type on both sides of the operator"]
    )
