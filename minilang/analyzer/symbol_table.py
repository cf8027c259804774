"""
Symbol table for minilang semantic checks.

A flat mapping from variable name to declared type. The language has a
single global scope: blocks do not open new scopes and nothing is ever
removed.
"""

from typing import Dict, List, Optional, Iterator
from dataclasses import dataclass

from ..lexer.tokens import SourceLocation, TypeTag
from ..lexer.errors import ErrorRecovery
from .errors import (
    create_duplicate_declaration_error, create_undeclared_variable_error,
    create_type_mismatch_error
)


@dataclass
class Symbol:
    """Represents a declared variable."""
    name: str
    symbol_type: TypeTag
    location: Optional[SourceLocation] = None

    def __str__(self) -> str:
        return f"{self.name}: {self.symbol_type}"


class SymbolTable:
    """
    Maps declared variable names to their types.

    Provides declare, lookup and check_type; each raises the matching
    SemanticError subclass on failure.
    """

    def __init__(self):
        self._symbols: Dict[str, Symbol] = {}

    def declare(self, name: str, var_type: TypeTag, location: Optional[SourceLocation] = None) -> Symbol:
        """
        Declare a variable.

        Raises:
            DuplicateDeclarationError: If the name is already declared
        """
        existing = self._symbols.get(name)
        if existing is not None:
            raise create_duplicate_declaration_error(name, location, existing.location)

        symbol = Symbol(name, TypeTag(var_type), location)
        self._symbols[name] = symbol
        return symbol

    def lookup(self, name: str, location: Optional[SourceLocation] = None) -> TypeTag:
        """
        Return the declared type of a variable.

        Raises:
            UndeclaredVariableError: If the name was never declared
        """
        symbol = self._symbols.get(name)
        if symbol is None:
            raise create_undeclared_variable_error(name, location, self.get_similar_names(name))
        return symbol.symbol_type

    def check_type(self, name: str, expected: TypeTag, location: Optional[SourceLocation] = None) -> TypeTag:
        """
        Check that a variable was declared with the expected type.

        Raises:
            UndeclaredVariableError: If the name was never declared
            TypeMismatchError: If the declared type differs
        """
        actual = self.lookup(name, location)
        if actual != expected:
            raise create_type_mismatch_error(name, str(expected), str(actual), location)
        return actual

    def get_symbol(self, name: str) -> Optional[Symbol]:
        """Look up a symbol without raising errors."""
        return self._symbols.get(name)

    def get_similar_names(self, name: str, max_distance: int = 2) -> List[str]:
        """Get declared names close to the given name (for error suggestions)."""
        similar_names = []
        for symbol_name in self._symbols:
            distance = ErrorRecovery._edit_distance(name.lower(), symbol_name.lower())
            if distance <= max_distance:
                similar_names.append((symbol_name, distance))

        similar_names.sort(key=lambda x: x[1])
        return [other for other, _ in similar_names[:5]]

    def as_dict(self) -> Dict[str, str]:
        """Name to type mapping, in declaration order."""
        return {name: symbol.symbol_type.value for name, symbol in self._symbols.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._symbols

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[str]:
        return iter(self._symbols)

    def __str__(self) -> str:
        entries = ", ".join(str(symbol) for symbol in self._symbols.values())
        return f"SymbolTable({{{entries}}})"
