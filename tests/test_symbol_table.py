"""
Test suite for the minilang symbol table.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.lexer.tokens import SourceLocation, TypeTag
from minilang.analyzer.symbol_table import SymbolTable, Symbol
from minilang.analyzer.errors import (
    SemanticError, DuplicateDeclarationError, UndeclaredVariableError, TypeMismatchError
)


class TestSymbolTable(unittest.TestCase):
    """Test cases for declare, lookup and check_type."""

    def setUp(self):
        self.table = SymbolTable()

    def test_declare_and_lookup(self):
        symbol = self.table.declare("x", TypeTag.INTEIRO)
        self.assertIsInstance(symbol, Symbol)
        self.assertEqual(self.table.lookup("x"), TypeTag.INTEIRO)
        self.assertIn("x", self.table)
        self.assertEqual(len(self.table), 1)

    def test_declare_accepts_type_name(self):
        self.table.declare("d", "decimal")
        self.assertEqual(self.table.lookup("d"), TypeTag.DECIMAL)

    def test_duplicate_declaration(self):
        first = SourceLocation("<t>", 1, 9, 8)
        second = SourceLocation("<t>", 2, 9, 20)
        self.table.declare("x", TypeTag.INTEIRO, first)

        with self.assertRaises(DuplicateDeclarationError) as ctx:
            self.table.declare("x", TypeTag.DECIMAL, second)

        error = ctx.exception
        self.assertEqual(error.location, second)
        self.assertEqual(error.related_locations, [first])
        self.assertEqual(error.code, "S011")
        # The original declaration is untouched
        self.assertEqual(self.table.lookup("x"), TypeTag.INTEIRO)

    def test_lookup_undeclared(self):
        with self.assertRaises(UndeclaredVariableError) as ctx:
            self.table.lookup("y")
        self.assertEqual(ctx.exception.code, "S010")
        self.assertIsInstance(ctx.exception, SemanticError)

    def test_check_type(self):
        self.table.declare("x", TypeTag.INTEIRO)
        self.assertEqual(self.table.check_type("x", TypeTag.INTEIRO), TypeTag.INTEIRO)

        with self.assertRaises(TypeMismatchError) as ctx:
            self.table.check_type("x", TypeTag.DECIMAL)
        self.assertEqual(ctx.exception.expected, "decimal")
        self.assertEqual(ctx.exception.actual, "inteiro")

    def test_check_type_undeclared(self):
        with self.assertRaises(UndeclaredVariableError):
            self.table.check_type("nope", TypeTag.INTEIRO)

    def test_as_dict_keeps_declaration_order(self):
        for name in ("c", "a", "b"):
            self.table.declare(name, TypeTag.INTEIRO)
        self.table.declare("z", TypeTag.DECIMAL)
        self.assertEqual(list(self.table), ["c", "a", "b", "z"])
        self.assertEqual(
            self.table.as_dict(),
            {"c": "inteiro", "a": "inteiro", "b": "inteiro", "z": "decimal"}
        )

    def test_similar_names(self):
        self.table.declare("contador", TypeTag.INTEIRO)
        self.table.declare("total", TypeTag.INTEIRO)
        self.assertEqual(self.table.get_similar_names("contadr"), ["contador"])
        self.assertEqual(self.table.get_similar_names("xyz"), [])

    def test_get_symbol_does_not_raise(self):
        self.assertIsNone(self.table.get_symbol("x"))
        self.table.declare("x", TypeTag.INTEIRO)
        self.assertEqual(self.table.get_symbol("x").symbol_type, TypeTag.INTEIRO)

    def test_str(self):
        self.table.declare("x", TypeTag.INTEIRO)
        self.assertEqual(str(self.table), "SymbolTable({x: inteiro})")


if __name__ == '__main__':
    unittest.main()
