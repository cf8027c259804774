"""
Test suite for the minilang semantic analyzer.

Tests cover:
- Rebuilding the symbol table from a parsed program
- Independence from the parser's own table
- Undeclared and duplicate names in hand-built trees
- Optional operand type checking
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from minilang.lexer.lexer import Lexer
from minilang.lexer.tokens import Token, TokenType, TypeTag
from minilang.parser.parser import Parser
from minilang.parser.ast_nodes import (
    Program, Declaration, Assignment, Read, Write, Block, IfElse, BinOp,
    IdentifierRef, NumberLiteral, StringLiteral
)
from minilang.analyzer.semantic_analyzer import SemanticAnalyzer, analyze_program
from minilang.analyzer.errors import (
    SemanticError, DuplicateDeclarationError, UndeclaredVariableError, TypeMismatchError
)
from minilang.sample import SAMPLE_PROGRAM


def ident(name: str) -> Token:
    return Token(TokenType.IDENTIFIER, name, name)


def ref(name: str) -> IdentifierRef:
    return IdentifierRef(ident(name))


def number(value: int) -> NumberLiteral:
    return NumberLiteral(Token(TokenType.NUMBER, str(value), str(value)))


class TestSemanticAnalyzer(unittest.TestCase):
    """Test cases for the semantic analyzer."""

    def setUp(self):
        """Set up test fixtures."""
        self.analyzer = SemanticAnalyzer()

    def _parse(self, code: str):
        """Return the parser and the program it produced."""
        parser = Parser(Lexer(code).tokenize())
        return parser, parser.parse()

    def _analyze_code(self, code: str):
        """Helper to parse and analyze a code snippet."""
        return self.analyzer.analyze(self._parse(code)[1])

    def test_sample_program(self):
        table = self._analyze_code(SAMPLE_PROGRAM)
        self.assertEqual(table.as_dict(), {"x": "inteiro", "y": "inteiro"})

    def test_mixed_declarations(self):
        table = self._analyze_code("programa inteiro a, b; decimal c; leia(c); fimprog")
        self.assertEqual(table.as_dict(), {"a": "inteiro", "b": "inteiro", "c": "decimal"})

    def test_table_is_independent_of_parser_table(self):
        parser, ast = self._parse("programa inteiro x; x := 1; fimprog")
        table = self.analyzer.analyze(ast)
        self.assertIsNot(table, parser.symbol_table)
        self.assertEqual(table.as_dict(), parser.symbol_table.as_dict())

    def test_reanalysis_starts_fresh(self):
        ast = self._parse("programa inteiro x; fimprog")[1]
        self.analyzer.analyze(ast)
        table = self.analyzer.analyze(ast)
        self.assertEqual(table.as_dict(), {"x": "inteiro"})

    def test_empty_program(self):
        self.assertEqual(len(analyze_program(Program([]))), 0)

    def test_undeclared_read_target(self):
        ast = Program([Read(ident("y"))])
        with self.assertRaises(UndeclaredVariableError) as ctx:
            self.analyzer.analyze(ast)
        self.assertEqual(ctx.exception.name, "y")

    def test_undeclared_assignment_target(self):
        ast = Program([Assignment(ident("y"), number(1))])
        with self.assertRaises(UndeclaredVariableError):
            self.analyzer.analyze(ast)

    def test_undeclared_in_expression(self):
        ast = Program([
            Declaration(TypeTag.INTEIRO, [ident("x")]),
            Assignment(ident("x"), BinOp("+", ref("x"), ref("z"))),
        ])
        with self.assertRaises(UndeclaredVariableError) as ctx:
            self.analyzer.analyze(ast)
        self.assertEqual(ctx.exception.name, "z")

    def test_undeclared_in_write(self):
        ast = Program([Write([StringLiteral(Token(TokenType.STRING_LITERAL, '"v"', "v")), ref("v")])])
        with self.assertRaises(UndeclaredVariableError):
            self.analyzer.analyze(ast)

    def test_undeclared_inside_else_block(self):
        ast = Program([
            Declaration(TypeTag.INTEIRO, [ident("x")]),
            IfElse(ref("x"), Block([]), Block([Read(ident("w"))])),
        ])
        with self.assertRaises(UndeclaredVariableError) as ctx:
            self.analyzer.analyze(ast)
        self.assertEqual(ctx.exception.name, "w")

    def test_duplicate_declaration(self):
        ast = Program([
            Declaration(TypeTag.INTEIRO, [ident("x")]),
            Block([]),
            Declaration(TypeTag.DECIMAL, [ident("x")]),
        ])
        with self.assertRaises(DuplicateDeclarationError):
            self.analyzer.analyze(ast)

    def test_mismatched_operands_allowed_by_default(self):
        ast = Program([
            Declaration(TypeTag.INTEIRO, [ident("i")]),
            Declaration(TypeTag.DECIMAL, [ident("d")]),
            Assignment(ident("i"), BinOp("+", ref("i"), ref("d"))),
        ])
        table = self.analyzer.analyze(ast)
        self.assertEqual(table.as_dict(), {"i": "inteiro", "d": "decimal"})

    def test_strict_mode_checks_operand_types(self):
        ast = Program([
            Declaration(TypeTag.INTEIRO, [ident("i")]),
            Declaration(TypeTag.DECIMAL, [ident("d")]),
            Assignment(ident("i"), BinOp("+", ref("i"), ref("d"))),
        ])
        with self.assertRaises(TypeMismatchError) as ctx:
            SemanticAnalyzer(strict=True).analyze(ast)
        self.assertEqual(
            ctx.exception.message,
            "Invalid operation '+' between types 'inteiro' and 'decimal'"
        )

    def test_strict_mode_number_literal_is_inteiro(self):
        ast = Program([
            Declaration(TypeTag.DECIMAL, [ident("d")]),
            Assignment(ident("d"), BinOp("*", ref("d"), number(2))),
        ])
        with self.assertRaises(TypeMismatchError):
            analyze_program(ast, strict=True)

    def test_strict_mode_accepts_parsed_programs(self):
        ast = self._parse(SAMPLE_PROGRAM)[1]
        table = SemanticAnalyzer(strict=True).analyze(ast)
        self.assertEqual(len(table), 2)

    def test_errors_are_semantic_errors(self):
        ast = Program([Read(ident("q"))])
        with self.assertRaises(SemanticError):
            self.analyzer.analyze(ast)


if __name__ == '__main__':
    unittest.main()
