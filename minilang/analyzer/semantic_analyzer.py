"""
Post-parse semantic traversal for minilang.

Walks a finished Program depth-first with a fresh SymbolTable, declaring
every variable again and re-checking every reference. The parser already
ran the same checks inline; this pass is independent of that table and
produces the symbol table handed to the caller.
"""

from typing import Optional

from ..lexer.tokens import TypeTag
from ..parser.ast_nodes import *
from .symbol_table import SymbolTable
from .errors import create_operand_mismatch_error


class SemanticAnalyzer(ASTVisitor):
    """
    Re-validates a parsed program.

    By default binary operations are only checked for declared operands.
    With strict=True operand types must also agree, exactly as the parser
    requires.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self.symbol_table = SymbolTable()

    def analyze(self, ast: Program) -> SymbolTable:
        """
        Perform semantic analysis on the AST.

        Args:
            ast: The abstract syntax tree to analyze

        Returns:
            The symbol table rebuilt from the program's declarations

        Raises:
            SemanticError: On the first inconsistency found
        """
        self.symbol_table = SymbolTable()
        ast.accept(self)
        return self.symbol_table

    def visit(self, node: ASTNode) -> Optional[TypeTag]:
        if isinstance(node, Program):
            for stmt in node.body:
                stmt.accept(self)
        elif isinstance(node, Declaration):
            self._visit_declaration(node)
        elif isinstance(node, Assignment):
            self.symbol_table.lookup(node.target.value, node.target.location)
            node.expression.accept(self)
        elif isinstance(node, Read):
            self.symbol_table.lookup(node.target.value, node.target.location)
        elif isinstance(node, Write):
            for arg in node.arguments:
                if isinstance(arg, IdentifierRef):
                    arg.accept(self)
        elif isinstance(node, If):
            node.condition.accept(self)
            node.then_block.accept(self)
            if isinstance(node, IfElse):
                node.else_block.accept(self)
        elif isinstance(node, Block):
            for stmt in node.statements:
                stmt.accept(self)
        elif isinstance(node, BinOp):
            return self._visit_bin_op(node)
        elif isinstance(node, IdentifierRef):
            return self.symbol_table.lookup(node.name, node.token.location)
        elif isinstance(node, NumberLiteral):
            return TypeTag.INTEIRO
        return None

    def _visit_declaration(self, decl: Declaration):
        for var_token in decl.variables:
            self.symbol_table.declare(var_token.value, decl.var_type, var_token.location)

    def _visit_bin_op(self, bin_op: BinOp) -> Optional[TypeTag]:
        left_type = bin_op.left.accept(self)
        right_type = bin_op.right.accept(self)

        if self.strict and left_type != right_type:
            location = bin_op.span.start if bin_op.span else None
            raise create_operand_mismatch_error(
                bin_op.operator, str(left_type), str(right_type), location
            )

        return left_type


def analyze_program(ast: Program, strict: bool = False) -> SymbolTable:
    """Convenience function running the traversal on a parsed program."""
    return SemanticAnalyzer(strict=strict).analyze(ast)
