"""
Abstract Syntax Tree node definitions for minilang.

One node class per grammar production. Each node includes source location
information, supports the visitor pattern and renders itself as a nested
tagged dictionary for the AST dump.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Any, Dict
from dataclasses import dataclass
from enum import Enum

from ..lexer.tokens import SourceLocation, Token, TypeTag


class ASTNodeType(Enum):
    """Enumeration of all AST node types."""

    # Top-level
    PROGRAM = "Program"

    # Statements
    DECLARATION = "Declaration"
    ASSIGNMENT = "Assignment"
    READ = "Read"
    WRITE = "Write"
    IF = "If"
    IF_ELSE = "IfElse"
    BLOCK = "Block"

    # Expressions
    BIN_OP = "BinOp"
    IDENTIFIER_REF = "IdentifierRef"
    NUMBER_LITERAL = "NumberLiteral"
    STRING_LITERAL = "StringLiteral"


@dataclass
class SourceSpan:
    """Represents a span of source code (start and end locations)."""
    start: SourceLocation
    end: SourceLocation

    def __str__(self) -> str:
        if self.start.filename == self.end.filename:
            return f"{self.start.filename}:{self.start.line}:{self.start.column}-{self.end.line}:{self.end.column}"
        return f"{self.start}-{self.end}"


class ASTVisitor(ABC):
    """Abstract visitor interface for traversing AST nodes."""

    @abstractmethod
    def visit(self, node: 'ASTNode') -> Any:
        """Visit a generic AST node."""
        pass


class ASTNode(ABC):
    """Base class for all AST nodes."""

    def __init__(self, node_type: ASTNodeType, span: Optional[SourceSpan]):
        self.node_type = node_type
        self.span = span
        self.parent: Optional['ASTNode'] = None
        self.attributes: Dict[str, Any] = {}

    def accept(self, visitor: ASTVisitor) -> Any:
        """Accept a visitor (visitor pattern)."""
        return visitor.visit(self)

    @abstractmethod
    def children(self) -> List['ASTNode']:
        """Get all child nodes."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Render the node and its subtree as plain data."""
        pass

    def set_parent(self, parent: 'ASTNode'):
        """Set the parent node."""
        self.parent = parent

    def get_attribute(self, key: str, default: Any = None) -> Any:
        """Get an attribute value."""
        return self.attributes.get(key, default)

    def set_attribute(self, key: str, value: Any):
        """Set an attribute value."""
        self.attributes[key] = value

    def _tagged(self, **fields) -> Dict[str, Any]:
        result = {"node": self.node_type.value}
        result.update(fields)
        return result

    def __str__(self) -> str:
        return f"{self.node_type.value}@{self.span}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(span={self.span})"


# ============================================================================
# Top-level node
# ============================================================================

class Program(ASTNode):
    """Root AST node: everything between 'programa' and 'fimprog'."""
    body: List['Statement']

    def __init__(self, body: List['Statement'], span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.PROGRAM, span)
        self.body = body
        for stmt in body:
            stmt.set_parent(self)

    def children(self) -> List[ASTNode]:
        return list(self.body)

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(body=[stmt.to_dict() for stmt in self.body])


# ============================================================================
# Statements
# ============================================================================

class Statement(ASTNode):
    """Base class for statements."""
    pass


class Declaration(Statement):
    """Variable declaration: one type, one or more identifier tokens."""
    var_type: TypeTag
    variables: List[Token]

    def __init__(self, var_type: TypeTag, variables: List[Token], span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.DECLARATION, span)
        self.var_type = var_type
        self.variables = variables

    @property
    def names(self) -> List[str]:
        return [token.value for token in self.variables]

    def children(self) -> List[ASTNode]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(type=self.var_type.value, vars=self.names)


class Assignment(Statement):
    """Assignment of an expression to a declared variable (':=')."""
    target: Token
    expression: 'Expression'

    def __init__(self, target: Token, expression: 'Expression', span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.ASSIGNMENT, span)
        self.target = target
        self.expression = expression
        expression.set_parent(self)

    def children(self) -> List[ASTNode]:
        return [self.expression]

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(target=self.target.value, expr=self.expression.to_dict())


class Read(Statement):
    """leia(x): read a value into a declared variable."""
    target: Token

    def __init__(self, target: Token, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.READ, span)
        self.target = target

    def children(self) -> List[ASTNode]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(target=self.target.value)


class Write(Statement):
    """escreva(...): identifiers, numbers and string literals."""
    arguments: List['Expression']

    def __init__(self, arguments: List['Expression'], span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.WRITE, span)
        self.arguments = arguments
        for arg in arguments:
            arg.set_parent(self)

    def children(self) -> List[ASTNode]:
        return list(self.arguments)

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(args=[arg.to_dict() for arg in self.arguments])


class Block(Statement):
    """Braced command list. Does not open a new scope."""
    statements: List[Statement]

    def __init__(self, statements: List[Statement], span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.BLOCK, span)
        self.statements = statements
        for stmt in statements:
            stmt.set_parent(self)

    def children(self) -> List[ASTNode]:
        return list(self.statements)

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(stmts=[stmt.to_dict() for stmt in self.statements])


class If(Statement):
    """If statement without an else branch."""
    condition: 'Expression'
    then_block: Block

    def __init__(self, condition: 'Expression', then_block: Block, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.IF, span)
        self.condition = condition
        self.then_block = then_block

        condition.set_parent(self)
        then_block.set_parent(self)

    def children(self) -> List[ASTNode]:
        return [self.condition, self.then_block]

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(cond=self.condition.to_dict(), then=self.then_block.to_dict())


class IfElse(If):
    """If statement with an else branch."""
    else_block: Block

    def __init__(self, condition: 'Expression', then_block: Block, else_block: Block,
                 span: Optional[SourceSpan] = None):
        super().__init__(condition, then_block, span)
        self.node_type = ASTNodeType.IF_ELSE
        self.else_block = else_block
        else_block.set_parent(self)

    def children(self) -> List[ASTNode]:
        return [self.condition, self.then_block, self.else_block]

    def to_dict(self) -> Dict[str, Any]:
        result = super().to_dict()
        result["else"] = self.else_block.to_dict()
        return result


# ============================================================================
# Expressions
# ============================================================================

class Expression(ASTNode):
    """Base class for expressions."""
    pass


class BinOp(Expression):
    """Binary operation. All operators share one precedence level."""
    operator: str
    left: Expression
    right: Expression

    def __init__(self, operator: str, left: Expression, right: Expression,
                 span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.BIN_OP, span)
        self.operator = operator
        self.left = left
        self.right = right

        left.set_parent(self)
        right.set_parent(self)

    def children(self) -> List[ASTNode]:
        return [self.left, self.right]

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(op=self.operator, left=self.left.to_dict(), right=self.right.to_dict())


class IdentifierRef(Expression):
    """Reference to a variable by name."""
    name: str

    def __init__(self, token: Token, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.IDENTIFIER_REF, span)
        self.token = token
        self.name = token.value

    def children(self) -> List[ASTNode]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(name=self.name)


class NumberLiteral(Expression):
    """
    Integer literal; always typed inteiro.

    `value` is the digit string exactly as written. Literals have no upper
    bound, so nothing converts them to int.
    """
    value: str

    def __init__(self, token: Token, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.NUMBER_LITERAL, span)
        self.token = token
        self.value = token.value

    def children(self) -> List[ASTNode]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(value=self.value)


class StringLiteral(Expression):
    """String literal; only valid as an escreva argument."""
    value: str

    def __init__(self, token: Token, span: Optional[SourceSpan] = None):
        super().__init__(ASTNodeType.STRING_LITERAL, span)
        self.token = token
        self.value = token.value

    def children(self) -> List[ASTNode]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        return self._tagged(value=self.value)


# Alias for the main AST type
AST = Program
