"""
minilang Recursive-Descent Parser

One method per grammar production. Declarations and variable references
are validated against an owned SymbolTable while parsing, so the first
semantic error aborts the parse just like a syntax error does.
"""

from typing import List, Optional, TYPE_CHECKING

from ..lexer.tokens import (
    Token, TokenType, TypeTag, SourceLocation, TYPE_KEYWORDS, ASSIGNMENT_OPERATORS
)
from ..analyzer.symbol_table import SymbolTable
from ..analyzer.errors import create_operand_mismatch_error
from .ast_nodes import *
from .errors import (
    ParseError, create_unexpected_token_error, create_invalid_construct_error,
    create_unexpected_eof_error, describe_expected
)

if TYPE_CHECKING:
    from ..config import FrontendConfig


class Parser:
    """
    minilang recursive-descent parser.

    Consumes every token exactly once, left to right, and returns a
    Program node only when the whole input is valid.
    """

    def __init__(self, tokens: List[Token], symbol_table: Optional[SymbolTable] = None):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
            symbol_table: Table for the inline checks; a fresh one by default
        """
        self.tokens = tokens
        self.current = 0
        self.symbol_table = symbol_table if symbol_table is not None else SymbolTable()

    def parse(self) -> Program:
        """
        Parse the token stream into an AST.

        Returns:
            Program AST node representing the entire program

        Raises:
            ParseError: On the first syntax error
            SemanticError: On the first failed inline check
        """
        return self._parse_program()

    # ========================================================================
    # Program structure
    # ========================================================================

    def _parse_program(self) -> Program:
        """program := 'programa' body 'fimprog'"""
        start_token = self._consume(TokenType.KEYWORD, "programa")
        body = self._parse_body()
        self._consume(TokenType.KEYWORD, "fimprog")

        if not self._is_at_end():
            raise create_unexpected_token_error("end of input after 'fimprog'", self._peek())

        return Program(body, self._span_from(start_token))

    def _parse_body(self) -> List[Statement]:
        statements = []
        while not self._is_at_end() and not self._check(TokenType.KEYWORD, "fimprog"):
            if self._peek().is_keyword and self._peek().value in TYPE_KEYWORDS:
                statements.append(self._parse_declaration())
            else:
                statements.append(self._parse_command())
        return statements

    def _parse_declaration(self) -> Declaration:
        """declaration := type var_list ';'"""
        start_token = self._peek()
        var_type = self._parse_type()
        variables = self._parse_var_list()
        self._consume(TokenType.DELIMITER, ";")

        for var_token in variables:
            self.symbol_table.declare(var_token.value, var_type, var_token.location)

        return Declaration(var_type, variables, self._span_from(start_token))

    def _parse_type(self) -> TypeTag:
        token = self._consume(TokenType.KEYWORD)
        if token.value not in TYPE_KEYWORDS:
            raise create_invalid_construct_error("type", token)
        return TYPE_KEYWORDS[token.value]

    def _parse_var_list(self) -> List[Token]:
        variables = [self._consume(TokenType.IDENTIFIER)]
        while self._match(TokenType.DELIMITER, ","):
            variables.append(self._consume(TokenType.IDENTIFIER))
        return variables

    # ========================================================================
    # Commands
    # ========================================================================

    def _parse_command(self) -> Statement:
        """Dispatch on the current token."""
        token = self._peek()
        if token is None:
            raise create_unexpected_eof_error("command", self._last_location())

        if token.matches(TokenType.KEYWORD, "escreva"):
            return self._parse_write()
        if token.matches(TokenType.KEYWORD, "leia"):
            return self._parse_read()
        if token.matches(TokenType.KEYWORD, "if"):
            return self._parse_conditional()
        if token.matches(TokenType.DELIMITER, "{"):
            return self._parse_block()
        if token.is_identifier:
            return self._parse_assignment()

        raise create_invalid_construct_error("command", token)

    def _parse_write(self) -> Write:
        """write := 'escreva' '(' argument_list ')' ';'"""
        start_token = self._consume(TokenType.KEYWORD, "escreva")
        self._consume(TokenType.DELIMITER, "(")
        arguments = self._parse_argument_list()

        for arg in arguments:
            if isinstance(arg, IdentifierRef):
                self.symbol_table.lookup(arg.name, arg.token.location)

        self._consume(TokenType.DELIMITER, ")")
        self._consume(TokenType.DELIMITER, ";")
        return Write(arguments, self._span_from(start_token))

    def _parse_read(self) -> Read:
        """read := 'leia' '(' identifier ')' ';'"""
        start_token = self._consume(TokenType.KEYWORD, "leia")
        self._consume(TokenType.DELIMITER, "(")
        target = self._consume(TokenType.IDENTIFIER)
        self.symbol_table.lookup(target.value, target.location)
        self._consume(TokenType.DELIMITER, ")")
        self._consume(TokenType.DELIMITER, ";")
        return Read(target, self._span_from(start_token))

    def _parse_conditional(self) -> If:
        """conditional := 'if' '(' expr ')' block ('else' block)?"""
        start_token = self._consume(TokenType.KEYWORD, "if")
        self._consume(TokenType.DELIMITER, "(")
        condition = self._parse_expression()
        self._consume(TokenType.DELIMITER, ")")
        then_block = self._parse_block()

        if self._match(TokenType.KEYWORD, "else"):
            else_block = self._parse_block()
            return IfElse(condition, then_block, else_block, self._span_from(start_token))

        return If(condition, then_block, self._span_from(start_token))

    def _parse_block(self) -> Block:
        """block := '{' command* '}'"""
        start_token = self._consume(TokenType.DELIMITER, "{")
        statements = []
        while not self._is_at_end() and not self._check(TokenType.DELIMITER, "}"):
            statements.append(self._parse_command())
        self._consume(TokenType.DELIMITER, "}")
        return Block(statements, self._span_from(start_token))

    def _parse_assignment(self) -> Assignment:
        """assignment := identifier ':=' expr ';'"""
        target = self._consume(TokenType.IDENTIFIER)
        self.symbol_table.lookup(target.value, target.location)
        self._consume(TokenType.OPERATOR, ":=")
        expression = self._parse_expression()
        self._consume(TokenType.DELIMITER, ";")
        return Assignment(target, expression, self._span_from(target))

    # ========================================================================
    # Expressions
    # ========================================================================

    def _parse_expression(self) -> Expression:
        """
        expr := term (operator term)*

        Flat and left-associative: there are no precedence levels, only
        parentheses group. Both operands of every application must have
        the same type.
        """
        start_token = self._peek()
        left = self._parse_term()

        while self._check_binary_operator():
            operator = self._advance()
            right = self._parse_term()

            left_type = self._operand_type(left)
            right_type = self._operand_type(right)
            if left_type != right_type:
                raise create_operand_mismatch_error(
                    operator.value,
                    str(left_type),
                    str(right_type),
                    operator.location
                )

            left = BinOp(operator.value, left, right, self._span_from(start_token))
            left.set_attribute("type", left_type)

        return left

    def _parse_term(self) -> Expression:
        """term := identifier | number | '(' expr ')'"""
        token = self._peek()
        if token is None:
            raise create_unexpected_eof_error("term", self._last_location())

        if token.is_identifier:
            self._advance()
            self.symbol_table.lookup(token.value, token.location)
            return IdentifierRef(token, self._span_from(token))
        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(token, self._span_from(token))
        if token.matches(TokenType.DELIMITER, "("):
            self._advance()
            expression = self._parse_expression()
            self._consume(TokenType.DELIMITER, ")")
            return expression

        raise create_invalid_construct_error("term", token)

    def _operand_type(self, expr: Expression) -> TypeTag:
        """Resolve the type of a binary operand."""
        if isinstance(expr, IdentifierRef):
            return self.symbol_table.lookup(expr.name, expr.token.location)
        if isinstance(expr, NumberLiteral):
            return TypeTag.INTEIRO
        return expr.get_attribute("type")

    def _parse_argument_list(self) -> List[Expression]:
        arguments = [self._parse_argument()]
        while self._match(TokenType.DELIMITER, ","):
            arguments.append(self._parse_argument())
        return arguments

    def _parse_argument(self) -> Expression:
        """argument := identifier | number | string-literal"""
        token = self._peek()
        if token is None:
            raise create_unexpected_eof_error("argument", self._last_location())

        if token.type == TokenType.STRING_LITERAL:
            self._advance()
            return StringLiteral(token, self._span_from(token))
        if token.is_identifier:
            self._advance()
            return IdentifierRef(token, self._span_from(token))
        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(token, self._span_from(token))

        raise create_invalid_construct_error("argument", token)

    # ========================================================================
    # Token stream helpers
    # ========================================================================

    def _is_at_end(self) -> bool:
        """Check if we've consumed every token."""
        return self.current >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        """Return current token without consuming, or None past the end."""
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def _previous(self) -> Optional[Token]:
        """Return previous token."""
        if self.current > 0:
            return self.tokens[self.current - 1]
        return None

    def _advance(self) -> Token:
        token = self.tokens[self.current]
        self.current += 1
        return token

    def _check(self, token_type: TokenType, value: Optional[str] = None) -> bool:
        token = self._peek()
        return token is not None and token.matches(token_type, value)

    def _match(self, token_type: TokenType, value: Optional[str] = None) -> bool:
        """Consume the current token if it matches."""
        if self._check(token_type, value):
            self._advance()
            return True
        return False

    def _consume(self, token_type: TokenType, value: Optional[str] = None) -> Token:
        """Consume token of expected kind (and value) or raise error."""
        if self._check(token_type, value):
            return self._advance()

        expected = describe_expected(token_type, value)
        current_token = self._peek()
        if current_token is None:
            raise create_unexpected_eof_error(expected, self._last_location(), value)
        raise create_unexpected_token_error(expected, current_token, value)

    def _check_binary_operator(self) -> bool:
        token = self._peek()
        return (token is not None and token.type == TokenType.OPERATOR
                and token.value not in ASSIGNMENT_OPERATORS)

    def _last_location(self) -> Optional[SourceLocation]:
        previous = self._previous()
        return previous.location if previous is not None else None

    def _span_from(self, start_token: Token) -> Optional[SourceSpan]:
        """Span from start_token to the last consumed token."""
        end_token = self._previous() or start_token
        if start_token.location is None or end_token.location is None:
            return None
        return SourceSpan(start_token.location, end_token.location)


def parse_string(source: str, filename: str = "<string>",
                 config: Optional["FrontendConfig"] = None) -> Program:
    """
    Convenience function to parse a source string.

    Raises:
        LexerError, ParseError, SemanticError: On the first error found
    """
    from ..lexer import tokenize_string

    tokens = tokenize_string(source, filename, config)
    parser = Parser(tokens)
    return parser.parse()


def parse_file(filepath: str, config: Optional["FrontendConfig"] = None) -> Program:
    """
    Convenience function to parse a source file.

    Raises:
        LexerError, ParseError, SemanticError: On the first error found
        IOError: If file cannot be read
    """
    from ..lexer import tokenize_file

    tokens = tokenize_file(filepath, config)
    parser = Parser(tokens)
    return parser.parse()
