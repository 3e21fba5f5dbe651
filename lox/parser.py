"""
Lox Parser

Recursive descent parser that produces an expression AST from tokens.
"""

import logging
from typing import List, Optional

from .tokens import Token, TokenType, STATEMENT_KEYWORDS
from .ast import Expr, LiteralExpr, GroupingExpr, UnaryExpr, BinaryExpr
from .diagnostics import Diagnostics
from .errors import ParseError

logger = logging.getLogger(__name__)

# Deepest chain of parentheses and prefix operators accepted in one expression
MAX_NESTING = 100


class Parser:
    """Recursive descent parser for Lox expressions."""

    def __init__(self, tokens: List[Token], diagnostics: Optional[Diagnostics] = None):
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the scanner, ending in EOF
            diagnostics: Sink for syntax errors; a fresh one is created
                when omitted
        """
        if not tokens or tokens[-1].type != TokenType.EOF:
            raise ValueError("Token list must end with an EOF token")
        self.tokens = tokens
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.current = 0
        self.depth = 0

    def parse(self) -> Optional[Expr]:
        """
        Parse the token stream into an expression.

        Returns:
            The expression tree, or None if a syntax error was reported
        """
        self.depth = 0
        try:
            return self.expression()
        except ParseError as e:
            logger.debug("Parse failed at line %d: %s", e.token.line, e.message)
            self.synchronize()
            return None
        except RecursionError:
            self.diagnostics.token_error(self.peek(), "Expression nested too deeply.")
            return None

    # =========================================================================
    # Expressions
    # =========================================================================

    def expression(self) -> Expr:
        """Parse an expression."""
        return self.equality()

    def equality(self) -> Expr:
        """Parse an equality expression."""
        expr = self.comparison()

        while self.match(TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL):
            operator = self.previous()
            right = self.comparison()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def comparison(self) -> Expr:
        """Parse a comparison expression."""
        expr = self.term()

        while self.match(TokenType.GREATER, TokenType.GREATER_EQUAL,
                         TokenType.LESS, TokenType.LESS_EQUAL):
            operator = self.previous()
            right = self.term()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def term(self) -> Expr:
        """Parse addition/subtraction."""
        expr = self.factor()

        while self.match(TokenType.MINUS, TokenType.PLUS):
            operator = self.previous()
            right = self.factor()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def factor(self) -> Expr:
        """Parse multiplication/division."""
        expr = self.unary()

        while self.match(TokenType.SLASH, TokenType.STAR):
            operator = self.previous()
            right = self.unary()
            expr = BinaryExpr(expr, operator, right)

        return expr

    def unary(self) -> Expr:
        """Parse unary expressions."""
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            self.enter(operator)
            try:
                operand = self.unary()
            finally:
                self.depth -= 1
            return UnaryExpr(operator, operand)

        return self.primary()

    def primary(self) -> Expr:
        """Parse primary expressions."""
        if self.match(TokenType.FALSE):
            return LiteralExpr(False)
        if self.match(TokenType.TRUE):
            return LiteralExpr(True)
        if self.match(TokenType.NIL):
            return LiteralExpr(None)
        if self.match(TokenType.NUMBER, TokenType.STRING):
            return LiteralExpr(self.previous().literal)

        # Grouped expression
        if self.match(TokenType.LEFT_PAREN):
            self.enter(self.previous())
            try:
                expr = self.expression()
            finally:
                self.depth -= 1
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return GroupingExpr(expr)

        raise self.error(self.peek(), "Expect expression.")

    # =========================================================================
    # Helper Methods
    # =========================================================================

    def match(self, *types: TokenType) -> bool:
        """Check if current token matches any of the given types and advance."""
        for type in types:
            if self.check(type):
                self.advance()
                return True
        return False

    def check(self, type: TokenType) -> bool:
        """Check if current token is of given type."""
        if self.is_at_end():
            return False
        return self.peek().type == type

    def advance(self) -> Token:
        """Consume and return the current token."""
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self) -> bool:
        """Check if we've reached the end of tokens."""
        return self.peek().type == TokenType.EOF

    def peek(self) -> Token:
        """Return the current token."""
        return self.tokens[self.current]

    def previous(self) -> Token:
        """Return the previous token."""
        return self.tokens[self.current - 1]

    def consume(self, type: TokenType, message: str) -> Token:
        """Consume a token of the expected type or raise an error."""
        if self.check(type):
            return self.advance()

        raise self.error(self.peek(), message)

    def enter(self, token: Token) -> None:
        """Count one more level of nesting opened by token."""
        if self.depth >= MAX_NESTING:
            raise self.error(token, "Expression nested too deeply.")
        self.depth += 1

    def error(self, token: Token, message: str) -> ParseError:
        """Report a syntax error at token and build the error to raise."""
        self.diagnostics.token_error(token, message)
        return ParseError(token, message)

    def synchronize(self) -> None:
        """Discard tokens up to the next statement boundary."""
        self.advance()

        while not self.is_at_end():
            if self.previous().type == TokenType.SEMICOLON:
                return

            if self.peek().type in STATEMENT_KEYWORDS:
                return

            self.advance()


def parse(tokens: List[Token], diagnostics: Optional[Diagnostics] = None) -> Optional[Expr]:
    """Parse tokens with a one-shot Parser."""
    return Parser(tokens, diagnostics).parse()
