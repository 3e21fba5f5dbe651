"""
Lox Abstract Syntax Tree

Defines expression node classes for the Lox language.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, Union

from .tokens import Token, UNARY_OPERATORS, BINARY_OPERATORS


# =============================================================================
# Base Classes
# =============================================================================

class Expr(ABC):
    """Base class for expression nodes."""

    @abstractmethod
    def accept(self, visitor: 'ExprVisitor') -> Any:
        """Accept a visitor for traversal."""
        pass


# =============================================================================
# Literals
# =============================================================================

LiteralValue = Optional[Union[float, str, bool]]


class LiteralKind(Enum):
    """The closed set of values a literal can hold."""

    NUMBER = auto()
    STRING = auto()
    BOOLEAN = auto()
    NIL = auto()

    @classmethod
    def of(cls, value: LiteralValue) -> 'LiteralKind':
        # bool before float: True is not a number literal
        if value is None:
            return cls.NIL
        if isinstance(value, bool):
            return cls.BOOLEAN
        if isinstance(value, float):
            return cls.NUMBER
        if isinstance(value, str):
            return cls.STRING
        raise TypeError(f"Not a Lox literal: {value!r}")


# =============================================================================
# Expressions
# =============================================================================

@dataclass
class LiteralExpr(Expr):
    """Literal value expression (number, string, bool, nil)."""
    value: LiteralValue

    def __post_init__(self) -> None:
        LiteralKind.of(self.value)

    @property
    def kind(self) -> LiteralKind:
        return LiteralKind.of(self.value)

    def accept(self, visitor: 'ExprVisitor') -> Any:
        return visitor.visit_literal(self)


@dataclass
class GroupingExpr(Expr):
    """Parenthesized expression."""
    expression: Expr

    def accept(self, visitor: 'ExprVisitor') -> Any:
        return visitor.visit_grouping(self)


@dataclass
class UnaryExpr(Expr):
    """Unary operator expression (!, -)."""
    operator: Token
    operand: Expr

    def __post_init__(self) -> None:
        if self.operator.type not in UNARY_OPERATORS:
            raise ValueError(f"Not a unary operator: {self.operator.lexeme!r}")

    def accept(self, visitor: 'ExprVisitor') -> Any:
        return visitor.visit_unary(self)


@dataclass
class BinaryExpr(Expr):
    """Binary operator expression."""
    left: Expr
    operator: Token
    right: Expr

    def __post_init__(self) -> None:
        if self.operator.type not in BINARY_OPERATORS:
            raise ValueError(f"Not a binary operator: {self.operator.lexeme!r}")

    def accept(self, visitor: 'ExprVisitor') -> Any:
        return visitor.visit_binary(self)


# =============================================================================
# Visitor Interface
# =============================================================================

class ExprVisitor(ABC):
    """Visitor interface for expression traversal."""

    @abstractmethod
    def visit_literal(self, node: LiteralExpr) -> Any:
        pass

    @abstractmethod
    def visit_grouping(self, node: GroupingExpr) -> Any:
        pass

    @abstractmethod
    def visit_unary(self, node: UnaryExpr) -> Any:
        pass

    @abstractmethod
    def visit_binary(self, node: BinaryExpr) -> Any:
        pass


# =============================================================================
# AST Printer (for debugging)
# =============================================================================

class ASTPrinter(ExprVisitor):
    """Prints an expression as parenthesized prefix text."""

    def print(self, node: Expr) -> str:
        return node.accept(self)

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [expr.accept(self) for expr in exprs]
        return "(" + " ".join(parts) + ")"

    def visit_literal(self, node: LiteralExpr) -> str:
        kind = node.kind
        if kind is LiteralKind.NIL:
            return "nil"
        if kind is LiteralKind.BOOLEAN:
            return "true" if node.value else "false"
        if kind is LiteralKind.NUMBER:
            return str(node.value)
        if kind is LiteralKind.STRING:
            return node.value  # type: ignore[return-value]
        raise AssertionError(f"Unhandled literal kind: {kind}")

    def visit_grouping(self, node: GroupingExpr) -> str:
        return self._parenthesize("group", node.expression)

    def visit_unary(self, node: UnaryExpr) -> str:
        return self._parenthesize(node.operator.lexeme, node.operand)

    def visit_binary(self, node: BinaryExpr) -> str:
        return self._parenthesize(node.operator.lexeme, node.left, node.right)
