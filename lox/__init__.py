"""
Lox Front End Package

A Python scanner and recursive descent parser for the Lox scripting
language. Turns source text into an expression AST, reporting syntax
errors with line positions.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import Token, TokenType, KEYWORDS
from .scanner import Scanner
from .ast import (
    Expr,
    LiteralExpr,
    GroupingExpr,
    UnaryExpr,
    BinaryExpr,
    LiteralKind,
    ExprVisitor,
    ASTPrinter,
)
from .parser import Parser
from .diagnostics import Diagnostic, Diagnostics
from .errors import LoxError, ParseError

__version__ = "0.1.0"
__all__ = [
    "Token",
    "TokenType",
    "KEYWORDS",
    "Scanner",
    "Parser",
    "Expr",
    "LiteralExpr",
    "GroupingExpr",
    "UnaryExpr",
    "BinaryExpr",
    "LiteralKind",
    "ExprVisitor",
    "ASTPrinter",
    "Diagnostic",
    "Diagnostics",
    "LoxError",
    "ParseError",
    "ScanResult",
    "ParseResult",
    "scan_source",
    "parse_source",
]


@dataclass
class ScanResult:
    """Tokens produced from one source string, with any lexical errors."""

    tokens: List[Token]
    diagnostics: Diagnostics = field(repr=False)

    @property
    def ok(self) -> bool:
        return not self.diagnostics.had_error


@dataclass
class ParseResult:
    """
    Outcome of scanning and parsing one source string.

    ``expression`` is None when parsing failed. Lexical errors do not
    prevent a tree from being built, so check ``ok`` before using it.
    """

    expression: Optional[Expr]
    tokens: List[Token]
    diagnostics: Diagnostics = field(repr=False)

    @property
    def ok(self) -> bool:
        return self.expression is not None and not self.diagnostics.had_error


def scan_source(source: str, diagnostics: Optional[Diagnostics] = None) -> ScanResult:
    """
    Tokenize Lox source code.

    Args:
        source: Lox source code string
        diagnostics: Sink to report into; defaults to a fresh one that
            writes to stderr

    Returns:
        ScanResult holding the tokens and the diagnostics used
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    tokens = Scanner(source, diagnostics).scan_tokens()
    return ScanResult(tokens, diagnostics)


def parse_source(source: str, diagnostics: Optional[Diagnostics] = None) -> ParseResult:
    """
    Scan and parse Lox source code into an expression tree.

    Args:
        source: Lox source code string
        diagnostics: Sink to report into; defaults to a fresh one that
            writes to stderr

    Returns:
        ParseResult holding the tree (or None), the tokens and the
        diagnostics used
    """
    scanned = scan_source(source, diagnostics)
    expression = Parser(scanned.tokens, scanned.diagnostics).parse()
    return ParseResult(expression, scanned.tokens, scanned.diagnostics)
