"""
Lox Token Definitions

Defines all token types and the Token class for lexical analysis.
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Optional, Union


class TokenType(Enum):
    """All token types in Lox."""
    
    # Single-character tokens
    LEFT_PAREN = auto()    # (
    RIGHT_PAREN = auto()   # )
    LEFT_BRACE = auto()    # {
    RIGHT_BRACE = auto()   # }
    COMMA = auto()         # ,
    DOT = auto()           # .
    MINUS = auto()         # -
    PLUS = auto()          # +
    SEMICOLON = auto()     # ;
    SLASH = auto()         # /
    STAR = auto()          # *
    
    # One or two character tokens
    BANG = auto()          # !
    BANG_EQUAL = auto()    # !=
    EQUAL = auto()         # =
    EQUAL_EQUAL = auto()   # ==
    GREATER = auto()       # >
    GREATER_EQUAL = auto() # >=
    LESS = auto()          # <
    LESS_EQUAL = auto()    # <=
    
    # Literals
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    
    # Keywords
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()
    
    # Special
    EOF = auto()


# Keyword mapping
KEYWORDS: Dict[str, TokenType] = {
    'and': TokenType.AND,
    'class': TokenType.CLASS,
    'else': TokenType.ELSE,
    'false': TokenType.FALSE,
    'for': TokenType.FOR,
    'fun': TokenType.FUN,
    'if': TokenType.IF,
    'nil': TokenType.NIL,
    'or': TokenType.OR,
    'print': TokenType.PRINT,
    'return': TokenType.RETURN,
    'super': TokenType.SUPER,
    'this': TokenType.THIS,
    'true': TokenType.TRUE,
    'var': TokenType.VAR,
    'while': TokenType.WHILE,
}

# Decoded literal carried by NUMBER and STRING tokens
TokenLiteral = Optional[Union[float, str]]


@dataclass(frozen=True)
class Token:
    """Represents a single token from the source code."""
    
    type: TokenType
    lexeme: str
    literal: TokenLiteral
    line: int
    
    def __str__(self) -> str:
        literal = "null" if self.literal is None else self.literal
        return f"{self.type.name} {self.lexeme} {literal}"
    
    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line={self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line={self.line})"


# Operators accepted by UnaryExpr
UNARY_OPERATORS = frozenset((TokenType.BANG, TokenType.MINUS))

# Operators accepted by BinaryExpr
BINARY_OPERATORS = frozenset((
    TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL,
    TokenType.GREATER, TokenType.GREATER_EQUAL,
    TokenType.LESS, TokenType.LESS_EQUAL,
    TokenType.MINUS, TokenType.PLUS,
    TokenType.SLASH, TokenType.STAR,
))

# Tokens that begin a statement; the parser resynchronizes in front of them
STATEMENT_KEYWORDS = frozenset((
    TokenType.CLASS, TokenType.FUN, TokenType.VAR, TokenType.FOR,
    TokenType.IF, TokenType.WHILE, TokenType.PRINT, TokenType.RETURN,
))
