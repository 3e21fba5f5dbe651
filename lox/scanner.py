"""
Lox Scanner

Tokenizes Lox source code into a list of tokens.
"""

import logging
from typing import List, Optional

from .tokens import Token, TokenType, TokenLiteral, KEYWORDS
from .diagnostics import Diagnostics

logger = logging.getLogger(__name__)


# Tokens that are always a single character
SINGLE_CHAR_TOKENS = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    '{': TokenType.LEFT_BRACE,
    '}': TokenType.RIGHT_BRACE,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    '-': TokenType.MINUS,
    '+': TokenType.PLUS,
    ';': TokenType.SEMICOLON,
    '*': TokenType.STAR,
}

# Operators that become a two-character token when followed by '='
EQUAL_SUFFIX_TOKENS = {
    '!': (TokenType.BANG, TokenType.BANG_EQUAL),
    '=': (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
    '<': (TokenType.LESS, TokenType.LESS_EQUAL),
    '>': (TokenType.GREATER, TokenType.GREATER_EQUAL),
}


def is_digit(c: str) -> bool:
    return '0' <= c <= '9'


def is_alpha(c: str) -> bool:
    return 'a' <= c <= 'z' or 'A' <= c <= 'Z' or c == '_'


def is_alphanumeric(c: str) -> bool:
    return is_alpha(c) or is_digit(c)


class Scanner:
    """Lexical analyzer for Lox source code."""

    def __init__(self, source: str, diagnostics: Optional[Diagnostics] = None):
        """
        Initialize the scanner.

        Args:
            source: Lox source code to tokenize
            diagnostics: Sink for lexical errors; a fresh one is created
                when omitted
        """
        self.source = source
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.tokens: List[Token] = []
        self.start = 0      # Start of current lexeme
        self.current = 0    # Next unread character
        self.line = 1       # Current line number
        self.start_line = 1 # Line the current lexeme starts on

    def scan_tokens(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Lexical errors are reported and skipped, so this always returns a
        token list ending in a single EOF token.

        Returns:
            List of tokens
        """
        while not self.is_at_end():
            self.start = self.current
            self.start_line = self.line
            self.scan_token()

        self.tokens.append(Token(TokenType.EOF, "", None, self.line))
        logger.debug("Scanned %d tokens over %d lines", len(self.tokens), self.line)
        return self.tokens

    def scan_token(self) -> None:
        """Scan the next token."""
        c = self.advance()

        if c in SINGLE_CHAR_TOKENS:
            self.add_token(SINGLE_CHAR_TOKENS[c])
        elif c in EQUAL_SUFFIX_TOKENS:
            single, double = EQUAL_SUFFIX_TOKENS[c]
            self.add_token(double if self.match('=') else single)
        elif c == '/':
            if self.match('/'):
                # A comment goes until the end of the line
                while self.peek() != '\n' and not self.is_at_end():
                    self.advance()
            else:
                self.add_token(TokenType.SLASH)
        elif c in ' \r\t':
            pass
        elif c == '\n':
            self.line += 1
        elif c == '"':
            self.string()
        elif is_digit(c):
            self.number()
        elif is_alpha(c):
            self.identifier()
        else:
            self.diagnostics.error(self.line, "Unexpected character.")

    def advance(self) -> str:
        """Consume and return the current character."""
        c = self.source[self.current]
        self.current += 1
        return c

    def peek(self) -> str:
        """Return the current character without consuming it."""
        if self.is_at_end():
            return '\0'
        return self.source[self.current]

    def peek_next(self) -> str:
        """Return the next character without consuming it."""
        if self.current + 1 >= len(self.source):
            return '\0'
        return self.source[self.current + 1]

    def match(self, expected: str) -> bool:
        """Consume the current character if it matches expected."""
        if self.is_at_end():
            return False
        if self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def is_at_end(self) -> bool:
        """Check if we've reached the end of the source."""
        return self.current >= len(self.source)

    def add_token(self, type: TokenType, literal: TokenLiteral = None) -> None:
        """Add a token for the current lexeme."""
        lexeme = self.source[self.start:self.current]
        self.tokens.append(Token(type, lexeme, literal, self.start_line))

    def string(self) -> None:
        """Scan a string literal. Strings may span several lines."""
        while self.peek() != '"' and not self.is_at_end():
            if self.peek() == '\n':
                self.line += 1
            self.advance()

        if self.is_at_end():
            self.diagnostics.error(self.line, "Unterminated string.")
            return

        # Consume closing quote
        self.advance()

        # Trim the surrounding quotes
        self.add_token(TokenType.STRING, self.source[self.start + 1:self.current - 1])

    def number(self) -> None:
        """Scan a number literal."""
        while is_digit(self.peek()):
            self.advance()

        # Fractional part; a trailing '.' is left for the next token
        if self.peek() == '.' and is_digit(self.peek_next()):
            self.advance()  # Consume '.'
            while is_digit(self.peek()):
                self.advance()

        self.add_token(TokenType.NUMBER, float(self.source[self.start:self.current]))

    def identifier(self) -> None:
        """Scan an identifier or keyword."""
        while is_alphanumeric(self.peek()):
            self.advance()

        text = self.source[self.start:self.current]
        self.add_token(KEYWORDS.get(text, TokenType.IDENTIFIER))


def scan(source: str, diagnostics: Optional[Diagnostics] = None) -> List[Token]:
    """Tokenize source with a one-shot Scanner."""
    return Scanner(source, diagnostics).scan_tokens()
