"""
Lox Diagnostics

Collects and reports lexical and syntax errors.

Each scan or parse call writes into a Diagnostics object owned by the
caller, so independent inputs never share error state.
"""

import logging
import sys
from dataclasses import dataclass
from typing import IO, Iterator, List, Optional

from .tokens import Token, TokenType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Diagnostic:
    """A single reported error."""
    
    line: int
    where: str
    message: str
    
    def format(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"
    
    def __str__(self) -> str:
        return self.format()


class Diagnostics:
    """
    Error sink shared by the scanner and parser of one invocation.
    
    Example:
        diagnostics = Diagnostics(silent=True)
        tokens = Scanner('"oops', diagnostics).scan_tokens()
        assert diagnostics.had_error
    """
    
    def __init__(self, stream: Optional[IO[str]] = None, silent: bool = False):
        """
        Create an empty sink.
        
        Args:
            stream: Where formatted errors are written (default: sys.stderr)
            silent: Only record errors, never write them
        """
        self._stream = stream
        self.silent = silent
        self._records: List[Diagnostic] = []
    
    @property
    def stream(self) -> Optional[IO[str]]:
        if self.silent:
            return None
        return self._stream if self._stream is not None else sys.stderr
    
    @property
    def had_error(self) -> bool:
        return bool(self._records)
    
    @property
    def records(self) -> List[Diagnostic]:
        return list(self._records)
    
    def error(self, line: int, message: str) -> None:
        """Report an error known only by its line."""
        self.report(line, "", message)
    
    def token_error(self, token: Token, message: str) -> None:
        """Report an error anchored at a token."""
        if token.type == TokenType.EOF:
            self.report(token.line, " at end", message)
        else:
            self.report(token.line, f" at '{token.lexeme}'", message)
    
    def report(self, line: int, where: str, message: str) -> Diagnostic:
        diagnostic = Diagnostic(line, where, message)
        self._records.append(diagnostic)
        logger.debug("Reported %s", diagnostic)
        
        stream = self.stream
        if stream is not None:
            print(diagnostic.format(), file=stream)
        return diagnostic
    
    def messages(self) -> List[str]:
        """Formatted lines for every recorded error, in report order."""
        return [d.format() for d in self._records]
    
    def reset(self) -> None:
        """Forget all recorded errors."""
        self._records.clear()
    
    def __len__(self) -> int:
        return len(self._records)
    
    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._records)
