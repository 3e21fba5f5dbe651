"""
Lox Front End Errors

Defines exception classes raised while scanning and parsing.
"""

from typing import Optional

from .tokens import Token


class LoxError(Exception):
    """Base exception for all Lox errors."""
    
    def __init__(self, message: str, line: Optional[int] = None):
        self.message = message
        self.line = line
        super().__init__(self._format_message())
    
    def _format_message(self) -> str:
        """Format the error message with location information."""
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message


class ParseError(LoxError):
    """
    Raised inside the parser to unwind to the nearest recovery point.
    
    The error has already been reported to the diagnostics sink by the
    time it is raised; catching it only decides where parsing resumes.
    """
    
    def __init__(self, token: Token, message: str):
        self.token = token
        super().__init__(message, token.line)
