"""
pylox Runner

Host program for the Lox front end: file mode, interactive prompt and
the command-line entry point.
"""

from .session import Session, EXIT_OK, EXIT_USAGE, EXIT_DATA_ERROR, EXIT_NO_INPUT

__all__ = [
    "Session",
    "EXIT_OK",
    "EXIT_USAGE",
    "EXIT_DATA_ERROR",
    "EXIT_NO_INPUT",
]
