"""
pylox Session

The main interface for running Lox source through the front end.
"""

import logging
import sys
from pathlib import Path
from typing import IO, Optional, Union

from lox import ASTPrinter, Diagnostics, ParseResult, parse_source

logger = logging.getLogger(__name__)

# Process exit codes (sysexits.h)
EXIT_OK = 0
EXIT_USAGE = 64
EXIT_DATA_ERROR = 65
EXIT_NO_INPUT = 66

PROMPT = "> "


class Session:
    """
    Lox execution session.
    
    Owns the diagnostics for the inputs it runs and prints each
    successfully parsed tree.
    
    Example:
        session = Session()
        session.run('-123 * (45.67)')   # prints (* (- 123.0) (group 45.67))
    """
    
    def __init__(self,
                 out: Optional[IO[str]] = None,
                 err: Optional[IO[str]] = None,
                 show_tokens: bool = False):
        """
        Create a new session.
        
        Args:
            out: Stream for printed trees (default: sys.stdout)
            err: Stream for error reports (default: sys.stderr)
            show_tokens: Print every scanned token before the tree
        """
        self._out = out
        self.show_tokens = show_tokens
        self.diagnostics = Diagnostics(stream=err)
        self.printer = ASTPrinter()
    
    @property
    def out(self) -> IO[str]:
        return self._out if self._out is not None else sys.stdout
    
    @property
    def had_error(self) -> bool:
        return self.diagnostics.had_error
    
    def run(self, source: str) -> ParseResult:
        """
        Scan and parse one source string, printing the tree on success.
        
        Args:
            source: Lox source code
            
        Returns:
            The parse result; errors are also kept in self.diagnostics
        """
        result = parse_source(source, self.diagnostics)
        
        if self.show_tokens:
            for token in result.tokens:
                print(token, file=self.out)
        
        # Stop if there was a syntax error
        if not result.ok:
            logger.debug("Not printing tree: %d error(s)", len(self.diagnostics))
            return result
        
        try:
            text = self.printer.print(result.expression)
        except RecursionError:
            self.diagnostics.error(result.tokens[-1].line, "Expression too deep to print.")
            return result
        
        print(text, file=self.out)
        return result
    
    def run_file(self, path: Union[str, Path]) -> int:
        """
        Run a source file.
        
        Args:
            path: Path to a .lox source file
            
        Returns:
            EXIT_DATA_ERROR if any error was reported, else EXIT_OK
        """
        source = Path(path).read_text(encoding='utf-8')
        logger.debug("Running %s (%d chars)", path, len(source))
        self.run(source)
        
        if self.had_error:
            return EXIT_DATA_ERROR
        return EXIT_OK
    
    def run_prompt(self, stdin: Optional[IO[str]] = None) -> int:
        """
        Read and run lines interactively until end of input.
        
        Errors on one line never carry over to the next.
        
        Args:
            stdin: Input stream (default: sys.stdin)
            
        Returns:
            EXIT_OK
        """
        stdin = stdin if stdin is not None else sys.stdin
        
        while True:
            print(PROMPT, end="", file=self.out, flush=True)
            line = stdin.readline()
            if not line:
                print(file=self.out)
                break
            self.run(line.rstrip("\r\n"))
            self.diagnostics.reset()
        
        return EXIT_OK
