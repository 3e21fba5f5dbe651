"""
pylox command-line entry point.

    pylox              start an interactive prompt
    pylox SCRIPT       parse SCRIPT and print its tree
"""

import argparse
import logging
import sys
from typing import List, Optional

from lox import __version__
from .session import Session, EXIT_USAGE, EXIT_DATA_ERROR, EXIT_NO_INPUT

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="pylox",
        description="Lox front end: scan and parse an expression, print its tree",
        add_help=True,
    )
    p.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "script",
        nargs="*",
        help="source file to run; omit for an interactive prompt",
    )
    p.add_argument(
        "--tokens",
        action="store_true",
        help="print scanned tokens before the tree",
    )
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="debug logging to stderr",
    )
    return p


def main(argv: Optional[List[str]] = None) -> int:
    ns = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if len(ns.script) > 1:
        print("Usage: pylox [script]", file=sys.stderr)
        return EXIT_USAGE

    session = Session(show_tokens=ns.tokens)

    if not ns.script:
        return session.run_prompt()

    path = ns.script[0]
    try:
        return session.run_file(path)
    except OSError as e:
        logger.debug("Cannot read %s", path, exc_info=True)
        print(f"pylox: cannot read {path}: {e.strerror or e}", file=sys.stderr)
        return EXIT_NO_INPUT
    except UnicodeDecodeError as e:
        print(f"pylox: {path} is not valid UTF-8: {e.reason}", file=sys.stderr)
        return EXIT_DATA_ERROR


if __name__ == "__main__":
    sys.exit(main())
