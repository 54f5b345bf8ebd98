"""
Command-line entry point for SimpleCalc.

Reads expressions from standard input, one per line, and writes one
result line per expression to standard output. Takes no arguments.
"""

from __future__ import annotations

import io
import logging
import sys
from typing import Optional, TextIO

from .session import Session

logger = logging.getLogger(__name__)


def main(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Run a calculator session over standard input.

    Returns:
        0 when input ends normally, 1 if reading or writing failed.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Undecodable bytes become U+FFFD, an unknown token, so only that line fails.
    if isinstance(stdin, io.TextIOWrapper):
        stdin.reconfigure(errors="replace")

    session = Session()
    try:
        session.run(stdin, stdout)
        stdout.flush()
    except (OSError, UnicodeDecodeError) as e:
        logger.error("I/O error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
