#!/usr/bin/env python3
"""
Print the header and payload of a token as colorized JSON.

Behavior:
- No argparse. Exactly one argument is expected: the token itself.
  Any other argument count prints the usage line and returns normally.
- Failures are printed to stdout; the exit status is always 0.
  Example:
    jwtdecode eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxIn0.sig
    python -m jwt_inspect eyJhbGciOiJIUzI1NiJ9.eyJzdWIiOiIxIn0.sig
"""
import sys
from typing import List, Optional, TextIO

from loguru import logger

from jwt_inspect.exceptions import TokenInspectError
from jwt_inspect.inspector import write_claims
from jwt_inspect.utils import Clock, system_clock

USAGE = "Usage: jwtdecode <jwt_token>"


def main(
    argv: Optional[List[str]] = None,
    out: Optional[TextIO] = None,
    clock: Clock = system_clock,
) -> int:
    args = sys.argv[1:] if argv is None else argv
    writer = sys.stdout if out is None else out

    if len(args) != 1:
        print(USAGE, file=writer)
        return 0

    try:
        write_claims(writer, args[0], clock=clock)
    except TokenInspectError as e:
        logger.debug(f"Inspection failed: {e!r}")
        print(f"failed to write claims = {e}", file=writer)
    return 0


if __name__ == "__main__":
    sys.exit(main())
