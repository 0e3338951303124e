## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Thin layer over the standard `getopt` module, which plays the role of the C library's getopt(3).
#

import os
import getopt
import logging

from .errors import OptUnrecognizedError, OptMissingValueError


log = logging.getLogger(__name__)


def default_permute() -> bool:
    """GNU getopt permutes unless POSIXLY_CORRECT is set in the environment."""
    return 'POSIXLY_CORRECT' not in os.environ


def scan(args: list[str], optstring: str, permute: bool = True) -> tuple[list[tuple[str, str]], list[str]]:
    """Run the scanner over `args` and return `(options, rest)`, with option letters stripped of their dash.

    Scanning is finished before this returns, so callers never see a partial result on error.
    """
    scanner = getopt.gnu_getopt if permute else getopt.getopt
    try:
        pairs, rest = scanner(list(args), optstring)
    except getopt.GetoptError as exc:
        raise _translate(exc, optstring) from exc

    options = [(opt[1:], value) for opt, value in pairs]
    log.debug("scanned %d options with %r (permute=%s), %d left over", len(options), optstring, permute, len(rest))
    return options, rest


def _translate(exc: getopt.GetoptError, optstring: str):
    letter = exc.opt
    if f"--{letter}" in exc.msg:
        return OptUnrecognizedError(f"option --{letter} not recognized; long options are not supported",
                                    option=letter, rule='unrecognized')
    if letter and letter != ':' and letter + ':' in optstring:
        return OptMissingValueError(f"option -{letter} requires a value", option=letter, rule='missing-value')
    return OptUnrecognizedError(f"option -{letter} not recognized", option=letter, rule='unrecognized')
