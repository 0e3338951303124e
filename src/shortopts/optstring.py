## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import string
import logging
from typing import Iterable

from .types import Declaration
from .errors import OptLetterError


log = logging.getLogger(__name__)

LETTERS = string.ascii_lowercase
SLOT_COUNT = len(LETTERS)

_ATOI_RE = re.compile(r'[ \t\n\v\f\r]*([+-]?[0-9]+)')


def slot_index(letter: str) -> int:
    if not isinstance(letter, str) or len(letter) != 1 or letter not in LETTERS:
        raise OptLetterError(f"invalid option letter {letter!r}; only 'a' to 'z' are supported",
                             option=letter, rule='letter')
    return ord(letter) - ord('a')

def slot_letter(index: int) -> str:
    return LETTERS[index]


def build_optstring(declarations: Iterable[Declaration | None]) -> str:
    """Scanner specification for the declared options, in letter order: `x` for flags, `x:` when a value is required."""
    parts = sorted((d.letter, d.kind.takes_value) for d in declarations if d is not None)
    result = ''.join(letter + (':' if takes_value else '') for letter, takes_value in parts)
    assert len(result) <= 2 * len(parts)
    log.debug("built optstring %r from %d declarations", result, len(parts))
    return result


def parse_int(text: str) -> int:
    # Same leniency as C `atoi`: leading numeric prefix, zero when there is none.
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0
