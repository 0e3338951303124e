## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import re
import shlex

from .types import Kind, Option
from .errors import OptError, OptConfigError, OptDuplicateError, OptUnrecognizedError, OptMissingValueError


def write_without_ansi(write_fn):
    """Wrapper function that strips ANSI codes before calling the original writer."""
    ansi_re = re.compile(r'\033\[[0-9;]*m')
    return lambda text: write_fn(ansi_re.sub('', text))


def format_value(option: Option) -> str:
    if option.kind is Kind.FLAG: return '1' if option.value else '0'
    if option.kind is Kind.INT: return str(option.value)
    return shlex.quote(option.value) if option.value is not None else "''"

def format_assignments(options: dict[str, Option], rest: list[str], prefix: str = '') -> list[str]:
    """Shell lines for `eval`: one `NAME=value` and `has_NAME=0|1` pair per option, then `set -- REST`."""
    lines = []
    for name, option in options.items():
        lines.append(f"{prefix}{name}={format_value(option)}")
        lines.append(f"{prefix}has_{name}={'1' if option.present else '0'}")
    lines.append(' '.join(['set', '--', *(shlex.quote(arg) for arg in rest)]))
    return lines


_ERROR_TITLES = [
    (OptDuplicateError, "DUPLICATE OPTION."),
    (OptUnrecognizedError, "UNKNOWN OPTION."),
    (OptMissingValueError, "MISSING VALUE."),
    (OptConfigError, "CONFIGURATION ERROR."),
]

def format_error(exc: OptError) -> str:
    title = next((t for cls, t in _ERROR_TITLES if isinstance(exc, cls)), "OPTION ERROR.")
    letter = f" Option `\033[1;97m{exc.option}\033[0m`" if exc.option else ""
    return f"\033[30;43m {title} \033[0m{letter} {exc} (Exception: \033[33m{type(exc).__name__}\033[0m)"
