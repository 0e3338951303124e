## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# Process-wide registry for scripts that want one shared set of options; single-threaded use only.
#

from .types import Kind, Var, FlagVar, IntVar, StrVar, Declaration, Option
from .errors import *
from .optstring import build_optstring, slot_index, parse_int
from .registry import Registry, Phase

_REGISTRY = Registry()

def __getattr__(name):
    return getattr(_REGISTRY, name)
