## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘
#
# shortopts — Declare single-letter options, then parse argv into caller-held vars.
#

import sys
import enum
import logging

from .types import Kind, Var, FlagVar, Declaration, Option
from .errors import OptConfigError, OptLetterError, OptDuplicateError, OptAllocationError
from .optstring import SLOT_COUNT, slot_index, build_optstring, parse_int
from .scanner import scan, default_permute
from .signature import parse_signature


log = logging.getLogger(__name__)


class Phase(enum.Enum):
    RESET = 'reset'
    DECLARING = 'declaring'
    PARSED = 'parsed'


class Registry:
    """One round of option declarations followed by a single parse.

    Not thread-safe: a registry must only be used from one thread at a time.
    """

    def __init__(self, permute: bool | None = None):
        self.permute = permute
        self.reset()

    def reset(self) -> None:
        # Caller vars are left alone, including strings handed out by a previous parse.
        self._slots: list[Declaration | None] = [None] * SLOT_COUNT
        self.count = 0
        self.rest: list[str] = []
        self.phase = Phase.RESET
        log.debug("registry reset")

    def __len__(self):
        return self.count

    def __contains__(self, letter: str) -> bool:
        try:
            return self._slots[slot_index(letter)] is not None
        except OptLetterError:
            return False

    def __getitem__(self, letter: str) -> Declaration:
        if (decl := self._slots[slot_index(letter)]) is None:
            raise KeyError(letter)
        return decl

    @property
    def declarations(self) -> list[Declaration]:
        return [d for d in self._slots if d is not None]

    @property
    def optstring(self) -> str:
        return build_optstring(self._slots)

    # Declaration ─────────────────────────────────────────────────────────────────────────────
    def declare(self, letter: str, kind: Kind | str, target: Var | None = None,
                present: FlagVar | None = None) -> Declaration:
        if self.phase is Phase.PARSED:
            raise OptConfigError(f"cannot declare -- '{letter}' after parse; call reset() first",
                                 option=letter, rule='phase')

        index = slot_index(letter)
        if self._slots[index] is not None:
            raise OptDuplicateError(f"duplicate declaration -- '{letter}'", option=letter, rule='duplicate')
        if (resolved := Kind.lookup(kind)) is None:
            raise OptConfigError(f"unknown kind {kind!r} for option -- '{letter}'", option=letter, rule='kind')
        if target is None:
            target = resolved.var_type()
        elif not isinstance(target, resolved.var_type):
            raise OptConfigError(f"option -- '{letter}' of kind {resolved.value} needs a {resolved.var_type.__name__}, "
                                 f"got {type(target).__name__}", option=letter, rule='target')
        if present is not None and not isinstance(present, FlagVar):
            raise OptConfigError(f"presence indicator for -- '{letter}' must be a FlagVar, got {type(present).__name__}",
                                 option=letter, rule='present')

        decl = Declaration(letter, resolved, target, present)
        self._slots[index] = decl
        self.count += 1
        self.phase = Phase.DECLARING
        log.debug("declared -%s as %s", letter, resolved.value)
        return decl

    def _declare_option(self, letter: str, kind: Kind) -> Option:
        return Option(self.declare(letter, kind, kind.var_type(), FlagVar()))

    def flag(self, letter: str) -> Option:
        return self._declare_option(letter, Kind.FLAG)

    def integer(self, letter: str) -> Option:
        return self._declare_option(letter, Kind.INT)

    def string(self, letter: str) -> Option:
        return self._declare_option(letter, Kind.STR)

    def declare_signature(self, text: str) -> dict[str, Option]:
        """Declare every option in a signature such as `"v=verbose t:int=ttl i:str=input"`, keyed by name.

        Either all the options are declared or, on error, none of them are.
        """
        if self.phase is Phase.PARSED:
            raise OptConfigError("cannot declare after parse; call reset() first", rule='phase')
        entries = parse_signature(text)
        for letter, _, _ in entries:
            if letter in self:
                raise OptDuplicateError(f"duplicate declaration -- '{letter}'", option=letter, rule='duplicate')
        return {name: self._declare_option(letter, kind) for letter, kind, name in entries}

    # Parsing ─────────────────────────────────────────────────────────────────────────────────
    def parse(self, args: list[str] | None = None, *, permute: bool | None = None) -> list[str]:
        """Scan `args` (default `sys.argv[1:]`), write each recognised option into its var, and return the positionals left over."""
        if self.phase is Phase.PARSED:
            raise OptConfigError("options were already parsed; call reset() first", rule='phase')

        if permute is None:
            permute = default_permute() if self.permute is None else self.permute
        args = sys.argv[1:] if args is None else args
        options, rest = scan(args, self.optstring, permute=permute)

        for letter, text in options:
            self._store(self._slots[slot_index(letter)], text)

        self.rest = rest
        self.phase = Phase.PARSED
        log.debug("parsed %d options, %d positional arguments remain", len(options), len(rest))
        return rest

    def _store(self, decl: Declaration, text: str) -> None:
        match decl.kind:
            case Kind.FLAG:
                decl.target.value = True
            case Kind.INT:
                decl.target.value = parse_int(text)
            case Kind.STR:
                try:
                    decl.target.value = str(text)
                except MemoryError as exc:
                    raise OptAllocationError(f"out of memory storing value for -- '{decl.letter}'",
                                             option=decl.letter, rule='allocation') from exc
        if decl.present is not None:
            decl.present.value = True
