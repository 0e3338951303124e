## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import enum
from typing import Any
from dataclasses import dataclass


class Var:
    """Caller-held destination that the registry writes parsed values into."""
    __slots__ = ('value',)
    initial: Any = None

    def __init__(self, value=None):
        self.value = self.initial if value is None else value

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"


class FlagVar(Var):
    __slots__ = ()
    initial = False

class IntVar(Var):
    __slots__ = ()
    initial = 0

class StrVar(Var):
    __slots__ = ()
    initial = None


class Kind(enum.Enum):
    FLAG = 'flag'
    INT = 'int'
    STR = 'str'

    @property
    def takes_value(self) -> bool:
        return self is not Kind.FLAG

    @property
    def var_type(self) -> type[Var]:
        return {Kind.FLAG: FlagVar, Kind.INT: IntVar, Kind.STR: StrVar}[self]

    @classmethod
    def lookup(cls, name: 'Kind | str') -> 'Kind | None':
        if isinstance(name, Kind): return name
        return KIND_NAME_MAP.get(str(name).lower())


KIND_NAME_MAP: dict[str, Kind] = {
    'flag': Kind.FLAG, 'bool': Kind.FLAG, 'boolean': Kind.FLAG, '': Kind.FLAG,
    'int': Kind.INT, 'integer': Kind.INT,
    'str': Kind.STR, 'string': Kind.STR, 'text': Kind.STR,
}


@dataclass(frozen=True)
class Declaration:
    letter: str
    kind: Kind
    target: Var
    present: FlagVar | None = None


class Option:
    """Handle returned by the `flag`, `integer` and `string` helpers: one value var plus its presence var."""

    def __init__(self, declaration: Declaration):
        self.declaration = declaration

    letter = property(lambda self: self.declaration.letter)
    kind = property(lambda self: self.declaration.kind)
    value = property(lambda self: self.declaration.target.value)
    present = property(lambda self: self.declaration.present.value)

    def __repr__(self):
        return f"<Option -{self.letter} {self.kind.value}={self.value!r} present={self.present}>"
