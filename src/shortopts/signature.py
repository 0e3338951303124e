## shortopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import functools

import lark
from .types import Kind
from .errors import OptSignatureError, OptDuplicateError
from .optstring import slot_index


GRAMMAR = r"""?start: signature
signature: (declaration ","?)*
declaration: LETTER (":" KIND)? ("=" NAME)?

LETTER: /[^\s,:=]/
KIND: /[A-Za-z]+/
NAME: /[A-Za-z_][A-Za-z0-9_]*/

%import common.WS
%ignore WS
"""


@functools.cache
def _parser() -> lark.Lark:
    return lark.Lark(GRAMMAR, start='start', parser="lalr", lexer="contextual", propagate_positions=True)


def parse_signature(text: str) -> list[tuple[str, Kind, str]]:
    """Parse `"v=verbose t:int=ttl i:str"` into `(letter, kind, name)` triples; names default to the letter."""
    try:
        tree = _parser().parse(text)
    except lark.exceptions.UnexpectedInput as exc:
        token = getattr(exc, 'token', None) or getattr(exc, 'char', None) or ''
        raise OptSignatureError(f"malformed signature {text!r} at column {exc.column}: {str(token)!r}",
                                column=exc.column, token=str(token)) from None

    entries, letters, names = [], set(), set()
    for decl in tree.iter_subtrees_topdown():
        if decl.data != 'declaration': continue
        tokens = {tok.type: tok for tok in decl.children}

        letter = tokens['LETTER'].value
        slot_index(letter)
        if letter in letters:
            raise OptDuplicateError(f"duplicate declaration -- '{letter}'", option=letter, rule='duplicate')

        kind_token = tokens.get('KIND')
        kind = Kind.lookup(kind_token.value if kind_token else '')
        if kind is None:
            raise OptSignatureError(f"unknown kind '{kind_token.value}' for option -- '{letter}'",
                                    option=letter, rule='kind', column=kind_token.column, token=kind_token.value)

        name_token = tokens.get('NAME', tokens['LETTER'])
        name = name_token.value
        # Each name also claims `has_<name>` for its presence indicator in shell output.
        if name in names or f"has_{name}" in names:
            raise OptSignatureError(f"name '{name}' for option -- '{letter}' clashes with an earlier name or its has_ variable",
                                    option=letter, rule='name', column=name_token.column, token=name)

        letters.add(letter); names.update((name, f"has_{name}"))
        entries.append((letter, kind, name))
    return entries
