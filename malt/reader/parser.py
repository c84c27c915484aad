"""
  Lisp Reader and Parser

Turns the lexer's flat token list into forms:

    - symbols          -> Symbol
    - strings          -> str
    - numbers          -> int/float
    - ( ) [ ] { }      -> AstList tagged with its ListType

The parser keeps a stack of open list kinds next to a stack of partially
built parent sequences. Reader macros run over each list's items as it
closes, and once more over the top level, so nested forms are expanded
before any enclosing window is examined.
"""

from __future__ import annotations

import logging
from typing import Iterable

from malt import Ast
from malt.errors import LexerError, ReaderEOFError, UnbalancedError
from malt.reader.lexer import Token, TokenKind, tokenize
from malt.reader.reader_macros import reader_macros
from malt.types.ast import AstList, ListType
from malt.types.symbol import Symbol

logger = logging.getLogger(__name__)

OPENERS: dict[TokenKind, ListType] = {
    TokenKind.LEFT_PAREN: ListType.PAREN,
    TokenKind.LEFT_BRACKET: ListType.BRACKET,
    TokenKind.LEFT_BRACE: ListType.BRACE,
}

CLOSERS: dict[TokenKind, ListType] = {
    TokenKind.RIGHT_PAREN: ListType.PAREN,
    TokenKind.RIGHT_BRACKET: ListType.BRACKET,
    TokenKind.RIGHT_BRACE: ListType.BRACE,
}


def _leaf(token: Token) -> Ast:
    if token.kind is TokenKind.SYMBOL:
        return Symbol(token.value)
    # Int, Float and String tokens already carry their Python value
    return token.value


def parse(tokens: Iterable[Token]) -> list[Ast]:
    """Parse tokens into the list of top-level forms.

    Raises UnbalancedError on a mismatched closing delimiter, a closing
    delimiter with nothing open, or lists left open at the end of input.
    """
    open_kinds: list[ListType] = []
    parents: list[list[Ast]] = []
    current: list[Ast] = []

    for token in tokens:
        if token.kind in OPENERS:
            open_kinds.append(OPENERS[token.kind])
            parents.append(current)
            current = []
        elif token.kind in CLOSERS:
            if not open_kinds:
                raise UnbalancedError(f"unexpected '{token.value}'")
            list_type = open_kinds.pop()
            if CLOSERS[token.kind] is not list_type:
                raise UnbalancedError(
                    f"expected '{list_type.close}', got '{token.value}'"
                )
            items = reader_macros.expand(current)
            current = parents.pop()
            current.append(AstList(list_type, items))
        else:
            current.append(_leaf(token))

    if open_kinds:
        raise UnbalancedError(f"unclosed '{open_kinds[-1].open}'")
    return reader_macros.expand(current)


def read_all(source: str) -> list[Ast]:
    """Lex, parse and macro-expand `source`, returning every top-level form."""
    try:
        tokens = tokenize(source)
    except LexerError as e:
        raise ReaderEOFError(e) from e
    forms = parse(tokens)
    logger.debug("read %d top-level form(s)", len(forms))
    return forms


def read(source: str) -> Ast:
    """Read `source` and return its last top-level form.

    Empty input yields the empty symbol.
    """
    forms = read_all(source)
    if not forms:
        return Symbol("")
    return forms[-1]
