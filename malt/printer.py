"""Canonical text form of malt values.

Output of `pr_str` reads back to an equal form for every value the reader can
produce, so print/read/eval cycles are stable.
"""

from __future__ import annotations

from decimal import Decimal
from io import StringIO

from malt import Ast
from malt.types.ast import AstList
from malt.types.function import Function
from malt.types.symbol import Symbol


def format_float(x: float) -> str:
    """Shortest round-tripping decimal for `x`, never in exponent notation."""
    text = format(Decimal(repr(x)), "f")
    if "." not in text:
        text += ".0"
    return text


def _write(ast: Ast, buffer: StringIO) -> None:
    if isinstance(ast, AstList):
        buffer.write(ast.list_type.open)
        for i, item in enumerate(ast):
            if i:
                buffer.write(" ")
            _write(item, buffer)
        buffer.write(ast.list_type.close)
    elif isinstance(ast, str):
        # Escapes were kept verbatim by the lexer
        buffer.write(f'"{ast}"')
    elif isinstance(ast, float):
        buffer.write(format_float(ast))
    elif isinstance(ast, (Symbol, int, Function)):
        buffer.write(str(ast))
    else:
        buffer.write(repr(ast))


def pr_str(ast: Ast) -> str:
    with StringIO() as buffer:
        _write(ast, buffer)
        return buffer.getvalue()
