"""Symbol leaves of the malt AST."""

from __future__ import annotations

import sys


class Symbol:
    """A named identifier; two symbols are equal when their names are."""

    __slots__ = ("name",)

    def __init__(self, name: str):
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Symbol):
            return NotImplemented
        return self.name is other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"<Symbol {self.name}>"

    def __str__(self) -> str:
        return self.name
