"""Syntax tree nodes for malt.

Leaves are plain Python values (Symbol, int, float, str, Function). Lists are
`AstList`, a `list` subclass that remembers which delimiter pair opened it, so
`(1 2)`, `[1 2]` and `{1 2}` stay distinct after reading and evaluation.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from malt import Ast


class ListType(Enum):
    PAREN = ("(", ")")
    BRACKET = ("[", "]")
    BRACE = ("{", "}")

    @property
    def open(self) -> str:
        return self.value[0]

    @property
    def close(self) -> str:
        return self.value[1]

    def __str__(self) -> str:
        return self.name.capitalize()


class AstList(list):
    """An ordered sequence of forms tagged with its delimiter kind."""

    __slots__ = ("list_type",)

    def __init__(self, list_type: ListType = ListType.PAREN, items: Iterable[Ast] = ()):
        super().__init__(items)
        self.list_type: ListType = list_type

    @classmethod
    def parens(cls, items: Iterable[Ast] = ()) -> AstList:
        return cls(ListType.PAREN, items)

    @classmethod
    def brackets(cls, items: Iterable[Ast] = ()) -> AstList:
        return cls(ListType.BRACKET, items)

    @classmethod
    def braces(cls, items: Iterable[Ast] = ()) -> AstList:
        return cls(ListType.BRACE, items)

    def is_call(self) -> bool:
        return self.list_type is ListType.PAREN and len(self) > 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AstList):
            return self.list_type is other.list_type and list.__eq__(self, other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"AstList({self.list_type.name}, {list.__repr__(self)})"
