"""First-class function values for malt."""

from __future__ import annotations

from typing import Callable, Sequence

from malt import LispValue

FunctionImpl = Callable[[Sequence[LispValue]], LispValue]


class Function:
    """A callable leaf: takes an evaluated argument sequence, returns a value.

    Copies of a Function share the same underlying callable, and equality is
    identity of that callable, never behaviour.
    """

    __slots__ = ("fn", "name")

    def __init__(self, fn: FunctionImpl, name: str | None = None):
        self.fn: FunctionImpl = fn
        self.name: str = name or getattr(fn, "__name__", "anonymous")

    def __call__(self, args: Sequence[LispValue]) -> LispValue:
        return self.fn(args)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Function) and self.fn is other.fn

    def __hash__(self) -> int:
        return id(self.fn)

    def __str__(self) -> str:
        return f"#<function {self.name}>"

    def __repr__(self) -> str:
        return f"Function({self.name!r})"
