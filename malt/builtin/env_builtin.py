"""Built-in functions for the malt runtime environment.

Arithmetic is binary and always produces a finite float: integer operands
are coerced first, anything else is a type error.
"""
from __future__ import annotations

import math
import operator
from typing import Callable, Sequence

from malt import LispValue
from malt.errors import EvalError, MaltArityError, MaltTypeError
from malt.types.environment import Environment
from malt.types.function import Function
from malt.types.symbol import Symbol


def to_float(value: LispValue) -> float:
    """Coerce an int or float leaf to float."""
    # bool is an int subclass but is not a malt number
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MaltTypeError(f"cannot convert to float: {value}")
    try:
        return float(value)
    except OverflowError:
        raise MaltTypeError(f"cannot convert to float: {value}") from None


def _binary(name: str, op: Callable[[float, float], float]) -> Function:
    def fn(args: Sequence[LispValue]) -> float:
        if len(args) != 2:
            raise MaltArityError(f"{name} requires exactly 2 arguments, got {len(args)}")
        a, b = (to_float(x) for x in args)
        result = op(a, b)
        if not math.isfinite(result):
            raise EvalError("float overflow")
        return result

    fn.__name__ = name
    return Function(fn, name)


def div(a: float, b: float) -> float:
    if b == 0.0:
        raise EvalError("division by zero")
    return a / b


BUILTINS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": div,
}


def register(env: Environment) -> Environment:
    """Bind every builtin into `env` and return it."""
    for name, op in BUILTINS.items():
        env.define(Symbol(name), _binary(name, op))
    return env
