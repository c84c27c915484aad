from malt import Ast, LispValue, SpecialFormFn
from malt.errors import MaltArityError, MaltTypeError
from malt.types.environment import Environment
from malt.types.symbol import Symbol


def def_form(
    tail: list[Ast],
    env: Environment,
    evaluate_fn: SpecialFormFn,
) -> LispValue:
    """
    (def! name value)
    Binds in the current frame, not a child, so later code sharing the frame
    (closures included) sees the binding. The value of the form is the bound value.
    """
    if len(tail) != 2:
        raise MaltArityError("def! requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MaltTypeError(f"def! expects a symbol name, got {name}")
    value = evaluate_fn(val_expr, env)
    return env.define(name, value)
