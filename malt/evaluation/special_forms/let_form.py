import logging

from malt import Ast, LispValue, SpecialFormFn
from malt.errors import MaltArityError, MaltTypeError
from malt.evaluation.special_forms.do_form import do_form
from malt.types.ast import AstList
from malt.types.environment import Environment
from malt.types.symbol import Symbol

logger = logging.getLogger(__name__)


def let_form(
    tail: list[Ast],
    env: Environment,
    evaluate_fn: SpecialFormFn,
) -> LispValue:
    """
    (let* (name1 expr1 name2 expr2 ...) body)
    Bindings go into one child frame, left to right, each expression evaluated
    under the frame built so far, so later pairs see earlier names.
    """
    if len(tail) < 2:
        raise MaltArityError("let* requires a binding list and a body")

    bindings, *body = tail
    if not isinstance(bindings, AstList):
        raise MaltTypeError(f"let* bindings must be a list, got {bindings}")
    if len(bindings) % 2:
        raise MaltTypeError("let* bindings must come in name/value pairs")

    inner = Environment(outer=env)
    logger.debug("let* frame at depth %d", inner.depth())
    for name, expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise MaltTypeError(f"let* binding name must be a symbol, got {name}")
        inner.define(name, evaluate_fn(expr, inner))

    return do_form(body, inner, evaluate_fn)
