"""Core evaluator for the malt interpreter.

Strict, eager, depth-first reduction. Evaluation never mutates its input:
each node reduces to a new value, so a failure part-way through leaves the
original tree intact and no partially reduced result escapes.
"""

from __future__ import annotations

import logging

from malt import Ast, LispValue
from malt.errors import MaltTypeError
from malt.evaluation.apply import apply
from malt.evaluation.special_forms import SPECIAL_FORMS
from malt.types.ast import AstList, ListType
from malt.types.environment import Environment
from malt.types.function import Function
from malt.types.symbol import Symbol

logger = logging.getLogger(__name__)


def evaluate_operands(forms, env: Environment) -> list[LispValue]:
    return [evaluate(f, env) for f in forms]


def evaluate(expr: Ast, env: Environment) -> LispValue:
    """Reduce `expr` under `env`."""
    match expr:
        case Symbol():
            return env.search(expr)

        case AstList() if expr.list_type is not ListType.PAREN:
            # Literal aggregates and binding lists: evaluate in place of each element
            return AstList(expr.list_type, evaluate_operands(expr, env))

        case AstList() if not expr:
            return AstList.parens()

        case AstList():
            head, *tail = expr
            if isinstance(head, Symbol):
                if head in SPECIAL_FORMS:
                    logger.debug("special form %s", head)
                    return SPECIAL_FORMS[head](tail, env, evaluate)
                fn = env.search(head)
                if not isinstance(fn, Function):
                    raise MaltTypeError(f"not a function: {head}")
                return apply(fn, evaluate_operands(tail, env))
            if isinstance(head, Function):
                return apply(head, evaluate_operands(tail, env))
            raise MaltTypeError(f"not a function: {head}")

    # --- Atoms return as-is ---
    return expr
