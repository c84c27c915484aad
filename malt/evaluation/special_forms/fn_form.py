"""(fn* params body...) -- closures over the defining environment."""

from __future__ import annotations

import logging
from typing import Sequence

from malt import Ast, LispValue, SpecialFormFn
from malt.errors import MaltArityError, MaltTypeError
from malt.evaluation.special_forms.do_form import do_form
from malt.types.ast import AstList
from malt.types.environment import Environment
from malt.types.function import Function
from malt.types.symbol import Symbol

logger = logging.getLogger(__name__)

REST = Symbol("&")


def _parse_params(params: Ast) -> tuple[list[Symbol], Symbol | None]:
    if not isinstance(params, AstList):
        raise MaltTypeError(f"fn* parameters must be a list, got {params}")
    for p in params:
        if not isinstance(p, Symbol):
            raise MaltTypeError(f"fn* parameter must be a symbol, got {p}")
    if REST not in params:
        return list(params), None
    i = params.index(REST)
    if i != len(params) - 2:
        raise MaltTypeError("fn* '&' must be followed by exactly one parameter")
    return list(params[:i]), params[i + 1]


def bind_arguments(
    formals: list[Symbol],
    rest: Symbol | None,
    args: Sequence[LispValue],
    outer: Environment,
) -> Environment:
    """Return a child frame of `outer` with `args` bound to the formals."""
    if len(args) < len(formals) or (rest is None and len(args) > len(formals)):
        expected = f"{len(formals)}+" if rest is not None else str(len(formals))
        raise MaltArityError(f"expected {expected} arguments, got {len(args)}")
    env = Environment(outer=outer)
    for name, value in zip(formals, args):
        env.define(name, value)
    if rest is not None:
        env.define(rest, AstList.brackets(args[len(formals):]))
    return env


def fn_form(
    tail: list[Ast],
    env: Environment,
    evaluate_fn: SpecialFormFn,
) -> LispValue:
    if not tail:
        raise MaltArityError("fn* requires at least a parameter list")

    formals, rest = _parse_params(tail[0])
    body = tail[1:]

    # The closure holds `env` itself; later def! in that frame stays visible.
    def closure(args: Sequence[LispValue]) -> LispValue:
        return do_form(body, bind_arguments(formals, rest, args, env), evaluate_fn)

    logger.debug(
        "closure created: params=(%s), body_forms=%d, def_env=%#x",
        " ".join(map(str, formals)), len(body), id(env),
    )
    return Function(closure, name="fn*")
