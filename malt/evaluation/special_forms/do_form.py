from malt import Ast, LispValue, SpecialFormFn
from malt.types.ast import AstList
from malt.types.environment import Environment


def do_form(
    tail: list[Ast],
    env: Environment,
    evaluate_fn: SpecialFormFn,
) -> LispValue:
    result: LispValue = AstList.parens()
    for e in tail:
        result = evaluate_fn(e, env)
    return result
