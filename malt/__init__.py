# Core type aliases for the malt data model.
# Forms are plain Python values: Symbol, int, float, str and Function leaves,
# plus AstList for the three delimiter kinds. No explicit Cons type is defined.
#
# Naming guidance:
# - Ast:       use in reader/parser/macro code to denote syntactic forms.
# - LispValue: use in evaluator/runtime code to denote reduced values.
# Both resolve to `Any`; the evaluator reduces an Ast to another Ast.

from typing import Any, Callable

Ast = Any
LispValue = Ast

# Special-form handler: (operands, env, evaluate_fn) -> value
SpecialFormFn = Callable[..., LispValue]
