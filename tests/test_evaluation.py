import pytest

from malt.errors import EvalError, MaltTypeError, UnboundSymbolError
from malt.evaluation.evaluator import evaluate
from malt.reader.parser import read
from malt.types.ast import AstList
from malt.types.environment import Environment
from malt.types.function import Function
from malt.types.symbol import Symbol


def run(source, env):
    return evaluate(read(source), env)


# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

def test_self_evaluating_literals(env):
    assert evaluate(1, env) == 1
    assert evaluate(3.14, env) == 3.14
    assert evaluate("hello", env) == "hello"
    fn = env.search(Symbol("+"))
    assert evaluate(fn, env) is fn


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42)
    assert evaluate(Symbol("x"), env) == 42


def test_unbound_symbol_names_the_symbol(env):
    with pytest.raises(UnboundSymbolError) as exc:
        run("zork", env)
    assert exc.value.symbol == Symbol("zork")
    assert str(exc.value) == "'zork' not found"
    assert isinstance(exc.value, EvalError)


def test_empty_input_is_unbound_empty_symbol(env):
    with pytest.raises(UnboundSymbolError, match="'' not found"):
        run("", env)


# -----------------------------------------------------
# Lists
# -----------------------------------------------------

def test_empty_paren_list_evaluates_to_itself(env):
    assert run("()", env) == AstList.parens()


@pytest.mark.parametrize(
    "source,expected",
    [
        ("[1 (+ 1 1) 3]", AstList.brackets([1, 2.0, 3])),
        ("{a (* 2 3)}", AstList.braces([5, 6.0])),
        ("[]", AstList.brackets()),
        ("[[1] {(- 3 1)}]", AstList.brackets([AstList.brackets([1]), AstList.braces([2.0])])),
    ],
)
def test_aggregates_evaluate_elements(env, source, expected):
    env.define(Symbol("a"), 5)
    assert run(source, env) == expected


def test_evaluation_does_not_mutate_input(env):
    form = read("(+ 1 (* 2 3))")
    before = repr(form)
    assert evaluate(form, env) == 7.0
    assert repr(form) == before


def test_failed_evaluation_leaves_input_intact(env):
    form = read("[(+ 1 2) missing]")
    with pytest.raises(UnboundSymbolError):
        evaluate(form, env)
    assert form == AstList.brackets([AstList.parens([Symbol("+"), 1, 2]), Symbol("missing")])


# -----------------------------------------------------
# Application
# -----------------------------------------------------

def test_simple_call(env):
    assert run("(+ 1 2)", env) == 3.0


def test_nested_call(env):
    assert run("(+ (* 2 3) (- 10 4))", env) == 12.0


def test_call_with_prebuilt_function_head(env):
    fn = Function(lambda args: sum(args), "sum")
    form = AstList.parens([fn, 1, 2, 3])
    assert evaluate(form, env) == 6


def test_non_function_operator(env):
    env.define(Symbol("x"), 5)
    with pytest.raises(MaltTypeError, match="not a function"):
        run("(x 1 2)", env)


@pytest.mark.parametrize("source", ["(1 2)", '("f" 1)', "((+ 1 2) 3)", "([+] 1 2)"])
def test_other_operator_shapes_fail(env, source):
    with pytest.raises(EvalError):
        run(source, env)


def test_unbound_operator(env):
    with pytest.raises(UnboundSymbolError, match="'nope' not found"):
        run("(nope 1)", env)


def test_operands_evaluated_left_to_right(env):
    seen = []

    def record(args):
        seen.append(args[0])
        return args[0]

    env.define(Symbol("rec"), Function(record, "rec"))
    run("[(rec 1) (rec 2) (rec 3)]", env)
    assert seen == [1, 2, 3]


def test_first_failure_aborts(env):
    seen = []
    env.define(Symbol("rec"), Function(lambda args: seen.append(args[0]) or args[0], "rec"))
    with pytest.raises(UnboundSymbolError):
        run("[(rec 1) boom (rec 3)]", env)
    assert seen == [1]


def test_quote_forms_are_not_special(env):
    # quote is only desugared by the reader; evaluating it looks up a function
    with pytest.raises(UnboundSymbolError, match="'quote' not found"):
        run("' x", env)


def test_nested_environment_lookup():
    outer = Environment()
    outer.define(Symbol("x"), 1)
    inner = Environment(outer=outer)
    assert evaluate(Symbol("x"), inner) == 1
