import logging

import pytest

from malt import config
from malt.errors import ReaderEOFError, UnbalancedError, UnboundSymbolError
from malt.interpreter import Interpreter, main


def test_rep(interp):
    assert interp.rep("(+ 1 2)") == "3.0"
    assert interp.rep('"str"') == '"str"'
    assert interp.rep("[1 (* 2 2)]") == "[1 4.0]"


def test_rep_evaluates_only_last_form(interp):
    assert interp.rep("(def! a 1) (+ 2 3)") == "5.0"
    with pytest.raises(UnboundSymbolError):
        interp.rep("a")


def test_definitions_persist_between_calls(interp):
    interp.rep("(def! x 5)")
    assert interp.rep("x") == "5"
    interp.rep("(def! inc (fn* (n) (+ n 1)))")
    assert interp.rep("(inc x)") == "6.0"


def test_prelude_evaluates_every_form():
    interp = Interpreter(prelude="(def! a 1) (def! b (+ a 1))")
    assert interp.rep("b") == "2.0"


def test_load_file(tmp_path, interp):
    src = tmp_path / "prelude.malt"
    src.write_text("; helpers\n(def! sq (fn* (x) (* x x)))\n", encoding="utf-8")
    interp.load_file(src)
    assert interp.rep("(sq 3)") == "9.0"


def test_reader_errors_propagate(interp):
    with pytest.raises(UnbalancedError):
        interp.rep("(1 2]")
    with pytest.raises(ReaderEOFError):
        interp.rep("1337.")


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_main_loop_prints_results_and_errors(monkeypatch, capsys):
    monkeypatch.delenv("MALT_PRELUDE", raising=False)
    _feed(monkeypatch, ["(def! x 2)", "", "(* x 3)", "nope", "(1 2]"])
    main()
    out = capsys.readouterr().out.splitlines()
    assert out == ["2", "6.0", "'nope' not found", "unbalanced parens: expected ')', got ']'", ""]


def test_main_loads_prelude(monkeypatch, capsys, tmp_path):
    src = tmp_path / "init.malt"
    src.write_text("(def! greeting \"hi\")", encoding="utf-8")
    monkeypatch.setenv("MALT_PRELUDE", str(src))
    _feed(monkeypatch, ["greeting"])
    main()
    assert capsys.readouterr().out.splitlines()[0] == '"hi"'


# -----------------------------------------------------
# Config
# -----------------------------------------------------

def test_prompt_default_and_override(monkeypatch):
    monkeypatch.delenv("MALT_PROMPT", raising=False)
    assert config.get_prompt() == "user> "
    monkeypatch.setenv("MALT_PROMPT", "malt> ")
    assert config.get_prompt() == "malt> "


@pytest.mark.parametrize(
    "raw,level",
    [("debug", logging.DEBUG), ("INFO", logging.INFO), ("bogus", logging.WARNING)],
)
def test_log_level(monkeypatch, raw, level):
    monkeypatch.setenv("MALT_LOG_LEVEL", raw)
    assert config.get_log_level() == level


def test_prelude_path(monkeypatch, tmp_path):
    monkeypatch.delenv("MALT_PRELUDE", raising=False)
    assert config.get_prelude_path() is None
    monkeypatch.setenv("MALT_PRELUDE", f"  {tmp_path}  ")
    assert config.get_prelude_path() == tmp_path


def test_main_reports_missing_prelude_and_keeps_going(monkeypatch, capsys, tmp_path):
    missing = tmp_path / "absent.malt"
    monkeypatch.setenv("MALT_PRELUDE", str(missing))
    _feed(monkeypatch, ["(+ 1 2)"])
    main()
    out = capsys.readouterr().out.splitlines()
    assert out[0].startswith(f"prelude {missing}: ")
    assert out[1] == "3.0"


def test_main_reports_failing_prelude_and_keeps_going(monkeypatch, capsys, tmp_path):
    src = tmp_path / "init.malt"
    src.write_text("(def! a 1) (def! b nope)", encoding="utf-8")
    monkeypatch.setenv("MALT_PRELUDE", str(src))
    _feed(monkeypatch, ["a"])
    main()
    out = capsys.readouterr().out.splitlines()
    assert out[0] == f"prelude {src}: 'nope' not found"
    assert out[1] == "1"
