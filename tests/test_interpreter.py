import io
import logging

import pytest

from sprig.errors import TypeMismatch, UnboundName
from sprig.interpreter import Interpreter
from sprig.types.symbol import Symbol
from sprig.types.unit import Unit

S = Symbol

PROGRAM = [
    [S("define"), [S("math"), S("a"), S("b"), S("c"), S("d")],
        [S("+"), S("a"), [S("-"), S("b"), S("c")], S("d")]],
    [S("math"), 1, 2, 3, [S("math"), 1, 2, 3, 4]],
    [S("if"), [S(">"), 4, [S("math"), 1, 2, 3, 4]],
        [S("add"), 1, 2],
        [S("println"), 3]],
    [S("cond"),
        [S("="), 1, 2], [S("this"), S("wont"), S("run")],
        [S("="), 1, 2], [S("this"), S("will"), S("run")],
        S(":else"), [S("println"), 1]],
]


def test_sample_program(interp, out):
    outcomes = interp.run(PROGRAM)
    assert all(o.ok for o in outcomes)
    assert [o.value for o in outcomes] == [Unit, 4, Unit, Unit]
    assert out.getvalue() == "3\n1\n"


def test_run_halts_on_first_error(interp, out, caplog):
    forms = [[S("println"), 1], [S("add"), 1, 2], [S("println"), 2]]
    with caplog.at_level(logging.ERROR, logger="sprig.interpreter"):
        outcomes = interp.run(forms, halt_on_error=True)
    assert len(outcomes) == 2
    assert isinstance(outcomes[1].error, UnboundName)
    assert not outcomes[1].ok
    assert out.getvalue() == "1\n"
    assert "UnboundName" in caplog.text


def test_run_continues_after_error(interp, out, caplog):
    forms = [[S("+"), 1, [S("println"), 0]], [S("println"), 2], "not a form", 5]
    with caplog.at_level(logging.WARNING, logger="sprig.interpreter"):
        outcomes = interp.run(forms, halt_on_error=False)
    assert len(outcomes) == 4
    assert isinstance(outcomes[0].error, TypeMismatch)
    assert outcomes[1].value is Unit
    assert not outcomes[2].ok
    assert outcomes[3].value == 5
    assert out.getvalue() == "0\n2\n"
    assert caplog.text.count("continuing after") == 2


def test_class_default_for_halt_on_error(monkeypatch):
    monkeypatch.setattr(Interpreter, "DefaultHaltOnError", False)
    outcomes = Interpreter(output=io.StringIO()).run([S("nope"), 1])
    assert [o.ok for o in outcomes] == [False, True]


def test_halt_on_error_from_environment(monkeypatch):
    monkeypatch.setenv("SPRIG_HALT_ON_ERROR", "no")
    outcomes = Interpreter(output=io.StringIO()).run([S("nope"), 1])
    assert len(outcomes) == 2


def test_eval_propagates_errors(interp):
    with pytest.raises(UnboundName):
        interp.eval(S("nope"))


def test_definitions_persist_between_forms(interp):
    interp.eval([S("define"), [S("one")], 1])
    assert interp.eval([S("one")]) == 1


def test_interpreters_are_isolated():
    first, second = Interpreter(), Interpreter()
    first.eval([S("define"), [S("one")], 1])
    with pytest.raises(UnboundName):
        second.lookup("one")


def test_trace_logs_each_node(out, caplog):
    interp = Interpreter(output=out, trace=True)
    with caplog.at_level(logging.DEBUG, logger="sprig.evaluation.evaluator"):
        interp.eval([S("+"), 1, 2])
    messages = [r.getMessage() for r in caplog.records if r.name == "sprig.evaluation.evaluator"]
    assert messages == ["eval [frame 0] (+ 1 2)", "eval [frame 0] +", "eval [frame 0] 1", "eval [frame 0] 2"]


def test_no_trace_by_default(out, caplog):
    interp = Interpreter(output=out, trace=False)
    with caplog.at_level(logging.DEBUG, logger="sprig.evaluation.evaluator"):
        interp.eval([S("+"), 1, 2])
    assert not [r for r in caplog.records if r.name == "sprig.evaluation.evaluator"]


def test_lookup_builtins_and_constants(interp):
    assert interp.lookup("true") == 1
    assert interp.lookup(S("false")) == 0
    with pytest.raises(UnboundName):
        interp.lookup("add")


def test_deep_recursion_is_fatal(interp):
    interp.eval([S("define"), [S("forever"), S("n")], [S("forever"), [S("+"), S("n"), 1]]])
    with pytest.raises(RecursionError):
        interp.run([[S("forever"), 0]], halt_on_error=False)
