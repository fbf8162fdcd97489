import pytest

from faye.evaluation.context import Context
from faye.interpreter import Interpreter
from faye.types.errors import (
    ParserLexerError,
    RecursionDepthExceeded,
    UnclosedBracket,
    UnknownSymbol,
)
from faye.types.nil import Nil
from faye.types.symbol import Symbol


@pytest.fixture
def interp():
    return Interpreter()


def test_run_continues_after_failing_form(interp):
    results = interp.run("(const a 1) (undefined) (+ a 1)")
    assert [r.ok for r in results] == [True, False, True]
    assert results[0].value is Nil
    assert isinstance(results[1].error, UnknownSymbol)
    assert results[1].value is None
    assert results[2].value == 2
    assert results[2].node.span.text == "(+ a 1)"


def test_parse_error_aborts_before_evaluation(interp):
    with pytest.raises(UnclosedBracket):
        interp.run("(const a 1) (+ a")
    assert Symbol("a") not in interp.globals()


def test_eval_returns_last_value(interp):
    assert interp.eval("(const a 2) (* a 21)") == 42
    assert interp.eval("") is Nil


def test_eval_stops_at_first_error(interp):
    with pytest.raises(UnknownSymbol):
        interp.eval("(const a 1) (undefined) (const b 2)")
    assert Symbol("a") in interp.globals()
    assert Symbol("b") not in interp.globals()


def test_state_persists_between_calls(interp):
    interp.run("(fn square (x) (* x x))")
    assert interp.eval("(square 9)") == 81


def test_shared_context():
    ctx = Context()
    Interpreter(ctx).eval("(const shared 1)")
    assert Interpreter(ctx).eval("shared") == 1


def test_source_name_reaches_errors(interp):
    [result] = interp.run("(+ 1 x)", "main.fy")
    assert result.error.span.source.name == "main.fy"


@pytest.mark.parametrize(
    "code,expected",
    [
        ("(+ 1", True),
        ("(fn f (x)\n  (+ x", True),
        ("[1 2", True),
        ("(+ 1)", False),
        ("", False),
        (")", False),
        ("(]", False),
        ('(+ "abc', False),
    ],
)
def test_needs_more_input(code, expected):
    assert Interpreter.needs_more_input(code) is expected


def test_lexer_errors_raise_from_run(interp):
    with pytest.raises(ParserLexerError):
        interp.run("(+ 1 1.1.1)")


def test_globals_sorted(interp):
    names = interp.globals()
    assert names == sorted(names)
    assert Symbol("println") in names


def test_deep_quoted_literal_does_not_stop_later_forms(interp):
    depth = 6000
    results = interp.run("(quote " + "[" * depth + "]" * depth + ")\n(+ 1 2)")
    assert [r.ok for r in results] == [True, True]
    assert results[1].value == 3


def test_runaway_recursion_does_not_stop_later_forms(interp):
    results = interp.run("(fn f (n) (+ 1 (f n)))\n(f 1)\n(+ 1 2)")
    assert [r.ok for r in results] == [True, False, True]
    assert isinstance(results[1].error, RecursionDepthExceeded)
    assert results[2].value == 3
