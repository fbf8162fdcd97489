import pytest

from faye.diagnostics import format_error, use_color
from faye.interpreter import Interpreter
from faye.reader.parser import Parser
from faye.types.errors import UnmatchedBracket
from faye.types.span import Source, Span


def error_of(code, name=None):
    results = Interpreter().run(code, name)
    return next(r.error for r in results if r.error is not None)


def test_unknown_symbol_diagram():
    err = error_of("(+ 1 x)")
    assert format_error(err, color=False) == (
        "   --> <input>:1:6\n"
        "    |\n"
        " 1  | (+ 1 x)\n"
        "    |      ^ Could not resolve symbol 'x' in scope"
    )


def test_caret_covers_span():
    err = error_of("(+ 1 foo)", "demo.fy")
    text = format_error(err, color=False)
    assert text.splitlines()[0] == "   --> demo.fy:1:6"
    assert text.splitlines()[-1] == "    |      ^^^ Could not resolve symbol 'foo' in scope"


def test_second_line():
    err = error_of("(const a 1)\n(+ a b)")
    lines = format_error(err, color=False).splitlines()
    assert lines[0] == "   --> <input>:2:6"
    assert lines[2] == " 2  | (+ a b)"


def test_multiline_span_is_cut_at_end_of_line():
    source = Source("(a\n b c)")
    err = UnmatchedBracket(Span(0, 8, source))
    assert format_error(err, color=False).splitlines()[-1] == "    | ^^ Unmatched bracket"


def test_empty_span_still_has_a_caret():
    err = UnmatchedBracket(Span.empty(Source("")))
    assert format_error(err, color=False).splitlines()[-1] == "    | ^ Unmatched bracket"


def test_parser_error_diagram():
    with pytest.raises(UnmatchedBracket) as info:
        Parser("(1 2]").parse()
    lines = format_error(info.value, color=False).splitlines()
    assert lines[-1] == "    |     ^ Unmatched bracket"


def test_color():
    err = error_of("(+ 1 x)")
    assert "\033[" in format_error(err, color=True)
    assert "\033[" not in format_error(err, color=False)


@pytest.mark.parametrize("mode,expected", [("always", True), ("never", False), ("ALWAYS", True)])
def test_color_mode_from_environment(monkeypatch, mode, expected):
    monkeypatch.setenv("FAYE_COLOR", mode)
    assert use_color() is expected
    assert use_color(not expected) is (not expected)
