import math

import pytest
from hypothesis import given, strategies as st

from faye.reader.lexer import Lexer, parse_number
from faye.types.errors import (
    InvalidChar,
    InvalidEscape,
    InvalidNumber,
    InvalidString,
    UnclosedChar,
    UnclosedString,
)
from faye.types.symbol import Keyword, Symbol
from faye.types.token import TokenKind
from faye.types.values import Char


def lex(source):
    return [(t.kind, t.value, (t.span.start, t.span.end)) for t in Lexer(source)]


def test_lex_nested_call():
    assert lex("(+ 14 25.5 333 (* 2 5))") == [
        (TokenKind.OPEN_PAREN, None, (0, 1)),
        (TokenKind.SYMBOL, Symbol("+"), (1, 2)),
        (TokenKind.NUMBER, 14.0, (3, 5)),
        (TokenKind.NUMBER, 25.5, (6, 10)),
        (TokenKind.NUMBER, 333.0, (11, 14)),
        (TokenKind.OPEN_PAREN, None, (15, 16)),
        (TokenKind.SYMBOL, Symbol("*"), (16, 17)),
        (TokenKind.NUMBER, 2.0, (18, 19)),
        (TokenKind.NUMBER, 5.0, (20, 21)),
        (TokenKind.CLOSE_PAREN, None, (21, 22)),
        (TokenKind.CLOSE_PAREN, None, (22, 23)),
    ]


def test_minus_is_a_symbol_unless_followed_by_a_digit():
    assert lex("(- 1 -2 3)") == [
        (TokenKind.OPEN_PAREN, None, (0, 1)),
        (TokenKind.SYMBOL, Symbol("-"), (1, 2)),
        (TokenKind.NUMBER, 1.0, (3, 4)),
        (TokenKind.NUMBER, -2.0, (5, 7)),
        (TokenKind.NUMBER, 3.0, (8, 9)),
        (TokenKind.CLOSE_PAREN, None, (9, 10)),
    ]


@pytest.mark.parametrize(
    "source,kind,value",
    [
        ("true", TokenKind.BOOL, True),
        ("false", TokenKind.BOOL, False),
        ("nil", TokenKind.NIL, None),
        ("foo-bar", TokenKind.SYMBOL, Symbol("foo-bar")),
        ("λ", TokenKind.SYMBOL, Symbol("λ")),
        (":key", TokenKind.KEYWORD, Keyword("key")),
        ('"hi there"', TokenKind.STRING, "hi there"),
        ('"a\\"b"', TokenKind.STRING, 'a"b'),
        ('"a\\\\b"', TokenKind.STRING, "a\\b"),
        ('"line\\n"', TokenKind.STRING, "line\n"),
        ('"\\e[1m"', TokenKind.STRING, "\x1b[1m"),
        ("'a'", TokenKind.CHAR, Char("a")),
        ("'\\n'", TokenKind.CHAR, Char("\n")),
        ("'\\\\'", TokenKind.CHAR, Char("\\")),
        ("; note", TokenKind.COMMENT, " note"),
        ("[", TokenKind.OPEN_BRACKET, None),
        ("]", TokenKind.CLOSE_BRACKET, None),
    ],
)
def test_single_token(source, kind, value):
    [(got_kind, got_value, span)] = lex(source)
    assert got_kind is kind
    assert got_value == value
    assert span == (0, len(source))


def test_keyword_and_symbol_differ():
    assert Keyword("a") != Symbol("a")


def test_comment_stops_at_newline():
    assert lex("; one\n2") == [
        (TokenKind.COMMENT, " one", (0, 5)),
        (TokenKind.NUMBER, 2.0, (6, 7)),
    ]


def test_commas_are_whitespace():
    assert [t[1] for t in lex("1,2 ,3")] == [1.0, 2.0, 3.0]


def test_separators_end_words():
    assert lex("a(b)") == [
        (TokenKind.SYMBOL, Symbol("a"), (0, 1)),
        (TokenKind.OPEN_PAREN, None, (1, 2)),
        (TokenKind.SYMBOL, Symbol("b"), (2, 3)),
        (TokenKind.CLOSE_PAREN, None, (3, 4)),
    ]


def test_read_returns_none_when_exhausted():
    lexer = Lexer("  ")
    assert lexer.read() is None
    assert lexer.read() is None


def test_invalid_number_on_second_line():
    lexer = Lexer("(+ 14 25.5 333\n(* 2 5 5.x))")
    with pytest.raises(InvalidNumber) as info:
        list(lexer)
    err = info.value
    assert err.word == "5.x"
    assert (err.start, err.end) == ((1, 7), (1, 10))
    assert str(err) == "`5.x` is not a valid numeric literal"


def test_invalid_number_after_valid_ones():
    lexer = Lexer("2 55 3.144 0.0001 1.1.1")
    assert [lexer.read().value for _ in range(4)] == [2.0, 55.0, 3.144, 0.0001]
    with pytest.raises(InvalidNumber) as info:
        lexer.read()
    assert (info.value.span.start, info.value.span.end) == (18, 23)


@pytest.mark.parametrize(
    "source,error,span",
    [
        ('"hiii', UnclosedString, (0, 1)),
        ('"hiii\\', UnclosedString, (0, 1)),
        ('"hiii"222', InvalidString, (0, 9)),
        ('"a\\qb"', InvalidEscape, (2, 4)),
        ("'a", UnclosedChar, (0, 2)),
        ("'", UnclosedChar, (0, 1)),
        ("''", InvalidChar, (0, 2)),
        ("'ab'", InvalidChar, (0, 4)),
        ("'\\q'", InvalidEscape, (1, 3)),
        ("1_000", InvalidNumber, (0, 5)),
        ("0x10", InvalidNumber, (0, 4)),
    ],
)
def test_lexer_errors(source, error, span):
    with pytest.raises(error) as info:
        list(Lexer(source))
    assert (info.value.span.start, info.value.span.end) == span


def test_invalid_escape_reports_the_char():
    with pytest.raises(InvalidEscape) as info:
        Lexer('"\\t"').read()
    assert info.value.char == "t"
    assert str(info.value) == "Unknown escape sequence `\\t` in string"


@pytest.mark.parametrize(
    "word,expected",
    [
        ("1", 1.0),
        ("1.", 1.0),
        (".5", 0.5),
        ("-2.5e-3", -0.0025),
        ("+3", 3.0),
        ("1E3", 1000.0),
        ("inf", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_parse_number(word, expected):
    assert parse_number(word) == expected


def test_parse_number_nan():
    assert math.isnan(parse_number("NaN"))


@pytest.mark.parametrize("word", ["", " 1", "1 ", "1_0", "0x1f", "1.1.1", "e5", "--1", "1e"])
def test_parse_number_rejects(word):
    with pytest.raises(ValueError):
        parse_number(word)


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.floats(allow_nan=False, allow_infinity=False))
def test_numeric_literals_roundtrip(n):
    source = repr(n)
    [token] = Lexer(source)
    assert token.kind is TokenKind.NUMBER
    assert token.value == float(source)
    assert (token.span.start, token.span.end) == (0, len(source))


@given(st.integers(min_value=-10**12, max_value=10**12))
def test_integer_literals(n):
    source = str(n)
    [token] = Lexer(source)
    assert token.value == float(n)
    assert token.span.text == source
