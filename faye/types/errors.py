"""Error taxonomy for faye.

One base class per stage (lexer, parser, evaluator), one subclass per error
kind. Every error carries the Span it should be reported at; `str(err)` is a
single human-readable sentence and front ends draw the caret diagram from the
span.
"""

from __future__ import annotations

from typing import Any

from faye.types.span import Location, Span


class FayeError(Exception):
    """ Base class for all faye errors"""

    # names of the payload attributes, used for equality and repr
    fields: tuple[str, ...] = ()

    def __init__(self, span: Span):
        self.span = span
        super().__init__(self.describe())

    def describe(self) -> str:
        raise NotImplementedError

    @property
    def start(self) -> Location:
        return self.span.location()

    @property
    def end(self) -> Location:
        return self.span.end_location()

    def payload(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.fields)

    def __str__(self) -> str:
        return self.describe()

    def __eq__(self, other: object) -> bool:
        from faye.types.values import is_equal

        if type(other) is not type(self):
            return NotImplemented
        return self.span == other.span and all(
            is_equal(a, b) for a, b in zip(self.payload(), other.payload())
        )

    __hash__ = Exception.__hash__

    def __repr__(self) -> str:
        args = ", ".join(repr(v) for v in self.payload())
        sep = ", " if args else ""
        return f"{type(self).__name__}({args}{sep}{self.span!r})"


# -------------------------------
# Lexer
# -------------------------------
class LexerError(FayeError):
    """ Raised while turning source text into tokens"""


class InvalidNumber(LexerError):
    fields = ("word",)

    def __init__(self, word: str, span: Span):
        self.word = word
        super().__init__(span)

    def describe(self) -> str:
        return f"`{self.word}` is not a valid numeric literal"


class InvalidEscape(LexerError):
    fields = ("char",)

    def __init__(self, char: str, span: Span):
        self.char = char
        super().__init__(span)

    def describe(self) -> str:
        return f"Unknown escape sequence `\\{self.char}` in string"


class InvalidString(LexerError):
    def describe(self) -> str:
        return "Invalid string literal"


class UnclosedString(LexerError):
    def describe(self) -> str:
        return "Unclosed string literal"


class InvalidChar(LexerError):
    def describe(self) -> str:
        return "Invalid character literal"


class UnclosedChar(LexerError):
    def describe(self) -> str:
        return "Unclosed character literal"


# -------------------------------
# Parser
# -------------------------------
class ParserError(FayeError):
    """ Raised while assembling tokens into an AST"""


class ParserLexerError(ParserError):
    """A lexer error surfacing through the parser, at the lexer's span."""

    fields = ("inner",)

    def __init__(self, inner: LexerError):
        self.inner = inner
        super().__init__(inner.span)

    def describe(self) -> str:
        return self.inner.describe()


class UnexpectedCloseBracket(ParserError):
    def describe(self) -> str:
        return "Unexpected closing bracket"


class UnclosedBracket(ParserError):
    """The input ended inside an open bracket; more input may complete it."""

    def describe(self) -> str:
        return "Unclosed parenthesis"


class UnmatchedBracket(ParserError):
    def describe(self) -> str:
        return "Unmatched bracket"


class Unreachable(ParserError):
    """ Raised on a broken parser invariant; never expected in practice"""

    def describe(self) -> str:
        return "Unexpected parsing state reached"


# -------------------------------
# Evaluator
# -------------------------------
class EvalError(FayeError):
    """ Raised while evaluating a node"""


class UnknownSymbol(EvalError):
    fields = ("name",)

    def __init__(self, name, span: Span):
        self.name = name
        super().__init__(span)

    def describe(self) -> str:
        return f"Could not resolve symbol '{self.name}' in scope"


class MissingArguments(EvalError):
    def describe(self) -> str:
        return "Function is missing arguments"


class TooManyArguments(EvalError):
    def describe(self) -> str:
        return "Function has extra arguments"


class InvalidFunction(EvalError):
    fields = ("value",)

    def __init__(self, value: Any, span: Span):
        self.value = value
        super().__init__(span)

    def describe(self) -> str:
        from faye.types.values import to_display

        return f"`{to_display(self.value)}` is not a function"


class InvalidArgument(EvalError):
    fields = ("value",)

    def __init__(self, value: Any, span: Span):
        self.value = value
        super().__init__(span)

    def describe(self) -> str:
        from faye.types.values import to_display

        return f"`{to_display(self.value)}` is not a valid argument for this function"


class RecursionDepthExceeded(EvalError):
    fields = ("limit",)

    def __init__(self, limit: int, span: Span):
        self.limit = limit
        super().__init__(span)

    def describe(self) -> str:
        return f"Maximum recursion depth of {self.limit} exceeded"
